"""
Async Use Case: Forward CEP
Gateway: valida o CEP e repassa (relay) a resposta do serviço resolver
"""
from application.dtos.requests import CepRequest
from application.dtos.responses import RelayedResponse
from application.ports.input.forward_cep_port import IForwardCepUseCase
from application.ports.output.resolver_client_port import IResolverClient
from shared.config.logger_config import get_logger
from shared.tracing import Tracing
from shared.utils.validators import CepValidator

logger = get_logger(child=True)


class ForwardCepUseCase(IForwardCepUseCase):
    """Async use case: validate and forward a CEP to the resolver service"""
    
    def __init__(self, resolver_client: IResolverClient, tracing: Tracing):
        self.resolver_client = resolver_client
        self.tracing = tracing
    
    async def execute(self, request: CepRequest) -> RelayedResponse:
        """
        Validate the CEP, then relay the resolver's status and body verbatim
        
        Raises:
            InvalidCepException: invalid syntax (no outbound call is made)
            UpstreamTransportException: resolver unreachable
        """
        cep = CepValidator.validate(request.cep)
        
        with self.tracing.span(
            "forward_to_resolver",
            cep=cep,
            redirect_url=self.resolver_client.forward_url
        ) as span:
            headers = self.tracing.inject_headers({})
            relayed = await self.resolver_client.forward(cep, headers)
            span.set_tag("resolver.status_code", relayed.status_code)
        
        logger.info(
            "Resolver response relayed",
            cep=cep,
            status_code=relayed.status_code
        )
        
        return relayed

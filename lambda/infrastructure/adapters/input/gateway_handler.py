"""
Input Adapter: Gateway HTTP (front)
Presentation Layer: valida o CEP e repassa a resposta do resolver sem alterações

Contrato público: relay síncrono. O status e o body devolvidos pelo resolver
chegam ao cliente exatamente como foram recebidos (sem redirect).

Rotas:
- POST /cep  (e /cep/)   Body: {"cep": "01001000"}
- GET  /health
"""
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig, Response

from application.dtos.requests import CepRequest
from application.ports.input.forward_cep_port import IForwardCepUseCase
from domain.constants import Services
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from infrastructure.adapters.input.lambda_runtime import run_async
from shared.tracing import Tracing


def create_gateway_app(use_case: IForwardCepUseCase, tracing: Tracing) -> APIGatewayRestResolver:
    """
    Monta o resolver do Powertools para o serviço gateway
    
    Args:
        use_case: Encaminhamento validado para o resolver
        tracing: Handle de tracing do processo
    """
    app = APIGatewayRestResolver(cors=CORSConfig(allow_origin="*"))
    ExceptionHandlerService().register(app)

    def post_cep_route():
        """POST /cep  Body: {"cep": "01001000"}"""
        # Body malformado -> 400 antes de qualquer chamada externa
        request = CepRequest.from_json_body(app.current_event.body)

        async def execute_async():
            with tracing.span("handle_cep", resource="gateway.handle_cep", cep=request.cep):
                return await use_case.execute(request)

        relayed = run_async(execute_async())

        return Response(
            status_code=relayed.status_code,
            content_type=relayed.content_type,
            body=relayed.body
        )

    app.post("/cep")(post_cep_route)
    app.post("/cep/")(post_cep_route)

    @app.get("/health")
    def health_route():
        return {'status': 'healthy', 'service': Services.GATEWAY}

    return app

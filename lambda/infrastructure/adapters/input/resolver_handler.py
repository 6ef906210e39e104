"""
Input Adapter: Resolver HTTP (backend)
Presentation Layer: rotas do serviço resolver, delega para ResolveCepTemperatureUseCase

Rotas:
- GET  /cep/{cep}
- POST /localizacao   Body: {"cep": "01001000"}
- GET  /health
"""
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig

from application.dtos.requests import CepRequest
from application.ports.input.resolve_cep_temperature_port import IResolveCepTemperatureUseCase
from domain.constants import Services
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from infrastructure.adapters.input.lambda_runtime import run_async
from shared.tracing import Tracing


def create_resolver_app(
    use_case: IResolveCepTemperatureUseCase,
    tracing: Tracing
) -> APIGatewayRestResolver:
    """
    Monta o resolver do Powertools para o serviço backend
    
    Args:
        use_case: Pipeline CEP -> cidade -> temperatura
        tracing: Handle de tracing do processo
    """
    app = APIGatewayRestResolver(cors=CORSConfig(allow_origin="*"))
    ExceptionHandlerService().register(app)

    def resolve(cep: str) -> dict:
        headers = app.current_event.headers

        async def execute_async():
            # Continua o trace iniciado pelo gateway (se houver)
            with tracing.continue_trace(headers):
                with tracing.span("handle_location", resource="resolver.handle_location", cep=cep) as span:
                    output = await use_case.execute(CepRequest(cep=cep))
                    span.set_tag("city", output.city)
            return output

        output = run_async(execute_async())
        return output.to_api_response()

    @app.get("/cep/<cep>")
    def get_cep_route(cep: str):
        """GET /cep/{cep}"""
        return resolve(cep)

    @app.post("/localizacao")
    def post_location_route():
        """POST /localizacao  Body: {"cep": "01001000"}"""
        request = CepRequest.from_json_body(app.current_event.body)
        return resolve(request.cep)

    @app.get("/health")
    def health_route():
        return {'status': 'healthy', 'service': Services.RESOLVER}

    return app

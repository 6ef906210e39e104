"""
Lambda Function Handlers - Clean Architecture
Composition root: cria o handle de tracing, os adapters e os use cases
e expõe um entry point por serviço

- gateway_handler:  serviço front (POST /cep)
- resolver_handler: serviço backend (GET /cep/{cep}, POST /localizacao)
"""
import atexit

from application.use_cases.forward_cep_use_case import ForwardCepUseCase
from application.use_cases.resolve_cep_temperature_use_case import ResolveCepTemperatureUseCase
from infrastructure.adapters.input.gateway_handler import create_gateway_app
from infrastructure.adapters.input.lambda_runtime import build_lambda_handler
from infrastructure.adapters.input.resolver_handler import create_resolver_app
from infrastructure.adapters.output.providers.provider_factory import ProviderFactory
from shared.config import settings
from shared.config.logger_config import logger
from shared.tracing import Tracing

tracing = Tracing.start(settings.SERVICE_NAME, enabled=settings.TRACING_ENABLED)
atexit.register(tracing.shutdown)

_factory = ProviderFactory()

resolver_app = create_resolver_app(
    ResolveCepTemperatureUseCase(
        postal_code_provider=_factory.get_postal_code_provider(),
        weather_provider=_factory.get_weather_provider(),
        tracing=tracing
    ),
    tracing
)

gateway_app = create_gateway_app(
    ForwardCepUseCase(
        resolver_client=_factory.get_resolver_client(),
        tracing=tracing
    ),
    tracing
)

resolver_handler = build_lambda_handler(resolver_app, logger)
gateway_handler = build_lambda_handler(gateway_app, logger)

__all__ = ['resolver_handler', 'gateway_handler', 'tracing']

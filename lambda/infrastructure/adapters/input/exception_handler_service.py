"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado
Tabela única de tradução exceção -> status HTTP (400/422/404/500)
"""
import json
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, Response

from domain.constants import Messages
from domain.exceptions import (
    DomainException,
    InvalidInputException,
    InvalidCepException,
    CepNotFoundException,
    WeatherUnavailableException,
    UpstreamTransportException,
)
from shared.config.logger_config import logger as app_logger


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções em respostas HTTP apropriadas
    
    As mensagens devolvidas ao cliente são fixas; detalhes de erros
    upstream vão apenas para o log.
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado para manter contexto de correlação
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def _domain_response(status_code: int, ex: DomainException, error: str, include_details: bool = True) -> Response:
        body = {
            "type": type(ex).__name__,
            "error": error,
            "message": error
        }
        if include_details and ex.details:
            body["details"] = ex.details
        return Response(
            status_code=status_code,
            content_type="application/json",
            body=json.dumps(body)
        )

    @staticmethod
    def handle_invalid_input(ex: InvalidInputException) -> Response:
        """Handle 400 - Malformed request body"""
        ExceptionHandlerService.logger.warning("Invalid request body", error=str(ex), details=ex.details)
        return ExceptionHandlerService._domain_response(400, ex, Messages.INVALID_INPUT)

    @staticmethod
    def handle_invalid_cep(ex: InvalidCepException) -> Response:
        """Handle 422 - CEP syntax invalid"""
        ExceptionHandlerService.logger.warning("Invalid CEP", error=str(ex), details=ex.details)
        return ExceptionHandlerService._domain_response(422, ex, Messages.INVALID_CEP)

    @staticmethod
    def handle_cep_not_found(ex: CepNotFoundException) -> Response:
        """Handle 404 - CEP not found"""
        ExceptionHandlerService.logger.warning("CEP not found", error=str(ex), details=ex.details)
        return ExceptionHandlerService._domain_response(404, ex, Messages.CEP_NOT_FOUND)

    @staticmethod
    def handle_weather_unavailable(ex: WeatherUnavailableException) -> Response:
        """Handle 404 - Weather data not available"""
        ExceptionHandlerService.logger.warning("Weather data not found", error=str(ex), details=ex.details)
        return ExceptionHandlerService._domain_response(404, ex, Messages.WEATHER_UNAVAILABLE)

    @staticmethod
    def handle_upstream_transport(ex: UpstreamTransportException) -> Response:
        """Handle 500 - Upstream unreachable (not retried)"""
        ExceptionHandlerService.logger.error(
            "Upstream transport error",
            error=str(ex),
            details=ex.details,
            exc_info=True
        )
        return ExceptionHandlerService._domain_response(
            500, ex, Messages.UPSTREAM_UNAVAILABLE, include_details=False
        )

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> Response:
        """Handle 500 - Unexpected errors"""
        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return Response(
            status_code=500,
            content_type="application/json",
            body=json.dumps({
                "error": "Internal server error",
                "message": "An unexpected error occurred"
            })
        )

    def register(self, app: APIGatewayRestResolver) -> APIGatewayRestResolver:
        """Registra todos os handlers em um resolver do Powertools"""
        app.exception_handler(InvalidInputException)(self.handle_invalid_input)
        app.exception_handler(InvalidCepException)(self.handle_invalid_cep)
        app.exception_handler(CepNotFoundException)(self.handle_cep_not_found)
        app.exception_handler(WeatherUnavailableException)(self.handle_weather_unavailable)
        app.exception_handler(UpstreamTransportException)(self.handle_upstream_transport)
        app.exception_handler(Exception)(self.handle_unexpected_error)
        return app

"""
Lambda Runtime Helpers
Execução de coroutines por requisição e entry point Lambda comum aos dois serviços
"""
import asyncio
from typing import Any, Callable, Coroutine, Dict, Optional

from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import APIGatewayRestResolver
from aws_lambda_powertools.utilities.typing import LambdaContext

from shared.config.logger_config import logger as app_logger


def run_async(coro: Coroutine) -> Any:
    """
    Executa a coroutine em um event loop próprio da requisição
    
    Nenhum loop ou sessão HTTP é compartilhado entre requisições, o que
    permite servir requisições concorrentes em threads distintas.
    """
    return asyncio.run(coro)


def build_lambda_handler(
    app: APIGatewayRestResolver,
    logger: Optional[Logger] = None
) -> Callable[[Dict[str, Any], LambdaContext], Dict[str, Any]]:
    """
    Cria o entry point AWS Lambda para um resolver do Powertools
    
    Args:
        app: Resolver com rotas e exception handlers registrados
        logger: Logger principal do serviço (default: logger da aplicação)
    
    Returns:
        Função lambda_handler(event, context)
    """
    logger = logger or app_logger

    @logger.inject_lambda_context()
    def lambda_handler(event, context: LambdaContext):
        headers = event.get('headers', {}) or {}
        request_context = event.get('requestContext', {}) or {}
        identity = request_context.get('identity', {}) or {}

        logger.info(
            "Requisição Lambda recebida",
            rota=event.get('path', 'N/A'),
            metodo=event.get('httpMethod', 'N/A'),
            request_id=getattr(context, 'aws_request_id', 'N/A'),
            source_ip=identity.get('sourceIp', 'N/A'),
            user_agent=headers.get('User-Agent', 'N/A')
        )

        response = app.resolve(event, context)

        status_code = response.get('statusCode', 'N/A')
        logger.info(
            "Requisição Lambda concluída",
            status_code=status_code,
            sucesso=status_code == 200
        )

        return response

    return lambda_handler

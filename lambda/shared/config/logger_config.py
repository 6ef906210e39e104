"""
Configuração centralizada de logging para a aplicação
Logger AWS Lambda Powertools nomeado pelo serviço do processo (cep-gateway, cep-resolver)
"""
from typing import Optional

from aws_lambda_powertools import Logger

from shared.config import settings


def get_logger(service_name: Optional[str] = None, child: bool = False) -> Logger:
    """
    Retorna uma instância configurada do Logger

    Args:
        service_name: Nome do serviço (default: settings.SERVICE_NAME, lido de DD_SERVICE)
        child: Se True, cria um child logger que herda os handlers do logger do serviço

    Returns:
        Logger configurado
    """
    return Logger(service=service_name or settings.SERVICE_NAME, child=child)


# Logger principal da aplicação
logger = get_logger()

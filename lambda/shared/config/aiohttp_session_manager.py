"""
Aiohttp Session Manager - Fábrica de sessões HTTP por chamada
Cada chamada externa abre sua própria sessão (nenhum estado compartilhado entre requisições)
"""
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import aiohttp

from shared.config.logger_config import get_logger
from shared.config.settings import HTTP_TIMEOUT_SECONDS

logger = get_logger(child=True)


class AiohttpSessionManager:
    """
    Gerenciador de sessões aiohttp
    
    - Timeout total fixo por chamada (expiração vira erro de transporte)
    - Verificação TLS padrão do aiohttp (certificados validados)
    - Sessão aberta e fechada por chamada: seguro entre threads e event loops
    
    Uso:
        manager = AiohttpSessionManager(total_timeout=10)
        async with manager.session() as session:
            async with session.get(url) as response:
                data = await response.json()
    """
    
    def __init__(self, total_timeout: float = HTTP_TIMEOUT_SECONDS):
        """
        Args:
            total_timeout: Timeout total em segundos
        """
        self.total_timeout = total_timeout
    
    @asynccontextmanager
    async def session(self) -> AsyncIterator[aiohttp.ClientSession]:
        """Abre uma sessão aiohttp e garante o fechamento ao final"""
        timeout = aiohttp.ClientTimeout(total=self.total_timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            logger.debug("Aiohttp session opened", total_timeout=self.total_timeout)
            yield session


async def read_json(response: aiohttp.ClientResponse) -> Any:
    """Lê o JSON da resposta ignorando o Content-Type; payload ilegível vira None"""
    try:
        return await response.json(content_type=None)
    except ValueError:
        return None

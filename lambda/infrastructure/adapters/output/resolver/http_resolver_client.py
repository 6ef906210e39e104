"""
HTTP Resolver Client
Usado pelo gateway para encaminhar o CEP ao serviço resolver
"""
import asyncio
from typing import Dict

import aiohttp

from application.dtos.responses import RelayedResponse
from application.ports.output.resolver_client_port import IResolverClient
from domain.constants import API, Messages
from domain.exceptions import UpstreamTransportException
from shared.config.aiohttp_session_manager import AiohttpSessionManager
from shared.config.logger_config import get_logger
from shared.config.settings import RESOLVER_BASE_URL

logger = get_logger(child=True)


class HttpResolverClient(IResolverClient):
    """POST {"cep": ...} em {RESOLVER_BASE_URL}/localizacao"""

    def __init__(
        self,
        session_manager: AiohttpSessionManager,
        base_url: str = RESOLVER_BASE_URL
    ):
        self.base_url = base_url.rstrip("/")
        self.session_manager = session_manager

    @property
    def forward_url(self) -> str:
        return f"{self.base_url}{API.RESOLVER_FORWARD_PATH}"

    async def forward(self, cep: str, headers: Dict[str, str]) -> RelayedResponse:
        try:
            async with self.session_manager.session() as session:
                async with session.post(self.forward_url, json={"cep": cep}, headers=headers) as response:
                    body = await response.text()
                    return RelayedResponse(
                        status_code=response.status,
                        body=body,
                        content_type=response.headers.get("Content-Type", "application/json")
                    )

        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            logger.error(
                "Resolver request failed",
                cep=cep,
                url=self.forward_url,
                error=str(ex),
                error_type=type(ex).__name__
            )
            raise UpstreamTransportException(
                Messages.UPSTREAM_UNAVAILABLE,
                details={"provider": "resolver"}
            ) from ex

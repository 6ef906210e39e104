"""
ViaCEP Postal Code Provider
Resolve a localidade (cidade) de um CEP
"""
import asyncio
from typing import Any, Optional

import aiohttp

from application.ports.output.postal_code_provider_port import IPostalCodeProvider
from domain.constants import Messages
from domain.entities.location import Location
from domain.exceptions import CepNotFoundException, UpstreamTransportException
from shared.config.aiohttp_session_manager import AiohttpSessionManager, read_json
from shared.config.logger_config import get_logger
from shared.config.settings import VIACEP_BASE_URL

logger = get_logger(child=True)


class ViaCepProvider(IPostalCodeProvider):
    """Provider de CEP baseado na API pública do ViaCEP"""

    def __init__(
        self,
        session_manager: AiohttpSessionManager,
        base_url: str = VIACEP_BASE_URL
    ):
        self.base_url = base_url.rstrip("/")
        self.session_manager = session_manager

    @property
    def provider_name(self) -> str:
        return "ViaCEP"

    def build_url(self, cep: str) -> str:
        return f"{self.base_url}/{cep}/json/"

    async def get_location(self, cep: str) -> Location:
        """
        Busca a localidade do CEP (uma única chamada, sem retry)
        """
        url = self.build_url(cep)

        try:
            async with self.session_manager.session() as session:
                async with session.get(url) as response:
                    status = response.status
                    payload = await read_json(response) if 200 <= status < 300 else None

        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            logger.error(
                "ViaCEP request failed",
                cep=cep,
                url=url,
                error=str(ex),
                error_type=type(ex).__name__
            )
            raise UpstreamTransportException(
                Messages.UPSTREAM_UNAVAILABLE,
                details={"provider": self.provider_name}
            ) from ex

        if not 200 <= status < 300:
            logger.warning("ViaCEP returned non-2xx status", cep=cep, status=status)
            raise CepNotFoundException(
                Messages.CEP_NOT_FOUND,
                details={"cep": cep}
            )

        city = _extract_city(payload)
        if city is None:
            logger.warning("ViaCEP has no locality for CEP", cep=cep)
            raise CepNotFoundException(
                Messages.CEP_NOT_FOUND,
                details={"cep": cep}
            )

        logger.debug("ViaCEP locality resolved", cep=cep, city=city)
        return Location(city=city)


def _extract_city(payload: Any) -> Optional[str]:
    """
    Extrai "localidade" do payload do ViaCEP
    
    Retorna None quando o payload não é um objeto, traz o marcador
    "erro" (true ou "true") ou a localidade está ausente/vazia.
    """
    if not isinstance(payload, dict):
        return None

    erro = payload.get("erro")
    if erro is True or (isinstance(erro, str) and erro.lower() == "true"):
        return None

    city = payload.get("localidade")
    if not isinstance(city, str) or not city.strip():
        return None

    return city.strip()

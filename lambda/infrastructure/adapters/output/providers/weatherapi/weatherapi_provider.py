"""
WeatherAPI.com Provider
Busca a temperatura atual (Celsius) de uma cidade
"""
import asyncio
from typing import Any, Optional

import aiohttp

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import API, Messages
from domain.entities.weather_reading import WeatherReading
from domain.exceptions import UpstreamTransportException, WeatherUnavailableException
from shared.config.aiohttp_session_manager import AiohttpSessionManager, read_json
from shared.config.logger_config import get_logger
from shared.config.settings import WEATHERAPI_BASE_URL, WEATHER_API_KEY

logger = get_logger(child=True)


class WeatherApiProvider(IWeatherProvider):
    """Provider de clima atual baseado na WeatherAPI.com"""

    def __init__(
        self,
        session_manager: AiohttpSessionManager,
        api_key: str = WEATHER_API_KEY,
        base_url: str = WEATHERAPI_BASE_URL
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session_manager = session_manager

    @property
    def provider_name(self) -> str:
        return "WeatherAPI"

    @property
    def current_url(self) -> str:
        return f"{self.base_url}{API.WEATHERAPI_CURRENT_PATH}"

    async def get_current_weather(self, city: str) -> WeatherReading:
        """
        Busca a temperatura atual da cidade (uma única chamada, sem retry)
        
        A cidade é enviada em query string (aiohttp faz o URL-encoding).
        """
        params = {"key": self.api_key, "q": city}

        try:
            async with self.session_manager.session() as session:
                async with session.get(self.current_url, params=params) as response:
                    status = response.status
                    payload = await read_json(response) if 200 <= status < 300 else None

        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            logger.error(
                "WeatherAPI request failed",
                city=city,
                url=self.current_url,
                error=str(ex),
                error_type=type(ex).__name__
            )
            raise UpstreamTransportException(
                Messages.UPSTREAM_UNAVAILABLE,
                details={"provider": self.provider_name}
            ) from ex

        if not 200 <= status < 300:
            logger.warning("WeatherAPI returned non-2xx status", city=city, status=status)
            raise WeatherUnavailableException(
                Messages.WEATHER_UNAVAILABLE,
                details={"city": city}
            )

        temp_c = _extract_temp_c(payload)
        if temp_c is None:
            logger.warning("WeatherAPI payload without current.temp_c", city=city)
            raise WeatherUnavailableException(
                Messages.WEATHER_UNAVAILABLE,
                details={"city": city}
            )

        return WeatherReading(temp_c=temp_c)


def _extract_temp_c(payload: Any) -> Optional[float]:
    """Extrai current.temp_c; ausente ou não numérico vira None (nunca 0)"""
    if not isinstance(payload, dict):
        return None

    current = payload.get("current")
    if not isinstance(current, dict):
        return None

    temp_c = current.get("temp_c")
    if isinstance(temp_c, bool) or not isinstance(temp_c, (int, float)):
        return None

    return float(temp_c)

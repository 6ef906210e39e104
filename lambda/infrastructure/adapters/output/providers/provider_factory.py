"""
Provider Factory - criação centralizada dos adapters de saída
"""
from typing import Optional

from application.ports.output.postal_code_provider_port import IPostalCodeProvider
from application.ports.output.resolver_client_port import IResolverClient
from application.ports.output.weather_provider_port import IWeatherProvider
from infrastructure.adapters.output.providers.viacep import ViaCepProvider
from infrastructure.adapters.output.providers.weatherapi import WeatherApiProvider
from infrastructure.adapters.output.resolver import HttpResolverClient
from shared.config import settings
from shared.config.aiohttp_session_manager import AiohttpSessionManager


class ProviderFactory:
    """
    Factory simples para os adapters HTTP.
    Todos compartilham a mesma configuração de timeout; as sessões são abertas por chamada.
    """

    def __init__(self, session_manager: Optional[AiohttpSessionManager] = None):
        self.session_manager = session_manager or AiohttpSessionManager(
            total_timeout=settings.HTTP_TIMEOUT_SECONDS
        )

    def get_postal_code_provider(self) -> IPostalCodeProvider:
        return ViaCepProvider(
            session_manager=self.session_manager,
            base_url=settings.VIACEP_BASE_URL
        )

    def get_weather_provider(self) -> IWeatherProvider:
        return WeatherApiProvider(
            session_manager=self.session_manager,
            api_key=settings.WEATHER_API_KEY,
            base_url=settings.WEATHERAPI_BASE_URL
        )

    def get_resolver_client(self) -> IResolverClient:
        return HttpResolverClient(
            session_manager=self.session_manager,
            base_url=settings.RESOLVER_BASE_URL
        )

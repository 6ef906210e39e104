"""
Output Port: Weather Provider
Contrato para provedores de temperatura atual (WeatherAPI.com)
"""
from abc import ABC, abstractmethod

from domain.entities.weather_reading import WeatherReading


class IWeatherProvider(ABC):
    """Interface para provedores de clima"""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider"""
        raise NotImplementedError

    @property
    @abstractmethod
    def current_url(self) -> str:
        """URL do clima atual (sem a chave de API)"""
        raise NotImplementedError

    @abstractmethod
    async def get_current_weather(self, city: str) -> WeatherReading:
        """
        Busca a temperatura atual de uma cidade
        
        Args:
            city: Nome da cidade
        
        Returns:
            WeatherReading em Celsius
        
        Raises:
            WeatherUnavailableException: sem dado de temperatura para a cidade
            UpstreamTransportException: falha de rede/timeout
        """
        raise NotImplementedError

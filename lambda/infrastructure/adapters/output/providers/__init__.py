"""Infrastructure Providers - Implementações dos provedores externos"""

from infrastructure.adapters.output.providers.viacep import ViaCepProvider
from infrastructure.adapters.output.providers.weatherapi import WeatherApiProvider

__all__ = ['ViaCepProvider', 'WeatherApiProvider']

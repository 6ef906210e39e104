"""WeatherAPI.com Provider"""
from infrastructure.adapters.output.providers.weatherapi.weatherapi_provider import WeatherApiProvider

__all__ = ['WeatherApiProvider']

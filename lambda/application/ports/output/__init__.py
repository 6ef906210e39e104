"""Output Ports"""
from application.ports.output.postal_code_provider_port import IPostalCodeProvider
from application.ports.output.weather_provider_port import IWeatherProvider
from application.ports.output.resolver_client_port import IResolverClient

__all__ = ['IPostalCodeProvider', 'IWeatherProvider', 'IResolverClient']

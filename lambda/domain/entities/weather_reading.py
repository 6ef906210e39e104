"""
WeatherReading Entity - Leitura de temperatura atual
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherReading:
    """Temperatura atual em Celsius retornada pelo provedor de clima"""
    temp_c: float

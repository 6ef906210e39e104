"""
Value Object para temperatura
Encapsula conversões Celsius -> Fahrenheit/Kelvin
"""
from dataclasses import dataclass


KELVIN_OFFSET = 273.15
KELVIN_PRECISION = 2


@dataclass(frozen=True)
class Temperature:
    """
    Value Object para temperatura

    Características:
    - Imutável (frozen=True)
    - Conversões determinísticas a partir de Celsius
    - Kelvin arredondado para 2 casas (contrato da API)
    """
    celsius: float

    @property
    def fahrenheit(self) -> float:
        """
        Converte para Fahrenheit

        Returns:
            Temperatura em °F (C * 1.8 + 32)
        """
        return self.celsius * 1.8 + 32

    @property
    def kelvin(self) -> float:
        """
        Converte para Kelvin

        Returns:
            Temperatura em K, arredondada para 2 casas decimais
        """
        return round(self.celsius + KELVIN_OFFSET, KELVIN_PRECISION)

    def to_api_response(self) -> dict:
        """Converte para formato de resposta da API"""
        return {
            'temp_C': self.celsius,
            'temp_F': self.fahrenheit,
            'temp_K': self.kelvin
        }

    def __float__(self) -> float:
        """Permite conversão para float (retorna Celsius)"""
        return self.celsius


class TemperatureConverter:
    """Conversor Celsius -> Temperature (função total, sem falhas)"""

    @staticmethod
    def convert(temp_c: float) -> Temperature:
        return Temperature(celsius=float(temp_c))

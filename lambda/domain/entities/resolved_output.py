"""
ResolvedOutput Entity - Payload final devolvido ao cliente
"""
from dataclasses import dataclass

from domain.value_objects.temperature import Temperature


@dataclass(frozen=True)
class ResolvedOutput:
    """Cidade + temperatura nas três escalas"""
    city: str
    weather: Temperature

    def to_api_response(self) -> dict:
        """
        Converte para formato de resposta da API

        Formato plano: {"city", "temp_C", "temp_F", "temp_K"}
        """
        response = {'city': self.city}
        response.update(self.weather.to_api_response())
        return response

"""
Location Entity - Localidade resolvida a partir de um CEP
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Localidade (cidade) retornada pelo provedor de CEP"""
    city: str

    def to_dict(self) -> dict:
        return {'city': self.city}

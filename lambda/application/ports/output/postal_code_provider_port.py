"""
Output Port: Postal Code Provider
Contrato para provedores de consulta de CEP (ViaCEP)
"""
from abc import ABC, abstractmethod

from domain.entities.location import Location


class IPostalCodeProvider(ABC):
    """Interface para provedores de CEP"""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex.: ViaCEP)"""
        raise NotImplementedError

    @abstractmethod
    def build_url(self, cep: str) -> str:
        """URL consultada para o CEP"""
        raise NotImplementedError

    @abstractmethod
    async def get_location(self, cep: str) -> Location:
        """
        Busca a localidade de um CEP
        
        Args:
            cep: CEP normalizado (8 dígitos)
        
        Returns:
            Location com a cidade
        
        Raises:
            CepNotFoundException: CEP inexistente ou sem localidade
            UpstreamTransportException: falha de rede/timeout
        """
        raise NotImplementedError

"""
Output Port: Resolver Client
Contrato usado pelo gateway para encaminhar o CEP ao serviço resolver
"""
from abc import ABC, abstractmethod
from typing import Dict

from application.dtos.responses import RelayedResponse


class IResolverClient(ABC):
    """Interface para o cliente do serviço resolver"""

    @property
    @abstractmethod
    def forward_url(self) -> str:
        """URL de destino do encaminhamento"""
        raise NotImplementedError

    @abstractmethod
    async def forward(self, cep: str, headers: Dict[str, str]) -> RelayedResponse:
        """
        Encaminha o CEP e devolve a resposta do resolver sem alterações
        
        Args:
            cep: CEP já validado
            headers: Headers extras (contexto de trace propagado)
        
        Raises:
            UpstreamTransportException: resolver inacessível
        """
        raise NotImplementedError

"""
Input Port: Interface para encaminhar um CEP ao serviço resolver
"""
from abc import ABC, abstractmethod

from application.dtos.requests import CepRequest
from application.dtos.responses import RelayedResponse


class IForwardCepUseCase(ABC):
    """Interface para caso de uso do gateway"""
    
    @abstractmethod
    async def execute(self, request: CepRequest) -> RelayedResponse:
        """
        Valida o CEP e repassa a resposta do resolver
        
        Raises:
            InvalidCepException: CEP inválido (nenhuma chamada é feita)
            UpstreamTransportException: resolver inacessível
        """
        pass

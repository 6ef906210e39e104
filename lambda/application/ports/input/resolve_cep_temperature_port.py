"""
Input Port: Interface para resolver a temperatura de um CEP
"""
from abc import ABC, abstractmethod

from application.dtos.requests import CepRequest
from domain.entities.resolved_output import ResolvedOutput


class IResolveCepTemperatureUseCase(ABC):
    """Interface para caso de uso CEP -> cidade -> temperatura"""
    
    @abstractmethod
    async def execute(self, request: CepRequest) -> ResolvedOutput:
        """
        Resolve cidade e temperatura atual de um CEP
        
        Raises:
            InvalidCepException, CepNotFoundException,
            WeatherUnavailableException, UpstreamTransportException
        """
        pass

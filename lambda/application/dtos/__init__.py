"""Application DTOs - Data Transfer Objects para contratos de API"""

from application.dtos.requests import CepRequest
from application.dtos.responses import RelayedResponse

__all__ = [
    'CepRequest',
    'RelayedResponse'
]

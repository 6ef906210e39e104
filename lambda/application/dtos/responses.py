"""Response DTOs - Contratos de saída"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RelayedResponse:
    """Resposta do serviço resolver repassada sem alterações pelo gateway"""
    status_code: int
    body: str
    content_type: str = "application/json"

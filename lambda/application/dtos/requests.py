"""Request DTOs - Contratos de entrada para use cases"""

import json
from dataclasses import dataclass
from typing import Optional

from domain.constants import Messages
from domain.exceptions import InvalidInputException


@dataclass(frozen=True)
class CepRequest:
    """Request para resolver a temperatura de um CEP"""
    cep: str

    @classmethod
    def from_json_body(cls, raw_body: Optional[str]) -> 'CepRequest':
        """
        Decodifica o body JSON {"cep": "..."}

        Um body sem a chave "cep" gera cep vazio (rejeitado depois como CEP inválido).

        Raises:
            InvalidInputException: body ausente, JSON malformado, não-objeto ou cep não-string
        """
        try:
            payload = json.loads(raw_body)
        except (TypeError, ValueError) as ex:
            raise InvalidInputException(
                Messages.INVALID_INPUT,
                details={"reason": "malformed JSON"}
            ) from ex

        if not isinstance(payload, dict):
            raise InvalidInputException(
                Messages.INVALID_INPUT,
                details={"reason": "body must be a JSON object"}
            )

        cep = payload.get('cep', '')
        if not isinstance(cep, str):
            raise InvalidInputException(
                Messages.INVALID_INPUT,
                details={"reason": "cep must be a string"}
            )

        return cls(cep=cep)

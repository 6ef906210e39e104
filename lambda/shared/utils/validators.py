"""
Validators Utility
Input validation with domain exceptions
"""
import re

from domain.constants import Messages
from domain.exceptions import InvalidCepException


class CepValidator:
    """Validate CEP (Brazilian postal code) syntax"""
    
    # 8 dígitos ou NNNNN-NNN (apenas dígitos ASCII)
    PATTERN = re.compile(r'[0-9]{8}|[0-9]{5}-[0-9]{3}')
    
    @staticmethod
    def is_valid(cep) -> bool:
        """
        Check CEP syntax without raising
        
        Args:
            cep: Candidate CEP
        
        Returns:
            True for "01001000" or "01001-000", False otherwise
        """
        if not isinstance(cep, str):
            return False
        return CepValidator.PATTERN.fullmatch(cep) is not None
    
    @staticmethod
    def validate(cep) -> str:
        """
        Validate CEP syntax
        
        Args:
            cep: CEP string
        
        Returns:
            The validated CEP
        
        Raises:
            InvalidCepException: If CEP is not 8 digits or NNNNN-NNN
        """
        if not CepValidator.is_valid(cep):
            raise InvalidCepException(
                Messages.INVALID_CEP,
                details={"cep": cep}
            )
        return cep
    
    @staticmethod
    def normalize(cep) -> str:
        """Validate and strip the hyphen (digits only)"""
        return CepValidator.validate(cep).replace('-', '')

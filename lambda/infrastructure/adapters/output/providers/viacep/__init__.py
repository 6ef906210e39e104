"""ViaCEP Provider"""
from infrastructure.adapters.output.providers.viacep.viacep_provider import ViaCepProvider

__all__ = ['ViaCepProvider']

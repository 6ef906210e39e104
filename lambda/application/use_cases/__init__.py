"""Application Use Cases"""
from application.use_cases.resolve_cep_temperature_use_case import ResolveCepTemperatureUseCase
from application.use_cases.forward_cep_use_case import ForwardCepUseCase

__all__ = ['ResolveCepTemperatureUseCase', 'ForwardCepUseCase']

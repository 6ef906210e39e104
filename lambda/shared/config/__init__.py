"""Shared configuration"""
from .settings import HTTP_TIMEOUT_SECONDS, SERVICE_NAME
from .logger_config import get_logger, logger

__all__ = ['HTTP_TIMEOUT_SECONDS', 'SERVICE_NAME', 'get_logger', 'logger']

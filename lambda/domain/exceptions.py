"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions
"""


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidInputException(DomainException):
    """Raised when the request body is not a valid JSON payload"""
    pass


class InvalidCepException(DomainException):
    """Raised when a CEP fails the syntax check"""
    pass


class CepNotFoundException(DomainException):
    """Raised when the postal code provider has no locality for the CEP"""
    pass


class WeatherUnavailableException(DomainException):
    """Raised when the weather provider has no current temperature for the city"""
    pass


class UpstreamTransportException(DomainException):
    """Raised when an upstream HTTP call fails (connection, DNS, timeout)"""
    pass

"""Common Core - Domain Exceptions."""
from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    code: str = 'DOMAIN_ERROR'
    default_message: str = 'An error occurred'

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None, code: Optional[str] = None):
        self.message = message or self.default_message
        self.details = details or {}
        if code:
            self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# Validation Errors
class ValidationError(DomainException):
    code = 'VALIDATION_ERROR'
    default_message = 'Invalid data'


class InvalidLocationData(ValidationError):
    code = 'INVALID_LOCATION_DATA'
    default_message = 'Invalid JSON structure: "provinces" array not found.'


# Not Found Errors
class NotFoundError(DomainException):
    code = 'NOT_FOUND'
    default_message = 'Resource not found'


class LocationFileNotFound(NotFoundError):
    code = 'LOCATION_FILE_NOT_FOUND'
    default_message = 'Pakistan location data file not found.'

    def __init__(self, path: str = '', **kwargs):
        super().__init__(details={'path': path}, **kwargs)

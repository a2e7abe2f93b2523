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


class InvalidInputError(DomainException):
    """Raised when client-side validation fails (empty place, out-of-range coordinates)"""
    pass


class ProviderException(DomainException):
    """Base for failures reported by a weather provider"""
    pass


class TransportError(ProviderException):
    """Raised when the provider answers with a non-200 HTTP status"""
    pass


class DecodingError(ProviderException):
    """Raised when the provider body cannot be parsed into the expected schema"""
    pass


class NoDataError(DomainException):
    """Raised by the mock provider when no canned result is configured"""
    pass


class LocationServiceError(DomainException):
    """Base for device location failures"""
    pass


class LocationPermissionError(LocationServiceError):
    """Raised when location permission is denied, restricted or never granted"""
    pass


class LocationUnavailableError(LocationServiceError):
    """Raised when the platform cannot determine the current location"""
    pass

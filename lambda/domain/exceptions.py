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


class InvalidSampleError(DomainException):
    """Raised when a weather sample lacks required fields (main/weather/dt)"""
    pass


class UnsupportedFormatError(DomainException):
    """Raised when an export is requested with an unknown format token"""
    pass


class InvalidRequestException(DomainException):
    """Raised when request parameters are missing or malformed"""
    pass


class InvalidDateTimeException(DomainException):
    """Raised when date/time parameters are invalid"""
    pass


class LocationNotFoundException(DomainException):
    """Raised when a location cannot be geocoded"""
    pass


class RecordNotFoundException(DomainException):
    """Raised when a weather record does not exist"""
    pass


class WeatherDataNotFoundException(DomainException):
    """Raised when weather data is not available"""
    pass


class WeatherProviderException(DomainException):
    """Raised when an upstream provider (OpenWeather/Google) fails"""
    pass

class GeocodingError(Exception):
    """Base class for every error raised by the geocoding adapter."""


class InvalidInputError(GeocodingError, ValueError):
    """The request has neither an address nor a coordinate, or has both."""


class NotSupportedError(GeocodingError, NotImplementedError):
    """The requested response format cannot be normalized."""


class MalformedResponseError(GeocodingError):
    """The provider payload is not valid JSON or misses a required field."""


class TransportError(GeocodingError):
    """The HTTP call failed (network error or non-2xx status)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

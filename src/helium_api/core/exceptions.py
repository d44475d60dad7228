"""Custom exceptions for helium_api package."""

from typing import Optional


class HeliumAPIError(Exception):
    """Base exception for helium_api package."""
    pass


class NetworkError(HeliumAPIError):
    """Exception raised when the HTTP transport fails."""
    pass


class DecodeError(HeliumAPIError):
    """Exception raised when a response body does not match the expected shape."""
    pass


class APIError(HeliumAPIError):
    """Exception raised when the API answers with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.url = url

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"HTTP {self.status_code}: {self.message}"


class NotFoundError(APIError):
    """Exception raised when the requested resource does not exist."""
    pass


class ConfigurationError(HeliumAPIError):
    """Exception raised for configuration-related errors."""
    pass

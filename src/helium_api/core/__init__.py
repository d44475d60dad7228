"""Core infrastructure for helium_api package."""

from .base import BaseAPIClient, BaseSource, APIConfig
from .stream import Stream
from .amounts import Hnt, Hst, Dc, parse_hnt, parse_hst, parse_dc
from .exceptions import (
    HeliumAPIError,
    NetworkError,
    DecodeError,
    APIError,
    NotFoundError,
    ConfigurationError,
)

__all__ = [
    "BaseAPIClient",
    "BaseSource",
    "APIConfig",
    "Stream",
    "Hnt",
    "Hst",
    "Dc",
    "parse_hnt",
    "parse_hst",
    "parse_dc",
    "HeliumAPIError",
    "NetworkError",
    "DecodeError",
    "APIError",
    "NotFoundError",
    "ConfigurationError",
]

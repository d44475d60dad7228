"""Helium API - typed client for the Helium blockchain REST API."""

from .config import settings, Settings
from .client import Client
from .core import (
    Stream,
    Hnt,
    Hst,
    Dc,
    HeliumAPIError,
    NetworkError,
    DecodeError,
    APIError,
    NotFoundError,
)
from .resources import (
    accounts,
    hotspots,
    ouis,
    rewards,
    transactions,
    validators,
    Account,
    Hotspot,
    Oui,
    Reward,
    Transaction,
    Validator,
)
from .source import HeliumSource
from .config.settings import VERSION as __version__

__all__ = [
    # Configuration
    "settings",
    "Settings",
    # Client
    "Client",
    "Stream",
    # Amounts
    "Hnt",
    "Hst",
    "Dc",
    # Errors
    "HeliumAPIError",
    "NetworkError",
    "DecodeError",
    "APIError",
    "NotFoundError",
    # Resources
    "accounts",
    "hotspots",
    "ouis",
    "rewards",
    "transactions",
    "validators",
    "Account",
    "Hotspot",
    "Oui",
    "Reward",
    "Transaction",
    "Validator",
    # Data loading
    "HeliumSource",
]

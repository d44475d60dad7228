"""Centralized configuration management for helium_api."""

import os
from typing import Optional
from dataclasses import dataclass, field
from dotenv import load_dotenv

from helium_api.core.exceptions import ConfigurationError

load_dotenv()

VERSION = "0.1.0"

# The API refuses larger pages for /accounts/rich
RICHEST_LIMIT = 1000


@dataclass
class ColumnSchemas:
    """Standardized column schemas for DLT pipelines."""

    ACCOUNT_COLUMNS = {
        "balance": {"data_type": "decimal", "precision": 38, "scale": 8},
        "sec_balance": {"data_type": "decimal", "precision": 38, "scale": 8},
        "dc_balance": {"data_type": "bigint"},
        "nonce": {"data_type": "bigint"},
        "speculative_nonce": {"data_type": "bigint"},
        "speculative_sec_nonce": {"data_type": "bigint"},
    }

    REWARD_COLUMNS = {
        "amount": {"data_type": "decimal", "precision": 38, "scale": 8},
        "block": {"data_type": "bigint"},
        "timestamp": {"data_type": "timestamp"},
    }

    TRANSACTION_COLUMNS = {
        "height": {"data_type": "bigint"},
        "time": {"data_type": "timestamp"},
        "fields": {"data_type": "json"},
    }

    HOTSPOT_COLUMNS = {
        "status": {"data_type": "json"},
        "geocode": {"data_type": "json"},
        "block_added": {"data_type": "bigint"},
    }


class APIUrls:
    """API endpoint URLs."""
    MAINNET = "https://api.helium.io/v1"
    STAGING = "https://api.helium.wtf/v1"


@dataclass
class APISettings:
    """API-specific settings."""
    base_url: Optional[str] = None
    timeout: Optional[float] = None
    user_agent: Optional[str] = None
    default_headers: dict = field(default_factory=lambda: {"accept": "application/json"})

    def __post_init__(self):
        # Load from environment if not provided
        if self.base_url is None:
            self.base_url = os.getenv("HELIUM_API_URL", APIUrls.MAINNET)
        if self.timeout is None:
            raw_timeout = os.getenv("HELIUM_API_TIMEOUT", "30")
            try:
                self.timeout = float(raw_timeout)
            except ValueError:
                raise ConfigurationError(
                    f"HELIUM_API_TIMEOUT must be a number, got {raw_timeout!r}"
                )
        if self.user_agent is None:
            self.user_agent = os.getenv(
                "HELIUM_API_USER_AGENT", f"helium-api-py/{VERSION}"
            )
        if self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {self.timeout}")


class Settings:
    """Main settings class."""

    def __init__(self):
        self.api = APISettings()
        self.api_urls = APIUrls()
        self.columns = ColumnSchemas()


# Global settings instance
settings = Settings()

"""Utility modules for helium_api."""

from .data_transformers import DataTransformer
from .logging import setup_logging

__all__ = ["DataTransformer", "setup_logging"]

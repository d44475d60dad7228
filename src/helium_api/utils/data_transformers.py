"""Centralized data transformation utilities."""

import datetime
import dataclasses
from collections.abc import Mapping
from typing import Any, Dict, Optional

from helium_api.core.amounts import Dc, Hnt, Hst


class DataTransformer:
    """Centralized data transformation utilities."""

    @staticmethod
    def to_utc(value: datetime.datetime) -> datetime.datetime:
        """Return ``value`` in UTC; naive datetimes are taken to be UTC already."""
        if value.tzinfo is None:
            return value.replace(tzinfo=datetime.timezone.utc)
        return value.astimezone(datetime.timezone.utc)

    @staticmethod
    def format_timestamp(value: datetime.datetime) -> str:
        """Format a datetime as the ISO-8601 UTC string the API expects in queries."""
        utc_value = DataTransformer.to_utc(value)
        return utc_value.isoformat().replace("+00:00", "Z")

    @staticmethod
    def parse_timestamp(value: Any) -> datetime.datetime:
        """Convert various timestamp formats to an aware UTC datetime."""
        if isinstance(value, bool):
            raise ValueError(f"Invalid timestamp: {value!r}")
        if isinstance(value, (int, float)):
            return datetime.datetime.fromtimestamp(value, tz=datetime.timezone.utc)
        if isinstance(value, str):
            try:
                # Try parsing as ISO datetime string first (e.g., "2021-03-04T23:01:19.228Z")
                parsed = datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                # If that fails, try as Unix timestamp string
                return datetime.datetime.fromtimestamp(int(value), tz=datetime.timezone.utc)
            return DataTransformer.to_utc(parsed)
        raise ValueError(f"Invalid timestamp: {value!r}")

    @staticmethod
    def parse_optional_timestamp(value: Any) -> Optional[datetime.datetime]:
        if value is None:
            return None
        return DataTransformer.parse_timestamp(value)

    @staticmethod
    def _flatten_value(value: Any) -> Any:
        if isinstance(value, (Hnt, Hst)):
            return value.to_decimal()
        if isinstance(value, Dc):
            return value.amount
        if isinstance(value, tuple):
            return [DataTransformer._flatten_value(v) for v in value]
        if isinstance(value, Mapping):
            return {k: DataTransformer._flatten_value(v) for k, v in value.items()}
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return DataTransformer.record_to_dict(value)
        return value

    @staticmethod
    def record_to_dict(record: Any) -> Dict[str, Any]:
        """Convert a resource record to a plain dict suitable for loading.

        Token amounts become ``Decimal`` values, nested records become dicts.
        """
        return {
            f.name: DataTransformer._flatten_value(getattr(record, f.name))
            for f in dataclasses.fields(record)
        }


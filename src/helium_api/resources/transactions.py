"""Transaction records and accessors."""

import datetime
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from helium_api.core.base import BaseAPIClient
from helium_api.core.stream import Stream
from helium_api.utils.data_transformers import DataTransformer

# Envelope keys shared by every transaction type
_COMMON_KEYS = ("type", "hash", "height", "time")


@dataclass(frozen=True)
class Transaction:
    """A blockchain transaction of any type.

    Only the fields shared by all transaction types are typed; the rest of
    the JSON object is kept, read-only, in ``fields``.
    """
    type: str
    hash: str
    height: Optional[int] = None
    time: Optional[datetime.datetime] = None
    fields: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Transaction":
        height = data.get("height")
        return cls(
            type=data["type"],
            hash=data["hash"],
            height=int(height) if height is not None else None,
            time=DataTransformer.parse_optional_timestamp(data.get("time")),
            fields=MappingProxyType(
                {k: v for k, v in data.items() if k not in _COMMON_KEYS}
            ),
        )

    def __getitem__(self, key: str) -> Any:
        return self.fields[key]


def get(client: BaseAPIClient, txn_hash: str) -> Transaction:
    """Get a transaction by its hash."""
    return client.fetch(f"/transactions/{txn_hash}", decoder=Transaction.from_json)


def for_account(client: BaseAPIClient, address: str) -> Stream[Transaction]:
    """Get the activity of an account, newest first."""
    return client.fetch_stream(f"/accounts/{address}/activity", decoder=Transaction.from_json)

"""Reward records and reward time-window queries."""

import datetime
from dataclasses import dataclass
from typing import Any, Dict, Optional

from helium_api.core.amounts import Hnt, parse_hnt
from helium_api.core.base import BaseAPIClient
from helium_api.core.stream import Stream
from helium_api.utils.data_transformers import DataTransformer


@dataclass(frozen=True)
class Reward:
    """A single reward payout to an account."""
    account: str
    amount: Hnt
    block: int
    hash: str
    timestamp: datetime.datetime
    gateway: Optional[str] = None
    type: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Reward":
        return cls(
            account=data["account"],
            amount=parse_hnt(data["amount"]),
            block=int(data["block"]),
            hash=data["hash"],
            timestamp=DataTransformer.parse_timestamp(data["timestamp"]),
            gateway=data.get("gateway"),
            type=data.get("type"),
        )


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def time_window(min_time: datetime.datetime, max_time: datetime.datetime) -> Dict[str, str]:
    """Query parameters selecting rewards between ``min_time`` and ``max_time``."""
    return {
        "max_time": DataTransformer.format_timestamp(max_time),
        "min_time": DataTransformer.format_timestamp(min_time),
    }



def for_account_between(
    client: BaseAPIClient,
    address: str,
    min_time: datetime.datetime,
    max_time: datetime.datetime,
) -> Stream[Reward]:
    """Get the rewards of an account between two points in time."""
    return client.fetch_stream(
        f"/accounts/{address}/rewards",
        time_window(min_time, max_time),
        decoder=Reward.from_json,
    )


def for_account_last(client: BaseAPIClient, address: str, duration: datetime.timedelta) -> Stream[Reward]:
    """Get the rewards of an account over the last ``duration``."""
    max_time = utcnow()
    return for_account_between(client, address, max_time - duration, max_time)


def for_account_since(client: BaseAPIClient, address: str, min_time: datetime.datetime) -> Stream[Reward]:
    """Get the rewards of an account from ``min_time`` until now."""
    return for_account_between(client, address, min_time, utcnow())

"""Hotspot records and accessors."""

import datetime
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from helium_api.core.base import BaseAPIClient
from helium_api.core.stream import Stream
from helium_api.resources import rewards
from helium_api.resources.common import NodeStatus, optional_float, optional_int
from helium_api.resources.rewards import Reward


@dataclass(frozen=True)
class Hotspot:
    """A radio access point registered to an account."""
    address: str
    owner: str
    name: Optional[str] = None
    location: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    block_added: Optional[int] = None
    block: Optional[int] = None
    status: NodeStatus = field(default_factory=NodeStatus)
    nonce: int = 0
    geocode: Dict[str, Any] = field(default_factory=dict, hash=False, compare=False)
    reward_scale: Optional[float] = None
    mode: Optional[str] = None
    payer: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Hotspot":
        return cls(
            address=data["address"],
            owner=data["owner"],
            name=data.get("name"),
            location=data.get("location"),
            lat=optional_float(data.get("lat")),
            lng=optional_float(data.get("lng")),
            block_added=optional_int(data.get("block_added")),
            block=optional_int(data.get("block")),
            status=NodeStatus.from_json(data.get("status")),
            nonce=int(data.get("nonce") or 0),
            geocode=dict(data.get("geocode") or {}),
            reward_scale=optional_float(data.get("reward_scale")),
            mode=data.get("mode"),
            payer=data.get("payer"),
        )


def all(client: BaseAPIClient) -> Stream[Hotspot]:
    """Get all known hotspots."""
    return client.fetch_stream("/hotspots", decoder=Hotspot.from_json)


def get(client: BaseAPIClient, address: str) -> Hotspot:
    """Get a specific hotspot by its address."""
    return client.fetch(f"/hotspots/{address}", decoder=Hotspot.from_json)


def rewards_between(
    client: BaseAPIClient,
    address: str,
    min_time: datetime.datetime,
    max_time: datetime.datetime,
) -> Stream[Reward]:
    """Get the rewards earned by a hotspot between two points in time."""
    return client.fetch_stream(
        f"/hotspots/{address}/rewards",
        rewards.time_window(min_time, max_time),
        decoder=Reward.from_json,
    )

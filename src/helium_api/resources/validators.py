"""Validator records and accessors."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from helium_api.core.amounts import Hnt, parse_hnt
from helium_api.core.base import BaseAPIClient
from helium_api.core.stream import Stream
from helium_api.resources.common import NodeStatus, optional_int


@dataclass(frozen=True)
class Validator:
    """A consensus node staked by an account."""
    address: str
    owner: str
    stake: Hnt
    status: NodeStatus = field(default_factory=NodeStatus)
    block_added: Optional[int] = None
    last_heartbeat: Optional[int] = None
    version_heartbeat: Optional[int] = None
    penalty: float = 0.0
    stake_status: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Validator":
        return cls(
            address=data["address"],
            owner=data["owner"],
            stake=parse_hnt(data["stake"]),
            status=NodeStatus.from_json(data.get("status")),
            block_added=optional_int(data.get("block_added")),
            last_heartbeat=optional_int(data.get("last_heartbeat")),
            version_heartbeat=optional_int(data.get("version_heartbeat")),
            penalty=float(data.get("penalty") or 0.0),
            stake_status=data.get("stake_status"),
        )


def all(client: BaseAPIClient) -> Stream[Validator]:
    """Get all known validators."""
    return client.fetch_stream("/validators", decoder=Validator.from_json)


def get(client: BaseAPIClient, address: str) -> Validator:
    return client.fetch(f"/validators/{address}", decoder=Validator.from_json)


def elected(client: BaseAPIClient) -> List[Validator]:
    """Get the validators in the current consensus group."""
    return client.fetch_list("/validators/elected", decoder=Validator.from_json)

"""OUI records and accessors."""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from helium_api.core.base import BaseAPIClient
from helium_api.core.stream import Stream


@dataclass(frozen=True)
class Subnet:
    base: str
    mask: int

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Subnet":
        return cls(base=data["base"], mask=int(data["mask"]))


@dataclass(frozen=True)
class Oui:
    """A routing registration (Organizationally Unique Identifier)."""
    oui: int
    owner: str
    nonce: int
    addresses: Tuple[str, ...] = ()
    subnets: Tuple[Subnet, ...] = ()
    block: int = 0

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Oui":
        return cls(
            oui=int(data["oui"]),
            owner=data["owner"],
            nonce=int(data["nonce"]),
            addresses=tuple(data.get("addresses") or ()),
            subnets=tuple(Subnet.from_json(s) for s in data.get("subnets") or ()),
            block=int(data.get("block") or 0),
        )


def all(client: BaseAPIClient) -> Stream[Oui]:
    """Get all registered OUIs."""
    return client.fetch_stream("/ouis", decoder=Oui.from_json)


def get(client: BaseAPIClient, oui: int) -> Oui:
    return client.fetch(f"/ouis/{oui}", decoder=Oui.from_json)


def last(client: BaseAPIClient) -> Oui:
    """Get the most recently registered OUI."""
    return client.fetch("/ouis/last", decoder=Oui.from_json)

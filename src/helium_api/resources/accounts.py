"""Account records and accessors.

Activity and reward accessors live with their own resource groups
(``transactions`` and ``rewards``) and are composed into this module under
the account-scoped names below. Dropping either group only means removing
its import here.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from helium_api.config.settings import RICHEST_LIMIT
from helium_api.core.amounts import Dc, Hnt, Hst, parse_dc, parse_hnt, parse_hst
from helium_api.core.base import BaseAPIClient
from helium_api.core.stream import Stream
from helium_api.resources.hotspots import Hotspot
from helium_api.resources.ouis import Oui
from helium_api.resources.rewards import (
    for_account_between as rewards_between,
    for_account_last as rewards_last,
    for_account_since as rewards_since,
)
from helium_api.resources.transactions import for_account as transactions
from helium_api.resources.validators import Validator


@dataclass(frozen=True)
class Account:
    """A wallet's on-chain state as known to the API at query time."""

    # Base58 check-encoded public key of the wallet
    address: str
    balance: Hnt
    dc_balance: Dc
    sec_balance: Hst
    nonce: int
    # Nonces including pending transactions
    speculative_nonce: int = 0
    speculative_sec_nonce: int = 0

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Account":
        return cls(
            address=data["address"],
            balance=parse_hnt(data["balance"]),
            dc_balance=parse_dc(data["dc_balance"]),
            sec_balance=parse_hst(data["sec_balance"]),
            nonce=int(data["nonce"]),
            speculative_nonce=int(data.get("speculative_nonce") or 0),
            speculative_sec_nonce=int(data.get("speculative_sec_nonce") or 0),
        )


def all(client: BaseAPIClient) -> Stream[Account]:
    """Get all known accounts."""
    return client.fetch_stream("/accounts", decoder=Account.from_json)


def get(client: BaseAPIClient, address: str) -> Account:
    """Get a specific account by its address.

    Raises ``NotFoundError`` if the address is unknown to the API.
    """
    return client.fetch(f"/accounts/{address}", decoder=Account.from_json)


def hotspots(client: BaseAPIClient, address: str) -> Stream[Hotspot]:
    """Get all hotspots owned by a given account."""
    return client.fetch_stream(f"/accounts/{address}/hotspots", decoder=Hotspot.from_json)


def ouis(client: BaseAPIClient, address: str) -> Stream[Oui]:
    """Get all OUIs owned by a given account."""
    return client.fetch_stream(f"/accounts/{address}/ouis", decoder=Oui.from_json)


def validators(client: BaseAPIClient, address: str) -> Stream[Validator]:
    """Get all validators owned by a given account."""
    return client.fetch_stream(f"/accounts/{address}/validators", decoder=Validator.from_json)


def richest(client: BaseAPIClient, limit: Optional[int] = None) -> List[Account]:
    """Get up to ``limit`` (maximum 1000) accounts sorted by balance, descending."""
    if limit is None:
        limit = RICHEST_LIMIT
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")
    return client.fetch_list(
        "/accounts/rich", {"limit": min(limit, RICHEST_LIMIT)}, decoder=Account.from_json
    )

"""Typed accessors for the Helium API resources."""

from . import accounts, hotspots, ouis, rewards, transactions, validators
from .accounts import Account
from .common import NodeStatus
from .hotspots import Hotspot
from .ouis import Oui, Subnet
from .rewards import Reward
from .transactions import Transaction
from .validators import Validator

__all__ = [
    "accounts",
    "hotspots",
    "ouis",
    "rewards",
    "transactions",
    "validators",
    "Account",
    "Hotspot",
    "Oui",
    "Subnet",
    "Reward",
    "Transaction",
    "Validator",
    "NodeStatus",
]

"""Pieces shared by several resource records."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


def optional_int(value: Any) -> Optional[int]:
    return int(value) if value is not None else None


def optional_float(value: Any) -> Optional[float]:
    return float(value) if value is not None else None


@dataclass(frozen=True)
class NodeStatus:
    """Liveness of a hotspot or validator as last reported to the API."""
    online: Optional[str] = None
    height: Optional[int] = None

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> "NodeStatus":
        data = data or {}
        return cls(online=data.get("online"), height=optional_int(data.get("height")))

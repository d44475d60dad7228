"""Shared fixtures: an in-process stand-in for the HTTP session."""

import json
from typing import Any, Dict, List, Optional

import pytest
import requests

from helium_api import Client

BASE_URL = "https://api.test/v1"


def make_response(url: str, status: int = 200, body: Any = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.reason = "OK" if status < 400 else "Error"
    response.encoding = "utf-8"
    if isinstance(body, (dict, list)):
        response._content = json.dumps(body).encode()
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = (body or "").encode()
    return response


class FakeSession:
    """Serves canned responses keyed by URL and cursor, and records every call."""

    def __init__(self, base_url: str = BASE_URL):
        self.base_url = base_url
        self.routes: Dict[tuple, Any] = {}
        self.calls: List[Dict[str, Any]] = []

    def _key(self, path: str, cursor: Optional[str] = None) -> tuple:
        return (f"{self.base_url}{path}", cursor)

    def add(self, path: str, body: Any, status: int = 200, cursor: Optional[str] = None):
        self.routes[self._key(path, cursor)] = (status, body)

    def add_pages(self, path: str, pages: List[List[Any]]):
        """Register ``pages`` as one cursor-linked sequence under ``path``."""
        for index, items in enumerate(pages):
            body: Dict[str, Any] = {"data": items}
            if index + 1 < len(pages):
                body["cursor"] = f"cursor-{index + 1}"
            self.add(path, body, cursor=f"cursor-{index}" if index else None)

    def add_failure(self, path: str, exc: Exception, cursor: Optional[str] = None):
        self.routes[self._key(path, cursor)] = exc

    def get(self, url, params=None, timeout=None):
        params = dict(params or {})
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        route = self.routes.get((url, params.get("cursor")))
        if route is None:
            return make_response(url, 404, {"error": "Not Found"})
        if isinstance(route, Exception):
            raise route
        status, body = route
        return make_response(url, status, body)


def account_json(address: str, balance: int = 0, **extra) -> Dict[str, Any]:
    data = {
        "address": address,
        "balance": balance,
        "dc_balance": 0,
        "sec_balance": 0,
        "nonce": 1,
    }
    data.update(extra)
    return data


def reward_json(hash_: str, amount: int = 100, gateway: Optional[str] = "gw") -> Dict[str, Any]:
    return {
        "account": "acct",
        "amount": amount,
        "block": 1000,
        "gateway": gateway,
        "hash": hash_,
        "timestamp": "2021-03-04T05:06:07.000000Z",
        "type": "poc_witnesses",
    }


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session):
    return Client(base_url=BASE_URL, session=session)

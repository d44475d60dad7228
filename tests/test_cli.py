"""Tests for the command line entry point."""

import json

import pytest

from helium_api import cli

from conftest import BASE_URL, FakeSession, account_json


@pytest.fixture
def fake_session(monkeypatch):
    session = FakeSession()
    monkeypatch.setattr(cli.Client, "_create_session", lambda self: session)
    return session


def test_account_command_prints_json(fake_session, capsys):
    fake_session.add("/accounts/abc", {"data": account_json("abc", balance=50_000_000)})

    exit_code = cli.main(["--base-url", BASE_URL, "account", "abc"])

    assert exit_code == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["address"] == "abc"
    assert printed["balance"] == "0.50000000"


def test_richest_command_passes_limit(fake_session, capsys):
    fake_session.add("/accounts/rich", {"data": [account_json("a"), account_json("b")]})

    assert cli.main(["--base-url", BASE_URL, "richest", "--limit", "2"]) == 0
    assert fake_session.calls[0]["params"] == {"limit": 2}
    assert len(capsys.readouterr().out.splitlines()) == 2


def test_api_error_returns_non_zero(fake_session, capsys):
    exit_code = cli.main(["--base-url", BASE_URL, "account", "missing"])

    assert exit_code == 1
    assert "error:" in capsys.readouterr().err

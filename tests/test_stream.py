"""Tests for lazy paginated streams."""

import pytest
import requests

from helium_api.core.exceptions import APIError, DecodeError, NetworkError
from helium_api.resources.rewards import Reward

from conftest import reward_json


def test_stream_requests_nothing_until_pulled(client, session):
    session.add_pages("/items", [[1, 2], [3]])

    stream = client.fetch_stream("/items")

    assert session.calls == []
    assert next(stream) == 1
    assert len(session.calls) == 1


def test_stream_follows_cursor_until_absent(client, session):
    session.add_pages("/items", [[1, 2], [3, 4], [5]])

    assert client.fetch_stream("/items").to_list() == [1, 2, 3, 4, 5]
    assert [call["params"].get("cursor") for call in session.calls] == [
        None,
        "cursor-1",
        "cursor-2",
    ]


def test_later_pages_carry_only_the_cursor(client, session):
    session.add_pages("/items", [[1], [2]])

    client.fetch_stream("/items", {"min_time": "2021-01-01T00:00:00Z"}).to_list()

    assert session.calls[0]["params"] == {"min_time": "2021-01-01T00:00:00Z"}
    assert session.calls[1]["params"] == {"cursor": "cursor-1"}


def test_take_fetches_only_needed_pages(client, session):
    session.add_pages("/items", [[1, 2], [3, 4], [5, 6]])

    stream = client.fetch_stream("/items")

    assert stream.take(3) == [1, 2, 3]
    assert stream.pages_fetched == 2


def test_decoder_applied_to_each_item(client, session):
    session.add_pages("/items", [[{"n": 1}], [{"n": 2}]])

    stream = client.fetch_stream("/items", decoder=lambda item: item["n"] * 10)

    assert list(stream) == [10, 20]


def test_error_on_later_page_keeps_earlier_items(client, session):
    session.add("/items", {"data": [1, 2], "cursor": "cursor-1"})
    session.add("/items", {"error": "boom"}, status=503, cursor="cursor-1")

    stream = client.fetch_stream("/items")
    received = []
    with pytest.raises(APIError):
        for item in stream:
            received.append(item)

    assert received == [1, 2]
    # The failure is terminal
    assert list(stream) == []
    assert len(session.calls) == 2


def test_page_without_data_raises_decode_error(client, session):
    session.add("/items", {"items": [1, 2]})

    stream = client.fetch_stream("/items")

    with pytest.raises(DecodeError):
        next(stream)
    assert list(stream) == []


def test_page_with_non_list_data_raises_decode_error(client, session):
    session.add("/items", {"data": {"n": 1}})

    with pytest.raises(DecodeError):
        next(client.fetch_stream("/items"))


def test_malformed_later_page_keeps_earlier_items(client, session):
    session.add("/rewards", {"data": [reward_json("r1"), reward_json("r2")], "cursor": "cursor-1"})
    session.add(
        "/rewards",
        {"data": [dict(reward_json("r3"), timestamp="garbage")]},
        cursor="cursor-1",
    )

    stream = client.fetch_stream("/rewards", decoder=Reward.from_json)
    received = []
    with pytest.raises(DecodeError):
        for reward in stream:
            received.append(reward.hash)

    assert received == ["r1", "r2"]
    assert list(stream) == []
    assert len(session.calls) == 2


def test_network_error_surfaces_from_stream(client, session):
    session.add_failure("/items", requests.ConnectionError("reset"))

    with pytest.raises(NetworkError):
        next(client.fetch_stream("/items"))


def test_independent_streams_do_not_share_cursor(client, session):
    session.add_pages("/items", [[1], [2]])

    first = client.fetch_stream("/items")
    second = client.fetch_stream("/items")

    assert next(first) == 1
    assert next(second) == 1
    assert next(first) == 2
    assert second.to_list() == [2]

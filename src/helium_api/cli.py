"""Command line lookups against the Helium API."""

import argparse
import datetime
import json
import logging
import sys

from helium_api.client import Client
from helium_api.core.exceptions import HeliumAPIError
from helium_api.resources import accounts, hotspots
from helium_api.utils.data_transformers import DataTransformer
from helium_api.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def _print_records(records) -> None:
    for record in records:
        print(json.dumps(DataTransformer.record_to_dict(record), default=str))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="helium-api")
    parser.add_argument(
        "--base-url",
        help="API base URL (defaults to HELIUM_API_URL or mainnet)",
        default=None,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log requests",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    account = subparsers.add_parser("account", help="Show an account")
    account.add_argument("address")

    richest = subparsers.add_parser("richest", help="List the richest accounts")
    richest.add_argument("--limit", type=int, default=10)

    owned = subparsers.add_parser("hotspots", help="List hotspots owned by an account")
    owned.add_argument("address")
    owned.add_argument("--limit", type=int, default=None)

    hotspot = subparsers.add_parser("hotspot", help="Show a hotspot")
    hotspot.add_argument("address")

    rewards = subparsers.add_parser("rewards", help="List recent rewards of an account")
    rewards.add_argument("address")
    rewards.add_argument(
        "--hours",
        type=float,
        help="Size of the window ending now",
        default=24,
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    client = Client(base_url=args.base_url)

    try:
        if args.command == "account":
            _print_records([accounts.get(client, args.address)])
        elif args.command == "richest":
            _print_records(accounts.richest(client, args.limit))
        elif args.command == "hotspots":
            stream = accounts.hotspots(client, args.address)
            _print_records(stream.take(args.limit) if args.limit is not None else stream)
        elif args.command == "hotspot":
            _print_records([hotspots.get(client, args.address)])
        elif args.command == "rewards":
            duration = datetime.timedelta(hours=args.hours)
            _print_records(accounts.rewards_last(client, args.address, duration))
    except HeliumAPIError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Example usage of the helium_api client and DLT source.
"""

import datetime
import logging
from dotenv import load_dotenv

import dlt

from helium_api import Client, HeliumSource, accounts, settings
from helium_api.utils.logging import setup_logging

logger = logging.getLogger(__name__)
load_dotenv()

ADDRESS = "13WRNw4fmssJBvMqMnREwe1eCvUVXfnWXSXGcWXyVvAnQUF3D9R"


def show_account(client: Client, address: str):
    """Print an account and the first few hotspots it owns."""
    account = accounts.get(client, address)
    logger.info(f"{account.address}: {account.balance} HNT, {account.dc_balance} DC")

    for hotspot in accounts.hotspots(client, address).take(5):
        logger.info(f"  hotspot {hotspot.name} ({hotspot.status.online})")


def show_richest(client: Client, limit: int = 10):
    for rank, account in enumerate(accounts.richest(client, limit), start=1):
        logger.info(f"{rank:>3}. {account.address} {account.balance}")


def load_rewards(address: str, days: int = 7):
    """Load the last ``days`` of rewards for ``address`` into DuckDB."""
    source = HeliumSource(Client())
    min_time = datetime.datetime.now(datetime.timezone.utc) - datetime.timedelta(days=days)

    pipeline = dlt.pipeline(
        pipeline_name="helium_rewards",
        destination="duckdb",
        dataset_name="helium",
    )
    load_info = pipeline.run(source.rewards(address, min_time))
    logger.info(load_info)


def main():
    setup_logging()
    client = Client()
    logger.info(f"Using {settings.api.base_url}")

    show_account(client, ADDRESS)
    show_richest(client)
    load_rewards(ADDRESS)


if __name__ == "__main__":
    main()

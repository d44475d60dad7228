"""DLT resources backed by the Helium API streams."""

import datetime
from typing import Iterable, List, Optional

import dlt

from helium_api.client import Client
from helium_api.config.settings import settings
from helium_api.core.base import BaseSource
from helium_api.resources import accounts, hotspots
from helium_api.utils.data_transformers import DataTransformer


class HeliumSource(BaseSource):
    """Creating DLT resources for Helium API data."""

    def __init__(self, client: Optional[Client] = None):
        super().__init__(client or Client())

    def get_available_sources(self) -> List[str]:
        """Return list of available source names."""
        return ["accounts", "rewards", "transactions", "hotspots"]

    def _rows(self, records: Iterable, limit: Optional[int] = None):
        """Yield records as plain dicts, stopping after ``limit``."""
        count = 0
        for record in records:
            if limit is not None and count >= limit:
                break
            yield DataTransformer.record_to_dict(record)
            count += 1
        self.logger.info(f"Extracted {count} rows")

    def accounts(self, limit: Optional[int] = None):
        """Resource over every known account."""

        def _fetch():
            yield from self._rows(accounts.all(self.client), limit)

        return dlt.resource(
            _fetch,
            name="accounts",
            primary_key="address",
            write_disposition="merge",
            columns=settings.columns.ACCOUNT_COLUMNS,
        )

    def rewards(
        self,
        address: str,
        min_time: datetime.datetime,
        max_time: Optional[datetime.datetime] = None,
    ):
        """Resource over the rewards of an account in a time window."""

        def _fetch():
            self.logger.info(f"Fetching rewards for {address} since {min_time}")
            if max_time is None:
                stream = accounts.rewards_since(self.client, address, min_time)
            else:
                stream = accounts.rewards_between(self.client, address, min_time, max_time)
            yield from self._rows(stream)

        return dlt.resource(
            _fetch,
            name="rewards",
            write_disposition="append",
            columns=settings.columns.REWARD_COLUMNS,
        )

    def transactions(self, address: str, limit: Optional[int] = None):
        """Resource over the activity of an account, newest first."""

        def _fetch():
            self.logger.info(f"Fetching activity for {address}")
            for row in self._rows(accounts.transactions(self.client, address), limit):
                row["account"] = address
                yield row

        return dlt.resource(
            _fetch,
            name="transactions",
            primary_key="hash",
            write_disposition="merge",
            columns=settings.columns.TRANSACTION_COLUMNS,
        )

    def hotspots(self, owner: Optional[str] = None):
        """Resource over the hotspots of ``owner``, or every hotspot when omitted."""

        def _fetch():
            if owner is None:
                stream = hotspots.all(self.client)
            else:
                stream = accounts.hotspots(self.client, owner)
            yield from self._rows(stream)

        return dlt.resource(
            _fetch,
            name="hotspots",
            primary_key="address",
            write_disposition="merge",
            columns=settings.columns.HOTSPOT_COLUMNS,
        )

"""Lazy, cursor-paginated sequences of API resources."""

import logging
from collections import deque
from itertools import islice
from typing import Any, Callable, Deque, Generic, Iterator, List, Mapping, Optional, TypeVar

from requests import Request
from dlt.sources.helpers.rest_client.paginators import JSONResponseCursorPaginator

from .exceptions import HeliumAPIError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Stream(Generic[T]):
    """Iterator over every item of a paginated endpoint.

    Pages are requested on demand: a pull either pops the next buffered item
    or fetches the following page. The first page carries the caller's query,
    later pages only the ``cursor`` returned by the previous one. The stream
    ends when a page comes back without a cursor.

    A failed page request raises from ``__next__`` and leaves the stream
    exhausted.
    """

    def __init__(
        self,
        client,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        decoder: Optional[Callable[[Any], T]] = None,
    ):
        self._client = client
        self._url = client.build_url(path)
        self._query = dict(query or {})
        self._decoder = decoder
        self._paginator = JSONResponseCursorPaginator(cursor_path="cursor", cursor_param="cursor")
        self._buffer: Deque[T] = deque()
        self._started = False
        self._exhausted = False
        self.pages_fetched = 0

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        while not self._buffer:
            if self._exhausted:
                raise StopIteration
            self._fetch_next_page()
        return self._buffer.popleft()

    def _next_request(self) -> Request:
        if not self._started:
            request = Request("GET", self._url, params=dict(self._query))
            self._paginator.init_request(request)
            self._started = True
        else:
            request = Request("GET", self._url, params={})
            self._paginator.update_request(request)
        return request

    def _fetch_next_page(self) -> None:
        request = self._next_request()
        try:
            response, envelope = self._client.send(request)
            items = self._client.decode_page(envelope, self._decoder)
        except HeliumAPIError:
            self._exhausted = True
            raise

        self._paginator.update_state(response, items)
        self.pages_fetched += 1
        if not self._paginator.has_next_page:
            self._exhausted = True
        logger.debug(
            f"Fetched page {self.pages_fetched} of {self._url}: {len(items)} items, "
            f"{'more pages' if not self._exhausted else 'last page'}"
        )
        self._buffer.extend(items)

    def take(self, n: int) -> List[T]:
        """Return up to ``n`` items, fetching only the pages needed."""
        return list(islice(self, n))

    def to_list(self) -> List[T]:
        """Drain the stream into a list."""
        return list(self)

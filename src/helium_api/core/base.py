"""Abstract base classes for helium_api package."""

import logging
import requests
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, TypeVar

from .exceptions import DecodeError, HeliumAPIError, NetworkError
from .stream import Stream

T = TypeVar("T")

Decoder = Callable[[Any], T]
Query = Optional[Mapping[str, Any]]


@dataclass
class APIConfig:
    """Configuration for API clients."""
    base_url: str
    timeout: float = 30.0
    headers: Dict[str, str] = field(default_factory=dict)


def _identity(value: Any) -> Any:
    return value


class BaseAPIClient(ABC):
    """Abstract base class for API clients.

    Provides the two fetch primitives resource modules build on: ``fetch``
    for a single decoded value and ``fetch_stream`` for a lazy, paginated
    sequence. Subclasses decide how request parameters are built and how a
    raw response is checked and unwrapped.
    """

    # Key of the response envelope holding the payload
    data_selector = "data"

    def __init__(self, config: APIConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)
        self._session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create configured session."""
        session = requests.Session()
        session.headers.update(self.config.headers)
        return session

    @abstractmethod
    def _build_request_params(self, **kwargs) -> Dict[str, Any]:
        """Build request parameters specific to the API."""
        pass

    @abstractmethod
    def _handle_response(self, response: requests.Response) -> Dict[str, Any]:
        """Check the API response and return its decoded JSON envelope."""
        pass

    def build_url(self, endpoint: str) -> str:
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        if not endpoint:
            return self.config.base_url
        return f"{self.config.base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    def send(self, request: requests.Request) -> Tuple[requests.Response, Dict[str, Any]]:
        """Issue a GET for ``request`` and return the response with its envelope."""
        params = self._build_request_params(**(request.params or {}))
        self.logger.debug(f"GET {request.url} params={params}")
        try:
            response = self._session.get(
                request.url, params=params, timeout=self.config.timeout
            )
        except requests.RequestException as e:
            self.logger.error(f"Request to {request.url} failed: {e}")
            raise NetworkError(f"Request to {request.url} failed: {e}") from e
        return response, self._handle_response(response)

    def make_request(self, endpoint: str, params: Query = None) -> Dict[str, Any]:
        """Single GET against ``endpoint``; returns the decoded JSON envelope."""
        request = requests.Request("GET", self.build_url(endpoint), params=dict(params or {}))
        _, envelope = self.send(request)
        return envelope

    def fetch(self, path: str, query: Query = None, decoder: Optional[Decoder] = None) -> Any:
        """Fetch one resource and decode its payload."""
        envelope = self.make_request(path, query)
        return self.decode(envelope[self.data_selector], decoder)

    def fetch_list(self, path: str, query: Query = None, decoder: Optional[Decoder] = None) -> List[Any]:
        """Fetch a single, unpaginated list of resources."""
        envelope = self.make_request(path, query)
        return self.decode_page(envelope, decoder)

    def fetch_stream(self, path: str, query: Query = None, decoder: Optional[Decoder] = None) -> Stream:
        """Return a lazy ``Stream`` walking every page under ``path``."""
        return Stream(self, path, query, decoder)

    def decode(self, data: Any, decoder: Optional[Decoder] = None) -> Any:
        """Run ``decoder`` over a payload, reporting shape mismatches as DecodeError."""
        decoder = decoder or _identity
        try:
            return decoder(data)
        except HeliumAPIError:
            raise
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DecodeError(f"Unexpected response shape: {e!r}") from e

    def decode_page(self, envelope: Dict[str, Any], decoder: Optional[Decoder] = None) -> List[Any]:
        items = envelope[self.data_selector]
        if not isinstance(items, list):
            raise DecodeError(
                f"Expected a list under '{self.data_selector}', got {type(items).__name__}"
            )
        return [self.decode(item, decoder) for item in items]


class BaseSource(ABC):
    """Abstract base class for DLT source factories."""

    def __init__(self, client: BaseAPIClient):
        self.client = client
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def get_available_sources(self) -> List[str]:
        """Return list of available source names."""
        pass

"""Helium blockchain API client implementation."""

from typing import Any, Dict, Optional

import requests

from helium_api.core.base import BaseAPIClient, APIConfig
from helium_api.core.exceptions import APIError, DecodeError, NotFoundError
from helium_api.config.settings import settings


class Client(BaseAPIClient):
    """Helium API client implementation.

    Holds no per-call state, so one instance may be shared between callers.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        headers = dict(settings.api.default_headers)
        headers["user-agent"] = user_agent or settings.api.user_agent
        config = APIConfig(
            base_url=base_url or settings.api.base_url,
            timeout=timeout or settings.api.timeout,
            headers=headers,
        )
        super().__init__(config, session=session)

    def _build_request_params(self, **kwargs) -> Dict[str, Any]:
        """Build request parameters (no API key needed for Helium)."""
        return {key: value for key, value in kwargs.items() if value is not None}

    def _handle_response(self, response: requests.Response) -> Dict[str, Any]:
        """Handle Helium API response."""
        if not response.ok:
            message = self._error_message(response)
            self.logger.warning(
                f"API error for {response.url}: HTTP {response.status_code} {message}"
            )
            error_class = NotFoundError if response.status_code == 404 else APIError
            raise error_class(message, status_code=response.status_code, url=response.url)

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"Response from {response.url} is not valid JSON") from e

        if not isinstance(data, dict) or self.data_selector not in data:
            raise DecodeError(
                f"Response from {response.url} has no '{self.data_selector}' field"
            )
        return data

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Extract the server's error message from a failed response."""
        try:
            body = response.json()
        except ValueError:
            return response.text.strip() or response.reason or "Unknown error"

        if isinstance(body, dict):
            for key in ("error", "message", "detail"):
                if body.get(key):
                    return str(body[key])
        return str(body)

    def __repr__(self) -> str:
        return f"Client(base_url={self.config.base_url!r})"

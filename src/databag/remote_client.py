"""Configuration server HTTP client.

This module wraps ``requests`` for JSON calls against the server.
Status codes are classified into ``RemoteResult`` values so callers
branch on conflicts explicitly; transport errors propagate as raised.
"""

from __future__ import annotations

from http import HTTPStatus
from types import TracebackType
from typing import Any

import requests

from core.constants import DEFAULT_HTTP_TIMEOUT_SECONDS
from core.logging_config import get_logger
from core.types import RemoteResult, RemoteStatus
from databag.json_codec import parse, serialize

_LOGGER = get_logger(__name__)
_MAX_MESSAGE_CHARS = 500


class ConfigServerClient:
    """JSON client scoped to one configuration server base URL."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        """Create a client.

        Args:
            base_url: Server base URL.
            timeout_seconds: Per-request timeout.
            session: Optional session, mostly for tests.
        """
        self.base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._owns_session = session is None
        self._session = session or requests.Session()

    def close(self) -> None:
        """Release the HTTP session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "ConfigServerClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def post(self, path: str, body: object) -> RemoteResult:
        """POST a JSON-encoded body.

        Args:
            path: Server-relative path.
            body: Value encoded with the JSON codec.

        Returns:
            Classified request outcome.
        """
        return self._request(
            "POST",
            path,
            data=serialize(body),
            headers={"Content-Type": "application/json"},
        )

    def get(self, path: str) -> RemoteResult:
        return self._request("GET", path)

    def delete(self, path: str) -> RemoteResult:
        return self._request("DELETE", path)

    def _request(self, method: str, path: str, **kwargs: Any) -> RemoteResult:
        url = self.url_for(path)
        headers = {"Accept": "application/json"}
        headers.update(kwargs.pop("headers", {}))
        _LOGGER.debug("remote_request", method=method, url=url)
        response = self._session.request(
            method,
            url,
            headers=headers,
            timeout=self._timeout_seconds,
            **kwargs,
        )
        return classify_response(url, response)


def classify_response(url: str, response: requests.Response) -> RemoteResult:
    """Classify an HTTP response into a remote result.

    Args:
        url: Requested URL.
        response: Received response.

    Returns:
        Success with decoded payload, conflict for 409, or failure.
    """
    status_code = int(response.status_code)
    if status_code == HTTPStatus.CONFLICT:
        return RemoteResult(
            status=RemoteStatus.CONFLICT,
            url=url,
            status_code=status_code,
            message=_error_message(response),
        )
    if status_code // 100 != 2:
        return RemoteResult(
            status=RemoteStatus.FAILURE,
            url=url,
            status_code=status_code,
            message=_error_message(response),
        )
    if not response.text:
        return RemoteResult(status=RemoteStatus.SUCCESS, url=url, status_code=status_code)
    return RemoteResult(
        status=RemoteStatus.SUCCESS,
        url=url,
        status_code=status_code,
        payload=parse(response.text, source=url),
    )


def _error_message(response: requests.Response) -> str:
    message = response.text
    try:
        payload = response.json()
    except ValueError:
        return message[:_MAX_MESSAGE_CHARS]
    if isinstance(payload, dict):
        error_value = payload.get("error") or payload.get("message")
        if error_value:
            message = str(error_value)
    return message[:_MAX_MESSAGE_CHARS]

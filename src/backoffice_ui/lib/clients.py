"""
HTTP client factory and authenticated request helper for the REST backend.

Provides singleton access to a configured requests.Session and a
fetch_with_auth() helper that turns non-2xx responses into ApiError with
a user-presentable message.

Environment variables used:
- BACKOFFICE_API_URL: Backend base URL (e.g. https://api.example.com)
- BACKOFFICE_API_TOKEN: Bearer token for the Authorization header
- BACKOFFICE_API_TIMEOUT: Request timeout in seconds (default 30)
"""

import functools
import os
import uuid
from typing import Any, Mapping

import requests

from backoffice_ui.lib import logs, objects

LOG = logs.logger(__file__)

_DEFAULT_TIMEOUT = 30.0


class ApiError(Exception):
    """
    Raised when the backend rejects a request or cannot be reached.

    Attributes:
        status: HTTP status code, or None for transport failures.
    """

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


def base_url() -> str:
    """Return the configured backend base URL without a trailing slash."""
    url = os.getenv("BACKOFFICE_API_URL", "")
    assert url, "BACKOFFICE_API_URL is not set"
    return url.rstrip("/")


def timeout() -> float:
    """Return the request timeout in seconds."""
    return float(os.getenv("BACKOFFICE_API_TIMEOUT", _DEFAULT_TIMEOUT))


@functools.cache
def session() -> requests.Session:
    """
    Return a shared requests.Session carrying the auth headers.

    The token is sent both as a bearer Authorization header and as the
    legacy `token` header the backend also accepts.

    Returns:
        Configured Session instance.
    """
    s = requests.Session()
    token = os.getenv("BACKOFFICE_API_TOKEN")
    if token:
        s.headers.update({"Authorization": f"Bearer {token}", "token": token})
    s.headers.update({"Accept": "application/json"})
    return s


def fetch_with_auth(
    endpoint: str,
    method: str = "GET",
    params: Mapping[str, Any] | None = None,
    json: Any = None,
) -> dict:
    """
    Send an authenticated request and return the decoded JSON body.

    Args:
        endpoint: Path relative to the base URL (leading slash).
        method: HTTP method.
        params: Optional query parameters.
        json: Optional JSON body.

    Returns:
        The decoded response body (empty dict for empty bodies).

    Raises:
        ApiError: On transport failure or non-2xx status.
    """
    request_id = uuid.uuid4().hex[:8]
    url = f"{base_url()}{endpoint}"
    LOG.debug("Request [%s] %s %s params=%s", request_id, method, endpoint, params)
    try:
        response = session().request(
            method, url, params=params, json=json, timeout=timeout()
        )
    except requests.RequestException as exc:
        LOG.error("Request [%s] to %s failed: %s", request_id, endpoint, exc)
        raise ApiError(str(exc) or "Network request failed") from exc

    body = _decode(response)
    LOG.debug("Response [%s] from %s: %s", request_id, endpoint, objects.to_json(body))

    if not response.ok:
        message = _error_message(response.status_code, body)
        LOG.warning(
            "Request [%s] to %s returned %s: %s",
            request_id,
            endpoint,
            response.status_code,
            message,
        )
        raise ApiError(message, status=response.status_code)
    return body


def _decode(response: requests.Response) -> dict:
    if not response.content:
        return {}
    try:
        body = response.json()
    except ValueError:
        return {"message": response.text}
    return body if isinstance(body, dict) else {"data": body}


def _join(value: Any) -> str | None:
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    return str(value) if value else None


def _error_message(status: int, body: dict) -> str:
    """Map an error response to the message shown to the user."""
    if status == 401:
        return _join(body.get("message")) or "Unauthorized access - please log in again"
    if status == 403:
        data = body.get("data") if isinstance(body.get("data"), dict) else {}
        return (
            _join(data.get("message"))
            or _join(body.get("message"))
            or "Access denied"
        )
    if status == 500:
        return "Internal server error - please try again later"
    return _join(body.get("message")) or "An unknown error occurred"

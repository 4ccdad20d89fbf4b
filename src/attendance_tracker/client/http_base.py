from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import requests

from ..core.exceptions import RemoteServiceError, ServiceUnavailableError
from .connection import ApiConnection

logger = logging.getLogger(__name__)


@contextmanager
def api_session(conn: ApiConnection) -> Iterator[requests.Session]:
    session = conn.connect()
    try:
        yield session
    finally:
        session.close()


def _json_or_none(resp) -> Any:
    try:
        return resp.json()
    except ValueError:
        return None


def _error_message(payload: Any) -> Optional[str]:
    if isinstance(payload, dict):
        for key in ("error", "message"):
            value = payload.get(key)
            if value:
                return str(value)
    return None


def request_json(session: requests.Session, method: str, url: str, *, timeout: float, **kwargs) -> Any:
    """Send one request and return the decoded JSON body (None if empty).

    Transport failures become ServiceUnavailableError; non-2xx answers become
    RemoteServiceError carrying the remote ``error`` string when present.
    """
    try:
        resp = session.request(method, url, timeout=timeout, **kwargs)
    except requests.Timeout as e:
        logger.warning("Attendance service timed out: %s %s", method, url)
        raise ServiceUnavailableError("The attendance service did not respond in time") from e
    except requests.RequestException as e:
        logger.warning("Attendance service unreachable: %s %s (%s)", method, url, e)
        raise ServiceUnavailableError("Error connecting to server. Make sure the backend is running.") from e

    payload = _json_or_none(resp)
    if not resp.ok:
        message = _error_message(payload) or f"HTTP error! status: {resp.status_code}"
        logger.warning("Attendance service error %s on %s %s: %s", resp.status_code, method, url, message)
        raise RemoteServiceError(message, status_code=resp.status_code)
    return payload

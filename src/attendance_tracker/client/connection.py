from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import requests

from ..core.constants import DEFAULT_REQUEST_TIMEOUT


@dataclass
class ApiConfig:
    base_url: str
    timeout: float = DEFAULT_REQUEST_TIMEOUT

    def url(self, *parts) -> str:
        path = "/".join(str(p).strip("/") for p in parts)
        return f"{self.base_url.rstrip('/')}/{path}"


class ApiConnection:
    """HTTP session factory for the remote attendance service.

    Note: We create short-lived sessions per operation, the same way a DB
    connection factory hands out one connection per query.
    """

    def __init__(self, config: ApiConfig, *, session_factory: Callable[[], requests.Session] = requests.Session):
        self._config = config
        self._session_factory = session_factory

    @property
    def config(self) -> ApiConfig:
        return self._config

    def connect(self) -> requests.Session:
        session = self._session_factory()
        session.headers.update({"Accept": "application/json"})
        return session

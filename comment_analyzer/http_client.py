from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

import requests

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpConfig:
    timeout_sec: Optional[float]
    user_agent: str


class HttpClient:
    """
    Thin HTTP client wrapper:
    - Reusable session (connection pooling)
    - Optional timeout
    - One attempt per call; retry policy belongs to the caller

    A session passed in stays owned by the caller: its headers are left
    untouched and close() does not close it.
    """

    def __init__(self, config: HttpConfig, session: Optional[requests.Session] = None):
        self._cfg = config
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    def post_json(self, url: str, body: str, params: Optional[Mapping[str, str]] = None) -> str:
        """
        POST a serialized JSON document and return the response body as text.

        Raises:
            requests.HTTPError: non-2xx responses
            requests.RequestException: network errors and timeouts
        """
        resp = self._session.post(
            url,
            params=dict(params or {}),
            data=body.encode("utf-8"),
            headers={
                "Content-Type": "application/json",
                "User-Agent": self._cfg.user_agent,
            },
            timeout=self._cfg.timeout_sec,
        )
        resp.raise_for_status()
        resp.encoding = "utf-8"
        return resp.text

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

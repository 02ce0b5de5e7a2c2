from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional
from urllib.parse import quote, quote_plus

import requests

from comment_analyzer.attribute_types import AttributeType
from comment_analyzer.errors import EmptyInput, EmptyTypes, RequestFailed
from comment_analyzer.http_client import HttpClient, HttpConfig
from comment_analyzer.models import DEFAULT_USER_AGENT, AnalysisResult, ClientConfig
from comment_analyzer.request_builder import build_request_body, serialize_request
from comment_analyzer.response_parser import parse_response

if TYPE_CHECKING:
    from comment_analyzer.settings import ClientSettings

logger = logging.getLogger(__name__)

ENDPOINT = "https://commentanalyzer.googleapis.com/v1alpha1/comments:analyze"

_ERROR_BODY_PREVIEW = 200


class AttributeAnalysisClient:
    """
    Client for the comment analyzer `comments:analyze` endpoint.

    Construct once per API key and reuse; calls share the underlying
    requests.Session and keep no per-call state.
    """

    def __init__(
            self,
            api_key: str,
            do_not_store: bool,
            timeout_sec: Optional[float] = None,
            user_agent: str = DEFAULT_USER_AGENT,
            session: Optional[requests.Session] = None,
    ):
        self._cfg = ClientConfig(
            api_key=api_key,
            do_not_store=do_not_store,
            timeout_sec=timeout_sec,
            user_agent=user_agent,
        )
        self._http = HttpClient(HttpConfig(timeout_sec=timeout_sec, user_agent=user_agent), session=session)

    @classmethod
    def from_config(cls, cfg: ClientConfig, session: Optional[requests.Session] = None) -> "AttributeAnalysisClient":
        return cls(
            api_key=cfg.api_key,
            do_not_store=cfg.do_not_store,
            timeout_sec=cfg.timeout_sec,
            user_agent=cfg.user_agent,
            session=session,
        )

    @classmethod
    def from_settings(cls, s: "ClientSettings", session: Optional[requests.Session] = None) -> "AttributeAnalysisClient":
        return cls.from_config(s.to_client_config(), session=session)

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    def analyze(self, text: str, requested_types: Iterable[AttributeType]) -> AnalysisResult:
        """
        Score `text` for each requested attribute type.

        Raises:
            EmptyInput: text is empty (no request is sent)
            EmptyTypes: requested_types is empty (no request is sent)
            TypeError: requested_types holds something other than AttributeType
            RequestFailed: network error, timeout or non-2xx status
            ParsingFailed: response did not match the expected schema
        """
        if not text:
            raise EmptyInput()
        types = frozenset(requested_types)
        if not types:
            raise EmptyTypes()
        bad = [t for t in types if not isinstance(t, AttributeType)]
        if bad:
            raise TypeError(f"requested_types must contain AttributeType members, got {bad!r}")

        body = serialize_request(build_request_body(text, types, self._cfg.do_not_store))
        logger.debug(
            "Analyze request: attributes=%s chars=%s do_not_store=%s",
            sorted(t.wire_token for t in types),
            len(text),
            self._cfg.do_not_store,
        )

        try:
            raw = self._http.post_json(ENDPOINT, body, params={"key": self._cfg.api_key})
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            preview = e.response.text[:_ERROR_BODY_PREVIEW].strip() if e.response is not None else ""
            detail = f"HTTP {status}: {preview}" if preview else f"HTTP {status}"
            logger.warning("Analyze request rejected: status=%s", status)
            raise RequestFailed(detail, status_code=status) from e
        except requests.RequestException as e:
            detail = self._redact(f"{type(e).__name__}: {e}")
            logger.warning("Analyze request failed: err=%s", detail)
            raise RequestFailed(detail) from e

        return parse_response(raw)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "AttributeAnalysisClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _redact(self, message: str) -> str:
        # requests puts the full URL, query string included, in its error messages
        key = self._cfg.api_key
        if not key:
            return message
        for form in (key, quote_plus(key), quote(key, safe="")):
            message = message.replace(form, "***")
        return message

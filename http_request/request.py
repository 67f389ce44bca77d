"""Fluent builder for outbound HTTP requests.

Example::

    response = (
        HttpRequest.create()
        .set_url("https://example.org/api/items")
        .set_header("Authorization", "Bearer token")
        .set_body({"name": "widget"})
        .set_json(True)
        .post()
    )

Fields left as ``None`` are treated as unset and never appear in
:attr:`HttpRequest.payload`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from .executor import HttpRequestExecutor, default_executor

logger = logging.getLogger(__name__)

# (attribute, payload key) in payload order
_NAMED_FIELDS = (
    ("url", "url"),
    ("headers", "headers"),
    ("body", "body"),
    ("json", "json"),
    ("qs", "qs"),
    ("resolve_with_full_response", "resolveWithFullResponse"),
)
_FIELD_ALIASES = {key: attr for attr, key in _NAMED_FIELDS}
_FIELD_ALIASES["resolve_with_full_response"] = "resolve_with_full_response"


class HttpRequest:
    """Accumulate request fields and dispatch them through an executor."""

    def __init__(self, executor: Optional[HttpRequestExecutor] = None) -> None:
        self.url: Optional[str] = None
        self.headers: Optional[Dict[str, str]] = None
        self.body: Any = None
        self.json: Optional[bool] = None
        self.qs: Optional[Dict[str, Any]] = None
        self.resolve_with_full_response: Optional[bool] = None
        self.options: Optional[Dict[str, Any]] = None
        self._executor = executor or default_executor()

    @classmethod
    def create(cls, executor: Optional[HttpRequestExecutor] = None) -> "HttpRequest":
        """Return a new request with no fields set.

        Without ``executor`` the request dispatches through the shared
        :func:`~http_request.executor.default_executor`.
        """
        return cls(executor)

    @property
    def executor(self) -> HttpRequestExecutor:
        return self._executor

    @property
    def payload(self) -> Dict[str, Any]:
        """Options first, then every named field that is set."""
        payload: Dict[str, Any] = {}
        if self.options is not None:
            payload.update(self.options)
        for attr, key in _NAMED_FIELDS:
            value = getattr(self, attr)
            if value is not None:
                payload[key] = value
        return payload

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------
    def build(self, data: Optional[Mapping[str, Any]] = None, **fields: Any) -> "HttpRequest":
        """Merge ``data`` into the request.

        Named fields present in ``data`` overwrite the current values; ``None``
        values are skipped. Any other keys become the request's ``options``,
        replacing the previous options when at least one such key is given.
        """
        merged = dict(data or {})
        merged.update(fields)
        options: Dict[str, Any] = {}
        for key, value in merged.items():
            attr = _FIELD_ALIASES.get(key)
            if attr is None:
                options[key] = value
            elif value is not None:
                setattr(self, attr, value)
        if options:
            self.options = options
        return self

    def set_url(self, url: Optional[str]) -> "HttpRequest":
        self.url = url
        return self

    def set_header(self, key: str, value: str) -> "HttpRequest":
        if self.headers is None:
            self.headers = {}
        self.headers[key] = value
        return self

    def set_headers(self, headers: Optional[Dict[str, str]]) -> "HttpRequest":
        self.headers = headers
        return self

    def set_body(self, body: Any) -> "HttpRequest":
        self.body = body
        return self

    def set_json(self, json: Optional[bool]) -> "HttpRequest":
        self.json = json
        return self

    def set_resolve_with_full_response(self, resolve_with_full_response: Optional[bool]) -> "HttpRequest":
        self.resolve_with_full_response = resolve_with_full_response
        return self

    def set_qs(self, qs: Optional[Dict[str, Any]]) -> "HttpRequest":
        self.qs = qs
        return self

    def set_option(self, key: str, value: Any) -> "HttpRequest":
        """Set a single option, keeping the others."""
        return self.build({**(self.options or {}), key: value})

    def set_options(self, options: Mapping[str, Any]) -> "HttpRequest":
        """Replace all options; named fields in ``options`` still go to their fields."""
        self.options = {}
        return self.build(options)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------
    def get(self, payload: Optional[Mapping[str, Any]] = None) -> Any:
        return self.execute("get", payload)

    def post(self, payload: Optional[Mapping[str, Any]] = None) -> Any:
        return self.execute("post", payload)

    def put(self, payload: Optional[Mapping[str, Any]] = None) -> Any:
        return self.execute("put", payload)

    def delete(self, payload: Optional[Mapping[str, Any]] = None) -> Any:
        return self.execute("delete", payload)

    def execute(self, method: str, payload: Optional[Mapping[str, Any]] = None) -> Any:
        """Send ``payload``, or the current :attr:`payload` when omitted."""
        if payload is None:
            payload = self.payload
        return self._executor.execute(method, payload)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.payload!r})"


__all__ = ["HttpRequest"]

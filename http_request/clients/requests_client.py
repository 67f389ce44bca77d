"""HTTP client backed by :mod:`requests`."""

from __future__ import annotations

from typing import Any, Dict, Mapping
import logging

import requests

from .base_http_client import BaseHttpClient

logger = logging.getLogger(__name__)

# Payload keys forwarded to ``requests`` under the same name.
_PASSTHROUGH_KEYS = {
    "timeout",
    "auth",
    "cookies",
    "verify",
    "allow_redirects",
    "proxies",
    "cert",
    "files",
    "stream",
}
_HANDLED_KEYS = {"url", "headers", "body", "json", "qs", "resolveWithFullResponse", "simple"}


class RequestsClient(BaseHttpClient):
    """Translate request payloads into :meth:`requests.Session.request` calls.

    Non-2xx responses raise :class:`requests.HTTPError` unless the payload
    sets ``simple`` to ``False``. The decoded body is returned, or the
    :class:`requests.Response` itself when ``resolveWithFullResponse`` is set.
    """

    def __init__(
        self,
        *,
        timeout: float | None = None,
        headers: Mapping[str, str] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.session = session or requests.Session()
        if headers:
            self.session.headers.update(headers)
        self.timeout = timeout
        logger.debug("RequestsClient initialized with timeout=%s", timeout)

    @classmethod
    def from_config(cls, config: Any) -> "RequestsClient":
        """Create a client using the defaults from a :class:`Config`."""
        headers = {"User-Agent": config.user_agent}
        headers.update(config.default_headers or {})
        return cls(timeout=config.timeout or None, headers=headers)

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------
    def __enter__(self) -> "RequestsClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying :class:`requests.Session`."""
        self.session.close()

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------
    def get(self, payload: Dict[str, Any]) -> Any:
        return self.request("GET", payload)

    def post(self, payload: Dict[str, Any]) -> Any:
        return self.request("POST", payload)

    def put(self, payload: Dict[str, Any]) -> Any:
        return self.request("PUT", payload)

    def delete(self, payload: Dict[str, Any]) -> Any:
        return self.request("DELETE", payload)

    def request(self, method: str, payload: Mapping[str, Any]) -> Any:
        """Send ``payload`` with ``method`` and return the decoded result."""
        url = payload["url"]
        kwargs = self._build_kwargs(payload)
        logger.debug("Performing %s request to %s with %s", method, url, kwargs)
        response = self.session.request(method, url, **kwargs)
        logger.info("%s %s -> %s", method, url, response.status_code)
        if payload.get("simple", True):
            response.raise_for_status()
        if payload.get("resolveWithFullResponse"):
            return response
        return self._decode_body(response, bool(payload.get("json")))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_kwargs(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {}
        if payload.get("headers"):
            kwargs["headers"] = dict(payload["headers"])
        if payload.get("qs") is not None:
            kwargs["params"] = payload["qs"]
        if "body" in payload:
            if payload.get("json"):
                kwargs["json"] = payload["body"]
            else:
                kwargs["data"] = payload["body"]
        for key, value in payload.items():
            if key in _PASSTHROUGH_KEYS:
                kwargs[key] = value
            elif key not in _HANDLED_KEYS:
                logger.warning("Ignoring unsupported request option %s", key)
        if "timeout" not in kwargs and self.timeout:
            kwargs["timeout"] = self.timeout
        return kwargs

    @staticmethod
    def _decode_body(response: requests.Response, as_json: bool) -> Any:
        if not as_json:
            return response.text
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            logger.debug("Response from %s is not valid JSON", response.url)
            return response.text


__all__ = ["RequestsClient"]

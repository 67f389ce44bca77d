"""Validate request payloads and hand them to an HTTP client."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .clients import VERBS, BaseHttpClient, create_http_client
from .errors import BadRequest

logger = logging.getLogger(__name__)


class HttpRequestExecutor:
    """Dispatch payloads to ``client`` after checking they carry a ``url``.

    The executor keeps no per-request state; the same instance can serve any
    number of :class:`~http_request.request.HttpRequest` objects.
    """

    def __init__(self, client: Optional[BaseHttpClient] = None) -> None:
        self._client = client

    @property
    def client(self) -> BaseHttpClient:
        if self._client is None:
            logger.debug("No HTTP client supplied; creating the configured default")
            self._client = create_http_client()
        return self._client

    def get(self, payload: Mapping[str, Any]) -> Any:
        return self.execute("get", payload)

    def post(self, payload: Mapping[str, Any]) -> Any:
        return self.execute("post", payload)

    def put(self, payload: Mapping[str, Any]) -> Any:
        return self.execute("put", payload)

    def delete(self, payload: Mapping[str, Any]) -> Any:
        return self.execute("delete", payload)

    def execute(self, method: str, payload: Mapping[str, Any]) -> Any:
        """Call the client's ``method`` function with ``payload`` unchanged.

        Raises:
            BadRequest: ``payload`` is empty or has no ``url``. The client is
                not called.
            ValueError: ``method`` is not one of get, post, put or delete.
        """
        if not payload or not payload.get("url"):
            logger.warning("Rejecting %s request with empty payload or url", method)
            raise BadRequest()
        verb = method.lower()
        if verb not in VERBS:
            raise ValueError(f"Unsupported HTTP method: {method}")
        logger.debug("Dispatching %s %s", verb.upper(), payload["url"])
        return getattr(self.client, verb)(payload)


_default_executor: Optional[HttpRequestExecutor] = None


def default_executor() -> HttpRequestExecutor:
    """Return the executor shared by requests created without one."""
    global _default_executor
    if _default_executor is None:
        _default_executor = HttpRequestExecutor()
    return _default_executor


__all__ = ["HttpRequestExecutor", "default_executor"]

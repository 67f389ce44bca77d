"""Structured errors raised by the request executor.

Errors are described by an :class:`ErrorDefinition` kept in a small registry
keyed by ``code`` so callers can tell them apart from transport failures
raised by the HTTP client.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping

from .models import ErrorDefinition

logger = logging.getLogger(__name__)

_REGISTRY: Dict[str, ErrorDefinition] = {}


def register_errors(definitions: Iterable[ErrorDefinition | Mapping[str, Any]]) -> None:
    """Add ``definitions`` to the registry, replacing entries with the same code."""
    for definition in definitions:
        if not isinstance(definition, ErrorDefinition):
            definition = ErrorDefinition(**definition)
        logger.debug("Registering error definition %s", definition.code)
        _REGISTRY[definition.code] = definition


def get_definition(code: str) -> ErrorDefinition:
    """Return the registered definition for ``code``."""
    try:
        return _REGISTRY[code]
    except KeyError:
        raise KeyError(f"Unknown error code: {code}") from None


class HttpRequestError(Exception):
    """Base class for errors detected before a request is dispatched."""

    def __init__(self, definition: ErrorDefinition) -> None:
        super().__init__(f"{definition.code}: {definition.title} - {definition.message}")
        self.definition = definition

    @property
    def code(self) -> str:
        return self.definition.code

    @property
    def domain(self) -> str:
        return self.definition.domain

    @property
    def title(self) -> str:
        return self.definition.title

    @property
    def message(self) -> str:
        return self.definition.message

    def __reduce__(self):
        return type(self), (self.definition,)

    def to_dict(self) -> Dict[str, str]:
        return self.definition.model_dump()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpRequestError):
            return NotImplemented
        return type(self) is type(other) and self.definition == other.definition

    def __hash__(self) -> int:
        return hash((type(self), self.code))


BAD_REQUEST_CODE = "HttpRequestExecutor_400"

register_errors(
    [
        {
            "code": BAD_REQUEST_CODE,
            "domain": "HttpRequest",
            "title": "Bad Request",
            "message": "Cannot execute HttpRequest with empty payload or url",
        }
    ]
)


class BadRequest(HttpRequestError):
    """Raised when a payload is empty or has no ``url``."""

    def __init__(self) -> None:
        super().__init__(get_definition(BAD_REQUEST_CODE))

    def __reduce__(self):
        return type(self), ()


__all__ = [
    "BAD_REQUEST_CODE",
    "BadRequest",
    "HttpRequestError",
    "get_definition",
    "register_errors",
]

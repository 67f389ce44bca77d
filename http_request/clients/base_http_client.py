"""Abstract base class for HTTP clients consumed by the executor."""

from abc import ABC, abstractmethod
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)

VERBS = ("get", "post", "put", "delete")


class BaseHttpClient(ABC):
    """Interface that all HTTP clients must implement.

    Each verb receives the payload dictionary assembled by
    :class:`~http_request.request.HttpRequest` and returns the response body,
    or the full response when ``resolveWithFullResponse`` is set.
    """

    @abstractmethod
    def get(self, payload: Dict[str, Any]) -> Any:
        raise NotImplementedError

    @abstractmethod
    def post(self, payload: Dict[str, Any]) -> Any:
        raise NotImplementedError

    @abstractmethod
    def put(self, payload: Dict[str, Any]) -> Any:
        raise NotImplementedError

    @abstractmethod
    def delete(self, payload: Dict[str, Any]) -> Any:
        raise NotImplementedError


__all__ = ["BaseHttpClient", "VERBS"]

"""HTTP client implementations."""

import logging

from typing import Optional

from .base_http_client import BaseHttpClient, VERBS
from .requests_client import RequestsClient
from http_request.configs.config import load_config

logger = logging.getLogger(__name__)


def create_http_client(config_path: Optional[str] = None) -> BaseHttpClient:
    """Return the default HTTP client configured from ``config_path``."""
    config = load_config(config_path)
    logger.debug("Creating RequestsClient for %s", config.app_name)
    return RequestsClient.from_config(config)


__all__ = ["BaseHttpClient", "RequestsClient", "VERBS", "create_http_client"]

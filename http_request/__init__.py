"""
HTTP Request - Main Package

A fluent builder for outbound HTTP requests and the executor that hands the
assembled payload to an HTTP client.
"""

__version__ = "1.0.0"

from .errors import BadRequest, HttpRequestError
from .executor import HttpRequestExecutor
from .request import HttpRequest

__all__ = [
    "BadRequest",
    "HttpRequest",
    "HttpRequestError",
    "HttpRequestExecutor",
    "__version__",
]

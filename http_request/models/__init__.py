"""Data models shared across the package."""

from .errors import ErrorDefinition

__all__ = ["ErrorDefinition"]

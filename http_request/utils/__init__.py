"""Utility helpers for the HTTP request builder."""

from .parsing import parse_pair, parse_pairs, parse_value

__all__ = ["parse_pair", "parse_pairs", "parse_value"]

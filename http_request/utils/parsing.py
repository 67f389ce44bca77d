import json
import logging
from typing import Any, Dict, Iterable, Tuple

logger = logging.getLogger(__name__)


def parse_value(text: str) -> Any:
    """Return ``text`` decoded as JSON, or unchanged when it is not JSON."""
    try:
        return json.loads(text)
    except ValueError:
        return text


def parse_pair(text: str, sep: str = "=") -> Tuple[str, str]:
    """Split ``text`` at the first ``sep`` into a stripped key and value."""
    key, found, value = text.partition(sep)
    key = key.strip()
    if not found or not key:
        raise ValueError(f"Expected KEY{sep}VALUE, got {text!r}")
    return key, value.strip()


def parse_pairs(items: Iterable[str], sep: str = "=", *, coerce: bool = True) -> Dict[str, Any]:
    """Build a dictionary from ``KEY<sep>VALUE`` strings; later keys win."""
    result: Dict[str, Any] = {}
    for item in items:
        key, value = parse_pair(item, sep)
        result[key] = parse_value(value) if coerce else value
    logger.debug("Parsed pairs: %s", result)
    return result

"""Helpers for loosely-typed JSON values coming from the prover service."""

from collections.abc import Mapping
from typing import Any, List


def is_present(value: Any) -> bool:
    """JSON-truthiness: None, "", 0 and False are absent; empty containers are present."""
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value != 0
    return True


def get_present(document: Any, key: str) -> Any:
    """Return document[key] when document is a mapping and the value is present, else None."""
    if not isinstance(document, Mapping):
        return None
    value = document.get(key)
    return value if is_present(value) else None


def as_list(value: Any) -> List[Any]:
    """Wrap a scalar in a single-element list; lists pass through."""
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    return [value]

"""Canonical JSON serialization for CLI and report output.

Hits keep traversal order, so only object keys are sorted. Output is
UTF-8 (no ASCII escaping) with stable separators, which keeps reports
byte-stable between runs over the same inputs.
"""

import json
from typing import Any


def canonical_dumps(obj: Any, pretty: bool = False) -> str:
    """
    Serialize obj with sorted keys.

    Args:
        obj: JSON-compatible Python object
        pretty: indent by two spaces instead of using compact separators

    Returns:
        JSON string
    """
    if pretty:
        return json.dumps(obj, sort_keys=True, indent=2, ensure_ascii=False)
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False
    )

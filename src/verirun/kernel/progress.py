"""Progress document normalization.

The prover service has shipped several envelope shapes for the rule tree
over time, and any layer may arrive JSON-encoded as a string:

    {"verificationProgress": "<json>"}             -> {"rules": [...]} | [...] | {"children": [...]}
    {"rules": [...]}
    [...]
    {"children": [...]}

Recognition is an ordered table of (name, predicate, extractor) rules.
The first rule whose predicate holds and whose extractor yields roots wins.
"""

from __future__ import annotations

import json
from typing import Any, Callable, List, NamedTuple, Optional

from verirun._internal.values import as_list, get_present


def parse_maybe_json(value: Any) -> Any:
    """Decode a JSON string, or return value unchanged (never raises)."""
    if isinstance(value, str):
        try:
            return json.loads(value)
        except ValueError:
            return value
    return value


class ShapeRule(NamedTuple):
    name: str
    predicate: Callable[[Any], bool]
    extractor: Callable[[Any], Optional[List[Any]]]


def _field_rule(name: str, key: str) -> ShapeRule:
    return ShapeRule(
        name,
        lambda doc: get_present(doc, key) is not None,
        lambda doc: as_list(get_present(doc, key)),
    )


_LIST_RULE = ShapeRule("list", lambda doc: isinstance(doc, list), lambda doc: doc)

# Shapes found inside a decoded verificationProgress value.
_INNER_SHAPES: List[ShapeRule] = [
    _field_rule("rules", "rules"),
    _LIST_RULE,
    _field_rule("children", "children"),
]


def _resolve(document: Any, shapes: List[ShapeRule]) -> tuple[Optional[str], Optional[List[Any]]]:
    for rule in shapes:
        if not rule.predicate(document):
            continue
        roots = rule.extractor(document)
        if roots is not None:
            return rule.name, roots
    return None, None


def _from_verification_progress(document: Any) -> Optional[List[Any]]:
    inner = parse_maybe_json(document.get("verificationProgress"))
    _, roots = _resolve(inner, _INNER_SHAPES)
    return roots


ROOT_SHAPES: List[ShapeRule] = [
    ShapeRule(
        "verificationProgress",
        lambda doc: isinstance(doc, dict) and doc.get("verificationProgress") is not None,
        _from_verification_progress,
    ),
    _field_rule("rules", "rules"),
    _LIST_RULE,
    _field_rule("children", "children"),
]


def detect_progress_shape(document: Any) -> Optional[str]:
    """Name of the envelope rule that matches document, or None."""
    if document is None:
        return None
    name, _ = _resolve(parse_maybe_json(document), ROOT_SHAPES)
    return name


def get_progress_roots(document: Any) -> List[Any]:
    """Top-level rule nodes of a progress document ([] when nothing matches)."""
    if document is None:
        return []
    _, roots = _resolve(parse_maybe_json(document), ROOT_SHAPES)
    return roots if roots is not None else []

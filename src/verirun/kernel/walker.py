"""Status tree walker: collect rule hits under a selection policy."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from verirun.codes import RuleStatus
from verirun.contracts import RuleHit, RunAddress, SelectionPolicy
from verirun.kernel.locator import build_evidence_url

logger = logging.getLogger(__name__)

PATH_SEPARATOR = " > "

# Inline diagnostic payloads copied into the snapshot of output-less hits.
SNAPSHOT_FIELDS = (
    "message",
    "counterExample",
    "counterexample",
    "trace",
    "callTrace",
    "output_type_information",
    "contract_call_summaries",
    "storage_initial_state",
    "assertions",
    "assertMessage",
    "treeViewPath",
    "variables",
    "callResolutionWarnings",
)

_JSON_FILE = re.compile(r"\.json\Z", re.IGNORECASE)

_DEFAULT_POLICY = SelectionPolicy()


def _list_field(node: Mapping, key: str) -> List[Any]:
    value = node.get(key)
    return value if isinstance(value, list) else []


def is_selected(status: str, label: str, policy: SelectionPolicy) -> bool:
    """Primary selection predicate for a node with a status and output files."""
    needle = policy.rule_match_needle
    if needle is not None and needle in label.lower():
        return True
    if policy.include_all:
        return True
    kind = RuleStatus.classify(status)
    if policy.include_satisfied:
        return kind is not RuleStatus.VERIFIED
    return kind.is_failure


def _snapshot(node: Mapping, status: str) -> Dict[str, Any]:
    snapshot: Dict[str, Any] = {"name": node.get("name"), "status": status}
    for key in SNAPSHOT_FIELDS:
        if key in node:
            snapshot[key] = node[key]
    return snapshot


def _hits_for_node(
    node: Mapping,
    label: str,
    status: str,
    address: RunAddress,
    policy: SelectionPolicy,
) -> List[RuleHit]:
    if not status:
        return []
    output = _list_field(node, "output")

    if output and is_selected(status, label, policy):
        return [
            RuleHit(
                rule_name=label,
                status=status,
                output_file=output_file,
                url=build_evidence_url(address, output_file),
            )
            for output_file in output
            if isinstance(output_file, str) and _JSON_FILE.search(output_file)
        ]

    if (
        policy.include_satisfied
        and not output
        and RuleStatus.classify(status) is not RuleStatus.VERIFIED
    ):
        return [
            RuleHit(
                rule_name=label,
                status=status,
                output_file=None,
                url=None,
                node_snapshot=_snapshot(node, status),
            )
        ]
    return []


def collect_rule_hits(
    node: Any,
    address: RunAddress,
    policy: Optional[SelectionPolicy] = None,
    path: Sequence[str] = (),
) -> List[RuleHit]:
    """Pre-order walk of node and its descendants.

    Returns a new list per call. Descendants are visited whether or not
    the node itself was selected. The walk uses an explicit stack, so tree
    depth is not bounded by the interpreter's recursion limit.
    """
    policy = policy or _DEFAULT_POLICY
    hits: List[RuleHit] = []
    stack: List[Tuple[Any, Tuple[str, ...]]] = [(node, tuple(path))]
    while stack:
        current, parent_path = stack.pop()
        if not isinstance(current, Mapping):
            continue

        name = current.get("name") or ""
        status = str(current.get("status") or "").upper()
        node_path = parent_path + (str(name),)
        label = PATH_SEPARATOR.join(node_path)

        hits.extend(_hits_for_node(current, label, status, address, policy))
        # Reversed so the first child is popped first.
        for child in reversed(_list_field(current, "children")):
            stack.append((child, node_path))
    return hits


def collect_from_roots(
    roots: Iterable[Any],
    address: RunAddress,
    policy: Optional[SelectionPolicy] = None,
) -> List[RuleHit]:
    """Concatenate the hits of every root, in root order."""
    hits: List[RuleHit] = []
    for root in roots:
        hits.extend(collect_rule_hits(root, address, policy))
    logger.debug("collected %d rule hits", len(hits))
    return hits

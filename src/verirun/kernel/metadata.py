"""Job metadata summarization (output.json of a prover run)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from verirun.codes import RuleStatus
from verirun.contracts import JobMetadata, RulesSummary
from verirun._internal.values import is_present

SCALAR_FIELDS = {
    "job_status": "jobStatus",
    "prover_time": "proverTime",
    "contract_name": "contractName",
    "spec_file": "specFile",
    "solc_version": "solcVersion",
    "prover_version": "proverVersion",
}


def summarize_job_metadata(document: Any) -> Optional[JobMetadata]:
    """Project a metadata document onto JobMetadata (None for null and primitives).

    A JSON array is an object with none of the expected fields, so it maps
    to a JobMetadata whose fields are all None.
    """
    if isinstance(document, list):
        return JobMetadata()
    if not isinstance(document, Mapping):
        return None

    values = {attr: document.get(key) for attr, key in SCALAR_FIELDS.items()}

    conf = document.get("conf")
    if isinstance(conf, Mapping):
        rule_sanity = conf.get("rule_sanity")
        if rule_sanity is None:
            rule_sanity = conf.get("ruleSanity")
        values["rule_sanity"] = rule_sanity

    rules = document.get("rules")
    if is_present(rules):
        values["rules_summary"] = count_rules(rules)

    return JobMetadata(**values)


def _fail_count(value: Any) -> int:
    if isinstance(value, list):
        outcome_lists = value
    else:
        outcome_lists = [
            outcomes for status, outcomes in value.items()
            if status != RuleStatus.SUCCESS.value
        ]
    return sum(len(outcomes) for outcomes in outcome_lists if isinstance(outcomes, list))


def count_rules(rules: Any) -> RulesSummary:
    """Count passed/failed rules from either a keyed mapping or a list of rule entries.

    Mapping values are either a status string (passes iff "SUCCESS") or an
    object of status -> list of outcomes; the latter passes iff no outcome
    is recorded under a key other than SUCCESS. A rule with no recorded
    outcomes at all therefore counts as passed. A list value is read as an
    object keyed by index, so only its nested lists count as failures.
    """
    passed = failed = 0
    if isinstance(rules, Mapping):
        for value in rules.values():
            if isinstance(value, str):
                if value == RuleStatus.SUCCESS.value:
                    passed += 1
                else:
                    failed += 1
            elif isinstance(value, (Mapping, list)):
                fail_count = _fail_count(value)
                if fail_count == 0:
                    passed += 1
                else:
                    failed += 1
    elif isinstance(rules, list):
        for entry in rules:
            status = entry.get("status") if isinstance(entry, Mapping) else None
            if RuleStatus.classify(status).is_passing:
                passed += 1
            else:
                failed += 1
    return RulesSummary(passed=passed, failed=failed, total=passed + failed)

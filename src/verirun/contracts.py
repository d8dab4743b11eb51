"""Public result models for verirun package."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RunAddress(BaseModel):
    """Addressing components of a result-service URL."""
    origin: str  # scheme://host[:port]
    run_id: Optional[str] = None
    output_id: Optional[str] = None
    anonymous_key: str = ""  # never None, so URL building never emits "None"

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    @property
    def is_complete(self) -> bool:
        return bool(self.run_id) and bool(self.output_id)


class SelectionPolicy(BaseModel):
    """Which rules the tree walker reports.

    Default: VIOLATED and SANITY_FAILED only.
    include_satisfied: any non-VERIFIED rule, including output-less ones.
    include_all: every rule that has output files.
    include_rule_match: additionally, rules whose " > " path contains the substring.
    """
    include_satisfied: bool = False
    include_all: bool = False
    include_rule_match: Optional[str] = None

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    @property
    def rule_match_needle(self) -> Optional[str]:
        """Lower-cased, trimmed match string, or None when blank."""
        if not isinstance(self.include_rule_match, str):
            return None
        needle = self.include_rule_match.strip().lower()
        return needle or None


class RuleHit(BaseModel):
    """A rule selected by the walker, with its evidence file URL (if any)."""
    rule_name: str  # path from root joined by " > "
    status: str  # upper-cased raw status
    output_file: Optional[str] = None
    url: Optional[str] = None
    node_snapshot: Optional[Dict[str, Any]] = None  # only for output-less hits

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> Dict[str, Any]:
        """camelCase dict; nodeSnapshot is left out when there is none."""
        data = self.model_dump(by_alias=True)
        if data.get("nodeSnapshot") is None:
            data.pop("nodeSnapshot", None)
        return data


class RulesSummary(BaseModel):
    passed: int = 0
    failed: int = 0
    total: int = 0

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class JobMetadata(BaseModel):
    """Normalized run metadata. Every field defaults to None."""
    job_status: Optional[Any] = None
    prover_time: Optional[Any] = None
    contract_name: Optional[Any] = None
    spec_file: Optional[Any] = None
    solc_version: Optional[Any] = None
    prover_version: Optional[Any] = None
    rule_sanity: Optional[Any] = None
    rules_summary: Optional[RulesSummary] = Field(default=None)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

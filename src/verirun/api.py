"""Public API for verirun.

High-level functions that compose the kernel: an orchestrator holding the
run URL and the raw documents calls these instead of the kernel modules.
"""

import logging
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field

from verirun.contracts import JobMetadata, RuleHit, RunAddress, SelectionPolicy
from verirun.kernel.locator import InvalidUrlError, parse_run_url
from verirun.kernel.metadata import summarize_job_metadata
from verirun.kernel.progress import detect_progress_shape, get_progress_roots
from verirun.kernel.transcript import extract_answer
from verirun.kernel.walker import collect_from_roots

logger = logging.getLogger(__name__)

__all__ = [
    "IncompleteRunAddressError",
    "InvalidUrlError",
    "RunReport",
    "build_run_report",
    "extract_answer",
    "find_rule_hits",
    "locate",
    "policy_from_flags",
    "summarize_job",
]


class IncompleteRunAddressError(ValueError):
    """Raised when a URL does not address a run output (.../output/<runId>/<outputId>)."""


class RunReport(BaseModel):
    """Everything derived from one verification run."""
    address: RunAddress
    policy: SelectionPolicy
    metadata: Optional[JobMetadata] = None
    hits: List[RuleHit] = Field(default_factory=list)

    def to_json_dict(self) -> dict:
        return {
            "address": self.address.model_dump(by_alias=True),
            "policy": self.policy.model_dump(by_alias=True),
            "metadata": self.metadata.model_dump(by_alias=True) if self.metadata else None,
            "hits": [hit.to_json_dict() for hit in self.hits],
        }


def locate(url: str) -> RunAddress:
    """Parse a result URL (raises InvalidUrlError)."""
    return parse_run_url(url)


def policy_from_flags(
    include_satisfied: bool = False,
    include_all: bool = False,
    rule_match: Optional[str] = None,
) -> SelectionPolicy:
    """Build a SelectionPolicy from CLI-style flags."""
    return SelectionPolicy(
        include_satisfied=bool(include_satisfied),
        include_all=bool(include_all),
        include_rule_match=rule_match if rule_match and rule_match.strip() else None,
    )


def _resolve_address(url_or_address: Union[str, RunAddress]) -> RunAddress:
    address = url_or_address if isinstance(url_or_address, RunAddress) else parse_run_url(url_or_address)
    if not address.is_complete:
        raise IncompleteRunAddressError(
            f"URL at {address.origin} does not contain /output/<runId>/<outputId>"
        )
    return address


def find_rule_hits(
    url_or_address: Union[str, RunAddress],
    progress: Any,
    policy: Optional[SelectionPolicy] = None,
) -> List[RuleHit]:
    """
    Collect the rules selected by policy from a progress document.

    Args:
        url_or_address: result URL or an already parsed RunAddress
        progress: progress document (any supported envelope, parsed or JSON string)
        policy: selection policy (default: VIOLATED and SANITY_FAILED)

    Returns:
        Hits in pre-order document order
    """
    address = _resolve_address(url_or_address)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("progress shape: %s", detect_progress_shape(progress))
    roots = get_progress_roots(progress)
    return collect_from_roots(roots, address, policy)


def summarize_job(document: Any) -> Optional[JobMetadata]:
    """Summarize a run's output.json document (None for non-objects)."""
    return summarize_job_metadata(document)


def build_run_report(
    url: Union[str, RunAddress],
    progress: Any,
    output: Any = None,
    policy: Optional[SelectionPolicy] = None,
) -> RunReport:
    """Address, selected rule hits and metadata summary for one run."""
    policy = policy or SelectionPolicy()
    address = _resolve_address(url)
    return RunReport(
        address=address,
        policy=policy,
        metadata=summarize_job_metadata(output),
        hits=find_rule_hits(address, progress, policy),
    )

"""verirun: failed-rule and metadata extraction for formal-verification run reports."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("verirun")
except PackageNotFoundError:
    __version__ = "dev"

from verirun.api import (
    IncompleteRunAddressError,
    RunReport,
    build_run_report,
    extract_answer,
    find_rule_hits,
    locate,
    policy_from_flags,
    summarize_job,
)
from verirun.codes import RuleStatus
from verirun.contracts import JobMetadata, RuleHit, RulesSummary, RunAddress, SelectionPolicy
from verirun.kernel.locator import InvalidUrlError

__all__ = [
    "__version__",
    "IncompleteRunAddressError",
    "InvalidUrlError",
    "JobMetadata",
    "RuleHit",
    "RuleStatus",
    "RulesSummary",
    "RunAddress",
    "RunReport",
    "SelectionPolicy",
    "build_run_report",
    "extract_answer",
    "find_rule_hits",
    "locate",
    "policy_from_flags",
    "summarize_job",
]

"""Rule status codes for verirun.

Statuses arrive from the prover as free-form, case-insensitive strings.
RuleStatus.classify() folds them onto a closed set so callers compare
against members instead of raw strings.
"""

from enum import Enum


class RuleStatus(str, Enum):
    """Known rule statuses plus an UNKNOWN catch-all."""

    # Passing
    VERIFIED = "VERIFIED"
    SUCCESS = "SUCCESS"

    # Failing
    VIOLATED = "VIOLATED"
    SANITY_FAILED = "SANITY_FAILED"

    # Anything else (TIMEOUT, ERROR, RUNNING, ...)
    UNKNOWN = "UNKNOWN"

    @classmethod
    def classify(cls, raw) -> "RuleStatus":
        """Map a raw status value onto a member (UNKNOWN when unrecognized)."""
        if not raw:
            return cls.UNKNOWN
        try:
            return cls(str(raw).upper())
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_passing(self) -> bool:
        return self in (RuleStatus.VERIFIED, RuleStatus.SUCCESS)

    @property
    def is_failure(self) -> bool:
        """True for the statuses the default selection policy reports."""
        return self in (RuleStatus.VIOLATED, RuleStatus.SANITY_FAILED)

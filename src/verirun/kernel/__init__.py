"""Pure kernel: URL parsing, progress tree walking, metadata and transcript extraction."""

from verirun.kernel.locator import (
    InvalidUrlError,
    build_evidence_url,
    build_result_base_url,
    parse_run_url,
)
from verirun.kernel.metadata import summarize_job_metadata
from verirun.kernel.progress import get_progress_roots, parse_maybe_json
from verirun.kernel.transcript import DEFAULT_TRANSCRIPT_RULES, TranscriptRules, extract_answer
from verirun.kernel.walker import collect_from_roots, collect_rule_hits

__all__ = [
    "InvalidUrlError",
    "build_evidence_url",
    "build_result_base_url",
    "parse_run_url",
    "summarize_job_metadata",
    "get_progress_roots",
    "parse_maybe_json",
    "DEFAULT_TRANSCRIPT_RULES",
    "TranscriptRules",
    "extract_answer",
    "collect_from_roots",
    "collect_rule_hits",
]

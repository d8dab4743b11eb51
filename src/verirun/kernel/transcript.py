"""Answer extraction from AI-assistant CLI transcripts.

A transcript interleaves timestamped tool-call echoes, config banners and
reasoning traces with the answer. Each run ends with a "tokens used:" line;
the answer is the non-meta text between that line and the nearest
timestamped line above it. The most recent run is preferred.

The regexes live in TranscriptRules so a new transcript format only needs
a different table, not a different algorithm.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranscriptRules:
    """Line patterns used by extract_answer."""
    timestamp_prefix: re.Pattern[str] = re.compile(r"^\[[\d\-T:.Z]+\]")
    tokens_marker: re.Pattern[str] = re.compile(r"tokens used:", re.IGNORECASE)
    final_answer: re.Pattern[str] = re.compile(r"^Final answer\s*:", re.IGNORECASE)
    user_instructions: str = "User instructions:"
    meta_patterns: Tuple[re.Pattern[str], ...] = field(default_factory=lambda: (
        re.compile(r"^\[[\d\-T:.Z]+\]"),
        re.compile(r"\] (exec|bash -lc|codex|thinking)\b", re.IGNORECASE),
        re.compile(r"workdir:|model:|provider:|approval:|sandbox:|reasoning", re.IGNORECASE),
        re.compile(r"OpenAI Codex", re.IGNORECASE),
    ))

    def is_meta(self, line: str) -> bool:
        return any(pattern.search(line) for pattern in self.meta_patterns)


DEFAULT_TRANSCRIPT_RULES = TranscriptRules()


def _clean(lines: List[str], rules: TranscriptRules) -> str:
    return "\n".join(line for line in lines if not rules.is_meta(line)).strip()


def _nearest_timestamp_above(lines: List[str], index: int, rules: TranscriptRules) -> int:
    for i in range(index - 1, -1, -1):
        if rules.timestamp_prefix.search(lines[i]):
            return i
    return -1


def _from_token_markers(lines: List[str], rules: TranscriptRules) -> Optional[str]:
    markers = [i for i, line in enumerate(lines) if rules.tokens_marker.search(line)]
    for marker in reversed(markers):
        start = _nearest_timestamp_above(lines, marker, rules)
        answer = _clean(lines[start + 1:marker], rules)
        if answer:
            logger.debug("answer taken from block ending at line %d", marker)
            return answer
    return None


def _from_final_answer(lines: List[str], rules: TranscriptRules) -> Optional[str]:
    for i, line in enumerate(lines):
        if rules.final_answer.search(line):
            logger.debug("answer taken after final-answer marker at line %d", i)
            return "\n".join(lines[i + 1:]).strip()
    return None


def _from_user_instructions(lines: List[str], rules: TranscriptRules) -> str:
    start = 0
    for i in range(len(lines) - 1, -1, -1):
        if rules.user_instructions in lines[i]:
            start = i + 1
            break
    kept = [line for line in lines[start:] if not rules.tokens_marker.search(line)]
    return _clean(kept, rules)


def extract_answer(raw_text: str, rules: TranscriptRules = DEFAULT_TRANSCRIPT_RULES) -> str:
    """Return the final answer in raw_text, or raw_text itself when none is found."""
    if not isinstance(raw_text, str) or not raw_text:
        return raw_text
    lines = raw_text.split("\n")

    answer = _from_token_markers(lines, rules)
    if answer is not None:
        return answer

    answer = _from_final_answer(lines, rules)
    if answer is not None:
        return answer

    return _from_user_instructions(lines, rules) or raw_text

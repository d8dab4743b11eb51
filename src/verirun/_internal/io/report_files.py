"""Load prover report documents and transcripts from local files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

logger = logging.getLogger(__name__)


class ReportFileError(ValueError):
    """Raised when a report file is missing or unreadable."""


def _normalize_path(path: Union[str, Path]) -> Path:
    return path if isinstance(path, Path) else Path(path)


def load_json_document(path: Union[str, Path]) -> Any:
    """Parse a JSON file. A top-level JSON string is returned as-is for the progress reader."""
    path = _normalize_path(path)
    if not path.exists():
        raise ReportFileError(f"Missing report file: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ReportFileError(f"Invalid JSON in {path}: {e}") from e
    logger.debug("loaded %s (%s)", path, type(data).__name__)
    return data


def load_transcript(path: Union[str, Path]) -> str:
    """Read a transcript as text; undecodable bytes are replaced."""
    path = _normalize_path(path)
    if not path.exists():
        raise ReportFileError(f"Missing transcript file: {path}")
    return path.read_text(encoding="utf-8", errors="replace")

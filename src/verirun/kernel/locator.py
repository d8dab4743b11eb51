"""Result-service URL parsing and evidence URL building."""

from __future__ import annotations

import re
from typing import List, Optional
from urllib.parse import parse_qs, urlencode, urlsplit

from verirun.contracts import RunAddress


class InvalidUrlError(ValueError):
    """Raised when a string cannot be parsed as an absolute URL."""


_TRAILING_SLASHES = re.compile(r"/+$")
_DEFAULT_PORTS = {"http": 80, "https": 443}
# Schemes whose URLs are unusable without a host; others (file:, mailto:) may omit it.
_HOST_REQUIRED = {"http", "https", "ws", "wss", "ftp"}

OUTPUT_SEGMENT = "output"
OUTPUTS_SEGMENT = "outputs"
ANONYMOUS_KEY_PARAM = "anonymousKey"
OUTPUT_PARAM = "output"


def parse_run_url(url: str) -> RunAddress:
    """Parse a result URL of the form .../output/<runId>/<outputId>?anonymousKey=<key>.

    Other path shapes are not an error: run_id/output_id come back as None.
    """
    if not isinstance(url, str):
        raise InvalidUrlError(f"URL must be a string, got {type(url).__name__}")

    stripped = _TRAILING_SLASHES.sub("", url.strip())
    try:
        parts = urlsplit(stripped)
        hostname = parts.hostname
        port = parts.port
    except ValueError as e:
        raise InvalidUrlError(f"Invalid URL {url!r}: {e}") from e

    scheme = parts.scheme.lower()
    if not scheme:
        raise InvalidUrlError(f"Invalid URL {url!r}: expected an absolute URL")
    if not hostname and scheme in _HOST_REQUIRED:
        raise InvalidUrlError(f"Invalid URL {url!r}: {scheme} URL without a host")

    run_id, output_id = _locate_ids([seg for seg in parts.path.split("/") if seg])

    return RunAddress(
        origin=_origin(scheme, hostname or "", port),
        run_id=run_id,
        output_id=output_id,
        anonymous_key=_first_query_value(parts.query, ANONYMOUS_KEY_PARAM),
    )


def build_result_base_url(address: RunAddress) -> str:
    """Base URL for auxiliary run files. Callers must check address.is_complete first."""
    return f"{address.origin}/result/{address.run_id}/{address.output_id}"


def build_evidence_url(address: RunAddress, output_file: str) -> str:
    """Base URL plus ?[anonymousKey=<key>&]output=<file>."""
    params = []
    if address.anonymous_key:
        params.append((ANONYMOUS_KEY_PARAM, address.anonymous_key))
    params.append((OUTPUT_PARAM, output_file))
    return f"{build_result_base_url(address)}?{urlencode(params)}"


def _locate_ids(segments: List[str]) -> tuple[Optional[str], Optional[str]]:
    for i, segment in enumerate(segments):
        previous = segments[i - 1] if i > 0 else None
        if segment == OUTPUT_SEGMENT and previous != OUTPUTS_SEGMENT:
            run_id = segments[i + 1] if i + 1 < len(segments) else None
            output_id = segments[i + 2] if i + 2 < len(segments) else None
            return run_id, output_id
    return None, None


def _origin(scheme: str, hostname: str, port: Optional[int]) -> str:
    host = f"[{hostname}]" if ":" in hostname else hostname
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        host = f"{host}:{port}"
    return f"{scheme}://{host}"


def _first_query_value(query: str, name: str) -> str:
    values = parse_qs(query, keep_blank_values=True).get(name)
    if not values:
        return ""
    return values[0] or ""

"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed verirun package.
Fixture files live in tests/fixtures/.
"""

import json
from pathlib import Path

import pytest

from verirun.contracts import RunAddress

FIXTURES = Path(__file__).resolve().parent / "fixtures"

RESULT_URL = "https://prover.certora.com/output/111/aaa?anonymousKey=key1"


def load_fixture(name: str):
    """Parse a JSON fixture by file name."""
    return json.loads((FIXTURES / name).read_text(encoding="utf-8"))


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def progress_tree():
    return load_fixture("progress_tree.json")


@pytest.fixture
def output_sample():
    return load_fixture("output_sample.json")


@pytest.fixture
def address() -> RunAddress:
    return RunAddress(
        origin="https://prover.certora.com",
        run_id="111",
        output_id="aaa",
        anonymous_key="key1",
    )

"""Tests for scripts/generate_schemas.py."""

import importlib.util
import json
from pathlib import Path

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "generate_schemas.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("generate_schemas", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_generate_schemas(tmp_path, capsys):
    written = _load_script().generate_schemas(tmp_path)

    assert sorted(path.name for path in written) == [
        "job_metadata.schema.json",
        "rule_hit.schema.json",
        "run_report.schema.json",
    ]
    hit_schema = json.loads((tmp_path / "rule_hit.schema.json").read_text(encoding="utf-8"))
    assert "ruleName" in hit_schema["properties"]
    assert "outputFile" in hit_schema["properties"]
    assert "Schema generation complete" in capsys.readouterr().out

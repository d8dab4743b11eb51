"""Generate JSON schemas for verirun's output models and save to schemas/ directory."""

import json
from pathlib import Path
from typing import List, Optional

from verirun.api import RunReport
from verirun.contracts import JobMetadata, RuleHit

SCHEMA_MODELS = {
    "rule_hit.schema.json": RuleHit,
    "job_metadata.schema.json": JobMetadata,
    "run_report.schema.json": RunReport,
}


def generate_schemas(schemas_dir: Optional[Path] = None) -> List[Path]:
    """Write one camelCase (by-alias) JSON schema per output model."""
    schemas_dir = schemas_dir or Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for filename, model in SCHEMA_MODELS.items():
        schema_path = schemas_dir / filename
        with open(schema_path, 'w', encoding='utf-8') as f:
            json.dump(model.model_json_schema(by_alias=True), f, indent=2, ensure_ascii=False)
            f.write("\n")
        print(f"Generated: {schema_path}")
        written.append(schema_path)

    print("\nSchema generation complete!")
    return written


if __name__ == "__main__":
    generate_schemas()

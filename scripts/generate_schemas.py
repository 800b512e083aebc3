"""Generate JSON schemas from Pydantic models and save to schemas/ directory."""

import json
from pathlib import Path

from ntdiff.api import BatchDiffResult, DiffResult, RegistrationVerdict
from ntdiff.kernel.model import NodeTypeDefinition


SCHEMAS = {
    "node_type_definition.schema.json": NodeTypeDefinition,
    "diff_result.schema.json": DiffResult,
    "batch_diff_result.schema.json": BatchDiffResult,
    "registration_verdict.schema.json": RegistrationVerdict,
}


def generate_schemas():
    """Generate JSON schemas for all input and result models."""
    schemas_dir = Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(exist_ok=True)

    for filename, model in SCHEMAS.items():
        schema_path = schemas_dir / filename
        with open(schema_path, 'w', encoding='utf-8') as f:
            json.dump(model.model_json_schema(), f, indent=2, ensure_ascii=False)
        print(f"Generated: {schema_path}")

    print("\nSchema generation complete!")


if __name__ == "__main__":
    generate_schemas()

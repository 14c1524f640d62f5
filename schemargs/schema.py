"""Validation of JSON schema files declaring a tool's flags."""

import json
from pathlib import Path
from typing import Dict, Any, Optional

from jsonschema import validate, ValidationError


SCHEMA_FILE_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "schemargs schema file",
    "type": "object",
    "properties": {
        "schema": {"type": "string"},
        "program": {"type": "string", "minLength": 1},
        "description": {"type": "string"},
    },
    "required": ["schema"],
    "additionalProperties": False,
}


class SchemaFileValidator:
    """Validates schema files against the bundled (or a custom) JSON schema"""

    def __init__(self, schema_path: Optional[Path] = None):
        if schema_path is None:
            self.schema = SCHEMA_FILE_SCHEMA
        else:
            with open(schema_path, 'r', encoding='utf-8') as f:
                self.schema = json.load(f)

    def validate(self, path: Path) -> Dict[str, Any]:
        """Validate a schema file and return its parsed contents"""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid schema file: {e}")

        try:
            validate(instance=document, schema=self.schema)
        except ValidationError as e:
            raise ValueError(f"Invalid schema file: {e.message}")

        return document

"""JSON Schema (draft 2020-12) emitter.

Works from the first sample only: every key present in an object is
listed in ``required`` and additional properties are rejected.
"""

import json
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError

from json_typegen.analysis.base import ValueKind, kind_of
from json_typegen.emitters.base import Emitter, OutputFormat
from json_typegen.errors import EmissionError
from json_typegen.inputs.base import NormalizedValue

DRAFT_2020_12 = "https://json-schema.org/draft/2020-12/schema"


class JsonSchemaEmitter(Emitter):
    """Emits a JSON Schema document describing one sample."""

    output_format = OutputFormat.JSON_SCHEMA

    def emit(self, source: NormalizedValue, name: str = "Root") -> str:
        return json.dumps(self.build_schema(source, name), indent=2, ensure_ascii=False)

    def build_schema(self, source: NormalizedValue, name: str = "Root") -> dict[str, Any]:
        """Build the schema document as a dict and check it against the metaschema.

        Raises:
            EmissionError: If the document is not a valid 2020-12 schema
        """
        try:
            document = {
                "$schema": DRAFT_2020_12,
                "$id": f"http://example.com/{name.lower()}.schema.json",
                "title": name,
                **self.schema_for(source),
            }
            Draft202012Validator.check_schema(document)
        except SchemaError as e:
            raise EmissionError(self.output_format, f"generated schema is invalid: {e.message}") from e
        except RecursionError as e:
            raise EmissionError(self.output_format, "sample is nested too deeply") from e

        return document

    def schema_for(self, value: NormalizedValue) -> dict[str, Any]:
        match kind_of(value):
            case ValueKind.NULL:
                return {"type": "null"}
            case ValueKind.BOOLEAN:
                return {"type": "boolean"}
            case ValueKind.NUMBER:
                return {"type": "number"}
            case ValueKind.STRING:
                return {"type": "string"}
            case ValueKind.ARRAY:
                if not value:
                    return {"type": "array", "items": {}}
                return {"type": "array", "items": self.schema_for(value[0])}
            case ValueKind.OBJECT:
                return {
                    "type": "object",
                    "properties": {key: self.schema_for(item) for key, item in value.items()},
                    "required": list(value.keys()),
                    "additionalProperties": False,
                }

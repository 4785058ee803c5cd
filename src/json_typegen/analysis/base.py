"""Structural schema model.

A schema is a tree of nodes derived from one or more samples:

- ObjectNode: one PropertyAnalysis per field name
- ArrayNode: the merged schema of all observed elements
- ScalarNode: a top-level scalar value

Emitters match on these classes; anything else is a programming error.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Union

from pydantic import BaseModel, Field

from json_typegen.errors import AnalysisError


class ValueKind(str, Enum):
    """Kinds of normalized values."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"


class StringPattern(str, Enum):
    """Semantic patterns detected in string values."""

    EMAIL = "email"
    UUID = "uuid"
    DATE = "date"
    URL = "url"


def kind_of(value: Any) -> ValueKind:
    """Classify a normalized value.

    Raises:
        AnalysisError: If the value is not part of the normalized data model
    """
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, list):
        return ValueKind.ARRAY
    raise AnalysisError(f"Unsupported value of type {type(value).__name__}")


def is_integral(value: Any) -> bool:
    """Whether a number has no fractional part (1 and 1.0 both count)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


@dataclass
class PropertyAnalysis:
    """Analysis of one field across all samples."""

    is_optional: bool
    is_union: bool
    observed_types: tuple[ValueKind, ...]
    observed_values: list[Any] = field(default_factory=list)
    pattern: StringPattern | None = None
    is_enum: bool = False
    nested: "SchemaNode | None" = None

    @property
    def distinct_values(self) -> list[Any]:
        """Observed values without duplicates, in first-seen order."""
        distinct: list[Any] = []
        for value in self.observed_values:
            if value not in distinct:
                distinct.append(value)
        return distinct

    def to_dict(self) -> dict[str, Any]:
        return {
            "isOptional": self.is_optional,
            "isUnion": self.is_union,
            "types": [t.value for t in self.observed_types],
            "pattern": self.pattern.value if self.pattern else None,
            "isEnum": self.is_enum,
            "values": self.distinct_values if self.is_enum else None,
            "nested": self.nested.to_dict() if self.nested is not None else None,
        }


@dataclass
class ObjectNode:
    """An object shape."""

    properties: dict[str, PropertyAnalysis] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {name: prop.to_dict() for name, prop in self.properties.items()},
        }


@dataclass
class ArrayNode:
    """An array shape; ``items`` is None when no element was observed."""

    items: "SchemaNode | None" = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "array",
            "items": self.items.to_dict() if self.items is not None else None,
        }


@dataclass
class ScalarNode:
    """A top-level scalar value."""

    observed_type: ValueKind

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.observed_type.value}


SchemaNode = Union[ObjectNode, ArrayNode, ScalarNode]


class AnalysisOptions(BaseModel):
    """Switches for the advanced (multi-sample) TypeScript output."""

    detect_optional_properties: bool = Field(default=True, description="Mark fields missing or null in some sample as optional")
    generate_enums: bool = Field(default=True, description="Generate enums for small repeated string value sets")
    detect_union_types: bool = Field(default=True, description="Render mixed-type fields as unions")
    use_readonly: bool = Field(default=True, description="Add readonly modifiers")
    generate_index_signatures: bool = Field(default=False, description="Add an index signature to shapes with many fields")
    detect_patterns: bool = Field(default=True, description="Annotate email, UUID, date and URL strings")

    # Option names as used by editor integrations
    CAMEL_CASE_NAMES: ClassVar[dict[str, str]] = {
        "detectOptionalProperties": "detect_optional_properties",
        "generateEnums": "generate_enums",
        "detectUnionTypes": "detect_union_types",
        "useReadonly": "use_readonly",
        "generateIndexSignatures": "generate_index_signatures",
        "detectPatterns": "detect_patterns",
    }

    @classmethod
    def smart_defaults(cls) -> "AnalysisOptions":
        """All detections on, index signatures off."""
        return cls()

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "AnalysisOptions":
        """Build options from a dict, accepting snake_case or camelCase keys.

        Missing keys fall back to the smart defaults.
        """
        values = {}
        for key, value in (data or {}).items():
            name = cls.CAMEL_CASE_NAMES.get(key, key)
            if name not in cls.model_fields:
                raise ValueError(f"Unknown analysis option '{key}'")
            values[name] = value
        return cls(**values)

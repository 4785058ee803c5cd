"""GraphQL SDL emitter.

Nested objects are hoisted into their own ``type`` named after the field
that holds them. Two sibling fields producing the same type name are not
disambiguated.
"""

import re

from json_typegen.analysis.base import ValueKind, is_integral, kind_of
from json_typegen.emitters.base import Emitter, OutputFormat
from json_typegen.errors import EmissionError
from json_typegen.inputs.base import NormalizedValue
from json_typegen.utils.helpers import capitalize_first

INVALID_NAME_CHARS = re.compile(r"[^_0-9A-Za-z]")


def graphql_name(value: str) -> str:
    """Replace characters GraphQL names cannot contain with underscores."""
    name = INVALID_NAME_CHARS.sub("_", value) or "_"
    if name[0].isdigit():
        name = f"_{name}"
    return name


class GraphQLEmitter(Emitter):
    """Emits GraphQL object type definitions for one sample."""

    output_format = OutputFormat.GRAPHQL

    def emit(self, source: NormalizedValue, name: str = "Root") -> str:
        if isinstance(source, list):
            if not source:
                raise EmissionError(self.output_format, "cannot derive a type from an empty array")
            source = source[0]

        if kind_of(source) is not ValueKind.OBJECT:
            raise EmissionError(
                self.output_format,
                f"root value must be an object, got {kind_of(source).value}",
            )

        types: list[str] = []
        try:
            self._define(source, name, types)
        except RecursionError as e:
            raise EmissionError(self.output_format, "sample is nested too deeply") from e
        return "\n\n".join(types)

    def _define(self, obj: dict, type_name: str, types: list[str]) -> None:
        """Append the definition for ``obj`` followed by its nested types."""
        if not obj:
            raise EmissionError(self.output_format, f"type {type_name} would have no fields")

        # Reserve the slot so this type precedes the ones it references
        slot = len(types)
        types.append("")

        fields = []
        for key, value in obj.items():
            fields.append(f"  {graphql_name(key)}: {self._field_type(value, key, types)}")

        types[slot] = f"type {type_name} {{\n" + "\n".join(fields) + "\n}"

    def _field_type(self, value: NormalizedValue, field_name: str, types: list[str]) -> str:
        match kind_of(value):
            case ValueKind.NULL | ValueKind.STRING:
                return "String"
            case ValueKind.BOOLEAN:
                return "Boolean"
            case ValueKind.NUMBER:
                return "Int" if is_integral(value) else "Float"
            case ValueKind.ARRAY:
                if not value:
                    return "[String]"
                return f"[{self._field_type(value[0], field_name, types)}]"
            case ValueKind.OBJECT:
                type_name = graphql_name(capitalize_first(field_name))
                self._define(value, type_name, types)
                return type_name

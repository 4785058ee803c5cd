"""Advanced TypeScript emitter.

Renders the merged multi-sample schema: optional fields, generated enums,
union types, pattern annotations and shared nested aggregates.
"""

import json

from json_typegen.analysis.base import (
    AnalysisOptions,
    ArrayNode,
    ObjectNode,
    PropertyAnalysis,
    ScalarNode,
    SchemaNode,
    StringPattern,
    ValueKind,
)
from json_typegen.emitters.base import Emitter, OutputFormat, TypeAccumulator
from json_typegen.errors import EmissionError
from json_typegen.utils.helpers import (
    enum_member_name,
    pascal_case,
    quote_property,
    singularize,
    unique_name,
)

PRIMITIVE_TYPES = {
    ValueKind.NULL: "null",
    ValueKind.BOOLEAN: "boolean",
    ValueKind.NUMBER: "number",
    ValueKind.STRING: "string",
}

PATTERN_TYPES = {
    StringPattern.EMAIL: "string /* email */",
    StringPattern.UUID: "string /* uuid */",
    StringPattern.DATE: "Date | string /* ISO date */",
    StringPattern.URL: "string /* URL */",
}

# Shapes with more fields than this get an index signature when enabled
INDEX_SIGNATURE_THRESHOLD = 10


def array_of(item_type: str) -> str:
    if " | " in item_type:
        return f"({item_type})[]"
    return f"{item_type}[]"


class AdvancedTypeScriptEmitter(Emitter):
    """Emits interfaces or type aliases from a merged SchemaNode."""

    uses_analysis = True

    def __init__(self, options: AnalysisOptions | None = None, as_type: bool = False):
        super().__init__(options)
        self.as_type = as_type
        self.output_format = OutputFormat.ADVANCED_TYPE if as_type else OutputFormat.ADVANCED_INTERFACE

    def emit(self, source: SchemaNode, name: str = "Root") -> str:
        accumulator = TypeAccumulator()
        accumulator.reserve(name)

        try:
            main = self._render_root(source, name, accumulator)
        except RecursionError as e:
            raise EmissionError(self.output_format, "schema is nested too deeply") from e

        return accumulator.render(main)

    def _render_root(self, source: SchemaNode, name: str, accumulator: TypeAccumulator) -> str:
        match source:
            case ObjectNode():
                return self._render_aggregate(source, name, accumulator)
            case ArrayNode():
                item_type = self._render_items(source, f"{name}Item", accumulator)
                return f"type {name} = {array_of(item_type)};"
            case ScalarNode(observed_type=kind):
                return f"type {name} = {PRIMITIVE_TYPES.get(kind, 'unknown')};"
            case _:
                raise EmissionError(self.output_format, f"unsupported schema node {type(source).__name__}")

    def _render_aggregate(self, node: ObjectNode, type_name: str, accumulator: TypeAccumulator) -> str:
        readonly = "readonly " if self.options.use_readonly else ""
        members = []
        for key, prop in node.properties.items():
            optional = "?" if self.options.detect_optional_properties and prop.is_optional else ""
            member_type = self._render_property(prop, key, accumulator)
            members.append(f"  {readonly}{quote_property(key)}{optional}: {member_type};")

        if self.options.generate_index_signatures and len(node.properties) > INDEX_SIGNATURE_THRESHOLD:
            members.append("  [key: string]: unknown;")

        header = f"type {type_name} = {{" if self.as_type else f"interface {type_name} {{"
        if not members:
            return f"{header}}}"
        return header + "\n" + "\n".join(members) + "\n}"

    def _render_property(self, prop: PropertyAnalysis, key: str, accumulator: TypeAccumulator) -> str:
        if self.options.generate_enums and prop.is_enum:
            return self._render_enum(prop, key, accumulator)

        if self.options.detect_union_types and prop.is_union:
            alternatives: list[str] = []
            for kind in prop.observed_types:
                alternative = PRIMITIVE_TYPES.get(kind, "unknown")
                if alternative not in alternatives:
                    alternatives.append(alternative)
            return " | ".join(alternatives)

        if self.options.detect_patterns and prop.pattern is not None:
            return PATTERN_TYPES[prop.pattern]

        if prop.nested is not None:
            return self._render_node(prop.nested, key, accumulator)

        if prop.observed_types:
            return PRIMITIVE_TYPES.get(prop.observed_types[0], "unknown")

        return "unknown"

    def _render_node(self, node: SchemaNode, context_name: str, accumulator: TypeAccumulator) -> str:
        match node:
            case ObjectNode():
                type_name = accumulator.reserve(pascal_case(context_name))
                accumulator.add(self._render_aggregate(node, type_name, accumulator))
                return type_name
            case ArrayNode():
                return array_of(self._render_items(node, singularize(context_name), accumulator))
            case ScalarNode(observed_type=kind):
                return PRIMITIVE_TYPES.get(kind, "unknown")
            case _:
                raise EmissionError(self.output_format, f"unsupported schema node {type(node).__name__}")

    def _render_items(self, node: ArrayNode, item_name: str, accumulator: TypeAccumulator) -> str:
        if node.items is None:
            return "unknown"
        return self._render_node(node.items, item_name, accumulator)

    def _render_enum(self, prop: PropertyAnalysis, key: str, accumulator: TypeAccumulator) -> str:
        enum_name = accumulator.reserve(pascal_case(key))

        members = []
        member_names: set[str] = set()
        for value in prop.distinct_values:
            member = unique_name(enum_member_name(value), member_names)
            member_names.add(member)
            members.append(f"  {member} = {json.dumps(value, ensure_ascii=False)}")

        accumulator.add(f"enum {enum_name} {{\n" + ",\n".join(members) + "\n}")
        return enum_name

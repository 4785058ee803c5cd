"""Basic TypeScript emitter driven by a single sample.

Shape inference is delegated to genson, which builds a JSON Schema from
the example value. The schema is then rendered as exported TypeScript
declarations, with structurally identical nested shapes sharing a name.
"""

from dataclasses import dataclass, field
from typing import Any

from genson import SchemaBuilder

from json_typegen.analysis.base import AnalysisOptions
from json_typegen.emitters.base import Emitter, OutputFormat
from json_typegen.emitters.typescript import array_of
from json_typegen.errors import EmissionError
from json_typegen.inputs.base import NormalizedValue
from json_typegen.utils.helpers import pascal_case, quote_property, singularize, unique_name

JSON_TYPES = {
    "string": "string",
    "integer": "number",
    "number": "number",
    "boolean": "boolean",
    "null": "null",
}

OPEN_OBJECT = "{ [key: string]: any }"


@dataclass
class _Definition:
    name: str
    members: list[str]
    references: list[str]


@dataclass
class _RenderState:
    """Per-call bookkeeping: named shapes, their signatures and references."""

    definitions: dict[str, _Definition] = field(default_factory=dict)
    signatures: dict[tuple, str] = field(default_factory=dict)
    taken: set[str] = field(default_factory=set)
    reference_stack: list[list[str]] = field(default_factory=list)
    root_references: list[str] = field(default_factory=list)


class BasicTypeScriptEmitter(Emitter):
    """Emits TypeScript interfaces or type aliases for one concrete sample."""

    def __init__(self, options: AnalysisOptions | None = None, as_type: bool = False):
        super().__init__(options)
        self.as_type = as_type
        self.output_format = OutputFormat.TYPE if as_type else OutputFormat.INTERFACE

    def emit(self, source: NormalizedValue, name: str = "Root") -> str:
        schema = self.infer_schema(source)
        try:
            return self._render_schema(schema, name)
        except RecursionError as e:
            raise EmissionError(self.output_format, "sample is nested too deeply") from e

    def _render_schema(self, schema: dict[str, Any], name: str) -> str:
        state = _RenderState()
        state.taken.add(name)

        if schema.get("type") == "object" and schema.get("properties"):
            self._render_object(schema, name, state, exact_name=name)
            return self._render_definitions(name, state)

        if schema.get("type") == "array":
            root_type = self._type_expression(schema, name, state, item_name=f"{name}Element")
        else:
            root_type = self._type_expression(schema, name, state)

        alias = f"export type {name} = {root_type};"
        if not state.definitions:
            return alias
        return alias + "\n\n" + self._render_ordered(state.root_references, state)

    def infer_schema(self, sample: NormalizedValue) -> dict[str, Any]:
        """Infer a JSON Schema for the sample with genson.

        Raises:
            EmissionError: If genson cannot handle the sample
        """
        try:
            builder = SchemaBuilder()
            builder.add_object(sample)
            return builder.to_schema()
        except Exception as e:
            raise EmissionError(self.output_format, f"type inference failed: {e}") from e

    def _type_expression(
        self,
        schema: dict[str, Any],
        context_name: str,
        state: _RenderState,
        item_name: str | None = None,
    ) -> str:
        if "anyOf" in schema:
            return self._union(
                [self._type_expression(sub, context_name, state, item_name) for sub in schema["anyOf"]]
            )

        json_type = schema.get("type")
        if isinstance(json_type, list):
            return self._union(
                [
                    self._type_expression({**schema, "type": t}, context_name, state, item_name)
                    for t in json_type
                ]
            )

        if json_type == "object":
            if not schema.get("properties"):
                return OPEN_OBJECT
            return self._render_object(schema, pascal_case(context_name), state)

        if json_type == "array":
            items = schema.get("items")
            if not items:
                return "any[]"
            return array_of(
                self._type_expression(items, item_name or singularize(context_name), state)
            )

        return JSON_TYPES.get(json_type, "any")

    def _union(self, alternatives: list[str]) -> str:
        unique: list[str] = []
        for alternative in alternatives:
            for part in alternative.split(" | "):
                if part not in unique:
                    unique.append(part)
        # null goes last, as in hand-written declarations
        unique.sort(key=lambda part: part == "null")
        return " | ".join(unique)

    def _render_object(
        self,
        schema: dict[str, Any],
        type_name: str,
        state: _RenderState,
        exact_name: str | None = None,
    ) -> str:
        required = set(schema.get("required", []))
        members = []
        signature = []

        state.reference_stack.append([])
        for key, sub_schema in schema["properties"].items():
            member_type = self._type_expression(sub_schema, key, state)
            optional = "" if key in required else "?"
            members.append(f"    {quote_property(key)}{optional}: {member_type};")
            signature.append((key, optional, member_type))
        references = state.reference_stack.pop()

        shape = tuple(signature)
        if exact_name is None and shape in state.signatures:
            name = state.signatures[shape]
        else:
            name = exact_name or unique_name(type_name, state.taken)
            state.taken.add(name)
            state.signatures.setdefault(shape, name)
            state.definitions[name] = _Definition(name, members, references)

        if state.reference_stack:
            state.reference_stack[-1].append(name)
        else:
            state.root_references.append(name)
        return name

    def _render_definitions(self, root_name: str, state: _RenderState) -> str:
        return self._render_ordered([root_name], state)

    def _render_ordered(self, roots: list[str], state: _RenderState) -> str:
        ordered: list[str] = []

        def visit(name: str) -> None:
            if name in ordered or name not in state.definitions:
                return
            ordered.append(name)
            for reference in state.definitions[name].references:
                visit(reference)

        for root in roots:
            visit(root)

        return "\n\n".join(self._render_declaration(state.definitions[name]) for name in ordered)

    def _render_declaration(self, definition: _Definition) -> str:
        if self.as_type:
            header = f"export type {definition.name} = {{"
        else:
            header = f"export interface {definition.name} {{"
        return header + "\n" + "\n".join(definition.members) + "\n}"

"""Emitters module - The output layer.

Emitters render a schema or a sample as:
- TypeScript interfaces and type aliases (basic and advanced)
- Zod schemas
- JSON Schema documents
- GraphQL SDL
"""

from json_typegen.emitters.base import Emitter, FORMAT_LABELS, OutputFormat, TypeAccumulator
from json_typegen.emitters.basic_typescript import BasicTypeScriptEmitter
from json_typegen.emitters.typescript import AdvancedTypeScriptEmitter
from json_typegen.emitters.zod import ZodEmitter
from json_typegen.emitters.json_schema import JsonSchemaEmitter
from json_typegen.emitters.graphql import GraphQLEmitter
from json_typegen.emitters.registry import EmitterRegistry

__all__ = [
    "Emitter",
    "FORMAT_LABELS",
    "OutputFormat",
    "TypeAccumulator",
    "BasicTypeScriptEmitter",
    "AdvancedTypeScriptEmitter",
    "ZodEmitter",
    "JsonSchemaEmitter",
    "GraphQLEmitter",
    "EmitterRegistry",
]

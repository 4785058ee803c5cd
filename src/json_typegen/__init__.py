"""
json-typegen - Generate type definitions from sample data.

Reads JSON, JSON5, YAML, CSV or JSON Lines samples, merges them into a
structural schema and emits TypeScript, Zod, JSON Schema or GraphQL.
"""

__version__ = "0.1.0"

from json_typegen.analysis.base import AnalysisOptions
from json_typegen.emitters.base import OutputFormat
from json_typegen.engine.generation_engine import (
    GenerationResult,
    TypeGenEngine,
    detect_format,
    generate,
    parse,
)
from json_typegen.errors import AnalysisError, EmissionError, FormatParseError, TypeGenError
from json_typegen.inputs.base import InputFormat, ParsedInput

__all__ = [
    "AnalysisOptions",
    "OutputFormat",
    "GenerationResult",
    "TypeGenEngine",
    "detect_format",
    "generate",
    "parse",
    "AnalysisError",
    "EmissionError",
    "FormatParseError",
    "TypeGenError",
    "InputFormat",
    "ParsedInput",
]

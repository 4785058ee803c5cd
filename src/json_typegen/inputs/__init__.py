"""Input module for reading sample data.

Supports JSON (with best-effort auto-repair), JSON5, YAML, CSV and JSON
Lines. Every format is normalized to the same value tree.

Example usage:
    from json_typegen.inputs import parse_input

    parsed = parse_input('{"id": 1, "name": "John"}')
    parsed.format  # InputFormat.JSON
    parsed.data    # {"id": 1, "name": "John"}
"""

from json_typegen.inputs.base import (
    FormatParser,
    InputFormat,
    NormalizedValue,
    ParsedInput,
    normalize,
)
from json_typegen.inputs.detector import detect_format
from json_typegen.inputs.repair import repair_json
from json_typegen.inputs.parser import InputParser, parse_input, parse_input_file

__all__ = [
    "FormatParser",
    "InputFormat",
    "NormalizedValue",
    "ParsedInput",
    "normalize",
    "detect_format",
    "repair_json",
    "InputParser",
    "parse_input",
    "parse_input_file",
]

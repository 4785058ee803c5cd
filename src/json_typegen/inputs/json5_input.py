"""JSON5 input parser."""

from typing import Any

import json5

from json_typegen.inputs.base import FormatParser, InputFormat


class Json5InputParser(FormatParser):
    """Parser for JSON5 text (comments, trailing commas, unquoted keys)."""

    format = InputFormat.JSON5

    def load(self) -> Any:
        return json5.loads(self.content)

"""JSON Lines input parser."""

import json
from typing import Any

from json_typegen.errors import FormatParseError
from json_typegen.inputs.base import FormatParser, InputFormat


class JsonLinesInputParser(FormatParser):
    """Parser for newline-delimited JSON.

    Each non-blank line is parsed on its own. The first record is the
    primary sample and the rest are additional samples of the same entity.
    """

    format = InputFormat.JSONLINES

    def load(self) -> Any:
        records = []
        for line_number, line in enumerate(self.content.strip().split("\n"), start=1):
            line = line.strip()
            if not line:
                continue
            try:
                records.append(json.loads(line))
            except (json.JSONDecodeError, RecursionError) as e:
                raise FormatParseError(self.format.value, f"line {line_number}: {e}", cause=e) from e
        return records

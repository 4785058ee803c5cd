"""CSV input parser.

The first row is the header. Every following non-blank row becomes a
mapping of header name to the cell text; cells are never coerced to
numbers or booleans.
"""

import csv
import io
from typing import Any

from json_typegen.errors import FormatParseError
from json_typegen.inputs.base import FormatParser, InputFormat


class CsvInputParser(FormatParser):
    """Parser for comma-separated text with a header row."""

    format = InputFormat.CSV

    def load(self) -> Any:
        reader = csv.DictReader(
            io.StringIO(self.content.strip()),
            delimiter=",",
            quotechar='"',
            doublequote=True,
            restkey=None,
            restval="",
            strict=True,
        )

        if not reader.fieldnames:
            raise FormatParseError(self.format.value, "missing header row")

        records: list[dict[str, str]] = []
        for row in reader:
            if None in row:
                raise FormatParseError(
                    self.format.value,
                    f"row {reader.line_num} has more cells than the header",
                )
            # DictReader skips fully empty lines but not whitespace-only ones
            if all(not (value or "").strip() for value in row.values()):
                continue
            records.append(dict(row))

        return records

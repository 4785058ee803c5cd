"""Main input parser module.

Provides a unified interface to parse sample data from the supported formats.
"""

import logging
from pathlib import Path

from json_typegen.errors import FormatParseError
from json_typegen.inputs.base import FormatParser, InputFormat, ParsedInput
from json_typegen.inputs.detector import detect_format
from json_typegen.inputs.csv_input import CsvInputParser
from json_typegen.inputs.json_input import LOAD_ERRORS, JsonInputParser
from json_typegen.inputs.json5_input import Json5InputParser
from json_typegen.inputs.jsonlines_input import JsonLinesInputParser
from json_typegen.inputs.yaml_input import YamlInputParser

logger = logging.getLogger(__name__)


class InputParser:
    """Unified input parser supporting multiple formats."""

    PARSERS: dict[InputFormat, type[FormatParser]] = {
        InputFormat.JSON: JsonInputParser,
        InputFormat.JSON5: Json5InputParser,
        InputFormat.YAML: YamlInputParser,
        InputFormat.CSV: CsvInputParser,
        InputFormat.JSONLINES: JsonLinesInputParser,
    }

    # File extensions to format mapping
    EXTENSION_FORMATS = {
        ".json": None,  # Could be json, json5 or jsonlines - need to detect
        ".json5": InputFormat.JSON5,
        ".jsonl": InputFormat.JSONLINES,
        ".ndjson": InputFormat.JSONLINES,
        ".yaml": InputFormat.YAML,
        ".yml": InputFormat.YAML,
        ".csv": InputFormat.CSV,
    }

    def __init__(
        self,
        content: str,
        format: InputFormat | str | None = None,
        source_file: str | None = None,
    ):
        """Initialize parser with content and an optional explicit format.

        Args:
            content: Input text
            format: Explicit format (detected from content if not provided)
            source_file: Optional source file path for messages
        """
        if isinstance(format, str):
            format = InputFormat(format.lower())

        self.content = content
        self.format = format or detect_format(content)
        self.source_file = source_file

    @classmethod
    def from_file(
        cls,
        path: Path | str,
        format: InputFormat | str | None = None,
    ) -> "InputParser":
        """Create parser from a file.

        Args:
            path: Path to the sample file
            format: Optional explicit format (extension, then content, otherwise)

        Returns:
            Initialized InputParser
        """
        path = Path(path)
        content = path.read_text(encoding="utf-8")

        if format is None:
            format = cls.EXTENSION_FORMATS.get(path.suffix.lower())

        return cls(content, format, str(path))

    def parse(self) -> ParsedInput:
        """Parse the content.

        JSON gets the auto-repair treatment inside its own parser. For the
        other formats a failed parse falls back to repaired JSON before the
        error is reported.

        Returns:
            ParsedInput
        """
        parser = self.PARSERS[self.format](self.content)

        if self.format == InputFormat.JSON:
            return parser.parse()

        try:
            return parser.parse()
        except FormatParseError as format_error:
            logger.debug(
                "%s parse failed (%s), falling back to repaired JSON",
                self.format.value,
                format_error,
            )
            try:
                return JsonInputParser(self.content).parse_repaired()
            except LOAD_ERRORS as repair_error:
                raise FormatParseError(
                    self.format.value,
                    f"{format_error.reason} (JSON auto-repair fallback: {repair_error})",
                    cause=format_error.cause or format_error,
                ) from repair_error


def parse_input(text: str, format: InputFormat | str | None = None) -> ParsedInput:
    """Convenience function to parse input text.

    Args:
        text: Input text
        format: Optional explicit format

    Returns:
        ParsedInput
    """
    return InputParser(text, format).parse()


def parse_input_file(path: Path | str, format: InputFormat | str | None = None) -> ParsedInput:
    """Convenience function to parse a sample file.

    Args:
        path: Path to the sample file
        format: Optional explicit format

    Returns:
        ParsedInput
    """
    return InputParser.from_file(path, format).parse()

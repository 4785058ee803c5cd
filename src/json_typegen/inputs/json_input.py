"""JSON input parser with auto-repair fallback."""

import json
import logging
from typing import Any

from json_typegen.errors import FormatParseError
from json_typegen.inputs.base import FormatParser, InputFormat, ParsedInput, normalize
from json_typegen.inputs.repair import repair_json

logger = logging.getLogger(__name__)

# json.JSONDecodeError is a ValueError; nesting past the interpreter's
# recursion limit surfaces as RecursionError instead.
LOAD_ERRORS = (ValueError, RecursionError)


class JsonInputParser(FormatParser):
    """Parser for JSON text.

    The raw text is parsed first. If that fails, the text is run through
    ``repair_json`` and parsed again; when both attempts fail the error
    carries both causes.
    """

    format = InputFormat.JSON

    def load(self) -> Any:
        return json.loads(self.content)

    def parse(self) -> ParsedInput:
        try:
            data = normalize(self.load())
        except LOAD_ERRORS as original_error:
            logger.debug("Raw JSON parse failed (%s), retrying with auto-repair", original_error)
            try:
                return self.parse_repaired()
            except LOAD_ERRORS as repair_error:
                raise FormatParseError(
                    self.format.value,
                    f"{original_error} (after auto-repair: {repair_error})",
                    cause=original_error,
                ) from repair_error

        return ParsedInput(
            data=data,
            format=self.format,
            original_text=self.content,
        )

    def parse_repaired(self) -> ParsedInput:
        """Parse the content after running it through the repair rules.

        Raises:
            ValueError: If the repaired text is still not valid JSON
            RecursionError: If the repaired text nests too deeply to decode

        Returns:
            ParsedInput marked as repaired
        """
        data = normalize(json.loads(repair_json(self.content)))
        return ParsedInput(
            data=data,
            format=InputFormat.JSON,
            original_text=self.content,
            repaired=True,
        )

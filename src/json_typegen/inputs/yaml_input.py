"""YAML input parser."""

from typing import Any

import yaml

from json_typegen.inputs.base import FormatParser, InputFormat


class YamlInputParser(FormatParser):
    """Parser for YAML documents.

    Only the first document is loaded; dates and non-string keys are
    normalized afterwards by ``FormatParser.parse``.
    """

    format = InputFormat.YAML

    def load(self) -> Any:
        return next(yaml.safe_load_all(self.content), None)

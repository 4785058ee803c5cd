"""Input format detection.

Classifies raw text using ordered heuristics; the first rule that fires
wins and ``json`` is the fallback. Detection is advisory: callers can
always pass an explicit format instead.
"""

import logging
import re

from json_typegen.inputs.base import InputFormat

logger = logging.getLogger(__name__)

YAML_KEY_AT_START = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*:\s*")
TRAILING_COMMA = re.compile(r",\s*[}\]]")
UNQUOTED_KEY = re.compile(r"[{\[,]\s*[a-zA-Z_][a-zA-Z0-9_]*\s*:")


def detect_format(text: str) -> InputFormat:
    """Detect the format of raw input text.

    Args:
        text: Raw input text

    Returns:
        Detected InputFormat (never raises)
    """
    detected = _detect(text.strip())
    logger.debug("Detected input format: %s", detected.value)
    return detected


def _detect(text: str) -> InputFormat:
    lines = text.split("\n")
    non_blank = [line for line in lines if line.strip()]

    if "\n" in text and all(_is_braced(line.strip()) for line in non_blank):
        return InputFormat.JSONLINES

    if "," in text and "\n" in text and len(non_blank) >= 2:
        first_commas = non_blank[0].count(",")
        second_commas = non_blank[1].count(",")
        if first_commas > 0 and abs(first_commas - second_commas) <= 1:
            return InputFormat.CSV

    if ":" in text and (
        "\n- " in text
        or "\n  " in text
        or YAML_KEY_AT_START.match(text)
        or "---" in text
    ):
        return InputFormat.YAML

    if (
        "//" in text
        or "/*" in text
        or TRAILING_COMMA.search(text)
        or UNQUOTED_KEY.search(text)
    ):
        return InputFormat.JSON5

    return InputFormat.JSON


def _is_braced(line: str) -> bool:
    return line.startswith("{") and line.endswith("}")

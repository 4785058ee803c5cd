"""Best-effort repair of common malformed-JSON idioms.

The rules are plain regex rewrites applied in a fixed order; each one
assumes the previous ones already ran. They can misfire on string values
that contain commas, colons or quotes, so the JSON parser only uses the
repaired text after the raw text failed to parse.
"""

import re

TRAILING_COMMA = re.compile(r",(\s*[}\]])")
SINGLE_QUOTED_KEY = re.compile(r"'([^']*)':")
SINGLE_QUOTED_VALUE = re.compile(r":(\s*)'([^']*)'")
SINGLE_QUOTED_ELEMENT = re.compile(r"([\[,]\s*)'([^']*)'")
BARE_KEY = re.compile(r"([{,]\s*)([a-zA-Z_][a-zA-Z0-9_]*)\s*:")
ADJACENT_STRINGS = re.compile(r'"\s*\n\s*"')
ADJACENT_OBJECTS = re.compile(r"}\s*\n\s*{")


def repair_json(text: str) -> str:
    """Apply the repair rules to JSON-like text.

    Args:
        text: Possibly malformed JSON text

    Returns:
        Repaired text (not guaranteed to be valid JSON)
    """
    fixed = text.strip()

    fixed = TRAILING_COMMA.sub(r"\1", fixed)

    fixed = SINGLE_QUOTED_KEY.sub(r'"\1":', fixed)
    fixed = SINGLE_QUOTED_VALUE.sub(r': "\2"', fixed)
    fixed = SINGLE_QUOTED_ELEMENT.sub(r'\1"\2"', fixed)

    fixed = BARE_KEY.sub(r'\1"\2":', fixed)

    fixed = ADJACENT_STRINGS.sub('",\n"', fixed)
    fixed = ADJACENT_OBJECTS.sub("},\n{", fixed)

    return fixed

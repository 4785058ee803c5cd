"""Naming helpers shared by the emitters."""

import re

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
TS_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_valid_type_name(name: str) -> bool:
    """Check whether a name can be used as a generated type name."""
    return bool(name) and IDENTIFIER_PATTERN.match(name) is not None


def capitalize_first(value: str) -> str:
    """Upper-case only the first character, leaving the rest untouched."""
    return value[:1].upper() + value[1:]


def pascal_case(value: str) -> str:
    """Convert a field name to PascalCase.

    Handles snake_case, kebab-case, camelCase and names with spaces.
    Names that do not start with a letter are prefixed with an underscore
    so the result is still a valid identifier.

    Args:
        value: Field name

    Returns:
        PascalCase type name
    """
    words = [w for w in re.split(r"[^A-Za-z0-9]+", value) if w]
    if not words:
        return "Type"

    result = "".join(capitalize_first(w) for w in words)
    if not result[0].isalpha():
        result = f"_{result}"
    return result


def singularize(word: str) -> str:
    """Best-effort English singular of a (plural) field name.

    Only the common suffix rules are applied; unknown words pass through.
    """
    lower = word.lower()
    if len(word) <= 3 or lower.endswith(("ss", "us", "is")):
        return word
    if lower.endswith("ies"):
        return word[:-3] + ("Y" if word[-3].isupper() else "y")
    if lower.endswith(("ches", "shes", "xes", "zes", "sses")):
        return word[:-2]
    if lower.endswith("s"):
        return word[:-1]
    return word


def enum_member_name(value: str) -> str:
    """Build an enum member key: upper-case, non-alphanumeric runs become ``_``."""
    key = re.sub(r"[^A-Z0-9]+", "_", value.upper())
    if not key or key == "_":
        return "EMPTY" if not value else "_"
    if key[0].isdigit():
        key = f"_{key}"
    return key


def quote_property(key: str) -> str:
    """Quote an object key for TypeScript/Zod output when it is not an identifier."""
    if TS_IDENTIFIER_PATTERN.match(key):
        return key
    escaped = key.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def unique_name(name: str, taken: set[str]) -> str:
    """Return ``name`` or ``name2``, ``name3``... whichever is not in ``taken``."""
    if name not in taken:
        return name
    counter = 2
    while f"{name}{counter}" in taken:
        counter += 1
    return f"{name}{counter}"

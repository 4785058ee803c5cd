"""Utility functions for json-typegen."""

from json_typegen.utils.helpers import (
    is_valid_type_name,
    capitalize_first,
    pascal_case,
    singularize,
    enum_member_name,
    quote_property,
    unique_name,
)

__all__ = [
    "is_valid_type_name",
    "capitalize_first",
    "pascal_case",
    "singularize",
    "enum_member_name",
    "quote_property",
    "unique_name",
]

"""Base types for parsed input.

Every supported input format is converted to the same normalized value
tree: dicts with string keys, lists, str, int/float, bool and None.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

from json_typegen.errors import FormatParseError

NormalizedValue = Union[
    None, bool, int, float, str, list["NormalizedValue"], dict[str, "NormalizedValue"]
]


class InputFormat(str, Enum):
    """Supported input formats."""

    JSON = "json"
    JSON5 = "json5"
    YAML = "yaml"
    CSV = "csv"
    JSONLINES = "jsonlines"


class ParsedInput(BaseModel):
    """The result of parsing one input text."""

    model_config = ConfigDict(frozen=True)

    data: Any = Field(..., description="Normalized data tree")
    format: InputFormat = Field(..., description="Format the data was parsed as")
    original_text: str = Field(..., description="Text as supplied by the caller")
    repaired: bool = Field(default=False, description="Whether JSON auto-repair produced the data")

    @property
    def primary_sample(self) -> NormalizedValue:
        """The first sample: line 1 for JSON Lines, otherwise the whole tree."""
        if self.format == InputFormat.JSONLINES and isinstance(self.data, list):
            return self.data[0] if self.data else None
        return self.data

    @property
    def extra_samples(self) -> list[NormalizedValue]:
        """Additional samples of the same entity (remaining JSON Lines records)."""
        if self.format == InputFormat.JSONLINES and isinstance(self.data, list):
            return list(self.data[1:])
        return []


class FormatParser(ABC):
    """Abstract base class for the per-format parsers.

    Subclasses only implement ``load``; ``parse`` normalizes the result
    and reports loader failures as FormatParseError.
    """

    format: InputFormat

    def __init__(self, content: str):
        """Initialize parser with raw content.

        Args:
            content: Input text
        """
        self.content = content

    @classmethod
    def from_string(cls, content: str) -> "FormatParser":
        return cls(content)

    @abstractmethod
    def load(self) -> Any:
        """Load the raw content with the format's library."""

    def parse(self) -> ParsedInput:
        """Parse the content into a ParsedInput.

        Returns:
            ParsedInput for this parser's format
        """
        try:
            data = normalize(self.load())
        except FormatParseError:
            raise
        except Exception as e:
            raise FormatParseError(self.format.value, str(e), cause=e) from e

        return ParsedInput(
            data=data,
            format=self.format,
            original_text=self.content,
        )


def normalize(value: Any) -> NormalizedValue:
    """Convert a loader result into the normalized value tree.

    YAML produces dates, datetimes and non-string keys that JSON cannot
    express; those are mapped to ISO strings and string keys.

    Args:
        value: Value returned by a format loader

    Returns:
        Normalized value
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, dict):
        return {
            (k if isinstance(k, str) else _key_to_string(k)): normalize(v)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple, set)):
        return [normalize(v) for v in value]
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _key_to_string(key: Any) -> str:
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, (datetime, date, time)):
        return key.isoformat()
    return str(key)

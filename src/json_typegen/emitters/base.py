"""Base classes for Emitters - the output layer.

Emitters are pure backends that translate a schema (advanced formats) or a
single sample (all other formats) into one textual representation. They
keep no state between calls: definitions hoisted while recursing go into a
TypeAccumulator created for that one call.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from json_typegen.analysis.base import AnalysisOptions
from json_typegen.utils.helpers import unique_name


class OutputFormat(str, Enum):
    """Supported output formats."""

    INTERFACE = "interface"
    TYPE = "type"
    ADVANCED_INTERFACE = "advanced-interface"
    ADVANCED_TYPE = "advanced-type"
    ZOD = "zod"
    JSON_SCHEMA = "json-schema"
    GRAPHQL = "graphql"

    @property
    def label(self) -> str:
        return FORMAT_LABELS[self][0]

    @property
    def description(self) -> str:
        return FORMAT_LABELS[self][1]

    @property
    def is_advanced(self) -> bool:
        """Whether the format consumes the merged multi-sample schema."""
        return self in (OutputFormat.ADVANCED_INTERFACE, OutputFormat.ADVANCED_TYPE)


FORMAT_LABELS: dict[OutputFormat, tuple[str, str]] = {
    OutputFormat.INTERFACE: ("TypeScript Interface", "Basic TypeScript interface"),
    OutputFormat.TYPE: ("TypeScript Type", "Basic TypeScript type alias"),
    OutputFormat.ADVANCED_INTERFACE: (
        "Advanced Interface",
        "Smart interface with optional properties, enums, patterns",
    ),
    OutputFormat.ADVANCED_TYPE: (
        "Advanced Type",
        "Smart type with optional properties, enums, patterns",
    ),
    OutputFormat.ZOD: ("Zod Schema", "Generate Zod schema for runtime validation"),
    OutputFormat.JSON_SCHEMA: ("JSON Schema", "Generate JSON Schema specification"),
    OutputFormat.GRAPHQL: ("GraphQL Types", "Generate GraphQL type definitions"),
}


@dataclass
class TypeAccumulator:
    """Collects hoisted definitions (enums, nested types) during one emit call."""

    definitions: list[str] = field(default_factory=list)
    names: set[str] = field(default_factory=set)

    def reserve(self, name: str) -> str:
        """Claim a type name, suffixing it with a number if already taken."""
        name = unique_name(name, self.names)
        self.names.add(name)
        return name

    def add(self, definition: str) -> None:
        self.definitions.append(definition)

    def render(self, main: str) -> str:
        """Join the main definition and everything hoisted after it."""
        return "\n\n".join([main, *self.definitions])


class Emitter(ABC):
    """Abstract base class for all emitters."""

    output_format: OutputFormat

    # Whether emit() takes the merged SchemaNode instead of a raw sample
    uses_analysis: bool = False

    def __init__(self, options: AnalysisOptions | None = None):
        """Initialize the emitter.

        Args:
            options: Analysis options (only the advanced emitters use them)
        """
        self.options = options or AnalysisOptions.smart_defaults()

    @abstractmethod
    def emit(self, source: Any, name: str = "Root") -> str:
        """Render the source as text.

        Args:
            source: A SchemaNode for advanced emitters, otherwise the first sample
            name: Name of the root type/schema

        Returns:
            Generated text
        """
        pass

"""Generation Engine - runs the parse, analyze and emit pipeline.

The engine orchestrates one request end to end:
- Detects and parses the input text
- Merges all samples into a schema for the advanced formats
- Hands the schema (or the first sample) to the selected emitter
"""

import logging
from datetime import datetime, timezone
from typing import Any

from json_typegen.analysis.analyzer import StructuralAnalyzer
from json_typegen.analysis.base import AnalysisOptions, SchemaNode
from json_typegen.emitters.base import OutputFormat
from json_typegen.emitters.registry import EmitterRegistry
from json_typegen.inputs.base import InputFormat, ParsedInput
from json_typegen.inputs.detector import detect_format as _detect_format
from json_typegen.inputs.parser import InputParser
from json_typegen.utils.helpers import is_valid_type_name

logger = logging.getLogger(__name__)


class GenerationResult:
    """Result of a generation run."""

    def __init__(
        self,
        name: str,
        output_format: OutputFormat,
        input_format: InputFormat,
        text: str,
        start_time: datetime,
        end_time: datetime,
        repaired: bool = False,
    ):
        self.name = name
        self.output_format = output_format
        self.input_format = input_format
        self.text = text
        self.start_time = start_time
        self.end_time = end_time
        self.repaired = repaired

    @property
    def duration_seconds(self) -> float:
        return (self.end_time - self.start_time).total_seconds()

    def summary(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "output_format": self.output_format.value,
            "input_format": self.input_format.value,
            "repaired": self.repaired,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
            "duration_seconds": self.duration_seconds,
            "lines": len(self.text.splitlines()),
        }


class TypeGenEngine:
    """Engine for turning sample data into type definitions.

    The engine keeps no state between requests beyond its registry and
    analyzer, neither of which is mutated by a generation run.
    """

    def __init__(
        self,
        emitter_registry: EmitterRegistry | None = None,
        analyzer: StructuralAnalyzer | None = None,
    ):
        self.emitter_registry = emitter_registry or EmitterRegistry()
        self.analyzer = analyzer or StructuralAnalyzer()

    def detect_format(self, text: str) -> InputFormat:
        """Guess the input format of a text."""
        return _detect_format(text)

    def parse(self, text: str, format: InputFormat | str | None = None) -> ParsedInput:
        """Parse text in the given (or detected) format.

        Raises:
            FormatParseError: If the text cannot be parsed
        """
        return InputParser(text, format).parse()

    def analyze(self, text: str, input_format: InputFormat | str | None = None) -> SchemaNode:
        """Parse text and merge all of its samples into one schema."""
        parsed = self.parse(text, input_format)
        return self.analyzer.analyze(parsed.primary_sample, parsed.extra_samples)

    def generate(
        self,
        name: str,
        input_text: str,
        output_format: OutputFormat | str,
        options: AnalysisOptions | None = None,
        input_format: InputFormat | str | None = None,
    ) -> str:
        """Generate a type definition from sample text.

        Args:
            name: Root type or schema name
            input_text: Sample data as text
            output_format: Target representation
            options: Analysis options (advanced formats only)
            input_format: Explicit input format, detected when omitted

        Returns:
            Generated text

        Raises:
            ValueError: If the name is not a valid identifier or the output format is unknown
            FormatParseError: If the input cannot be parsed
            AnalysisError: If the samples nest too deeply to analyze
            EmissionError: If the emitter cannot render the input
        """
        return self.generate_result(name, input_text, output_format, options, input_format).text

    def generate_result(
        self,
        name: str,
        input_text: str,
        output_format: OutputFormat | str,
        options: AnalysisOptions | None = None,
        input_format: InputFormat | str | None = None,
    ) -> GenerationResult:
        """Like generate(), but also reports the detected format and timing."""
        if not is_valid_type_name(name):
            raise ValueError(
                f"Invalid type name '{name}': must start with a letter or underscore "
                "and contain only letters, digits and underscores"
            )

        if not isinstance(output_format, OutputFormat):
            try:
                output_format = OutputFormat(output_format)
            except ValueError:
                raise ValueError(f"Unknown output format: {output_format}") from None

        start_time = datetime.now(timezone.utc)

        parsed = self.parse(input_text, input_format)
        emitter = self.emitter_registry.create(output_format, options)

        if emitter.uses_analysis:
            source = self.analyzer.analyze(parsed.primary_sample, parsed.extra_samples)
        else:
            source = parsed.primary_sample

        text = emitter.emit(source, name)
        end_time = datetime.now(timezone.utc)

        logger.info(
            "Generated %s for %s from %s input%s",
            output_format.value,
            name,
            parsed.format.value,
            " (auto-repaired)" if parsed.repaired else "",
        )

        return GenerationResult(
            name=name,
            output_format=output_format,
            input_format=parsed.format,
            text=text,
            start_time=start_time,
            end_time=end_time,
            repaired=parsed.repaired,
        )


def detect_format(text: str) -> InputFormat:
    """Convenience function to detect the format of a text."""
    return _detect_format(text)


def parse(text: str, format: InputFormat | str | None = None) -> ParsedInput:
    """Convenience function to parse text with a fresh engine."""
    return TypeGenEngine().parse(text, format)


def generate(
    name: str,
    input_text: str,
    output_format: OutputFormat | str,
    options: AnalysisOptions | None = None,
    input_format: InputFormat | str | None = None,
) -> str:
    """Convenience function to generate with a fresh engine.

    Example:
        generate("User", '{"id": 1}', "interface")
    """
    return TypeGenEngine().generate(name, input_text, output_format, options, input_format)

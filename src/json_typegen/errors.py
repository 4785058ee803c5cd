"""Error types raised by the generation pipeline.

All errors derive from ValueError so callers that already guard against
bad input with ``except ValueError`` keep working.
"""


class TypeGenError(ValueError):
    """Base class for all pipeline errors."""


class FormatParseError(TypeGenError):
    """Raised when input text cannot be parsed in the attempted format."""

    def __init__(self, format: str, message: str, cause: BaseException | None = None):
        self.format = getattr(format, "value", format)
        self.reason = message
        self.cause = cause
        super().__init__(f"Failed to parse {self.format.upper()}: {message}")


class AnalysisError(TypeGenError):
    """Raised when a value outside the normalized data model reaches the analyzer."""


class EmissionError(TypeGenError):
    """Raised when an emitter cannot render its input."""

    def __init__(self, output_format: str, message: str):
        self.output_format = getattr(output_format, "value", output_format)
        super().__init__(f"Cannot generate {self.output_format}: {message}")

"""Emitter Registry for managing available output formats."""

from functools import partial
from typing import Callable

from json_typegen.analysis.base import AnalysisOptions
from json_typegen.emitters.base import Emitter, OutputFormat

EmitterFactory = Callable[[AnalysisOptions | None], Emitter]


class EmitterRegistry:
    """Registry of emitter factories keyed by output format.

    Each engine owns its own registry; there is no shared instance.
    """

    def __init__(self):
        self._factories: dict[OutputFormat, EmitterFactory] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register the built-in emitters."""
        from json_typegen.emitters.basic_typescript import BasicTypeScriptEmitter
        from json_typegen.emitters.graphql import GraphQLEmitter
        from json_typegen.emitters.json_schema import JsonSchemaEmitter
        from json_typegen.emitters.typescript import AdvancedTypeScriptEmitter
        from json_typegen.emitters.zod import ZodEmitter

        self.register(OutputFormat.INTERFACE, BasicTypeScriptEmitter)
        self.register(OutputFormat.TYPE, partial(BasicTypeScriptEmitter, as_type=True))
        self.register(OutputFormat.ADVANCED_INTERFACE, AdvancedTypeScriptEmitter)
        self.register(OutputFormat.ADVANCED_TYPE, partial(AdvancedTypeScriptEmitter, as_type=True))
        self.register(OutputFormat.ZOD, ZodEmitter)
        self.register(OutputFormat.JSON_SCHEMA, JsonSchemaEmitter)
        self.register(OutputFormat.GRAPHQL, GraphQLEmitter)

    def register(self, output_format: OutputFormat, factory: EmitterFactory) -> None:
        """Register an emitter factory for an output format.

        Args:
            output_format: The format the emitter produces
            factory: Callable taking AnalysisOptions (or None) and returning an Emitter
        """
        self._factories[output_format] = factory

    def get(self, output_format: OutputFormat | str) -> EmitterFactory | None:
        """Get the factory for an output format, or None if not registered."""
        if isinstance(output_format, str) and not isinstance(output_format, OutputFormat):
            try:
                output_format = OutputFormat(output_format)
            except ValueError:
                return None

        return self._factories.get(output_format)

    def create(
        self,
        output_format: OutputFormat | str,
        options: AnalysisOptions | None = None,
    ) -> Emitter:
        """Create an emitter instance.

        Args:
            output_format: The format to emit
            options: Analysis options passed to the emitter

        Returns:
            A fresh emitter

        Raises:
            ValueError: If no emitter is registered for the format
        """
        factory = self.get(output_format)
        if factory is None:
            raise ValueError(f"Unknown output format: {getattr(output_format, 'value', output_format)}")
        return factory(options)

    def list_formats(self) -> list[OutputFormat]:
        """List all registered output formats."""
        return list(self._factories.keys())

    def describe(self, output_format: OutputFormat | str) -> tuple[str, str]:
        """Return the (label, description) pair for a format."""
        output_format = OutputFormat(output_format)
        return output_format.label, output_format.description

    def __contains__(self, output_format: OutputFormat | str) -> bool:
        return self.get(output_format) is not None

"""Zod runtime-validation schema emitter.

Works from the first sample only: every object key is required and no
optionality, enum or pattern analysis is consulted.
"""

from json_typegen.analysis.base import ValueKind, is_integral, kind_of
from json_typegen.emitters.base import Emitter, OutputFormat
from json_typegen.errors import EmissionError
from json_typegen.inputs.base import NormalizedValue
from json_typegen.utils.helpers import quote_property

INDENT = "  "


class ZodEmitter(Emitter):
    """Emits a Zod schema plus the inferred TypeScript type."""

    output_format = OutputFormat.ZOD

    def emit(self, source: NormalizedValue, name: str = "Root") -> str:
        try:
            schema = self.zod_type(source)
        except RecursionError as e:
            raise EmissionError(self.output_format, "sample is nested too deeply") from e
        return (
            "import { z } from 'zod';\n\n"
            f"export const {name}Schema = {schema};\n\n"
            f"export type {name} = z.infer<typeof {name}Schema>;"
        )

    def zod_type(self, value: NormalizedValue, depth: int = 0) -> str:
        """Render the validator expression for one value."""
        match kind_of(value):
            case ValueKind.NULL:
                return "z.null()"
            case ValueKind.BOOLEAN:
                return "z.boolean()"
            case ValueKind.NUMBER:
                return "z.number().int()" if is_integral(value) else "z.number()"
            case ValueKind.STRING:
                return "z.string()"
            case ValueKind.ARRAY:
                if not value:
                    return "z.array(z.unknown())"
                return f"z.array({self.zod_type(value[0], depth)})"
            case ValueKind.OBJECT:
                if not value:
                    return "z.object({})"
                inner = INDENT * (depth + 1)
                properties = ",\n".join(
                    f"{inner}{quote_property(key)}: {self.zod_type(item, depth + 1)}"
                    for key, item in value.items()
                )
                return f"z.object({{\n{properties}\n{INDENT * depth}}})"

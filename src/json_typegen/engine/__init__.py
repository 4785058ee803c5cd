"""Engine module - Runtime layer.

Contains:
- TypeGenEngine: parse, analyze and emit in one call
- GenerationResult: generated text plus detected format and timing
"""

from json_typegen.engine.generation_engine import (
    GenerationResult,
    TypeGenEngine,
    detect_format,
    generate,
    parse,
)

__all__ = [
    "GenerationResult",
    "TypeGenEngine",
    "detect_format",
    "generate",
    "parse",
]

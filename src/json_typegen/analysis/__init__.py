"""Analysis module - multi-sample structural inference.

Contains:
- Schema model: ObjectNode, ArrayNode, ScalarNode, PropertyAnalysis
- Structural Analyzer: merges samples into one schema
- Pattern detection for email, UUID, date and URL strings
"""

from json_typegen.analysis.base import (
    AnalysisOptions,
    ArrayNode,
    ObjectNode,
    PropertyAnalysis,
    ScalarNode,
    SchemaNode,
    StringPattern,
    ValueKind,
    is_integral,
    kind_of,
)
from json_typegen.analysis.analyzer import StructuralAnalyzer, analyze_structure
from json_typegen.analysis.patterns import detect_pattern

__all__ = [
    "AnalysisOptions",
    "ArrayNode",
    "ObjectNode",
    "PropertyAnalysis",
    "ScalarNode",
    "SchemaNode",
    "StringPattern",
    "ValueKind",
    "is_integral",
    "kind_of",
    "StructuralAnalyzer",
    "analyze_structure",
    "detect_pattern",
]

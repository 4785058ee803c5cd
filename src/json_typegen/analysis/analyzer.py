"""Structural Analyzer - merges samples into one schema.

The first sample defines the base field order and nesting shape; later
samples only contribute optionality, union, enum and pattern signal.
"""

from typing import Any, Sequence

from json_typegen.analysis.base import (
    ArrayNode,
    ObjectNode,
    PropertyAnalysis,
    ScalarNode,
    SchemaNode,
    ValueKind,
    kind_of,
)
from json_typegen.analysis.patterns import detect_pattern
from json_typegen.errors import AnalysisError
from json_typegen.inputs.base import NormalizedValue

_MISSING = object()


class StructuralAnalyzer:
    """Infers a merged SchemaNode from a primary sample plus extra samples.

    The analyzer holds no state between calls; it is safe to reuse one
    instance across invocations.
    """

    # Enum candidates: few distinct strings that repeat
    ENUM_MAX_DISTINCT = 5
    ENUM_DISTINCT_RATIO = 0.8

    def analyze(
        self,
        primary: NormalizedValue,
        extras: Sequence[NormalizedValue] = (),
    ) -> SchemaNode:
        """Analyze one or more samples of the same logical entity.

        Args:
            primary: The first sample
            extras: Additional samples

        Returns:
            Merged SchemaNode

        Raises:
            AnalysisError: If the samples nest deeper than the interpreter can recurse
        """
        try:
            return self._analyze_value(primary, extras)
        except RecursionError as e:
            raise AnalysisError("samples are nested too deeply to analyze") from e

    def _analyze_value(
        self,
        primary: NormalizedValue,
        extras: Sequence[NormalizedValue],
    ) -> SchemaNode:
        kind = kind_of(primary)
        if kind == ValueKind.ARRAY:
            return self._analyze_array(primary, extras)
        if kind == ValueKind.OBJECT:
            return self._analyze_object(primary, extras)
        return ScalarNode(observed_type=kind)

    def _analyze_array(
        self,
        primary: list[NormalizedValue],
        extras: Sequence[NormalizedValue],
    ) -> ArrayNode:
        # Elements of the primary come first, so the representative item is
        # primary[0] or, for an empty primary, the first element of the first
        # non-empty extra sequence.
        elements: list[NormalizedValue] = list(primary)
        for extra in extras:
            if isinstance(extra, list):
                elements.extend(extra)

        if not elements:
            return ArrayNode(items=None)
        return ArrayNode(items=self._analyze_value(elements[0], elements[1:]))

    def _analyze_object(
        self,
        primary: dict[str, NormalizedValue],
        extras: Sequence[NormalizedValue],
    ) -> ObjectNode:
        samples = [primary] + [extra for extra in extras if isinstance(extra, dict)]

        keys: dict[str, None] = {}
        for sample in samples:
            for key in sample:
                keys.setdefault(key, None)

        properties = {
            key: self._analyze_property([sample.get(key, _MISSING) for sample in samples])
            for key in keys
        }
        return ObjectNode(properties=properties)

    def _analyze_property(self, values: list[Any]) -> PropertyAnalysis:
        present = [v for v in values if v is not _MISSING and v is not None]

        kinds: list[ValueKind] = []
        for value in present:
            kind = kind_of(value)
            if kind not in kinds:
                kinds.append(kind)

        all_strings = bool(present) and kinds == [ValueKind.STRING]

        return PropertyAnalysis(
            is_optional=len(present) < len(values),
            is_union=len(kinds) > 1,
            observed_types=tuple(kinds),
            observed_values=present,
            pattern=detect_pattern(present) if all_strings else None,
            is_enum=all_strings and self._is_enum_candidate(present),
            nested=self._analyze_nested(present, kinds),
        )

    def _is_enum_candidate(self, values: list[str]) -> bool:
        distinct = len(set(values))
        return (
            len(values) > 1
            and 1 < distinct <= self.ENUM_MAX_DISTINCT
            and distinct < len(values) * self.ENUM_DISTINCT_RATIO
        )

    def _analyze_nested(self, present: list[Any], kinds: list[ValueKind]) -> SchemaNode | None:
        for shape in (ValueKind.OBJECT, ValueKind.ARRAY):
            if shape in kinds:
                shaped = [v for v in present if kind_of(v) == shape]
                return self._analyze_value(shaped[0], shaped[1:])
        return None


def analyze_structure(
    primary: NormalizedValue,
    extras: Sequence[NormalizedValue] = (),
) -> SchemaNode:
    """Convenience function to analyze samples with a fresh analyzer.

    Args:
        primary: The first sample
        extras: Additional samples

    Returns:
        Merged SchemaNode
    """
    return StructuralAnalyzer().analyze(primary, extras)

"""Tests for the Analysis module."""

import pytest

from json_typegen.analysis import (
    AnalysisOptions,
    ArrayNode,
    ObjectNode,
    ScalarNode,
    StringPattern,
    StructuralAnalyzer,
    ValueKind,
    analyze_structure,
    detect_pattern,
    is_integral,
    kind_of,
)
from json_typegen.errors import AnalysisError


@pytest.fixture
def analyzer():
    """Create a structural analyzer."""
    return StructuralAnalyzer()


def field_samples(key, values):
    """One single-field sample per value."""
    return [{key: value} for value in values]


def analyze_field(analyzer, key, values):
    samples = field_samples(key, values)
    schema = analyzer.analyze(samples[0], samples[1:])
    return schema.properties[key]


class TestKindOf:
    """Tests for value classification."""

    def test_kinds(self):
        assert kind_of(None) == ValueKind.NULL
        assert kind_of(True) == ValueKind.BOOLEAN
        assert kind_of(0) == ValueKind.NUMBER
        assert kind_of(1.5) == ValueKind.NUMBER
        assert kind_of("") == ValueKind.STRING
        assert kind_of({}) == ValueKind.OBJECT
        assert kind_of([]) == ValueKind.ARRAY

    def test_unsupported_value_raises(self):
        with pytest.raises(AnalysisError):
            kind_of(object())

    def test_is_integral(self):
        assert is_integral(3)
        assert is_integral(3.0)
        assert not is_integral(3.5)
        assert not is_integral(True)


class TestStructuralAnalyzer:
    """Tests for StructuralAnalyzer."""

    def test_scalar_root(self, analyzer):
        assert analyzer.analyze(42) == ScalarNode(observed_type=ValueKind.NUMBER)

    def test_empty_array(self, analyzer):
        assert analyzer.analyze([]) == ArrayNode(items=None)

    def test_missing_field_is_optional(self, analyzer):
        schema = analyzer.analyze({"id": 1, "tag": "a"}, [{"id": 2}])

        assert schema.properties["tag"].is_optional
        assert not schema.properties["id"].is_optional
        assert not schema.properties["id"].is_union

    def test_field_missing_from_primary_is_included(self, analyzer):
        schema = analyzer.analyze({"id": 1}, [{"id": 2, "extra": True}])

        assert list(schema.properties) == ["id", "extra"]
        assert schema.properties["extra"].is_optional
        assert schema.properties["extra"].observed_types == (ValueKind.BOOLEAN,)

    def test_null_makes_field_optional(self, analyzer):
        prop = analyze_field(analyzer, "a", [None, 1])

        assert prop.is_optional
        assert not prop.is_union
        assert prop.observed_types == (ValueKind.NUMBER,)

    def test_all_null_field(self, analyzer):
        prop = analyze_field(analyzer, "a", [None, None])

        assert prop.is_optional
        assert prop.observed_types == ()
        assert prop.pattern is None
        assert not prop.is_enum

    def test_union(self, analyzer):
        prop = analyze_field(analyzer, "v", [1, "x", 2])

        assert prop.is_union
        assert prop.observed_types == (ValueKind.NUMBER, ValueKind.STRING)
        assert prop.pattern is None
        assert not prop.is_enum

    @pytest.mark.parametrize("samples", [
        [{"a": 1, "b": "x"}, {"a": 2, "b": "y"}, {"a": 3, "b": "z"}],
        [{"a": 1}, {"b": 2}],
        [{"a": None}, {"a": "x"}, {}],
    ])
    def test_merge_invariant(self, analyzer, samples):
        """Absent fields are optional; present homogeneous fields are not."""
        schema = analyzer.analyze(samples[0], samples[1:])

        for key, prop in schema.properties.items():
            present = [s[key] for s in samples if s.get(key) is not None]
            if len(present) < len(samples):
                assert prop.is_optional
            elif len({kind_of(v) for v in present}) == 1:
                assert not prop.is_optional
                assert not prop.is_union

    def test_nested_objects_are_merged(self, analyzer):
        schema = analyzer.analyze(
            {"address": {"city": "NY"}},
            [{"address": {"city": "LA", "zip": "90001"}}],
        )

        nested = schema.properties["address"].nested
        assert isinstance(nested, ObjectNode)
        assert nested.properties["zip"].is_optional
        assert not nested.properties["city"].is_optional

    def test_array_elements_are_merged(self, analyzer):
        schema = analyzer.analyze([{"a": 1}, {"a": 2, "b": "x"}])

        assert isinstance(schema, ArrayNode)
        assert isinstance(schema.items, ObjectNode)
        assert schema.items.properties["b"].is_optional

    def test_array_elements_from_extra_samples(self, analyzer):
        schema = analyzer.analyze([], [[{"a": 1}]])

        assert isinstance(schema.items, ObjectNode)
        assert list(schema.items.properties) == ["a"]

    def test_nested_prefers_objects_over_arrays(self, analyzer):
        prop = analyze_field(analyzer, "x", [{"a": 1}, [1]])

        assert prop.is_union
        assert isinstance(prop.nested, ObjectNode)

    def test_nested_array(self, analyzer):
        prop = analyze_field(analyzer, "tags", [["a"], ["b", "c"]])

        assert isinstance(prop.nested, ArrayNode)
        assert prop.nested.items == ScalarNode(observed_type=ValueKind.STRING)

    def test_analyzer_is_reusable(self, analyzer):
        first = analyzer.analyze({"a": 1})
        analyzer.analyze({"b": "x"})
        assert analyzer.analyze({"a": 1}) == first

    def test_analyze_structure(self):
        schema = analyze_structure({"id": 1}, [{"id": 2}])
        assert isinstance(schema, ObjectNode)

    def test_deep_nesting_raises_analysis_error(self, analyzer):
        sample = 1
        for _ in range(5000):
            sample = {"a": sample}

        with pytest.raises(AnalysisError, match="nested too deeply"):
            analyzer.analyze(sample)


class TestEnumDetection:
    """Tests for enum candidate rules."""

    def test_ten_values_five_distinct_is_enum(self, analyzer):
        prop = analyze_field(analyzer, "s", ["a", "b", "c", "d", "e"] * 2)

        assert prop.is_enum
        assert prop.distinct_values == ["a", "b", "c", "d", "e"]

    def test_ten_values_eight_distinct_is_not_enum(self, analyzer):
        values = ["a", "b", "c", "d", "e", "f", "g", "h", "a", "b"]
        assert not analyze_field(analyzer, "s", values).is_enum

    def test_six_values_five_distinct_is_not_enum(self, analyzer):
        values = ["a", "b", "c", "d", "e", "a"]
        assert not analyze_field(analyzer, "s", values).is_enum

    def test_single_distinct_value_is_not_enum(self, analyzer):
        assert not analyze_field(analyzer, "s", ["a", "a", "a"]).is_enum

    def test_single_value_is_not_enum(self, analyzer):
        assert not analyze_field(analyzer, "s", ["a"]).is_enum

    def test_nulls_are_ignored(self, analyzer):
        prop = analyze_field(analyzer, "s", ["a", None, "b", "a", "b", None])

        assert prop.is_optional
        assert prop.is_enum

    def test_non_strings_are_not_enums(self, analyzer):
        assert not analyze_field(analyzer, "n", [1, 2, 1, 2, 1, 2]).is_enum


class TestPatternDetection:
    """Tests for semantic string patterns."""

    def test_email(self):
        assert detect_pattern(["a@example.com", "b.c@test.org"]) == StringPattern.EMAIL

    def test_uuid(self):
        assert detect_pattern(["550e8400-e29b-41d4-a716-446655440000"]) == StringPattern.UUID

    def test_uuid_wins_over_date(self):
        values = ["123e4567-e89b-12d3-a456-426614174000"]
        assert detect_pattern(values) == StringPattern.UUID

    def test_date(self):
        assert detect_pattern(["2024-01-15", "2024-01-15T10:30:00Z"]) == StringPattern.DATE

    def test_date_with_offset(self):
        assert detect_pattern(["2024-01-15T10:30:00.123+02:00"]) == StringPattern.DATE

    def test_impossible_date_is_not_a_date(self):
        assert detect_pattern(["2024-13-45"]) is None

    def test_millisecond_and_microsecond_dates(self):
        values = ["2024-01-15T10:30:00.123", "2024-01-15T10:30:00.123456Z"]
        assert detect_pattern(values) == StringPattern.DATE

    def test_other_fraction_lengths_are_not_dates(self):
        assert detect_pattern(["2024-01-01T10:00:00.5"]) is None
        assert detect_pattern(["2024-01-01T10:00:00.1234"]) is None

    def test_url(self):
        assert detect_pattern(["https://example.com", "http://a.b/c"]) == StringPattern.URL

    def test_all_values_must_match(self):
        assert detect_pattern(["a@example.com", "not an email"]) is None

    def test_empty(self):
        assert detect_pattern([]) is None

    def test_pattern_on_property(self, analyzer):
        prop = analyze_field(analyzer, "email", ["a@example.com", None, "b@example.com"])
        assert prop.pattern == StringPattern.EMAIL

    def test_no_pattern_for_mixed_types(self, analyzer):
        prop = analyze_field(analyzer, "v", ["a@example.com", 1])
        assert prop.pattern is None


class TestSchemaSerialization:
    """Tests for to_dict output."""

    def test_object_to_dict(self, analyzer):
        schema = analyzer.analyze({"plan": "pro"}, field_samples("plan", ["free", "pro"]))
        data = schema.to_dict()

        assert data["type"] == "object"
        plan = data["properties"]["plan"]
        assert plan["isOptional"] is False
        assert plan["isUnion"] is False
        assert plan["types"] == ["string"]
        assert plan["isEnum"] is True
        assert plan["values"] == ["pro", "free"]

    def test_array_to_dict(self, analyzer):
        assert analyzer.analyze([]).to_dict() == {"type": "array", "items": None}
        assert analyzer.analyze([1]).to_dict() == {"type": "array", "items": {"type": "number"}}


class TestAnalysisOptions:
    """Tests for AnalysisOptions."""

    def test_smart_defaults(self):
        options = AnalysisOptions.smart_defaults()

        assert options.detect_optional_properties
        assert options.generate_enums
        assert options.detect_union_types
        assert options.use_readonly
        assert options.detect_patterns
        assert not options.generate_index_signatures

    def test_from_dict_accepts_camel_case(self):
        options = AnalysisOptions.from_dict({"useReadonly": False, "generate_enums": False})

        assert not options.use_readonly
        assert not options.generate_enums
        assert options.detect_patterns

    def test_from_dict_none(self):
        assert AnalysisOptions.from_dict(None) == AnalysisOptions.smart_defaults()

    def test_from_dict_unknown_option(self):
        with pytest.raises(ValueError, match="Unknown analysis option"):
            AnalysisOptions.from_dict({"makeItFast": True})

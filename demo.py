#!/usr/bin/env python3
"""
Demo script showing basic usage of json-typegen.

Run this script after installing the package:
    pip install -e .
    python demo.py
"""

from json_typegen.analysis.base import AnalysisOptions
from json_typegen.emitters.base import OutputFormat
from json_typegen.engine.generation_engine import TypeGenEngine


USER_SAMPLE = (
    '{"id":1,"name":"John","address":{"city":"NY","zip":12345},'
    '"orders":[{"orderId":1,"amount":200}]}'
)

CUSTOMER_SAMPLES = "\n".join([
    '{"id": 1, "email": "ann@example.com", "plan": "pro", "tag": "vip"}',
    '{"id": 2, "email": "bob@example.com", "plan": "free"}',
    '{"id": 3, "email": "cy@example.com", "plan": "pro"}',
    '{"id": 4, "email": "dee@example.com", "plan": "free"}',
    '{"id": 5, "email": "eve@example.com", "plan": "pro"}',
])

MALFORMED_SAMPLE = "{id: 1, name: 'x', tags: ['a','b',],}"


def demo_basic_interface(engine):
    """Demonstrate a basic interface from one JSON sample."""
    print("=" * 60)
    print("1. BASIC INTERFACE")
    print("=" * 60)

    print(engine.generate("Root", USER_SAMPLE, OutputFormat.INTERFACE))
    print()


def demo_every_format(engine):
    """Demonstrate each single-sample output format."""
    print("=" * 60)
    print("2. OTHER OUTPUT FORMATS")
    print("=" * 60)

    for output_format in (OutputFormat.ZOD, OutputFormat.JSON_SCHEMA, OutputFormat.GRAPHQL):
        print(f"--- {output_format.label} ---")
        print(engine.generate("User", USER_SAMPLE, output_format))
        print()


def demo_advanced_analysis(engine):
    """Demonstrate multi-sample analysis with JSON Lines."""
    print("=" * 60)
    print("3. ADVANCED ANALYSIS (JSON LINES)")
    print("=" * 60)

    schema = engine.analyze(CUSTOMER_SAMPLES)
    for key, prop in schema.properties.items():
        flags = []
        if prop.is_optional:
            flags.append("optional")
        if prop.is_enum:
            flags.append(f"enum {prop.distinct_values}")
        if prop.pattern:
            flags.append(prop.pattern.value)
        print(f"  {key}: {', '.join(flags) or '-'}")
    print()

    options = AnalysisOptions(use_readonly=False)
    print(engine.generate("Customer", CUSTOMER_SAMPLES, OutputFormat.ADVANCED_INTERFACE, options))
    print()


def demo_auto_repair(engine):
    """Demonstrate JSON auto-repair."""
    print("=" * 60)
    print("4. AUTO-REPAIR")
    print("=" * 60)

    result = engine.generate_result("Tagged", MALFORMED_SAMPLE, OutputFormat.TYPE, input_format="json")
    print(f"Input:    {MALFORMED_SAMPLE}")
    print(f"Repaired: {result.repaired}")
    print(result.text)
    print()


def main():
    """Run all demos."""
    print("\n" + "=" * 60)
    print("JSON-TYPEGEN DEMO")
    print("=" * 60 + "\n")

    engine = TypeGenEngine()

    demo_basic_interface(engine)
    demo_every_format(engine)
    demo_advanced_analysis(engine)
    demo_auto_repair(engine)

    print("=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()

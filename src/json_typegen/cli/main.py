"""Main CLI entry point for json-typegen.

Generates type definitions from sample data files or stdin.
"""

from pathlib import Path
import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from json_typegen import __version__
from json_typegen.analysis.base import AnalysisOptions, ArrayNode, ObjectNode, ScalarNode, SchemaNode
from json_typegen.emitters.base import OutputFormat
from json_typegen.emitters.registry import EmitterRegistry
from json_typegen.engine.generation_engine import TypeGenEngine
from json_typegen.inputs.base import InputFormat
from json_typegen.inputs.parser import InputParser
from json_typegen.profiles.base import GenerationProfile
from json_typegen.profiles.loader import ProfileLoader, load_profile
from json_typegen.utils.helpers import is_valid_type_name

console = Console()
err_console = Console(stderr=True)

OUTPUT_FORMATS = [f.value for f in OutputFormat]
INPUT_FORMATS = [f.value for f in InputFormat]

# CLI flag name -> AnalysisOptions field
OPTION_FLAGS = {
    "optional": "detect_optional_properties",
    "enums": "generate_enums",
    "unions": "detect_union_types",
    "readonly": "use_readonly",
    "index_signatures": "generate_index_signatures",
    "patterns": "detect_patterns",
}


def _setup_logging(verbose: bool) -> None:
    handler = RichHandler(console=err_console, show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def _validate_name(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is not None and not is_valid_type_name(value):
        raise click.BadParameter(
            "must start with a letter or underscore and contain only letters, digits and underscores"
        )
    return value


def _read_input(input_path: str) -> tuple[str, InputFormat | None]:
    """Read sample text from a file or stdin.

    Returns:
        The text and the format implied by the file extension, if any
    """
    if input_path == "-":
        return sys.stdin.read(), None

    path = Path(input_path)
    content = path.read_text(encoding="utf-8")
    return content, InputParser.EXTENSION_FORMATS.get(path.suffix.lower())


def _fail(ctx: click.Context, e: Exception) -> None:
    err_console.print(f"[red]Error: {escape(str(e))}[/red]")
    if ctx.obj.get("verbose", False):
        import traceback
        err_console.print(traceback.format_exc())
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="typegen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """json-typegen - Generate type definitions from sample data.

    Reads JSON, JSON5, YAML, CSV or JSON Lines and writes TypeScript,
    Zod, JSON Schema or GraphQL definitions.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _setup_logging(verbose)


@cli.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option("--format", "-f", "output_format", type=click.Choice(OUTPUT_FORMATS), help="Output format [default: interface]")
@click.option("--name", "-n", callback=_validate_name, help="Root type name [default: Root]")
@click.option("--input-format", "-i", type=click.Choice(INPUT_FORMATS), help="Input format (detected if not specified)")
@click.option("--profile", "-p", "profile_path", type=click.Path(exists=True, dir_okay=False), help="Generation profile YAML")
@click.option("--optional/--no-optional", default=None, help="Mark fields missing from some samples as optional")
@click.option("--enums/--no-enums", default=None, help="Generate enums for repeated string values")
@click.option("--unions/--no-unions", default=None, help="Render mixed-type fields as unions")
@click.option("--readonly/--no-readonly", default=None, help="Add readonly modifiers")
@click.option("--index-signatures/--no-index-signatures", default=None, help="Add index signatures to large shapes")
@click.option("--patterns/--no-patterns", default=None, help="Annotate email, UUID, date and URL strings")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output file (stdout if not specified)")
@click.pass_context
def generate(
    ctx: click.Context,
    input_path: str,
    output_format: str | None,
    name: str | None,
    input_format: str | None,
    profile_path: str | None,
    output: str | None,
    **flags: bool | None,
) -> None:
    """Generate type definitions from a sample.

    INPUT is a sample file, or - to read from stdin.

    \b
    Examples:
      typegen generate user.json -n User
      typegen generate customers.jsonl -f advanced-interface -n Customer
      cat config.yaml | typegen generate - -f zod -n Config
    """
    try:
        profile = load_profile(profile_path) if profile_path else GenerationProfile()

        content, extension_format = _read_input(input_path)

        options = profile.options.model_copy(
            update={
                OPTION_FLAGS[flag]: value
                for flag, value in flags.items()
                if value is not None
            }
        )

        engine = TypeGenEngine()
        result = engine.generate_result(
            name=name or profile.name,
            input_text=content,
            output_format=output_format or profile.output_format,
            options=options,
            input_format=input_format or profile.input_format or extension_format,
        )

        if output:
            Path(output).write_text(result.text + "\n", encoding="utf-8")
            err_console.print(Panel.fit(
                f"[green]Generated {result.output_format.label}[/green]\n\n"
                f"[cyan]Input format:[/cyan] {result.input_format.value}"
                f"{' (auto-repaired)' if result.repaired else ''}\n"
                f"[cyan]Type name:[/cyan] {result.name}\n"
                f"[cyan]Output:[/cyan] {escape(output)}",
                title="Generation Complete",
            ))
        else:
            click.echo(result.text)
            err_console.print(
                f"[dim]Detected input format: {result.input_format.value}"
                f"{' (auto-repaired)' if result.repaired else ''}[/dim]"
            )

    except Exception as e:
        _fail(ctx, e)


@cli.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.pass_context
def detect(ctx: click.Context, input_path: str) -> None:
    """Detect the format of a sample.

    INPUT is a sample file, or - to read from stdin.
    """
    try:
        content, _ = _read_input(input_path)
        engine = TypeGenEngine()
        click.echo(engine.detect_format(content).value)
    except Exception as e:
        _fail(ctx, e)


@cli.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option("--input-format", "-i", type=click.Choice(INPUT_FORMATS), help="Input format (detected if not specified)")
@click.option("--json", "as_json", is_flag=True, help="Print the merged schema as JSON")
@click.pass_context
def analyze(ctx: click.Context, input_path: str, input_format: str | None, as_json: bool) -> None:
    """Show the merged structural schema of a sample.

    INPUT is a sample file, or - to read from stdin.
    """
    try:
        content, extension_format = _read_input(input_path)
        engine = TypeGenEngine()
        schema = engine.analyze(content, input_format or extension_format)

        if as_json:
            click.echo(json.dumps(schema.to_dict(), indent=2))
            return

        table = Table(title="Structural Schema")
        table.add_column("Field", style="cyan")
        table.add_column("Types")
        table.add_column("Optional")
        table.add_column("Union")
        table.add_column("Enum")
        table.add_column("Pattern")

        for row in _schema_rows(schema):
            table.add_row(*row)

        console.print(table)

    except Exception as e:
        _fail(ctx, e)


def _schema_rows(node: SchemaNode, prefix: str = "") -> list[tuple[str, ...]]:
    """Flatten a schema into table rows, nested fields as dotted paths."""
    rows: list[tuple[str, ...]] = []

    match node:
        case ObjectNode(properties=properties):
            for key, prop in properties.items():
                path = f"{prefix}.{key}" if prefix else key
                rows.append((
                    escape(path),
                    ", ".join(kind.value for kind in prop.observed_types) or "-",
                    _yes_no(prop.is_optional),
                    _yes_no(prop.is_union),
                    escape(", ".join(str(v) for v in prop.distinct_values)) if prop.is_enum else "-",
                    prop.pattern.value if prop.pattern else "-",
                ))
                if prop.nested is not None:
                    rows.extend(_schema_rows(prop.nested, path))
        case ArrayNode(items=items):
            if items is not None:
                rows.extend(_schema_rows(items, f"{prefix}[]"))
        case ScalarNode(observed_type=kind):
            rows.append((escape(prefix or "(root)"), kind.value, "-", "-", "-", "-"))

    return rows


def _yes_no(value: bool) -> str:
    return "[green]Yes[/green]" if value else "No"


@cli.command()
@click.pass_context
def list_formats(ctx: click.Context) -> None:
    """List available output formats."""
    registry = EmitterRegistry()

    table = Table(title="Output Formats")
    table.add_column("Format", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Description")

    for output_format in registry.list_formats():
        label, description = registry.describe(output_format)
        table.add_row(output_format.value, label, description)

    console.print(table)


@cli.command()
@click.option("--name", "-n", default="Root", callback=_validate_name, help="Root type name")
@click.option("--format", "-f", "output_format", type=click.Choice(OUTPUT_FORMATS), default=OutputFormat.ADVANCED_INTERFACE.value, help="Output format")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default="typegen.yaml", help="Output file path")
@click.pass_context
def init_profile(ctx: click.Context, name: str, output_format: str, output: str) -> None:
    """Initialize a new generation profile.

    Creates a template profile YAML file with the default analysis options.
    """
    profile = GenerationProfile(
        name=name,
        description=f"Generation profile for {name}",
        output_format=OutputFormat(output_format),
        options=AnalysisOptions.smart_defaults(),
    )

    loader = ProfileLoader()
    loader.save_file(profile, output)

    console.print(f"[green]Created profile: {escape(output)}[/green]")


if __name__ == "__main__":
    cli()

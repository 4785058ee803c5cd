"""CLI module for json-typegen."""

from json_typegen.cli.main import cli

__all__ = ["cli"]

"""Command-line interface for oaienum code generation."""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING

import click
from lark.exceptions import LarkError
from rich.console import Console
from rich.table import Table

from oaienum.errors import ValidationError
from oaienum.generator import parse, python
from oaienum.generator.build import resolve_definitions

if TYPE_CHECKING:
    from oaienum.catalog import ResolvedEnum
    from oaienum.types import EnumDefinition


def _load(input_file: str) -> list[EnumDefinition]:
    """Read and parse a descriptor file, exiting with status 1 on errors."""
    with open(input_file, encoding="utf-8") as f:
        text = f.read()

    try:
        return parse(text)
    except (LarkError, ValidationError) as e:
        print(f"Error: {e}")
        sys.exit(1)


@click.group()
def cli() -> None:
    """OpenAPI enum code generator."""


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input enum descriptor file")
@click.option("--output", "-o", "output_file", required=True, help="Output file")
@click.option(
    "--runtime-import",
    "runtime_import",
    default="oaienum.registrar",
    help="Module the generated code imports openapi_enum from",
)
def gen(input_file: str, output_file: str, runtime_import: str) -> None:
    """Generate Python enums from a descriptor file."""
    definitions = _load(input_file)

    try:
        generated_file = python.render(definitions, runtime_import=runtime_import)
    except ValidationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    with open(output_file, "w", encoding="utf-8") as f:
        f.write(generated_file)


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input enum descriptor file")
@click.option("--output", "-o", "output_file", default=None, help="Output file (default: stdout)")
def schema(input_file: str, output_file: str | None) -> None:
    """Write the OpenAPI component schemas for a descriptor file."""
    definitions = _load(input_file)

    try:
        schemas = python.render_schemas(definitions)
    except ValidationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    text = json.dumps({"components": {"schemas": schemas}}, indent=2)
    if output_file is None:
        print(text)
    else:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(text + "\n")


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input enum descriptor file")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(input_file: str, output_json: bool) -> None:
    """Display how each enum is represented on the wire."""
    definitions = _load(input_file)

    try:
        resolved = resolve_definitions(definitions)
    except ValidationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if output_json:
        _output_json(resolved)
    else:
        _output_plain(resolved)


def _output_json(resolved: list[ResolvedEnum]) -> None:
    """Output enum info as JSON."""
    data: dict = {"enums": {}}

    for item in resolved:
        spec = item.representation.integer
        data["enums"][item.definition.name] = {
            "schema_name": item.type_name,
            "representation": str(item.representation),
            "format": spec.format if spec else None,
            "variants": [
                {
                    "identifier": v.identifier,
                    "name": v.canonical_name,
                    "discriminant": v.discriminant,
                }
                for v in item.catalog
            ],
            "definition": item.definition.to_dict(),
        }

    print(json.dumps(data, indent=2))


def _output_plain(resolved: list[ResolvedEnum]) -> None:
    """Output enum info using rich text formatting."""
    console = Console()

    console.print("[bold cyan]Enums[/bold cyan]")
    enum_table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    enum_table.add_column("Name", style="white")
    enum_table.add_column("Schema", style="green")
    enum_table.add_column("Wire", style="yellow")
    enum_table.add_column("Format", style="dim")
    enum_table.add_column("Values", style="white")

    for item in resolved:
        spec = item.representation.integer
        if spec is not None:
            values = ", ".join(f"{v.identifier}={v.discriminant}" for v in item.catalog)
        else:
            values = ", ".join(v.canonical_name for v in item.catalog)

        name = item.definition.name
        if item.definition.attributes.deprecated:
            name += " (deprecated)"
        enum_table.add_row(
            name,
            item.type_name,
            str(item.representation),
            spec.format if spec else "",
            values,
        )

    console.print(enum_table)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()

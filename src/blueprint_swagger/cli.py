"""CLI entry point for blueprint-swagger."""

import json
import logging
from pathlib import Path

import click
import yaml

from blueprint_swagger.blueprint.loader import load_ast, load_ast_file
from blueprint_swagger.errors import ConversionError
from blueprint_swagger.transform import DEFAULT_FORMAT, FORMATTERS, transform


def _dump(result: dict, output_format: str, indent: int | None) -> str:
    if output_format == "yaml":
        return yaml.safe_dump(result, sort_keys=False, allow_unicode=True)
    return json.dumps(result, indent=indent, ensure_ascii=False)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log conversion details to stderr.")
def main(verbose: bool):
    """Turn API Blueprint ASTs into Swagger 2.0 documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("ast_path", required=False, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path), help="Output file path (default: stdout).")
@click.option("-f", "--format", "fmt", default=DEFAULT_FORMAT, type=click.Choice(sorted(FORMATTERS)), help="Target document format.")
@click.option("--output-format", default="json", type=click.Choice(["json", "yaml"]), help="Serialization of the result.")
@click.option("--indent", default=None, type=int, help="JSON indentation.")
def convert(ast_path: Path | None, output: Path | None, fmt: str, output_format: str, indent: int | None):
    """Convert a parsed Blueprint AST (read from AST_PATH or stdin)."""
    if output:
        click.echo(f"Converting {ast_path or 'stdin'} (format: {fmt})...", err=True)

    try:
        if ast_path:
            ast = load_ast_file(ast_path)
        else:
            ast = load_ast(click.get_text_stream("stdin").read())
        result = transform(ast, fmt)
    except ConversionError as e:
        raise click.ClickException(f"Error transforming the API Blueprint: {e}") from e

    text = _dump(result, output_format, indent)

    if output is None:
        click.echo(text)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    click.echo(f"Found {len(result.get('paths', {}))} paths.", err=True)
    click.echo(f"Document saved to {output}", err=True)

"""Dispatch an AST to the formatter of the requested output format."""

from typing import Callable

from blueprint_swagger.blueprint.models import Document
from blueprint_swagger.errors import UnsupportedFormatError
from blueprint_swagger.swagger.document import convert

DEFAULT_FORMAT = "swagger"

FORMATTERS: dict[str, Callable[[dict | Document], dict]] = {
    "swagger": convert,
}


def transform(ast: dict | Document, fmt: str = DEFAULT_FORMAT) -> dict:
    formatter = FORMATTERS.get(fmt)
    if formatter is None:
        raise UnsupportedFormatError(fmt, sorted(FORMATTERS))
    return formatter(ast)

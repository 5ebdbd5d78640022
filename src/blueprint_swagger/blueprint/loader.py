"""Read the Blueprint parser's AST output.

The parser is an external tool; its result is handed over as JSON (or YAML)
text. Both the bare AST and the parse-result envelope (`{"ast": ..., "sourcemap": ...}`)
are accepted.
"""

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import Document
from blueprint_swagger.errors import StructuralError, UpstreamParseError


def load_ast(text: str) -> dict:
    """Parse serialized parser output into the raw AST mapping."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        # JSON that YAML rejects (e.g. tabs in indentation)
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, ValueError) as e:
            raise UpstreamParseError(f"Parser output is neither JSON nor YAML: {e}") from e

    if not isinstance(data, dict):
        raise UpstreamParseError("Parser output must be a mapping, got " + type(data).__name__)

    if "ast" in data and isinstance(data["ast"], dict):
        return data["ast"]
    return data


def load_ast_file(file_path: Path) -> dict:
    """Read and parse an AST file."""
    return load_ast(file_path.read_text(encoding="utf-8"))


def parse_document(ast: dict | Document) -> Document:
    """Validate a raw AST mapping against the document model."""
    if isinstance(ast, Document):
        return ast
    try:
        return Document.model_validate(ast)
    except ValidationError as e:
        raise StructuralError.from_validation(e) from e

"""Blueprint AST -> Swagger 2.0 document."""

import logging
from urllib.parse import urlsplit

from blueprint_swagger.blueprint.loader import parse_document
from blueprint_swagger.blueprint.models import Document
from .definitions import build_definitions
from .models import Info, SwaggerDocument
from .paths import build_paths
from .security import SecurityRegistry

logger = logging.getLogger(__name__)


def has_data_structures(document: Document) -> bool:
    """True when the last content block follows the resource groups, i.e. the Data Structures section."""
    return len(document.content) == len(document.resource_groups) + 1


def _apply_host(swagger: SwaggerDocument, host: str | None) -> None:
    if not host:
        return
    url = urlsplit(host if "//" in host else "//" + host)
    swagger.host = url.netloc or None
    swagger.base_path = url.path.rstrip("/") or None
    if url.scheme:
        swagger.schemes = [url.scheme]


def build_document(ast: dict | Document) -> SwaggerDocument:
    """Convert an AST into a Swagger document model.

    Raises StructuralError when the AST is missing fields the conversion
    needs. Each call collects security definitions from scratch.
    """
    document = parse_document(ast)
    registry = SecurityRegistry()

    tags, paths = build_paths(document, registry)
    swagger = SwaggerDocument(
        info=Info(title=document.name, description=document.description),
        tags=tags,
        paths=paths,
    )
    if has_data_structures(document):
        swagger.definitions = build_definitions(document.content[-1].data_structures)
    swagger.security_definitions = registry.as_dict()
    _apply_host(swagger, document.metadata_value("HOST"))

    logger.debug(
        "Converted %r: %d paths, %d definitions, %d security schemes",
        document.name,
        len(paths),
        len(swagger.definitions or {}),
        len(registry),
    )
    return swagger


def convert(ast: dict | Document) -> dict:
    """Convert an AST into a JSON-ready Swagger 2.0 mapping."""
    return build_document(ast).to_dict()

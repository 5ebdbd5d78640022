"""Paths and tags built from resource groups."""

import logging

from blueprint_swagger.blueprint.models import Document, Resource
from .models import Operation, Tag
from .operations import build_operation
from .parameters import PLACEHOLDER, is_query_expression, merge_params, path_params, placeholder_names
from .security import SecurityRegistry

logger = logging.getLogger(__name__)


def _path_segment(match) -> str:
    expression = match.group(1)
    if is_query_expression(expression):
        return ""
    return ",".join("{%s}" % name for name in placeholder_names(expression))


def path_key(uri_template: str) -> str:
    """Swagger path of a URI template.

    Query expansions (`{?...}`, `{&...}`) are dropped. Every other expression
    is reduced to plain `{name}` placeholders, so `{+path}`, `{#frag}`,
    `{list*}` and `{id:3}` line up with the extracted path parameters.
    """
    return PLACEHOLDER.sub(_path_segment, uri_template)


def build_resource_operations(resource: Resource, tag: str, registry: SecurityRegistry) -> dict[str, Operation]:
    """Operations of one resource, keyed by lower-cased HTTP method."""
    resource_params = path_params(resource.uri_template, resource.parameters)
    operations: dict[str, Operation] = {}
    for action in resource.actions:
        operation = build_operation(action, registry, resource.uri_template)
        operation.tags = [tag]
        operation.parameters = merge_params(resource_params, operation.parameters)
        operations[action.method.lower()] = operation
    return operations


def build_paths(document: Document, registry: SecurityRegistry) -> tuple[list[Tag], dict[str, dict[str, Operation]]]:
    """Walk all resource groups and return the tag list and the path map.

    Resources whose templates share a path key are merged into one path
    item; a method defined twice keeps the later resource's operation.
    """
    tags: dict[str, Tag] = {}
    paths: dict[str, dict[str, Operation]] = {}

    for group in document.resource_groups:
        tag_name = group.name or document.name
        if tag_name not in tags:
            tags[tag_name] = Tag(name=tag_name, description=group.description)

        for resource in group.resources:
            key = path_key(resource.uri_template)
            operations = build_resource_operations(resource, tag_name, registry)
            if key in paths:
                logger.debug("Merging %s into existing path %s", resource.uri_template, key)
            paths.setdefault(key, {}).update(operations)

    return list(tags.values()), paths

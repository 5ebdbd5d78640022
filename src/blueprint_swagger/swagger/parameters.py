"""Parameter extraction from URI templates and action declarations."""

import logging
import re

from blueprint_swagger.blueprint.models import Action, Parameter
from .models import Param
from .schema import derive_schema

logger = logging.getLogger(__name__)

PLACEHOLDER = re.compile(r"\{([^}]*)\}")

# RFC 6570 operators; `?` and `&` expand into the query string
_QUERY_OPERATORS = "?&"
_PATH_OPERATORS = "+#./;"

PASS_THROUGH_LOCATIONS = ("body", "header")


def is_query_expression(expression: str) -> bool:
    return expression[:1] in _QUERY_OPERATORS


def placeholder_names(expression: str) -> list[str]:
    """Variable names of one `{...}` expression, without operator or modifiers."""
    names = []
    for part in expression.lstrip(_QUERY_OPERATORS + _PATH_OPERATORS).split(","):
        name = part.strip().rstrip("*").split(":")[0]
        if name:
            names.append(name)
    return names


def path_params(uri_template: str, declared: list[Parameter]) -> list[Param]:
    """Path and query parameters named by a URI template.

    Each name appears once, at its first position. Metadata declared on the
    resource under the same name is copied onto the extracted parameter.
    """
    declared_by_name = {p.name: p for p in declared}
    params: dict[str, Param] = {}

    for expression in PLACEHOLDER.findall(uri_template):
        location = "query" if is_query_expression(expression) else "path"
        for name in placeholder_names(expression):
            if name in params:
                continue
            param = Param(
                name=name,
                location=location,
                required=location == "path",
                param_type="string",
                description="",
            )
            meta = declared_by_name.get(name)
            if meta is not None:
                param.required = meta.required
                param.param_type = meta.type or "string"
                param.description = meta.description
            params[name] = param

    return list(params.values())


def action_params(action: Action) -> list[Param]:
    """Parameters declared on an action plus the inferred body and header ones."""
    params = []
    for declared in action.parameters:
        params.append(
            Param(
                name=declared.name,
                required=declared.required,
                param_type=declared.type or "string",
                description=declared.description,
                default=None if declared.required else declared.default,
            )
        )

    request = action.first_request
    if request is None:
        return params

    if request.content:
        params.append(
            Param(name="body", location="body", required=True, param_schema=derive_schema(request.content))
        )
    for header in request.headers:
        if PLACEHOLDER.search(header.value):
            params.append(Param(name=header.name, location="header", required=True, param_type="string"))
    return params


def merge_params(resource_params: list[Param], operation_params: list[Param]) -> list[Param]:
    """Combine the resource's URI parameters with an operation's own.

    Body and header parameters pass through. Other operation parameters take
    the location of the URI parameter with the same name and are dropped when
    the URI has none. An operation without parameters inherits the resource's.
    """
    if not operation_params:
        return list(resource_params)

    by_name = {p.name: p for p in resource_params}
    merged = []
    for param in operation_params:
        if param.location in PASS_THROUGH_LOCATIONS:
            merged.append(param)
            continue
        match = by_name.get(param.name)
        if match is None:
            logger.debug("Dropping parameter %r: not part of the URI template", param.name)
            continue
        merged.append(param.model_copy(update={"location": match.location}))
    return merged

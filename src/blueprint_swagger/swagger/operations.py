"""Operation objects built from Blueprint actions."""

from blueprint_swagger.blueprint.models import Action, Header, Response
from .models import Operation
from .naming import operation_id
from .parameters import action_params
from .schema import derive_schema
from .security import SecurityRegistry, extract_security

TEXT_PLAIN = "text/plain"


def content_type(headers: list[Header]) -> str:
    for header in headers:
        if header.name.lower() == "content-type":
            return header.value
    return ""


def _append_unique(items: list[str], value: str) -> None:
    if value and value not in items:
        items.append(value)


def response_schema(response: Response, response_type: str) -> dict:
    if response_type == TEXT_PLAIN:
        return {"type": "string"}
    return derive_schema(response.content)


def fallback_operation_id(method: str, uri_template: str) -> str:
    """Operation ID for unnamed actions: method plus the URI up to its first placeholder."""
    prefix = uri_template.split("{", 1)[0]
    return operation_id(method.lower() + prefix.replace("/", " "))


def build_operation(action: Action, registry: SecurityRegistry, uri_template: str = "") -> Operation:
    """Build one method's operation.

    Parameters are the action's own; combining them with the resource's URI
    parameters is left to the caller.
    """
    consumes: list[str] = []
    produces: list[str] = []
    responses: dict[str, dict] = {}

    for example in action.examples:
        for request in example.requests:
            _append_unique(consumes, content_type(request.headers))
        for response in example.responses:
            response_type = content_type(response.headers)
            _append_unique(produces, response_type)
            responses[response.name] = {
                "description": response.description,
                "schema": response_schema(response, response_type),
            }

    if action.name:
        op_id = operation_id(action.name)
    else:
        op_id = fallback_operation_id(action.method, uri_template)

    return Operation(
        description=action.description,
        summary=action.description,
        consumes=consumes,
        produces=produces,
        parameters=action_params(action),
        responses=responses,
        operation_id=op_id,
        security=extract_security(action, registry),
    )

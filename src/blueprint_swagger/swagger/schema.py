"""Schema fragments for request and response bodies."""

from blueprint_swagger.blueprint.models import ContentNode, DataStructureNode, EnumElement, ValueElement
from .naming import definition_name
from .types import DEFINITIONS_PREFIX, TypeKind, classify


def ref(identifier: str) -> dict:
    """`$ref` to the definition generated for a data structure id."""
    return {"$ref": DEFINITIONS_PREFIX + definition_name(identifier)}


def enum_schema(element: EnumElement) -> dict:
    values = [literal.content for literal in element.content]
    literal_type = element.content[0].element if element.content else "string"
    return {"type": literal_type, "enum": values}


def item_schema(item: ValueElement | None) -> dict:
    """Schema of an array body's items."""
    if item is None:
        return {}
    kind = classify(item.element).kind
    if kind is TypeKind.PRIMITIVE:
        return {"type": item.element}
    if kind is TypeKind.OBJECT:
        return {"type": "object"}
    if kind is TypeKind.ARRAY:
        return {"type": "array", "items": item_schema(item.item)}
    if kind is TypeKind.ENUM:
        return enum_schema(item)
    return ref(item.element)


def payload_schema(payload: ValueElement) -> dict:
    kind = classify(payload.element).kind
    if kind is TypeKind.ARRAY:
        return {"type": "array", "items": item_schema(payload.item)}
    if kind is TypeKind.OBJECT:
        return {"type": "object"}
    if kind is TypeKind.PRIMITIVE:
        return {"type": payload.element}
    if kind is TypeKind.ENUM:
        return enum_schema(payload)
    return ref(payload.element)


def derive_schema(content: list[ContentNode]) -> dict:
    """Schema of the first `dataStructure` node in a body, `{}` if there is none."""
    for node in content:
        if isinstance(node, DataStructureNode) and node.payload is not None:
            return payload_schema(node.payload)
    return {}

"""Classification of MSON element names."""

from enum import Enum
from typing import NamedTuple

from blueprint_swagger.blueprint.models import PRIMITIVE_TYPES

DEFINITIONS_PREFIX = "#/definitions/"


class TypeKind(str, Enum):
    PRIMITIVE = "primitive"
    ARRAY = "array"
    OBJECT = "object"
    ENUM = "enum"
    REFERENCE = "reference"


class TypeClass(NamedTuple):
    kind: TypeKind
    name: str  # the element name; for references, the referenced structure id


def classify(element: str) -> TypeClass:
    """Sort an element name into primitive, structural or referenced.

    Anything that is not a primitive or structural type names another data
    structure.
    """
    if element in PRIMITIVE_TYPES:
        return TypeClass(TypeKind.PRIMITIVE, element)
    if element == "array":
        return TypeClass(TypeKind.ARRAY, element)
    if element == "object":
        return TypeClass(TypeKind.OBJECT, element)
    if element == "enum":
        return TypeClass(TypeKind.ENUM, element)
    return TypeClass(TypeKind.REFERENCE, element)

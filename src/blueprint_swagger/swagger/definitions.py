"""Schema definitions built from the Data Structures section.

Each named structure becomes one definition. A structure that extends
another named structure becomes an `allOf` of the parent's `$ref` and its
own properties, and the parent is flagged with a `discriminator`.
"""

import logging
import re
from datetime import datetime

from blueprint_swagger.blueprint.models import DataStructureNode, MemberElement, ValueElement
from .naming import definition_name
from .schema import enum_schema, ref
from .types import TypeKind, classify

logger = logging.getLogger(__name__)

_DATE = (re.compile(r"\d{4}-\d{2}-\d{2}"), "%Y-%m-%d")

_DATE_TIMES = [
    (re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z"), "%Y-%m-%dT%H:%M:%SZ"),
    (re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z"), "%Y-%m-%dT%H:%M:%S.%fZ"),
    (re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}"), "%Y-%m-%dT%H:%M:%S%z"),
    (re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}[+-]\d{2}:\d{2}"), "%Y-%m-%dT%H:%M:%S.%f%z"),
    (re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}"), "%Y-%m-%dT%H:%M:%S"),
]


def _strict_match(sample: str, pattern: re.Pattern, fmt: str) -> bool:
    if not pattern.fullmatch(sample):
        return False
    try:
        datetime.strptime(sample, fmt)
    except ValueError:
        return False
    return True


def date_format(sample: str) -> str | None:
    """`date` or `date-time` when a sample value is a valid ISO 8601 date or timestamp."""
    if _strict_match(sample, *_DATE):
        return "date"
    if any(_strict_match(sample, pattern, fmt) for pattern, fmt in _DATE_TIMES):
        return "date-time"
    return None


class DefinitionBuilder:
    """Collects the definitions of one document."""

    def __init__(self):
        self.definitions: dict[str, dict] = {}
        self._sources: dict[str, str] = {}  # definition name -> structure id

    def build(self, structures: list[DataStructureNode]) -> dict[str, dict]:
        for node in structures:
            if node.payload is not None:
                self.add(node.payload)
        return self.definitions

    def add(self, structure: ValueElement) -> None:
        identifier = structure.meta.id if structure.meta else ""
        if not identifier:
            logger.debug("Skipping unnamed %s structure", structure.element)
            return

        kind = classify(structure.element).kind
        if kind is TypeKind.PRIMITIVE:
            logger.debug("Skipping primitive structure %r (%s)", identifier, structure.element)
            return

        name = definition_name(identifier)
        replaced = self._claim(name, identifier)

        if kind is TypeKind.ARRAY:
            definition = {"title": identifier, "type": "array", "items": self.item_schema(structure.item)}
        elif kind is TypeKind.ENUM:
            definition = {"title": identifier, **enum_schema(structure)}
        elif kind is TypeKind.OBJECT:
            definition = {"title": identifier, **self.object_schema(structure.members)}
        else:
            own = self.object_schema(structure.members)
            own.pop("type")
            required = own.pop("required", None)
            definition = {"title": identifier, "type": "object", "allOf": [ref(structure.element), own]}
            if required:
                definition["required"] = required
            self._mark_parent(structure.element)

        existing = self.definitions.get(name)
        if existing is None:
            self.definitions[name] = definition
        elif replaced:
            # only the parent flag outlives a colliding structure
            kept = {"discriminator": existing["discriminator"]} if "discriminator" in existing else {}
            self.definitions[name] = {**kept, **definition}
        else:
            existing.update(definition)
        logger.debug("Built definition %s", name)

    def _claim(self, name: str, identifier: str) -> bool:
        """Record `identifier` as the source of `name`; true when it displaces another structure."""
        previous = self._sources.get(name)
        self._sources[name] = identifier
        if previous is None or previous == identifier:
            return False
        logger.warning(
            "Data structures %r and %r both map to definition %r; the later one wins",
            previous,
            identifier,
            name,
        )
        return True

    def _mark_parent(self, parent: str) -> None:
        self.definitions.setdefault(definition_name(parent), {})["discriminator"] = ""

    def object_schema(self, members: list[MemberElement]) -> dict:
        properties = {}
        required = []
        for member in members:
            properties[member.name] = self.value_schema(member.value)
            if member.required:
                required.append(member.name)

        schema = {"type": "object", "properties": properties}
        if required:
            schema["required"] = required
        return schema

    def value_schema(self, value: ValueElement) -> dict:
        """Schema of a member value."""
        kind = classify(value.element).kind
        if kind is TypeKind.PRIMITIVE:
            schema = {"type": value.element}
            fmt = date_format(value.content) if isinstance(value.content, str) else None
            if fmt:
                schema["format"] = fmt
            return schema
        if kind is TypeKind.ENUM:
            return enum_schema(value)
        if kind is TypeKind.ARRAY:
            return {"type": "array", "items": self.item_schema(value.item)}
        if kind is TypeKind.OBJECT:
            return self.object_schema(value.members)
        return ref(value.element)

    def item_schema(self, item: ValueElement | None) -> dict:
        if item is None:
            return {}
        kind = classify(item.element).kind
        if kind is TypeKind.PRIMITIVE:
            return {"type": item.element}
        if kind is TypeKind.OBJECT:
            return {"type": "object"}
        if kind is TypeKind.REFERENCE:
            return ref(item.element)
        return self.value_schema(item)


def build_definitions(structures: list[DataStructureNode]) -> dict[str, dict]:
    return DefinitionBuilder().build(structures)

"""Identifier transforms for operation IDs and definition names."""

import re
import unicodedata

_NON_WORD = re.compile(r"[^\w\s-]", re.ASCII)
_SEPARATORS = re.compile(r"[_\s]+")
_DASHES = re.compile(r"-+")
_CAMEL_BREAK = re.compile(r"[-_\s]+(.)?")


def _latinise(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def slug(identifier: str) -> str:
    """Lower-case, dash-separated token: `List All Widgets!` -> `list-all-widgets`."""
    token = _NON_WORD.sub("", _latinise(identifier)).lower().strip()
    token = _DASHES.sub("-", _SEPARATORS.sub("-", token))
    return token[1:] if token.startswith("-") else token


def camelize(token: str) -> str:
    """Join dash/underscore/space separated words: `list-all-widgets` -> `listAllWidgets`."""
    return _CAMEL_BREAK.sub(lambda m: (m.group(1) or "").upper(), token.strip())


def capitalize(identifier: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    return identifier[:1].upper() + identifier[1:].lower()


def operation_id(name: str) -> str:
    return camelize(slug(name))


def definition_name(identifier: str) -> str:
    return camelize(capitalize(identifier))

"""Security schemes encoded in request header values.

A header such as `Authorization: token {security:apiKey}` declares the
`token` scheme of type `apiKey`, sent in the `Authorization` header.
"""

import logging
import re

from blueprint_swagger.blueprint.models import Action

logger = logging.getLogger(__name__)

SECURITY_MARKER = re.compile(r" \{security:([^}]+)\}")


class SecurityRegistry:
    """Security definitions collected during one conversion."""

    def __init__(self):
        self._definitions: dict[str, dict] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def register(self, name: str, definition: dict) -> None:
        """Add a scheme; a name already registered keeps its first definition."""
        if name in self._definitions:
            return
        logger.debug("Registered security scheme %r: %s", name, definition)
        self._definitions[name] = definition

    def as_dict(self) -> dict[str, dict]:
        return {name: dict(definition) for name, definition in self._definitions.items()}


def extract_security(action: Action, registry: SecurityRegistry) -> list[dict[str, list]]:
    """Security requirements of an action, registering their schemes."""
    request = action.first_request
    if request is None:
        return []

    security = []
    for header in request.headers:
        match = SECURITY_MARKER.search(header.value)
        if match is None:
            continue
        scheme_type = match.group(1)
        scheme_name = header.value.replace(match.group(0), "")
        registry.register(scheme_name, {"in": "header", "name": header.name, "type": scheme_type})
        security.append({scheme_name: []})
    return security

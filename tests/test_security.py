from blueprint_swagger.blueprint.models import Action
from blueprint_swagger.swagger.security import SecurityRegistry, extract_security


def _action(*headers: tuple[str, str]) -> Action:
    return Action.model_validate({
        "method": "GET",
        "examples": [{"requests": [{"headers": [{"name": n, "value": v} for n, v in headers]}]}],
    })


class TestExtractSecurity:
    def test_marker_registers_scheme(self):
        registry = SecurityRegistry()
        security = extract_security(_action(("Authorization", "token {security:apiKey}")), registry)
        assert security == [{"token": []}]
        assert registry.as_dict() == {"token": {"in": "header", "name": "Authorization", "type": "apiKey"}}

    def test_no_marker(self):
        registry = SecurityRegistry()
        assert extract_security(_action(("Authorization", "Bearer abc")), registry) == []
        assert len(registry) == 0

    def test_marker_needs_leading_space(self):
        registry = SecurityRegistry()
        assert extract_security(_action(("Authorization", "{security:apiKey}")), registry) == []

    def test_registration_is_idempotent(self):
        registry = SecurityRegistry()
        extract_security(_action(("Authorization", "token {security:apiKey}")), registry)
        extract_security(_action(("X-Token", "token {security:basic}")), registry)
        assert registry.as_dict() == {"token": {"in": "header", "name": "Authorization", "type": "apiKey"}}

    def test_action_without_requests(self):
        registry = SecurityRegistry()
        assert extract_security(Action(method="GET"), registry) == []

    def test_registries_are_independent(self):
        first = SecurityRegistry()
        extract_security(_action(("Authorization", "token {security:apiKey}")), first)
        assert "token" in first
        assert "token" not in SecurityRegistry()

import pytest
from pydantic import ValidationError

from blueprint_swagger.blueprint.models import (
    Action,
    ArrayElement,
    DataStructureNode,
    Document,
    EnumElement,
    MemberElement,
    ObjectElement,
    PrimitiveElement,
    RawElement,
    ReferenceElement,
    Request,
)


def _ds(value: dict) -> DataStructureNode:
    return DataStructureNode.model_validate({"element": "dataStructure", "content": [value]})


class TestValueElements:
    def test_primitive(self):
        node = _ds({"element": "string", "content": "abc"})
        assert isinstance(node.payload, PrimitiveElement)
        assert node.payload.content == "abc"

    def test_array_item(self):
        node = _ds({"element": "array", "content": [{"element": "Widget"}]})
        assert isinstance(node.payload, ArrayElement)
        assert isinstance(node.payload.item, ReferenceElement)

    def test_empty_array_has_no_item(self):
        assert _ds({"element": "array"}).payload.item is None

    def test_enum(self):
        node = _ds({"element": "enum", "content": [{"element": "string", "content": "a"}]})
        assert isinstance(node.payload, EnumElement)

    def test_object_members_skip_other_elements(self):
        node = _ds({
            "element": "object",
            "meta": {"id": "Widget"},
            "content": [
                {"element": "ref", "content": "Base"},
                {
                    "element": "member",
                    "attributes": {"typeAttributes": ["required"]},
                    "content": {"key": {"element": "string", "content": "id"}, "value": {"element": "number"}},
                },
            ],
        })
        assert isinstance(node.payload, ObjectElement)
        assert isinstance(node.payload.content[0], RawElement)
        members = node.payload.members
        assert len(members) == 1
        assert isinstance(members[0], MemberElement)
        assert members[0].name == "id"
        assert members[0].required is True

    def test_reference_with_members(self):
        node = _ds({
            "element": "Widget",
            "meta": {"id": "Gadget"},
            "content": [{"element": "member", "content": {"key": {"content": "size"}, "value": {"element": "number"}}}],
        })
        assert isinstance(node.payload, ReferenceElement)
        assert node.payload.members[0].required is False

    def test_member_without_value_is_rejected(self):
        with pytest.raises(ValidationError):
            _ds({"element": "object", "content": [{"element": "member", "content": {"key": {"content": "id"}}}]})


class TestAction:
    def test_first_request(self):
        action = Action.model_validate({
            "method": "POST",
            "examples": [{"requests": [{"name": "a"}, {"name": "b"}]}, {"requests": [{"name": "c"}]}],
        })
        assert isinstance(action.first_request, Request)
        assert action.first_request.name == "a"

    def test_no_examples(self):
        assert Action(method="GET").first_request is None


class TestDocument:
    def test_aliases(self):
        doc = Document.model_validate({
            "name": "API",
            "resourceGroups": [{"resources": [{"uriTemplate": "/a", "actions": []}]}],
        })
        assert doc.resource_groups[0].resources[0].uri_template == "/a"

    def test_metadata_lookup_is_case_insensitive(self):
        doc = Document.model_validate({
            "name": "API",
            "metadata": [{"name": "HOST", "value": "https://x.io"}],
            "resourceGroups": [],
        })
        assert doc.metadata_value("host") == "https://x.io"
        assert doc.metadata_value("FORMAT") is None

from blueprint_swagger.blueprint.models import Action, Parameter
from blueprint_swagger.swagger.models import Param
from blueprint_swagger.swagger.parameters import action_params, merge_params, path_params


def _action(parameters=None, headers=None, content=None) -> Action:
    request = {"headers": headers or [], "content": content or []}
    return Action.model_validate({
        "name": "Do",
        "method": "POST",
        "parameters": parameters or [],
        "examples": [{"requests": [request], "responses": []}],
    })


class TestPathParams:
    def test_path_and_query_placeholders(self):
        params = path_params("/widgets/{id}{?page,limit}", [])
        assert [(p.name, p.location) for p in params] == [
            ("id", "path"),
            ("page", "query"),
            ("limit", "query"),
        ]
        assert params[0].required is True
        assert params[1].required is False

    def test_duplicates_keep_first_position(self):
        params = path_params("/a/{id}/b/{id}{?id,q}", [])
        assert [(p.name, p.location) for p in params] == [("id", "path"), ("q", "query")]

    def test_declared_metadata_copied(self):
        declared = [
            Parameter(name="id", type="number", required=True, description="Widget ID"),
            Parameter(name="page", type="number", required=False, description="Page number"),
        ]
        params = path_params("/widgets/{id}{?page}", declared)
        assert params[0].param_type == "number"
        assert params[0].description == "Widget ID"
        assert params[1].param_type == "number"
        assert params[1].required is False

    def test_empty_declared_type_stays_string(self):
        params = path_params("/widgets/{id}", [Parameter(name="id", required=True)])
        assert params[0].param_type == "string"

    def test_operators_and_modifiers_stripped(self):
        params = path_params("/files/{+path}/{name:3}{&explode*}", [])
        assert [(p.name, p.location) for p in params] == [
            ("path", "path"),
            ("name", "path"),
            ("explode", "query"),
        ]

    def test_no_placeholders(self):
        assert path_params("/health", []) == []


class TestActionParams:
    def test_declared_params(self):
        action = _action(parameters=[
            {"name": "id", "type": "number", "required": True, "description": "ID", "default": ""},
            {"name": "sort", "type": "", "required": False, "default": "name"},
        ])
        params = action_params(action)
        assert params[0].to_dict() == {"name": "id", "required": True, "type": "number", "description": "ID"}
        assert params[1].default == "name"
        assert params[1].param_type == "string"

    def test_body_param_from_request_content(self):
        action = _action(content=[{"element": "dataStructure", "content": [{"element": "Widget"}]}])
        body = action_params(action)[0]
        assert body.to_dict() == {
            "name": "body",
            "in": "body",
            "required": True,
            "schema": {"$ref": "#/definitions/Widget"},
        }

    def test_header_params_from_placeholders(self):
        action = _action(headers=[
            {"name": "Content-Type", "value": "application/json"},
            {"name": "X-Request-Id", "value": "{requestId}"},
        ])
        params = action_params(action)
        assert len(params) == 1
        assert params[0].to_dict() == {"name": "X-Request-Id", "in": "header", "required": True, "type": "string"}

    def test_no_examples(self):
        assert action_params(Action(method="GET")) == []


class TestMergeParams:
    def _resource_params(self):
        return [
            Param(name="id", location="path", required=True, param_type="string"),
            Param(name="page", location="query", required=False, param_type="number"),
        ]

    def test_empty_operation_params_fall_back(self):
        merged = merge_params(self._resource_params(), [])
        assert [p.name for p in merged] == ["id", "page"]

    def test_adopts_resource_location(self):
        op_params = [Param(name="page", required=False, param_type="integer", description="Page")]
        merged = merge_params(self._resource_params(), op_params)
        assert len(merged) == 1
        assert merged[0].location == "query"
        assert merged[0].param_type == "integer"
        assert merged[0].description == "Page"

    def test_unmatched_dropped(self):
        merged = merge_params(self._resource_params(), [Param(name="other", required=True)])
        assert merged == []

    def test_body_and_header_pass_through(self):
        op_params = [
            Param(name="body", location="body", required=True, param_schema={}),
            Param(name="Authorization", location="header", required=True, param_type="string"),
        ]
        merged = merge_params(self._resource_params(), op_params)
        assert [p.location for p in merged] == ["body", "header"]

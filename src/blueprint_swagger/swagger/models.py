"""Swagger 2.0 document models.

Field names follow Python conventions; `to_dict()` dumps them under the
Swagger key names and leaves out unset optional keys.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

SWAGGER_VERSION = "2.0"


class SwaggerModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class Param(SwaggerModel):
    """A single operation parameter (path, query, header or body)."""

    name: str
    location: str | None = Field(default=None, alias="in")  # path / query / header / body
    required: bool = False
    param_type: str | None = Field(default=None, alias="type")
    description: str | None = None
    default: Any = None
    param_schema: dict | None = Field(default=None, alias="schema")  # body parameters only


class Operation(SwaggerModel):
    """One HTTP method of a path."""

    description: str = ""
    summary: str = ""
    consumes: list[str] = []
    produces: list[str] = []
    parameters: list[Param] = []
    responses: dict[str, dict] = {}  # {status_code: {description, schema}}
    operation_id: str = Field(default="", alias="operationId")
    tags: list[str] = []
    security: list[dict[str, list]] = []


class Tag(SwaggerModel):
    name: str
    description: str = ""


class Info(SwaggerModel):
    title: str
    description: str = ""


class SwaggerDocument(SwaggerModel):
    swagger: str = SWAGGER_VERSION
    info: Info
    host: str | None = None
    base_path: str | None = Field(default=None, alias="basePath")
    schemes: list[str] | None = None
    tags: list[Tag] = []
    paths: dict[str, dict[str, Operation]] = {}
    definitions: dict[str, dict] | None = None
    security_definitions: dict[str, dict] = Field(default={}, alias="securityDefinitions")

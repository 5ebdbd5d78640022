"""Data models for the Blueprint AST produced by the external parser.

The parser emits camelCase keys; the models accept them through aliases
and ignore keys the converters never read. Value elements (the MSON part of
the tree) are a tagged union so every consumer handles the same five kinds:
primitive, array, object, enum and reference.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

PRIMITIVE_TYPES = ("number", "string", "boolean", "integer")
STRUCTURAL_TYPES = ("array", "object", "enum")


class AstModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def _element_of(value: Any) -> Any:
    if isinstance(value, dict):
        return value.get("element")
    return getattr(value, "element", None)


def _value_kind(value: Any) -> str:
    element = _element_of(value)
    if element in PRIMITIVE_TYPES:
        return "primitive"
    if element in STRUCTURAL_TYPES:
        return element
    return "reference"


def _member_kind(value: Any) -> str:
    return "member" if _element_of(value) == "member" else "raw"


def _node_kind(value: Any) -> str:
    return "dataStructure" if _element_of(value) == "dataStructure" else "raw"


class Meta(AstModel):
    id: str = ""


class RawElement(AstModel):
    """Any element the converters pass over (copy text, assets, resources)."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    element: str
    content: Any = None


class PrimitiveElement(AstModel):
    element: Literal["number", "string", "boolean", "integer"]
    meta: Meta | None = None
    content: Any = None  # sample literal


class ArrayElement(AstModel):
    element: Literal["array"]
    meta: Meta | None = None
    content: list["ValueElement"] = []

    @property
    def item(self) -> "ValueElement | None":
        return self.content[0] if self.content else None


class EnumElement(AstModel):
    element: Literal["enum"]
    meta: Meta | None = None
    content: list["ValueElement"] = []


class ObjectElement(AstModel):
    element: Literal["object"]
    meta: Meta | None = None
    content: list["ObjectItem"] = []

    @property
    def members(self) -> list["MemberElement"]:
        return [item for item in self.content if isinstance(item, MemberElement)]


class ReferenceElement(AstModel):
    """A value typed by a named data structure.

    As a member value it only names the structure. As a named structure it
    names the parent it extends and carries its own members.
    """

    element: str
    meta: Meta | None = None
    content: list["ObjectItem"] | str | int | float | bool | None = None

    @property
    def members(self) -> list["MemberElement"]:
        if not isinstance(self.content, list):
            return []
        return [item for item in self.content if isinstance(item, MemberElement)]


class MemberKey(AstModel):
    element: str = "string"
    content: str


class MemberAttributes(AstModel):
    type_attributes: list[str] = Field(default=[], alias="typeAttributes")


class MemberContent(AstModel):
    key: MemberKey
    value: "ValueElement"


class MemberElement(AstModel):
    """A `key: value` pair of an object structure."""

    element: Literal["member"] = "member"
    attributes: MemberAttributes | None = None
    content: MemberContent

    @property
    def name(self) -> str:
        return self.content.key.content

    @property
    def value(self) -> "ValueElement":
        return self.content.value

    @property
    def required(self) -> bool:
        return self.attributes is not None and "required" in self.attributes.type_attributes


ValueElement = Annotated[
    Union[
        Annotated[PrimitiveElement, Tag("primitive")],
        Annotated[ArrayElement, Tag("array")],
        Annotated[ObjectElement, Tag("object")],
        Annotated[EnumElement, Tag("enum")],
        Annotated[ReferenceElement, Tag("reference")],
    ],
    Discriminator(_value_kind),
]

ObjectItem = Annotated[
    Union[
        Annotated[MemberElement, Tag("member")],
        Annotated[RawElement, Tag("raw")],
    ],
    Discriminator(_member_kind),
]


class DataStructureNode(AstModel):
    """`dataStructure` wrapper around one value element."""

    element: Literal["dataStructure"]
    content: list[ValueElement] = []

    @property
    def payload(self) -> ValueElement | None:
        return self.content[0] if self.content else None


ContentNode = Annotated[
    Union[
        Annotated[DataStructureNode, Tag("dataStructure")],
        Annotated[RawElement, Tag("raw")],
    ],
    Discriminator(_node_kind),
]


class Header(AstModel):
    name: str
    value: str = ""


class Parameter(AstModel):
    """A parameter declared in a resource or action `Parameters` section."""

    name: str
    description: str = ""
    type: str = ""
    required: bool = False
    default: Any = ""
    example: Any = ""
    values: list[Any] = []


class Request(AstModel):
    name: str = ""
    description: str = ""
    headers: list[Header] = []
    content: list[ContentNode] = []


class Response(AstModel):
    name: str  # status code
    description: str = ""
    headers: list[Header] = []
    content: list[ContentNode] = []


class Example(AstModel):
    name: str = ""
    description: str = ""
    requests: list[Request] = []
    responses: list[Response] = []


class Action(AstModel):
    name: str = ""
    description: str = ""
    method: str
    parameters: list[Parameter] = []
    examples: list[Example] = []

    @property
    def first_request(self) -> Request | None:
        """The request of the first example, which carries body and auth headers."""
        if not self.examples or not self.examples[0].requests:
            return None
        return self.examples[0].requests[0]


class Resource(AstModel):
    name: str = ""
    description: str = ""
    uri_template: str = Field(alias="uriTemplate")
    parameters: list[Parameter] = []
    actions: list[Action]


class ResourceGroup(AstModel):
    name: str = ""
    description: str = ""
    resources: list[Resource]


class Category(AstModel):
    """Top-level content block (a resource group or the data structures section)."""

    element: str = "category"
    content: list[ContentNode] = []

    @property
    def data_structures(self) -> list[DataStructureNode]:
        return [node for node in self.content if isinstance(node, DataStructureNode)]


class MetadataEntry(AstModel):
    name: str
    value: str = ""


class Document(AstModel):
    """Root of the AST."""

    name: str
    description: str = ""
    metadata: list[MetadataEntry] = []
    resource_groups: list[ResourceGroup] = Field(alias="resourceGroups")
    content: list[Category] = []

    def metadata_value(self, name: str) -> str | None:
        for entry in self.metadata:
            if entry.name.lower() == name.lower():
                return entry.value
        return None


for _model in (ArrayElement, EnumElement, ObjectElement, ReferenceElement, MemberContent, MemberElement):
    _model.model_rebuild()

"""Errors raised while turning a Blueprint AST into another document format."""

from pydantic import ValidationError


class ConversionError(Exception):
    """Base class for all conversion failures."""


class UpstreamParseError(ConversionError):
    """The parser output could not be read as an AST."""


class StructuralError(ConversionError):
    """The AST does not have the shape the converter expects."""

    @classmethod
    def from_validation(cls, error: ValidationError) -> "StructuralError":
        locations = []
        for detail in error.errors():
            loc = ".".join(str(part) for part in detail["loc"])
            locations.append(f"{loc}: {detail['msg']}")
        return cls("Malformed AST: " + "; ".join(locations))


class UnsupportedFormatError(ConversionError):
    """The requested output format has no formatter."""

    def __init__(self, fmt: str, supported: list[str]):
        self.format = fmt
        self.supported = supported
        super().__init__(f"Unsupported format '{fmt}' (supported: {', '.join(supported)})")

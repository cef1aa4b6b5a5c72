"""Plain-data descriptors for enum definitions."""

from dataclasses import dataclass, field
from typing import Any

from dataclasses_json import DataClassJsonMixin


@dataclass
class ExternalDocument(DataClassJsonMixin):
    """Link to additional documentation for a type."""

    url: str
    description: str | None = None


@dataclass
class EnumAttributes(DataClassJsonMixin):
    """Whole-enum attributes.

    - rename: schema name used instead of the enum's own name
    - rename_all: case rule applied to every variant identifier
    - repr: explicit integer representation override (i32, i64, u32, u64)
    - remote: name of a structurally identical enum to convert to and from
    """

    rename: str | None = None
    rename_all: str | None = None
    repr: str | None = None
    deprecated: bool = False
    external_docs: ExternalDocument | None = None
    remote: str | None = None
    description: str | None = None


@dataclass
class VariantSource(DataClassJsonMixin):
    """Represents a single declared variant.

    A non-empty `fields` list means the variant carries associated data,
    which is never valid for an OpenAPI enum.
    """

    identifier: str
    rename: str | None = None
    discriminant: Any | None = None
    fields: list[str] = field(default_factory=list)


@dataclass
class EnumDefinition(DataClassJsonMixin):
    """Represents a complete enum declaration.

    `native_repr` is the representation the enum declares for itself, as
    opposed to the override in `attributes.repr`.
    """

    name: str
    variants: list[VariantSource]
    attributes: EnumAttributes = field(default_factory=EnumAttributes)
    native_repr: str | None = None

    @property
    def type_name(self) -> str:
        """Canonical schema name of the enum."""
        return self.attributes.rename or self.name

"""Schema registry for OpenAPI components."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .errors import DuplicateSchemaError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetaExternalDocument:
    """External documentation attached to a schema."""

    url: str
    description: str | None = None

    def to_openapi(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"url": self.url}
        if self.description is not None:
            doc["description"] = self.description
        return doc


@dataclass
class MetaSchema:
    """A schema object as it appears under components.schemas."""

    ty: str
    format: str | None = None
    enum_items: list[Any] = field(default_factory=list)
    minimum: float | None = None
    maximum: float | None = None
    description: str | None = None
    deprecated: bool = False
    external_docs: MetaExternalDocument | None = None

    def to_openapi(self) -> dict[str, Any]:
        """Render the schema as an OpenAPI JSON object."""
        schema: dict[str, Any] = {"type": self.ty}
        if self.format is not None:
            schema["format"] = self.format
        if self.description is not None:
            schema["description"] = self.description
        if self.enum_items:
            schema["enum"] = list(self.enum_items)
        if self.minimum is not None:
            schema["minimum"] = self.minimum
        if self.maximum is not None:
            schema["maximum"] = self.maximum
        if self.deprecated:
            schema["deprecated"] = True
        if self.external_docs is not None:
            schema["externalDocs"] = self.external_docs.to_openapi()
        return schema


# Placeholder stored while a builder runs so recursive registration of the
# same name does not invoke the builder twice.
_PENDING = MetaSchema(ty="object")


@dataclass(frozen=True)
class MetaSchemaRef:
    """Reference to a registered schema."""

    name: str

    def to_openapi(self) -> dict[str, Any]:
        return {"$ref": f"#/components/schemas/{self.name}"}


class Registry:
    """Write-once-per-name map of schemas.

    Each name is bound to the type that first registered it. Registering the
    same type again is a no-op; registering a different type under a taken
    name raises DuplicateSchemaError.
    """

    def __init__(self) -> None:
        self.schemas: dict[str, MetaSchema] = {}
        self.types: dict[str, Any] = {}

    def create_schema(
        self,
        name: str,
        type_id: Any,
        builder: Callable[["Registry"], MetaSchema],
    ) -> None:
        """Register the schema built by `builder` unless `name` is taken."""
        if name in self.schemas:
            previous = self.types.get(name)
            if previous is not None and previous != type_id:
                raise DuplicateSchemaError(
                    f"`{_type_label(previous)}` and `{_type_label(type_id)}` "
                    f"have the same OpenAPI name `{name}`"
                )
            return

        self.schemas[name] = _PENDING
        self.types[name] = type_id
        try:
            self.schemas[name] = builder(self)
        except BaseException:
            del self.schemas[name]
            del self.types[name]
            raise
        logger.debug("Registered schema %s", name)

    def to_openapi(self) -> dict[str, Any]:
        """Render every registered schema, keyed by name."""
        return {name: schema.to_openapi() for name, schema in sorted(self.schemas.items())}


def _type_label(type_id: Any) -> str:
    if isinstance(type_id, type):
        return f"{type_id.__module__}.{type_id.__qualname__}"
    return str(type_id)

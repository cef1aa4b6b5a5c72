"""Schema descriptors for resolved enums."""

from typing import Any

from .catalog import ResolvedEnum
from .registry import MetaExternalDocument, MetaSchema, MetaSchemaRef, Registry


def build_schema(resolved: ResolvedEnum) -> MetaSchema:
    """Build the schema for an enum.

    Enumerated values follow declaration order: discriminants in integer
    mode, canonical names in string mode.
    """
    attributes = resolved.definition.attributes
    spec = resolved.representation.integer

    if spec is not None:
        schema = MetaSchema(
            ty="integer",
            format=spec.format,
            enum_items=[int(v.discriminant) for v in resolved.catalog],
            minimum=spec.minimum,
            maximum=spec.maximum,
        )
    else:
        schema = MetaSchema(
            ty="string",
            enum_items=[v.canonical_name for v in resolved.catalog],
        )

    schema.description = attributes.description
    schema.deprecated = attributes.deprecated
    if attributes.external_docs is not None:
        schema.external_docs = MetaExternalDocument(
            url=attributes.external_docs.url,
            description=attributes.external_docs.description,
        )
    return schema


def register_schema(registry: Registry, resolved: ResolvedEnum, type_id: Any) -> None:
    """Register the enum's schema under its canonical type name."""
    registry.create_schema(resolved.type_name, type_id, lambda _: build_schema(resolved))


def schema_ref(resolved: ResolvedEnum) -> MetaSchemaRef:
    return MetaSchemaRef(resolved.type_name)

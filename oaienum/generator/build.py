"""Resolution of parsed enum definitions ahead of code generation."""

import logging

from ..bridge import check_variant_sets
from ..catalog import ResolvedEnum, resolve_enum
from ..errors import ValidationError
from ..registry import Registry
from ..schema import register_schema
from ..types import EnumDefinition

logger = logging.getLogger(__name__)


def resolve_definitions(definitions: list[EnumDefinition]) -> list[ResolvedEnum]:
    """Resolve every definition and check remote variant sets.

    Raises ValidationError on the first definition that cannot be generated.
    """
    by_name = {d.name: d for d in definitions}
    resolved = [resolve_enum(d) for d in definitions]

    for definition in definitions:
        remote_name = definition.attributes.remote
        if remote_name is None:
            continue
        remote = by_name.get(remote_name)
        if remote is None:
            raise ValidationError(f"{definition.name} has remote {remote_name}, but not declared")
        check_variant_sets(
            definition.name,
            [v.identifier for v in definition.variants],
            remote.name,
            [v.identifier for v in remote.variants],
        )

    return resolved


def build_registry(resolved: list[ResolvedEnum]) -> Registry:
    """Register the schema of every resolved enum, keyed by enum name."""
    registry = Registry()
    for item in resolved:
        register_schema(registry, item, item.definition.name)
    logger.debug("Built registry with %d schemas", len(registry.schemas))
    return registry


def emission_order(resolved: list[ResolvedEnum]) -> list[ResolvedEnum]:
    """Order enums so that every remote target precedes the enums using it."""
    by_name = {item.definition.name: item for item in resolved}
    ordered: list[ResolvedEnum] = []
    done: set[str] = set()

    for item in resolved:
        chain: list[str] = []
        current: ResolvedEnum | None = item
        while current is not None and current.definition.name not in done:
            if current.definition.name in chain:
                cycle = " -> ".join([*chain, current.definition.name])
                raise ValidationError(f"Remote enums form a cycle: {cycle}")
            chain.append(current.definition.name)
            remote = current.definition.attributes.remote
            current = by_name.get(remote) if remote is not None else None

        for name in reversed(chain):
            done.add(name)
            ordered.append(by_name[name])

    return ordered

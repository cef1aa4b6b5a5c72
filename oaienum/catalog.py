"""Ordered, validated variant lists for enum definitions."""

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from .errors import ValidationError
from .rename import RenameRule, apply_rename_rule
from .representation import Representation, resolve
from .types import EnumDefinition, VariantSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Variant:
    """A catalog entry.

    `discriminant` is only meaningful in integer mode; in string mode it holds
    whatever the declaration supplied.
    """

    identifier: str
    canonical_name: str
    discriminant: Any | None


class VariantCatalog(Sequence[Variant]):
    """Variants of one enum in declaration order."""

    def __init__(self, variants: Sequence[Variant]) -> None:
        self._variants = tuple(variants)
        self._by_identifier = {v.identifier: v for v in self._variants}
        self._by_name = {v.canonical_name: v for v in self._variants}

    def __getitem__(self, index):  # type: ignore[override]
        return self._variants[index]

    def __len__(self) -> int:
        return len(self._variants)

    def __iter__(self) -> Iterator[Variant]:
        return iter(self._variants)

    def __repr__(self) -> str:
        return f"VariantCatalog({list(self._variants)!r})"

    @property
    def identifiers(self) -> list[str]:
        return [v.identifier for v in self._variants]

    def by_identifier(self, identifier: str) -> Variant:
        return self._by_identifier[identifier]

    def by_name(self, name: str) -> Variant | None:
        return self._by_name.get(name)


@dataclass(frozen=True)
class ResolvedEnum:
    """An enum definition with its representation and catalog fixed."""

    definition: EnumDefinition
    representation: Representation
    catalog: VariantCatalog

    @property
    def type_name(self) -> str:
        return self.definition.type_name


def assign_discriminants(variants: Sequence[VariantSource]) -> list[Any]:
    """Return each variant's discriminant, filling in implicit ones.

    A variant without an explicit discriminant takes the previous one plus
    one, and the first defaults to zero. Where the previous value is not an
    integer there is nothing to count from and the result is None.
    """
    result: list[Any] = []
    previous: Any = None
    for variant in variants:
        if variant.discriminant is not None:
            value = variant.discriminant
        elif previous is None:
            value = 0
        elif _is_integer(previous):
            value = previous + 1
        else:
            value = None
        result.append(value)
        previous = value
    return result


def build_catalog(definition: EnumDefinition, representation: Representation) -> VariantCatalog:
    """Build the ordered variant catalog for a definition."""
    rule = RenameRule.parse(definition.attributes.rename_all)
    discriminants = assign_discriminants(definition.variants)
    spec = representation.integer

    variants: list[Variant] = []
    seen_names: dict[str, str] = {}
    for source, discriminant in zip(definition.variants, discriminants):
        if source.fields:
            raise ValidationError(
                f"Invalid enum variant {source.identifier}.\n"
                "OpenAPI enums may only contain unit variants."
            )

        name = (
            source.rename
            if source.rename is not None
            else apply_rename_rule(rule, source.identifier)
        )

        if spec is not None:
            if not _is_integer(discriminant):
                raise ValidationError(
                    f"Variant {source.identifier} of {definition.name} has "
                    f"discriminant {discriminant!r}, which is not an integer"
                )
            if not spec.fits(discriminant):
                raise ValidationError(
                    f"Variant {source.identifier} of {definition.name} has "
                    f"discriminant {discriminant}, which does not fit {spec.kind}"
                )
        elif name in seen_names:
            raise ValidationError(
                f"Variants {seen_names[name]} and {source.identifier} of "
                f"{definition.name} both use the name '{name}'"
            )

        seen_names[name] = source.identifier
        variants.append(
            Variant(identifier=source.identifier, canonical_name=name, discriminant=discriminant)
        )

    return VariantCatalog(variants)


def resolve_enum(definition: EnumDefinition) -> ResolvedEnum:
    """Resolve representation and catalog for a definition."""
    representation = resolve(definition.attributes.repr, definition.native_repr)
    catalog = build_catalog(definition, representation)
    logger.debug(
        "Resolved enum %s as %s with %d variants",
        definition.type_name,
        representation,
        len(catalog),
    )
    return ResolvedEnum(definition=definition, representation=representation, catalog=catalog)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

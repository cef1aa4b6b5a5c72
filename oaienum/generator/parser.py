"""Enum descriptor parser using Lark."""

import json
import os
from dataclasses import dataclass, field
from typing import Any, TypeVar

from lark import Lark
from lark.visitors import Transformer

from ..catalog import assign_discriminants
from ..errors import ValidationError
from ..types import EnumAttributes, EnumDefinition, ExternalDocument, VariantSource

_g_parser: Lark | None = None

__all__ = ["ValidationError", "parse", "validate"]


@dataclass
class _Doc:
    value: str


@dataclass
class _Name:
    value: str


@dataclass
class _Number:
    value: int


@dataclass
class _String:
    value: str


@dataclass
class _Argument:
    value: Any


@dataclass
class _Annotation:
    name: str
    arguments: list[Any]


@dataclass
class _Field:
    name: str
    type: str | None


@dataclass
class _Fields:
    fields: list[_Field]


@dataclass
class _RawVariant:
    name: str
    fields: list[_Field] | None
    discriminant: int | None
    annotations: list[_Annotation]


@dataclass
class _RawEnum:
    name: str
    native_repr: str | None
    docs: list[str]
    annotations: list[_Annotation]
    variants: list[_RawVariant] = field(default_factory=list)


TFilter = TypeVar("TFilter", bound=object)


def _filter(args: list[Any], class_type: type[TFilter]) -> list[TFilter]:
    return [v for v in args if isinstance(v, class_type)]


def _find_one(args: list[Any], class_type: type[object]) -> Any:
    filtered = _filter(args, class_type)
    if len(filtered) == 0:
        return None
    if len(filtered) > 1:
        raise RuntimeError(f"Found more than one {class_type}")

    if hasattr(filtered[0], "value"):
        return filtered[0].value
    return filtered[0]


class TreeTransformer(Transformer):
    """Transform parse tree into raw enum declarations."""

    def annotation(self, args: list[Any]) -> _Annotation:
        return _Annotation(
            name=args[0].value,
            arguments=[a.value for a in _filter(args, _Argument)],
        )

    def argument(self, args: list[Any]) -> _Argument:
        return _Argument(value=args[0].value)

    def doc(self, args: list[Any]) -> _Doc:
        text = str(args[0])[2:]
        if text.startswith(" "):
            text = text[1:]
        return _Doc(value=text.rstrip())

    def enum(self, args: list[Any]) -> _RawEnum:
        names = _filter(args, _Name)
        return _RawEnum(
            name=names[0].value,
            native_repr=names[1].value if len(names) > 1 else None,
            docs=[d.value for d in _filter(args, _Doc)],
            annotations=_filter(args, _Annotation),
            variants=_filter(args, _RawVariant),
        )

    def field(self, args: list[Any]) -> _Field:
        names = _filter(args, _Name)
        return _Field(name=names[0].value, type=names[1].value if len(names) > 1 else None)

    def fields(self, args: list[Any]) -> _Fields:
        return _Fields(fields=_filter(args, _Field))

    def name(self, args: list[Any]) -> _Name:
        return _Name(value=str(args[0]))

    def number(self, args: list[Any]) -> _Number:
        return _Number(value=int(str(args[0]), 0))

    def string(self, args: list[Any]) -> _String:
        return _String(value=json.loads(str(args[0])))

    def variant(self, args: list[Any]) -> _RawVariant:
        fields = _find_one(args, _Fields)
        return _RawVariant(
            name=_find_one(args, _Name),
            fields=fields.fields if fields else None,
            discriminant=_find_one(args, _Number),
            annotations=_filter(args, _Annotation),
        )

    def start(self, args: list[Any]) -> list[_RawEnum]:
        return _filter(args, _RawEnum)


def _string_argument(owner: str, annotation: _Annotation) -> str:
    if len(annotation.arguments) != 1 or not isinstance(annotation.arguments[0], str):
        raise ValidationError(f"@{annotation.name} on {owner} takes exactly one name or string")
    return annotation.arguments[0]


def _enum_attributes(raw: _RawEnum) -> EnumAttributes:
    attributes = EnumAttributes(description="\n".join(raw.docs) if raw.docs else None)

    for annotation in raw.annotations:
        if annotation.name == "rename":
            attributes.rename = _string_argument(raw.name, annotation)
        elif annotation.name == "rename_all":
            attributes.rename_all = _string_argument(raw.name, annotation)
        elif annotation.name == "repr":
            attributes.repr = _string_argument(raw.name, annotation)
        elif annotation.name == "remote":
            attributes.remote = _string_argument(raw.name, annotation)
        elif annotation.name == "deprecated":
            if annotation.arguments:
                raise ValidationError(f"@deprecated on {raw.name} takes no arguments")
            attributes.deprecated = True
        elif annotation.name == "external_docs":
            args = annotation.arguments
            if len(args) not in (1, 2) or not all(isinstance(a, str) for a in args):
                raise ValidationError(
                    f"@external_docs on {raw.name} takes a URL and an optional description"
                )
            attributes.external_docs = ExternalDocument(
                url=args[0], description=args[1] if len(args) == 2 else None
            )
        else:
            raise ValidationError(f"Unknown annotation @{annotation.name} on enum {raw.name}")

    return attributes


def _variant_source(enum_name: str, raw: _RawVariant) -> VariantSource:
    rename = None
    for annotation in raw.annotations:
        if annotation.name != "rename":
            raise ValidationError(
                f"Unknown annotation @{annotation.name} on variant {enum_name}.{raw.name}"
            )
        rename = _string_argument(f"{enum_name}.{raw.name}", annotation)

    return VariantSource(
        identifier=raw.name,
        rename=rename,
        discriminant=raw.discriminant,
        fields=[f.name for f in raw.fields] if raw.fields is not None else [],
    )


def _definition(raw: _RawEnum) -> EnumDefinition:
    return EnumDefinition(
        name=raw.name,
        variants=[_variant_source(raw.name, v) for v in raw.variants],
        attributes=_enum_attributes(raw),
        native_repr=raw.native_repr,
    )


def validate(definitions: list[EnumDefinition]) -> None:
    """Validate parsed enum definitions."""
    names: set[str] = set()
    for definition in definitions:
        if definition.name in names:
            raise ValidationError(f"Enum {definition.name} is declared more than once")
        names.add(definition.name)

    for definition in definitions:
        seen: set[str] = set()
        for variant in definition.variants:
            if variant.identifier in seen:
                raise ValidationError(
                    f"Variant {variant.identifier} is declared more than once in {definition.name}"
                )
            seen.add(variant.identifier)

        discriminants: dict[int, str] = {}
        for variant, value in zip(definition.variants, assign_discriminants(definition.variants)):
            if value in discriminants:
                raise ValidationError(
                    f"Variants {discriminants[value]} and {variant.identifier} of "
                    f"{definition.name} share the discriminant {value}"
                )
            discriminants[value] = variant.identifier
            variant.discriminant = value

        remote = definition.attributes.remote
        if remote is not None:
            if remote == definition.name:
                raise ValidationError(f"{definition.name} cannot be its own remote")
            if remote not in names:
                raise ValidationError(f"{definition.name} has remote {remote}, but not declared")


def parse(text: str) -> list[EnumDefinition]:
    """Parse an enum descriptor file."""
    global _g_parser

    if not _g_parser:
        with open(f"{os.path.dirname(__file__)}/enumdef.lark", encoding="utf-8") as f:
            grammar = f.read()

        _g_parser = Lark(grammar, parser="lalr")

    raw_enums = TreeTransformer().transform(_g_parser.parse(text))
    definitions = [_definition(raw) for raw in raw_enums]

    validate(definitions)

    return definitions

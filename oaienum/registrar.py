"""Runtime registration of Python enums as OpenAPI enum types.

Example:
    @openapi_enum(rename_all="camelCase")
    class Action(Enum):
        CreateUser = auto()
        DeleteUser = auto()

    Action.CreateUser.to_json()            # "createUser"
    Action.parse_from_json("deleteUser")   # Action.DeleteUser

Integer mode is selected with `repr=` or by declaring the representation on
the class itself:

    class Level(Enum):
        __oai_repr__ = "u32"
        Low = 0
        High = 1
"""

import inspect
import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, TypeVar

from .bridge import RemoteBridge
from .catalog import ResolvedEnum, resolve_enum
from .codec import EnumCodec
from .errors import ValidationError
from .registry import MetaSchema, MetaSchemaRef, Registry
from .rename import RenameRule
from .schema import build_schema, register_schema, schema_ref
from .types import EnumAttributes, EnumDefinition, ExternalDocument, VariantSource

logger = logging.getLogger(__name__)

TEnum = TypeVar("TEnum", bound=type[Enum])

# Class attribute holding the enum's own integer representation
NATIVE_REPR_ATTR = "__oai_repr__"

ATTACHED_NAMES = frozenset(
    [
        "oai_name",
        "schema_ref",
        "register",
        "parse_from_json",
        "parse_from_parameter",
        "parse_from_multipart",
        "to_json",
        "into_remote",
        "from_remote",
    ]
)

# Docstring some Python versions give enums that declare none
_DEFAULT_ENUM_DOC = "An enumeration."


class OpenApiEnumType:
    """Schema, codec and optional remote bridge for one Python enum class."""

    def __init__(
        self,
        enum_class: type[Enum],
        resolved: ResolvedEnum,
        remote: type[Enum] | None = None,
    ) -> None:
        self.enum_class = enum_class
        self.resolved = resolved

        members = {member.name: member for member in enum_class}
        self.codec = EnumCodec(resolved, members)

        self.bridge: RemoteBridge | None = None
        if remote is not None:
            self.bridge = RemoteBridge(
                enum_class.__name__,
                members,
                remote.__name__,
                {member.name: member for member in remote},
            )

    @property
    def type_name(self) -> str:
        return self.resolved.type_name

    def schema(self) -> MetaSchema:
        return build_schema(self.resolved)

    def schema_ref(self) -> MetaSchemaRef:
        return schema_ref(self.resolved)

    def register(self, registry: Registry) -> None:
        register_schema(registry, self.resolved, self.enum_class)


def definition_from_enum(
    enum_class: type[Enum],
    *,
    rename: str | None = None,
    rename_all: str | RenameRule | None = None,
    repr: str | None = None,
    deprecated: bool = False,
    external_docs: str | ExternalDocument | None = None,
    remote: type[Enum] | None = None,
    renames: Mapping[str, str] | None = None,
    description: str | None = None,
) -> EnumDefinition:
    """Describe a Python enum class as an EnumDefinition."""
    if not (isinstance(enum_class, type) and issubclass(enum_class, Enum)):
        raise ValidationError(f"{enum_class!r} is not an Enum class")

    members = list(enum_class)
    renames = dict(renames or {})
    unknown = [name for name in renames if name not in enum_class.__members__]
    if unknown:
        raise ValidationError(
            f"Renamed variants {', '.join(unknown)} are not declared by {enum_class.__name__}"
        )

    clashes = [m.name for m in members if m.name in ATTACHED_NAMES]
    if clashes:
        raise ValidationError(
            f"Variants {', '.join(clashes)} of {enum_class.__name__} clash with "
            "OpenAPI enum methods"
        )

    if isinstance(external_docs, str):
        external_docs = ExternalDocument(url=external_docs)
    if isinstance(rename_all, RenameRule):
        rename_all = rename_all.value

    if description is None:
        description = _class_description(enum_class)

    native = enum_class.__dict__.get(NATIVE_REPR_ATTR)

    return EnumDefinition(
        name=enum_class.__name__,
        variants=[
            VariantSource(
                identifier=member.name,
                rename=renames.get(member.name),
                discriminant=member.value,
            )
            for member in members
        ],
        attributes=EnumAttributes(
            rename=rename,
            rename_all=rename_all,
            repr=repr,
            deprecated=deprecated,
            external_docs=external_docs,
            remote=remote.__name__ if remote is not None else None,
            description=description,
        ),
        native_repr=native if isinstance(native, str) else None,
    )


def openapi_enum(
    enum_class: TEnum | None = None,
    *,
    rename: str | None = None,
    rename_all: str | RenameRule | None = None,
    repr: str | None = None,
    deprecated: bool = False,
    external_docs: str | ExternalDocument | None = None,
    remote: type[Enum] | None = None,
    renames: Mapping[str, str] | None = None,
    description: str | None = None,
) -> Any:
    """Class decorator turning an Enum into an OpenAPI enum type.

    Args:
        rename: Schema name to use instead of the class name.
        rename_all: Case rule applied to every variant name (e.g. "camelCase").
        repr: Send discriminants as integers: "i32", "i64", "u32" or "u64".
        deprecated: Mark the schema as deprecated.
        external_docs: URL (or ExternalDocument) for further documentation.
        remote: Enum with the same variants to convert to and from.
        renames: Per-variant wire names, keyed by member name.
        description: Schema description; defaults to the class docstring.

    Raises:
        ValidationError: If the enum cannot be represented.
    """

    def decorate(cls: TEnum) -> TEnum:
        definition = definition_from_enum(
            cls,
            rename=rename,
            rename_all=rename_all,
            repr=repr,
            deprecated=deprecated,
            external_docs=external_docs,
            remote=remote,
            renames=renames,
            description=description,
        )
        enum_type = OpenApiEnumType(cls, resolve_enum(definition), remote)
        _attach(cls, enum_type)
        logger.debug("Registered %s as OpenAPI enum %s", cls.__qualname__, enum_type.type_name)
        return cls

    if enum_class is not None:
        return decorate(enum_class)
    return decorate


def enum_type_of(enum_class: type[Enum]) -> OpenApiEnumType:
    """Return the OpenApiEnumType attached to a decorated enum class."""
    enum_type = enum_class.__dict__.get("__oai__")
    if enum_type is None:
        raise TypeError(f"{enum_class.__name__} is not an OpenAPI enum")
    return enum_type


def _attach(cls: type[Enum], enum_type: OpenApiEnumType) -> None:
    codec = enum_type.codec
    methods: dict[str, Callable[..., Any]] = {}

    def oai_name(_cls: type[Enum]) -> str:
        return enum_type.type_name

    def schema_ref(_cls: type[Enum]) -> MetaSchemaRef:
        return enum_type.schema_ref()

    def register(_cls: type[Enum], registry: Registry) -> None:
        enum_type.register(registry)

    def parse_from_json(_cls: type[Enum], value: Any) -> Any:
        return codec.parse_from_json(value)

    def parse_from_parameter(_cls: type[Enum], value: str) -> Any:
        return codec.parse_from_parameter(value)

    async def parse_from_multipart(_cls: type[Enum], field: Any) -> Any:
        return await codec.parse_from_multipart(field)

    def to_json(self: Enum) -> Any:
        return codec.to_json(self)

    methods["oai_name"] = classmethod(oai_name)
    methods["schema_ref"] = classmethod(schema_ref)
    methods["register"] = classmethod(register)
    methods["parse_from_json"] = classmethod(parse_from_json)
    methods["parse_from_parameter"] = classmethod(parse_from_parameter)
    methods["parse_from_multipart"] = classmethod(parse_from_multipart)
    methods["to_json"] = to_json

    bridge = enum_type.bridge
    if bridge is not None:

        def into_remote(self: Enum) -> Any:
            return bridge.to_remote(self)

        def from_remote(_cls: type[Enum], value: Any) -> Any:
            return bridge.from_remote(value)

        methods["into_remote"] = into_remote
        methods["from_remote"] = classmethod(from_remote)

    cls.__oai__ = enum_type  # type: ignore[attr-defined]
    for name, method in methods.items():
        setattr(cls, name, method)


def _class_description(cls: type) -> str | None:
    doc = cls.__dict__.get("__doc__")
    if not doc or doc == _DEFAULT_ENUM_DOC:
        return None
    return inspect.cleandoc(doc)

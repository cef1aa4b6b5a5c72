"""Wire representation resolution for enums.

An enum is sent either as its variant names (string mode) or as its
discriminants (integer mode). OpenAPI 3.0 has no unsigned formats, so the
unsigned kinds are sent with the signed 64-bit format and carry explicit
bounds instead.
"""

from dataclasses import dataclass
from enum import StrEnum

from .errors import ValidationError

INT32_RANGE = (-(2**31), 2**31 - 1)
INT64_RANGE = (-(2**63), 2**63 - 1)
UINT32_RANGE = (0, 2**32 - 1)
UINT64_RANGE = (0, 2**64 - 1)


class IntegerKind(StrEnum):
    """Integer representations an enum may be sent as."""

    I32 = "i32"
    I64 = "i64"
    U32 = "u32"
    U64 = "u64"


# Accepted spellings for each kind
KIND_ALIASES: dict[str, IntegerKind] = {
    "i32": IntegerKind.I32,
    "int32": IntegerKind.I32,
    "i64": IntegerKind.I64,
    "int64": IntegerKind.I64,
    "u32": IntegerKind.U32,
    "uint32": IntegerKind.U32,
    "u64": IntegerKind.U64,
    "uint64": IntegerKind.U64,
}


@dataclass(frozen=True)
class IntegerSpec:
    """Everything integer mode needs to know about one kind.

    `cast_range` bounds the discriminants and parsed parameters,
    `accessor_range` bounds the JSON numbers accepted before narrowing.
    """

    kind: IntegerKind
    width: int
    signed: bool
    format: str
    cast_range: tuple[int, int]
    accessor_range: tuple[int, int]
    minimum: float | None = None
    maximum: float | None = None

    def fits(self, value: int) -> bool:
        low, high = self.cast_range
        return low <= value <= high

    def accessible(self, value: int) -> bool:
        low, high = self.accessor_range
        return low <= value <= high


INTEGER_SPECS: dict[IntegerKind, IntegerSpec] = {
    IntegerKind.I32: IntegerSpec(
        kind=IntegerKind.I32,
        width=32,
        signed=True,
        format="int32",
        cast_range=INT32_RANGE,
        accessor_range=INT64_RANGE,
    ),
    IntegerKind.I64: IntegerSpec(
        kind=IntegerKind.I64,
        width=64,
        signed=True,
        format="int64",
        cast_range=INT64_RANGE,
        accessor_range=INT64_RANGE,
    ),
    IntegerKind.U32: IntegerSpec(
        kind=IntegerKind.U32,
        width=32,
        signed=False,
        format="int64",
        cast_range=UINT32_RANGE,
        accessor_range=UINT64_RANGE,
        minimum=0.0,
        maximum=4294967295.0,
    ),
    # No maximum: int64 cannot express the top of the u64 range, and
    # clamping it would change what clients accept.
    IntegerKind.U64: IntegerSpec(
        kind=IntegerKind.U64,
        width=64,
        signed=False,
        format="int64",
        cast_range=UINT64_RANGE,
        accessor_range=UINT64_RANGE,
        minimum=0.0,
    ),
}


@dataclass(frozen=True)
class Representation:
    """Resolved wire representation. `integer` is None in string mode."""

    integer: IntegerSpec | None = None

    @property
    def is_integer(self) -> bool:
        return self.integer is not None

    @property
    def wire_type(self) -> str:
        return "integer" if self.integer is not None else "string"

    def __str__(self) -> str:
        if self.integer is None:
            return "string"
        return str(self.integer.kind)


STRING = Representation()


def parse_kind(name: str | None) -> IntegerKind | None:
    """Map a representation name to its kind, or None if not recognised."""
    if name is None:
        return None
    return KIND_ALIASES.get(name.strip().lower())


def resolve(override: str | None, native: str | None) -> Representation:
    """Pick the wire representation for an enum.

    An explicit override wins over the enum's own declared representation;
    with neither, the enum is sent as strings. Native representations that
    are not one of the supported kinds (e.g. uint8) are ignored.
    """
    if override is not None:
        kind = parse_kind(override)
        if kind is None:
            raise ValidationError(
                f"Unknown enum representation '{override}'. "
                f"Expected one of: {', '.join(k.value for k in IntegerKind)}"
            )
        return Representation(INTEGER_SPECS[kind])

    kind = parse_kind(native)
    if kind is not None:
        return Representation(INTEGER_SPECS[kind])
    return STRING

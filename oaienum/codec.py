"""JSON, parameter and multipart encoding for enum members."""

import re
from collections.abc import Mapping
from typing import Any

from .capabilities import MultipartField
from .catalog import ResolvedEnum
from .errors import (
    InvalidFormatError,
    InvalidValueError,
    MissingInputError,
    ValidationError,
    WrongTypeError,
)

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


class EnumCodec:
    """Encodes and decodes the members of one enum.

    `members` maps each variant identifier to the in-memory value decoding
    should produce. Lookup tables are built once; every method is free of
    side effects and safe to call concurrently.
    """

    def __init__(self, resolved: ResolvedEnum, members: Mapping[str, Any]) -> None:
        self.type_name = resolved.type_name
        self._spec = resolved.representation.integer

        missing = [v.identifier for v in resolved.catalog if v.identifier not in members]
        if missing:
            raise ValidationError(
                f"No members supplied for variants {', '.join(missing)} of {self.type_name}"
            )

        self._to_wire: dict[Any, Any] = {}
        self._from_wire: dict[Any, Any] = {}
        for variant in resolved.catalog:
            member = members[variant.identifier]
            wire = variant.discriminant if self._spec is not None else variant.canonical_name
            self._to_wire[member] = wire
            # The first variant in declaration order wins.
            self._from_wire.setdefault(wire, member)

    def to_json(self, member: Any) -> Any:
        """Encode a member as a JSON number or string."""
        try:
            return self._to_wire[member]
        except (KeyError, TypeError):
            raise TypeError(f"{member!r} is not a variant of {self.type_name}") from None

    def parse_from_json(self, value: Any) -> Any:
        """Decode a JSON value (as produced by json.loads) into a member."""
        if self._spec is not None:
            if not _is_json_integer(value) or not self._spec.accessible(value):
                raise WrongTypeError(self._expected_type(value))
            return self._lookup(value)

        if not isinstance(value, str):
            raise WrongTypeError(self._expected_type(value))
        return self._lookup(value)

    def parse_from_parameter(self, value: str) -> Any:
        """Decode a query, path or header parameter string into a member."""
        if self._spec is not None:
            pattern = _SIGNED_INT if self._spec.signed else _UNSIGNED_INT
            if not pattern.fullmatch(value):
                raise InvalidFormatError("invalid integer")
            try:
                parsed = int(value)
            except ValueError:
                # Longer than the interpreter's int conversion limit
                raise InvalidFormatError("invalid integer") from None
            if not self._spec.fits(parsed):
                raise InvalidFormatError("invalid integer")
            return self._lookup(parsed)

        try:
            return self._from_wire[value]
        except KeyError:
            raise InvalidValueError("Expect a valid enumeration value.") from None

    async def parse_from_multipart(self, field: MultipartField | None) -> Any:
        """Decode a multipart form field by reading its text."""
        if field is None:
            raise MissingInputError("expected input")
        text = await field.text()
        return self.parse_from_parameter(text)

    def _lookup(self, wire: Any) -> Any:
        # Values outside the cast range never match a discriminant.
        try:
            return self._from_wire[wire]
        except KeyError:
            raise InvalidValueError("invalid enum value") from None

    def _expected_type(self, value: Any) -> str:
        return f"expected type `{self.type_name}`, but got {value!r}"


def _is_json_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

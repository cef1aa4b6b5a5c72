"""Capability interfaces implemented by OpenAPI enum types.

These describe what a host framework may call on a registered enum. They are
structural: any class providing the methods satisfies them.
"""

from typing import Any, Protocol, Self, runtime_checkable

from .registry import MetaSchemaRef, Registry


@runtime_checkable
class MultipartField(Protocol):
    """A single field of a multipart form body."""

    async def text(self) -> str: ...


@runtime_checkable
class Type(Protocol):
    """A type with a named OpenAPI schema."""

    @classmethod
    def oai_name(cls) -> str: ...

    @classmethod
    def schema_ref(cls) -> MetaSchemaRef: ...

    @classmethod
    def register(cls, registry: Registry) -> None: ...


@runtime_checkable
class ToJSON(Protocol):
    def to_json(self) -> Any: ...


@runtime_checkable
class ParseFromJSON(Protocol):
    @classmethod
    def parse_from_json(cls, value: Any) -> Self: ...


@runtime_checkable
class ParseFromParameter(Protocol):
    @classmethod
    def parse_from_parameter(cls, value: str) -> Self: ...


@runtime_checkable
class ParseFromMultipartField(Protocol):
    @classmethod
    async def parse_from_multipart(cls, field: MultipartField | None) -> Self: ...

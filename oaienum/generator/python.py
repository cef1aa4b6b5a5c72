"""Python code generator for enum descriptors."""

import keyword
from typing import Any

from jinja2 import Environment, PackageLoader

from ..catalog import ResolvedEnum
from ..errors import ValidationError
from ..registrar import ATTACHED_NAMES
from ..types import EnumDefinition
from .build import build_registry, emission_order, resolve_definitions

env = Environment(
    loader=PackageLoader("oaienum.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)
env.filters["pyrepr"] = repr

template = env.get_template("python.py.j2")

# Names bound at the top of every generated module
TEMPLATE_NAMES = frozenset(["Enum", "ExternalDocument", "openapi_enum"])


def _decorator_args(item: ResolvedEnum) -> list[tuple[str, str]]:
    """Keyword arguments for the generated @openapi_enum() call.

    Names are emitted already resolved, so the generated module does not
    depend on the rename rules.
    """
    attributes = item.definition.attributes
    args: list[tuple[str, str]] = []

    if attributes.rename is not None:
        args.append(("rename", repr(attributes.rename)))

    spec = item.representation.integer
    if spec is not None:
        args.append(("repr", repr(spec.kind.value)))
    else:
        renames = {
            v.identifier: v.canonical_name
            for v in item.catalog
            if v.canonical_name != v.identifier
        }
        if renames:
            args.append(("renames", repr(renames)))

    if attributes.deprecated:
        args.append(("deprecated", "True"))
    if attributes.external_docs is not None:
        docs = attributes.external_docs
        args.append(
            (
                "external_docs",
                f"ExternalDocument(url={docs.url!r}, description={docs.description!r})",
            )
        )
    if attributes.remote is not None:
        args.append(("remote", attributes.remote))
    if attributes.description is not None:
        args.append(("description", repr(attributes.description)))
    return args


def _check_identifiers(definitions: list[EnumDefinition]) -> None:
    for definition in definitions:
        if definition.name in TEMPLATE_NAMES:
            raise ValidationError(
                f"Enum {definition.name} shadows a name the generated module imports"
            )

        names = [definition.name] + [v.identifier for v in definition.variants]
        for name in names:
            if keyword.iskeyword(name):
                raise ValidationError(
                    f"{name} in {definition.name} is a Python keyword and cannot be generated"
                )

        for variant in definition.variants:
            name = variant.identifier
            if name in ATTACHED_NAMES:
                raise ValidationError(
                    f"Variant {name} of {definition.name} clashes with OpenAPI enum methods"
                )
            if _reserved_member_name(name):
                raise ValidationError(
                    f"Variant {name} of {definition.name} is reserved by Enum and cannot be a member"
                )


def _reserved_member_name(name: str) -> bool:
    # _sunder_, __dunder__ and __private names never become Enum members
    if name == "mro" or name.startswith("__"):
        return True
    return len(name) > 2 and name.startswith("_") and name.endswith("_")


def render(
    definitions: list[EnumDefinition],
    runtime_import: str = "oaienum.registrar",
) -> str:
    """Render enum definitions to Python source code.

    Every generation fault (invalid variants, duplicate schema names,
    mismatched remotes) is raised here rather than when the module is
    imported.
    """
    _check_identifiers(definitions)
    resolved = resolve_definitions(definitions)
    build_registry(resolved)

    return template.render(
        enums=emission_order(resolved),
        decorator_args=_decorator_args,
        runtime_import=runtime_import,
    )


def render_schemas(definitions: list[EnumDefinition]) -> dict[str, Any]:
    """Render the components.schemas object for enum definitions."""
    return build_registry(resolve_definitions(definitions)).to_openapi()

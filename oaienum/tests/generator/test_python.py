"""Tests for generated Python enums"""

import os

import pytest

from oaienum.errors import DuplicateSchemaError, ValidationError
from oaienum.generator import parse, render, render_schemas
from oaienum.registry import Registry

FILE_DIR = os.path.dirname(os.path.realpath(__file__))


def gen_code(text):
    gbl = globals().copy()

    generated_code = render(parse(text))
    exec(generated_code, gbl)
    return gbl


def gen_file(file_name):
    with open(file_name, encoding="utf-8") as f:
        return gen_code(f.read())


def describe_render():
    def renders_decorated_enums(expect):
        code = render(parse("@rename_all(snake_case) enum Action { CreateUser }"))
        expect("@openapi_enum(" in code) == True
        expect("class Action(Enum):" in code) == True
        expect("from oaienum.registrar import" in code) == True

    def uses_runtime_import(expect):
        code = render(parse("enum A { X }"), runtime_import="myapp.oai")
        expect("from myapp.oai import ExternalDocument, openapi_enum" in code) == True

    def emits_remote_targets_first(expect):
        code = render(parse("@remote(B) enum A { X }\nenum B { X }"))
        expect(code.index("class B(Enum)") < code.index("class A(Enum)")) == True

    def rejects_variants_with_fields():
        with pytest.raises(ValidationError, match="Invalid enum variant Point"):
            render(parse("enum Shape { Empty, Point(x: int32) }"))

    def rejects_duplicate_schema_names():
        with pytest.raises(DuplicateSchemaError, match="Shared"):
            render(parse('@rename("Shared") enum A { X }\n@rename("Shared") enum B { Y }'))

    def rejects_mismatched_remotes():
        with pytest.raises(ValidationError, match="missing from B: Z"):
            render(parse("@remote(B) enum A { X, Z }\nenum B { X }"))

    def rejects_remote_cycles():
        with pytest.raises(ValidationError, match="cycle"):
            render(parse("@remote(B) enum A { X }\n@remote(A) enum B { X }"))

    def rejects_python_keywords():
        with pytest.raises(ValidationError, match="keyword"):
            render(parse("enum Flags { None }"))

    def rejects_variants_named_like_enum_methods():
        for name in ("register", "to_json", "parse_from_json", "from_remote"):
            with pytest.raises(ValidationError, match=f"Variant {name} of X clashes"):
                render(parse(f"enum X {{ {name} }}"))

    def rejects_reserved_member_names():
        for name in ("_a_", "__b__", "__hidden", "mro"):
            with pytest.raises(ValidationError, match="reserved by Enum"):
                render(parse(f"enum X {{ A, {name} }}"))

    def rejects_enums_shadowing_imports():
        for name in ("Enum", "ExternalDocument", "openapi_enum"):
            with pytest.raises(ValidationError, match="shadows"):
                render(parse(f"enum {name} {{ A }}"))

    def generates_enums_with_underscored_variants(expect):
        gen = gen_code("enum X { _private, trailing_ }")
        X = gen["X"]
        expect([m.name for m in X]) == ["_private", "trailing_"]
        expect(X.parse_from_json("_private")) == X._private


def describe_generated_code():
    def decodes_renamed_variants(expect):
        gen = gen_file(f"{FILE_DIR}/enums.oaienum")
        Action = gen["Action"]

        expect(Action.parse_from_json("createUser")) == Action.CreateUser
        expect(Action.parse_from_json("delete_user")) == Action.DeleteUser
        expect(Action.DeleteUser.to_json()) == "delete_user"
        expect(Action.parse_from_parameter("createUser")) == Action.CreateUser

    def keeps_schema_attributes(expect):
        gen = gen_file(f"{FILE_DIR}/enums.oaienum")
        registry = Registry()
        for name in ("Action", "Level", "State", "Color", "Paint"):
            gen[name].register(registry)

        action = registry.schemas["Action"]
        expect(action.description) == "Actions a user can take"
        expect(action.enum_items) == ["createUser", "delete_user"]

        level = registry.schemas["Level"]
        expect(level.format) == "int64"
        expect(level.enum_items) == [1, 2, 10]
        expect(level.minimum) == 0.0
        expect(level.maximum) == 4294967295.0
        expect(level.external_docs.description) == "Level reference"

        state = registry.schemas["LegacyState"]
        expect(state.deprecated) == True
        expect(state.enum_items) == [-1, 0]
        expect(state.minimum) == None

    def matches_schemas_rendered_without_generation(expect):
        with open(f"{FILE_DIR}/enums.oaienum", encoding="utf-8") as f:
            text = f.read()

        gen = gen_code(text)
        registry = Registry()
        for name in ("Action", "Level", "State", "Color", "Paint"):
            gen[name].register(registry)

        expect(registry.to_openapi()) == render_schemas(parse(text))

    def decodes_integer_variants(expect):
        gen = gen_file(f"{FILE_DIR}/enums.oaienum")
        Level = gen["Level"]

        expect(Level.parse_from_json(10)) == Level.High
        expect(Level.parse_from_parameter("2")) == Level.Medium
        expect(Level.Low.to_json()) == 1

    def converts_remotes(expect):
        gen = gen_file(f"{FILE_DIR}/enums.oaienum")
        Color = gen["Color"]
        Paint = gen["Paint"]

        for name in ("Red", "Green", "Blue"):
            expect(Paint.from_remote(Color[name])) == Paint[name]
            expect(Paint[name].into_remote()) == Color[name]

    def generates_empty_enums(expect):
        gen = gen_code("enum Empty {}")
        registry = Registry()
        gen["Empty"].register(registry)
        expect(registry.to_openapi()) == {"Empty": {"type": "string"}}

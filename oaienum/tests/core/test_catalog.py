"""Tests for variant catalogs and rename rules"""

import pytest

from oaienum.catalog import assign_discriminants, build_catalog, resolve_enum
from oaienum.errors import ValidationError
from oaienum.rename import RenameRule, split_words
from oaienum.representation import STRING, resolve
from oaienum.types import EnumAttributes, EnumDefinition, VariantSource


def make_definition(*variants, **attributes):
    return EnumDefinition(
        name="MyEnum",
        variants=list(variants),
        attributes=EnumAttributes(**attributes),
    )


def describe_rename_rules():
    def splits_words(expect):
        expect(split_words("CreateUser")) == ["Create", "User"]
        expect(split_words("HTTPServer")) == ["HTTP", "Server"]
        expect(split_words("CREATE_USER")) == ["CREATE", "USER"]
        expect(split_words("create-user")) == ["create", "user"]
        expect(split_words("Version2Beta")) == ["Version2", "Beta"]

    def converts_pascal_case_identifiers(expect):
        expect(RenameRule.CAMEL_CASE.apply("CreateUser")) == "createUser"
        expect(RenameRule.PASCAL_CASE.apply("CreateUser")) == "CreateUser"
        expect(RenameRule.SNAKE_CASE.apply("CreateUser")) == "create_user"
        expect(RenameRule.SCREAMING_SNAKE_CASE.apply("CreateUser")) == "CREATE_USER"
        expect(RenameRule.KEBAB_CASE.apply("CreateUser")) == "create-user"
        expect(RenameRule.SCREAMING_KEBAB_CASE.apply("CreateUser")) == "CREATE-USER"
        expect(RenameRule.LOWERCASE.apply("CreateUser")) == "createuser"
        expect(RenameRule.UPPERCASE.apply("CreateUser")) == "CREATEUSER"

    def converts_screaming_identifiers(expect):
        expect(RenameRule.CAMEL_CASE.apply("CREATE_USER")) == "createUser"
        expect(RenameRule.PASCAL_CASE.apply("CREATE_USER")) == "CreateUser"

    def parses_rule_names(expect):
        expect(RenameRule.parse("camelCase")) == RenameRule.CAMEL_CASE
        expect(RenameRule.parse(None)) == None
        with pytest.raises(ValidationError, match="Unknown rename rule"):
            RenameRule.parse("Title Case")


def describe_assign_discriminants():
    def counts_up_from_previous(expect):
        variants = [
            VariantSource("A"),
            VariantSource("B", discriminant=10),
            VariantSource("C"),
        ]
        expect(assign_discriminants(variants)) == [0, 10, 11]

    def cannot_count_from_non_integers(expect):
        variants = [VariantSource("A", discriminant="a"), VariantSource("B")]
        expect(assign_discriminants(variants)) == ["a", None]


def describe_build_catalog():
    def preserves_declaration_order(expect):
        catalog = build_catalog(
            make_definition(VariantSource("DeleteUser"), VariantSource("CreateUser")), STRING
        )
        expect(catalog.identifiers) == ["DeleteUser", "CreateUser"]
        expect([v.canonical_name for v in catalog]) == ["DeleteUser", "CreateUser"]

    def applies_rename_rule(expect):
        catalog = build_catalog(
            make_definition(VariantSource("CreateUser"), rename_all="camelCase"), STRING
        )
        expect(catalog[0].canonical_name) == "createUser"
        expect(catalog.by_name("createUser").identifier) == "CreateUser"
        expect(catalog.by_name("CreateUser")) == None

    def variant_rename_overrides_rule(expect):
        catalog = build_catalog(
            make_definition(
                VariantSource("CreateUser"),
                VariantSource("DeleteUser", rename="delete_user"),
                rename_all="camelCase",
            ),
            STRING,
        )
        expect([v.canonical_name for v in catalog]) == ["createUser", "delete_user"]

    def keeps_empty_variant_rename(expect):
        catalog = build_catalog(
            make_definition(
                VariantSource("Unset", rename=""),
                VariantSource("SetValue"),
                rename_all="camelCase",
            ),
            STRING,
        )
        expect([v.canonical_name for v in catalog]) == ["", "setValue"]
        expect(catalog.by_name("").identifier) == "Unset"

    def rejects_variants_with_fields():
        definition = make_definition(VariantSource("A"), VariantSource("Point", fields=["x"]))
        with pytest.raises(ValidationError, match="Invalid enum variant Point"):
            build_catalog(definition, STRING)

    def rejects_duplicate_names_in_string_mode():
        definition = make_definition(
            VariantSource("CreateUser"),
            VariantSource("Other", rename="createUser"),
            rename_all="camelCase",
        )
        with pytest.raises(ValidationError, match="CreateUser and Other"):
            build_catalog(definition, STRING)

    def allows_shared_names_in_integer_mode(expect):
        definition = make_definition(
            VariantSource("A", rename="x"), VariantSource("B", rename="x")
        )
        catalog = build_catalog(definition, resolve("i32", None))
        expect([v.discriminant for v in catalog]) == [0, 1]

    def requires_integer_discriminants():
        definition = make_definition(VariantSource("A", discriminant="a"))
        with pytest.raises(ValidationError, match="not an integer"):
            build_catalog(definition, resolve("i64", None))

    def rejects_bool_discriminants():
        definition = make_definition(VariantSource("A", discriminant=True))
        with pytest.raises(ValidationError, match="not an integer"):
            build_catalog(definition, resolve("i64", None))

    def requires_discriminants_to_fit():
        definition = make_definition(VariantSource("A", discriminant=-1))
        with pytest.raises(ValidationError, match="does not fit u32"):
            build_catalog(definition, resolve("u32", None))


def describe_resolve_enum():
    def resolves_override_and_catalog(expect):
        definition = make_definition(VariantSource("A"), VariantSource("B"), repr="u32")
        resolved = resolve_enum(definition)
        expect(resolved.type_name) == "MyEnum"
        expect(resolved.representation.wire_type) == "integer"
        expect(len(resolved.catalog)) == 2

    def uses_explicit_type_name(expect):
        resolved = resolve_enum(make_definition(VariantSource("A"), rename="AAA"))
        expect(resolved.type_name) == "AAA"

# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the model parser."""

import pytest

from modelschema.model.entities import Annotation, ModelFile
from modelschema.model.types import ArrayTypeRef, NamedTypeRef, PrimitiveType, PrimitiveTypeRef
from modelschema.parser.lexer import LexerError
from modelschema.parser.parser import ParseError, parse, parse_type

# ###############
# Test Helpers
# ###############

STRING = PrimitiveTypeRef(primitive=PrimitiveType.STRING)
NUMBER = PrimitiveTypeRef(primitive=PrimitiveType.NUMBER)


def _single_model_file(source: str) -> ModelFile:
    result = parse(source)
    assert len(result.models) == 1
    return result


# ###############
# Models
# ###############


class TestModels:
    def test_empty_source(self) -> None:
        assert parse("") == ModelFile()

    def test_empty_model(self) -> None:
        model = _single_model_file("model Empty {}").models[0]
        assert model.name == "Empty"
        assert model.fields == []
        assert model.description is None

    def test_multiple_models_keep_order(self) -> None:
        result = parse("model A {} model B {} model C {}")
        assert [m.name for m in result.models] == ["A", "B", "C"]

    def test_description(self) -> None:
        model = _single_model_file('model User { description = "A registered user" }').models[0]
        assert model.description == "A registered user"

    def test_field_named_description(self) -> None:
        model = _single_model_file("model Item { description: string }").models[0]
        assert model.description is None
        assert [f.name for f in model.fields] == ["description"]
        assert model.fields[0].type == STRING

    def test_fields_in_declaration_order(self) -> None:
        model = _single_model_file("model User { name: string; age: number; active: boolean; }").models[0]
        assert [f.name for f in model.fields] == ["name", "age", "active"]
        assert model.fields[2].type == PrimitiveTypeRef(primitive=PrimitiveType.BOOLEAN)

    def test_top_level_garbage(self) -> None:
        with pytest.raises(ParseError, match="at top level"):
            parse("User {}")

    def test_missing_closing_brace(self) -> None:
        with pytest.raises(ParseError):
            parse("model User { name: string")

    def test_missing_colon(self) -> None:
        with pytest.raises(ParseError, match="Expected ':'"):
            parse("model User { name string }")

    def test_lexer_errors_propagate(self) -> None:
        with pytest.raises(LexerError):
            parse("model User { name: string # }")


# ###############
# Annotations
# ###############


class TestAnnotations:
    def test_annotation_without_parentheses(self) -> None:
        field = parse("model M { @IsEmail email: string }").models[0].fields[0]
        assert field.annotations == [Annotation(kind="IsEmail")]

    def test_annotation_with_empty_parentheses(self) -> None:
        field = parse("model M { @IsNotEmpty() name: string }").models[0].fields[0]
        assert field.annotations == [Annotation(kind="IsNotEmpty")]

    def test_literal_arguments(self) -> None:
        field = parse("model M { @Length(2, 65) @Matches('^a', true) @Max(1.5) v: string }").models[0].fields[0]
        assert [a.arguments for a in field.annotations] == [[2, 65], ["^a", True], [1.5]]

    def test_negative_argument(self) -> None:
        field = parse("model M { @Min(-10) v: number }").models[0].fields[0]
        assert field.annotations[0].arguments == [-10]

    def test_each_option(self) -> None:
        field = parse("model M { @IsEmail({ each: true }) contacts: string[] }").models[0].fields[0]
        assert field.annotations == [Annotation(kind="IsEmail", each=True)]

    def test_each_option_with_argument(self) -> None:
        source = "model M { @MaxLength(20, { each: true, message: 'too long' }) tags: string[] }"
        field = parse(source).models[0].fields[0]
        assert field.annotations == [Annotation(kind="MaxLength", arguments=[20], each=True)]

    def test_each_false(self) -> None:
        field = parse("model M { @IsEmail({ each: false }) contacts: string[] }").models[0].fields[0]
        assert field.annotations[0].each is False

    def test_annotation_order_is_kept(self) -> None:
        field = parse("model M { @IsString() @IsNotEmpty() @MinLength(2) name: string }").models[0].fields[0]
        assert [a.kind for a in field.annotations] == ["IsString", "IsNotEmpty", "MinLength"]

    def test_unclosed_arguments(self) -> None:
        with pytest.raises(ParseError):
            parse("model M { @Min(1 v: number }")


# ###############
# Types
# ###############


class TestTypes:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("string", PrimitiveType.STRING),
            ("String", PrimitiveType.STRING),
            ("number", PrimitiveType.NUMBER),
            ("int", PrimitiveType.NUMBER),
            ("boolean", PrimitiveType.BOOLEAN),
            ("Date", PrimitiveType.DATE),
            ("object", PrimitiveType.OBJECT),
            ("any", PrimitiveType.OBJECT),
            ("Buffer", PrimitiveType.BINARY),
            ("UploadFile", PrimitiveType.BINARY),
        ],
    )
    def test_primitive_and_binary_names(self, text: str, expected: PrimitiveType) -> None:
        assert parse_type(text) == PrimitiveTypeRef(primitive=expected)

    def test_named_type(self) -> None:
        assert parse_type("Address") == NamedTypeRef(name="Address")

    def test_array_suffix(self) -> None:
        assert parse_type("string[]") == ArrayTypeRef(element_type=STRING)

    def test_nested_array_suffix(self) -> None:
        assert parse_type("number[][]") == ArrayTypeRef(element_type=ArrayTypeRef(element_type=NUMBER))

    def test_generic_array(self) -> None:
        assert parse_type("Array<Role>") == ArrayTypeRef(element_type=NamedTypeRef(name="Role"))

    def test_bare_array(self) -> None:
        assert parse_type("Array") == ArrayTypeRef()
        assert parse_type("list") == ArrayTypeRef()

    def test_generic_array_of_arrays(self) -> None:
        assert parse_type("List<string[]>") == ArrayTypeRef(element_type=ArrayTypeRef(element_type=STRING))

    def test_array_with_two_arguments(self) -> None:
        with pytest.raises(ParseError, match="one type argument"):
            parse_type("Array<string, number>")

    def test_generic_reference_is_opaque(self) -> None:
        assert parse_type("Partial<User>") == NamedTypeRef(name="Partial<User>")
        assert parse_type("Record<string, number[]>") == NamedTypeRef(name="Record<string, number[]>")

    def test_trailing_tokens(self) -> None:
        with pytest.raises(ParseError, match="trailing"):
            parse_type("string number")


# ###############
# Full example
# ###############


def test_user_model() -> None:
    source = """
// A registered account.
model User {
    description = "A registered user"

    @IsString()
    @IsNotEmpty()
    @MinLength(2)
    @MaxLength(100)
    name: string

    @IsEmail()
    email: string

    @IsOptional()
    @IsInt()
    @Min(0)
    @Max(150)
    age: number

    @IsArray()
    @ArrayMinSize(1)
    @IsEmail({ each: true })
    contacts: string[]

    avatar: Buffer
    roles: Array<Role>
}
"""
    model = parse(source).models[0]
    assert model.name == "User"
    assert model.description == "A registered user"
    assert [f.name for f in model.fields] == ["name", "email", "age", "contacts", "avatar", "roles"]
    contacts = model.fields[3]
    assert contacts.type == ArrayTypeRef(element_type=STRING)
    assert contacts.annotations[-1] == Annotation(kind="IsEmail", each=True)
    assert model.fields[4].type == PrimitiveTypeRef(primitive=PrimitiveType.BINARY)
    assert model.fields[5].type == ArrayTypeRef(element_type=NamedTypeRef(name="Role"))

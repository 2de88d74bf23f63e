# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for array item specialization."""

from modelschema.compiler.arrays import specialize_array
from modelschema.model.entities import Annotation
from modelschema.model.schema import PropertySchema
from modelschema.model.types import ArrayTypeRef, NamedTypeRef, PrimitiveType, PrimitiveTypeRef, TypeRef

# ###############
# Test Helpers
# ###############

STRING = PrimitiveTypeRef(primitive=PrimitiveType.STRING)
NUMBER = PrimitiveTypeRef(primitive=PrimitiveType.NUMBER)

TAG_SCHEMA = PropertySchema(type="object", properties={"label": PropertySchema(type="string")}, required=[])


def _compile_reference(name: str) -> PropertySchema | None:
    return TAG_SCHEMA if name == "Tag" else None


def _items(element_type: TypeRef | None, *annotations: Annotation) -> PropertySchema:
    prop = PropertySchema(type="array")
    specialize_array(prop, element_type, list(annotations), _compile_reference, "values")
    assert prop.items is not None
    return prop.items


# ###############
# Element types
# ###############


class TestElementTypes:
    def test_no_element_type_defaults_to_string(self) -> None:
        assert _items(None) == PropertySchema(type="string")

    def test_primitive_element(self) -> None:
        assert _items(NUMBER) == PropertySchema(type="number")

    def test_binary_element(self) -> None:
        assert _items(NamedTypeRef(name="Uint8Array")) == PropertySchema(type="string", format="binary")

    def test_model_element(self) -> None:
        items = _items(NamedTypeRef(name="Tag"))
        assert items == TAG_SCHEMA
        assert items is not TAG_SCHEMA

    def test_missing_model_element(self) -> None:
        assert _items(NamedTypeRef(name="Ghost")) == PropertySchema(type="object")

    def test_nested_array(self) -> None:
        items = _items(ArrayTypeRef(element_type=STRING))
        assert items.type == "array"
        assert items.items == PropertySchema(type="string")


# ###############
# Per-element annotations
# ###############


class TestEachAnnotations:
    def test_each_email(self) -> None:
        items = _items(STRING, Annotation(kind="IsEmail", each=True))
        assert items == PropertySchema(type="string", format="email")

    def test_each_email_without_element_type(self) -> None:
        items = _items(None, Annotation(kind="IsEmail", each=True))
        assert items == PropertySchema(type="string", format="email")

    def test_each_integer(self) -> None:
        items = _items(NUMBER, Annotation(kind="IsInt", each=True))
        assert items == PropertySchema(type="integer", format="int32")

    def test_each_annotation_overrides_element_type(self) -> None:
        items = _items(NUMBER, Annotation(kind="IsString", each=True))
        assert items.type == "string"

    def test_each_constraints(self) -> None:
        items = _items(STRING, Annotation(kind="MaxLength", arguments=[20], each=True))
        assert items.max_length == 20

    def test_array_level_annotations_are_not_applied_to_items(self) -> None:
        items = _items(STRING, Annotation(kind="IsEmail"), Annotation(kind="ArrayMaxSize", arguments=[3]))
        assert items == PropertySchema(type="string")

    def test_each_is_array_gets_default_items(self) -> None:
        items = _items(STRING, Annotation(kind="IsArray", each=True))
        assert items.type == "array"
        assert items.items == PropertySchema(type="string")

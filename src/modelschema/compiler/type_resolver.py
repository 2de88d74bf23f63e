# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Mapping from declared field types to base schema fragments."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from modelschema.model.schema import PropertySchema
from modelschema.model.types import (
    ArrayTypeRef,
    NamedTypeRef,
    PrimitiveType,
    PrimitiveTypeRef,
    TypeRef,
    is_binary_type_name,
)

# ###############
# Public Interface
# ###############

# Compiles a referenced model by name; returns None when it cannot be found.
ReferenceCompiler = Callable[[str], PropertySchema | None]


@dataclass(frozen=True)
class ResolvedType:
    """The base schema fragment for a declared type.

    Attributes:
        base_type: The schema ``type`` tag.
        base_format: The schema ``format``, if the type implies one.
        nested_schema: The compiled object schema when the type references
            another model that could be resolved.
    """

    base_type: str
    base_format: str | None = None
    nested_schema: PropertySchema | None = None

    def to_property(self) -> PropertySchema:
        """Build a fresh property fragment from this resolution."""
        if self.nested_schema is not None:
            return self.nested_schema.model_copy(deep=True)
        return PropertySchema(type=self.base_type, format=self.base_format)


def resolve_type(type_ref: TypeRef | None, compile_reference: ReferenceCompiler) -> ResolvedType:
    """Resolve a declared type to its base schema fragment.

    Array element types are not resolved here; the array specializer does
    that because item schemas also depend on per-element annotations.

    Args:
        type_ref: The declared type, or None when it is unknown.
        compile_reference: Called with a model name for model references.

    Returns:
        A :class:`ResolvedType`. Unknown types and unresolvable model
        references resolve to a plain ``object``.
    """
    if isinstance(type_ref, PrimitiveTypeRef):
        return _PRIMITIVE_RESOLUTIONS.get(type_ref.primitive, _OBJECT)
    if isinstance(type_ref, ArrayTypeRef):
        return ResolvedType("array")
    if isinstance(type_ref, NamedTypeRef):
        if is_binary_type_name(type_ref.name):
            return _PRIMITIVE_RESOLUTIONS[PrimitiveType.BINARY]
        nested = compile_reference(type_ref.name)
        if nested is None:
            return _OBJECT
        return ResolvedType(nested.type, nested.format, nested)
    return _OBJECT


# ################
# Implementation
# ################

_OBJECT = ResolvedType("object")

_PRIMITIVE_RESOLUTIONS: dict[PrimitiveType, ResolvedType] = {
    PrimitiveType.STRING: ResolvedType("string"),
    PrimitiveType.NUMBER: ResolvedType("number"),
    PrimitiveType.BOOLEAN: ResolvedType("boolean"),
    PrimitiveType.DATE: ResolvedType("string", "date-time"),
    PrimitiveType.BINARY: ResolvedType("string", "binary"),
    PrimitiveType.OBJECT: _OBJECT,
}

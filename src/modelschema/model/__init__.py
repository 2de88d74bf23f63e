# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for modelschema (models, fields, annotations, compiled schemas)."""

from modelschema.model.entities import (
    Annotation,
    AnnotationArgument,
    Field,
    Model,
    ModelFile,
    ModelResolver,
    make_resolver,
)
from modelschema.model.schema import CompiledSchema, PropertySchema
from modelschema.model.types import (
    BINARY_TYPE_NAMES,
    ArrayTypeRef,
    NamedTypeRef,
    PrimitiveType,
    PrimitiveTypeRef,
    TypeRef,
    is_binary_type_name,
)

__all__ = [
    # Type system
    "PrimitiveType",
    "PrimitiveTypeRef",
    "ArrayTypeRef",
    "NamedTypeRef",
    "TypeRef",
    "BINARY_TYPE_NAMES",
    "is_binary_type_name",
    # Entities
    "Annotation",
    "AnnotationArgument",
    "Field",
    "Model",
    "ModelFile",
    "ModelResolver",
    "make_resolver",
    # Compiled output
    "PropertySchema",
    "CompiledSchema",
]

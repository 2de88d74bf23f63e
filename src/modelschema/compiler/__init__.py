# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema compilation engine: type resolution, annotations, arrays, caching."""

from modelschema.compiler.annotations import AnnotationKind, apply_annotations, normalize_kind
from modelschema.compiler.arrays import specialize_array
from modelschema.compiler.artifact import (
    ARTIFACT_SUFFIX,
    deserialize,
    from_dict,
    read_artifact,
    serialize,
    to_dict,
    write_artifact,
)
from modelschema.compiler.build import CompilerError, generate_schemas
from modelschema.compiler.cache import SchemaCache
from modelschema.compiler.model_compiler import ModelCompiler, ModelNotFoundError, compile_model
from modelschema.compiler.semantic_analysis import SemanticError, analyze
from modelschema.compiler.type_resolver import ResolvedType, resolve_type

__all__ = [
    "AnnotationKind",
    "apply_annotations",
    "normalize_kind",
    "resolve_type",
    "ResolvedType",
    "specialize_array",
    "SchemaCache",
    "ModelCompiler",
    "ModelNotFoundError",
    "compile_model",
    "analyze",
    "SemanticError",
    "serialize",
    "deserialize",
    "to_dict",
    "from_dict",
    "write_artifact",
    "read_artifact",
    "ARTIFACT_SUFFIX",
    "generate_schemas",
    "CompilerError",
]

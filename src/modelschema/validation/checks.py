# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lint checks for model files.

The schema compiler tolerates unknown annotations and unresolved references
by ignoring or degrading them. These checks surface such cases as warnings
so authors notice them; they never block schema generation.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from modelschema.compiler.annotations import (
    ARGUMENT_KINDS,
    INTEGER_KINDS,
    AnnotationKind,
    bound_argument,
    normalize_kind,
)
from modelschema.model.entities import Annotation, Model, ModelFile, ModelResolver, make_resolver
from modelschema.model.types import ArrayTypeRef, NamedTypeRef, TypeRef, is_binary_type_name

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal issue found in a model file.

    The model still compiles, but part of its declared intent will be lost
    in the generated schema.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running the lint checks.

    Attributes:
        warnings: Non-fatal issues found during validation.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)


def validate(model_file: ModelFile, resolver: ModelResolver | None = None) -> ValidationResult:
    """Run lint checks on a parsed ModelFile.

    Checks performed:
    - Annotation kinds the compiler does not recognize.
    - Annotations missing their mandatory numeric argument, or given a
      fractional length or size.
    - Field types referencing models that cannot be resolved.

    Args:
        model_file: The parsed ModelFile to check.
        resolver: Resolves referenced model names. Defaults to a resolver
            over the models of *model_file* alone.

    Returns:
        A :class:`ValidationResult` with the warnings found.
    """
    if resolver is None:
        resolver = make_resolver(model_file.models)
    result = ValidationResult()
    for model in model_file.models:
        result.warnings.extend(_check_model(model, resolver))
    return result


# ################
# Implementation
# ################


def _check_model(model: Model, resolver: ModelResolver) -> list[ValidationWarning]:
    warnings: list[ValidationWarning] = []
    for field_def in model.fields:
        ctx = f"field '{field_def.name}' of model '{model.name}'"
        for annotation in field_def.annotations:
            warnings.extend(_check_annotation(ctx, annotation))
        for name in _collect_model_refs(field_def.type):
            if resolver(name) is None:
                warnings.append(
                    ValidationWarning(f"Unresolved model '{name}' in {ctx}; it will be documented as 'object'")
                )
    return warnings


def _check_annotation(ctx: str, annotation: Annotation) -> list[ValidationWarning]:
    kind = normalize_kind(annotation.kind)
    if kind is None:
        return [ValidationWarning(f"Unrecognized annotation '{annotation.kind}' on {ctx} is ignored")]
    if kind not in ARGUMENT_KINDS:
        return []
    expected = "an integer" if kind in INTEGER_KINDS else "a numeric"
    if bound_argument(kind, annotation) is None:
        return [ValidationWarning(f"Annotation '{annotation.kind}' on {ctx} needs {expected} argument; it is ignored")]
    # Length(min, max): only the maximum is optional.
    if kind == AnnotationKind.LENGTH and len(annotation.arguments) > 1 and bound_argument(kind, annotation, 1) is None:
        return [
            ValidationWarning(
                f"Maximum of annotation '{annotation.kind}' on {ctx} needs {expected} argument; it is ignored"
            )
        ]
    return []


def _collect_model_refs(type_ref: TypeRef | None) -> list[str]:
    """Recursively collect referenced model names from a declared type."""
    if isinstance(type_ref, NamedTypeRef):
        if is_binary_type_name(type_ref.name):
            return []
        return [type_ref.name]
    if isinstance(type_ref, ArrayTypeRef):
        return _collect_model_refs(type_ref.element_type)
    return []

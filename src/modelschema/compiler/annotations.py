# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Mapping from validation annotations to schema property constraints.

Each recognized annotation kind writes one or more attributes of a
:class:`~modelschema.model.schema.PropertySchema` or marks the field as
required. Annotations are applied in declaration order, so a later
annotation overwrites an attribute written by an earlier one.
"""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Iterable

from modelschema.model.entities import Annotation
from modelschema.model.schema import PropertySchema

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class AnnotationKind(enum.Enum):
    """Canonical annotation kinds understood by the compiler."""

    IS_STRING = "is-string"
    IS_INTEGER = "is-integer"
    IS_NUMBER = "is-number"
    IS_BOOLEAN = "is-boolean"
    IS_EMAIL = "is-email"
    IS_DATE = "is-date"
    IS_NOT_EMPTY = "is-not-empty"
    MIN_LENGTH = "min-length"
    MAX_LENGTH = "max-length"
    LENGTH = "length"
    MIN = "min"
    MAX = "max"
    IS_POSITIVE = "is-positive"
    IS_ARRAY = "is-array"
    ARRAY_NOT_EMPTY = "array-not-empty"
    ARRAY_MIN_SIZE = "array-min-size"
    ARRAY_MAX_SIZE = "array-max-size"


# Kinds whose first argument is mandatory.
ARGUMENT_KINDS: frozenset[AnnotationKind] = frozenset(
    {
        AnnotationKind.MIN_LENGTH,
        AnnotationKind.MAX_LENGTH,
        AnnotationKind.LENGTH,
        AnnotationKind.MIN,
        AnnotationKind.MAX,
        AnnotationKind.ARRAY_MIN_SIZE,
        AnnotationKind.ARRAY_MAX_SIZE,
    }
)

# Kinds whose arguments are lengths or counts and must be whole numbers.
INTEGER_KINDS: frozenset[AnnotationKind] = frozenset(
    {
        AnnotationKind.MIN_LENGTH,
        AnnotationKind.MAX_LENGTH,
        AnnotationKind.LENGTH,
        AnnotationKind.ARRAY_MIN_SIZE,
        AnnotationKind.ARRAY_MAX_SIZE,
    }
)


def normalize_kind(name: str) -> AnnotationKind | None:
    """Map an annotation name to its canonical kind.

    Matching ignores case and word separators, so ``IsNotEmpty``,
    ``isNotEmpty``, ``is_not_empty`` and ``is-not-empty`` are equivalent.
    ``IsInt`` is accepted as an alias of ``is-integer``.

    Returns:
        The matching :class:`AnnotationKind`, or None for unknown names.
    """
    return _KINDS_BY_COMPACT_NAME.get(_compact(name))


def bound_argument(kind: AnnotationKind, annotation: Annotation, index: int = 0) -> int | float | None:
    """Return the numeric argument at *index* as *kind* uses it.

    Lengths and counts (:data:`INTEGER_KINDS`) must be integral: a float
    with no fractional part is converted to ``int`` and any other float is
    rejected.

    Returns:
        The argument, or None when it is absent or unusable.
    """
    value = _number_arg(annotation, index)
    if value is None or kind not in INTEGER_KINDS or not isinstance(value, float):
        return value
    return int(value) if value.is_integer() else None


def apply_annotations(
    annotations: Iterable[Annotation],
    prop: PropertySchema,
    field_name: str,
    required: list[str] | None,
) -> None:
    """Apply *annotations* to *prop* in declaration order.

    Args:
        annotations: The annotations to apply. Unknown kinds are ignored.
        prop: The property fragment to update in place.
        field_name: Name of the field, recorded in *required* when an
            annotation marks the field as mandatory.
        required: The model's required-field list, extended without
            duplicates. Pass None when *prop* is an array item schema,
            which carries no required-field signal.
    """
    for annotation in annotations:
        kind = normalize_kind(annotation.kind)
        if kind is None:
            logger.debug("Ignoring unrecognized annotation '%s' on field '%s'", annotation.kind, field_name)
            continue
        if kind in ARGUMENT_KINDS and bound_argument(kind, annotation) is None:
            logger.debug(
                "Ignoring annotation '%s' on field '%s': missing or invalid numeric argument",
                annotation.kind,
                field_name,
            )
            continue
        _apply_one(kind, annotation, prop, field_name, required)


# ################
# Implementation
# ################


def _compact(name: str) -> str:
    return re.sub(r"[^a-z0-9]", "", name.lower())


_KINDS_BY_COMPACT_NAME: dict[str, AnnotationKind] = {_compact(kind.value): kind for kind in AnnotationKind}
_KINDS_BY_COMPACT_NAME["isint"] = AnnotationKind.IS_INTEGER


def _number_arg(annotation: Annotation, index: int) -> int | float | None:
    """Return the numeric argument at *index*, or None if absent or not a number."""
    if index >= len(annotation.arguments):
        return None
    value = annotation.arguments[index]
    # bool is an int subclass but never a valid bound.
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return value


def _mark_required(field_name: str, required: list[str] | None) -> None:
    if required is not None and field_name not in required:
        required.append(field_name)


def _apply_one(
    kind: AnnotationKind,
    annotation: Annotation,
    prop: PropertySchema,
    field_name: str,
    required: list[str] | None,
) -> None:
    """Apply a single recognized annotation to *prop*."""
    if kind == AnnotationKind.IS_STRING:
        prop.type = "string"
    elif kind == AnnotationKind.IS_INTEGER:
        prop.type = "integer"
        prop.format = "int32"
    elif kind == AnnotationKind.IS_NUMBER:
        prop.type = "number"
        prop.format = "double"
    elif kind == AnnotationKind.IS_BOOLEAN:
        prop.type = "boolean"
    elif kind == AnnotationKind.IS_EMAIL:
        prop.format = "email"
    elif kind == AnnotationKind.IS_DATE:
        prop.type = "string"
        prop.format = "date-time"
    elif kind == AnnotationKind.IS_NOT_EMPTY:
        _mark_required(field_name, required)
    elif kind == AnnotationKind.MIN_LENGTH:
        prop.min_length = bound_argument(kind, annotation)
    elif kind == AnnotationKind.MAX_LENGTH:
        prop.max_length = bound_argument(kind, annotation)
    elif kind == AnnotationKind.LENGTH:
        prop.min_length = bound_argument(kind, annotation)
        max_length = bound_argument(kind, annotation, 1)
        if max_length is not None:
            prop.max_length = max_length
    elif kind == AnnotationKind.MIN:
        prop.minimum = bound_argument(kind, annotation)
    elif kind == AnnotationKind.MAX:
        prop.maximum = bound_argument(kind, annotation)
    elif kind == AnnotationKind.IS_POSITIVE:
        prop.minimum = 0
    elif kind == AnnotationKind.IS_ARRAY:
        prop.type = "array"
    elif kind == AnnotationKind.ARRAY_NOT_EMPTY:
        prop.min_items = 1
        _mark_required(field_name, required)
    elif kind == AnnotationKind.ARRAY_MIN_SIZE:
        prop.min_items = bound_argument(kind, annotation)
    elif kind == AnnotationKind.ARRAY_MAX_SIZE:
        prop.max_items = bound_argument(kind, annotation)

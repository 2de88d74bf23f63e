# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Models, fields, and annotations consumed by the schema compiler."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from pydantic import BaseModel
from pydantic import Field as _Field

from modelschema.model.types import TypeRef

# ###############
# Public Interface
# ###############

# A literal annotation argument as written in the source.
AnnotationArgument = bool | int | float | str


class Annotation(BaseModel):
    """A declarative validation annotation attached to a field.

    Attributes:
        kind: The annotation name as written (e.g. ``IsNotEmpty``); the
            compiler normalizes it.
        arguments: Positional literal arguments in declaration order.
        each: Whether the annotation applies to every element of an array
            rather than to the array itself.
    """

    kind: str
    arguments: list[AnnotationArgument] = _Field(default_factory=list)
    each: bool = False


class Field(BaseModel):
    """A named, typed member of a model."""

    name: str
    type: TypeRef
    annotations: list[Annotation] = _Field(default_factory=list)


class Model(BaseModel):
    """An annotated data definition subject to schema compilation."""

    name: str
    fields: list[Field] = _Field(default_factory=list)
    description: str | None = None


class ModelFile(BaseModel):
    """Top-level container for the models declared in a single source file."""

    models: list[Model] = _Field(default_factory=list)


# Looks up a model by name; returns None when it does not exist.
ModelResolver = Callable[[str], Model | None]


def make_resolver(models: Iterable[Model]) -> ModelResolver:
    """Build a resolver over a fixed collection of models.

    When two models share a name the first one wins; duplicate names are
    reported by semantic analysis before compilation.
    """
    by_name: dict[str, Model] = {}
    for model in models:
        by_name.setdefault(model.name, model)
    return by_name.get

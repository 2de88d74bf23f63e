# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compilation of annotated models into object schemas.

For every field of a model the compiler resolves the declared type, applies
the field's annotations, and specializes array items. Referenced models are
compiled recursively and memoized in a :class:`SchemaCache`, so each model
is compiled at most once per run. A reference back to a model that is still
being compiled (a self or mutual reference) receives a plain ``object``
stub instead of recursing.
"""

from __future__ import annotations

import logging

from modelschema.compiler.annotations import apply_annotations
from modelschema.compiler.arrays import specialize_array
from modelschema.compiler.cache import SchemaCache
from modelschema.compiler.type_resolver import resolve_type
from modelschema.model.entities import Field, Model, ModelResolver
from modelschema.model.schema import CompiledSchema, PropertySchema
from modelschema.model.types import ArrayTypeRef, NamedTypeRef, TypeRef

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ModelNotFoundError(Exception):
    """Raised when the model requested for compilation does not exist.

    Only a missing top-level model is an error; missing nested references
    degrade to a plain ``object`` property.

    Attributes:
        name: The model name that could not be resolved.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Model '{name}' not found")
        self.name = name


class ModelCompiler:
    """Compiles models to schemas against a resolver for referenced models.

    Args:
        resolver: Returns the model with a given name, or None.
        cache: Memo shared across compile requests. A fresh cache is
            created when omitted.
    """

    def __init__(self, resolver: ModelResolver, cache: SchemaCache | None = None) -> None:
        self._resolver = resolver
        self._cache = cache if cache is not None else SchemaCache()

    @property
    def cache(self) -> SchemaCache:
        return self._cache

    def compile(self, model: Model | str) -> CompiledSchema:
        """Compile *model* (or the model named *model*) to a schema.

        Repeated calls for the same model name return the cached result.

        Raises:
            ModelNotFoundError: If *model* is a name the resolver cannot find.
        """
        name = model if isinstance(model, str) else model.name
        cached = self._cache.get(name)
        if cached is not None:
            logger.debug("Schema cache hit for model '%s'", name)
            return cached

        if isinstance(model, str):
            found = self._resolver(model)
            if found is None:
                raise ModelNotFoundError(model)
            model = found

        with self._cache.lock:
            return _CompileRun(self._resolver, self._cache).compile(model)


def compile_model(model: Model | str, resolver: ModelResolver) -> CompiledSchema:
    """Compile a single model with a fresh cache.

    Raises:
        ModelNotFoundError: If *model* is a name the resolver cannot find.
    """
    return ModelCompiler(resolver).compile(model)


# ################
# Implementation
# ################


class _CompileRun:
    """Depth-first compilation of one model and everything it references."""

    def __init__(self, resolver: ModelResolver, cache: SchemaCache) -> None:
        self._resolver = resolver
        self._cache = cache
        # Models whose fields are currently being compiled (cycle guard).
        self._in_progress: set[str] = set()

    def compile(self, model: Model) -> CompiledSchema:
        cached = self._cache.get(model.name)
        if cached is not None:
            return cached

        properties: dict[str, PropertySchema] = {}
        required: list[str] = []
        self._in_progress.add(model.name)
        try:
            for field_def in model.fields:
                properties[field_def.name] = self._compile_field(field_def, required)
        finally:
            self._in_progress.discard(model.name)

        schema = PropertySchema(
            type="object",
            properties=properties,
            required=[name for name in required if name in properties],
        )
        return self._cache.put(CompiledSchema(name=model.name, schema=schema))

    def _compile_field(self, field_def: Field, required: list[str]) -> PropertySchema:
        prop = resolve_type(field_def.type, self._compile_reference).to_property()
        apply_annotations(
            [a for a in field_def.annotations if not a.each],
            prop,
            field_def.name,
            required,
        )
        if prop.type != "object":
            # An annotation changed the type of a model reference.
            prop.properties = None
            prop.required = None
        if prop.type == "array":
            specialize_array(
                prop,
                _element_type(field_def.type),
                field_def.annotations,
                self._compile_reference,
                field_def.name,
            )
        return prop

    def _compile_reference(self, name: str) -> PropertySchema | None:
        """Return the object schema of the referenced model, or None if it is missing."""
        if name in self._in_progress:
            logger.debug("Model '%s' references itself through a cycle; using an object stub", name)
            return PropertySchema(type="object")

        cached = self._cache.get(name)
        if cached is not None:
            return cached.schema

        model = self._resolver(name)
        if model is None:
            logger.debug("Referenced model '%s' not found; degrading to object", name)
            return None
        return self.compile(model).schema


def _element_type(type_ref: TypeRef) -> TypeRef | None:
    """Return the item type of a field compiled as an array.

    A model reference turned into an array by ``IsArray`` keeps the model as
    its item type.
    """
    if isinstance(type_ref, ArrayTypeRef):
        return type_ref.element_type
    if isinstance(type_ref, NamedTypeRef):
        return type_ref
    return None

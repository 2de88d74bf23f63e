# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Item schema resolution for array-typed properties."""

from __future__ import annotations

from collections.abc import Iterable

from modelschema.compiler.annotations import apply_annotations
from modelschema.compiler.type_resolver import ReferenceCompiler, resolve_type
from modelschema.model.entities import Annotation
from modelschema.model.schema import PropertySchema
from modelschema.model.types import ArrayTypeRef, TypeRef

# ###############
# Public Interface
# ###############

DEFAULT_ITEM_TYPE = "string"


def specialize_array(
    prop: PropertySchema,
    element_type: TypeRef | None,
    annotations: Iterable[Annotation],
    compile_reference: ReferenceCompiler,
    field_name: str,
) -> None:
    """Populate ``prop.items`` for an array property.

    The item schema starts from the declared element type. Without one it
    defaults to ``{"type": "string"}``. Per-element annotations (those with
    ``each`` set) are then applied to the item schema and take precedence
    over the declared element type.

    Args:
        prop: The array property to update in place.
        element_type: The declared element type, or None when unknown.
        annotations: All annotations of the field; only per-element ones
            are used.
        compile_reference: Compiles referenced models by name.
        field_name: Name of the field, used for diagnostics.
    """
    if element_type is None:
        items = PropertySchema(type=DEFAULT_ITEM_TYPE)
    else:
        items = resolve_type(element_type, compile_reference).to_property()

    apply_annotations([a for a in annotations if a.each], items, field_name, None)

    # Nested arrays (e.g. string[][]) need their own item schema.
    if items.type == "array" and items.items is None:
        nested_element = element_type.element_type if isinstance(element_type, ArrayTypeRef) else None
        specialize_array(items, nested_element, [], compile_reference, field_name)
    prop.items = items

# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declared field type representations for the modelschema data model."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class PrimitiveType(Enum):
    """Primitive type tags a field may be declared with."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    BINARY = "binary"
    OBJECT = "object"


class PrimitiveTypeRef(BaseModel):
    """Reference to a primitive type."""

    kind: Literal["primitive"] = "primitive"
    primitive: PrimitiveType


class ArrayTypeRef(BaseModel):
    """Reference to an array type.

    ``element_type`` is ``None`` when the element type is unknown (a bare
    ``Array`` or an unresolved generic placeholder).
    """

    kind: Literal["array"] = "array"
    element_type: TypeRef | None = None


class NamedTypeRef(BaseModel):
    """Reference to another model by name."""

    kind: Literal["named"] = "named"
    name: str


# A declared field type: primitive, array or model reference.
TypeRef = Annotated[
    PrimitiveTypeRef | ArrayTypeRef | NamedTypeRef,
    _Field(discriminator="kind"),
]

# Explicit byte-buffer, typed byte array, and file-upload type names.
BINARY_TYPE_NAMES: frozenset[str] = frozenset(
    {
        "Buffer",
        "Uint8Array",
        "bytes",
        "bytearray",
        "memoryview",
        "UploadFile",
    }
)

BINARY_TYPE_SUFFIX = "File"


def is_binary_type_name(name: str) -> bool:
    """Return True if *name* denotes raw byte content or a file payload.

    Matches the well-known byte-buffer names and any nominal type whose name
    ends in ``File`` (e.g. ``File``, ``UploadFile``, ``AvatarFile``).
    """
    return name in BINARY_TYPE_NAMES or name.endswith(BINARY_TYPE_SUFFIX)


# Resolve forward references for models that use TypeRef.
ArrayTypeRef.model_rebuild()

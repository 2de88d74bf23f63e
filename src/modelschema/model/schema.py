# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiled schema documents produced by the schema compiler."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

# ###############
# Public Interface
# ###############


class PropertySchema(BaseModel):
    """Structural description of one field (or of a whole model).

    Attributes left as ``None`` are absent from the serialized document.
    ``items`` is populated for arrays; ``properties`` and ``required`` are
    populated for nested objects and for the top-level model schema.
    """

    type: str
    format: str | None = None
    minimum: int | float | None = None
    maximum: int | float | None = None
    min_length: int | None = None
    max_length: int | None = None
    min_items: int | None = None
    max_items: int | None = None
    items: PropertySchema | None = None
    properties: dict[str, PropertySchema] | None = None
    required: list[str] | None = None


@dataclass(frozen=True)
class CompiledSchema:
    """A model name paired with its compiled object schema.

    Attributes:
        name: Name of the compiled model.
        schema: Object schema with ``properties`` and ``required`` populated.
    """

    name: str
    schema: PropertySchema


# Resolve the self-reference in PropertySchema.
PropertySchema.model_rebuild()

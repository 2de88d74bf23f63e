# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of compiled schema artifacts.

A compiled schema is emitted as a JSON document ``{"name": ..., "schema":
...}`` using the usual schema keywords (``minLength``, ``maxItems``, ...).
Absent constraints are omitted, so a document round-trips without loss.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from modelschema.model.schema import CompiledSchema, PropertySchema

# ###############
# Public Interface
# ###############

ARTIFACT_SUFFIX = ".schema.json"


def to_dict(compiled: CompiledSchema) -> dict[str, Any]:
    """Return the JSON-compatible document for a compiled schema."""
    return {"name": compiled.name, "schema": _property_to_dict(compiled.schema)}


def from_dict(obj: dict[str, Any]) -> CompiledSchema:
    """Rebuild a compiled schema from the document produced by :func:`to_dict`.

    Raises:
        ValueError: If the document lacks the ``name`` or ``schema`` entries.
    """
    if "name" not in obj or "schema" not in obj:
        raise ValueError("Schema artifact must contain 'name' and 'schema'")
    return CompiledSchema(name=obj["name"], schema=_property_from_dict(obj["schema"]))


def serialize(compiled: CompiledSchema, *, indent: int | None = 2) -> str:
    """Serialize a compiled schema to a JSON string."""
    return json.dumps(to_dict(compiled), indent=indent)


def deserialize(data: str) -> CompiledSchema:
    """Deserialize a compiled schema from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`CompiledSchema`.

    Raises:
        ValueError: If the data is not a valid schema artifact.
    """
    obj = json.loads(data)
    if not isinstance(obj, dict):
        raise ValueError("Schema artifact must be a JSON object")
    return from_dict(obj)


def artifact_path(name: str, output_dir: Path) -> Path:
    """Return the artifact path for the model *name* under *output_dir*."""
    return output_dir / (name + ARTIFACT_SUFFIX)


def write_artifact(compiled: CompiledSchema, path: Path) -> None:
    """Write a compiled schema to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(compiled) + "\n", encoding="utf-8")


def read_artifact(path: Path) -> CompiledSchema:
    """Read and deserialize a compiled schema from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################

# Schema attribute name -> JSON keyword, in emission order. ``items``,
# ``properties`` and ``required`` are handled separately.
_SCALAR_KEYS: tuple[tuple[str, str], ...] = (
    ("type", "type"),
    ("format", "format"),
    ("minimum", "minimum"),
    ("maximum", "maximum"),
    ("min_length", "minLength"),
    ("max_length", "maxLength"),
    ("min_items", "minItems"),
    ("max_items", "maxItems"),
)


def _property_to_dict(prop: PropertySchema) -> dict[str, Any]:
    d: dict[str, Any] = {}
    for attr, key in _SCALAR_KEYS:
        value = getattr(prop, attr)
        if value is not None:
            d[key] = value
    if prop.items is not None:
        d["items"] = _property_to_dict(prop.items)
    if prop.properties is not None:
        d["properties"] = {name: _property_to_dict(p) for name, p in prop.properties.items()}
    if prop.required is not None:
        d["required"] = list(prop.required)
    return d


def _property_from_dict(obj: dict[str, Any]) -> PropertySchema:
    kwargs: dict[str, Any] = {attr: obj[key] for attr, key in _SCALAR_KEYS if key in obj}
    if "items" in obj:
        kwargs["items"] = _property_from_dict(obj["items"])
    if "properties" in obj:
        kwargs["properties"] = {name: _property_from_dict(p) for name, p in obj["properties"].items()}
    if "required" in obj:
        kwargs["required"] = list(obj["required"])
    return PropertySchema(**kwargs)

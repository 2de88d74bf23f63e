# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic analysis for parsed model files.

Checks structural correctness of the parsed models before compilation:
duplicate model names and duplicate field names. Unresolved references and
unknown annotations are not errors here; the compiler degrades them and the
lint checks in :mod:`modelschema.validation` report them as warnings.
"""

from __future__ import annotations

from dataclasses import dataclass

from modelschema.model.entities import Model, ModelFile

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class SemanticError:
    """A structural error detected during semantic analysis.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


def analyze(model_file: ModelFile) -> list[SemanticError]:
    """Perform semantic analysis on a parsed ModelFile.

    Checks performed:
    - Duplicate model names within the file.
    - Duplicate field names within each model.

    Args:
        model_file: The parsed ModelFile to analyze.

    Returns:
        A list of :class:`SemanticError` instances. An empty list means no
        semantic errors were found.
    """
    errors: list[SemanticError] = []
    errors.extend(
        check_duplicate_names(
            [m.name for m in model_file.models],
            "Duplicate model name '{}'",
        )
    )
    for model in model_file.models:
        errors.extend(_check_field_names(model))
    return errors


def check_duplicate_names(names: list[str], fmt: str) -> list[SemanticError]:
    """Return a SemanticError for each name that appears more than once.

    Only one error per unique duplicate name is emitted (even if it appears
    three or more times). *fmt* must contain a single ``{}`` placeholder
    that will be filled with the duplicate name.
    """
    seen: set[str] = set()
    reported: set[str] = set()
    errors: list[SemanticError] = []
    for name in names:
        if name in seen:
            if name not in reported:
                errors.append(SemanticError(fmt.format(name)))
                reported.add(name)
        else:
            seen.add(name)
    return errors


# ################
# Implementation
# ################


def _check_field_names(model: Model) -> list[SemanticError]:
    """Check for duplicate field names within a model."""
    return check_duplicate_names(
        [f.name for f in model.fields],
        f"Duplicate field name '{{}}' in model '{model.name}'",
    )

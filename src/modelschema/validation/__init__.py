# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lint checks for model files (unknown annotations, unresolved references)."""

from modelschema.validation.checks import (
    ValidationResult,
    ValidationWarning,
    validate,
)

__all__ = [
    "ValidationResult",
    "ValidationWarning",
    "validate",
]

# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""modelschema: compile annotated data models into structural schema documents."""

from modelschema.compiler.model_compiler import ModelCompiler, ModelNotFoundError, compile_model

__all__ = [
    "ModelCompiler",
    "ModelNotFoundError",
    "compile_model",
]

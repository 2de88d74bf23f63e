# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for modelschema."""

from modelschema.workspace.config import (
    CONFIG_FILE_NAME,
    CompilerOptions,
    ConfigError,
    ProjectConfig,
    check_metadata_support,
    load_project_config,
    model_source_files,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "CompilerOptions",
    "ConfigError",
    "ProjectConfig",
    "check_metadata_support",
    "load_project_config",
    "model_source_files",
]

# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the modelschema project configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".modelschema.yaml"

DEFAULT_OUTPUT_DIRECTORY = "build/schemas"
DEFAULT_MODEL_FILES = ["**/*.model"]


class ConfigError(Exception):
    """Raised when a project configuration file is invalid or cannot be loaded."""


@dataclass
class CompilerOptions:
    """Options that make model sources analyzable.

    Attributes:
        emit_metadata: Whether annotation metadata is emitted for the model
            sources. Schema generation requires it.
    """

    emit_metadata: bool = False


@dataclass
class ProjectConfig:
    """The parsed configuration for a modelschema project.

    Attributes:
        output_directory: Relative path (from the project root) for generated schemas.
        model_files: Glob patterns (relative to the project root) selecting model sources.
        compiler_options: Source analysis options, or None when the section is absent.
    """

    output_directory: str = DEFAULT_OUTPUT_DIRECTORY
    model_files: list[str] = field(default_factory=lambda: list(DEFAULT_MODEL_FILES))
    compiler_options: CompilerOptions | None = None


def load_project_config(path: Path) -> ProjectConfig:
    """Load and parse a modelschema project configuration file.

    Args:
        path: Path to the `.modelschema.yaml` file.

    Returns:
        A ProjectConfig instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Project config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read project config file: {exc}") from exc

    return _parse_project_config(text, source_label=str(path))


def check_metadata_support(config: ProjectConfig, source_label: str = CONFIG_FILE_NAME) -> None:
    """Verify that the configuration makes model sources analyzable.

    Raises:
        ConfigError: If ``compiler-options`` is missing or ``emit-metadata``
            is not enabled.
    """
    if config.compiler_options is None:
        raise ConfigError(f"{source_label}: 'compiler-options' not found")
    if not config.compiler_options.emit_metadata:
        raise ConfigError(f"{source_label}: 'compiler-options.emit-metadata' must be set to true")


def model_source_files(root: Path, config: ProjectConfig) -> list[Path]:
    """Return the model source files under *root* selected by the config.

    Files below the output directory are skipped. The result is sorted and
    free of duplicates.
    """
    output_dir = (root / config.output_directory).resolve()
    found: set[Path] = set()
    for pattern in config.model_files:
        for path in root.glob(pattern):
            resolved = path.resolve()
            if path.is_file() and output_dir not in resolved.parents:
                found.add(resolved)
    return sorted(found)


# ################
# Implementation
# ################


def _parse_project_config(text: str, source_label: str = "<string>") -> ProjectConfig:
    """Parse project config YAML text into a ProjectConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Returns:
        A ProjectConfig instance.

    Raises:
        ConfigError: If the YAML is invalid or fields have the wrong types.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: project config must be a YAML mapping")

    config = ProjectConfig()
    if "output-directory" in data:
        config.output_directory = _require_string(data, "output-directory", source_label)

    if "model-files" in data:
        raw_patterns = data["model-files"]
        if not isinstance(raw_patterns, list) or not all(isinstance(p, str) for p in raw_patterns):
            raise ConfigError(f"{source_label}: 'model-files' must be a list of strings")
        config.model_files = list(raw_patterns)

    if "compiler-options" in data:
        config.compiler_options = _parse_compiler_options(data["compiler-options"], source_label)

    return config


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a required string field from a mapping, raising ConfigError if missing."""
    if key not in mapping:
        raise ConfigError(f"{source_label}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _parse_compiler_options(entry: object, source_label: str) -> CompilerOptions:
    """Parse the ``compiler-options`` mapping."""
    location = f"{source_label}: compiler-options"

    if not isinstance(entry, dict):
        raise ConfigError(f"{location} must be a YAML mapping")

    options = CompilerOptions()
    if "emit-metadata" in entry:
        value = entry["emit-metadata"]
        if not isinstance(value, bool):
            raise ConfigError(f"{location}: 'emit-metadata' must be a boolean")
        options.emit_metadata = value
    return options

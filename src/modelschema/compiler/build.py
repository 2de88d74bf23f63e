# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema generation workflow for .model files.

Parses every source file, checks it for structural errors, and compiles the
requested models against a resolver spanning all files, so a model may
reference models declared in any other file of the same run. One JSON
artifact is written per compiled model.
"""

from __future__ import annotations

import logging
from pathlib import Path

from modelschema.compiler.artifact import artifact_path, write_artifact
from modelschema.compiler.cache import SchemaCache
from modelschema.compiler.model_compiler import ModelCompiler, ModelNotFoundError
from modelschema.compiler.semantic_analysis import analyze
from modelschema.model.entities import Model, ModelFile, make_resolver
from modelschema.model.schema import CompiledSchema
from modelschema.parser.lexer import LexerError
from modelschema.parser.parser import ParseError, parse

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class CompilerError(Exception):
    """Raised when schema generation encounters an unrecoverable error.

    Covers unreadable files, parse errors, semantic errors, models defined in
    more than one file, and requested models that do not exist.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


def load_model_files(files: list[Path]) -> dict[Path, ModelFile]:
    """Parse and semantically check each source file.

    Returns:
        A mapping from each source path to its parsed :class:`ModelFile`,
        in the order given.

    Raises:
        CompilerError: On unreadable files, parse errors, or semantic errors.
    """
    parsed: dict[Path, ModelFile] = {}
    for source_file in files:
        try:
            source_text = source_file.read_text(encoding="utf-8")
        except OSError as exc:
            raise CompilerError(f"Cannot read source file '{source_file}': {exc}") from exc

        try:
            model_file = parse(source_text)
        except (LexerError, ParseError) as exc:
            raise CompilerError(f"Parse error in '{source_file}': {exc}") from exc

        errors = analyze(model_file)
        if errors:
            error_lines = "\n".join(f"  {e.message}" for e in errors)
            raise CompilerError(f"Semantic errors in '{source_file}':\n{error_lines}")

        parsed[source_file] = model_file
    return parsed


def collect_models(model_files: dict[Path, ModelFile]) -> dict[str, Model]:
    """Merge the models of several files into one name-keyed mapping.

    Raises:
        CompilerError: If the same model name is defined in two files.
    """
    models: dict[str, Model] = {}
    origins: dict[str, Path] = {}
    for path, model_file in model_files.items():
        for model in model_file.models:
            if model.name in models:
                raise CompilerError(f"Model '{model.name}' is defined in both '{origins[model.name]}' and '{path}'")
            models[model.name] = model
            origins[model.name] = path
    return models


def generate_schemas(
    files: list[Path],
    output_dir: Path | None,
    *,
    model_names: list[str] | None = None,
    cache: SchemaCache | None = None,
) -> dict[str, CompiledSchema]:
    """Compile the models declared in *files* to schemas.

    For each run, the workflow:
    1. Parses and semantically checks every source file.
    2. Merges all models into one resolver, rejecting duplicate names.
    3. Compiles the requested models (or every model when *model_names* is
       None), recursing into referenced models through a shared cache.
    4. Writes ``<Model>.schema.json`` artifacts to *output_dir*, unless it
       is None.

    Args:
        files: Paths to the .model source files.
        output_dir: Directory for the artifacts, or None to skip writing.
        model_names: Names of the models to compile.
        cache: Schema cache to reuse across runs.

    Returns:
        A mapping from model name to its :class:`CompiledSchema`, in
        compilation order.

    Raises:
        CompilerError: On parse or semantic errors, duplicate model names,
            or a requested model that does not exist.
    """
    models = collect_models(load_model_files(files))
    compiler = ModelCompiler(make_resolver(models.values()), cache)

    targets = model_names if model_names is not None else list(models)
    compiled: dict[str, CompiledSchema] = {}
    for name in targets:
        try:
            compiled[name] = compiler.compile(name)
        except ModelNotFoundError as exc:
            raise CompilerError(str(exc)) from exc
        logger.debug("Compiled model '%s'", name)

    if output_dir is not None:
        for name, result in compiled.items():
            write_artifact(result, artifact_path(name, output_dir))
    return compiled

# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the modelschema command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from modelschema.compiler.artifact import serialize
from modelschema.compiler.build import CompilerError, collect_models, generate_schemas, load_model_files
from modelschema.model.entities import make_resolver
from modelschema.validation.checks import validate
from modelschema.workspace.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    ProjectConfig,
    check_metadata_support,
    load_project_config,
    model_source_files,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the modelschema CLI."""
    parser = argparse.ArgumentParser(
        prog="modelschema",
        description="modelschema - compile annotated models into schema documents",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Initialize a new modelschema project",
        description=f"Create a starter {CONFIG_FILE_NAME} in a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to initialize the project in (default: current directory)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check model files for errors and lint warnings",
        description="Parse and analyze model files without generating schemas.",
    )
    check_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the modelschema project (default: current directory)",
    )

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate schema documents for the project's models",
        description="Compile model files and write one schema document per model.",
    )
    generate_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the modelschema project (default: current directory)",
    )
    generate_parser.add_argument(
        "--model",
        dest="models",
        action="append",
        metavar="NAME",
        help="Compile only the named model (may be repeated)",
    )
    generate_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the schemas as JSON instead of writing files",
    )

    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_STARTER_CONFIG = (
    "# modelschema project configuration\n"
    "output-directory: build/schemas\n"
    "model-files:\n"
    '  - "**/*.model"\n'
    "compiler-options:\n"
    "  emit-metadata: true\n"
)


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "generate":
        return _cmd_generate(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if config_file.exists():
        print(
            f"Error: project already exists at '{config_file}'.",
            file=sys.stderr,
        )
        return 1

    config_file.write_text(_STARTER_CONFIG, encoding="utf-8")
    print(f"Initialized modelschema project at '{config_file}'.")
    return 0


def _load_project(directory: Path) -> ProjectConfig | None:
    """Load the project config and enforce the metadata precondition.

    Prints the problem and returns None when the project cannot be used.
    """
    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return None

    config_file = directory / CONFIG_FILE_NAME
    if not config_file.exists():
        print(
            f"Error: no modelschema project found at '{directory}'. Run 'modelschema init' to create one.",
            file=sys.stderr,
        )
        return None

    try:
        config = load_project_config(config_file)
        check_metadata_support(config, str(config_file))
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None
    return config


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    directory = Path(args.directory).resolve()
    config = _load_project(directory)
    if config is None:
        return 1

    files = model_source_files(directory, config)
    if not files:
        print("No model files found in the project.")
        return 0

    print(f"Checking {len(files)} model file(s)...")
    try:
        model_files = load_model_files(files)
        models = collect_models(model_files)
    except CompilerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    resolver = make_resolver(models.values())
    warning_count = 0
    for model_file in model_files.values():
        for warning in validate(model_file, resolver).warnings:
            print(f"Warning: {warning.message}")
            warning_count += 1

    if warning_count == 0:
        print("No issues found.")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    directory = Path(args.directory).resolve()
    config = _load_project(directory)
    if config is None:
        return 1

    files = model_source_files(directory, config)
    if not files:
        print("No model files found in the project.")
        return 0

    output_dir = None if args.stdout else directory / config.output_directory
    try:
        compiled = generate_schemas(files, output_dir, model_names=args.models)
    except CompilerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.stdout:
        for result in compiled.values():
            print(serialize(result))
        return 0

    print(f"Generated {len(compiled)} schema(s) in '{output_dir}'.")
    return 0

# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the semantic analysis module."""

from modelschema.compiler.semantic_analysis import SemanticError, analyze, check_duplicate_names
from modelschema.parser import parse

# ###############
# Test Helpers
# ###############


def _messages(source: str) -> list[str]:
    """Parse source, run semantic analysis and return the error messages."""
    return [e.message for e in analyze(parse(source))]


# ###############
# Clean input
# ###############


class TestClean:
    def test_empty_file(self) -> None:
        assert _messages("") == []

    def test_distinct_models_and_fields(self) -> None:
        assert _messages("model A { x: string; y: number } model B { x: string }") == []

    def test_unresolved_reference_is_not_an_error(self) -> None:
        assert _messages("model A { b: Missing }") == []

    def test_unknown_annotation_is_not_an_error(self) -> None:
        assert _messages("model A { @IsUUID() id: string }") == []


# ###############
# Duplicates
# ###############


class TestDuplicates:
    def test_duplicate_model_name(self) -> None:
        assert _messages("model A {} model A {}") == ["Duplicate model name 'A'"]

    def test_duplicate_model_reported_once(self) -> None:
        assert _messages("model A {} model A {} model A {}") == ["Duplicate model name 'A'"]

    def test_duplicate_field_name(self) -> None:
        assert _messages("model User { name: string; name: number }") == ["Duplicate field name 'name' in model 'User'"]

    def test_errors_from_several_models(self) -> None:
        messages = _messages("model A { x: string; x: string } model B { y: string; y: string }")
        assert messages == [
            "Duplicate field name 'x' in model 'A'",
            "Duplicate field name 'y' in model 'B'",
        ]


def test_check_duplicate_names() -> None:
    errors = check_duplicate_names(["a", "b", "a", "c", "b", "a"], "dup {}")
    assert errors == [SemanticError("dup a"), SemanticError("dup b")]

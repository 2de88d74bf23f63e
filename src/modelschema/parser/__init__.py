# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and parser for .model files."""

from modelschema.parser.lexer import LexerError, tokenize
from modelschema.parser.parser import ParseError, parse, parse_type

__all__ = [
    "parse",
    "parse_type",
    "tokenize",
    "LexerError",
    "ParseError",
]

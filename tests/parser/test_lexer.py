# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the model lexical scanner."""

import pytest

from modelschema.parser.lexer import LexerError, Token, TokenType, tokenize

# ###############
# Test Helpers
# ###############


def _tokens_no_eof(source: str) -> list[Token]:
    """Return all tokens except the terminal EOF token."""
    result = tokenize(source)
    assert result[-1].type == TokenType.EOF
    return result[:-1]


def _types(source: str) -> list[TokenType]:
    """Return the token types for all tokens except EOF."""
    return [tok.type for tok in _tokens_no_eof(source)]


def _values(source: str) -> list[str]:
    """Return the token values for all tokens except EOF."""
    return [tok.value for tok in _tokens_no_eof(source)]


# ###############
# EOF Handling
# ###############


class TestEof:
    def test_empty_string_produces_eof(self) -> None:
        tokens = tokenize("")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF
        assert (tokens[0].line, tokens[0].column) == (1, 1)

    def test_whitespace_and_semicolons_only(self) -> None:
        assert _types("   \t\n ;; ") == []


# ###############
# Keywords and identifiers
# ###############


class TestKeywords:
    @pytest.mark.parametrize(
        ("source", "expected_type"),
        [
            ("model", TokenType.MODEL),
            ("description", TokenType.DESCRIPTION),
            ("true", TokenType.TRUE),
            ("false", TokenType.FALSE),
        ],
    )
    def test_keyword(self, source: str, expected_type: TokenType) -> None:
        assert _types(source) == [expected_type]

    def test_keywords_are_case_sensitive(self) -> None:
        assert _types("Model True") == [TokenType.IDENTIFIER, TokenType.IDENTIFIER]

    def test_identifier_with_underscore_and_digits(self) -> None:
        assert _values("_user_id2") == ["_user_id2"]
        assert _types("_user_id2") == [TokenType.IDENTIFIER]


# ###############
# Symbols
# ###############


class TestSymbols:
    def test_all_symbols(self) -> None:
        assert _types("{}()<>[],:=@") == [
            TokenType.LBRACE,
            TokenType.RBRACE,
            TokenType.LPAREN,
            TokenType.RPAREN,
            TokenType.LANGLE,
            TokenType.RANGLE,
            TokenType.LBRACKET,
            TokenType.RBRACKET,
            TokenType.COMMA,
            TokenType.COLON,
            TokenType.EQUALS,
            TokenType.AT,
        ]

    def test_annotated_field(self) -> None:
        assert _types("@Min(1) age: number;") == [
            TokenType.AT,
            TokenType.IDENTIFIER,
            TokenType.LPAREN,
            TokenType.INTEGER,
            TokenType.RPAREN,
            TokenType.IDENTIFIER,
            TokenType.COLON,
            TokenType.IDENTIFIER,
        ]


# ###############
# Literals
# ###############


class TestNumbers:
    def test_integer(self) -> None:
        assert _types("42") == [TokenType.INTEGER]
        assert _values("42") == ["42"]

    def test_negative_integer(self) -> None:
        assert _types("-7") == [TokenType.INTEGER]
        assert _values("-7") == ["-7"]

    def test_float(self) -> None:
        assert _types("3.25") == [TokenType.FLOAT]
        assert _values("-0.5") == ["-0.5"]

    def test_lone_minus_is_rejected(self) -> None:
        with pytest.raises(LexerError):
            tokenize("- 1")


class TestStrings:
    def test_double_quoted(self) -> None:
        assert _values('"hello"') == ["hello"]
        assert _types('"hello"') == [TokenType.STRING]

    def test_single_quoted(self) -> None:
        assert _values("'it'") == ["it"]

    def test_escapes(self) -> None:
        assert _values(r'"a\"b\n\\"') == ['a"b\n\\']

    def test_other_quote_needs_no_escape(self) -> None:
        assert _values("\"it's\"") == ["it's"]

    def test_escaped_quote_in_single_quoted(self) -> None:
        assert _values(r"'it\'s'") == ["it's"]

    def test_unterminated_string(self) -> None:
        with pytest.raises(LexerError, match="Unterminated string literal"):
            tokenize('"open')

    def test_newline_in_string(self) -> None:
        with pytest.raises(LexerError, match="Unterminated string literal"):
            tokenize('"line\nbreak"')

    def test_invalid_escape(self) -> None:
        with pytest.raises(LexerError, match="Invalid escape sequence"):
            tokenize(r'"\q"')


# ###############
# Comments
# ###############


class TestComments:
    def test_line_comment(self) -> None:
        assert _values("a // comment\nb") == ["a", "b"]

    def test_block_comment(self) -> None:
        assert _values("a /* multi\nline */ b") == ["a", "b"]

    def test_unterminated_block_comment(self) -> None:
        with pytest.raises(LexerError, match="Unterminated block comment"):
            tokenize("/* never closed")


# ###############
# Positions and errors
# ###############


class TestPositions:
    def test_line_and_column_tracking(self) -> None:
        tokens = _tokens_no_eof("model\n  User")
        assert (tokens[0].line, tokens[0].column) == (1, 1)
        assert (tokens[1].line, tokens[1].column) == (2, 3)

    def test_unexpected_character(self) -> None:
        with pytest.raises(LexerError) as exc_info:
            tokenize("a\n  #")
        assert exc_info.value.line == 2
        assert exc_info.value.column == 3
        assert "Unexpected character" in str(exc_info.value)

    def test_position_after_multiline_comment(self) -> None:
        tokens = _tokens_no_eof("a /* one\ntwo\n  */ b\n c")
        assert [(t.value, t.line, t.column) for t in tokens] == [("a", 1, 1), ("b", 3, 6), ("c", 4, 2)]

    def test_eof_position(self) -> None:
        eof = tokenize("a\nbc")[-1]
        assert (eof.type, eof.line, eof.column) == (TokenType.EOF, 2, 3)

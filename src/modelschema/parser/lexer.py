# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for .model files.

Whitespace, semicolons and ``//`` / ``/* */`` comments separate tokens and
are dropped. Strings may use single or double quotes.
"""

import enum
import re
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the model lexer."""

    # Keywords
    MODEL = "model"
    DESCRIPTION = "description"
    TRUE = "true"
    FALSE = "false"

    # Symbols
    LBRACE = "{"
    RBRACE = "}"
    LPAREN = "("
    RPAREN = ")"
    LANGLE = "<"
    RANGLE = ">"
    LBRACKET = "["
    RBRACKET = "]"
    COMMA = ","
    COLON = ":"
    EQUALS = "="
    AT = "@"

    # Literals
    STRING = "STRING"
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"

    IDENTIFIER = "IDENTIFIER"
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A token and the 1-based position where it starts.

    ``value`` is the source text, except for STRING tokens where it is the
    decoded content without quotes.
    """

    type: TokenType
    value: str
    line: int
    column: int


class LexerError(Exception):
    """Raised on an unexpected character or an unterminated literal or comment."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.line = line
        self.column = column


def tokenize(source: str) -> list[Token]:
    """Tokenize the text of a .model file.

    Returns:
        The tokens in source order, ending with a single EOF token.

    Raises:
        LexerError: If the text cannot be tokenized.
    """
    return _Scanner(source).run()


# ################
# Implementation
# ################

_KEYWORDS: dict[str, TokenType] = {
    "model": TokenType.MODEL,
    "description": TokenType.DESCRIPTION,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}

_SYMBOLS: dict[str, TokenType] = {t.value: t for t in TokenType if len(t.value) == 1}

_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "\\": "\\",
    '"': '"',
    "'": "'",
}

# One alternative per token class; the group name selects the handler.
_TOKEN_RE = re.compile(
    r"""
      (?P<skip>[ \t\r\n;]+ | //[^\n]* | /\*.*?\*/)
    | (?P<number>-?\d+(?:\.\d+)?)
    | (?P<name>[^\W\d]\w*)
    | (?P<string>"(?:[^"\\\n]|\\.)*" | '(?:[^'\\\n]|\\.)*')
    | (?P<symbol>[{}()<>\[\],:=@])
    """,
    re.VERBOSE | re.DOTALL,
)


class _Scanner:
    def __init__(self, source: str) -> None:
        self._source = source
        self._line = 1
        self._line_start = 0

    def run(self) -> list[Token]:
        tokens: list[Token] = []
        pos = 0
        while pos < len(self._source):
            match = _TOKEN_RE.match(self._source, pos)
            if match is None:
                raise self._error_at(pos)
            line, column = self._line, pos - self._line_start + 1
            text = match.group()
            kind = match.lastgroup
            if kind == "number":
                token_type = TokenType.FLOAT if "." in text else TokenType.INTEGER
                tokens.append(Token(token_type, text, line, column))
            elif kind == "name":
                tokens.append(Token(_KEYWORDS.get(text, TokenType.IDENTIFIER), text, line, column))
            elif kind == "string":
                tokens.append(Token(TokenType.STRING, _decode(text[1:-1], line, column), line, column))
            elif kind == "symbol":
                tokens.append(Token(_SYMBOLS[text], text, line, column))
            self._track_newlines(text, pos)
            pos = match.end()
        tokens.append(Token(TokenType.EOF, "", self._line, pos - self._line_start + 1))
        return tokens

    def _track_newlines(self, text: str, start: int) -> None:
        count = text.count("\n")
        if count:
            self._line += count
            self._line_start = start + text.rindex("\n") + 1

    def _error_at(self, pos: int) -> LexerError:
        line, column = self._line, pos - self._line_start + 1
        rest = self._source[pos:]
        if rest[0] in "\"'":
            return LexerError("Unterminated string literal", line, column)
        if rest.startswith("/*"):
            return LexerError("Unterminated block comment", line, column)
        return LexerError(f"Unexpected character: {rest[0]!r}", line, column)


def _decode(body: str, line: int, column: int) -> str:
    """Resolve escape sequences in the body of a string starting at *column*."""
    chars: list[str] = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\":
            esc = body[i + 1]
            if esc not in _ESCAPES:
                # +2: the opening quote and the backslash.
                raise LexerError(f"Invalid escape sequence: '\\{esc}'", line, column + i + 2)
            chars.append(_ESCAPES[esc])
            i += 2
        else:
            chars.append(ch)
            i += 1
    return "".join(chars)

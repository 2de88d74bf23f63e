# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for .model files.

Converts a token stream produced by the lexer into a ModelFile. The grammar
is a small class-like notation::

    model User {
        description = "A registered user"

        @IsString()
        @IsNotEmpty()
        name: string

        @IsEmail({ each: true })
        contacts: string[]
    }
"""

from modelschema.model.entities import Annotation, AnnotationArgument, Field, Model, ModelFile
from modelschema.model.types import (
    ArrayTypeRef,
    NamedTypeRef,
    PrimitiveType,
    PrimitiveTypeRef,
    TypeRef,
    is_binary_type_name,
)
from modelschema.parser.lexer import Token, TokenType, tokenize

# ###############
# Public Interface
# ###############


class ParseError(Exception):
    """Raised when the parser encounters a syntactically invalid construct.

    Attributes:
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.line = line
        self.column = column


def parse(source: str) -> ModelFile:
    """Parse model source text into a ModelFile.

    Args:
        source: The full text of a .model file.

    Returns:
        A ModelFile holding the declared models in source order.

    Raises:
        LexerError: If the source contains invalid characters or unterminated literals.
        ParseError: If the source is syntactically invalid.
    """
    tokens = tokenize(source)
    return _Parser(tokens).parse()


def parse_type(text: str) -> TypeRef:
    """Parse a standalone type expression such as ``string[]`` or ``Array<Role>``.

    Raises:
        LexerError: If the text contains invalid characters.
        ParseError: If the text is not a single type expression.
    """
    parser = _Parser(tokenize(text))
    type_ref = parser.parse_type_ref()
    parser.expect_end()
    return type_ref


# ################
# Implementation
# ################

_KEYWORD_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.MODEL,
        TokenType.DESCRIPTION,
        TokenType.TRUE,
        TokenType.FALSE,
    }
)

_PRIMITIVE_TYPES: dict[str, PrimitiveType] = {
    "string": PrimitiveType.STRING,
    "String": PrimitiveType.STRING,
    "str": PrimitiveType.STRING,
    "number": PrimitiveType.NUMBER,
    "Number": PrimitiveType.NUMBER,
    "int": PrimitiveType.NUMBER,
    "float": PrimitiveType.NUMBER,
    "boolean": PrimitiveType.BOOLEAN,
    "Boolean": PrimitiveType.BOOLEAN,
    "bool": PrimitiveType.BOOLEAN,
    "Date": PrimitiveType.DATE,
    "date": PrimitiveType.DATE,
    "datetime": PrimitiveType.DATE,
    "binary": PrimitiveType.BINARY,
    "object": PrimitiveType.OBJECT,
    "Object": PrimitiveType.OBJECT,
    "any": PrimitiveType.OBJECT,
    "unknown": PrimitiveType.OBJECT,
    "dict": PrimitiveType.OBJECT,
}

_ARRAY_TYPE_NAMES: frozenset[str] = frozenset({"Array", "list", "List"})

# Option keys inside an annotation's trailing ``{ ... }`` block.
_EACH_OPTION = "each"


class _Parser:
    """Recursive-descent parser for model token streams."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def parse(self) -> ModelFile:
        """Parse the full token stream and return a ModelFile."""
        result = ModelFile()
        while not self._at_end():
            tok = self._current()
            if tok.type != TokenType.MODEL:
                raise ParseError(
                    f"Unexpected token {tok.value!r} at top level",
                    tok.line,
                    tok.column,
                )
            result.models.append(self._parse_model())
        return result

    def expect_end(self) -> None:
        """Raise ParseError unless all tokens have been consumed."""
        tok = self._current()
        if tok.type != TokenType.EOF:
            raise ParseError(f"Unexpected trailing token {tok.value!r}", tok.line, tok.column)

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _current(self) -> Token:
        """Return the current (un-consumed) token."""
        return self._tokens[self._pos]

    def _peek_type(self, offset: int = 0) -> TokenType:
        """Return the token type *offset* tokens ahead, clamped to EOF."""
        index = min(self._pos + offset, len(self._tokens) - 1)
        return self._tokens[index].type

    def _at_end(self) -> bool:
        """Return True if the current token is the EOF token."""
        return self._peek_type() == TokenType.EOF

    def _advance(self) -> Token:
        """Consume and return the current token, stopping at EOF."""
        tok = self._tokens[self._pos]
        if self._pos < len(self._tokens) - 1:
            self._pos += 1
        return tok

    def _expect(self, *types: TokenType) -> Token:
        """Consume the current token if it matches any of the given types.

        Raises ParseError if the current token does not match.
        """
        tok = self._current()
        if tok.type not in types:
            expected = ", ".join(repr(t.value) for t in types)
            raise ParseError(
                f"Expected {expected}, got {tok.value!r}",
                tok.line,
                tok.column,
            )
        return self._advance()

    def _check(self, *types: TokenType) -> bool:
        """Return True if the current token matches any of the given types (without
        consuming).
        """
        return self._peek_type() in types

    def _expect_name_token(self) -> Token:
        """Consume the current token as a name.

        Accepts identifiers and keywords used in name positions (e.g. a field
        named 'description'). Raises ParseError for structural tokens and EOF.
        """
        tok = self._current()
        if tok.type != TokenType.IDENTIFIER and tok.type not in _KEYWORD_TYPES:
            raise ParseError(
                f"Expected identifier, got {tok.value!r}",
                tok.line,
                tok.column,
            )
        return self._advance()

    # ------------------------------------------------------------------
    # Model declarations
    # ------------------------------------------------------------------

    def _parse_model(self) -> Model:
        """Parse: model <Name> { [description = ".."] (annotation* field)* }"""
        self._expect(TokenType.MODEL)
        name_tok = self._expect(TokenType.IDENTIFIER)
        self._expect(TokenType.LBRACE)
        model = Model(name=name_tok.value)
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            if self._check(TokenType.DESCRIPTION) and self._peek_type(1) == TokenType.EQUALS:
                model.description = self._parse_string_attr(TokenType.DESCRIPTION)
            else:
                model.fields.append(self._parse_field())
        self._expect(TokenType.RBRACE)
        return model

    # ------------------------------------------------------------------
    # Field declarations
    # ------------------------------------------------------------------

    def _parse_field(self) -> Field:
        """Parse: annotation* <name>: <type>"""
        annotations: list[Annotation] = []
        while self._check(TokenType.AT):
            annotations.append(self._parse_annotation())
        name_tok = self._expect_name_token()
        self._expect(TokenType.COLON)
        field_type = self.parse_type_ref()
        return Field(name=name_tok.value, type=field_type, annotations=annotations)

    # ------------------------------------------------------------------
    # Annotations
    # ------------------------------------------------------------------

    def _parse_annotation(self) -> Annotation:
        """Parse: @<Name> [ ( [arg (, arg)*] ) ]

        An argument is a literal or a trailing ``{ key: literal, ... }``
        options block; only the ``each`` option is significant.
        """
        self._expect(TokenType.AT)
        name_tok = self._expect(TokenType.IDENTIFIER)
        annotation = Annotation(kind=name_tok.value)
        if not self._check(TokenType.LPAREN):
            return annotation
        self._advance()  # consume (
        if not self._check(TokenType.RPAREN):
            self._parse_annotation_arg(annotation)
            while self._check(TokenType.COMMA):
                self._advance()  # consume ,
                self._parse_annotation_arg(annotation)
        self._expect(TokenType.RPAREN)
        return annotation

    def _parse_annotation_arg(self, annotation: Annotation) -> None:
        if self._check(TokenType.LBRACE):
            options = self._parse_options()
            annotation.each = options.get(_EACH_OPTION) is True
        else:
            annotation.arguments.append(self._parse_literal())

    def _parse_options(self) -> dict[str, AnnotationArgument]:
        """Parse: { [key: literal (, key: literal)* [,]] }"""
        self._expect(TokenType.LBRACE)
        options: dict[str, AnnotationArgument] = {}
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            key_tok = self._expect_name_token()
            self._expect(TokenType.COLON)
            options[key_tok.value] = self._parse_literal()
            if not self._check(TokenType.COMMA):
                break
            self._advance()  # consume ,
        self._expect(TokenType.RBRACE)
        return options

    def _parse_literal(self) -> AnnotationArgument:
        tok = self._expect(
            TokenType.INTEGER,
            TokenType.FLOAT,
            TokenType.STRING,
            TokenType.TRUE,
            TokenType.FALSE,
        )
        if tok.type == TokenType.INTEGER:
            return int(tok.value)
        if tok.type == TokenType.FLOAT:
            return float(tok.value)
        if tok.type == TokenType.STRING:
            return tok.value
        return tok.type == TokenType.TRUE

    # ------------------------------------------------------------------
    # Type references
    # ------------------------------------------------------------------

    def parse_type_ref(self) -> TypeRef:
        """Parse a type reference followed by any number of ``[]`` suffixes."""
        type_ref = self._parse_base_type()
        while self._check(TokenType.LBRACKET):
            self._advance()  # consume [
            self._expect(TokenType.RBRACKET)
            type_ref = ArrayTypeRef(element_type=type_ref)
        return type_ref

    def _parse_base_type(self) -> TypeRef:
        """Parse a primitive, array, generic, or named type."""
        name_tok = self._expect_name_token()
        name = name_tok.value
        args: list[TypeRef] = []
        if self._check(TokenType.LANGLE):
            self._advance()  # consume <
            args.append(self.parse_type_ref())
            while self._check(TokenType.COMMA):
                self._advance()  # consume ,
                args.append(self.parse_type_ref())
            self._expect(TokenType.RANGLE)

        if name in _ARRAY_TYPE_NAMES:
            if len(args) > 1:
                raise ParseError(
                    f"Array type takes one type argument, got {len(args)}",
                    name_tok.line,
                    name_tok.column,
                )
            return ArrayTypeRef(element_type=args[0] if args else None)
        if args:
            # Generic applications (e.g. Partial<User>) are opaque references.
            return NamedTypeRef(name=f"{name}<{', '.join(_describe(a) for a in args)}>")
        if name in _PRIMITIVE_TYPES:
            return PrimitiveTypeRef(primitive=_PRIMITIVE_TYPES[name])
        if is_binary_type_name(name):
            return PrimitiveTypeRef(primitive=PrimitiveType.BINARY)
        return NamedTypeRef(name=name)

    # ------------------------------------------------------------------
    # Common attribute parsers
    # ------------------------------------------------------------------

    def _parse_string_attr(self, keyword: TokenType) -> str:
        """Parse: <keyword> = <string>"""
        self._expect(keyword)
        self._expect(TokenType.EQUALS)
        str_tok = self._expect(TokenType.STRING)
        return str_tok.value


def _describe(type_ref: TypeRef) -> str:
    """Render a type reference back to source notation."""
    if isinstance(type_ref, PrimitiveTypeRef):
        return type_ref.primitive.value
    if isinstance(type_ref, ArrayTypeRef):
        if type_ref.element_type is None:
            return "Array"
        return f"{_describe(type_ref.element_type)}[]"
    return type_ref.name

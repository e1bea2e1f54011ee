"""
Lexer for jsonpress - tokenizes input strings for parsing.
"""

import logging
import math
from collections.abc import Iterator
from enum import Enum
from typing import Any, NamedTuple, NoReturn, Optional

import regex

from ..security.exceptions import (
    ErrorKind,
    ErrorReporter,
    ErrorSuggestionEngine,
    ParseError,
)
from .constants import KEYWORD_VALUES, get_keyword_token_map, get_structural_token_map
from .position import Position

logger = logging.getLogger(__name__)

# Runs are scanned with the regex module so keyword runs can use Unicode
# property classes; none of these patterns can span a newline.
_NUMBER_RUN = regex.compile(r"[0-9.]+")
_NUMBER_SHAPE = regex.compile(r"[0-9]+(?:\.[0-9]+)?")
_KEYWORD_RUN = regex.compile(r"[\p{Alpha}\p{N}]+")
_STRING_RUN = regex.compile(r'[^"\\\n]+')


class TokenType(Enum):
    """Token types for JSON parsing."""

    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    LBRACKET = "LBRACKET"
    RBRACKET = "RBRACKET"
    COLON = "COLON"
    COMMA = "COMMA"

    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"

    EOF = "EOF"


class Token(NamedTuple):
    """Token with type, value and position information.

    ``value`` is the raw text for strings, a float for numbers, a bool for
    booleans, None for null and the character itself for punctuation.
    """

    type: TokenType
    value: Any
    position: Position


_STRUCTURAL_TOKENS = get_structural_token_map()
_KEYWORD_TOKENS = get_keyword_token_map()


class Lexer:
    """Lexical analyzer for JSON input."""

    def __init__(self, text: str, error_reporter: Optional[ErrorReporter] = None) -> None:
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.error_reporter = error_reporter

    def current_position(self) -> Position:
        """Get current position in the text."""
        return Position(self.line, self.column)

    def peek(self, offset: int = 0) -> str:
        """Peek at character at given offset without consuming it."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return ""
        return self.text[pos]

    def advance(self) -> str:
        """Advance position and return the current character."""
        if self.pos >= len(self.text):
            return ""

        char = self.text[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def skip_whitespace(self) -> None:
        """Skip any run of whitespace characters."""
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.advance()

    def read_string(self) -> str:
        """Read a quoted string verbatim.

        Escape sequences are not interpreted: a backslash and the character
        after it are kept as written, and an escaped quote does not end the
        string.
        """
        start = self.current_position()
        self.advance()
        chars = []

        while self.pos < len(self.text):
            run = self._read_run(_STRING_RUN)
            if run:
                chars.append(run)
                continue

            char = self.advance()
            if char == '"':
                return "".join(chars)
            chars.append(char)
            if char == "\\" and self.pos < len(self.text):
                chars.append(self.advance())

        self._raise_error(
            "Unterminated string",
            start,
            ErrorKind.UNTERMINATED_INPUT,
            ErrorSuggestionEngine.suggest_for_unexpected_token('"'),
        )

    def read_number(self) -> float:
        """Read a run of digits and dots and convert it to a float."""
        start = self.current_position()
        text = self._read_run(_NUMBER_RUN)

        if not _NUMBER_SHAPE.fullmatch(text):
            self._raise_error(
                f"Malformed number: {text}",
                start,
                ErrorKind.MALFORMED_NUMBER,
                ["Numbers must have digits on both sides of the decimal point"],
            )
        value = float(text)
        if math.isinf(value):
            self._raise_error(
                f"Number out of range: {text}",
                start,
                ErrorKind.MALFORMED_NUMBER,
                ["Numbers must fit in a double-precision float"],
            )
        return value

    def read_keyword(self) -> str:
        """Read a run of alphanumeric characters."""
        return self._read_run(_KEYWORD_RUN)

    def _read_run(self, pattern: "regex.Pattern[str]") -> str:
        match = pattern.match(self.text, self.pos)
        if match is None:
            return ""
        self.pos = match.end()
        self.column += len(match.group())
        return match.group()

    def next_token(self) -> Token:
        """Scan and return the next token, or EOF once input is exhausted."""
        self.skip_whitespace()

        pos = self.current_position()
        char = self.peek()

        if not char:
            return Token(TokenType.EOF, "", pos)

        if char in _STRUCTURAL_TOKENS:
            self.advance()
            return Token(_STRUCTURAL_TOKENS[char], char, pos)

        if char == '"':
            return Token(TokenType.STRING, self.read_string(), pos)

        if "0" <= char <= "9":
            return Token(TokenType.NUMBER, self.read_number(), pos)

        if char.isascii() and char.isalpha():
            keyword = self.read_keyword()
            if keyword not in _KEYWORD_TOKENS:
                self._raise_error(
                    f"Unrecognized keyword: {keyword}",
                    pos,
                    ErrorKind.UNRECOGNIZED_KEYWORD,
                    ErrorSuggestionEngine.suggest_for_invalid_value(keyword),
                )
            return Token(_KEYWORD_TOKENS[keyword], KEYWORD_VALUES[keyword], pos)

        self._raise_error(
            f"Unexpected character: {char!r}",
            pos,
            ErrorKind.UNEXPECTED_CHARACTER,
            ErrorSuggestionEngine.suggest_for_unexpected_character(char),
        )

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the input text, ending with exactly one EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def get_all_tokens(self) -> list[Token]:
        """Get all tokens as a list."""
        tokens = list(self.tokenize())
        logger.debug("Tokenized %d characters into %d tokens", len(self.text), len(tokens))
        return tokens

    def _raise_error(
        self,
        message: str,
        position: Position,
        kind: ErrorKind,
        suggestions: Optional[list[str]] = None,
    ) -> NoReturn:
        if self.error_reporter:
            raise self.error_reporter.create_parse_error(
                message, position, suggestions, kind=kind
            )
        raise ParseError(message, position, suggestions=suggestions, kind=kind)


def tokenize(text: str) -> list[Token]:
    """Tokenize ``text`` into a list of tokens terminated by EOF."""
    return Lexer(text, ErrorReporter(text)).get_all_tokens()

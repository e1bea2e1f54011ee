"""
Base parser functionality: leaf node construction and structure tracking.
"""

from typing import Optional

from ..security.exceptions import ErrorReporter
from ..security.limits import LimitValidator
from .nodes import (
    FalseKeyword,
    Node,
    NullKeyword,
    NumberLiteral,
    StringLiteral,
    TrueKeyword,
)
from .position import Position
from .tokenizer import Token, TokenType


class BaseParserMixin:
    """Common parsing functionality for recursive-descent parsers."""

    @staticmethod
    def create_error_reporter(original_text: str, max_context: int = 50) -> ErrorReporter:
        """Create an error reporter for this parser."""
        return ErrorReporter(original_text, max_context)

    def string_node(self, token: Token) -> StringLiteral:
        """Build a string literal from a STRING token."""
        return StringLiteral(token.value)

    def number_node(self, token: Token) -> NumberLiteral:
        """Build a number literal from a NUMBER token."""
        return NumberLiteral(float(token.value))

    def keyword_node(self, token: Token) -> Node:
        """Build a keyword literal from a BOOLEAN or NULL token."""
        if token.type == TokenType.NULL:
            return NullKeyword()
        if token.value:
            return TrueKeyword()
        return FalseKeyword()

    def validate_and_enter_structure(
        self, validator: Optional[LimitValidator], position: Optional[Position] = None
    ) -> None:
        """Validate and enter a structure if validator exists."""
        if validator:
            validator.enter_structure(position)

    def validate_and_exit_structure(self, validator: Optional[LimitValidator]) -> None:
        """Validate and exit a structure if validator exists."""
        if validator:
            validator.exit_structure()

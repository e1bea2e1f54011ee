"""
Common constants and lookup tables used across the jsonpress library.
"""

from types import MappingProxyType
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .tokenizer import TokenType

DEFAULT_SPACES = 4

# Keyword spellings and the literal value each one denotes
KEYWORD_VALUES: "MappingProxyType[str, Optional[bool]]" = MappingProxyType(
    {
        "true": True,
        "false": False,
        "null": None,
    }
)


def get_structural_token_map() -> "MappingProxyType[str, TokenType]":
    """Get the read-only mapping of structural characters to TokenType enums."""
    # Import here to avoid circular imports
    from .tokenizer import TokenType  # pylint: disable=import-outside-toplevel

    return MappingProxyType(
        {
            "{": TokenType.LBRACE,
            "}": TokenType.RBRACE,
            "[": TokenType.LBRACKET,
            "]": TokenType.RBRACKET,
            ":": TokenType.COLON,
            ",": TokenType.COMMA,
        }
    )


def get_keyword_token_map() -> "MappingProxyType[str, TokenType]":
    """Get the read-only mapping of keyword spellings to TokenType enums."""
    from .tokenizer import TokenType  # pylint: disable=import-outside-toplevel

    return MappingProxyType(
        {
            "true": TokenType.BOOLEAN,
            "false": TokenType.BOOLEAN,
            "null": TokenType.NULL,
        }
    )

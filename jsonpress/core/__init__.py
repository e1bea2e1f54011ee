"""
jsonpress Core Formatting Engine.

This module provides the tokenizer, parser and formatter.
"""

from .engine import parse, Parser
from .formatter import Formatter, format_json
from .nodes import (
    ArrayLiteralExpression, FalseKeyword, Node, NullKeyword, NumberLiteral,
    ObjectLiteralExpression, PropertyAssignment, StringLiteral, SyntaxKind, TrueKeyword,
)
from .position import Position
from .tokenizer import Lexer, Token, TokenType, tokenize

__all__ = [
    'parse', 'Parser',
    'Formatter', 'format_json',
    'Lexer', 'Token', 'TokenType', 'Position', 'tokenize',
    'Node', 'SyntaxKind', 'StringLiteral', 'NumberLiteral', 'TrueKeyword',
    'FalseKeyword', 'NullKeyword', 'PropertyAssignment',
    'ObjectLiteralExpression', 'ArrayLiteralExpression',
]

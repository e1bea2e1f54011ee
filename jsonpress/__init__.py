"""
jsonpress - JSON pretty-printer that presses documents into canonical shape.

jsonpress reads a JSON document, builds a syntax tree that keeps every member
in source order, and writes it back out with uniform indentation.

Key Features:
- Canonical output: indentation depends only on nesting depth
- Tabs or any number of spaces per level
- Optional trailing commas after the last member of objects and arrays
- Source order of object members and array elements is preserved exactly
- Fail-fast errors with line, column and source context
- Limits on input size and nesting depth

Quick Start:
    import jsonpress
    print(jsonpress.format_json('{"hello": "world"}'))

    # Two-space indent with trailing commas
    jsonpress.format_json(text, spaces=2, trailing_commas=True)

    # Work with the syntax tree directly
    tree = jsonpress.parse('[1, 2, 3]')
    jsonpress.format_json(tree, jsonpress.FormatOptions(use_tabs=True))
"""

from .core.engine import parse, Parser
from .core.formatter import Formatter, format_json
from .core.nodes import (
    ArrayLiteralExpression, FalseKeyword, Node, NullKeyword, NumberLiteral,
    ObjectLiteralExpression, PropertyAssignment, StringLiteral, SyntaxKind, TrueKeyword,
)
from .core.tokenizer import Lexer, Token, TokenType, tokenize
from .security.exceptions import ErrorKind, ParseError, SecurityError, jsonpressError
from .utils.config import FormatOptions, ParseConfig, ParseLimits

__version__ = "0.1.0"
__author__ = "jsonpress contributors"

__all__ = [
    # Pipeline entry points
    "tokenize", "parse", "format_json",
    # Pipeline classes
    "Lexer", "Parser", "Formatter", "Token", "TokenType",
    # Syntax tree
    "Node", "SyntaxKind", "StringLiteral", "NumberLiteral", "TrueKeyword",
    "FalseKeyword", "NullKeyword", "PropertyAssignment",
    "ObjectLiteralExpression", "ArrayLiteralExpression",
    # Configuration classes
    "FormatOptions", "ParseConfig", "ParseLimits",
    # Exception classes
    "jsonpressError", "ParseError", "SecurityError", "ErrorKind",
]

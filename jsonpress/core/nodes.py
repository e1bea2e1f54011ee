"""
Syntax tree nodes produced by the parser and consumed by the formatter.

Nodes are frozen dataclasses; composite nodes hold their children in tuples,
so a tree cannot change once built and two trees compare equal when their
structure and literal values match.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class SyntaxKind(Enum):
    """Kinds of syntax node."""

    STRING_LITERAL = "StringLiteral"
    NUMBER_LITERAL = "NumberLiteral"
    TRUE_KEYWORD = "TrueKeyword"
    FALSE_KEYWORD = "FalseKeyword"
    NULL_KEYWORD = "NullKeyword"
    PROPERTY_ASSIGNMENT = "PropertyAssignment"
    OBJECT_LITERAL_EXPRESSION = "ObjectLiteralExpression"
    ARRAY_LITERAL_EXPRESSION = "ArrayLiteralExpression"


def number_text(value: float) -> str:
    """Render a float as its shortest positional decimal text.

    Integral values drop the fractional part and exponents are expanded,
    so 1.0 becomes "1" and 1e21 becomes "1000000000000000000000".
    """
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class Node:
    """Base class for all syntax nodes."""

    @property
    def kind(self) -> SyntaxKind:
        raise NotImplementedError

    def text(self) -> Optional[str]:
        """Literal text of a leaf node, None for anything else."""
        return None


@dataclass(frozen=True)
class StringLiteral(Node):
    value: str

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.STRING_LITERAL

    def text(self) -> Optional[str]:
        return self.value


@dataclass(frozen=True)
class NumberLiteral(Node):
    value: float

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.NUMBER_LITERAL

    def text(self) -> Optional[str]:
        return number_text(self.value)


@dataclass(frozen=True)
class TrueKeyword(Node):
    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.TRUE_KEYWORD

    def text(self) -> Optional[str]:
        return "true"


@dataclass(frozen=True)
class FalseKeyword(Node):
    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.FALSE_KEYWORD

    def text(self) -> Optional[str]:
        return "false"


@dataclass(frozen=True)
class NullKeyword(Node):
    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.NULL_KEYWORD

    def text(self) -> Optional[str]:
        return "null"


@dataclass(frozen=True)
class PropertyAssignment(Node):
    """A single ``"key": value`` member of an object."""

    key: str
    value: Node

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.PROPERTY_ASSIGNMENT


@dataclass(frozen=True)
class ObjectLiteralExpression(Node):
    """An object; members keep their source order."""

    members: tuple[PropertyAssignment, ...] = ()

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.OBJECT_LITERAL_EXPRESSION


@dataclass(frozen=True)
class ArrayLiteralExpression(Node):
    """An array; elements keep their source order."""

    elements: tuple[Node, ...] = ()

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.ARRAY_LITERAL_EXPRESSION


RootNode = Union[ObjectLiteralExpression, ArrayLiteralExpression]

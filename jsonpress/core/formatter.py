"""
Formatter for jsonpress - renders a syntax tree as indented text.

Indentation depends only on nesting depth and the configured unit; the layout
of the source text is never consulted.
"""

import logging
from typing import Any, Optional, Union

from ..utils.config import FormatOptions, ParseConfig
from .engine import parse
from .nodes import (
    ArrayLiteralExpression,
    Node,
    ObjectLiteralExpression,
    PropertyAssignment,
    SyntaxKind,
)

logger = logging.getLogger(__name__)

_WorkItem = Union[str, tuple[Node, int]]


class Formatter:
    """Pretty-printer for jsonpress syntax trees."""

    def __init__(
        self,
        options: Optional[FormatOptions] = None,
        parse_config: Optional[ParseConfig] = None,
    ):
        self.options = options or FormatOptions()
        self.parse_config = parse_config

    def indent_string(self, depth: int) -> str:
        """Indentation for the given nesting depth."""
        return self.options.indent_unit * depth

    def format(self, text: str) -> str:
        """Parse ``text`` and return its canonical formatting."""
        return self.format_node(parse(text, self.parse_config))

    def format_node(self, node: Node, depth: int = 0) -> str:
        """Render ``node`` as if it sat at nesting ``depth``."""
        parts: list[str] = []
        # Pending work is either literal text or a (node, depth) pair still
        # to be rendered; popping from the end walks the tree in source order.
        work: list[_WorkItem] = [(node, depth)]

        while work:
            item = work.pop()
            if isinstance(item, str):
                parts.append(item)
                continue

            current, level = item
            kind = current.kind
            if kind == SyntaxKind.OBJECT_LITERAL_EXPRESSION:
                assert isinstance(current, ObjectLiteralExpression)
                self._push_composite(work, "{", "}", current.members, level)
            elif kind == SyntaxKind.ARRAY_LITERAL_EXPRESSION:
                assert isinstance(current, ArrayLiteralExpression)
                self._push_composite(work, "[", "]", current.elements, level)
            elif kind == SyntaxKind.PROPERTY_ASSIGNMENT:
                assert isinstance(current, PropertyAssignment)
                parts.append(f'"{current.key}": ')
                work.append((current.value, level))
            else:
                parts.append(self.format_primitive(current))

        output = "".join(parts)
        if depth == 0:
            logger.debug("Formatted %s into %d characters", node.kind.value, len(output))
        return output

    def format_primitive(self, node: Node) -> str:
        """Render a leaf literal."""
        if node.kind == SyntaxKind.STRING_LITERAL:
            return f'"{node.text()}"'

        text = node.text()
        if text is None:
            raise TypeError(f"Cannot format {node.kind.value} as a literal")
        return text

    def _push_composite(
        self,
        work: list[_WorkItem],
        opener: str,
        closer: str,
        children: tuple[Node, ...],
        depth: int,
    ) -> None:
        child_indent = self.indent_string(depth + 1)
        items: list[_WorkItem] = [opener]

        for index, child in enumerate(children):
            items.append((",\n" if index else "\n") + child_indent)
            items.append((child, depth + 1))

        if children and self.options.trailing_commas:
            items.append(",")

        items.append("\n" + self.indent_string(depth) + closer)
        work.extend(reversed(items))


def format_json(
    source: Union[str, Node],
    options: Optional[FormatOptions] = None,
    *,
    config: Optional[ParseConfig] = None,
    **overrides: Any,
) -> str:
    """
    Format a JSON document canonically.

    Args:
        source: JSON text, or a syntax tree returned by ``parse``.
        options: FormatOptions to use (defaults: 4 spaces, no trailing commas).
        config: ParseConfig used when ``source`` is text.
        **overrides: ``spaces``, ``use_tabs`` or ``trailing_commas`` applied on
            top of ``options``.

    Returns:
        The formatted text, without a trailing newline.

    Raises:
        ParseError: If ``source`` is text that cannot be parsed.
        SecurityError: If a configured limit is exceeded.
        ValueError: If an option value is invalid.
    """
    options = options or FormatOptions()
    if overrides:
        options = options.replace(**overrides)

    formatter = Formatter(options, config)
    if isinstance(source, Node):
        return formatter.format_node(source)
    return formatter.format(source)

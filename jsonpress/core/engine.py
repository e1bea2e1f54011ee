"""
Parser for jsonpress - converts tokens into a syntax tree.

The grammar is parsed predictively with one token of lookahead. Nested
containers are tracked on an explicit stack instead of the call stack.
Separating commas are skipped wherever they appear inside an object or array,
so missing or repeated commas are normalized by the formatter rather than
rejected.
"""

import logging
from typing import NoReturn, Optional, cast

from ..security.exceptions import (
    ErrorKind,
    ErrorReporter,
    ErrorSuggestionEngine,
    ParseError,
)
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .nodes import (
    ArrayLiteralExpression,
    Node,
    ObjectLiteralExpression,
    PropertyAssignment,
    RootNode,
)
from .parser_base import BaseParserMixin
from .position import Position
from .tokenizer import Lexer, Token, TokenType

logger = logging.getLogger(__name__)

_OPENERS = (TokenType.LBRACE, TokenType.LBRACKET)


class _OpenContainer:
    """An object or array whose closing delimiter has not been read yet."""

    def __init__(self, structure_type: str, closer: TokenType):
        self.structure_type = structure_type
        self.closer = closer
        self.children: list[Node] = []
        self.pending_key: Optional[str] = None

    def add(self, node: Node) -> None:
        if self.structure_type == "object":
            assert self.pending_key is not None
            node = PropertyAssignment(self.pending_key, node)
            self.pending_key = None
        self.children.append(node)

    def build(self) -> Node:
        if self.structure_type == "object":
            return ObjectLiteralExpression(tuple(self.children))  # type: ignore[arg-type]
        return ArrayLiteralExpression(tuple(self.children))


class Parser(BaseParserMixin):
    """JSON parser that converts tokens into a syntax tree."""

    def __init__(
        self,
        tokens: list[Token],
        config: Optional[ParseConfig] = None,
        error_reporter: Optional[ErrorReporter] = None,
    ):
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("token sequence must end with an EOF token")

        self.tokens = tokens
        self.pos = 0
        self.config = config or ParseConfig()
        self.error_reporter = error_reporter
        self.validator = LimitValidator(self.config.limits, error_reporter)

    @classmethod
    def from_text(cls, text: str, config: Optional[ParseConfig] = None) -> "Parser":
        """Tokenize ``text`` and return a parser over its tokens."""
        config = config or ParseConfig()
        error_reporter = (
            cls.create_error_reporter(text, config.max_error_context)
            if config.include_context
            else None
        )

        validator = LimitValidator(config.limits)
        validator.validate_input_size(text)

        tokens = Lexer(text, error_reporter).get_all_tokens()
        return cls(tokens, config, error_reporter)

    def current_token(self) -> Token:
        """Get the current token without consuming it."""
        return self.tokens[self.pos]

    def advance(self) -> Token:
        """Consume the current token and return it; EOF is never passed."""
        token = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return token

    def consume_string(self) -> Node:
        """Parse a string literal."""
        return self.string_node(self._expect(TokenType.STRING, "Expected string"))

    def consume_number(self) -> Node:
        """Parse a number literal."""
        return self.number_node(self._expect(TokenType.NUMBER, "Expected number"))

    def consume_keyword(self) -> Node:
        """Parse true, false or null."""
        token = self.current_token()
        if token.type not in (TokenType.BOOLEAN, TokenType.NULL):
            self._raise_unexpected(token)
        return self.keyword_node(self.advance())

    def consume_property_assignment(self) -> PropertyAssignment:
        """Parse a ``"key": value`` member of an object."""
        key = self._consume_key()
        return PropertyAssignment(key, self.consume_value())

    def consume_object(self) -> ObjectLiteralExpression:
        """Parse an object; the current token must be '{'."""
        self._check(TokenType.LBRACE, "Expected '{'")
        return cast(ObjectLiteralExpression, self._consume_nested())

    def consume_array(self) -> ArrayLiteralExpression:
        """Parse an array; the current token must be '['."""
        self._check(TokenType.LBRACKET, "Expected '['")
        return cast(ArrayLiteralExpression, self._consume_nested())

    def consume_value(self) -> Node:
        """Parse any value by dispatching on the current token."""
        if self.current_token().type in _OPENERS:
            return self._consume_nested()
        return self._consume_scalar()

    def parse(self) -> RootNode:
        """Parse the whole token sequence into a root object or array."""
        self.pos = 0
        self.validator.reset()
        token = self.current_token()

        if token.type not in _OPENERS:
            self._raise_error(
                "Document root must be an object or an array",
                token.position,
                ErrorKind.UNEXPECTED_TOKEN,
                ErrorSuggestionEngine.suggest_for_unexpected_token(str(token.value)),
            )
        root = cast(RootNode, self._consume_nested())

        trailing = self.current_token()
        if trailing.type != TokenType.EOF:
            self._raise_error(
                "Extra data after root value",
                trailing.position,
                ErrorKind.UNEXPECTED_TOKEN,
                ["Wrap multiple values in a single array"],
            )

        logger.debug("Parsed %s with %d tokens", root.kind.value, len(self.tokens))
        return root

    def _consume_nested(self) -> Node:
        # Open containers live on this stack; depth is bounded only by memory.
        stack = [self._open_container()]

        while True:
            container = stack[-1]
            token = self.current_token()

            if token.type == container.closer:
                self.advance()
                self.validate_and_exit_structure(self.validator)
                stack.pop()
                node = container.build()
                if not stack:
                    return node
                stack[-1].add(node)
                continue
            if token.type == TokenType.COMMA:
                self.advance()
                continue
            if token.type == TokenType.EOF:
                self._raise_unclosed(container.structure_type, token.position)

            if container.structure_type == "object":
                if token.type != TokenType.STRING:
                    self._raise_unexpected(token)
                container.pending_key = self._consume_key()

            if self.current_token().type in _OPENERS:
                stack.append(self._open_container())
            else:
                container.add(self._consume_scalar())

    def _open_container(self) -> "_OpenContainer":
        token = self.advance()
        self.validate_and_enter_structure(self.validator, token.position)
        if token.type == TokenType.LBRACE:
            return _OpenContainer("object", TokenType.RBRACE)
        return _OpenContainer("array", TokenType.RBRACKET)

    def _consume_key(self) -> str:
        key = self._expect(TokenType.STRING, "Expected object key").value
        self._expect(TokenType.COLON, "Expected ':' after key")
        return key

    def _consume_scalar(self) -> Node:
        token = self.current_token()

        if token.type == TokenType.STRING:
            return self.consume_string()
        if token.type == TokenType.NUMBER:
            return self.consume_number()
        if token.type in (TokenType.BOOLEAN, TokenType.NULL):
            return self.consume_keyword()
        if token.type == TokenType.EOF:
            self._raise_error(
                "Unexpected end of input, expected a value",
                token.position,
                ErrorKind.UNTERMINATED_INPUT,
            )
        self._raise_unexpected(token)

    def _check(self, token_type: TokenType, message: str) -> Token:
        token = self.current_token()
        if token.type == token_type:
            return token
        if token.type == TokenType.EOF:
            self._raise_error(
                f"Unexpected end of input, {message[0].lower()}{message[1:]}",
                token.position,
                ErrorKind.UNTERMINATED_INPUT,
            )
        self._raise_error(
            message,
            token.position,
            ErrorKind.UNEXPECTED_TOKEN,
            ErrorSuggestionEngine.suggest_for_unexpected_token(str(token.value)),
        )

    def _expect(self, token_type: TokenType, message: str) -> Token:
        self._check(token_type, message)
        return self.advance()

    def _raise_unexpected(self, token: Token) -> NoReturn:
        self._raise_error(
            f"Unexpected token: {token.type.value}",
            token.position,
            ErrorKind.UNEXPECTED_TOKEN,
            ErrorSuggestionEngine.suggest_for_unexpected_token(str(token.value)),
        )

    def _raise_unclosed(self, structure_type: str, position: Position) -> NoReturn:
        closer = "}" if structure_type == "object" else "]"
        self._raise_error(
            f"Unexpected end of input, expected '{closer}' to close {structure_type}",
            position,
            ErrorKind.UNTERMINATED_INPUT,
            ErrorSuggestionEngine.suggest_for_unclosed_structure(structure_type),
        )

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


def parse(text: str, config: Optional[ParseConfig] = None) -> RootNode:
    """
    Parse JSON text into a syntax tree.

    Args:
        text: The JSON document. Its root must be an object or an array.
        config: Optional ParseConfig controlling limits and error context.

    Returns:
        The root ObjectLiteralExpression or ArrayLiteralExpression.

    Raises:
        ParseError: If the text cannot be tokenized or parsed.
        SecurityError: If a configured limit is exceeded.
    """
    return Parser.from_text(text, config).parse()

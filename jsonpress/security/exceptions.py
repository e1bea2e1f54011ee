"""
Exception hierarchy and error reporting for jsonpress.

Every tokenizer and parser failure is a ParseError tagged with an ErrorKind;
configured limits raise SecurityError. Both derive from jsonpressError.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..core.position import Position


class ErrorKind(Enum):
    """Kinds of failure the tokenizer and parser can report."""

    UNEXPECTED_CHARACTER = "unexpected_character"
    UNRECOGNIZED_KEYWORD = "unrecognized_keyword"
    MALFORMED_NUMBER = "malformed_number"
    UNEXPECTED_TOKEN = "unexpected_token"
    UNTERMINATED_INPUT = "unterminated_input"


@dataclass
class ErrorContext:
    """Source excerpt around the location of an error."""

    text: str
    position: Position
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


class jsonpressError(Exception):  # pylint: disable=invalid-name
    """Base exception for all jsonpress failures."""

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]

        if self.position:
            parts[0] += f" at line {self.position.line}, column {self.position.column}"

        if self.context:
            parts.append("")
            parts.append("Context:")
            parts.append(f"  {self.context.line_text}")
            parts.append(f"  {self.context.column_indicator}")

        if self.suggestions:
            parts.append("")
            parts.append("Suggestions:")
            parts.extend(f"  - {suggestion}" for suggestion in self.suggestions)

        return "\n".join(parts)


class ParseError(jsonpressError):
    """Raised when the input is not a document the parser accepts."""

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
        kind: ErrorKind = ErrorKind.UNEXPECTED_TOKEN,
    ):
        self.kind = kind
        super().__init__(message, position, context, suggestions)


class SecurityError(jsonpressError):
    """Raised when input exceeds a configured limit."""


class ErrorReporter:
    """Builds errors with source context attached."""

    def __init__(self, text: str, max_context: int = 50):
        self.text = text
        self.lines = text.split("\n")
        self.max_context = max_context

    def create_context(self, position: Position) -> ErrorContext:
        """Extract the source line and surrounding text for a position."""
        line_index = min(max(position.line - 1, 0), len(self.lines) - 1)
        line_text = self.lines[line_index]
        column_index = min(max(position.column - 1, 0), len(line_text))

        half = self.max_context // 2
        context_before = line_text[max(0, column_index - half) : column_index]
        context_after = line_text[column_index : column_index + half]
        error_char = line_text[column_index] if column_index < len(line_text) else ""

        return ErrorContext(
            text=self.text,
            position=position,
            context_before=context_before,
            context_after=context_after,
            error_char=error_char,
            line_text=line_text,
            column_indicator=" " * column_index + "^",
        )

    def create_parse_error(
        self,
        message: str,
        position: Position,
        suggestions: Optional[list[str]] = None,
        kind: ErrorKind = ErrorKind.UNEXPECTED_TOKEN,
    ) -> ParseError:
        """Create a ParseError carrying context for the given position."""
        return ParseError(
            message,
            position=position,
            context=self.create_context(position),
            suggestions=suggestions,
            kind=kind,
        )

    def create_security_error(
        self, message: str, position: Optional[Position] = None
    ) -> SecurityError:
        """Create a SecurityError, with context when a position is known."""
        context = self.create_context(position) if position else None
        return SecurityError(message, position=position, context=context)


class ErrorSuggestionEngine:
    """Human-readable hints for common mistakes."""

    @staticmethod
    def suggest_for_unexpected_character(char: str) -> list[str]:
        """Suggestions for a character the tokenizer does not accept."""
        suggestions = []
        if char == "'":
            suggestions.append("Use double quotes for strings instead of single quotes")
        elif char == "-":
            suggestions.append("Negative numbers are not supported by this formatter")
        elif char == "/":
            suggestions.append("Comments are not allowed in JSON")
        elif char == ".":
            suggestions.append("Numbers must start with a digit, e.g. 0.5")
        suggestions.append("Remove or quote the unexpected character")
        return suggestions

    @staticmethod
    def suggest_for_unexpected_token(token_value: str) -> list[str]:
        """Suggestions for a token that does not fit the grammar."""
        if token_value == '"':
            return [
                "Check for a missing closing quote",
                "Make sure every string is wrapped in double quotes",
            ]
        if token_value == ":":
            return [
                "Object keys must be strings",
                "Check for a missing key before ':'",
            ]
        if token_value in ("}", "]"):
            return ["Check that every closing delimiter has a matching opener"]
        return [
            "Check for a missing ':' between a key and its value",
            "The document root must be an object or an array",
        ]

    @staticmethod
    def suggest_for_unclosed_structure(structure_type: str) -> list[str]:
        """Suggestions for an object or array that never closes."""
        closer = "}" if structure_type == "object" else "]"
        return [
            f"Add a closing '{closer}' to end the {structure_type}",
            "Check for unbalanced braces and brackets",
        ]

    @staticmethod
    def suggest_for_invalid_value(value: str) -> list[str]:
        """Suggestions for an identifier that is not a JSON keyword."""
        lowered = value.lower()
        if lowered in ("true", "false", "null"):
            return [f"Keywords are lowercase: use '{lowered}' instead of '{value}'"]
        if lowered in ("none", "nil", "undefined"):
            return ["Use 'null' for missing values"]
        if value and value[0].isalpha():
            return [f"Wrap '{value}' in double quotes to make it a string"]
        return []

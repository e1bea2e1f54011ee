"""
Security limits and validation for jsonpress.
Limits are opt-in; a ParseLimits without maximums accepts any input.
"""

from typing import Optional

from ..core.position import Position
from ..utils.config import ParseLimits
from .exceptions import ErrorReporter, SecurityError


class LimitValidator:
    """Validates parsing limits to prevent resource exhaustion attacks."""

    def __init__(self, limits: ParseLimits, error_reporter: Optional[ErrorReporter] = None):
        self.limits = limits
        self.error_reporter = error_reporter
        self.nesting_depth = 0

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        limit = self.limits.max_input_size
        if limit is not None and len(text) > limit:
            raise SecurityError(f"Input size {len(text)} exceeds limit {limit}")

    def enter_structure(self, position: Optional[Position] = None) -> None:
        """Track entering a nested structure and validate depth."""
        self.nesting_depth += 1
        limit = self.limits.max_nesting_depth
        if limit is not None and self.nesting_depth > limit:
            message = f"Nesting depth {self.nesting_depth} exceeds limit {limit}"
            if self.error_reporter:
                raise self.error_reporter.create_security_error(message, position)
            raise SecurityError(message, position=position)

    def exit_structure(self) -> None:
        """Track exiting a nested structure."""
        if self.nesting_depth > 0:
            self.nesting_depth -= 1

    def reset(self) -> None:
        """Reset validator state for reuse."""
        self.nesting_depth = 0

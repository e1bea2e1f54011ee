"""
jsonpress Error and Limit System.

This module provides the exception hierarchy and security limits.
"""

from .exceptions import (
    ErrorKind, ErrorReporter, ErrorSuggestionEngine, ParseError, SecurityError, jsonpressError,
)
from .limits import LimitValidator

__all__ = [
    'ErrorKind', 'ErrorReporter', 'ErrorSuggestionEngine', 'ParseError',
    'SecurityError', 'jsonpressError', 'LimitValidator',
]

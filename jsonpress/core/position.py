"""
Source positions shared by tokens and error reports.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Position in source text (line and column, both 1-based)."""

    line: int
    column: int

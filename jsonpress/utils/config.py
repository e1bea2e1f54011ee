"""
Configuration and limits for jsonpress.

This module defines formatting options, security limits and error reporting
settings. All of them are plain values passed to the parser and formatter;
nothing is read from the environment.
"""

from dataclasses import dataclass
from typing import Any, Optional

from ..core.constants import DEFAULT_SPACES


@dataclass
class FormatOptions:
    """Whitespace and punctuation style of the formatted output.

    ``use_tabs`` takes precedence over ``spaces``.
    """

    spaces: int = DEFAULT_SPACES
    use_tabs: bool = False
    trailing_commas: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.spaces, bool) or not isinstance(self.spaces, int):
            raise ValueError("spaces must be an integer")
        if self.spaces <= 0:
            raise ValueError("spaces must be positive")

    @property
    def indent_unit(self) -> str:
        """Text emitted once per nesting level."""
        if self.use_tabs:
            return "\t"
        return " " * self.spaces

    def replace(self, **overrides: Any) -> "FormatOptions":
        """Return a copy with the given fields replaced; None values are ignored."""
        unknown = set(overrides) - {"spaces", "use_tabs", "trailing_commas"}
        if unknown:
            raise ValueError(f"Unknown format option(s): {', '.join(sorted(unknown))}")

        values = {
            "spaces": self.spaces,
            "use_tabs": self.use_tabs,
            "trailing_commas": self.trailing_commas,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return FormatOptions(**values)


@dataclass
class SizeLimits:
    """Input size limits; None means unlimited."""
    max_input_size: Optional[int] = None


@dataclass
class StructureLimits:
    """JSON structure complexity limits; None means unlimited."""
    max_nesting_depth: Optional[int] = None


@dataclass
class ParseLimits:
    """Opt-in limits for callers that parse untrusted input.

    Nothing is limited by default: input size and nesting depth are bounded
    only by available memory unless a maximum is given here.
    """

    size_limits: Optional[SizeLimits] = None
    structure_limits: Optional[StructureLimits] = None

    def __init__(
        self,
        *,
        size_limits: Optional[SizeLimits] = None,
        structure_limits: Optional[StructureLimits] = None,
        **flat_args: Any,
    ):
        if size_limits is not None:
            self.size_limits = size_limits
        else:
            self.size_limits = SizeLimits(
                max_input_size=flat_args.get("max_input_size"),
            )

        if structure_limits is not None:
            self.structure_limits = structure_limits
        else:
            self.structure_limits = StructureLimits(
                max_nesting_depth=flat_args.get("max_nesting_depth"),
            )

        for name in ("max_input_size", "max_nesting_depth"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive")

    @property
    def max_input_size(self) -> Optional[int]:
        """Maximum input size in characters, or None for no limit."""
        assert self.size_limits is not None
        return self.size_limits.max_input_size

    @property
    def max_nesting_depth(self) -> Optional[int]:
        """Maximum nesting depth for JSON structures, or None for no limit."""
        assert self.structure_limits is not None
        return self.structure_limits.max_nesting_depth


@dataclass
class ErrorReporting:
    """Error reporting and context settings."""
    include_context: bool = True
    max_error_context: int = 50


@dataclass
class ParseConfig:
    """Configuration options for jsonpress parsing."""

    limits: Optional[ParseLimits] = None
    error_reporting: Optional[ErrorReporting] = None

    def __init__(
        self,
        *,
        limits: Optional[ParseLimits] = None,
        error_reporting: Optional[ErrorReporting] = None,
        **config_options: Any,
    ):
        self.limits = limits or ParseLimits()

        if error_reporting is not None:
            self.error_reporting = error_reporting
        else:
            self.error_reporting = ErrorReporting(
                include_context=config_options.get("include_context", True),
                max_error_context=config_options.get("max_error_context", 50),
            )

    @property
    def include_context(self) -> bool:
        """Whether errors carry the offending source line."""
        assert self.error_reporting is not None
        return self.error_reporting.include_context

    @include_context.setter
    def include_context(self, value: bool) -> None:
        assert self.error_reporting is not None
        self.error_reporting.include_context = value

    @property
    def max_error_context(self) -> int:
        """Maximum characters of context to include in errors."""
        assert self.error_reporting is not None
        return self.error_reporting.max_error_context

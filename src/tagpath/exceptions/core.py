"""
Exception classes for tagpath selector expansion.

This module defines specific exception types for the error conditions that
can occur while tokenizing selectors, parsing templates and substituting
positional arguments.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Offending segment only
    DEVELOPER = "developer"  # Full selector with a caret under the offset


@dataclass
class ErrorContext:
    """
    Context information for error messages.

    Captures where an error occurred in the selector text. Supports formatting
    at different detail levels for user-facing vs developer debugging.

    Params:
        selector: The complete selector or template passed by the caller
        segment: The segment being processed when the error was detected
        offset: Character offset into `selector` where the problem starts
    """

    selector: str | None = None
    segment: str | None = None
    offset: int | None = None

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string with appropriate detail level
        """
        lines = []

        if self.segment is not None:
            lines.append(f"  in segment '{self.segment}'")

        if error_level == ErrorLevel.DEVELOPER and self.selector is not None:
            lines.append(f"  selector: {self.selector}")
            if self.offset is not None:
                # "  selector: " is 12 characters wide
                lines.append(" " * (12 + self.offset) + "^")

        return "\n".join(lines)


class TagPathError(Exception):
    """Base exception for all tagpath expansion errors."""

    pass


class MalformedSelectorError(TagPathError):
    """Raised when a selector or template cannot be tokenized."""

    def __init__(
        self,
        selector: str,
        reason: str,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            selector: The selector text that failed to parse
            reason: Why the selector is malformed
            context: Optional location of the failure
            error_level: Detail level used when formatting `context`
        """
        self.selector = selector
        self.reason = reason
        self.context = context

        message = f"Malformed selector '{selector}': {reason}"
        if context is not None:
            location_info = context.format_location(error_level)
            if location_info:
                message = f"{message}\n{location_info}"

        super().__init__(message)


class ArgumentExhaustedError(TagPathError):
    """Raised when a template has more placeholders than supplied arguments."""

    def __init__(self, template: str | None, supplied: int):
        """
        Initialize the exception.

        Params:
            template: The template being rendered, if known
            supplied: How many positional arguments the caller passed
        """
        self.template = template
        self.supplied = supplied
        subject = f"template '{template}'" if template is not None else "template"
        super().__init__(
            f"Not enough arguments for {subject}: placeholder {supplied + 1} "
            f"requested but only {supplied} supplied"
        )

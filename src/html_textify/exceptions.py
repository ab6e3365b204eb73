"""
Exceptions raised by the converter.

Hierarchy:
- TextifyError (base)
  - InputDecodingError: input bytes could not be decoded to text
  - InputTooLargeError: input exceeds the configured size limit
  - HtmlParseError: the HTML parser failed or is unavailable

All of them are also ValueErrors, so callers treating bad input generically keep working.
"""

from typing import Optional


class TextifyError(ValueError):
    """Base class for converter errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class InputDecodingError(TextifyError):
    """Raised when the input byte stream cannot be decoded."""


class InputTooLargeError(TextifyError):
    """Raised when the input exceeds ``max_input_size_mb``."""


class HtmlParseError(TextifyError):
    """Raised when the HTML tree builder fails."""

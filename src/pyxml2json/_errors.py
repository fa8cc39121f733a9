"""Exception hierarchy for XML-to-JSON conversion."""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for XML-to-JSON conversion errors.

    Provides dual messaging: a user-facing message and internal details
    for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class XmlParseError(ConversionError):
    """Raised when the XML input is malformed.

    ``line`` and ``column`` are 1-based, or None when the position is unknown
    (for instance when the input ends too early).
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.line = line
        self.column = column


class InvalidConfigError(ConversionError):
    """Raised when a converter configuration value is invalid."""


class MaxDepthExceededError(ConversionError):
    """Raised when element nesting exceeds the depth limit."""


# User-facing error message constants
ERR_MSG_MALFORMED_XML = "malformed XML"
ERR_MSG_UNEXPECTED_EOF = "malformed XML: unexpected end of input"
ERR_MSG_MISMATCHED_TAG = "mismatched closing tag"
ERR_MSG_DUPLICATE_ATTRIBUTE = "duplicate attribute"
ERR_MSG_TEXT_OUTSIDE_ROOT = "text outside the root element"
ERR_MSG_INVALID_CONFIG = "invalid converter configuration"
ERR_MSG_MAX_DEPTH_EXCEEDED = "maximum nesting depth exceeded"

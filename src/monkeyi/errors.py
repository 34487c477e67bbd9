"""
monkeyi Error Hierarchy
=======================

This module defines the exception hierarchy for the monkeyi lexer.
All exceptions inherit from MonkeyError, allowing callers to catch all
package errors with a single except clause if desired.

Exception Hierarchy
-------------------
MonkeyError (base)
└── LexerError - errors raised while setting up a lexing session
    └── InvalidEncodingError - source is not well-formed UTF-8 / Unicode

Scan-time problems are never raised. A character the lexer cannot classify
becomes an ILLEGAL token and the caller decides what to do with it. The only
fatal condition is malformed input, which is rejected at construction time.

Error messages follow this format:
    byte N: error: description
    hint: suggestion for fixing (when available)
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MonkeyError(Exception):
    """
    Base exception for all monkeyi errors.

        try:
            lexer = Lexer(data)
        except MonkeyError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexerError(MonkeyError):
    """
    Base exception for lexer errors.

    Attributes:
        message: The error description
        offset: Offset into the input where the problem was found (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        offset: Optional[int] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.offset = offset
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with offset and hint.

        Example output:
            byte 3: error: invalid UTF-8 input (invalid start byte)
            hint: save the source file as UTF-8
        """
        parts = []

        if self.offset is not None:
            parts.append(f"byte {self.offset}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class InvalidEncodingError(LexerError):
    """
    Source text is not well-formed Unicode.

    Raised by Scanner construction only; no partially usable lexer is
    ever returned. For byte input the offset is the position of the first
    malformed byte; for str input it is the index of the offending
    (surrogate) character.
    """

    def __init__(self, reason: str, offset: Optional[int] = None):
        self.reason = reason
        super().__init__(
            f"invalid UTF-8 input ({reason})",
            offset=offset,
            hint="source text must be well-formed UTF-8",
        )

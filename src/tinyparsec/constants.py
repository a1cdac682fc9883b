"""Shared constants for TinyParsec.

This module provides centralized constants used across the parser
package and the whole-input runner. Placing them here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Character classes: Characters recognised by the built-in parsers
- Input limits: Size constraints applied by ParseRunner
- Messages: Default diagnostic text

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Character classes
    "SPACE",
    "MINUS_SIGN",
    "DECIMAL_POINT",
    "ASCII_DIGITS",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Messages
    "DEFAULT_FAILURE_MESSAGE",
]

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# spaced() trims U+0020 only. Tabs and line endings are content.
SPACE: str = " "

MINUS_SIGN: str = "-"
DECIMAL_POINT: str = "."

# ASCII digits only. str.isdigit() accepts Unicode digits like ² or ³,
# which int() rejects.
ASCII_DIGITS: str = "0123456789"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MiB).
# ParseRunner rejects larger inputs before invoking any parser.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# MESSAGES
# ============================================================================

# Message used by fail() when the caller supplies none.
DEFAULT_FAILURE_MESSAGE: str = "failed without a message"

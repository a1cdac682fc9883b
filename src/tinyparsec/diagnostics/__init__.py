"""Diagnostic system for parse failures.

Provides failure codes, structured diagnostics, centralized message
templates and the exceptions raised by the whole-input runner.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import IncompleteParseError, ParseFailedError, TinyParsecError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "IncompleteParseError",
    "ParseFailedError",
    "TinyParsecError",
]

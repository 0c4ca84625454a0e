from __future__ import annotations


class EvalError(Exception):
    """Raised when a script-level operation fails."""


class UnhashableError(EvalError):
    """Raised when a mutable value is used where a hashable one is required."""

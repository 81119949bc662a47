"""
Codec exceptions.

Document content never raises: malformed lines are dropped and odd
scalars are coerced by fixed precedence. Errors only reach callers
that ask for a typed value the stored one cannot become.
"""

from __future__ import annotations

from typing import Any


class SkillYamlError(Exception):
    """Base class for all codec errors."""


class ValueCoercionError(SkillYamlError, TypeError):
    """A stored value could not be converted to the requested type."""

    def __init__(self, key: str, expected: Any, value: Any, reason: str = ""):
        self.key = key
        self.expected = expected
        self.value = value
        name = getattr(expected, "__name__", repr(expected))
        message = f"Value under '{key}' is not a valid {name}: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)

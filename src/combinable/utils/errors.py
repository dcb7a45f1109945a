"""Typed exceptions for generator configuration and sampling failures."""

from __future__ import annotations

from typing import Any


class GenerationError(Exception):
    """Base class for all errors raised by :mod:`combinable`."""


class ConfigurationError(GenerationError, ValueError):
    """Raised eagerly when a combinator receives malformed parameters."""


class ConstraintFailure(GenerationError):
    """Base class for terminal failures of ``filter``/``unique`` draws.

    Attributes
    ----------
    what:
        Name of the combinator that gave up (``"filter"``, ``"unique"`` or
        ``"filter_character"``).
    attempts:
        Number of draws taken before giving up.
    last_value:
        The last rejected value, kept for diagnostics.
    """

    def __init__(self, message: str, *, what: str, attempts: int, last_value: Any = None) -> None:
        super().__init__(message)
        self.what = what
        self.attempts = attempts
        self.last_value = last_value


class FixedValueConstraintFailure(ConstraintFailure):
    """Raised when a fixed generator's only value cannot satisfy a constraint."""


class RetryBudgetExhausted(ConstraintFailure):
    """Raised when no satisfying value was drawn within the retry budget."""


__all__ = [
    "GenerationError",
    "ConfigurationError",
    "ConstraintFailure",
    "FixedValueConstraintFailure",
    "RetryBudgetExhausted",
]

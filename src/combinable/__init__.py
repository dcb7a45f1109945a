"""Composable constrained random value generators.

Obtain a base generator from a factory, optionally reshape its domain, then
stack refinements::

    from combinable import integers

    gen = integers(8).with_range(0, 127).filter(lambda v: v % 3 == 0).unique()
    gen.sample()

Shape calls (``with_range``, ``positive``, ``alpha`` ...) replace the domain
wholesale; refinements (``map``, ``filter``, ``inject_null``, ``unique``)
compose in call order.
"""

from __future__ import annotations

from typing import TypeVar

from .generators import (
    ByteGenerator,
    CharacterGenerator,
    ConstantGenerator,
    DrawContext,
    Generator,
    IntegerGenerator,
    StringGenerator,
    bytes_,
    characters,
    integers,
    longs,
    shorts,
    strings,
)
from .source import RandomBackend, RandomSource, backend_for
from .utils.errors import (
    ConfigurationError,
    ConstraintFailure,
    FixedValueConstraintFailure,
    GenerationError,
    RetryBudgetExhausted,
)

__version__ = "0.1.0"

T = TypeVar("T")


def constant(value: T, *, context: DrawContext | None = None) -> ConstantGenerator[T]:
    """Return a generator that always yields ``value``."""

    return ConstantGenerator(value, context=context)


__all__ = [
    "__version__",
    "ByteGenerator",
    "CharacterGenerator",
    "ConstantGenerator",
    "DrawContext",
    "Generator",
    "IntegerGenerator",
    "StringGenerator",
    "bytes_",
    "characters",
    "constant",
    "integers",
    "longs",
    "shorts",
    "strings",
    "RandomBackend",
    "RandomSource",
    "backend_for",
    "ConfigurationError",
    "ConstraintFailure",
    "FixedValueConstraintFailure",
    "GenerationError",
    "RetryBudgetExhausted",
]

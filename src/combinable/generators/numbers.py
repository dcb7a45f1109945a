"""Fixed-width signed integer generators.

One generic :class:`IntegerGenerator` covers every width; the width only
supplies the limits shape combinators fill in.  Each shape call returns a new
generator of the same class carrying a brand-new :class:`IntDomain`, so

>>> integers(8).positive().with_range(-50, -10)  # doctest: +SKIP

draws only from ``[-50, -10]``: the earlier ``positive()`` is gone, not
intersected.
"""

from __future__ import annotations

from typing import TypeVar

from combinable.utils.errors import ConfigurationError

from .base import DrawContext, Generator, default_context
from .domains import IntDomain, IntegerWidth, Parity, width_for

G = TypeVar("G", bound="IntegerGenerator")


def _check_integer(bound: object) -> None:
    if not isinstance(bound, int) or isinstance(bound, bool):
        raise ConfigurationError(f"integer bound must be an int, got {bound!r}")


class IntegerGenerator(Generator[int]):
    """Draw integers from the active :class:`IntDomain` of a fixed width."""

    def __init__(
        self,
        width: IntegerWidth,
        domain: IntDomain | None = None,
        *,
        context: DrawContext | None = None,
    ) -> None:
        self.width = width
        self.domain = domain if domain is not None else IntDomain(width.minimum, width.maximum)
        self.context = context if context is not None else default_context()
        self._last_raw: int | None = None

    # -- Contract ----------------------------------------------------------

    def sample(self) -> int:
        value = self.context.source.draw(self.domain)
        self._last_raw = value
        return value

    def raw_value(self) -> int | None:
        return self._last_raw

    def is_fixed(self) -> bool:
        return self.domain.size == 1

    # -- Shapes ------------------------------------------------------------

    def _reshape(self: G, minimum: int, maximum: int, parity: Parity = "any") -> G:
        for bound in (minimum, maximum):
            _check_integer(bound)
            if not self.width.minimum <= bound <= self.width.maximum:
                raise ConfigurationError(
                    f"{bound} does not fit a {self.width.bits}-bit signed integer "
                    f"[{self.width.minimum}, {self.width.maximum}]"
                )
        return type(self)(self.width, IntDomain(minimum, maximum, parity), context=self.context)

    def with_range(self: G, minimum: int, maximum: int) -> G:
        """Draw from ``[minimum, maximum]`` only."""

        _check_integer(minimum)
        _check_integer(maximum)
        if minimum > maximum:
            raise ConfigurationError(f"with_range: minimum {minimum} exceeds maximum {maximum}")
        return self._reshape(minimum, maximum)

    def positive(self: G) -> G:
        return self._reshape(1, self.width.maximum)

    def negative(self: G) -> G:
        return self._reshape(self.width.minimum, -1)

    def even(self: G) -> G:
        return self._reshape(self.width.minimum, self.width.maximum, "even")

    def odd(self: G) -> G:
        return self._reshape(self.width.minimum, self.width.maximum, "odd")

    def greater_or_equal(self: G, minimum: int) -> G:
        return self._reshape(minimum, self.width.maximum)

    def less_or_equal(self: G, maximum: int) -> G:
        return self._reshape(self.width.minimum, maximum)

    def __repr__(self) -> str:
        d = self.domain
        return f"{type(self).__name__}(bits={self.width.bits}, [{d.minimum}, {d.maximum}], {d.parity})"


class ByteGenerator(IntegerGenerator):
    """8-bit generator with the extra ``ascii()`` shape."""

    def ascii(self) -> "ByteGenerator":
        """Draw from ``[0, 127]`` only."""

        return self._reshape(0, 127)


def integers(width: int = 32, *, context: DrawContext | None = None) -> IntegerGenerator:
    """Return an unrestricted generator for a ``width``-bit signed integer."""

    limits = width_for(width)
    cls = ByteGenerator if width == 8 else IntegerGenerator
    return cls(limits, context=context)


def bytes_(*, context: DrawContext | None = None) -> ByteGenerator:
    return ByteGenerator(width_for(8), context=context)


def shorts(*, context: DrawContext | None = None) -> IntegerGenerator:
    return integers(16, context=context)


def longs(*, context: DrawContext | None = None) -> IntegerGenerator:
    return integers(64, context=context)


__all__ = ["IntegerGenerator", "ByteGenerator", "integers", "bytes_", "shorts", "longs"]

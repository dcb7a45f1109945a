"""Domain descriptors for the base generators.

A descriptor is a small frozen value describing *what* may be drawn.  Shape
combinators never edit a descriptor; they build a fresh one and hand it to a
new generator, so a previous shape is simply unreachable afterwards.

Both descriptor kinds expose ``size`` and ``nth(index)`` which is all the
random source needs to draw uniformly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from combinable.utils import constants
from combinable.utils.errors import ConfigurationError

Parity = Literal["any", "even", "odd"]


# ---------------------------------------------------------------------------
# Integer widths
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IntegerWidth:
    """Inclusive limits of a fixed-width signed integer."""

    bits: int
    minimum: int
    maximum: int

    @classmethod
    def signed(cls, bits: int) -> "IntegerWidth":
        half = 1 << (bits - 1)
        return cls(bits=bits, minimum=-half, maximum=half - 1)


WIDTHS: dict[int, IntegerWidth] = {bits: IntegerWidth.signed(bits) for bits in (8, 16, 32, 64)}


def width_for(bits: int) -> IntegerWidth:
    """Return the :class:`IntegerWidth` for ``bits`` or raise."""

    try:
        return WIDTHS[bits]
    except KeyError:
        raise ConfigurationError(
            f"unsupported integer width {bits}; expected one of {sorted(WIDTHS)}"
        ) from None


# ---------------------------------------------------------------------------
# Integer domain
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IntDomain:
    """Inclusive ``[minimum, maximum]`` range, optionally one parity only."""

    minimum: int
    maximum: int
    parity: Parity = "any"

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ConfigurationError(
                f"range minimum {self.minimum} exceeds maximum {self.maximum}"
            )
        if self.parity not in ("any", "even", "odd"):
            raise ConfigurationError(f"unknown parity {self.parity!r}")
        if self.size == 0:
            raise ConfigurationError(
                f"no {self.parity} value in [{self.minimum}, {self.maximum}]"
            )

    @property
    def _first(self) -> int:
        if self.parity == "any":
            return self.minimum
        want = 0 if self.parity == "even" else 1
        return self.minimum if self.minimum % 2 == want else self.minimum + 1

    @property
    def _step(self) -> int:
        return 1 if self.parity == "any" else 2

    @property
    def size(self) -> int:
        first = self._first
        if first > self.maximum:
            return 0
        return (self.maximum - first) // self._step + 1

    def nth(self, index: int) -> int:
        if not 0 <= index < self.size:
            raise IndexError(index)
        return self._first + index * self._step

    def contains(self, value: int) -> bool:
        if not self.minimum <= value <= self.maximum:
            return False
        if self.parity == "even":
            return value % 2 == 0
        if self.parity == "odd":
            return value % 2 == 1
        return True


# ---------------------------------------------------------------------------
# Code point domain
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CodePointDomain:
    """Union of disjoint inclusive code point ranges."""

    ranges: tuple[tuple[int, int], ...]
    label: str = "custom"

    def __post_init__(self) -> None:
        if not self.ranges:
            raise ConfigurationError("code point domain needs at least one range")
        for lo, hi in self.ranges:
            if lo > hi:
                raise ConfigurationError(
                    f"code point range start U+{lo:04X} exceeds end U+{hi:04X}"
                )
            if lo < 0 or hi > constants.MAX_CODE_POINT:
                raise ConfigurationError(
                    f"code point range U+{lo:04X}..U+{hi:04X} is outside Unicode"
                )

    @property
    def size(self) -> int:
        return sum(hi - lo + 1 for lo, hi in self.ranges)

    def nth(self, index: int) -> int:
        if index < 0:
            raise IndexError(index)
        for lo, hi in self.ranges:
            span = hi - lo + 1
            if index < span:
                return lo + index
            index -= span
        raise IndexError(index)

    def contains(self, code_point: int) -> bool:
        return any(lo <= code_point <= hi for lo, hi in self.ranges)


def _code_points(label: str, *ranges: tuple[int, int]) -> CodePointDomain:
    return CodePointDomain(ranges=tuple(ranges), label=label)


UNICODE = _code_points(
    "unicode",
    (0, constants.SURROGATE_RANGE[0] - 1),
    (constants.SURROGATE_RANGE[1] + 1, constants.MAX_CODE_POINT),
)
ASCII = _code_points("ascii", constants.ASCII_RANGE)
NUMERIC = _code_points("numeric", constants.DIGIT_RANGE)
UPPERCASE = _code_points("uppercase", constants.UPPER_RANGE)
LOWERCASE = _code_points("lowercase", constants.LOWER_RANGE)
ALPHA = _code_points("alpha", constants.UPPER_RANGE, constants.LOWER_RANGE)
ALPHA_NUMERIC = _code_points(
    "alpha_numeric", constants.DIGIT_RANGE, constants.UPPER_RANGE, constants.LOWER_RANGE
)
KOREAN = _code_points("korean", constants.HANGUL_SYLLABLE_RANGE)
EMOJI = _code_points("emoji", *constants.EMOJI_RANGES)
WHITESPACE = _code_points("whitespace", *constants.WHITESPACE_RANGES)

PRESETS: dict[str, CodePointDomain] = {
    d.label: d
    for d in (UNICODE, ASCII, NUMERIC, UPPERCASE, LOWERCASE, ALPHA, ALPHA_NUMERIC, KOREAN, EMOJI, WHITESPACE)
}


__all__ = [
    "Parity",
    "IntegerWidth",
    "WIDTHS",
    "width_for",
    "IntDomain",
    "CodePointDomain",
    "UNICODE",
    "ASCII",
    "NUMERIC",
    "UPPERCASE",
    "LOWERCASE",
    "ALPHA",
    "ALPHA_NUMERIC",
    "KOREAN",
    "EMOJI",
    "WHITESPACE",
    "PRESETS",
]

"""String generators composed from a length and a character generator.

A :class:`StringGenerator` first draws a length, then that many characters.
Character presets and :meth:`StringGenerator.with_characters` replace the
character generator outright.  :meth:`StringGenerator.filter_character`
refines the current character generator, so every position is redrawn
through the retry budget until the predicate holds.  The generic
``filter``/``map``/``inject_null``/``unique`` refinements then apply to the
finished string.
"""

from __future__ import annotations

from collections.abc import Callable

from combinable.utils.errors import ConfigurationError

from .base import ConstantGenerator, DrawContext, Generator, default_context
from .characters import CharacterGenerator
from .domains import ALPHA, ALPHA_NUMERIC, ASCII, KOREAN, NUMERIC, CodePointDomain
from .numbers import IntegerGenerator, integers
from .refine import FilteredGenerator


class StringGenerator(Generator[str]):
    """Draw strings of ``lengths.sample()`` characters from ``chars``."""

    def __init__(
        self,
        chars: Generator[str] | None = None,
        lengths: Generator[int] | None = None,
        *,
        context: DrawContext | None = None,
    ) -> None:
        self.context = context if context is not None else default_context()
        self.chars = chars if chars is not None else CharacterGenerator(context=self.context)
        self.lengths = (
            lengths
            if lengths is not None
            else _length_generator(self.context.min_length, self.context.max_length, self.context)
        )
        self._last_raw: str | None = None

    def sample(self) -> str:
        length = self.lengths.sample()
        value = "".join(self.chars.sample() for _ in range(length))
        self._last_raw = value
        return value

    def raw_value(self) -> str | None:
        return self._last_raw

    def is_fixed(self) -> bool:
        if not self.lengths.is_fixed():
            return False
        return self.chars.is_fixed() or _always_empty(self.lengths)

    # -- Composition -------------------------------------------------------

    def with_length(self, minimum: int, maximum: int) -> "StringGenerator":
        """Draw lengths from ``[minimum, maximum]``."""

        return StringGenerator(
            self.chars, _length_generator(minimum, maximum, self.context), context=self.context
        )

    def with_characters(self, chars: Generator[str]) -> "StringGenerator":
        """Use ``chars`` for every position, dropping the current one."""

        return StringGenerator(chars, self.lengths, context=self.context)

    def filter_character(self, predicate: Callable[[str], bool]) -> "StringGenerator":
        """Only emit strings whose every character satisfies ``predicate``."""

        chars = FilteredGenerator(self.chars, predicate, what="filter_character")
        return StringGenerator(chars, self.lengths, context=self.context)

    # -- Presets -----------------------------------------------------------

    def _preset(self, domain: CodePointDomain) -> "StringGenerator":
        return self.with_characters(CharacterGenerator(domain, context=self.context))

    def numeric(self) -> "StringGenerator":
        return self._preset(NUMERIC)

    def alphabetic(self) -> "StringGenerator":
        return self._preset(ALPHA)

    def alpha_numeric(self) -> "StringGenerator":
        return self._preset(ALPHA_NUMERIC)

    def ascii(self) -> "StringGenerator":
        return self._preset(ASCII)

    def korean(self) -> "StringGenerator":
        return self._preset(KOREAN)

    def __repr__(self) -> str:
        return f"StringGenerator(chars={self.chars!r}, lengths={self.lengths!r})"


def _length_generator(minimum: int, maximum: int, context: DrawContext) -> Generator[int]:
    if minimum < 0:
        raise ConfigurationError(f"string length minimum {minimum} is negative")
    if minimum > maximum:
        raise ConfigurationError(f"string length minimum {minimum} exceeds maximum {maximum}")
    return integers(32, context=context).with_range(minimum, maximum)


def _always_empty(lengths: Generator[int]) -> bool:
    """True when a fixed length generator only ever yields zero."""

    if isinstance(lengths, IntegerGenerator):
        return lengths.domain.maximum <= 0
    return isinstance(lengths, ConstantGenerator) and lengths.raw_value() <= 0


def strings(*, context: DrawContext | None = None) -> StringGenerator:
    """Return a string generator with the configured default lengths."""

    return StringGenerator(context=context)


__all__ = ["StringGenerator", "strings"]

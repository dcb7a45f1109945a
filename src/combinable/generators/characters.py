"""Single-character generators.

Characters are drawn as code points from a :class:`CodePointDomain` and
returned as one-character strings.  The class presets (``alpha()``,
``korean()`` and so on) each swap in a whole new domain; the last one called
is the only one in effect.
"""

from __future__ import annotations

from combinable.utils.errors import ConfigurationError

from .base import DrawContext, Generator, default_context
from .domains import (
    ALPHA,
    ALPHA_NUMERIC,
    ASCII,
    EMOJI,
    KOREAN,
    LOWERCASE,
    NUMERIC,
    UNICODE,
    UPPERCASE,
    WHITESPACE,
    CodePointDomain,
)


def _code_point(value: str | int) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ConfigurationError(f"expected a single character, got {value!r}")
        return ord(value)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigurationError(f"expected a character or code point, got {value!r}")
    return value


class CharacterGenerator(Generator[str]):
    """Draw one character from the active code point domain."""

    def __init__(
        self,
        domain: CodePointDomain = UNICODE,
        *,
        context: DrawContext | None = None,
    ) -> None:
        self.domain = domain
        self.context = context if context is not None else default_context()
        self._last_raw: str | None = None

    def sample(self) -> str:
        value = chr(self.context.source.draw(self.domain))
        self._last_raw = value
        return value

    def raw_value(self) -> str | None:
        return self._last_raw

    def is_fixed(self) -> bool:
        return self.domain.size == 1

    # -- Shapes ------------------------------------------------------------

    def _reshape(self, domain: CodePointDomain) -> "CharacterGenerator":
        return CharacterGenerator(domain, context=self.context)

    def with_range(self, minimum: str | int, maximum: str | int) -> "CharacterGenerator":
        """Draw code points in ``[minimum, maximum]``; accepts chars or ints."""

        lo, hi = _code_point(minimum), _code_point(maximum)
        if lo > hi:
            raise ConfigurationError(f"with_range: U+{lo:04X} exceeds U+{hi:04X}")
        return self._reshape(CodePointDomain(((lo, hi),), label="range"))

    def alpha(self) -> "CharacterGenerator":
        return self._reshape(ALPHA)

    def numeric(self) -> "CharacterGenerator":
        return self._reshape(NUMERIC)

    def alpha_numeric(self) -> "CharacterGenerator":
        return self._reshape(ALPHA_NUMERIC)

    def ascii(self) -> "CharacterGenerator":
        return self._reshape(ASCII)

    def uppercase(self) -> "CharacterGenerator":
        return self._reshape(UPPERCASE)

    def lowercase(self) -> "CharacterGenerator":
        return self._reshape(LOWERCASE)

    def korean(self) -> "CharacterGenerator":
        """Hangul syllables 가 to 힣."""

        return self._reshape(KOREAN)

    def emoji(self) -> "CharacterGenerator":
        return self._reshape(EMOJI)

    def whitespace(self) -> "CharacterGenerator":
        return self._reshape(WHITESPACE)

    def __repr__(self) -> str:
        return f"CharacterGenerator({self.domain.label})"


def characters(*, context: DrawContext | None = None) -> CharacterGenerator:
    """Return a generator over every Unicode scalar value."""

    return CharacterGenerator(context=context)


__all__ = ["CharacterGenerator", "characters"]

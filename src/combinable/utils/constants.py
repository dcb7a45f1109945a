"""Shared numeric limits and code point tables for the generator domains."""

from __future__ import annotations

from typing import Final

__all__ = [
    "DEFAULT_MAX_TRIES",
    "MAX_CODE_POINT",
    "SURROGATE_RANGE",
    "ASCII_RANGE",
    "DIGIT_RANGE",
    "UPPER_RANGE",
    "LOWER_RANGE",
    "HANGUL_SYLLABLE_RANGE",
    "EMOJI_RANGES",
    "WHITESPACE_RANGES",
]

DEFAULT_MAX_TRIES: Final = 10_000

MAX_CODE_POINT: Final = 0x10FFFF
SURROGATE_RANGE: Final = (0xD800, 0xDFFF)

ASCII_RANGE: Final = (0x00, 0x7F)
DIGIT_RANGE: Final = (ord("0"), ord("9"))
UPPER_RANGE: Final = (ord("A"), ord("Z"))
LOWER_RANGE: Final = (ord("a"), ord("z"))

# Hangul syllables 가..힣
HANGUL_SYLLABLE_RANGE: Final = (0xAC00, 0xD7A3)

EMOJI_RANGES: Final = (
    (0x1F300, 0x1F5FF),  # misc symbols and pictographs
    (0x1F600, 0x1F64F),  # emoticons
    (0x1F680, 0x1F6FF),  # transport and map
    (0x1F900, 0x1F9FF),  # supplemental symbols and pictographs
)

# \t \n \v \f \r and space
WHITESPACE_RANGES: Final = (
    (0x09, 0x0D),
    (0x20, 0x20),
)

from __future__ import annotations

import pytest

from combinable.generators import CharacterGenerator, DrawContext, characters
from combinable.source import backend_for
from combinable.utils.constants import EMOJI_RANGES
from combinable.utils.errors import ConfigurationError


def chars(seed: int = 0) -> CharacterGenerator:
    return characters(context=DrawContext(source=backend_for(seed)))


def test_default_draws_are_encodable() -> None:
    for ch in chars(1).samples(1000):
        assert len(ch) == 1
        assert not 0xD800 <= ord(ch) <= 0xDFFF
        ch.encode("utf-8")


def test_with_range_chars_and_code_points() -> None:
    assert all("A" <= c <= "Z" for c in chars(2).with_range("A", "Z").samples(1000))
    assert all(0x30 <= ord(c) <= 0x39 for c in chars(2).with_range(0x30, 0x39).samples(300))


@pytest.mark.parametrize(
    ("shape", "check"),
    [
        ("alpha", lambda c: c.isascii() and c.isalpha()),
        ("numeric", lambda c: c.isdigit()),
        ("alpha_numeric", lambda c: c.isascii() and c.isalnum()),
        ("ascii", lambda c: ord(c) <= 127),
        ("uppercase", lambda c: c.isupper()),
        ("lowercase", lambda c: c.islower()),
        ("korean", lambda c: "가" <= c <= "힣"),
        ("whitespace", lambda c: c.isspace()),
        ("emoji", lambda c: any(lo <= ord(c) <= hi for lo, hi in EMOJI_RANGES)),
    ],
)
def test_class_presets(shape: str, check) -> None:
    gen = getattr(chars(3), shape)()
    assert all(check(c) for c in gen.samples(300))


def test_last_call_wins() -> None:
    gen = chars(4).alpha().numeric()
    assert all(c.isdigit() for c in gen.samples(300))
    gen = chars(4).korean().with_range("a", "c")
    assert set(gen.samples(300)) == {"a", "b", "c"}


def test_range_errors() -> None:
    with pytest.raises(ConfigurationError):
        chars().with_range("z", "a")
    with pytest.raises(ConfigurationError):
        chars().with_range("ab", "c")
    with pytest.raises(ConfigurationError):
        chars().with_range(0, 0x110000)
    with pytest.raises(ConfigurationError):
        chars().with_range(65.0, 90)


def test_single_character_domain_is_fixed() -> None:
    gen = chars().with_range("x", "x")
    assert gen.is_fixed()
    assert gen.samples(5) == ["x"] * 5
    assert not chars().numeric().is_fixed()


def test_character_refinements() -> None:
    gen = chars(5).ascii().filter(lambda c: c > "A").map(ord)
    assert all(65 < v <= 127 for v in gen.samples(300))

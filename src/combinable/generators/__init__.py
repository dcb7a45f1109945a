"""Generator contract, domain generators and refinement combinators."""

from .base import ConstantGenerator, DrawContext, Generator, default_context
from .characters import CharacterGenerator, characters
from .domains import CodePointDomain, IntDomain, IntegerWidth, WIDTHS
from .numbers import ByteGenerator, IntegerGenerator, bytes_, integers, longs, shorts
from .refine import FilteredGenerator, MappedGenerator, NullInjectedGenerator, UniqueGenerator
from .retry import draw_satisfying
from .strings import StringGenerator, strings

__all__ = [
    "ConstantGenerator",
    "DrawContext",
    "Generator",
    "default_context",
    "CharacterGenerator",
    "characters",
    "CodePointDomain",
    "IntDomain",
    "IntegerWidth",
    "WIDTHS",
    "ByteGenerator",
    "IntegerGenerator",
    "bytes_",
    "integers",
    "longs",
    "shorts",
    "FilteredGenerator",
    "MappedGenerator",
    "NullInjectedGenerator",
    "UniqueGenerator",
    "draw_satisfying",
    "StringGenerator",
    "strings",
]

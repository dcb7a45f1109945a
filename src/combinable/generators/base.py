"""Generator contract shared by every value producer.

A :class:`Generator` draws values on demand.  Base generators pull a raw
value from a :class:`~combinable.source.RandomSource`; every combinator
returns a new object wrapping its receiver, so chains read left to right in
the order the calls were made and a receiver is never changed by building
on top of it.

The only mutable state a generator may own is its last raw draw (for
diagnostics) and, for :class:`~combinable.generators.refine.UniqueGenerator`,
the set of values already emitted.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from combinable.config import ConfigModel, load_config
from combinable.source import RandomSource, backend_for
from combinable.utils.constants import DEFAULT_MAX_TRIES
from combinable.utils.errors import ConfigurationError

if TYPE_CHECKING:  # pragma: no cover
    from .refine import FilteredGenerator, MappedGenerator, NullInjectedGenerator, UniqueGenerator

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class DrawContext:
    """Random source plus the tunables every generator in a chain shares."""

    source: RandomSource
    max_tries: int = DEFAULT_MAX_TRIES
    min_length: int = 0
    max_length: int = 20

    def __post_init__(self) -> None:
        if self.max_tries < 1:
            raise ConfigurationError("max_tries must be at least 1")
        if not 0 <= self.min_length <= self.max_length:
            raise ConfigurationError(
                f"invalid default string length bounds [{self.min_length}, {self.max_length}]"
            )

    @classmethod
    def from_config(cls, cfg: ConfigModel, *, source: RandomSource | None = None) -> "DrawContext":
        """Build a context from a loaded :class:`ConfigModel`."""

        return cls(
            source=source if source is not None else backend_for(cfg.seed.value),
            max_tries=cfg.retry.max_tries,
            min_length=cfg.strings.min_length,
            max_length=cfg.strings.max_length,
        )


@lru_cache(maxsize=1)
def default_context() -> DrawContext:
    """Return the process-wide context built from the default configuration."""

    return DrawContext.from_config(load_config())


class Generator(ABC, Generic[T]):
    """Abstract producer of values of type ``T``."""

    context: DrawContext

    @abstractmethod
    def sample(self) -> T:
        """Draw one value through the whole chain."""

    @abstractmethod
    def raw_value(self) -> Any:
        """Return the last undecorated draw of the innermost base generator.

        ``None`` until something has been drawn.  Never draws.
        """

    @abstractmethod
    def is_fixed(self) -> bool:
        """Return ``True`` when every draw provably yields the same value."""

    # -- Convenience -------------------------------------------------------

    def samples(self, count: int) -> list[T]:
        """Return ``count`` successive draws."""

        return [self.sample() for _ in range(count)]

    def __iter__(self) -> Iterator[T]:
        while True:
            yield self.sample()

    # -- Refinements -------------------------------------------------------

    def map(self, fn: Callable[[T], U]) -> "MappedGenerator[T, U]":
        """Transform each draw with ``fn``."""

        from .refine import MappedGenerator

        return MappedGenerator(self, fn)

    def filter(self, predicate: Callable[[T], bool]) -> "FilteredGenerator[T]":
        """Keep only draws satisfying ``predicate``, redrawing as needed."""

        from .refine import FilteredGenerator

        return FilteredGenerator(self, predicate)

    def inject_null(self, probability: float) -> "NullInjectedGenerator[T]":
        """Return ``None`` instead of a draw with the given probability."""

        from .refine import NullInjectedGenerator

        return NullInjectedGenerator(self, probability)

    def unique(self) -> "UniqueGenerator[T]":
        """Never return the same value twice from the returned instance."""

        from .refine import UniqueGenerator

        return UniqueGenerator(self)


class ConstantGenerator(Generator[T]):
    """Generator that always returns one value."""

    def __init__(self, value: T, *, context: DrawContext | None = None) -> None:
        self.context = context if context is not None else default_context()
        self._value = value

    def sample(self) -> T:
        return self._value

    def raw_value(self) -> T:
        return self._value

    def is_fixed(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"ConstantGenerator({self._value!r})"


__all__ = ["DrawContext", "default_context", "Generator", "ConstantGenerator"]

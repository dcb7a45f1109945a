"""Domain-agnostic refinement combinators.

Each wrapper holds the generator it refines and applies its step when
sampled.  Wrappers stack in call order, so
``g.filter(p).map(f)`` checks ``p`` on the raw draw and then applies ``f``.
Errors raised further in propagate untouched.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from combinable.utils.errors import ConfigurationError

from .base import Generator
from .retry import draw_satisfying

T = TypeVar("T")
U = TypeVar("U")


class _Wrapper(Generator[U], Generic[T, U]):
    """Common plumbing: share the inner context and raw value."""

    def __init__(self, inner: Generator[T]) -> None:
        self.inner = inner
        self.context = inner.context

    def raw_value(self) -> Any:
        return self.inner.raw_value()


class MappedGenerator(_Wrapper[T, U]):
    """Apply ``fn`` to every draw."""

    def __init__(self, inner: Generator[T], fn: Callable[[T], U]) -> None:
        super().__init__(inner)
        self._fn = fn

    def sample(self) -> U:
        return self._fn(self.inner.sample())

    def is_fixed(self) -> bool:
        return self.inner.is_fixed()


class FilteredGenerator(_Wrapper[T, T]):
    """Redraw until ``predicate`` accepts, within the retry budget."""

    def __init__(
        self, inner: Generator[T], predicate: Callable[[T], bool], *, what: str = "filter"
    ) -> None:
        super().__init__(inner)
        self._predicate = predicate
        self._what = what

    def sample(self) -> T:
        return draw_satisfying(
            self.inner.sample,
            self._predicate,
            fixed=self.inner.is_fixed(),
            max_tries=self.context.max_tries,
            what=self._what,
        )

    def is_fixed(self) -> bool:
        return self.inner.is_fixed()


class NullInjectedGenerator(_Wrapper[T, "T | None"]):
    """Return ``None`` with probability ``probability``, else delegate."""

    def __init__(self, inner: Generator[T], probability: float) -> None:
        if not 0.0 <= probability <= 1.0:
            raise ConfigurationError(f"null probability {probability} is outside [0, 1]")
        super().__init__(inner)
        self.probability = float(probability)

    def sample(self) -> T | None:
        if self.context.source.chance(self.probability):
            return None
        return self.inner.sample()

    def is_fixed(self) -> bool:
        if self.probability == 1.0:
            return True
        return self.probability == 0.0 and self.inner.is_fixed()


class UniqueGenerator(_Wrapper[T, T]):
    """Emit each value at most once per instance.

    The seen-set belongs to this instance only.  ``sample`` holds a lock for
    the whole check-and-insert so concurrent callers never emit duplicates.
    """

    def __init__(self, inner: Generator[T]) -> None:
        super().__init__(inner)
        self._seen: set[Any] = set()
        self._lock = threading.Lock()

    def sample(self) -> T:
        with self._lock:
            value = draw_satisfying(
                self.inner.sample,
                lambda v: v not in self._seen,
                fixed=self.inner.is_fixed(),
                max_tries=self.context.max_tries,
                what="unique",
            )
            self._seen.add(value)
            return value

    def is_fixed(self) -> bool:
        return False


__all__ = ["MappedGenerator", "FilteredGenerator", "NullInjectedGenerator", "UniqueGenerator"]

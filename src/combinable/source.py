"""Randomness backend used by the base-domain generators.

Generators never pick values themselves.  They hand a domain descriptor to a
:class:`RandomSource` which returns one value inside it, and ask the same
source for Bernoulli trials when injecting nulls.  :class:`RandomBackend`
implements the contract on top of :class:`random.Random`; tests substitute a
seeded instance (see :func:`rng_for`) or any object with the same two
methods.

Seeds are hashed with SHA-256 under a fixed namespace before use so that
small integer seeds still produce well-spread streams.
"""

from __future__ import annotations

import hashlib
import random
from typing import Final, Protocol, runtime_checkable

_NS_RNG: Final = b"combinable/v1/rng"


@runtime_checkable
class Domain(Protocol):
    """Anything a source can draw from: ``size`` values addressable by index."""

    @property
    def size(self) -> int: ...

    def nth(self, index: int) -> int: ...


@runtime_checkable
class RandomSource(Protocol):
    """Backend contract: draw one value from a domain, run one coin flip."""

    def draw(self, domain: Domain) -> int: ...

    def chance(self, probability: float) -> bool: ...


class RandomBackend:
    """:class:`RandomSource` backed by a :class:`random.Random` instance."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def draw(self, domain: Domain) -> int:
        """Return a uniformly chosen member of ``domain``."""

        return domain.nth(self._rng.randrange(domain.size))

    def chance(self, probability: float) -> bool:
        """Return ``True`` with the given probability.

        ``random()`` lies in ``[0, 1)`` so ``1.0`` always succeeds and
        ``0.0`` never does.
        """

        return self._rng.random() < probability


def rng_for(seed: int) -> random.Random:
    """Derive a reproducible RNG from an integer ``seed``."""

    data = _NS_RNG + str(seed).encode("utf-8")
    digest = hashlib.sha256(data).digest()
    return random.Random(int.from_bytes(digest, "big"))


def backend_for(seed: int | None) -> RandomBackend:
    """Return a seeded backend, or an OS-seeded one when ``seed`` is ``None``."""

    if seed is None:
        return RandomBackend()
    return RandomBackend(rng_for(seed))


__all__ = ["Domain", "RandomSource", "RandomBackend", "rng_for", "backend_for"]

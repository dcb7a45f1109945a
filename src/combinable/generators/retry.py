"""Bounded redraw loop shared by the ``filter`` and ``unique`` combinators.

Outcomes:

=========  ======================  ==========================================
wrapped    outcome                 result
=========  ======================  ==========================================
fixed      value accepted          value, after one draw
fixed      value rejected          FixedValueConstraintFailure, one draw
not fixed  accepted within budget  value
not fixed  never accepted          RetryBudgetExhausted after ``max_tries``
=========  ======================  ==========================================

A predicate that is merely rare and one that is impossible look the same
from here; both end in :class:`RetryBudgetExhausted`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from combinable.utils.errors import FixedValueConstraintFailure, RetryBudgetExhausted
from combinable.utils.logging import get_logger

T = TypeVar("T")

log = get_logger(__name__)


def draw_satisfying(
    draw: Callable[[], T],
    accept: Callable[[T], bool],
    *,
    fixed: bool,
    max_tries: int,
    what: str,
) -> T:
    """Call ``draw`` until ``accept`` holds for the result.

    Parameters
    ----------
    draw:
        Produces one candidate.  Errors it raises propagate unchanged.
    accept:
        Decides whether a candidate is kept.
    fixed:
        Whether ``draw`` is known to always return the same value.  A fixed
        source is tried exactly once.
    max_tries:
        Retry budget for non-fixed sources.
    what:
        Combinator name used in error messages.
    """

    if fixed:
        value = draw()
        if accept(value):
            return value
        log.debug("%s: fixed value %r rejected", what, value)
        raise FixedValueConstraintFailure(
            f"{what}: fixed value {value!r} cannot satisfy the constraint",
            what=what,
            attempts=1,
            last_value=value,
        )

    value = None
    for _ in range(max_tries):
        value = draw()
        if accept(value):
            return value
    log.debug("%s: gave up after %d draws, last value %r", what, max_tries, value)
    raise RetryBudgetExhausted(
        f"{what}: no satisfying value within the retry budget of {max_tries} draws",
        what=what,
        attempts=max_tries,
        last_value=value,
    )


__all__ = ["draw_satisfying"]

# src/focusnav/engine/navigation/closest.py

from typing import Optional, Sequence, Union
from focusnav.core.exceptions import EmptyCandidateSetError

Number = Union[int, float]

def closest(values: Sequence[Optional[Number]], goal: Number) -> Optional[Number]:
    """
    Return the value numerically closest to `goal`.

    Ties keep the earliest value in `values`: a later value only replaces
    the current best when it is strictly closer. The order of `values` is
    therefore part of the result, not just their set.

    `None` entries have no distance and never compare as closer: a `None`
    best is never replaced and a later `None` never replaces a number.
    A leading `None` therefore wins outright.

    `values` must not be empty; callers check their candidate set first.
    An empty sequence raises EmptyCandidateSetError.
    """
    if not values:
        raise EmptyCandidateSetError("closest() requires at least one candidate value.")

    best = values[0]
    for value in values[1:]:
        if best is None or value is None:
            continue
        if abs(value - goal) < abs(best - goal):
            best = value
    return best

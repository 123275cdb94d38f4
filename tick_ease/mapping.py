"""Name-based dispatch and sequence helpers built on the easing table."""
from __future__ import annotations

from typing import Iterable

from tick_ease.easing import EASINGS
from tick_ease.types import Easing, EasingFunction, UnknownEasingError


def resolve(easing: Easing | str | EasingFunction) -> EasingFunction:
    """Look up an easing function by member or name.

    Callables are returned unchanged so helpers can take either form.
    Raises UnknownEasingError for names outside the catalogue.
    """
    if callable(easing) and not isinstance(easing, str):
        return easing
    fn = EASINGS.get(str(easing)) if isinstance(easing, str) else None
    if fn is None:
        raise UnknownEasingError(easing)
    return fn


def ease_map(values: Iterable[float], easing: Easing | str | EasingFunction) -> list[float]:
    """Map a sequence into its eased version.

    The first element is the start value and the span to the last element
    is used as both the change in value and the duration, so each element
    acts as its own time offset. ``ease_map(range(1, 11), "linear")`` is
    therefore ``[1.0, 2.0, ..., 10.0]``.

    A single element, or equal first and last elements, divides by zero.
    """
    fn = resolve(easing)
    items = list(values)
    if not items:
        raise ValueError("ease_map requires at least one value")

    start_value = items[0]
    change_in_value = items[-1] - start_value
    duration = change_in_value
    return [fn(x - start_value, start_value, change_in_value, duration) for x in items]


def sample(
    easing: Easing | str | EasingFunction,
    steps: int,
    start_value: float = 0.0,
    end_value: float = 1.0,
    duration: float = 1.0,
) -> list[tuple[float, float]]:
    """Evaluate a curve at ``steps + 1`` evenly spaced times over the duration.

    Returns ``(time, value)`` pairs, first at time 0 and last at ``duration``.
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")
    fn = resolve(easing)
    change_in_value = end_value - start_value
    points = []
    for i in range(steps + 1):
        current_time = duration * i / steps
        points.append((current_time, fn(current_time, start_value, change_in_value, duration)))
    return points

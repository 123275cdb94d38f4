"""Easing functions.

Every function takes ``(current_time, start_value, change_in_value, duration)``
and returns the eased value as a float. ``current_time`` is not clamped and
``duration`` must be nonzero.

In-out variants normalise time against half the duration, so the first half
of the motion runs for ``t < 1`` and the second for ``t >= 1``.

See https://easings.net for plots of each curve.
"""
from __future__ import annotations

from math import cos, pi, pow, sin, sqrt

from tick_ease.types import Easing, EasingFunction


def linear(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """No easing. Constant velocity."""
    return change_in_value * current_time / duration + start_value


# --- Quadratic ---


def ease_in_quad(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Quadratic ease-in: accelerates from zero velocity."""
    current_time = current_time / duration
    return change_in_value * pow(current_time, 2) + start_value


def ease_out_quad(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Quadratic ease-out.

    Kept as ``-c * t**2 + s``, which heads away from the target and ends at
    ``start_value - change_in_value``.
    """
    current_time = current_time / duration
    return -change_in_value * pow(current_time, 2) + start_value


def ease_in_out_quad(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Quadratic ease-in-out."""
    current_time = current_time / (duration / 2)
    if current_time < 1:
        return change_in_value / 2 * pow(current_time, 2) + start_value
    current_time = current_time - 1
    return -change_in_value / 2 * (current_time * (current_time - 2) - 1) + start_value


# --- Cubic ---


def ease_in_cubic(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Cubic ease-in."""
    current_time = current_time / duration
    return change_in_value * pow(current_time, 3) + start_value


def ease_out_cubic(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Cubic ease-out."""
    current_time = current_time / duration - 1
    return change_in_value * (pow(current_time, 3) + 1) + start_value


def ease_in_out_cubic(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Cubic ease-in-out."""
    current_time = current_time / (duration / 2)
    if current_time < 1:
        return change_in_value / 2 * pow(current_time, 3) + start_value
    current_time = current_time - 2
    return change_in_value / 2 * (pow(current_time, 3) + 2) + start_value


# --- Quartic ---


def ease_in_quartic(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Quartic ease-in."""
    current_time = current_time / duration
    return change_in_value * pow(current_time, 4) + start_value


def ease_out_quartic(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Quartic ease-out."""
    current_time = current_time / duration - 1
    return -change_in_value * (pow(current_time, 4) - 1) + start_value


def ease_in_out_quartic(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Quartic ease-in-out."""
    current_time = current_time / (duration / 2)
    if current_time < 1:
        return change_in_value / 2 * pow(current_time, 4) + start_value
    current_time = current_time - 2
    return -change_in_value / 2 * (pow(current_time, 4) - 2) + start_value


# --- Quintic ---


def ease_in_quintic(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Quintic ease-in."""
    current_time = current_time / duration
    return change_in_value * pow(current_time, 5) + start_value


def ease_out_quintic(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Quintic ease-out."""
    current_time = current_time / duration - 1
    return change_in_value * (pow(current_time, 5) + 1) + start_value


def ease_in_out_quintic(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Quintic ease-in-out."""
    current_time = current_time / (duration / 2)
    if current_time < 1:
        return change_in_value / 2 * pow(current_time, 5) + start_value
    current_time = current_time - 2
    return change_in_value / 2 * (pow(current_time, 5) + 2) + start_value


# --- Sinusoidal ---


def ease_in_sine(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Sinusoidal ease-in."""
    return -change_in_value * cos(current_time / duration * pi / 2) + change_in_value + start_value


def ease_out_sine(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Sinusoidal ease-out."""
    return change_in_value * sin(current_time / duration * pi / 2) + start_value


def ease_in_out_sine(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Sinusoidal ease-in-out. A single half-cosine, no phase split."""
    return -change_in_value / 2 * (cos(pi * current_time / duration) - 1) + start_value


# --- Exponential ---
# The classic curves never quite touch their endpoints: ease-in starts
# c * 2**-10 above start_value and ease-out stops the same distance short.


def ease_in_expo(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Exponential ease-in."""
    return change_in_value * pow(2, 10 * (current_time / duration - 1)) + start_value


def ease_out_expo(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Exponential ease-out."""
    return change_in_value * (0 - pow(2, -10 * current_time / duration) + 1) + start_value


def ease_in_out_expo(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Exponential ease-in-out."""
    current_time = current_time / (duration / 2)
    if current_time < 1:
        return change_in_value / 2 * pow(2, 10 * (current_time - 1)) + start_value
    current_time = current_time - 1
    return change_in_value / 2 * (0 - pow(2, -10 * current_time) + 2) + start_value


# --- Circular ---


def ease_in_circular(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Circular ease-in."""
    current_time = current_time / duration
    return -change_in_value * (sqrt(1 - pow(current_time, 2)) - 1) + start_value


def ease_out_circular(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Circular ease-out."""
    current_time = current_time / duration - 1
    return change_in_value * sqrt(1 - pow(current_time, 2)) + start_value


def ease_in_out_circular(current_time: float, start_value: float, change_in_value: float, duration: float) -> float:
    """Circular ease-in-out."""
    current_time = current_time / (duration / 2)
    if current_time < 1:
        return -change_in_value / 2 * (sqrt(1 - pow(current_time, 2)) - 1) + start_value
    current_time = current_time - 2
    return change_in_value / 2 * (sqrt(1 - pow(current_time, 2)) + 1) + start_value


EASINGS: dict[str, EasingFunction] = {
    Easing.LINEAR.value: linear,
    Easing.EASE_IN_QUAD.value: ease_in_quad,
    Easing.EASE_OUT_QUAD.value: ease_out_quad,
    Easing.EASE_IN_OUT_QUAD.value: ease_in_out_quad,
    Easing.EASE_IN_CUBIC.value: ease_in_cubic,
    Easing.EASE_OUT_CUBIC.value: ease_out_cubic,
    Easing.EASE_IN_OUT_CUBIC.value: ease_in_out_cubic,
    Easing.EASE_IN_QUARTIC.value: ease_in_quartic,
    Easing.EASE_OUT_QUARTIC.value: ease_out_quartic,
    Easing.EASE_IN_OUT_QUARTIC.value: ease_in_out_quartic,
    Easing.EASE_IN_QUINTIC.value: ease_in_quintic,
    Easing.EASE_OUT_QUINTIC.value: ease_out_quintic,
    Easing.EASE_IN_OUT_QUINTIC.value: ease_in_out_quintic,
    Easing.EASE_IN_SINE.value: ease_in_sine,
    Easing.EASE_OUT_SINE.value: ease_out_sine,
    Easing.EASE_IN_OUT_SINE.value: ease_in_out_sine,
    Easing.EASE_IN_EXPO.value: ease_in_expo,
    Easing.EASE_OUT_EXPO.value: ease_out_expo,
    Easing.EASE_IN_OUT_EXPO.value: ease_in_out_expo,
    Easing.EASE_IN_CIRCULAR.value: ease_in_circular,
    Easing.EASE_OUT_CIRCULAR.value: ease_out_circular,
    Easing.EASE_IN_OUT_CIRCULAR.value: ease_in_out_circular,
}

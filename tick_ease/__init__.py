"""tick-ease - Classic easing curves for animation and motion loops."""
from __future__ import annotations

from tick_ease.components import Tween
from tick_ease.easing import (
    EASINGS,
    ease_in_circular,
    ease_in_cubic,
    ease_in_expo,
    ease_in_out_circular,
    ease_in_out_cubic,
    ease_in_out_expo,
    ease_in_out_quad,
    ease_in_out_quartic,
    ease_in_out_quintic,
    ease_in_out_sine,
    ease_in_quad,
    ease_in_quartic,
    ease_in_quintic,
    ease_in_sine,
    ease_out_circular,
    ease_out_cubic,
    ease_out_expo,
    ease_out_quad,
    ease_out_quartic,
    ease_out_quintic,
    ease_out_sine,
    linear,
)
from tick_ease.mapping import ease_map, resolve, sample
from tick_ease.types import FAMILIES, VARIANTS, Easing, EasingFunction, UnknownEasingError

__all__ = [
    "EASINGS",
    "Easing",
    "EasingFunction",
    "FAMILIES",
    "Tween",
    "UnknownEasingError",
    "VARIANTS",
    "ease_in_circular",
    "ease_in_cubic",
    "ease_in_expo",
    "ease_in_out_circular",
    "ease_in_out_cubic",
    "ease_in_out_expo",
    "ease_in_out_quad",
    "ease_in_out_quartic",
    "ease_in_out_quintic",
    "ease_in_out_sine",
    "ease_in_quad",
    "ease_in_quartic",
    "ease_in_quintic",
    "ease_in_sine",
    "ease_map",
    "ease_out_circular",
    "ease_out_cubic",
    "ease_out_expo",
    "ease_out_quad",
    "ease_out_quartic",
    "ease_out_quintic",
    "ease_out_sine",
    "linear",
    "resolve",
    "sample",
]

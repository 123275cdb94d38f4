"""Easing curve plot renderer."""
from __future__ import annotations

import pygame

from tick_ease import Easing, resolve, sample

from ui.constants import CURVE_BG, TEXT_DIM, VARIANT_COLORS

SAMPLES = 80


def draw_curve_plot(
    surface: pygame.Surface,
    easing: Easing,
    x: int,
    y: int,
    w: int,
    h: int,
    current_t: float,
) -> None:
    """Draw an easing curve with a tracking dot.

    The vertical axis stretches to fit curves that leave [0, 1].
    """
    pad = 10
    plot_x = x + pad
    plot_y = y + pad
    plot_w = w - 2 * pad
    plot_h = h - 2 * pad

    # Background
    pygame.draw.rect(surface, CURVE_BG, (x, y, w, h))

    points = sample(easing, SAMPLES)
    lo = min(0.0, *(v for _, v in points))
    hi = max(1.0, *(v for _, v in points))
    span = hi - lo

    def to_screen(t: float, v: float) -> tuple[float, float]:
        return plot_x + t * plot_w, plot_y + plot_h - (v - lo) / span * plot_h

    # Axes at value 0 and time 0
    _, zero_y = to_screen(0.0, 0.0)
    pygame.draw.line(surface, TEXT_DIM, (plot_x, zero_y), (plot_x + plot_w, zero_y))
    pygame.draw.line(surface, TEXT_DIM, (plot_x, plot_y + plot_h), (plot_x, plot_y))

    color = VARIANT_COLORS.get(easing.variant, (200, 200, 200))
    pygame.draw.lines(surface, color, False, [to_screen(t, v) for t, v in points], 2)

    # Moving dot
    if 0.0 <= current_t <= 1.0:
        v = resolve(easing)(current_t, 0.0, 1.0, 1.0)
        dot_x, dot_y = to_screen(current_t, v)
        pygame.draw.circle(surface, (255, 255, 255), (int(dot_x), int(dot_y)), 4)
        pygame.draw.circle(surface, color, (int(dot_x), int(dot_y)), 3)

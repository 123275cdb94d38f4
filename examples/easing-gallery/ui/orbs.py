"""Orb circle renderer."""
from __future__ import annotations

import pygame

from tick_ease import Easing

from ui.constants import STATE_COMPLETED, VARIANT_COLORS


def draw_orb(
    surface: pygame.Surface,
    x: int,
    y: int,
    radius: int,
    state: str,
    easing: Easing,
) -> None:
    """Draw a single orb circle colored by state and easing variant."""
    if state == "completed":
        fill = STATE_COMPLETED
    else:
        fill = VARIANT_COLORS.get(easing.variant, (200, 200, 200))

    pygame.draw.circle(surface, fill, (x, y), radius)
    # Thin outline
    outline = tuple(min(c + 40, 255) for c in fill)
    pygame.draw.circle(surface, outline, (x, y), radius, 1)

"""Comparison lanes: label, curve plot and orb track per easing."""
from __future__ import annotations

import pygame

from tick_ease import Easing

from game.components import Orb
from ui.constants import (
    CURVE_W,
    LABEL_COLOR,
    LABEL_W,
    LANE_BG,
    LANE_BORDER,
    LANE_COUNT,
    LANE_H,
    ORB_RADIUS,
    TRACK_BG,
    TRACK_PAD,
    TRACK_RAIL,
    TRACK_W,
    VARIANT_COLORS,
)
from ui.curves import draw_curve_plot
from ui.orbs import draw_orb


def draw_lanes(
    surface: pygame.Surface,
    orbs: list[Orb],
    easings: list[Easing],
    font: pygame.font.Font,
) -> None:
    """Draw one lane per easing with its curve and travelling orbs."""
    lane_orbs: dict[int, list[Orb]] = {i: [] for i in range(LANE_COUNT)}
    for orb in orbs:
        if 0 <= orb.lane < LANE_COUNT:
            lane_orbs[orb.lane].append(orb)

    # The curve dot follows the latest active orb in each lane
    lane_t: dict[int, float] = {}
    for lane_idx in range(LANE_COUNT):
        best_t = -1.0
        for orb in lane_orbs[lane_idx]:
            if orb.state == "animating":
                best_t = max(best_t, orb.t)
            elif best_t < 0:
                best_t = orb.t
        lane_t[lane_idx] = best_t

    track_x = LABEL_W + CURVE_W
    lane_w = LABEL_W + CURVE_W + TRACK_W

    for i, easing in enumerate(easings):
        lane_y = i * LANE_H

        pygame.draw.rect(surface, LANE_BG, (0, lane_y, lane_w, LANE_H))
        pygame.draw.line(surface, LANE_BORDER, (0, lane_y + LANE_H - 1), (lane_w, lane_y + LANE_H - 1))

        label = font.render(easing.value, True, LABEL_COLOR)
        surface.blit(label, (10, lane_y + LANE_H // 2 - label.get_height() // 2))

        draw_curve_plot(surface, easing, LABEL_W, lane_y + 10, CURVE_W, LANE_H - 20, lane_t[i])

        pygame.draw.rect(surface, TRACK_BG, (track_x, lane_y, TRACK_W, LANE_H))

        rail_y = lane_y + LANE_H // 2
        rail_left = track_x + TRACK_PAD
        rail_right = track_x + TRACK_W - TRACK_PAD
        pygame.draw.line(surface, TRACK_RAIL, (rail_left, rail_y), (rail_right, rail_y), 2)

        # Start/end markers
        color = VARIANT_COLORS.get(easing.variant, (200, 200, 200))
        dim_color = tuple(c // 3 for c in color)
        pygame.draw.circle(surface, dim_color, (rail_left, rail_y), 4)
        pygame.draw.circle(surface, dim_color, (rail_right, rail_y), 4)

        for orb in lane_orbs[i]:
            ox = int(orb.start_x + (orb.end_x - orb.start_x) * orb.progress)
            draw_orb(surface, ox, int(orb.y), ORB_RADIUS, orb.state, orb.easing)

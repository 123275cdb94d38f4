"""Orb spawning utilities."""
from __future__ import annotations

from tick_ease import Easing, Tween

from game.components import Orb
from ui.constants import CURVE_W, LABEL_W, LANE_H, TRACK_PAD, TRACK_W


def lane_easings(family: str) -> list[Easing]:
    """Linear followed by the in, out and in-out variants of ``family``."""
    return [
        Easing.LINEAR,
        Easing.of(family, "in"),
        Easing.of(family, "out"),
        Easing.of(family, "in_out"),
    ]


def spawn_orb(easing: Easing, lane: int, duration: int) -> Orb:
    """Create an orb at the left end of its lane's track."""
    track_x = LABEL_W + CURVE_W
    return Orb(
        tween=Tween(start_val=0.0, end_val=1.0, duration=duration, easing=easing),
        easing=easing,
        lane=lane,
        start_x=track_x + TRACK_PAD,
        end_x=track_x + TRACK_W - TRACK_PAD,
        y=lane * LANE_H + LANE_H / 2,
    )


def launch_wave(orbs: list[Orb], family: str, duration: int) -> None:
    """Spawn one orb per lane, all starting on the same tick."""
    for lane, easing in enumerate(lane_easings(family)):
        orbs.append(spawn_orb(easing, lane, duration))

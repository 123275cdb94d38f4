"""Game objects for the easing gallery."""
from dataclasses import dataclass

from tick_ease import Easing, Tween


@dataclass
class Orb:
    """An orb travelling along a lane. tween drives progress from 0 to 1."""

    tween: Tween
    easing: Easing
    lane: int
    start_x: float
    end_x: float
    y: float
    linger: int = 0  # ticks spent on screen after completing

    @property
    def progress(self) -> float:
        return self.tween.value

    @property
    def t(self) -> float:
        """Normalized time (elapsed/duration), for the curve dot."""
        return min(self.tween.elapsed / self.tween.duration, 1.0)

    @property
    def state(self) -> str:
        return "completed" if self.tween.is_complete else "animating"

"""Tween value holder for caller-driven tick loops."""
from __future__ import annotations

from dataclasses import dataclass

from tick_ease.mapping import resolve
from tick_ease.types import Easing


@dataclass
class Tween:
    start_val: float
    end_val: float
    duration: float
    easing: Easing | str = "linear"
    elapsed: float = 0.0

    def __post_init__(self) -> None:
        resolve(self.easing)

    @property
    def change(self) -> float:
        return self.end_val - self.start_val

    @property
    def value(self) -> float:
        """Eased value at the current elapsed time. Elapsed is not clamped."""
        return resolve(self.easing)(self.elapsed, self.start_val, self.change, self.duration)

    @property
    def is_complete(self) -> bool:
        return self.elapsed >= self.duration

    def advance(self, dt: float = 1) -> float:
        """Move elapsed time forward by ``dt`` and return the new value."""
        self.elapsed += dt
        return self.value

"""Easing catalogue and shared type aliases."""
from __future__ import annotations

from enum import Enum
from typing import Callable

EasingFunction = Callable[[float, float, float, float], float]

FAMILIES: tuple[str, ...] = (
    "linear",
    "quad",
    "cubic",
    "quartic",
    "quintic",
    "sine",
    "expo",
    "circular",
)
VARIANTS: tuple[str, ...] = ("in", "out", "in_out")


class UnknownEasingError(KeyError):
    """Raised when an easing name is not in the catalogue."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unknown easing function: {name!r}")


class Easing(str, Enum):
    """Closed set of easing curves. Values are the function names."""

    LINEAR = "linear"
    EASE_IN_QUAD = "ease_in_quad"
    EASE_OUT_QUAD = "ease_out_quad"
    EASE_IN_OUT_QUAD = "ease_in_out_quad"
    EASE_IN_CUBIC = "ease_in_cubic"
    EASE_OUT_CUBIC = "ease_out_cubic"
    EASE_IN_OUT_CUBIC = "ease_in_out_cubic"
    EASE_IN_QUARTIC = "ease_in_quartic"
    EASE_OUT_QUARTIC = "ease_out_quartic"
    EASE_IN_OUT_QUARTIC = "ease_in_out_quartic"
    EASE_IN_QUINTIC = "ease_in_quintic"
    EASE_OUT_QUINTIC = "ease_out_quintic"
    EASE_IN_OUT_QUINTIC = "ease_in_out_quintic"
    EASE_IN_SINE = "ease_in_sine"
    EASE_OUT_SINE = "ease_out_sine"
    EASE_IN_OUT_SINE = "ease_in_out_sine"
    EASE_IN_EXPO = "ease_in_expo"
    EASE_OUT_EXPO = "ease_out_expo"
    EASE_IN_OUT_EXPO = "ease_in_out_expo"
    EASE_IN_CIRCULAR = "ease_in_circular"
    EASE_OUT_CIRCULAR = "ease_out_circular"
    EASE_IN_OUT_CIRCULAR = "ease_in_out_circular"

    def __str__(self) -> str:
        return self.value

    @property
    def family(self) -> str:
        """Curve family, e.g. ``"quad"`` for ``ease_in_out_quad``."""
        return self.value.rsplit("_", 1)[-1]

    @property
    def variant(self) -> str | None:
        """``"in"``, ``"out"``, ``"in_out"``, or None for linear."""
        if self is Easing.LINEAR:
            return None
        return self.value[len("ease_"):-len(self.family) - 1]

    @classmethod
    def lookup(cls, name: str | Easing) -> Easing:
        """Return the member for ``name``. Raises UnknownEasingError."""
        try:
            return cls(name)
        except ValueError:
            raise UnknownEasingError(name) from None

    @classmethod
    def of(cls, family: str, variant: str | None = None) -> Easing:
        """Build a member from its family and variant."""
        if family == "linear":
            name = "linear"
        else:
            name = f"ease_{variant}_{family}"
        return cls.lookup(name)

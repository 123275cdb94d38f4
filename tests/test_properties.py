"""Boundary, symmetry and monotonicity properties shared by the curves."""

import pytest
from tick_ease import EASINGS, Easing

# (start_value, change_in_value, duration) combinations exercised below.
CASES = [
    (0.0, 1.0, 1.0),
    (1, 10, 1),
    (-5.0, 20.0, 3.0),
    (100.0, -40.0, 0.25),
    (2.5, 7.5, 60),
]

EXPO_START = {
    "ease_in_expo": lambda c: c * 2 ** -10,
    "ease_in_out_expo": lambda c: c / 2 * 2 ** -10,
}
EXPO_END = {
    "ease_out_expo": lambda c: -c * 2 ** -10,
    "ease_in_out_expo": lambda c: -c / 2 * 2 ** -10,
}


class TestStartValue:
    """f(0, s, c, d) == s."""

    def test_curves_start_at_start_value(self):
        for name, func in EASINGS.items():
            if name in EXPO_START:
                continue
            for s, c, d in CASES:
                assert func(0, s, c, d) == pytest.approx(s, abs=1e-9), f"{name}{(s, c, d)}"

    def test_expo_start_offset_is_preserved(self):
        """Exponential ease-in curves start c * 2^-10 (halved for in-out) past s."""
        for name, offset in EXPO_START.items():
            for s, c, d in CASES:
                assert EASINGS[name](0, s, c, d) == pytest.approx(s + offset(c), abs=1e-12)

    def test_ease_in_expo_start_exact(self):
        assert EASINGS["ease_in_expo"](0, 1, 9, 9) == 1.0087890625


class TestEndValue:
    """f(d, s, c, d) == s + c."""

    def test_curves_end_at_end_value(self):
        for name, func in EASINGS.items():
            if name in EXPO_END or name == "ease_out_quad":
                continue
            for s, c, d in CASES:
                assert func(d, s, c, d) == pytest.approx(s + c, abs=1e-9), f"{name}{(s, c, d)}"

    def test_expo_end_offset_is_preserved(self):
        """Exponential ease-out curves stop c * 2^-10 (halved for in-out) short."""
        for name, offset in EXPO_END.items():
            for s, c, d in CASES:
                assert EASINGS[name](d, s, c, d) == pytest.approx(s + c + offset(c), abs=1e-12)

    def test_ease_out_expo_end_exact(self):
        assert EASINGS["ease_out_expo"](9, 1, 9, 9) == 9.9912109375

    def test_ease_out_quad_ends_mirrored(self):
        """The quadratic ease-out formula -c*t^2 + s ends at s - c."""
        for s, c, d in CASES:
            assert EASINGS["ease_out_quad"](d, s, c, d) == pytest.approx(s - c, abs=1e-9)


class TestMidpointSymmetry:
    """In-out curves pass through s + c/2 at half the duration."""

    def test_in_out_midpoint(self):
        in_out = [e for e in Easing if e.variant == "in_out"]
        assert len(in_out) == 7
        for easing in in_out:
            func = EASINGS[easing.value]
            for s, c, d in CASES:
                result = func(d / 2, s, c, d)
                assert result == pytest.approx(s + c / 2, abs=1e-9), f"{easing.value}{(s, c, d)}"

    def test_linear_midpoint(self):
        for s, c, d in CASES:
            assert EASINGS["linear"](d / 2, s, c, d) == pytest.approx(s + c / 2, abs=1e-9)


class TestMonotonicity:
    """Single-phase curves move in one direction over [0, d] for fixed-sign c."""

    def _samples(self, func, s, c, d, steps=50):
        return [func(d * i / steps, s, c, d) for i in range(steps + 1)]

    def test_single_phase_curves_are_monotonic(self):
        single_phase = [e for e in Easing if e.variant in (None, "in", "out")]
        assert len(single_phase) == 15
        for easing in single_phase:
            func = EASINGS[easing.value]
            for s, c, d in CASES:
                values = self._samples(func, s, c, d)
                pairs = list(zip(values, values[1:]))
                rising = all(b >= a - 1e-12 for a, b in pairs)
                falling = all(b <= a + 1e-12 for a, b in pairs)
                assert rising or falling, f"{easing.value}{(s, c, d)} is not monotonic"

    def test_direction_follows_sign_of_change(self):
        func = EASINGS["ease_in_cubic"]
        up = self._samples(func, 0.0, 1.0, 1.0)
        down = self._samples(func, 0.0, -1.0, 1.0)
        assert up == sorted(up)
        assert down == sorted(down, reverse=True)


class TestPurity:
    """Identical inputs give identical outputs."""

    def test_repeated_calls_are_identical(self):
        for name, func in EASINGS.items():
            first = [func(t / 10, 3.0, 4.0, 1.0) for t in range(11)]
            second = [func(t / 10, 3.0, 4.0, 1.0) for t in range(11)]
            assert first == second, name

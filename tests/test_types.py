"""Tests for the Easing catalogue and the dispatch table."""

import pytest
import tick_ease
from tick_ease import EASINGS, FAMILIES, VARIANTS, Easing, UnknownEasingError


class TestEasingCatalogue:
    """The enum lists every curve exactly once."""

    def test_twenty_two_curves(self):
        assert len(Easing) == 22

    def test_seven_families_times_three_plus_linear(self):
        assert len(FAMILIES) == 8
        assert len(VARIANTS) == 3
        assert len(Easing) == (len(FAMILIES) - 1) * len(VARIANTS) + 1

    def test_member_value_is_name(self):
        assert Easing.EASE_IN_OUT_CIRCULAR.value == "ease_in_out_circular"
        assert str(Easing.EASE_IN_EXPO) == "ease_in_expo"
        assert Easing.LINEAR == "linear"

    def test_family_and_variant(self):
        assert Easing.EASE_IN_OUT_QUAD.family == "quad"
        assert Easing.EASE_IN_OUT_QUAD.variant == "in_out"
        assert Easing.EASE_OUT_CIRCULAR.family == "circular"
        assert Easing.EASE_OUT_CIRCULAR.variant == "out"
        assert Easing.EASE_IN_SINE.variant == "in"
        assert Easing.LINEAR.family == "linear"
        assert Easing.LINEAR.variant is None

    def test_every_member_has_known_family_and_variant(self):
        for easing in Easing:
            assert easing.family in FAMILIES, easing
            if easing is not Easing.LINEAR:
                assert easing.variant in VARIANTS, easing

    def test_of_builds_members(self):
        assert Easing.of("cubic", "in_out") is Easing.EASE_IN_OUT_CUBIC
        assert Easing.of("expo", "in") is Easing.EASE_IN_EXPO
        assert Easing.of("linear") is Easing.LINEAR

    def test_of_every_family_and_variant(self):
        for family in FAMILIES[1:]:
            for variant in VARIANTS:
                assert Easing.of(family, variant).family == family

    def test_lookup_unknown_raises(self):
        with pytest.raises(UnknownEasingError):
            Easing.lookup("ease_in_elastic")

    def test_lookup_accepts_member(self):
        assert Easing.lookup(Easing.EASE_OUT_QUINTIC) is Easing.EASE_OUT_QUINTIC


class TestDispatchTable:
    """EASINGS has one function per member, exported under the same name."""

    def test_table_matches_enum(self):
        assert set(EASINGS) == {e.value for e in Easing}

    def test_values_are_callable(self):
        for name, func in EASINGS.items():
            assert callable(func), f"{name} is not callable"

    def test_function_names_match_keys(self):
        for name, func in EASINGS.items():
            assert func.__name__ == name

    def test_functions_are_exported(self):
        for name, func in EASINGS.items():
            assert getattr(tick_ease, name) is func
            assert name in tick_ease.__all__

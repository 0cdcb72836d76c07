"""Tests for two-stop gradients and opacity decay."""

import pytest

from activity_geometry.colors import decrease_opacity
from activity_geometry.errors import InvalidColorError, InvalidParameterError
from activity_geometry.gradient import (
    FillStrokeGradient,
    StopSide,
    TwoStopGradient,
    gradient_for_region,
)


class TestTwoStopGradient:
    def test_fresh_gradient_is_empty(self):
        gradient = TwoStopGradient()
        assert gradient.get_stop(StopSide.A) is None
        assert gradient.get_stop(StopSide.B) is None
        assert gradient.is_empty

    def test_first_stop_fills_sibling(self):
        gradient = TwoStopGradient()
        gradient.set_stop(StopSide.A, "#ff0000")
        assert gradient.get_stop(StopSide.A) == "#ff0000"
        assert gradient.get_stop(StopSide.B) == "#ff0000"

    def test_second_stop_leaves_sibling(self):
        gradient = TwoStopGradient()
        gradient.set_stop(StopSide.A, "#ff0000")
        gradient.set_stop(StopSide.B, "#0000ff")
        assert gradient.get_stop(StopSide.A) == "#ff0000"
        assert gradient.get_stop(StopSide.B) == "#0000ff"

    def test_integer_sides(self):
        gradient = TwoStopGradient()
        gradient.set_stop(1, "#00ff00")
        assert gradient.get_stop(0) == "#00ff00"
        assert gradient.stop_b == "#00ff00"

    def test_invalid_side_raises(self):
        with pytest.raises(InvalidParameterError):
            TwoStopGradient().set_stop(2, "#ffffff")

    def test_sibling(self):
        assert StopSide.A.sibling is StopSide.B
        assert StopSide.B.sibling is StopSide.A

    def test_clone_is_independent(self):
        gradient = TwoStopGradient(stop_a="#111111", stop_b="#222222")
        copy = gradient.clone()
        copy.set_stop(StopSide.A, "#333333")
        assert gradient.stop_a == "#111111"
        assert copy == TwoStopGradient(stop_a="#333333", stop_b="#222222")

    def test_derive_unhighlighted(self):
        gradient = TwoStopGradient(stop_a="#ff0000", stop_b="#00ff0080")
        faded = gradient.derive_unhighlighted(0.2)
        assert faded.stop_a == "#ff0000cc"
        assert faded.stop_b == "#00ff004d"
        # Original untouched
        assert gradient.stop_a == "#ff0000"

    def test_derive_unhighlighted_keeps_unset_stops(self):
        faded = TwoStopGradient(stop_a="#ff0000").derive_unhighlighted()
        assert faded.stop_a == "#ff0000cc"
        assert faded.stop_b is None


class TestFillStrokeGradient:
    def test_stroke_defaults_to_white(self):
        gradient = FillStrokeGradient()
        assert gradient.stroke_stops() == ("#fff", "#fff")

    def test_empty_fill_means_no_fill(self):
        assert FillStrokeGradient().fill_stops() is None

    def test_from_stops(self):
        gradient = FillStrokeGradient.from_stops(["#111111"], ["#222222", "#333333"])
        assert gradient.fill_stops() == ("#111111", None)
        assert gradient.stroke_stops() == ("#222222", "#333333")

    def test_from_stops_partial_stroke(self):
        gradient = FillStrokeGradient.from_stops(None, [None, "#000000"])
        assert gradient.fill_stops() is None
        assert gradient.stroke_stops() == ("#fff", "#000000")

    def test_derive_unhighlighted(self):
        gradient = FillStrokeGradient.from_stops(["#ff0000", "#0000ff"])
        faded = gradient.derive_unhighlighted(0.5)
        assert faded.fill_stops() == ("#ff000080", "#0000ff80")
        assert faded.stroke_stops() == ("#ffffff80", "#ffffff80")

    def test_clone_is_independent(self):
        gradient = FillStrokeGradient.from_stops(["#ff0000"])
        copy = gradient.clone()
        copy.fill.set_stop(StopSide.B, "#00ff00")
        assert gradient.fill.stop_b is None


class TestGradientForRegion:
    def test_highlighted_region_gets_copy(self):
        gradient = TwoStopGradient(stop_a="#ff6600", stop_b="#ffb399")
        result = gradient_for_region(gradient, highlighted=True)
        assert result == gradient
        assert result is not gradient

    def test_filler_region_is_faded(self):
        gradient = TwoStopGradient(stop_a="#ff6600", stop_b="#ffb399")
        result = gradient_for_region(gradient, highlighted=False, decay=0.2)
        assert result == TwoStopGradient(stop_a="#ff6600cc", stop_b="#ffb399cc")


class TestDecreaseOpacity:
    def test_opaque_hex(self):
        assert decrease_opacity("#ff0000", 0.2) == "#ff0000cc"

    def test_short_hex(self):
        assert decrease_opacity("#fff", 0.2) == "#ffffffcc"

    def test_named_color(self):
        assert decrease_opacity("red", 0.2) == "#ff0000cc"

    def test_alpha_clamped_at_zero(self):
        assert decrease_opacity("#0000001a", 0.5) == "#00000000"

    def test_zero_decay_keeps_color(self):
        assert decrease_opacity("#336699", 0.0) == "#336699ff"

    def test_css_rgba(self):
        assert decrease_opacity("rgba(10, 20, 30, 0.5)", 0.2) == "rgba(10, 20, 30, 0.3)"

    def test_css_rgb(self):
        assert decrease_opacity("rgb(1,2,3)", 0.2) == "rgba(1, 2, 3, 0.8)"

    def test_none_stays_none(self):
        assert decrease_opacity(None, 0.2) is None

    def test_unparseable_color_raises(self):
        with pytest.raises(InvalidColorError):
            decrease_opacity("not-a-color", 0.2)

    @pytest.mark.parametrize("amount", [-0.1, 1.5])
    def test_amount_out_of_range_raises(self, amount):
        with pytest.raises(InvalidParameterError):
            decrease_opacity("#ff0000", amount)

"""Tests for colour conversion, the wheel picker and the colour state operations."""

import pytest

from sprite_editor.models.color_model import ColorState
from sprite_editor.services.color_service import (
    ColorService,
    clamp_channel,
    colors_equal,
    from_wheel_click,
    hsb_to_rgb,
    parse_channel,
    render_color_wheel,
    rgb_to_hex,
)


class TestHsbToRgb:
    @pytest.mark.parametrize(
        "hue, expected",
        [
            (0, (255, 0, 0)),
            (120, (0, 255, 0)),
            (240, (0, 0, 255)),
            (60, (255, 255, 0)),
            (180, (0, 255, 255)),
            (300, (255, 0, 255)),
        ],
    )
    def test_primary_and_secondary_hues(self, hue, expected):
        assert hsb_to_rgb(hue, 1.0, 1.0) == expected

    def test_zero_brightness_is_black(self):
        assert hsb_to_rgb(200, 0.7, 0.0) == (0, 0, 0)

    def test_zero_saturation_is_gray(self):
        assert hsb_to_rgb(123, 0.0, 1.0) == (255, 255, 255)
        assert hsb_to_rgb(10, 0.0, 0.5) == (128, 128, 128)

    def test_channels_in_range(self):
        for hue in range(0, 360, 7):
            for channel in hsb_to_rgb(hue, 0.63, 0.81):
                assert 0 <= channel <= 255


class TestWheelClick:
    def test_outside_radius_rejected(self):
        assert from_wheel_click(60, 0, 55) is None

    def test_center_has_zero_saturation(self):
        hue, sat = from_wheel_click(0, 0, 55)
        assert sat == 0.0

    @pytest.mark.parametrize(
        "dx, dy, expected_hue",
        [(10, 0, 0.0), (0, 10, 90.0), (-10, 0, 180.0), (0, -10, 270.0)],
    )
    def test_hue_from_angle(self, dx, dy, expected_hue):
        hue, _sat = from_wheel_click(dx, dy, 50)
        assert hue == pytest.approx(expected_hue)
        assert 0 <= hue < 360

    def test_saturation_is_distance_ratio(self):
        _hue, sat = from_wheel_click(30, 40, 100)
        assert sat == pytest.approx(0.5)

    def test_edge_of_wheel_is_full_saturation(self):
        _hue, sat = from_wheel_click(55, 0, 55)
        assert sat == 1.0


class TestHelpers:
    def test_clamp_channel(self):
        assert clamp_channel(-4) == 0
        assert clamp_channel(300) == 255
        assert clamp_channel(17) == 17

    def test_parse_channel(self):
        assert parse_channel("128") == 128
        assert parse_channel(" 999 ") == 255
        assert parse_channel("abc") == 0
        assert parse_channel("") == 0
        assert parse_channel("1e999") == 255
        assert parse_channel("inf") == 255
        assert parse_channel("-inf") == 0
        assert parse_channel("nan") == 0
        assert parse_channel("-12.7") == 0
        assert parse_channel("12.7") == 12

    def test_rgb_to_hex(self):
        assert rgb_to_hex((255, 0, 16)) == "#FF0010"

    def test_colors_equal_treats_none_as_value(self):
        assert colors_equal(None, None)
        assert not colors_equal(None, (0, 0, 0))
        assert colors_equal((1, 2, 3), (1, 2, 3))
        assert not colors_equal((1, 2, 3), (1, 2, 4))


class TestColorWheelImage:
    def test_size_and_transparent_corners(self):
        wheel = render_color_wheel(120, 5)
        assert wheel.size == (120, 120)
        assert wheel.mode == "RGBA"
        assert wheel.getpixel((0, 0))[3] == 0
        assert wheel.getpixel((60, 60))[3] == 255

    def test_right_edge_is_reddish(self):
        r, g, b, a = render_color_wheel(120, 5).getpixel((110, 60))
        assert a == 255
        assert r > 200
        assert g < 40
        assert b < 40


class TestColorService:
    def test_wheel_overwrites_rgb(self):
        state = ColorState(rgb=(1, 2, 3))
        ColorService().apply_wheel(state, 120.0, 1.0)
        assert state.rgb == (0, 255, 0)
        assert state.hue == 120.0

    def test_brightness_recomputes_rgb(self):
        state = ColorState()
        ColorService().set_brightness(state, 0.0)
        assert state.rgb == (0, 0, 0)
        assert state.brightness == 0.0

    def test_channel_edit_keeps_hsb(self):
        state = ColorState(hue=200.0, saturation=0.3, brightness=0.4)
        ColorService().set_channel(state, "g", 77)
        assert state.rgb == (255, 77, 0)
        assert (state.hue, state.saturation, state.brightness) == (200.0, 0.3, 0.4)

    def test_unknown_channel_rejected(self):
        with pytest.raises(ValueError):
            ColorService().set_channel(ColorState(), "a", 1)

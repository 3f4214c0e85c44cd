"""
LightingConfig validation and LightingMode parsing
"""

import pytest

from quadlight.models.color import BLACK, Color
from quadlight.models.domain.lighting import LightingConfig
from quadlight.models.enums import LightingMode
from quadlight.models.lighting_params import BRIGHTNESS, SPEED


def test_defaults():
    config = LightingConfig()
    assert config.mode is LightingMode.SOLID
    assert config.colors == (Color.red(),)
    assert config.speed == SPEED.default
    assert config.brightness == BRIGHTNESS.default
    assert config.is_valid()


def test_colors_are_frozen_into_tuple():
    config = LightingConfig(colors=[Color.red(), Color.blue()])
    assert isinstance(config.colors, tuple)
    assert isinstance(config.with_changes(colors=[Color.green()]).colors, tuple)


def test_validated_clamps_numeric_fields():
    config = LightingConfig(mode=LightingMode.BLINK, speed=140, delay=-3, brightness=101)
    fixed = config.validated()
    assert (fixed.speed, fixed.delay, fixed.brightness) == (100, 0, 100)
    assert not config.is_valid()


def test_validated_truncates_palette_to_ten_colors():
    palette = tuple(Color(i, 0, 0) for i in range(12))
    assert len(LightingConfig(mode=LightingMode.CYCLE, colors=palette).validated().colors) == 10
    # solid keeps the palette; only synthesis is limited to the first color
    solid = LightingConfig(mode=LightingMode.SOLID, colors=palette[:3]).validated()
    assert solid.colors == palette[:3]
    assert solid.is_valid()
    assert solid.active_colors == (Color(0, 0, 0),)


def test_scaled_colors_use_only_active_colors():
    config = LightingConfig(colors=(Color.green(), Color.blue()), brightness=50)
    assert config.scaled_colors() == (Color(0, 127, 0),)
    assert config.with_changes(mode=LightingMode.BLINK).scaled_colors() == (Color(0, 127, 0), Color(0, 0, 127))


def test_primary_color_falls_back_to_black():
    assert LightingConfig(colors=()).primary_color == BLACK
    assert LightingConfig(colors=(Color.blue(), Color.red())).primary_color == Color.blue()


def test_scaled_colors_apply_brightness():
    config = LightingConfig(colors=(Color.green(),), brightness=50)
    assert config.scaled_colors() == (Color(0, 127, 0),)


def test_color_hexes():
    config = LightingConfig(colors=(Color(255, 128, 0), Color.blue()))
    assert config.color_hexes() == ["FF8000", "0000FF"]


class TestLightingMode:
    @pytest.mark.parametrize("name", ["cycle", "CYCLE", " Cycle "])
    def test_from_name_is_case_insensitive(self, name):
        assert LightingMode.from_name(name) is LightingMode.CYCLE

    def test_from_name_rejects_unknown(self):
        with pytest.raises(ValueError):
            LightingMode.from_name("strobe")

    def test_parameter_flags(self):
        assert not LightingMode.SOLID.uses_speed
        assert LightingMode.BLINK.uses_delay
        assert not LightingMode.CYCLE.uses_delay
        assert LightingMode.SOLID.max_colors == 1
        assert LightingMode.PULSE.max_colors == 10

"""
Color model: hex encoding, brightness scaling and integer gradients
"""

import pytest

from quadlight.models.color import BLACK, Color, gradient, next_gradient_step


class TestBrightnessScaling:
    def test_full_brightness_is_identity(self):
        c = Color(12, 200, 255)
        assert c.scaled(100) == c

    def test_zero_brightness_is_black(self):
        assert Color(12, 200, 255).scaled(0) == BLACK

    def test_half_brightness_truncates(self):
        # 255 * 50 / 100 = 127.5
        assert Color.green().scaled(50) == Color(0, 127, 0)

    def test_out_of_range_brightness_is_clamped(self):
        c = Color(100, 100, 100)
        assert c.scaled(150) == c
        assert c.scaled(-20) == BLACK


class TestHex:
    def test_to_hex_is_upper_case(self):
        assert Color(255, 128, 0).to_hex() == "FF8000"
        assert str(Color(1, 2, 3)) == "#010203"

    def test_from_hex_accepts_hash_and_lower_case(self):
        assert Color.from_hex("#ff8000") == Color(255, 128, 0)
        assert Color.from_hex("00FF00") == Color.green()

    def test_hex_round_trip(self):
        c = Color(18, 52, 86)
        assert Color.from_hex(c.to_hex()) == c

    @pytest.mark.parametrize("text", [
        "", "12345", "1234567", "GGGGGG", "#12 456",
        "0xFFFF", "FF_FFF", "+FFFFF", "-00001", "#0x1234",
    ])
    def test_malformed_hex_raises(self, text):
        with pytest.raises(ValueError):
            Color.from_hex(text)

    def test_parse_hex_returns_none_for_garbage(self):
        assert Color.parse_hex("nope") is None
        assert Color.parse_hex(None) is None
        assert Color.parse_hex(0xFF0000) is None


def test_channel_range_is_enforced():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0)


def test_black_preset_is_shared_constant():
    assert Color.black() is BLACK
    assert BLACK.is_black
    assert not Color.red().is_black


class TestGradient:
    def test_endpoints_are_exact(self):
        steps = gradient(Color.red(), Color.blue(), 12)
        assert len(steps) == 12
        assert steps[0] == Color.red()
        assert steps[-1] == Color.blue()

    @pytest.mark.parametrize("length", range(2, 132))
    def test_endpoints_are_exact_for_every_length(self, length):
        pairs = [
            (Color(255, 0, 128), Color(0, 255, 1)),
            (Color.white(), BLACK),
            (Color(3, 250, 7), Color(200, 1, 199)),
        ]
        for start, end in pairs:
            steps = gradient(start, end, length)
            assert len(steps) == length
            assert steps[0] == start
            assert steps[-1] == end

    def test_short_lengths_yield_start(self):
        assert gradient(Color.red(), Color.blue(), 1) == [Color.red()]
        assert gradient(Color.red(), Color.blue(), 0) == [Color.red()]

    def test_descending_channels_truncate_toward_zero(self):
        # 255 + trunc(-255 / 2) = 128; flooring would give 127
        steps = gradient(Color(255, 0, 0), BLACK, 3)
        assert steps[1] == Color(128, 0, 0)

    def test_ascending_channels_truncate(self):
        steps = gradient(BLACK, Color(0, 0, 255), 3)
        assert steps[1] == Color(0, 0, 127)

    def test_next_step_matches_second_gradient_item(self):
        white = Color.white()
        assert next_gradient_step(white, BLACK, 76) == gradient(white, BLACK, 76)[1]
        assert next_gradient_step(white, BLACK, 76) == Color(252, 252, 252)

    def test_next_step_of_single_length_is_start(self):
        assert next_gradient_step(Color.red(), BLACK, 1) == Color.red()

"""
Frame synthesis: per-mode generators and timing helpers
"""

import pytest

from quadlight.engine.frame_synthesis import (
    GENERATORS, MAX_CYCLE_FRAMES, speed_range, synthesize, transition_length
)
from quadlight.models.color import BLACK, Color, gradient
from quadlight.models.domain.lighting import LightingConfig
from quadlight.models.enums import LightingMode
from quadlight.models.frame import BLACK_FRAME, DEFAULT_SEQUENCE, Frame

RED = Color.red()
GREEN = Color.green()
BLUE = Color.blue()
WHITE = Color.white()


def test_every_mode_has_a_generator():
    assert set(GENERATORS) == set(LightingMode)


class TestTiming:
    def test_speed_range_endpoints(self):
        assert speed_range(1, 9, 100) == 1
        assert speed_range(1, 9, 0) == 9
        assert speed_range(21, 131, 50) == 76

    def test_transition_length_few_colors(self):
        assert transition_length(2, 100) == 12
        assert transition_length(2, 0) == 128

    def test_transition_length_capped_for_many_colors(self):
        # 128 * 10 > 720, so the range shrinks to 12..72
        assert transition_length(10, 0) == 72
        assert transition_length(10, 0) * 10 <= MAX_CYCLE_FRAMES


class TestSolid:
    def test_brightness_applied_once(self):
        frames = synthesize(LightingConfig(mode=LightingMode.SOLID, colors=(GREEN,), brightness=50))
        assert frames == (Frame(Color(0, 127, 0), Color(0, 127, 0)),)


class TestBlink:
    def test_two_colors_with_gap(self):
        config = LightingConfig(mode=LightingMode.BLINK, colors=(RED, BLUE), speed=99, delay=2)
        frames = synthesize(config)
        expected = [RED, RED, BLACK, BLACK, BLUE, BLUE, BLACK, BLACK]
        assert [f.upper for f in frames] == expected
        assert all(f.upper == f.lower for f in frames)

    def test_zero_delay_has_no_black_frames(self):
        frames = synthesize(LightingConfig(mode=LightingMode.BLINK, colors=(RED,), speed=90, delay=0))
        assert len(frames) == 11
        assert BLACK_FRAME not in frames


class TestCycle:
    def test_two_colors_at_full_speed(self):
        frames = synthesize(LightingConfig(mode=LightingMode.CYCLE, colors=(RED, GREEN), speed=100))
        assert len(frames) == 24
        assert frames[0].upper == RED
        assert frames[11].upper == GREEN
        assert frames[12].upper == GREEN
        assert frames[23].upper == RED
        assert all(f.upper == f.lower for f in frames)

    def test_single_color_holds(self):
        frames = synthesize(LightingConfig(mode=LightingMode.CYCLE, colors=(BLUE,), speed=100))
        assert len(frames) == 12
        assert set(frames) == {Frame.uniform(BLUE)}


class TestWave:
    def test_lower_zone_runs_one_color_ahead(self):
        config = LightingConfig(mode=LightingMode.WAVE, colors=(RED, GREEN, BLUE), speed=50)
        frames = synthesize(config)
        length = transition_length(3, 50)

        upper = gradient(RED, GREEN, length) + gradient(GREEN, BLUE, length) + gradient(BLUE, RED, length)
        lower = gradient(GREEN, BLUE, length) + gradient(BLUE, RED, length) + gradient(RED, GREEN, length)

        assert len(frames) == min(len(upper), len(lower))
        assert [f.upper for f in frames] == upper[:len(frames)]
        assert [f.lower for f in frames] == lower[:len(frames)]

    def test_single_color_behaves_like_cycle(self):
        config = LightingConfig(mode=LightingMode.WAVE, colors=(RED,), speed=100)
        assert synthesize(config) == synthesize(config.with_changes(mode=LightingMode.CYCLE))


class TestLightning:
    def test_single_white_flash(self):
        frames = synthesize(LightingConfig(mode=LightingMode.LIGHTNING, colors=(WHITE,), speed=50))
        # blank 5, fade up 6, fade down 76
        assert len(frames) == 87

        upper = [f.upper for f in frames]
        lower = [f.lower for f in frames]

        assert upper[0:6] == gradient(BLACK, WHITE, 6)
        assert lower[0:5] == [BLACK] * 5
        assert lower[5:11] == upper[0:6]
        assert upper[6] == Color(252, 252, 252)
        assert upper[-5:] == [BLACK] * 5
        assert lower[-1] == BLACK

    def test_fade_down_skips_the_peak(self):
        frames = synthesize(LightingConfig(mode=LightingMode.LIGHTNING, colors=(WHITE,), speed=50))
        peaks = [i for i, f in enumerate(frames) if f.upper == WHITE]
        assert peaks == [5]

    def test_tracks_stay_aligned_for_many_colors(self):
        frames = synthesize(LightingConfig(mode=LightingMode.LIGHTNING, colors=(RED, GREEN, BLUE), speed=100))
        # per color: blank 1 + up 3 + down 21
        assert len(frames) == 3 * 25


class TestPulse:
    def test_zones_move_together(self):
        frames = synthesize(LightingConfig(mode=LightingMode.PULSE, colors=(WHITE,), speed=50))
        assert len(frames) == 87
        assert all(f.upper == f.lower for f in frames)
        assert frames[-5:] == (BLACK_FRAME,) * 5


class TestFallback:
    @pytest.mark.parametrize("mode", list(LightingMode))
    def test_no_colors_yields_black_frame(self, mode):
        assert synthesize(LightingConfig(mode=mode, colors=())) == DEFAULT_SEQUENCE

    def test_empty_generator_output_yields_black_frame(self):
        # 101 - 101 = 0 frames per color and no delay
        config = LightingConfig(mode=LightingMode.BLINK, colors=(RED,), speed=101, delay=0)
        assert synthesize(config) == DEFAULT_SEQUENCE

    @pytest.mark.parametrize("mode", list(LightingMode))
    @pytest.mark.parametrize("speed", [0, 37, 100])
    def test_valid_configs_never_produce_empty_sequences(self, mode, speed):
        config = LightingConfig(mode=mode, colors=(RED, GREEN, BLUE), speed=speed, delay=0).validated()
        frames = synthesize(config)
        assert isinstance(frames, tuple)
        assert len(frames) >= 1

    def test_zero_brightness_is_all_black(self):
        frames = synthesize(LightingConfig(mode=LightingMode.CYCLE, colors=(RED, BLUE), brightness=0))
        assert set(frames) == {BLACK_FRAME}

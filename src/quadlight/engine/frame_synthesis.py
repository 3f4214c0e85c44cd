"""
Frame synthesis - expands a LightingConfig into a periodic FrameSequence.

One pure generator per LightingMode. Generators receive colors that already
have brightness applied and return plain lists; synthesize() dispatches,
falls back to a single black frame when a generator produces nothing, and
freezes the result into a tuple.

Timing is expressed in frames, not seconds: the streaming worker reads as
fast as the device accepts writes, so a higher speed means fewer frames.
"""

from typing import Callable, Dict, List, Sequence

from quadlight.models.color import Color, BLACK, gradient, next_gradient_step
from quadlight.models.domain.lighting import LightingConfig
from quadlight.models.enums import LightingMode
from quadlight.models.frame import Frame, FrameSequence, DEFAULT_SEQUENCE

# Cycle/Wave transition bounds (frames per color pair)
MIN_TRANSITION = 12
MAX_TRANSITION = 128
# Upper bound on frames per full cycle when many colors are selected
MAX_CYCLE_FRAMES = 720

# Lightning/Pulse segment bounds: (frames at speed 100, frames at speed 0)
BLANK_RANGE = (1, 9)
FADE_UP_RANGE = (3, 10)
FADE_DOWN_RANGE = (21, 131)

Generator = Callable[[Sequence[Color], int, int], List[Frame]]


# ------------------------------------------------------------
# Timing helpers
# ------------------------------------------------------------

def speed_range(minimum: int, maximum: int, speed: int) -> int:
    """Map speed 0-100 onto [maximum, minimum]: speed 100 gives minimum."""
    return minimum + (maximum - minimum) * (100 - speed) // 100


def transition_length(color_count: int, speed: int) -> int:
    """
    Frames per color-pair transition for Cycle and Wave.

    Few colors at low speed get up to MAX_TRANSITION frames; with many colors
    the per-pair length shrinks so a full cycle stays within MAX_CYCLE_FRAMES.
    """
    tr = speed_range(MIN_TRANSITION, MAX_TRANSITION, speed)
    if tr * color_count > MAX_CYCLE_FRAMES:
        tr = speed_range(MIN_TRANSITION, MAX_CYCLE_FRAMES // color_count, speed)
    return tr


def _chained_gradients(colors: Sequence[Color], length: int) -> List[Color]:
    """Gradients between consecutive colors, wrapping from last to first."""
    track: List[Color] = []
    count = len(colors)
    for i in range(count):
        track.extend(gradient(colors[i], colors[(i + 1) % count], length))
    return track


# ------------------------------------------------------------
# Generators
# ------------------------------------------------------------

def generate_solid(colors: Sequence[Color], speed: int = 0, delay: int = 0) -> List[Frame]:
    color = colors[0] if colors else BLACK
    return [Frame.uniform(color)]


def generate_blink(colors: Sequence[Color], speed: int, delay: int) -> List[Frame]:
    """Each color held for 101 - speed frames, then `delay` black frames."""
    frames: List[Frame] = []
    color_segment = 101 - speed
    for color in colors:
        frames.extend([Frame.uniform(color)] * color_segment)
        frames.extend([Frame.black()] * delay)
    return frames


def generate_cycle(colors: Sequence[Color], speed: int, delay: int = 0) -> List[Frame]:
    """Both zones fade through every color pair in order."""
    if not colors:
        return []
    length = transition_length(len(colors), speed)
    return [Frame.uniform(c) for c in _chained_gradients(colors, length)]


def generate_wave(colors: Sequence[Color], speed: int, delay: int = 0) -> List[Frame]:
    """
    Cycle with the lower zone one color ahead of the upper zone.

    The lower track is built from the colors rotated left by one. Tracks are
    zipped to the shorter one; any tail of the longer track is dropped.
    """
    if len(colors) < 2:
        return generate_cycle(colors, speed)

    length = transition_length(len(colors), speed)
    upper = _chained_gradients(colors, length)
    shifted = list(colors[1:]) + [colors[0]]
    lower = _chained_gradients(shifted, length)

    return [Frame(u, l) for u, l in zip(upper, lower)]


def _generate_flashes(colors: Sequence[Color], speed: int, synchronous: bool) -> List[Frame]:
    """
    Shared Lightning/Pulse routine.

    Every color fades up from black, then fades down starting one step below
    the peak. Lightning offsets the zones with a blank lead-in on the lower
    track and a blank tail on the upper one; Pulse pauses both together.
    The shorter track is padded with its own last color.
    """
    if not colors:
        return []

    blank_size = speed_range(*BLANK_RANGE, speed)
    up_size = speed_range(*FADE_UP_RANGE, speed)
    down_size = speed_range(*FADE_DOWN_RANGE, speed)
    blank = [BLACK] * blank_size

    upper: List[Color] = []
    lower: List[Color] = []

    for color in colors:
        if not synchronous:
            lower.extend(blank)

        fade_up = gradient(BLACK, color, up_size)
        upper.extend(fade_up)
        lower.extend(fade_up)

        fade_down = gradient(next_gradient_step(color, BLACK, down_size), BLACK, down_size)
        upper.extend(fade_down)
        lower.extend(fade_down)

        upper.extend(blank)
        if synchronous:
            lower.extend(blank)

    count = max(len(upper), len(lower))
    upper.extend([upper[-1]] * (count - len(upper)))
    lower.extend([lower[-1]] * (count - len(lower)))

    return [Frame(u, l) for u, l in zip(upper, lower)]


def generate_lightning(colors: Sequence[Color], speed: int, delay: int = 0) -> List[Frame]:
    return _generate_flashes(colors, speed, synchronous=False)


def generate_pulse(colors: Sequence[Color], speed: int, delay: int = 0) -> List[Frame]:
    return _generate_flashes(colors, speed, synchronous=True)


GENERATORS: Dict[LightingMode, Generator] = {
    LightingMode.SOLID: generate_solid,
    LightingMode.BLINK: generate_blink,
    LightingMode.CYCLE: generate_cycle,
    LightingMode.WAVE: generate_wave,
    LightingMode.LIGHTNING: generate_lightning,
    LightingMode.PULSE: generate_pulse,
}


def synthesize(config: LightingConfig) -> FrameSequence:
    """
    Build the full frame sequence for a configuration.

    Never returns an empty sequence: no colors, or a generator that yields
    nothing, collapses to a single black frame.
    """
    if not config.colors:
        return DEFAULT_SEQUENCE

    generator = GENERATORS[config.mode]
    frames = generator(config.scaled_colors(), config.speed, config.delay)
    return tuple(frames) if frames else DEFAULT_SEQUENCE

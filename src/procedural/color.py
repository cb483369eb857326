"""
Color values, blending and palette picks. Our algorithms only.
Blending is plain per-channel linear interpolation on 0-255 channels (no gamma).
"""
import colorsys
from typing import NamedTuple, Sequence

from ..random_utils import RandomStream
from .data.palettes import DARK_BACKGROUND, DARK_PALETTE, LIGHT_BACKGROUND, LIGHT_PALETTE


class Color(NamedTuple):
    """RGBA, each channel 0-255."""
    red: int
    green: int
    blue: int
    alpha: int = 255


TRANSPARENT = Color(0, 0, 0, 0)
WHITE = Color(255, 255, 255)


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(value)))


def _lerp_channel(a: int, b: int, ratio: float) -> int:
    # Round half up so 0.5 steps do not depend on banker's rounding
    return _clamp_channel(a * (1.0 - ratio) + b * ratio + 0.5)


def _clamp_ratio(ratio: float) -> float:
    return max(0.0, min(1.0, float(ratio)))


def to_color(value: Sequence[int]) -> Color:
    """(r, g, b) or (r, g, b, a) tuple → Color."""
    if len(value) == 3:
        return Color(value[0], value[1], value[2])
    return Color(value[0], value[1], value[2], value[3])


def blend(c1: Color, c2: Color, ratio: float) -> Color:
    """RGB blend of two opaque colors; the result is opaque."""
    ratio = _clamp_ratio(ratio)
    if ratio == 0.0:
        return Color(c1[0], c1[1], c1[2])
    if ratio == 1.0:
        return Color(c2[0], c2[1], c2[2])
    return Color(
        _lerp_channel(c1[0], c2[0], ratio),
        _lerp_channel(c1[1], c2[1], ratio),
        _lerp_channel(c1[2], c2[2], ratio),
    )


def blend_rgba(c1: Color, c2: Color, ratio: float) -> Color:
    """
    Blend including the alpha channel. Equals blend() when both inputs are opaque;
    glow stops use it so translucent inputs stay translucent.
    """
    ratio = _clamp_ratio(ratio)
    if ratio == 0.0:
        return to_color(c1)
    if ratio == 1.0:
        return to_color(c2)
    c1, c2 = to_color(c1), to_color(c2)
    return Color(*(_lerp_channel(a, b, ratio) for a, b in zip(c1, c2)))


def with_alpha(color: Color, alpha: int) -> Color:
    """Replace alpha, clamped to 0-255."""
    return Color(color[0], color[1], color[2], max(0, min(255, int(alpha))))


def hsv_to_color(hue: float, saturation: float, value: float) -> Color:
    """Hue in degrees, saturation/value in 0-1."""
    r, g, b = colorsys.hsv_to_rgb((hue % 360.0) / 360.0, saturation, value)
    return Color(_clamp_channel(r * 255.0), _clamp_channel(g * 255.0), _clamp_channel(b * 255.0))


def palette_for(is_dark: bool) -> tuple[Color, ...]:
    table = DARK_PALETTE if is_dark else LIGHT_PALETTE
    return tuple(to_color(c) for c in table)


def background_for(is_dark: bool) -> Color:
    return to_color(DARK_BACKGROUND if is_dark else LIGHT_BACKGROUND)


def pick_colors(palette: Sequence[Color], n: int, stream: RandomStream) -> list[Color]:
    """
    n distinct palette entries: shuffle the index order with the stream, take the first n.
    The same color may come back from a later pick.
    """
    if n < 0 or n > len(palette):
        raise ValueError(f"cannot pick {n} colors from a palette of {len(palette)}")
    indices = list(range(len(palette)))
    stream.shuffle(indices)
    return [palette[i] for i in indices[:n]]


# HSV ranges: (saturation base, span, value base, span) per theme
_BASE_RANGES = {True: (0.3, 0.5, 0.05, 0.15), False: (0.05, 0.2, 0.85, 0.15)}
_ACCENT_RANGES = {True: (0.4, 0.5, 0.15, 0.35), False: (0.15, 0.35, 0.7, 0.3)}


def _sample_hsv(stream: RandomStream, ranges: tuple[float, float, float, float]) -> Color:
    s_base, s_span, v_base, v_span = ranges
    hue = stream.next_float() * 360.0
    saturation = stream.uniform(s_base, s_span)
    value = stream.uniform(v_base, v_span)
    return hsv_to_color(hue, saturation, value)


def random_base_color(stream: RandomStream, is_dark: bool) -> Color:
    """Background tone: deep and dark, or soft and light."""
    return _sample_hsv(stream, _BASE_RANGES[bool(is_dark)])


def random_accent_color(stream: RandomStream, is_dark: bool) -> Color:
    """Accent tone: brighter and more saturated than the base for the same theme."""
    return _sample_hsv(stream, _ACCENT_RANGES[bool(is_dark)])

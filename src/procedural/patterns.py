"""
Curated pattern pack: gradients and glows over fixed theme palettes.
Each pattern is a pure procedure of (raster, size, palette, stream, theme) and writes only
through the raster's fill primitives. Draw order is the stream order; never reorder draws.
"""
import math
from typing import Sequence

from ..random_utils import RandomStream
from .color import Color, background_for, blend, blend_rgba, pick_colors, with_alpha
from .raster import Raster, linear, radial


def _axis_through_centre(width: int, height: int, angle: float) -> tuple[tuple[float, float], tuple[float, float]]:
    """Gradient endpoints on a line through the canvas centre, spanning the diagonal."""
    cx, cy = width / 2.0, height / 2.0
    half = math.hypot(width, height) / 2.0
    dx, dy = math.cos(angle) * half, math.sin(angle) * half
    return (cx - dx, cy - dy), (cx + dx, cy + dy)


def _random_angle(stream: RandomStream) -> float:
    return stream.next_float() * 2.0 * math.pi


def layered_linear_gradients(
    raster: Raster, width: int, height: int, palette: Sequence[Color], stream: RandomStream, is_dark: bool
) -> None:
    """4-6 full-canvas linear gradients at random angles, each translucent over the last."""
    layers = 4 + stream.next_int(3)
    for _ in range(layers):
        colors = pick_colors(palette, 2 + stream.next_int(2), stream)
        start, end = _axis_through_centre(width, height, _random_angle(stream))
        alpha = 160 + stream.next_int(80)
        raster.fill_rect(0, 0, width, height, linear(start, end, colors, alpha=alpha))


def radial_orbs(
    raster: Raster, width: int, height: int, palette: Sequence[Color], stream: RandomStream, is_dark: bool
) -> None:
    """Soft base gradient, then 5-9 glowing orbs that fade out to transparent."""
    background = background_for(is_dark)
    base = pick_colors(palette, 2, stream)
    raster.fill_rect(
        0, 0, width, height,
        linear((0, 0), (width, height), base, alpha=120 + stream.next_int(60)),
    )
    orbs = 5 + stream.next_int(5)
    for _ in range(orbs):
        color = pick_colors(palette, 1, stream)[0]
        cx = stream.next_float() * width
        cy = stream.next_float() * height
        radius = min(width, height) * stream.uniform(0.2, 0.5)
        toward_bg = blend(color, background, 0.5)
        stops = (color, toward_bg, with_alpha(toward_bg, 0))
        alpha = 180 + stream.next_int(60)
        raster.fill_circle(cx, cy, radius, radial((cx, cy), radius, stops, (0.0, 0.55, 1.0), alpha=alpha))


def diagonal_flow(
    raster: Raster, width: int, height: int, palette: Sequence[Color], stream: RandomStream, is_dark: bool
) -> None:
    """Three stacked full-canvas gradients: corner to corner, crossing, then a rotated wash."""
    primary = pick_colors(palette, 3 + stream.next_int(2), stream)
    raster.fill_rect(0, 0, width, height, linear((0, 0), (width, height), primary))

    secondary = pick_colors(palette, 2 + stream.next_int(2), stream)
    raster.fill_rect(
        0, 0, width, height,
        linear((width, 0), (0, height), secondary, alpha=110 + stream.next_int(50)),
    )

    tertiary = pick_colors(palette, 2, stream)
    start, end = _axis_through_centre(width, height, _random_angle(stream))
    raster.fill_rect(0, 0, width, height, linear(start, end, tertiary, alpha=60 + stream.next_int(50)))


def aurora_waves(
    raster: Raster, width: int, height: int, palette: Sequence[Color], stream: RandomStream, is_dark: bool
) -> None:
    """Faint vertical wash, then 4-6 horizontal bands that fade into the background."""
    background = background_for(is_dark)
    clear = with_alpha(background, 0)
    wash = pick_colors(palette, 2, stream)
    raster.fill_rect(0, 0, width, height, linear((0, 0), (0, height), wash, alpha=70 + stream.next_int(40)))

    bands = 4 + stream.next_int(3)
    for _ in range(bands):
        color = pick_colors(palette, 1, stream)[0]
        centre_y = stream.next_float() * height
        band_height = height * stream.uniform(0.15, 0.25)
        top, bottom = centre_y - band_height / 2.0, centre_y + band_height / 2.0
        raster.fill_rect(
            0, top, width, bottom,
            linear((0, top), (0, bottom), (clear, color, color, clear), (0.0, 0.3, 0.7, 1.0),
                   alpha=100 + stream.next_int(80)),
        )
        # Horizontal shimmer, clipped to the band
        raster.fill_rect(
            0, top, width, bottom,
            linear((0, centre_y), (width, centre_y), (clear, color, clear),
                   alpha=60 + stream.next_int(60)),
        )


def mesh_glow(
    raster: Raster, width: int, height: int, palette: Sequence[Color], stream: RandomStream, is_dark: bool
) -> None:
    """Strong three-color base at a random angle with 6-10 glow blobs on top."""
    background = background_for(is_dark)
    base = pick_colors(palette, 3, stream)
    start, end = _axis_through_centre(width, height, _random_angle(stream))
    raster.fill_rect(0, 0, width, height, linear(start, end, base, alpha=220 + stream.next_int(35)))

    blobs = 6 + stream.next_int(5)
    for _ in range(blobs):
        color = pick_colors(palette, 1, stream)[0]
        cx = stream.next_float() * width
        cy = stream.next_float() * height
        radius = max(width, height) * stream.uniform(0.15, 0.35)
        # RGBA blend keeps a translucent palette entry translucent in the mid stop
        stops = (color, blend_rgba(color, background, 0.6), with_alpha(background, 0))
        alpha = 140 + stream.next_int(80)
        raster.fill_circle(cx, cy, radius, radial((cx, cy), radius, stops, (0.0, 0.5, 1.0), alpha=alpha))


CURATED_PATTERNS = (
    ("layered_linear_gradients", layered_linear_gradients),
    ("radial_orbs", radial_orbs),
    ("diagonal_flow", diagonal_flow),
    ("aurora_waves", aurora_waves),
    ("mesh_glow", mesh_glow),
)

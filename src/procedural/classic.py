"""
Classic pattern pack: colors sampled from HSV ranges per theme instead of fixed palettes.
Same contract as the curated pack; the palette argument is accepted and ignored.
"""
from typing import Sequence

from ..random_utils import RandomStream
from .color import (
    TRANSPARENT,
    WHITE,
    Color,
    blend,
    random_accent_color,
    random_base_color,
    with_alpha,
)
from .raster import Raster, linear, radial, solid


def multi_gradient(
    raster: Raster, width: int, height: int, palette: Sequence[Color], stream: RandomStream, is_dark: bool
) -> None:
    """Base gradient, a crossing overlay, and a subtle radial highlight."""
    base = random_base_color(stream, is_dark)
    accent = random_accent_color(stream, is_dark)
    mid = blend(base, accent, 0.5)
    raster.fill_rect(0, 0, width, height, linear((0, 0), (width, height), (base, mid)))

    alpha = 100 + stream.next_int(80)
    overlay = (with_alpha(accent, alpha), with_alpha(random_accent_color(stream, is_dark), alpha))
    raster.fill_rect(0, 0, width, height, linear((width, 0), (0, height), overlay))

    cx = width * stream.uniform(0.2, 0.6)
    cy = height * stream.uniform(0.2, 0.6)
    radius = max(width, height) * stream.uniform(0.3, 0.4)
    highlight = with_alpha(WHITE if is_dark else accent, 30 + stream.next_int(40))
    raster.fill_rect(0, 0, width, height, radial((cx, cy), radius, (highlight, TRANSPARENT)))


def concentric_circles(
    raster: Raster, width: int, height: int, palette: Sequence[Color], stream: RandomStream, is_dark: bool
) -> None:
    """Rings radiating from an off-centre point, drawn outermost first."""
    base = random_base_color(stream, is_dark)
    accent = random_accent_color(stream, is_dark)
    raster.fill(base)

    cx = width * stream.uniform(0.3, 0.4)
    cy = height * stream.uniform(0.3, 0.4)
    max_radius = max(width, height) * 1.2
    rings = 8 + stream.next_int(12)
    for i in range(rings, -1, -1):
        fraction = i / rings
        raster.fill_circle(cx, cy, max_radius * fraction, solid(blend(base, accent, fraction)))

    gx = width * stream.uniform(0.1, 0.8)
    gy = height * stream.uniform(0.1, 0.8)
    glow = with_alpha(random_accent_color(stream, is_dark), 40 + stream.next_int(50))
    raster.fill_rect(0, 0, width, height, radial((gx, gy), max(width, height) * 0.6, (glow, TRANSPARENT)))


def diagonal_stripes(
    raster: Raster, width: int, height: int, palette: Sequence[Color], stream: RandomStream, is_dark: bool
) -> None:
    """Translucent parallelogram stripes leaning across a soft gradient."""
    base = random_base_color(stream, is_dark)
    accent = random_accent_color(stream, is_dark)
    raster.fill_rect(0, 0, width, height, linear((0, 0), (width, height), (base, blend(base, accent, 0.3))))

    stripes = 10 + stream.next_int(15)
    stripe_width = (width + height) / stripes
    thickness = stripe_width * 0.7
    alternate = blend(base, accent, 0.7)
    for i in range(stripes + 1):
        offset = i * stripe_width
        alpha = 20 + stream.next_int(60)
        color = with_alpha(accent if i % 2 == 0 else alternate, alpha)
        raster.fill_polygon(
            [
                (offset - thickness, 0),
                (offset, 0),
                (offset - height, height),
                (offset - height - thickness, height),
            ],
            solid(color),
        )


def mesh_gradient(
    raster: Raster, width: int, height: int, palette: Sequence[Color], stream: RandomStream, is_dark: bool
) -> None:
    """Overlapping radial blobs on a flat base."""
    base = random_base_color(stream, is_dark)
    raster.fill(base)

    blobs = 3 + stream.next_int(4)
    for _ in range(blobs):
        cx = stream.next_float() * width
        cy = stream.next_float() * height
        radius = max(width, height) * stream.uniform(0.3, 0.5)
        color = with_alpha(random_accent_color(stream, is_dark), 60 + stream.next_int(100))
        raster.fill_rect(0, 0, width, height, radial((cx, cy), radius, (color, TRANSPARENT)))


def geometric_shapes(
    raster: Raster, width: int, height: int, palette: Sequence[Color], stream: RandomStream, is_dark: bool
) -> None:
    """Faint circles and triangles scattered over a vertical gradient."""
    base = random_base_color(stream, is_dark)
    accent = random_accent_color(stream, is_dark)
    raster.fill_rect(0, 0, width, height, linear((0, 0), (0, height), (base, blend(base, accent, 0.4))))

    shapes = 5 + stream.next_int(8)
    short_side = min(width, height)
    for _ in range(shapes):
        alpha = 15 + stream.next_int(55)
        tint = accent if stream.next_bool() else random_accent_color(stream, is_dark)
        paint = solid(with_alpha(tint, alpha))
        if stream.next_bool():
            cx = stream.next_float() * width
            cy = stream.next_float() * height
            radius = short_side * stream.uniform(0.05, 0.3)
            raster.fill_circle(cx, cy, radius, paint)
        else:
            x1 = stream.next_float() * width
            y1 = stream.next_float() * height
            size = short_side * stream.uniform(0.1, 0.35)
            raster.fill_polygon(
                [
                    (x1, y1),
                    (x1 + size, y1 + size * stream.uniform(0.5, 1.0)),
                    (x1 - size * 0.5, y1 + size),
                ],
                paint,
            )


CLASSIC_PATTERNS = (
    ("multi_gradient", multi_gradient),
    ("concentric_circles", concentric_circles),
    ("diagonal_stripes", diagonal_stripes),
    ("mesh_gradient", mesh_gradient),
    ("geometric_shapes", geometric_shapes),
)

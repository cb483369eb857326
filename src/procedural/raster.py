"""
Raster canvas: an RGBA pixel buffer with fill primitives (rect, circle, polygon).
Each draw samples coverage at pixel centres and composites source-over.
Uses numpy for shading and Pillow only to scan-convert polygons and export images.
"""
import hashlib
import math
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np
from PIL import Image, ImageDraw

from .color import Color, to_color

Point = tuple[float, float]


class InvalidDimensionsError(ValueError):
    """Width or height is not a positive integer."""
    def __init__(self, width: int, height: int):
        super().__init__(f"Invalid raster dimensions {width}x{height}: both must be > 0")
        self.width = width
        self.height = height


@dataclass(frozen=True)
class Solid:
    color: Color


@dataclass(frozen=True)
class LinearGradient:
    """Gradient along start → end; clamped beyond either end."""
    start: Point
    end: Point
    colors: tuple[Color, ...]
    positions: tuple[float, ...] | None = None


@dataclass(frozen=True)
class RadialGradient:
    """Gradient from center (t=0) to radius (t=1); clamped beyond the radius."""
    center: Point
    radius: float
    colors: tuple[Color, ...]
    positions: tuple[float, ...] | None = None


Shader = Union[Solid, LinearGradient, RadialGradient]


@dataclass(frozen=True)
class Paint:
    """Shader plus an overall alpha multiplier (0-255)."""
    shader: Shader
    alpha: int = 255


def solid(color: Color, alpha: int = 255) -> Paint:
    return Paint(Solid(to_color(color)), alpha)


def linear(
    start: Point,
    end: Point,
    colors: Sequence[Color],
    positions: Sequence[float] | None = None,
    *,
    alpha: int = 255,
) -> Paint:
    return Paint(
        LinearGradient(start, end, tuple(to_color(c) for c in colors), _positions(colors, positions)),
        alpha,
    )


def radial(
    center: Point,
    radius: float,
    colors: Sequence[Color],
    positions: Sequence[float] | None = None,
    *,
    alpha: int = 255,
) -> Paint:
    return Paint(
        RadialGradient(center, radius, tuple(to_color(c) for c in colors), _positions(colors, positions)),
        alpha,
    )


def _positions(colors: Sequence[Color], positions: Sequence[float] | None) -> tuple[float, ...] | None:
    if not colors:
        raise ValueError("gradient needs at least one color")
    if positions is None:
        return None
    if len(positions) != len(colors):
        raise ValueError(
            f"gradient has {len(colors)} colors but {len(positions)} stop positions"
        )
    return tuple(float(p) for p in positions)


def _sample_stops(
    t: np.ndarray, colors: tuple[Color, ...], positions: tuple[float, ...] | None
) -> np.ndarray:
    """Per-pixel RGBA (float32, 0-255) for gradient parameter t."""
    table = np.asarray(colors, dtype=np.float64)
    if positions is None:
        stops = np.linspace(0.0, 1.0, len(colors)) if len(colors) > 1 else np.zeros(1)
    else:
        stops = np.asarray(positions, dtype=np.float64)
    out = np.empty(t.shape + (4,), dtype=np.float32)
    for ch in range(4):
        out[..., ch] = np.interp(t, stops, table[:, ch])
    return out


def _shade(shader: Shader, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """Evaluate the shader at pixel centres xs (columns) × ys (rows)."""
    shape = (ys.size, xs.size)
    if isinstance(shader, Solid):
        rgba = np.asarray(shader.color, dtype=np.float32)
        return np.broadcast_to(rgba, shape + (4,))
    if isinstance(shader, LinearGradient):
        sx, sy = shader.start
        dx, dy = shader.end[0] - sx, shader.end[1] - sy
        denom = dx * dx + dy * dy
        if denom <= 0:
            t = np.zeros(shape, dtype=np.float32)
        else:
            t = ((xs - sx) * dx)[None, :] + ((ys - sy) * dy)[:, None]
            t = np.clip(t / np.float32(denom), 0.0, 1.0)
        return _sample_stops(t, shader.colors, shader.positions)
    if isinstance(shader, RadialGradient):
        cx, cy = shader.center
        if shader.radius <= 0:
            t = np.ones(shape, dtype=np.float32)
        else:
            dist = np.sqrt(((xs - cx) ** 2)[None, :] + ((ys - cy) ** 2)[:, None])
            t = np.clip(dist / np.float32(shader.radius), 0.0, 1.0)
        return _sample_stops(t, shader.colors, shader.positions)
    raise TypeError(f"Unknown shader: {shader!r}")


def _centre_span(lo: float, hi: float, limit: int) -> tuple[int, int]:
    """Index range of pixels whose centres fall in [lo, hi), clipped to [0, limit)."""
    start = max(0, math.ceil(lo - 0.5))
    stop = min(limit, math.ceil(hi - 0.5))
    return start, max(start, stop)


class Raster:
    """
    Mutable width × height RGBA buffer (row-major, uint8), starting fully transparent.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(width, height)
        self.width = int(width)
        self.height = int(height)
        self.pixels = np.zeros((height, width, 4), dtype=np.uint8)

    def fill(self, color: Color) -> None:
        """Paint the whole canvas with one color (source-over)."""
        self.fill_rect(0, 0, self.width, self.height, solid(color))

    def fill_rect(self, left: float, top: float, right: float, bottom: float, paint: Paint) -> None:
        x0, x1 = _centre_span(left, right, self.width)
        y0, y1 = _centre_span(top, bottom, self.height)
        self._composite(x0, x1, y0, y1, None, paint)

    def fill_circle(self, cx: float, cy: float, radius: float, paint: Paint) -> None:
        if radius <= 0:
            return
        x0, x1 = _centre_span(cx - radius, cx + radius + 1, self.width)
        y0, y1 = _centre_span(cy - radius, cy + radius + 1, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        xs = np.arange(x0, x1, dtype=np.float32) + 0.5
        ys = np.arange(y0, y1, dtype=np.float32) + 0.5
        mask = ((xs - cx) ** 2)[None, :] + ((ys - cy) ** 2)[:, None] <= np.float32(radius * radius)
        self._composite(x0, x1, y0, y1, mask, paint)

    def fill_polygon(self, points: Sequence[Point], paint: Paint) -> None:
        if len(points) < 3:
            return
        px = [float(p[0]) for p in points]
        py = [float(p[1]) for p in points]
        x0, x1 = max(0, math.floor(min(px))), min(self.width, math.ceil(max(px)) + 1)
        y0, y1 = max(0, math.floor(min(py))), min(self.height, math.ceil(max(py)) + 1)
        if x0 >= x1 or y0 >= y1:
            return
        # Pillow addresses pixel centres at integer coordinates
        coverage = Image.new("L", (x1 - x0, y1 - y0), 0)
        ImageDraw.Draw(coverage).polygon(
            [(x - x0 - 0.5, y - y0 - 0.5) for x, y in zip(px, py)], fill=255
        )
        mask = np.asarray(coverage) > 0
        self._composite(x0, x1, y0, y1, mask, paint)

    def _composite(
        self, x0: int, x1: int, y0: int, y1: int, mask: np.ndarray | None, paint: Paint
    ) -> None:
        alpha_scale = max(0, min(255, int(paint.alpha))) / 255.0
        if x0 >= x1 or y0 >= y1 or alpha_scale == 0.0:
            return
        xs = np.arange(x0, x1, dtype=np.float32) + 0.5
        ys = np.arange(y0, y1, dtype=np.float32) + 0.5
        src = _shade(paint.shader, xs, ys)
        src_a = src[..., 3] * np.float32(alpha_scale / 255.0)
        if mask is not None:
            src_a = src_a * mask
        region = self.pixels[y0:y1, x0:x1].astype(np.float32)
        dst_a = region[..., 3] / np.float32(255.0)
        dst_weight = dst_a * (1.0 - src_a)
        out_a = src_a + dst_weight
        safe_a = np.where(out_a > 0, out_a, np.float32(1.0))
        out_rgb = (
            src[..., :3] * src_a[..., None] + region[..., :3] * dst_weight[..., None]
        ) / safe_a[..., None]
        self.pixels[y0:y1, x0:x1, :3] = np.clip(np.rint(out_rgb), 0, 255).astype(np.uint8)
        self.pixels[y0:y1, x0:x1, 3] = np.clip(np.rint(out_a * 255.0), 0, 255).astype(np.uint8)

    def to_image(self) -> Image.Image:
        """Pillow RGBA image sharing nothing with the buffer."""
        return Image.fromarray(self.pixels.copy())

    def tobytes(self) -> bytes:
        """Row-major RGBA bytes."""
        return self.pixels.tobytes()

    def digest(self) -> str:
        """sha256 of the pixel bytes; stable fingerprint for regression checks."""
        return hashlib.sha256(self.tobytes()).hexdigest()

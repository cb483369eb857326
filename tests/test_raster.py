"""
Unit tests for the raster canvas: primitives, shaders and source-over compositing.
"""
import sys
import unittest
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.procedural.color import TRANSPARENT, Color
from src.procedural.raster import (
    InvalidDimensionsError,
    Raster,
    linear,
    radial,
    solid,
)

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)


def _black(width: int, height: int) -> Raster:
    raster = Raster(width, height)
    raster.fill(BLACK)
    return raster


class TestRasterBasics(unittest.TestCase):
    def test_invalid_dimensions(self):
        for w, h in ((0, 5), (5, 0), (-1, 5), (5, -2)):
            with self.assertRaises(InvalidDimensionsError):
                Raster(w, h)
        self.assertTrue(issubclass(InvalidDimensionsError, ValueError))

    def test_starts_transparent(self):
        raster = Raster(3, 2)
        self.assertEqual(raster.pixels.shape, (2, 3, 4))
        self.assertEqual(raster.pixels.dtype, np.uint8)
        self.assertFalse(raster.pixels.any())

    def test_fill(self):
        raster = Raster(4, 4)
        raster.fill(Color(12, 34, 56))
        self.assertTrue((raster.pixels == [12, 34, 56, 255]).all())

    def test_export(self):
        raster = _black(5, 3)
        self.assertEqual(len(raster.tobytes()), 5 * 3 * 4)
        image = raster.to_image()
        self.assertEqual(image.size, (5, 3))
        self.assertEqual(image.mode, "RGBA")
        self.assertEqual(len(raster.digest()), 64)
        self.assertEqual(raster.digest(), _black(5, 3).digest())


class TestPrimitives(unittest.TestCase):
    def test_fill_rect_covers_pixel_centres(self):
        raster = _black(10, 10)
        raster.fill_rect(2, 3, 5, 7, solid(WHITE))
        inside = np.zeros((10, 10), dtype=bool)
        inside[3:7, 2:5] = True
        self.assertTrue((raster.pixels[inside][:, :3] == 255).all())
        self.assertTrue((raster.pixels[~inside][:, :3] == 0).all())

    def test_rect_outside_canvas_is_noop(self):
        raster = _black(8, 8)
        before = raster.pixels.copy()
        raster.fill_rect(20, 20, 30, 30, solid(WHITE))
        raster.fill_rect(5, 5, 5, 9, solid(WHITE))
        raster.fill_rect(6, 6, 2, 2, solid(WHITE))
        self.assertTrue(np.array_equal(raster.pixels, before))

    def test_fill_circle(self):
        raster = _black(21, 21)
        raster.fill_circle(10.5, 10.5, 5, solid(WHITE))
        self.assertEqual(raster.pixels[10, 10, 0], 255)
        self.assertEqual(raster.pixels[0, 0, 0], 0)
        self.assertEqual(raster.pixels[16, 10, 0], 0)
        covered = int((raster.pixels[:, :, 0] == 255).sum())
        self.assertTrue(60 < covered < 100, covered)

    def test_degenerate_circles_are_noops(self):
        raster = _black(8, 8)
        before = raster.pixels.copy()
        raster.fill_circle(4, 4, 0, solid(WHITE))
        raster.fill_circle(4, 4, -3, solid(WHITE))
        raster.fill_circle(-50, -50, 10, solid(WHITE))
        self.assertTrue(np.array_equal(raster.pixels, before))

    def test_fill_polygon(self):
        raster = _black(10, 10)
        raster.fill_polygon([(0, 0), (10, 0), (0, 10)], solid(WHITE))
        self.assertEqual(raster.pixels[1, 1, 0], 255)
        self.assertEqual(raster.pixels[8, 8, 0], 0)

    def test_polygon_edge_cases(self):
        raster = _black(10, 10)
        before = raster.pixels.copy()
        raster.fill_polygon([(0, 0), (5, 5)], solid(WHITE))
        raster.fill_polygon([], solid(WHITE))
        raster.fill_polygon([(-30, -30), (-20, -30), (-25, -20)], solid(WHITE))
        self.assertTrue(np.array_equal(raster.pixels, before))
        # Partly off-canvas polygons are clipped, not rejected
        raster.fill_polygon([(-5, -5), (5, -5), (5, 5), (-5, 5)], solid(WHITE))
        self.assertEqual(raster.pixels[2, 2, 0], 255)
        self.assertEqual(raster.pixels[8, 8, 0], 0)


class TestCompositing(unittest.TestCase):
    def test_paint_alpha_blends_over_opaque(self):
        raster = _black(2, 2)
        raster.fill_rect(0, 0, 2, 2, solid(WHITE, alpha=128))
        self.assertTrue((raster.pixels == [128, 128, 128, 255]).all())

    def test_color_alpha_and_paint_alpha_multiply(self):
        raster = _black(1, 1)
        raster.fill_rect(0, 0, 1, 1, solid(Color(255, 255, 255, 128), alpha=128))
        # 255 * (128/255) * (128/255) ≈ 64
        self.assertIn(int(raster.pixels[0, 0, 0]), (64, 65))

    def test_over_transparent_keeps_source_color(self):
        raster = Raster(2, 2)
        raster.fill_rect(0, 0, 2, 2, solid(RED, alpha=128))
        self.assertTrue((raster.pixels == [255, 0, 0, 128]).all())

    def test_zero_alpha_is_noop(self):
        raster = _black(4, 4)
        before = raster.pixels.copy()
        raster.fill_rect(0, 0, 4, 4, solid(WHITE, alpha=0))
        raster.fill_rect(0, 0, 4, 4, solid(TRANSPARENT))
        self.assertTrue(np.array_equal(raster.pixels, before))

    def test_later_draws_land_on_top(self):
        raster = _black(4, 4)
        raster.fill_rect(0, 0, 4, 4, solid(RED))
        raster.fill_rect(0, 0, 4, 4, solid(BLUE))
        self.assertTrue((raster.pixels == [0, 0, 255, 255]).all())


class TestShaders(unittest.TestCase):
    def test_linear_gradient_increases_along_axis(self):
        raster = _black(11, 1)
        raster.fill_rect(0, 0, 11, 1, linear((0, 0), (11, 0), (BLACK, WHITE)))
        row = raster.pixels[0, :, 0].astype(int)
        self.assertTrue(all(b > a for a, b in zip(row, row[1:])), row)
        self.assertLess(row[0], 20)
        self.assertGreater(row[-1], 235)

    def test_linear_gradient_clamps_beyond_ends(self):
        raster = _black(20, 1)
        raster.fill_rect(0, 0, 20, 1, linear((5, 0), (10, 0), (RED, BLUE)))
        self.assertTrue((raster.pixels[0, :5, :3] == [255, 0, 0]).all())
        self.assertTrue((raster.pixels[0, 10:, :3] == [0, 0, 255]).all())

    def test_stop_positions(self):
        raster = _black(10, 1)
        raster.fill_rect(0, 0, 10, 1, linear((0, 0), (10, 0), (RED, RED, BLUE), (0.0, 0.5, 1.0)))
        self.assertTrue((raster.pixels[0, :5, :3] == [255, 0, 0]).all())
        self.assertGreater(int(raster.pixels[0, 9, 2]), 200)

    def test_positions_must_match_colors(self):
        with self.assertRaises(ValueError):
            linear((0, 0), (1, 1), (RED, BLUE), (0.0, 0.5, 1.0))
        with self.assertRaises(ValueError):
            radial((0, 0), 1, ())

    def test_degenerate_linear_uses_first_color(self):
        raster = _black(3, 3)
        raster.fill_rect(0, 0, 3, 3, linear((1, 1), (1, 1), (RED, BLUE)))
        self.assertTrue((raster.pixels == [255, 0, 0, 255]).all())

    def test_radial_gradient(self):
        raster = _black(21, 21)
        raster.fill_rect(0, 0, 21, 21, radial((10.5, 10.5), 10, (WHITE, BLACK)))
        self.assertGreater(int(raster.pixels[10, 10, 0]), 240)
        self.assertEqual(int(raster.pixels[0, 0, 0]), 0)
        self.assertGreater(int(raster.pixels[10, 10, 0]), int(raster.pixels[10, 15, 0]))

    def test_radial_fade_to_transparent(self):
        raster = _black(21, 21)
        raster.fill_circle(10.5, 10.5, 10, radial((10.5, 10.5), 10, (WHITE, TRANSPARENT)))
        self.assertGreater(int(raster.pixels[10, 10, 0]), 200)
        self.assertLess(int(raster.pixels[10, 1, 0]), 30)
        self.assertTrue((raster.pixels[:, :, 3] == 255).all())

    def test_zero_radius_radial_uses_last_color(self):
        raster = _black(4, 4)
        before = raster.pixels.copy()
        raster.fill_rect(0, 0, 4, 4, radial((2, 2), 0, (WHITE, TRANSPARENT)))
        self.assertTrue(np.array_equal(raster.pixels, before))

"""
Unit tests for the wallpaper facade: validation, determinism, selection and the
2024214 regression scenario.
"""
import json
import sys
import unittest
from collections import Counter
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.analysis import mean_luminance
from src.procedural import (
    InvalidDimensionsError,
    ProceduralWallpaperGenerator,
    UnknownPatternPackError,
    generate_wallpaper,
    pattern_for_seed,
    select_pattern,
)
from src.random_utils import RandomStream

FIXTURE = Path(__file__).resolve().parent / "fixtures" / "regression.json"


class TestDimensions(unittest.TestCase):
    def test_rejects_non_positive(self):
        for w, h in ((0, 10), (10, 0), (-5, 10), (10, -1), (0, 0)):
            with self.assertRaises(InvalidDimensionsError) as ctx:
                generate_wallpaper(w, h, True, 1)
            self.assertEqual((ctx.exception.width, ctx.exception.height), (w, h))

    def test_one_by_one(self):
        for pack in ("curated", "classic"):
            raster = generate_wallpaper(1, 1, False, 2024214, pack=pack)
            self.assertEqual((raster.width, raster.height), (1, 1))
            self.assertEqual(raster.pixels.shape, (1, 1, 4))

    def test_unknown_pack(self):
        with self.assertRaises(UnknownPatternPackError):
            generate_wallpaper(4, 4, True, 1, pack="nope")
        with self.assertRaises(UnknownPatternPackError):
            ProceduralWallpaperGenerator(pack="nope")

    def test_configured_zero_size_is_kept(self):
        gen = ProceduralWallpaperGenerator(config={"output": {"width": 0, "height": 10}})
        self.assertEqual((gen.width, gen.height), (0, 10))
        with self.assertRaises(InvalidDimensionsError):
            gen.generate(1, True)


class TestDeterminism(unittest.TestCase):
    def test_identical_calls_identical_bytes(self):
        for pack in ("curated", "classic"):
            for seed in (0, 1, 42, 2024214, 2025001, -7):
                with self.subTest(pack=pack, seed=seed):
                    a = generate_wallpaper(36, 64, seed % 2 == 0, seed, pack=pack)
                    b = generate_wallpaper(36, 64, seed % 2 == 0, seed, pack=pack)
                    self.assertEqual(a.tobytes(), b.tobytes())

    def test_no_state_between_calls(self):
        first = generate_wallpaper(30, 30, True, 100).digest()
        generate_wallpaper(30, 30, False, 200)
        generate_wallpaper(50, 20, True, 300, pack="classic")
        self.assertEqual(generate_wallpaper(30, 30, True, 100).digest(), first)

    def test_generator_object_matches_function(self):
        gen = ProceduralWallpaperGenerator(width=24, height=40, pack="classic")
        self.assertEqual(
            gen.generate(5, True).digest(),
            generate_wallpaper(24, 40, True, 5, pack="classic").digest(),
        )
        self.assertEqual(gen.generate(5, True, width=8, height=8).pixels.shape, (8, 8, 4))

    def test_generator_reads_config(self):
        config = {"output": {"device": "desktop"}, "generator": {"pack": "classic"}}
        gen = ProceduralWallpaperGenerator(config=config)
        self.assertEqual((gen.width, gen.height, gen.pack), (1920, 1080, "classic"))


class TestSelection(unittest.TestCase):
    def test_distribution_covers_every_pattern(self):
        seeds = [year * 1000 + day for year in (2024, 2025, 2026) for day in range(1, 366)]
        counts = Counter(select_pattern(RandomStream(s), 5) for s in seeds)
        self.assertEqual(set(counts), set(range(5)))
        for index in range(5):
            self.assertGreater(counts[index], len(seeds) // 10, counts)

    def test_pattern_for_seed(self):
        self.assertEqual(pattern_for_seed(2024214), "layered_linear_gradients")
        self.assertEqual(pattern_for_seed(2024214, "classic"), "multi_gradient")


class TestRegressionScenario(unittest.TestCase):
    """seed 2024214 (2024, day 214), 1080x2400."""

    @classmethod
    def setUpClass(cls):
        with open(FIXTURE, encoding="utf-8") as f:
            cls.fixture = json.load(f)
        fx = cls.fixture
        cls.dark = generate_wallpaper(fx["width"], fx["height"], True, fx["seed"], pack=fx["pack"])
        cls.light = generate_wallpaper(fx["width"], fx["height"], False, fx["seed"], pack=fx["pack"])

    def test_pattern_index(self):
        self.assertEqual(select_pattern(RandomStream(self.fixture["seed"]), 5), self.fixture["pattern_index"])
        self.assertEqual(pattern_for_seed(self.fixture["seed"]), self.fixture["pattern"])

    def test_reproducible(self):
        fx = self.fixture
        again = generate_wallpaper(fx["width"], fx["height"], True, fx["seed"], pack=fx["pack"])
        self.assertEqual(again.digest(), self.dark.digest())

    def test_pinned_digest(self):
        self.assertEqual(self.dark.digest(), self.fixture["digest"])

    def test_pinned_classic_digest(self):
        fx = self.fixture
        classic = generate_wallpaper(fx["width"], fx["height"], fx["is_dark"], fx["seed"], pack="classic")
        self.assertEqual(classic.digest(), fx["classic_digest"])

    def test_light_theme_is_brighter(self):
        self.assertNotEqual(self.dark.pixels[0, 0].tolist(), self.light.pixels[0, 0].tolist())
        self.assertGreater(mean_luminance(self.light.pixels), mean_luminance(self.dark.pixels) + 50)


class TestMetrics(unittest.TestCase):
    def test_luminance_and_spread(self):
        import numpy as np

        from src.analysis import brightness_and_contrast, color_variance

        flat = np.full((4, 4, 4), 200, dtype=np.uint8)
        self.assertAlmostEqual(mean_luminance(flat), 200.0, places=6)
        self.assertAlmostEqual(brightness_and_contrast(flat)["contrast"], 0.0)
        self.assertEqual(color_variance(flat), 0.0)
        with self.assertRaises(ValueError):
            mean_luminance(np.zeros((4, 4), dtype=np.uint8))
        busy = generate_wallpaper(32, 32, False, 3)
        self.assertGreater(color_variance(busy.pixels), 0.0)

#!/usr/bin/env python3
"""
CLI: Generate one wallpaper PNG from a seed. Same arguments → same image.
Usage:
  python scripts/generate.py                       # today's seed, theme from config
  python scripts/generate.py --seed 2024214 --dark
  python scripts/generate.py --seed 42 --light --width 1920 --height 1080 -o out.png
  python scripts/generate.py --seed 42 --pack classic --digest
"""
import logging
import os
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse

from src.analysis import brightness_and_contrast, color_variance
from src.config import get_output_path, load_config, resolve_output_config
from src.pipeline import resolve_is_dark
from src.procedural import ProceduralWallpaperGenerator, pattern_for_seed
from src.seed import today_seed
from src.wallpaper import FileWallpaperSink


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate one deterministic procedural wallpaper (local, no external APIs)."
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed (default: today's seed, year*1000 + day of year).",
    )
    theme = parser.add_mutually_exclusive_group()
    theme.add_argument("--dark", dest="is_dark", action="store_const", const=True, help="Dark theme.")
    theme.add_argument("--light", dest="is_dark", action="store_const", const=False, help="Light theme.")
    parser.add_argument("--width", type=int, default=None, help="Width in pixels (default: from config).")
    parser.add_argument("--height", type=int, default=None, help="Height in pixels (default: from config).")
    parser.add_argument(
        "--pack",
        type=str,
        default=None,
        help="Pattern pack: curated or classic (default: from config).",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output PNG path (default: output/wallpaper.png).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    parser.add_argument(
        "--digest",
        action="store_true",
        help="Print the sha256 of the raw RGBA pixels (regression fingerprint).",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if os.environ.get("DEBUG") else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    config = load_config(args.config)
    out_cfg = resolve_output_config(config)
    seed = args.seed if args.seed is not None else today_seed()
    is_dark = args.is_dark
    if is_dark is None:
        is_dark = resolve_is_dark(config.get("generator", {}).get("theme"))

    generator = ProceduralWallpaperGenerator(
        width=out_cfg.get("width", 1080),
        height=out_cfg.get("height", 2400),
        pack=args.pack,
        config=config,
    )
    print(f"Seed: {seed} ({'dark' if is_dark else 'light'}, pack={generator.pack})")
    print(f"Pattern: {pattern_for_seed(seed, generator.pack)}")

    raster = generator.generate(seed, is_dark, width=args.width, height=args.height)
    stats = brightness_and_contrast(raster.pixels)
    print(
        f"Size: {raster.width}x{raster.height}  "
        f"brightness={stats['brightness']:.1f} contrast={stats['contrast']:.1f} "
        f"spread={color_variance(raster.pixels):.3f}"
    )
    if args.digest:
        print(f"Digest: {raster.digest()}")

    sink = FileWallpaperSink(args.output or get_output_path(config))
    if not sink.apply(raster):
        sys.exit(1)
    print(f"Done. Wallpaper: {sink.path}")


if __name__ == "__main__":
    main()

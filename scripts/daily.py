#!/usr/bin/env python3
"""
Daily refresh: apply today's wallpaper once per day, retrying on failure.
Meant for cron / a systemd timer; exits non-zero when every attempt failed.

Usage:
  python scripts/daily.py
  python scripts/daily.py --theme dark --output ~/Pictures/wallpaper.png
  python scripts/daily.py --retries 3 --retry-delay 60
  DEBUG=1 python scripts/daily.py      # debug logging
"""
import logging
import os
import sys
import time
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse

from src.config import get_output_path, load_config
from src.pipeline import THEMES, refresh_daily_wallpaper, resolve_is_dark
from src.wallpaper import FileWallpaperSink

logger = logging.getLogger(__name__)

DEFAULT_RETRIES = 2
DEFAULT_RETRY_DELAY_SECONDS = 30.0


def main() -> None:
    parser = argparse.ArgumentParser(description="Apply today's procedural wallpaper (once per day).")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML.")
    parser.add_argument("--output", "-o", type=Path, default=None, help="Wallpaper PNG path.")
    parser.add_argument("--theme", choices=THEMES, default=None, help="Override the configured theme.")
    parser.add_argument("--force", action="store_true", help="Regenerate even if today's seed was applied.")
    parser.add_argument(
        "--retries",
        type=int,
        default=DEFAULT_RETRIES,
        help=f"Extra attempts after a failure (default: {DEFAULT_RETRIES}).",
    )
    parser.add_argument(
        "--retry-delay",
        type=float,
        default=DEFAULT_RETRY_DELAY_SECONDS,
        help=f"Seconds between attempts (default: {DEFAULT_RETRY_DELAY_SECONDS:g}).",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if os.environ.get("DEBUG") else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    config = load_config(args.config)
    is_dark = None
    if args.theme:
        is_dark = resolve_is_dark(args.theme)
    sink = FileWallpaperSink(args.output or get_output_path(config))

    for attempt in range(max(0, args.retries) + 1):
        if refresh_daily_wallpaper(sink, config=config, is_dark=is_dark, force=args.force):
            return
        if attempt < args.retries:
            logger.warning("Attempt %s failed, retrying in %.1fs", attempt + 1, args.retry_delay)
            time.sleep(args.retry_delay)
    logger.error("Wallpaper refresh failed after %s attempt(s)", max(0, args.retries) + 1)
    sys.exit(1)


if __name__ == "__main__":
    main()

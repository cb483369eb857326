"""
Pipeline: enabled? → today's seed → (skip if already applied) → one wallpaper → sink → remember seed.
The scheduler calls refresh_daily_wallpaper periodically; False means "retry later".
"""
import logging
from datetime import date
from pathlib import Path
from typing import Any, Callable

from .config import get_state_path, load_config, resolve_output_config
from .procedural import ProceduralWallpaperGenerator
from .seed import today_seed
from .state import SeedStateStore
from .wallpaper.base import WallpaperSink

logger = logging.getLogger(__name__)

THEMES = ("dark", "light", "system")


def resolve_is_dark(theme: str | None, system_is_dark: Callable[[], bool] | None = None) -> bool:
    """
    Theme setting → dark flag. "system" defers to system_is_dark (light when not given).
    """
    theme = (theme or "system").lower()
    if theme == "dark":
        return True
    if theme == "light":
        return False
    if theme != "system":
        raise ValueError(f"Unknown theme {theme!r}; expected one of {THEMES}")
    return bool(system_is_dark()) if system_is_dark is not None else False


def refresh_daily_wallpaper(
    sink: WallpaperSink,
    *,
    config: dict[str, Any] | None = None,
    state_path: Path | None = None,
    is_dark: bool | None = None,
    system_is_dark: Callable[[], bool] | None = None,
    today: date | None = None,
    force: bool = False,
) -> bool:
    """
    One scheduled run. Returns True when the wallpaper is current (applied now, already
    applied today, or daily refresh switched off), False when generating or applying
    failed and the caller should retry.
    - The seed is persisted only after the sink reports success.
    """
    if config is None:
        config = load_config()
    if not config.get("daily", {}).get("enabled", True):
        logger.info("Daily wallpaper disabled, nothing to do")
        return True
    store = SeedStateStore(state_path if state_path is not None else get_state_path(config))
    seed = today_seed(today)

    if not force and store.load_last_seed() == seed:
        logger.info("Wallpaper for seed %s already applied, skipping", seed)
        return True

    if is_dark is None:
        is_dark = resolve_is_dark(config.get("generator", {}).get("theme"), system_is_dark)
    out = resolve_output_config(config)
    try:
        generator = ProceduralWallpaperGenerator(
            width=out.get("width", 1080),
            height=out.get("height", 2400),
            config=config,
        )
        raster = generator.generate(seed, is_dark)
        ok = bool(sink.apply(raster))
    except Exception as e:
        logger.error("Wallpaper for seed %s failed: %s", seed, e, exc_info=True)
        return False
    if not ok:
        logger.warning("Wallpaper sink reported failure for seed %s, will retry", seed)
        return False

    store.save_last_seed(seed)
    logger.info(
        "Applied wallpaper seed=%s (%dx%d, %s, pack=%s)",
        seed, raster.width, raster.height, "dark" if is_dark else "light", generator.pack,
    )
    return True

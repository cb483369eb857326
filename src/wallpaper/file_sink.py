"""
File sink: writes the wallpaper as a PNG (Pillow). Stands in for an OS "set wallpaper" call.
"""
import logging
from pathlib import Path

from ..procedural.raster import Raster
from .base import WallpaperSink

logger = logging.getLogger(__name__)


class FileWallpaperSink(WallpaperSink):
    """Saves each applied raster to one path, replacing the previous file."""

    def __init__(self, path: Path):
        self.path = Path(path)
        if self.path.suffix == "":
            self.path = self.path.with_suffix(".png")

    def apply(self, raster: Raster) -> bool:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Write beside the target then swap, so a failed save never leaves a half-written file
        tmp = self.path.with_name(f".{self.path.name}.tmp")
        try:
            raster.to_image().save(tmp, format="PNG")
            tmp.replace(self.path)
        except OSError as e:
            logger.error("Saving wallpaper to %s failed: %s", self.path, e, exc_info=True)
            tmp.unlink(missing_ok=True)
            return False
        logger.info("Wallpaper written: %s (%dx%d)", self.path, raster.width, raster.height)
        return True

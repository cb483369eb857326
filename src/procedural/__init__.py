# Procedural wallpaper engine: our algorithms and data only, no external "model"

from .generator import ProceduralWallpaperGenerator, generate_wallpaper
from .packs import PATTERN_PACKS, UnknownPatternPackError, pattern_for_seed, select_pattern
from .raster import InvalidDimensionsError, Raster

__all__ = [
    "generate_wallpaper",
    "ProceduralWallpaperGenerator",
    "PATTERN_PACKS",
    "UnknownPatternPackError",
    "pattern_for_seed",
    "select_pattern",
    "InvalidDimensionsError",
    "Raster",
]

"""
Abstract interface for applying a finished wallpaper. One raster in → success flag out.
Implementations can be: write to a file, hand to a desktop/OS wallpaper API.
"""
from abc import ABC, abstractmethod

from ..procedural.raster import Raster


class WallpaperSink(ABC):
    """
    Consumes a generated raster. The daily refresh uses the return value as its
    success/retry signal; a sink must never modify the raster it is given.
    """

    @abstractmethod
    def apply(self, raster: Raster) -> bool:
        """Apply the wallpaper. Returns True on success."""
        ...

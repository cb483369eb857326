"""
Wallpaper sinks: where a finished raster goes.
"""
from .base import WallpaperSink
from .file_sink import FileWallpaperSink

__all__ = ["WallpaperSink", "FileWallpaperSink"]

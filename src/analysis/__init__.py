# Summaries of rendered wallpapers using our algorithms only

from .metrics import brightness_and_contrast, color_variance, mean_luminance

__all__ = [
    "mean_luminance",
    "brightness_and_contrast",
    "color_variance",
]

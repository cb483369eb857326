"""
Pure algorithms for summarising a rendered wallpaper: brightness, contrast, color spread.
Used by tests and the CLI summary.
"""
import numpy as np


def _luma(frame: np.ndarray) -> np.ndarray:
    """Rec.601 luminance (0–255) of the RGB channels."""
    rgb = frame[:, :, :3].astype(np.float64)
    return 0.299 * rgb[:, :, 0] + 0.587 * rgb[:, :, 1] + 0.114 * rgb[:, :, 2]


def mean_luminance(frame: np.ndarray) -> float:
    """Mean luminance (0–255) of an RGB or RGBA frame (H, W, C)."""
    if frame.ndim != 3 or frame.shape[-1] < 3:
        raise ValueError("Expected RGB(A) frame (H, W, 3|4)")
    return float(_luma(frame).mean())


def brightness_and_contrast(frame: np.ndarray) -> dict[str, float]:
    """Mean brightness (0–255) and std (contrast)."""
    if frame.ndim != 3:
        return {"brightness": 0.0, "contrast": 0.0}
    gray = _luma(frame)
    return {
        "brightness": float(gray.mean()),
        "contrast": float(gray.std()),
    }


def color_variance(frame: np.ndarray) -> float:
    """
    Variance of RGB values across pixels (color spread), normalised to 0–1.
    """
    if frame.ndim != 3 or frame.shape[-1] < 3:
        return 0.0
    flat = frame[:, :, :3].reshape(-1, 3).astype(np.float64)
    return float(np.var(flat) / (255.0 * 255.0))

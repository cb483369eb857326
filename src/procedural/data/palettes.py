"""
Our data: wallpaper palettes (RGB 0-255). Used by the curated pattern pack.
Immutable tables; patterns pick from them through the random stream.
"""
# Deep, mid-saturation tones that glow softly on a near-black background
DARK_PALETTE: tuple[tuple[int, int, int], ...] = (
    (46, 52, 120),
    (72, 38, 110),
    (104, 36, 88),
    (120, 44, 60),
    (128, 70, 36),
    (96, 84, 30),
    (40, 92, 60),
    (24, 88, 92),
    (30, 70, 128),
    (58, 64, 148),
    (92, 52, 140),
    (136, 56, 112),
    (28, 104, 112),
    (52, 110, 84),
    (84, 40, 48),
    (36, 44, 84),
    (112, 92, 150),
    (20, 60, 104),
)

# Soft, low-saturation pastels for light backgrounds
LIGHT_PALETTE: tuple[tuple[int, int, int], ...] = (
    (250, 214, 214),
    (252, 228, 204),
    (250, 240, 200),
    (226, 242, 206),
    (204, 238, 222),
    (200, 234, 240),
    (206, 222, 250),
    (222, 212, 250),
    (240, 210, 244),
    (248, 206, 228),
    (236, 226, 214),
    (214, 230, 230),
    (230, 236, 250),
    (244, 232, 240),
    (216, 244, 236),
    (252, 236, 222),
    (224, 220, 240),
    (238, 246, 214),
)

# Flat theme backgrounds painted before any pattern
DARK_BACKGROUND: tuple[int, int, int] = (14, 15, 22)
LIGHT_BACKGROUND: tuple[int, int, int] = (246, 244, 240)

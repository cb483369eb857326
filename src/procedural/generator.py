"""
Procedural wallpaper generator: seed → random stream → palette → one pattern → raster.
No external model and no hidden state; every call owns its stream and raster.
"""
import logging
from typing import Any

from ..random_utils import RandomStream
from .color import background_for, palette_for
from .packs import DEFAULT_PACK, get_pack, select_pattern
from .raster import InvalidDimensionsError, Raster

logger = logging.getLogger(__name__)


def generate_wallpaper(
    width: int,
    height: int,
    is_dark: bool,
    seed: int,
    *,
    pack: str | None = None,
) -> Raster:
    """
    Render one wallpaper. Raises InvalidDimensionsError before drawing if width or height <= 0.
    Same (width, height, is_dark, seed, pack) always gives byte-identical pixels.
    """
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(width, height)
    patterns = get_pack(pack)

    stream = RandomStream(seed)
    raster = Raster(width, height)
    raster.fill(background_for(is_dark))
    palette = palette_for(is_dark)

    index = select_pattern(stream, len(patterns))
    name, draw = patterns[index]
    logger.debug(
        "Wallpaper seed=%s %dx%d %s: pack=%s pattern=%s (#%d)",
        seed, width, height, "dark" if is_dark else "light", pack or DEFAULT_PACK, name, index,
    )
    draw(raster, width, height, palette, stream, is_dark)
    return raster


class ProceduralWallpaperGenerator:
    """
    Generator bound to one pattern pack and default output size (from config).
    """

    def __init__(
        self,
        width: int = 1080,
        height: int = 2400,
        pack: str | None = None,
        config: dict[str, Any] | None = None,
    ):
        from ..config import resolve_output_config
        cfg = config or {}
        out = resolve_output_config(cfg)
        self.width = int(width if out.get("width") is None else out["width"])
        self.height = int(height if out.get("height") is None else out["height"])
        self.pack = (pack or cfg.get("generator", {}).get("pack") or DEFAULT_PACK).lower()
        # Fail on a bad pack name now rather than on the first scheduled run
        get_pack(self.pack)

    def generate(
        self,
        seed: int,
        is_dark: bool,
        *,
        width: int | None = None,
        height: int | None = None,
    ) -> Raster:
        return generate_wallpaper(
            self.width if width is None else width,
            self.height if height is None else height,
            is_dark,
            seed,
            pack=self.pack,
        )

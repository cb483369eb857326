"""
Pattern packs and selection. A pack is a closed, ordered tuple of (name, draw) entries;
exactly one pack is active per generator. Index order is part of the output contract.
"""
from typing import Callable, Sequence

from ..random_utils import RandomStream
from .classic import CLASSIC_PATTERNS
from .color import Color
from .patterns import CURATED_PATTERNS
from .raster import Raster

PatternFn = Callable[[Raster, int, int, Sequence[Color], RandomStream, bool], None]

DEFAULT_PACK = "curated"

PATTERN_PACKS: dict[str, tuple[tuple[str, PatternFn], ...]] = {
    "curated": CURATED_PATTERNS,
    "classic": CLASSIC_PATTERNS,
}


class UnknownPatternPackError(KeyError):
    """Requested pack name is not registered."""


def get_pack(name: str | None) -> tuple[tuple[str, PatternFn], ...]:
    key = (name or DEFAULT_PACK).lower()
    try:
        return PATTERN_PACKS[key]
    except KeyError:
        raise UnknownPatternPackError(
            f"Unknown pattern pack {name!r}; expected one of {sorted(PATTERN_PACKS)}"
        ) from None


def select_pattern(stream: RandomStream, count: int) -> int:
    """Pattern index in [0, count); always the first draw of a generation."""
    return stream.next_int(count)


def pattern_for_seed(seed: int, pack: str | None = None) -> str:
    """Name of the pattern a seed selects, without rendering anything."""
    patterns = get_pack(pack)
    return patterns[select_pattern(RandomStream(seed), len(patterns))][0]

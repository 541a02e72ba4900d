from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Optional, TypeVar

from .errors import FailureKind, RummikubError
from .multiset import MAX_TILE_COUNT
from .tiles import Tile

JOKER_RACK_SCORE = 30

T = TypeVar("T")


class ScoringRule(str, Enum):
    # A joker is worth a flat 30 while it sits on a rack...
    ON_RACK = "ON_RACK"
    # ...and the number it stands for once it is laid in a set.
    ON_TABLE = "ON_TABLE"


def tile_rack_score(tile: Tile) -> int:
    if tile.is_joker():
        return JOKER_RACK_SCORE
    return tile.number.face_value


def score_tiles(tiles: Iterable[Tile]) -> int:
    """Score loose tiles; with no set around them only the rack rule applies."""
    return sum(tile_rack_score(tile) for tile in tiles)


def count_tiles(tiles: Iterable[Tile]) -> int:
    count = sum(1 for _ in tiles)
    if count > MAX_TILE_COUNT:
        raise RummikubError(FailureKind.TILE_LIMIT_EXCEEDED, f"{count} tiles, the game has {MAX_TILE_COUNT}")
    return count


def highest_value(
    items: Iterable[T], score: Callable[[T], int], tiebreak: Optional[Callable[[T], int]] = None
) -> Optional[T]:
    best: Optional[T] = None
    best_key = None
    for item in items:
        key = (score(item), tiebreak(item) if tiebreak else 0)
        if best_key is None or key > best_key:
            best, best_key = item, key
    return best

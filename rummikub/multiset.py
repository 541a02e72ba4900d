from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .errors import FailureKind, RummikubError
from .tiles import JOKER_ID, MULTISET_SIZE, Tile, iter_ids

MAX_TILE_COUNT = 106
MAX_COPIES = 2


def _validate_counts(counts: Sequence[int]) -> None:
    if len(counts) != MULTISET_SIZE:
        raise ValueError(f"multiset length must be {MULTISET_SIZE}")
    if any(c < 0 for c in counts):
        raise ValueError("multiset counts must be non-negative")


@dataclass(frozen=True)
class TileMultiset:
    """Unordered tile counts indexed by tile id."""

    counts: Tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "counts", tuple(self.counts))
        _validate_counts(self.counts)

    @classmethod
    def empty(cls) -> "TileMultiset":
        return cls((0,) * MULTISET_SIZE)

    @classmethod
    def from_iterable(cls, tile_ids: Iterable[int]) -> "TileMultiset":
        counts = [0] * MULTISET_SIZE
        for tile_id in tile_ids:
            counts[tile_id] += 1
        return cls(tuple(counts))

    @classmethod
    def from_tiles(cls, tiles: Iterable[Tile]) -> "TileMultiset":
        return cls.from_iterable(iter_ids(tiles))

    def tiles(self) -> List[Tile]:
        """Expand back to tiles in id order, jokers last."""
        return [Tile(idx) for idx, c in enumerate(self.counts) for _ in range(c)]

    def count_of(self, tile: Tile) -> int:
        return self.counts[tile.tile_id]

    def jokers(self) -> int:
        return self.counts[JOKER_ID]

    def add(self, other: "TileMultiset") -> "TileMultiset":
        return TileMultiset(tuple(a + b for a, b in zip(self.counts, other.counts)))

    def sub(self, other: "TileMultiset") -> "TileMultiset":
        if not self.contains(other):
            raise RummikubError(FailureKind.TILE_NOT_AVAILABLE, "cannot subtract: negative counts")
        return TileMultiset(tuple(a - b for a, b in zip(self.counts, other.counts)))

    def contains(self, other: "TileMultiset") -> bool:
        return all(a >= b for a, b in zip(self.counts, other.counts))

    def total(self) -> int:
        return sum(self.counts)

    def within_universe(self) -> bool:
        return all(c <= MAX_COPIES for c in self.counts)

    def check_universe(self) -> "TileMultiset":
        if not self.within_universe() or self.total() > MAX_TILE_COUNT:
            raise RummikubError(FailureKind.TILE_LIMIT_EXCEEDED, "more copies than the game holds")
        return self

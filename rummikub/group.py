from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

from .scoring import ScoringRule, score_tiles
from .tiles import JOKER, Color, Number, Tile

MIN_GROUP_SIZE = 3
MAX_GROUP_SIZE = 4
MAX_JOKERS_IN_GROUP = 2


@dataclass(frozen=True)
class Group:
    """Three or four tiles of one number, each in a different color.

    Jokers fill whichever colors are not held by a real tile.
    """

    number: Number
    colors: FrozenSet[Color] = field(default_factory=frozenset)
    jokers: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "number", Number(self.number))
        object.__setattr__(self, "colors", frozenset(Color(c) for c in self.colors))
        if not 0 <= self.jokers <= MAX_JOKERS_IN_GROUP:
            raise ValueError("invalid group: too many jokers")
        if not MIN_GROUP_SIZE <= len(self) <= MAX_GROUP_SIZE:
            raise ValueError("invalid group: member count out of range")

    @classmethod
    def of(cls, number: Number, colors: Iterable[Color]) -> Optional["Group"]:
        """Build a joker-free group; a repeated color is rejected."""
        colors = list(colors)
        if not MIN_GROUP_SIZE <= len(colors) <= MAX_GROUP_SIZE:
            return None
        distinct = frozenset(colors)
        if len(distinct) != len(colors):
            return None
        return cls(number, distinct)

    @classmethod
    def parse(cls, tiles: Sequence[Tile]) -> Optional["Group"]:
        if not MIN_GROUP_SIZE <= len(tiles) <= MAX_GROUP_SIZE:
            return None
        first = next((tile for tile in tiles if tile.is_regular()), None)
        if first is None:
            return None

        jokers = 0
        colors = set()
        for tile in tiles:
            if tile.is_joker():
                jokers += 1
                continue
            if tile.number != first.number or tile.color in colors:
                return None
            colors.add(tile.color)
        if jokers > MAX_JOKERS_IN_GROUP:
            return None
        return cls(first.number, frozenset(colors), jokers)

    def __len__(self) -> int:
        return len(self.colors) + self.jokers

    def contains(self, color: Color) -> bool:
        return color in self.colors

    def missing_colors(self) -> List[Color]:
        return [color for color in Color if color not in self.colors]

    def decompose(self) -> List[Tile]:
        tiles = [JOKER] * self.jokers
        tiles.extend(Tile.of(color, self.number) for color in sorted(self.colors))
        return tiles

    def score(self, rule: ScoringRule) -> int:
        if rule == ScoringRule.ON_TABLE:
            return self.number.face_value * len(self)
        return score_tiles(self.decompose())

    def insert_tile(self, tile: Tile) -> Optional["Group"]:
        if len(self) >= MAX_GROUP_SIZE:
            return None
        if tile.is_joker():
            if self.jokers >= MAX_JOKERS_IN_GROUP:
                return None
            return Group(self.number, self.colors, self.jokers + 1)
        if tile.number != self.number or self.contains(tile.color):
            return None
        return Group(self.number, self.colors | {tile.color}, self.jokers)

    def extract_spare(self, color: Color) -> Optional[Tuple["Group", Tile]]:
        """Take the ``color`` tile out of a four-member group."""
        if len(self) < MAX_GROUP_SIZE or not self.contains(color):
            return None
        return Group(self.number, self.colors - {color}, self.jokers), Tile.of(color, self.number)

    def replace_joker(self, tile: Tile) -> Optional[Tuple["Group", Tile]]:
        """Put ``tile`` where a joker stood, handing the joker back."""
        if self.jokers == 0 or tile.is_joker():
            return None
        if tile.number != self.number or self.contains(tile.color):
            return None
        return Group(self.number, self.colors | {tile.color}, self.jokers - 1), JOKER

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, List, Optional

JOKER_ID = 52
MAX_TILE_ID = 52
MULTISET_SIZE = 53
VALUES_PER_COLOR = 13


class Color(IntEnum):
    RED = 0
    BLUE = 1
    ORANGE = 2
    BLACK = 3


class Number(IntEnum):
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    ELEVEN = 11
    TWELVE = 12
    THIRTEEN = 13

    @property
    def face_value(self) -> int:
        return int(self)

    # Boundaries yield None rather than clamping; a clamped next() once made
    # a walk up to THIRTEEN loop forever.
    def next(self) -> Optional["Number"]:
        if self is Number.THIRTEEN:
            return None
        return Number(self + 1)

    def prev(self) -> Optional["Number"]:
        if self is Number.ONE:
            return None
        return Number(self - 1)

    @classmethod
    def span(cls, start: "Number", end: "Number") -> List["Number"]:
        """Every number from ``start`` to ``end`` inclusive, walked with next()."""
        numbers: List[Number] = []
        current: Optional[Number] = start
        while current is not None and current <= end:
            numbers.append(current)
            current = current.next()
        return numbers


def color_of(tile_id: int) -> Color:
    if tile_id == JOKER_ID:
        raise ValueError("Joker has no inherent color")
    return Color(tile_id // VALUES_PER_COLOR)


def value_of(tile_id: int) -> Number:
    if tile_id == JOKER_ID:
        raise ValueError("Joker has no inherent value")
    return Number((tile_id % VALUES_PER_COLOR) + 1)


@dataclass(frozen=True, order=True)
class Tile:
    tile_id: int

    def __post_init__(self) -> None:
        if not 0 <= self.tile_id <= MAX_TILE_ID:
            raise ValueError(f"Invalid tile id: {self.tile_id}")

    @classmethod
    def joker(cls) -> "Tile":
        return cls(JOKER_ID)

    @classmethod
    def of(cls, color: Color, number: Number) -> "Tile":
        return cls(int(color) * VALUES_PER_COLOR + (int(number) - 1))

    def is_joker(self) -> bool:
        return self.tile_id == JOKER_ID

    def is_regular(self) -> bool:
        return not self.is_joker()

    @property
    def color(self) -> Optional[Color]:
        if self.is_joker():
            return None
        return color_of(self.tile_id)

    @property
    def number(self) -> Optional[Number]:
        if self.is_joker():
            return None
        return value_of(self.tile_id)

    def is_color(self, color: Color) -> bool:
        return not self.is_joker() and self.color == color

    def is_number(self, number: Number) -> bool:
        return not self.is_joker() and self.number == number

    def decompose(self) -> List["Tile"]:
        return [self]

    def __repr__(self) -> str:
        if self.is_joker():
            return "Tile(JOKER)"
        return f"Tile({self.color.name}, {self.number.face_value})"


JOKER = Tile.joker()


def all_unique_numbered() -> List[Tile]:
    return [Tile.of(color, number) for color in Color for number in Number]


def iter_full_deck(copies: int = 2, num_jokers: int = 2) -> Iterable[Tile]:
    for _ in range(copies):
        for tile in all_unique_numbered():
            yield tile
    for _ in range(num_jokers):
        yield JOKER


def unique_colors(tiles: Iterable[Tile]) -> set:
    return {tile.color for tile in tiles if tile.is_regular()}


def iter_ids(tiles: Iterable[Tile]) -> Iterator[int]:
    for tile in tiles:
        yield tile.tile_id

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional, Sequence, Tuple, Union

from .scoring import ScoringRule, score_tiles
from .tiles import JOKER, Color, Number, Tile

logger = logging.getLogger(__name__)

MIN_RUN_SIZE = 3
MAX_RUN_SIZE = 13
MAX_JOKERS_IN_RUN = 2

# A wedge keeps this many tiles on both sides of the split point.
WEDGE_MARGIN = MIN_RUN_SIZE - 1


class Side(str, Enum):
    LOW = "LOW"
    HIGH = "HIGH"


@dataclass(frozen=True)
class EdgeSlot:
    tile: Tile
    side: Side


@dataclass(frozen=True)
class WedgeSlot:
    tile: Tile
    position: Number


Slot = Union[EdgeSlot, WedgeSlot]


@dataclass(frozen=True)
class Spares:
    removed: Tuple[Tuple[Number, Tile], ...]
    remaining: "Run"

    def tiles(self) -> List[Tile]:
        return [tile for _, tile in self.removed]


@dataclass(frozen=True)
class Run:
    """Three or more consecutive numbers of one color.

    ``joker_positions`` holds the numbers that are stood in for by jokers.
    A 1 can never follow a 13.
    """

    start: Number
    end: Number
    color: Color
    joker_positions: FrozenSet[Number] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", Number(self.start))
        object.__setattr__(self, "end", Number(self.end))
        object.__setattr__(self, "color", Color(self.color))
        object.__setattr__(self, "joker_positions", frozenset(Number(n) for n in self.joker_positions))
        reason = self._invariant_violation()
        if reason:
            raise ValueError(f"invalid run: {reason}")

    def _invariant_violation(self) -> str:
        if self.start > self.end:
            return "start after end"
        if not MIN_RUN_SIZE <= len(self) <= MAX_RUN_SIZE:
            return "run length out of range"
        if any(not self.start <= pos <= self.end for pos in self.joker_positions):
            return "joker outside of run"
        if len(self.joker_positions) > MAX_JOKERS_IN_RUN:
            return "too many jokers"
        return ""

    @classmethod
    def of(cls, start: Number, color: Color, length: int) -> Optional["Run"]:
        if length < MIN_RUN_SIZE or length > MAX_RUN_SIZE:
            return None
        last = int(start) + length - 1
        if last > Number.THIRTEEN:
            return None
        return cls(Number(start), Number(last), color)

    @classmethod
    def parse(cls, tiles: Sequence[Tile]) -> Optional["Run"]:
        """Read ``tiles`` in the order given as a run, or return None.

        Leading jokers count down from the first real tile; every tile after
        that must sit on the next number up.
        """
        if not MIN_RUN_SIZE <= len(tiles) <= MAX_RUN_SIZE:
            return None
        if sum(1 for tile in tiles if tile.is_joker()) > MAX_JOKERS_IN_RUN:
            return None

        anchor_index = next((i for i, tile in enumerate(tiles) if tile.is_regular()), None)
        if anchor_index is None:
            return None
        color = tiles[anchor_index].color
        start: Optional[Number] = tiles[anchor_index].number
        for _ in range(anchor_index):
            start = start.prev()
            if start is None:
                return None

        expected: Optional[Number] = start
        joker_positions = set()
        for index, tile in enumerate(tiles):
            if index > 0:
                expected = expected.next()
                if expected is None:
                    return None
            if tile.is_joker():
                joker_positions.add(expected)
            elif tile.color != color or tile.number != expected:
                return None
        return cls(start, expected, color, frozenset(joker_positions))

    def __len__(self) -> int:
        return int(self.end) - int(self.start) + 1

    def numbers(self) -> List[Number]:
        return Number.span(self.start, self.end)

    def tile_at(self, number: Number) -> Optional[Tile]:
        if not self.start <= number <= self.end:
            return None
        if number in self.joker_positions:
            return JOKER
        return Tile.of(self.color, number)

    def contains_joker(self) -> bool:
        return bool(self.joker_positions)

    def decompose(self) -> List[Tile]:
        return [JOKER if n in self.joker_positions else Tile.of(self.color, n) for n in self.numbers()]

    def score(self, rule: ScoringRule) -> int:
        if rule == ScoringRule.ON_TABLE:
            return sum(n.face_value for n in self.numbers())
        return score_tiles(self.decompose())

    def edge_slots(self) -> List[EdgeSlot]:
        slots: List[EdgeSlot] = []
        below = self.start.prev()
        if below is not None:
            slots.append(EdgeSlot(Tile.of(self.color, below), Side.LOW))
        above = self.end.next()
        if above is not None:
            slots.append(EdgeSlot(Tile.of(self.color, above), Side.HIGH))
        return slots

    def wedge_slots(self) -> List[WedgeSlot]:
        slots: List[WedgeSlot] = []
        if len(self) < MIN_RUN_SIZE + WEDGE_MARGIN:
            return slots
        for position in self.numbers()[WEDGE_MARGIN:-WEDGE_MARGIN]:
            slot = WedgeSlot(Tile.of(self.color, position), position)
            if self._wedge(slot.tile, position) is not None:
                slots.append(slot)
        return slots

    def insert_tile(self, tile: Tile, slot: Slot) -> Optional[Tuple["Run", ...]]:
        """Lay ``tile`` into ``slot``.

        An edge slot gives back one longer run. A wedge slot gives back the
        two runs on either side of the duplicated number. A joker may fill an
        edge slot; a wedge always needs the exact tile.
        """
        if isinstance(slot, EdgeSlot):
            if slot not in self.edge_slots():
                return None
            if tile != slot.tile and not tile.is_joker():
                return None
            tiles = self.decompose()
            extended = Run.parse([tile] + tiles if slot.side == Side.LOW else tiles + [tile])
            return None if extended is None else (extended,)
        if tile != slot.tile:
            return None
        return self._wedge(tile, slot.position)

    def _wedge(self, tile: Tile, position: Number) -> Optional[Tuple["Run", "Run"]]:
        if not self.start + WEDGE_MARGIN <= position <= self.end - WEDGE_MARGIN:
            return None
        if tile != Tile.of(self.color, position):
            return None
        tiles = self.decompose()
        cut = int(position) - int(self.start) + 1
        left = Run.parse(tiles[:cut])
        right = Run.parse([tile] + tiles[cut:])
        if left is None or right is None:
            return None
        return left, right

    def natural_splits(self) -> List[Tuple["Run", "Run"]]:
        splits: List[Tuple[Run, Run]] = []
        tiles = self.decompose()
        for cut in range(MIN_RUN_SIZE, len(tiles) - MIN_RUN_SIZE + 1):
            left = Run.parse(tiles[:cut])
            right = Run.parse(tiles[cut:])
            if left is not None and right is not None:
                splits.append((left, right))
        return splits

    def spares(self, side: Side, limit: int) -> Spares:
        """Peel up to ``limit`` real tiles off one end, keeping a valid run.

        Peeling stops at the first joker.
        """
        tiles = self.decompose()
        numbers = self.numbers()
        removed: List[Tuple[Number, Tile]] = []
        while len(removed) < limit and len(tiles) - len(removed) > MIN_RUN_SIZE:
            index = len(removed) if side == Side.LOW else len(tiles) - 1 - len(removed)
            if tiles[index].is_joker():
                break
            removed.append((numbers[index], tiles[index]))
        if not removed:
            return Spares((), self)
        if side == Side.LOW:
            remaining = Run.parse(tiles[len(removed):])
        else:
            remaining = Run.parse(tiles[: len(tiles) - len(removed)])
        logger.debug("peeled %d spare(s) from the %s end of %r", len(removed), side.value, self)
        return Spares(tuple(removed), remaining)

    def replace_joker(self, tile: Tile) -> Optional[Tuple["Run", Tile]]:
        """Swap ``tile`` in for the joker standing at its number, freeing the joker."""
        if tile.is_joker() or tile.color != self.color:
            return None
        if tile.number not in self.joker_positions:
            return None
        freed = Run(self.start, self.end, self.color, self.joker_positions - {tile.number})
        return freed, JOKER

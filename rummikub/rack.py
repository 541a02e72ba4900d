from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple, Union

from .errors import FailureKind, RummikubError
from .group import Group
from .initial_meld import InitialMeld
from .multiset import TileMultiset
from .rules import Ruleset
from .run import Run
from .scoring import ScoringRule, count_tiles, score_tiles
from .search import extract_sets, largest_group, largest_run
from .sets import TileSet
from .tiles import Tile

logger = logging.getLogger(__name__)


TileSource = Union[Tile, Run, Group, TileSet, InitialMeld, "Rack", Iterable[Tile]]


def tiles_of(item: TileSource) -> List[Tile]:
    """Tiles making up a tile, formation, meld, rack or plain tile sequence."""
    if isinstance(item, (Tile, Run, Group, TileSet, InitialMeld, Rack)):
        return item.decompose()
    return list(item)


@dataclass(frozen=True)
class Rack:
    """The tiles a player holds, known only to that player.

    Every change returns a new Rack.
    """

    tiles: TileMultiset = field(default_factory=TileMultiset.empty)
    played_initial_meld: bool = False

    def __post_init__(self) -> None:
        self.tiles.check_universe()

    @classmethod
    def of(cls, tiles: Iterable[Tile], played_initial_meld: bool = False) -> "Rack":
        return cls(TileMultiset.from_tiles(tiles), played_initial_meld)

    def is_empty(self) -> bool:
        return self.tiles.total() == 0

    def decompose(self) -> List[Tile]:
        return self.tiles.tiles()

    def count(self) -> int:
        return count_tiles(self.decompose())

    def score(self, rule: ScoringRule = ScoringRule.ON_RACK) -> int:
        if rule != ScoringRule.ON_RACK:
            raise RummikubError(FailureKind.UNSUPPORTED_SCORING_RULE, "loose rack tiles only score on the rack")
        return score_tiles(self.decompose())

    def add_tile(self, tile: Tile) -> "Rack":
        return Rack(self.tiles.add(TileMultiset.from_tiles([tile])), self.played_initial_meld)

    def remove(self, item: TileSource) -> Optional["Rack"]:
        """Take out every tile of ``item``, or return None if any is missing."""
        needed = TileMultiset.from_tiles(tiles_of(item))
        if not self.tiles.contains(needed):
            return None
        return Rack(self.tiles.sub(needed), self.played_initial_meld)

    def mark_initial_meld_played(self) -> "Rack":
        return Rack(self.tiles, True)

    def largest_run(self) -> Optional[Run]:
        return largest_run(self.tiles)

    def largest_group(self) -> Optional[Group]:
        return largest_group(self.tiles)

    def sets_on_rack(self) -> Tuple[List[TileSet], "Rack"]:
        """Pull complete sets out of the rack, runs first, then groups."""
        sets, remaining = extract_sets(self.tiles)
        return sets, Rack(remaining, self.played_initial_meld)

    def can_play_initial_meld(self, rules: Optional[Ruleset] = None) -> Optional[InitialMeld]:
        sets, _ = self.sets_on_rack()
        return InitialMeld.parse(sets, rules)

    def play_initial_meld(self, rules: Optional[Ruleset] = None) -> Optional[Tuple["Rack", InitialMeld]]:
        if self.played_initial_meld:
            return None
        meld = self.can_play_initial_meld(rules)
        if meld is None:
            return None
        remaining = self.remove(meld)
        if remaining is None:
            raise RummikubError(FailureKind.TILE_NOT_AVAILABLE, "initial meld uses tiles the rack does not hold")
        logger.info("initial meld of %d set(s) worth %d points", len(meld.sets), meld.score())
        return remaining.mark_initial_meld_played(), meld

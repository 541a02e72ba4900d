from __future__ import annotations

import logging
from itertools import combinations
from typing import Iterable, List, Optional, Tuple

from .group import Group, MAX_GROUP_SIZE, MIN_GROUP_SIZE
from .multiset import TileMultiset
from .run import MIN_RUN_SIZE, Run
from .scoring import ScoringRule, highest_value
from .sets import TileSet
from .tiles import Color, Number, Tile

logger = logging.getLogger(__name__)


def _subruns(color: Color, streak: List[Number]) -> Iterable[Run]:
    for i in range(len(streak)):
        for j in range(i + MIN_RUN_SIZE, len(streak) + 1):
            run = Run.parse([Tile.of(color, number) for number in streak[i:j]])
            if run is not None:
                yield run


def run_candidates(tiles: TileMultiset) -> Iterable[Run]:
    """Every joker-free run that can be laid from ``tiles``.

    Jokers are not tried as fillers yet, so a gap always ends a streak.
    """
    for color in Color:
        streak: List[Number] = []
        for number in Number:
            if tiles.count_of(Tile.of(color, number)):
                streak.append(number)
            else:
                yield from _subruns(color, streak)
                streak = []
        yield from _subruns(color, streak)


def group_candidates(tiles: TileMultiset) -> Iterable[Group]:
    for number in Number:
        available = [color for color in Color if tiles.count_of(Tile.of(color, number))]
        if len(available) < MIN_GROUP_SIZE:
            continue
        for size in range(MAX_GROUP_SIZE, MIN_GROUP_SIZE - 1, -1):
            for combo in combinations(available, size):
                group = Group.of(number, combo)
                if group is not None:
                    yield group


def largest_run(tiles: TileMultiset, rule: ScoringRule = ScoringRule.ON_RACK) -> Optional[Run]:
    return highest_value(run_candidates(tiles), lambda run: run.score(rule), tiebreak=len)


def largest_group(tiles: TileMultiset, rule: ScoringRule = ScoringRule.ON_RACK) -> Optional[Group]:
    return highest_value(group_candidates(tiles), lambda group: group.score(rule), tiebreak=len)


def extract_sets(tiles: TileMultiset) -> Tuple[List[TileSet], TileMultiset]:
    """Greedily pull out the best run until none is left, then the best group.

    Returns the sets in extraction order and the tiles nothing used.
    """
    sets: List[TileSet] = []
    remaining = tiles

    run = largest_run(remaining)
    while run is not None:
        sets.append(TileSet.of_run(run))
        remaining = remaining.sub(TileMultiset.from_tiles(run.decompose()))
        run = largest_run(remaining)

    group = largest_group(remaining)
    while group is not None:
        sets.append(TileSet.of_group(group))
        remaining = remaining.sub(TileMultiset.from_tiles(group.decompose()))
        group = largest_group(remaining)

    logger.debug("extracted %d set(s), %d tile(s) left over", len(sets), remaining.total())
    return sets, remaining

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .group import Group
from .multiset import TileMultiset
from .rack import Rack
from .rules import DEFAULT_RULES, RearrangePolicy, Ruleset
from .run import Run
from .search import extract_sets
from .sets import TileSet
from .table import Table
from .tiles import Tile

logger = logging.getLogger(__name__)


class RearrangeKind(str, Enum):
    PLACED = "PLACED"
    NO_PLACEMENT = "NO_PLACEMENT"


@dataclass(frozen=True)
class Rearrangement:
    """Outcome of trying to move rack tiles onto the table.

    NO_PLACEMENT is an ordinary answer: it carries the untouched rack and
    table, and the caller is expected to draw instead.
    """

    kind: RearrangeKind
    rack: Rack
    table: Table
    placed: TileMultiset = field(default_factory=TileMultiset.empty)
    reason: str = ""

    @staticmethod
    def place(rack: Rack, table: Table, placed: TileMultiset) -> "Rearrangement":
        return Rearrangement(RearrangeKind.PLACED, rack, table, placed)

    @staticmethod
    def none_found(rack: Rack, table: Table, reason: str) -> "Rearrangement":
        return Rearrangement(RearrangeKind.NO_PLACEMENT, rack, table, reason=reason)

    def accepted(self) -> bool:
        return self.kind == RearrangeKind.PLACED


def is_legal_rearrangement(old_rack: Rack, old_table: Table, new_rack: Rack, new_table: Table) -> Tuple[bool, str]:
    if new_rack.played_initial_meld != old_rack.played_initial_meld:
        return False, "initial meld flag must be preserved"
    if not old_rack.tiles.contains(new_rack.tiles):
        return False, "rack cannot gain tiles"
    moved = old_rack.tiles.sub(new_rack.tiles)
    if moved.total() == 0:
        return False, "no tiles placed"
    if new_table.multiset() != old_table.multiset().add(moved):
        return False, "table tiles must match previous table plus placed tiles"
    for tile_set in new_table.sets:
        if not tile_set.revalidate():
            return False, f"invalid set: {tile_set.signature()}"
    return True, ""


def _single(tile: Tile) -> TileMultiset:
    return TileMultiset.from_tiles([tile])


def _fit_into_run(run: Run, tile: Tile) -> Optional[Tuple[Run, ...]]:
    for slot in run.edge_slots():
        if slot.tile == tile:
            return run.insert_tile(tile, slot)
    for slot in run.wedge_slots():
        if slot.tile == tile:
            return run.insert_tile(tile, slot)
    return None


def _rack_scan(working: TileMultiset) -> List[Tile]:
    # Real tiles only; jokers stay on the rack in the incremental pass.
    return sorted({tile for tile in working.tiles() if tile.is_regular()})


def extend_in_place(rack: Rack, table: Table) -> Rearrangement:
    """Grow each set on the table by at most one rack tile.

    Runs take a tile at either end, or a duplicate that wedges them in two;
    groups take a missing color. The first rack tile that fits a set wins,
    so one set never claims two copies of the same tile.
    """
    working = rack.tiles

    runs: List[Run] = []
    for run in table.runs():
        result: Tuple[Run, ...] = (run,)
        for tile in _rack_scan(working):
            fitted = _fit_into_run(run, tile)
            if fitted is not None:
                logger.debug("laid %r against %r", tile, run)
                result = fitted
                working = working.sub(_single(tile))
                break
        runs.extend(result)

    groups: List[Group] = []
    for group in table.groups():
        grown = group
        for tile in _rack_scan(working):
            inserted = group.insert_tile(tile)
            if inserted is not None:
                logger.debug("laid %r into %r", tile, group)
                grown = inserted
                working = working.sub(_single(tile))
                break
        groups.append(grown)

    new_table = Table([TileSet.of_run(r) for r in runs] + [TileSet.of_group(g) for g in groups])
    new_rack = Rack(working, rack.played_initial_meld)
    if new_rack.tiles == rack.tiles:
        return Rearrangement.none_found(rack, table, "no rack tile fits the table")

    legal, reason = is_legal_rearrangement(rack, table, new_rack, new_table)
    if not legal:
        logger.warning("incremental rearrangement rejected: %s", reason)
        return Rearrangement.none_found(rack, table, reason)
    return Rearrangement.place(new_rack, new_table, rack.tiles.sub(working))


def shatter_and_rebuild(rack: Rack, table: Table) -> Rearrangement:
    """Pool the table and the rack, then lay the best sets back down greedily.

    Accepted only if more tiles end up on the table and everything left over
    came from the rack.
    """
    pool = table.multiset().add(rack.tiles)
    sets, remaining = extract_sets(pool)
    new_table = Table(sets)

    if new_table.count() <= table.count():
        return Rearrangement.none_found(rack, table, "rebuild placed no new tiles")
    if not rack.tiles.contains(remaining):
        # Leftovers that were not on the rack would be tiles taken off the table.
        return Rearrangement.none_found(rack, table, "rebuild would leave table tiles unplaced")

    new_rack = Rack(remaining, rack.played_initial_meld)
    legal, reason = is_legal_rearrangement(rack, table, new_rack, new_table)
    if not legal:
        logger.warning("exhaustive rearrangement rejected: %s", reason)
        return Rearrangement.none_found(rack, table, reason)
    return Rearrangement.place(new_rack, new_table, rack.tiles.sub(remaining))


_STRATEGIES = {
    RearrangePolicy.INCREMENTAL: extend_in_place,
    RearrangePolicy.EXHAUSTIVE: shatter_and_rebuild,
}


def rearrange(
    rack: Rack, table: Table, policy: Optional[RearrangePolicy] = None, rules: Optional[Ruleset] = None
) -> Rearrangement:
    policy = RearrangePolicy(policy or (rules or DEFAULT_RULES).rearrange_policy)
    result = _STRATEGIES[policy](rack, table)
    if result.accepted():
        logger.info("%s rearrangement placed %d tile(s)", policy.value.lower(), result.placed.total())
    else:
        logger.debug("%s rearrangement found nothing: %s", policy.value.lower(), result.reason)
    return result


def place_from_rack(rack: Rack, table: Table, rules: Optional[Ruleset] = None) -> Rearrangement:
    """Lay down whatever the rack allows this turn, without drawing.

    A rack that has not opened yet may only play its initial meld. An opened
    rack lays any complete sets it holds and then reworks the table.
    """
    rules = rules or DEFAULT_RULES
    if not rack.played_initial_meld:
        opened = rack.play_initial_meld(rules)
        if opened is None:
            return Rearrangement.none_found(rack, table, "no initial meld available")
        new_rack, meld = opened
        new_table = table.place_new_sets(meld.sets)
        return Rearrangement.place(new_rack, new_table, rack.tiles.sub(new_rack.tiles))

    new_rack, new_table = rack, table
    sets, rest = rack.sets_on_rack()
    if sets:
        new_rack, new_table = rest, table.place_new_sets(sets)

    reworked = rearrange(new_rack, new_table, rules=rules)
    if reworked.accepted():
        new_rack, new_table = reworked.rack, reworked.table

    if new_rack.tiles == rack.tiles:
        return Rearrangement.none_found(rack, table, "nothing to place; draw instead")
    legal, reason = is_legal_rearrangement(rack, table, new_rack, new_table)
    if not legal:
        return Rearrangement.none_found(rack, table, reason)
    return Rearrangement.place(new_rack, new_table, rack.tiles.sub(new_rack.tiles))

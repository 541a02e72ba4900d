import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rummikub.errors import FailureKind, RummikubError
from rummikub.group import Group
from rummikub.initial_meld import InitialMeld
from rummikub.rack import Rack
from rummikub.rules import Ruleset
from rummikub.run import Run
from rummikub.scoring import ScoringRule
from rummikub.sets import TileSet
from rummikub.tiles import JOKER, Color, Number, Tile

R, B, O, K = Color.RED, Color.BLUE, Color.ORANGE, Color.BLACK


def t(color, n):
    return Tile.of(color, Number(n))


def test_remove_from_rack():
    rack = Rack.of([t(R, 12), t(B, 1), t(B, 1), JOKER, t(K, 10), t(K, 1)])

    assert rack.remove([JOKER]) == Rack.of([t(R, 12), t(B, 1), t(B, 1), t(K, 10), t(K, 1)])
    assert rack.remove([]) == rack
    assert rack.remove([t(B, 1)]) == Rack.of([t(R, 12), t(B, 1), JOKER, t(K, 10), t(K, 1)])
    assert rack.remove([t(B, 1), t(B, 1)]) == Rack.of([t(R, 12), JOKER, t(K, 10), t(K, 1)])
    assert rack.remove([t(O, 5)]) is None
    assert rack.remove(rack).is_empty()


def test_remove_is_all_or_nothing():
    rack = Rack.of([t(R, 1), t(R, 2)])
    assert rack.remove(Run.of(Number.ONE, R, 3)) is None
    assert rack == Rack.of([t(R, 1), t(R, 2)])


def test_remove_accepts_tiles_sets_and_sequences():
    rack = Rack.of([t(R, 1), t(R, 2), t(R, 3), t(B, 5)])
    red_run = Run.of(Number.ONE, R, 3)

    assert rack.remove(t(B, 5)) == Rack.of([t(R, 1), t(R, 2), t(R, 3)])
    assert rack.remove(red_run) == Rack.of([t(B, 5)])
    assert rack.remove(TileSet.of_run(red_run)) == Rack.of([t(B, 5)])
    assert rack.remove(InitialMeld((TileSet.of_run(red_run),))) == Rack.of([t(B, 5)])
    assert rack.remove(tile for tile in [t(R, 1), t(B, 5)]) == Rack.of([t(R, 2), t(R, 3)])


def test_remove_keeps_initial_meld_flag():
    rack = Rack.of([t(R, 1)], played_initial_meld=True)
    assert rack.remove([t(R, 1)]).played_initial_meld


def test_sets_on_rack_runs_then_groups():
    rack = Rack.of([t(R, 1), t(R, 2), t(R, 3), t(R, 4), t(B, 7), t(O, 7), t(K, 7), t(R, 9)])
    sets, rest = rack.sets_on_rack()
    assert sets == [
        TileSet.of_run(Run.of(Number.ONE, R, 4)),
        TileSet.of_group(Group.of(Number.SEVEN, [B, O, K])),
    ]
    assert rest == Rack.of([t(R, 9)])


def test_runs_claim_tiles_before_groups():
    rack = Rack.of([t(R, 5), t(R, 6), t(R, 7), t(B, 7), t(O, 7)])
    sets, rest = rack.sets_on_rack()
    assert sets == [TileSet.of_run(Run.of(Number.FIVE, R, 3))]
    assert rest == Rack.of([t(B, 7), t(O, 7)])


def test_highest_run_is_taken_first():
    rack = Rack.of([t(R, 1), t(R, 2), t(R, 3), t(B, 10), t(B, 11), t(B, 12)])
    assert rack.largest_run() == Run.of(Number.TEN, B, 3)
    sets, rest = rack.sets_on_rack()
    assert [s.run for s in sets] == [Run.of(Number.TEN, B, 3), Run.of(Number.ONE, R, 3)]
    assert rest.is_empty()


def test_jokers_are_not_run_fillers():
    rack = Rack.of([t(R, 1), JOKER, t(R, 3)])
    sets, rest = rack.sets_on_rack()
    assert sets == []
    assert rest == rack


def test_largest_group_prefers_four():
    rack = Rack.of([t(R, 2), t(B, 2), t(O, 2), t(K, 2)])
    assert rack.largest_group() == Group.of(Number.TWO, [R, B, O, K])


def test_initial_meld_threshold():
    assert Rack.of([t(R, 10), t(R, 11), t(R, 12)]).can_play_initial_meld() is not None
    assert Rack.of([t(R, 1), t(R, 2), t(R, 3)]).can_play_initial_meld() is None
    assert Rack.of([]).can_play_initial_meld() is None


def test_initial_meld_boundary_at_thirty():
    exactly_thirty = Rack.of([t(R, 9), t(R, 10), t(R, 11)])
    assert exactly_thirty.can_play_initial_meld().score() == 30
    assert exactly_thirty.can_play_initial_meld(Ruleset(initial_meld_inclusive=False)) is None

    thirty_one = [
        TileSet.of_run(Run.of(Number.EIGHT, R, 3)),
        TileSet.of_group(Group.of(Number.ONE, [R, B, O, K])),
    ]
    assert InitialMeld.parse(thirty_one).score() == 31
    assert InitialMeld.parse(thirty_one, Ruleset(initial_meld_inclusive=False)) is not None


def test_play_initial_meld():
    rack = Rack.of([t(R, 10), t(R, 11), t(R, 12), t(B, 5)])
    new_rack, meld = rack.play_initial_meld()
    assert new_rack == Rack.of([t(B, 5)], played_initial_meld=True)
    assert meld.sets == (TileSet.of_run(Run.of(Number.TEN, R, 3)),)
    assert new_rack.play_initial_meld() is None


def test_rack_score_and_limits():
    rack = Rack.of([t(R, 1), JOKER])
    assert rack.score() == 31
    assert rack.count() == 2
    with pytest.raises(RummikubError) as excinfo:
        rack.score(ScoringRule.ON_TABLE)
    assert excinfo.value.kind == FailureKind.UNSUPPORTED_SCORING_RULE
    with pytest.raises(RummikubError) as excinfo:
        Rack.of([t(R, 1), t(R, 1)]).add_tile(t(R, 1))
    assert excinfo.value.kind == FailureKind.TILE_LIMIT_EXCEEDED

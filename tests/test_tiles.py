import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rummikub.errors import FailureKind, RummikubError
from rummikub.multiset import TileMultiset
from rummikub.rules import Ruleset
from rummikub.run import Run
from rummikub.scoring import count_tiles, highest_value, score_tiles, ScoringRule
from rummikub.group import Group
from rummikub.tiles import JOKER, Color, Number, Tile, all_unique_numbered, iter_full_deck, unique_colors


def test_number_boundaries_yield_none():
    assert Number.THIRTEEN.next() is None
    assert Number.ONE.prev() is None
    assert Number.TWELVE.next() == Number.THIRTEEN
    assert Number.TWO.prev() == Number.ONE


def test_walking_up_to_thirteen_terminates():
    assert Number.span(Number.ELEVEN, Number.THIRTEEN) == [Number.ELEVEN, Number.TWELVE, Number.THIRTEEN]
    top = Run.of(Number.ELEVEN, Color.RED, 3)
    assert top.decompose() == [Tile.of(Color.RED, n) for n in (Number.ELEVEN, Number.TWELVE, Number.THIRTEEN)]


def test_tile_properties():
    tile = Tile.of(Color.RED, Number.TWELVE)
    assert tile.is_color(Color.RED)
    assert not tile.is_color(Color.BLACK)
    assert tile.is_number(Number.TWELVE)
    assert not tile.is_number(Number.ONE)
    assert not tile.is_joker()
    assert JOKER.is_joker()
    assert JOKER.color is None and JOKER.number is None
    assert not JOKER.is_color(Color.RED)


def test_equal_tiles_compare_equal():
    assert Tile.of(Color.RED, Number.FIVE) == Tile.of(Color.RED, Number.FIVE)
    assert Tile.of(Color.RED, Number.FIVE) != Tile.of(Color.BLUE, Number.EIGHT)


def test_invalid_tile_id_rejected():
    with pytest.raises(ValueError):
        Tile(53)


def test_deck_has_106_tiles():
    deck = list(iter_full_deck())
    assert len(all_unique_numbered()) == 52
    assert len(deck) == Ruleset().deck_size() == 106
    assert sum(1 for t in deck if t.is_joker()) == 2
    assert sum(1 for t in deck if t.is_color(Color.RED)) == 26
    assert sum(1 for t in deck if t.is_number(Number.SEVEN)) == 8
    TileMultiset.from_tiles(deck).check_universe()


def test_unique_colors_ignores_jokers():
    tiles = [JOKER, Tile.of(Color.RED, Number.ONE), JOKER, Tile.of(Color.BLUE, Number.TWELVE)]
    assert unique_colors(tiles) == {Color.RED, Color.BLUE}


def test_loose_tiles_score_jokers_at_thirty():
    tiles = [
        Tile.of(Color.RED, Number.ONE),
        Tile.of(Color.BLUE, Number.TWO),
        Tile.of(Color.BLACK, Number.THREE),
        JOKER,
    ]
    assert score_tiles(tiles) == 36


def test_count_beyond_the_game_is_refused():
    assert count_tiles([JOKER] * 3) == 3
    with pytest.raises(RummikubError) as excinfo:
        count_tiles([Tile.of(Color.RED, Number.ONE)] * 107)
    assert excinfo.value.kind == FailureKind.TILE_LIMIT_EXCEEDED


def test_highest_value_picks_best_group():
    twos = Group.of(Number.TWO, [Color.RED, Color.BLUE, Color.BLACK])
    fours = Group.of(Number.FOUR, [Color.RED, Color.BLUE, Color.BLACK])
    assert highest_value([twos, fours], lambda g: g.score(ScoringRule.ON_TABLE)) == fours
    assert highest_value([], len) is None


def test_multiset_subtraction_and_universe():
    red_one = Tile.of(Color.RED, Number.ONE)
    ms = TileMultiset.from_tiles([red_one, red_one, JOKER])
    assert ms.total() == 3
    assert ms.jokers() == 1
    assert ms.sub(TileMultiset.from_tiles([red_one])).count_of(red_one) == 1
    assert ms.tiles() == [red_one, red_one, JOKER]
    with pytest.raises(RummikubError) as excinfo:
        ms.sub(TileMultiset.from_tiles([JOKER, JOKER]))
    assert excinfo.value.kind == FailureKind.TILE_NOT_AVAILABLE
    with pytest.raises(RummikubError) as excinfo:
        TileMultiset.from_tiles([red_one] * 3).check_universe()
    assert excinfo.value.kind == FailureKind.TILE_LIMIT_EXCEEDED

import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rummikub.errors import FailureKind, RummikubError
from rummikub.group import Group
from rummikub.run import Run
from rummikub.scoring import ScoringRule
from rummikub.sets import TileSet
from rummikub.table import Table
from rummikub.tiles import Color, Number


def _sets():
    run = TileSet.of_run(Run.of(Number.ONE, Color.RED, 3))
    group = TileSet.of_group(Group.of(Number.SEVEN, [Color.RED, Color.BLUE, Color.ORANGE]))
    return run, group


def test_place_new_sets_returns_new_table():
    run, group = _sets()
    empty = Table.empty()
    table = empty.place_new_sets([run]).place_new_sets([group])
    assert empty.sets == ()
    assert table.sets == (run, group)
    assert table.count() == 6
    assert table.runs() == [run.formation]
    assert table.groups() == [group.formation]


def test_table_scores_on_table_only():
    run, group = _sets()
    table = Table([run, group])
    assert table.score() == 6 + 21
    assert table.score(ScoringRule.ON_TABLE) == 27
    with pytest.raises(RummikubError) as excinfo:
        table.score(ScoringRule.ON_RACK)
    assert excinfo.value.kind == FailureKind.UNSUPPORTED_SCORING_RULE


def test_canonicalization_is_order_invariant():
    run, group = _sets()
    table_a = Table([group, run])
    table_b = Table([run, group])

    assert table_a != table_b
    assert table_a.canonicalize().canonical_key() == table_a.canonical_key()
    assert table_a.canonical_key() == table_b.canonical_key()
    assert table_a.stable_hash() == table_b.stable_hash()
    assert table_a.same_layout(table_b)
    assert table_a.multiset() == table_b.multiset()

"""Rummikub tile-formation core: sets, racks, the table and rearranging it."""

from .errors import FailureKind, RummikubError
from .group import Group
from .initial_meld import InitialMeld
from .multiset import TileMultiset
from .rack import Rack
from .rearrange import (
    RearrangeKind,
    Rearrangement,
    extend_in_place,
    is_legal_rearrangement,
    place_from_rack,
    rearrange,
    shatter_and_rebuild,
)
from .rules import DEFAULT_RULES, RearrangePolicy, Ruleset
from .run import EdgeSlot, Run, Side, Spares, WedgeSlot
from .scoring import ScoringRule
from .sets import SetKind, TileSet
from .table import Table
from .tiles import JOKER, Color, Number, Tile

__all__ = [
    "Color",
    "DEFAULT_RULES",
    "EdgeSlot",
    "FailureKind",
    "Group",
    "InitialMeld",
    "JOKER",
    "Number",
    "Rack",
    "RearrangeKind",
    "RearrangePolicy",
    "Rearrangement",
    "Ruleset",
    "Run",
    "RummikubError",
    "ScoringRule",
    "SetKind",
    "Side",
    "Spares",
    "Table",
    "Tile",
    "TileMultiset",
    "TileSet",
    "WedgeSlot",
    "extend_in_place",
    "is_legal_rearrangement",
    "place_from_rack",
    "rearrange",
    "shatter_and_rebuild",
]

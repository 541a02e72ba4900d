from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .errors import FailureKind, RummikubError
from .group import Group
from .multiset import TileMultiset
from .run import Run
from .scoring import ScoringRule, count_tiles
from .sets import SetKind, TileSet
from .tiles import Tile


@dataclass(frozen=True)
class Table:
    """The face-up sets every player can see and rework."""

    sets: Tuple[TileSet, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "sets", tuple(self.sets))

    @classmethod
    def empty(cls) -> "Table":
        return cls(())

    def place_new_sets(self, sets: Iterable[TileSet]) -> "Table":
        return Table(self.sets + tuple(sets))

    def decompose(self) -> List[Tile]:
        return [tile for s in self.sets for tile in s.decompose()]

    def multiset(self) -> TileMultiset:
        return TileMultiset.from_tiles(self.decompose())

    def count(self) -> int:
        return count_tiles(self.decompose())

    def score(self, rule: ScoringRule = ScoringRule.ON_TABLE) -> int:
        if rule != ScoringRule.ON_TABLE:
            raise RummikubError(FailureKind.UNSUPPORTED_SCORING_RULE, "a table is only scored on the table")
        return sum(s.score(rule) for s in self.sets)

    def runs(self) -> List[Run]:
        return [s.formation for s in self.sets if s.kind == SetKind.RUN]

    def groups(self) -> List[Group]:
        return [s.formation for s in self.sets if s.kind == SetKind.GROUP]

    def canonicalize(self) -> "Table":
        return Table(sorted(self.sets, key=lambda s: s.signature()))

    def canonical_key(self) -> Tuple:
        return tuple(s.signature() for s in self.canonicalize().sets)

    def stable_hash(self) -> str:
        key = self.canonical_key()
        return hashlib.sha256(repr(key).encode("utf-8")).hexdigest()

    def same_layout(self, other: "Table") -> bool:
        return self.canonical_key() == other.canonical_key()

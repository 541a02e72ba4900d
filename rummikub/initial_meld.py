from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .rules import DEFAULT_RULES, Ruleset
from .scoring import ScoringRule
from .sets import TileSet
from .tiles import Tile


@dataclass(frozen=True)
class InitialMeld:
    """A player's first lay-down, made from rack tiles only.

    The sets together must reach the ruleset's minimum points, scored
    with the rack rule.
    """

    sets: Tuple[TileSet, ...]

    @classmethod
    def parse(cls, candidates: Iterable[TileSet], rules: Optional[Ruleset] = None) -> Optional["InitialMeld"]:
        rules = rules or DEFAULT_RULES
        sets = tuple(candidates)
        if not sets:
            return None
        if not rules.meets_initial_meld(sum(s.score(ScoringRule.ON_RACK) for s in sets)):
            return None
        return cls(sets)

    def score(self) -> int:
        return sum(s.score(ScoringRule.ON_RACK) for s in self.sets)

    def decompose(self) -> List[Tile]:
        return [tile for s in self.sets for tile in s.decompose()]

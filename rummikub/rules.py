from dataclasses import dataclass
from enum import Enum


class RearrangePolicy(str, Enum):
    INCREMENTAL = "INCREMENTAL"
    EXHAUSTIVE = "EXHAUSTIVE"


@dataclass(frozen=True)
class Ruleset:
    colors: int = 4
    values: int = 13
    copies_per_tiletype: int = 2
    num_jokers: int = 2
    initial_meld_min_points: int = 30
    # The printed rules say "at least"; False gives a strict comparison.
    initial_meld_inclusive: bool = True
    rearrange_policy: RearrangePolicy = RearrangePolicy.INCREMENTAL

    def deck_size(self) -> int:
        normal_tiles = self.colors * self.values * self.copies_per_tiletype
        return normal_tiles + self.num_jokers

    def meets_initial_meld(self, points: int) -> bool:
        if self.initial_meld_inclusive:
            return points >= self.initial_meld_min_points
        return points > self.initial_meld_min_points


DEFAULT_RULES = Ruleset()

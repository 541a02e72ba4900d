from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from .group import Group
from .run import Run
from .scoring import ScoringRule
from .tiles import Tile


class SetKind(str, Enum):
    RUN = "RUN"
    GROUP = "GROUP"


@dataclass(frozen=True)
class TileSet:
    """A placed formation, either a Run or a Group."""

    kind: SetKind
    formation: Union[Run, Group]

    def __post_init__(self) -> None:
        expected = {SetKind.RUN: Run, SetKind.GROUP: Group}.get(self.kind)
        if expected is None or not isinstance(self.formation, expected):
            raise ValueError(f"{self.kind} set cannot hold {type(self.formation).__name__}")

    @classmethod
    def of_run(cls, run: Run) -> "TileSet":
        return cls(SetKind.RUN, run)

    @classmethod
    def of_group(cls, group: Group) -> "TileSet":
        return cls(SetKind.GROUP, group)

    @classmethod
    def parse(cls, tiles: Sequence[Tile]) -> Optional["TileSet"]:
        run = Run.parse(tiles)
        if run is not None:
            return cls.of_run(run)
        group = Group.parse(tiles)
        if group is not None:
            return cls.of_group(group)
        return None

    @property
    def run(self) -> Optional[Run]:
        return self.formation if self.kind == SetKind.RUN else None

    @property
    def group(self) -> Optional[Group]:
        return self.formation if self.kind == SetKind.GROUP else None

    def decompose(self) -> List[Tile]:
        if self.kind == SetKind.RUN:
            return self.formation.decompose()
        if self.kind == SetKind.GROUP:
            return self.formation.decompose()
        raise ValueError("unknown set kind")

    def score(self, rule: ScoringRule) -> int:
        if self.kind == SetKind.RUN:
            return self.formation.score(rule)
        if self.kind == SetKind.GROUP:
            return self.formation.score(rule)
        raise ValueError("unknown set kind")

    def count(self) -> int:
        return len(self.formation)

    def revalidate(self) -> bool:
        """Re-read the tiles through the parser and check nothing changed."""
        if self.kind == SetKind.RUN:
            return Run.parse(self.decompose()) == self.formation
        if self.kind == SetKind.GROUP:
            return Group.parse(self.decompose()) == self.formation
        return False

    def signature(self) -> Tuple:
        return (self.kind.value, tuple(tile.tile_id for tile in self.decompose()))

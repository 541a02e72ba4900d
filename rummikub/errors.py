from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    TILE_NOT_AVAILABLE = "TILE_NOT_AVAILABLE"
    TILE_LIMIT_EXCEEDED = "TILE_LIMIT_EXCEEDED"
    UNSUPPORTED_SCORING_RULE = "UNSUPPORTED_SCORING_RULE"
    INVALID_FORMATION = "INVALID_FORMATION"


class RummikubError(ValueError):
    """An operation the game does not permit.

    Validation of candidate formations never raises; it yields ``None``.
    This is reserved for requests that are wrong in themselves, such as
    taking tiles that are not there.
    """

    def __init__(self, kind: FailureKind, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        message = kind.value if not detail else f"{kind.value}: {detail}"
        super().__init__(message)

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .Errors import InvalidArgument

if TYPE_CHECKING:  # pragma: no cover
    from glickoratings.math.glicko import GlickoEntry, OpponentEntry

__all__ = ["MatchRecord"]


@dataclass(frozen=True)
class MatchRecord:
    '''
    One game seen from the point of view of `subject`. The opponent's rating
    and deviation must be frozen as of the time the game was played.
    '''

    subject: Optional["GlickoEntry"]
    opponent: "OpponentEntry"
    score: float  # 0 loss, 0.5 draw, 1 win, or any fractional result in between
    played: Optional[int] = None  # timestamp, seconds since epoch

    def __post_init__(self) -> None:
        if not 0.0 <= self.score <= 1.0:
            raise InvalidArgument("Match score must be within [0, 1], got %r" % (self.score,))

    def __str__(self) -> str:
        return "%s vs. %s -> %.1f" % (self.subject, self.opponent, self.score)

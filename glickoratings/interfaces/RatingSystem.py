import abc
from typing import Any, Sequence

from .MatchRecord import MatchRecord

__all__ = ["RatingSystem"]


class RatingSystem(abc.ABC):
    @abc.abstractmethod
    def process_period(
        self, entry: Any, matches: Sequence[MatchRecord] | None, days_since_last_active: float | None = None
    ) -> Any:
        raise NotImplementedError

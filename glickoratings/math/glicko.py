import logging
from dataclasses import asdict, dataclass, replace
from math import exp, floor, pi, sqrt
from time import time
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from glickoratings.interfaces import GlickoConfig, InvalidArgument, InvalidState, MatchRecord, RatingSystem
from glickoratings.interfaces.GlickoConfig import Q

__all__ = [
    "GlickoEngine",
    "GlickoEntry",
    "OpponentEntry",
    "expected_outcome",
    "g",
    "glicko_configure",
    "glicko_update",
    "round_to_precision",
]

LOSS = 0.0
DRAW = 0.5
WIN = 1.0
INITIAL_RATING = 1500.0
INITIAL_RD = 350.0
RD_CEILING = 350.0
INACTIVITY_CONSTANT = 0.5
DAYS_PER_RATING_PERIOD = 30.0
ROUNDING_PRECISION = 2
SECONDS_PER_DAY = 24 * 60 * 60


def g(rd: float) -> float:
    # Damping applied to an opponent's result, 1 for a perfectly known
    # opponent and shrinking towards 0 as their deviation grows.
    return 1 / sqrt(1 + 3 * Q ** 2 * rd ** 2 / pi ** 2)


def expected_outcome(subject_rating: float, opponent_rating: float, opponent_rd: float) -> float:
    return 1 / (1 + exp(-g(opponent_rd) * Q * (subject_rating - opponent_rating)))


def round_to_precision(value: float, places: int) -> float:
    # Halves round up (towards +inf), so 1500.5 at 0 places is 1501.
    scale = 10 ** places
    return floor(value * scale + 0.5) / scale


@dataclass(frozen=True)
class OpponentEntry:
    rating: float
    deviation: float

    def __str__(self) -> str:
        return "%7.2f +- %6.2f" % (self.rating, self.deviation)


@dataclass(frozen=True)
class GlickoEntry:
    rating: float = INITIAL_RATING
    deviation: float = INITIAL_RD
    last_active: Optional[int] = None  # timestamp, None if the player has never played

    def __str__(self) -> str:
        return "%7.2f +- %6.2f @ %10d" % (
            self.rating,
            self.deviation,
            0 if self.last_active is None else self.last_active,
        )

    def as_opponent(self) -> OpponentEntry:
        return OpponentEntry(self.rating, self.deviation)

    def days_inactive(self, timestamp: int) -> Optional[float]:
        if self.last_active is None:
            return None
        return max(0, timestamp - self.last_active) / SECONDS_PER_DAY

    def expected_win_probability(self, opponent: Union["GlickoEntry", OpponentEntry]) -> float:
        return expected_outcome(self.rating, opponent.rating, opponent.deviation)


class GlickoEngine(RatingSystem):
    """
    Glicko-1 rating period update, as described in
    http://www.glicko.net/glicko/glicko.pdf

    The engine holds an immutable GlickoConfig and never mutates the entries
    it is given; every operation returns a new GlickoEntry. Matches against
    opponents with a non-positive deviation are skipped and reported through
    `logger` at WARNING level.
    """

    config: GlickoConfig
    logger: logging.Logger

    def __init__(
        self, config: GlickoConfig | None = None, logger: logging.Logger | None = None, **overrides: float
    ) -> None:
        if config is None:
            self.config = GlickoConfig.from_overrides(overrides)
        elif overrides:
            self.config = GlickoConfig.from_overrides({**asdict(config), **overrides})
        else:
            self.config = config
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def _round(self, value: float) -> float:
        return round_to_precision(value, self.config.rounding_precision)

    def initialize_new_player(
        self, rating: float | None = None, deviation: float | None = None, last_active: int | None = None
    ) -> GlickoEntry:
        return GlickoEntry(
            rating=self._round(self.config.initial_rating if rating is None else rating),
            deviation=self._round(self.config.initial_rd if deviation is None else deviation),
            last_active=last_active,
        )

    def inflate_for_inactivity(self, entry: GlickoEntry, days_since_last_active: float) -> GlickoEntry:
        if days_since_last_active < 0:
            raise InvalidArgument("Days since last active cannot be negative.")

        rd = entry.deviation
        if entry.last_active is not None:
            periods = days_since_last_active / self.config.days_per_rating_period
            # Clamps down as well as up, an entry already above the ceiling
            # is pulled back to it.
            rd = min(sqrt(rd ** 2 + self.config.inactivity_constant ** 2 * periods), self.config.rd_ceiling)

        return replace(entry, rating=self._round(entry.rating), deviation=self._round(rd))

    def age_to_timestamp(self, entry: GlickoEntry, timestamp: int) -> GlickoEntry:
        days = entry.days_inactive(timestamp)
        return self.inflate_for_inactivity(entry, 0 if days is None else days)

    def expected_outcome(self, subject_rating: float, opponent_rating: float, opponent_rd: float) -> float:
        return expected_outcome(subject_rating, opponent_rating, opponent_rd)

    def _scored_matches(
        self, subject_rating: float, subject_rd: float, matches: Sequence[MatchRecord]
    ) -> Iterator[Tuple[float, float, float]]:
        if subject_rd <= 0:
            raise InvalidState("Player RD must be positive for calculations, got %r." % (subject_rd,))

        for match in matches:
            opponent = match.opponent
            if opponent.deviation <= 0:
                self.logger.warning(
                    "Skipping match with non-positive opponent RD: %s (score %.1f)", opponent, match.score
                )
                continue
            E = expected_outcome(subject_rating, opponent.rating, opponent.deviation)
            yield g(opponent.deviation), E, match.score

    def aggregate_information(
        self, subject_rating: float, subject_rd: float, matches: Sequence[MatchRecord]
    ) -> float:
        # 1 / d^2 before scaling by q^2, the inverse variance of the
        # period's results.
        return sum(g_j ** 2 * E * (1 - E) for g_j, E, _ in self._scored_matches(subject_rating, subject_rd, matches))

    def aggregate_performance(
        self, subject_rating: float, subject_rd: float, matches: Sequence[MatchRecord]
    ) -> float:
        return sum(g_j * (s - E) for g_j, E, s in self._scored_matches(subject_rating, subject_rd, matches))

    def posterior_rd(self, prior_rd: float, information_sum: float) -> float:
        if prior_rd <= 0:
            raise InvalidState("Prior RD must be positive, got %r." % (prior_rd,))
        if information_sum <= 0:
            return prior_rd
        return 1 / sqrt(1 / prior_rd ** 2 + Q ** 2 * information_sum)

    def posterior_rating(self, prior_rating: float, posterior_rd: float, performance_sum: float) -> float:
        # Scaled by the *updated* deviation, so posterior_rd must be computed first.
        return prior_rating + Q * posterior_rd ** 2 * performance_sum

    def process_period(
        self,
        entry: GlickoEntry,
        matches: Sequence[MatchRecord] | None,
        days_since_last_active: float | None = None,
        timestamp: int | None = None,
    ) -> GlickoEntry:
        if days_since_last_active is not None:
            if days_since_last_active < 0:
                raise InvalidArgument("Days since last active cannot be negative.")
            if days_since_last_active > 0:
                entry = self.inflate_for_inactivity(entry, days_since_last_active)

        matches = list(matches or [])
        if not matches:
            return entry

        # Single pass, so each skipped match is reported once per period.
        information = 0.0
        performance = 0.0
        for g_j, E, s in self._scored_matches(entry.rating, entry.deviation, matches):
            information += g_j ** 2 * E * (1 - E)
            performance += g_j * (s - E)

        rd_prime = self.posterior_rd(entry.deviation, information)
        rating_prime = self.posterior_rating(entry.rating, rd_prime, performance)

        return GlickoEntry(
            rating=self._round(rating_prime),
            deviation=self._round(rd_prime),
            last_active=int(time()) if timestamp is None else timestamp,
        )


_default_engine = GlickoEngine()


def glicko_update(
    player: GlickoEntry,
    matches: List[Union[MatchRecord, Tuple[Union[GlickoEntry, OpponentEntry], float]]],
    days_since_last_active: float | None = None,
    timestamp: int | None = None,
) -> GlickoEntry:
    records = [m if isinstance(m, MatchRecord) else MatchRecord(player, m[0], m[1]) for m in matches]
    return _default_engine.process_period(player, records, days_since_last_active, timestamp)


def glicko_configure(
    initial_rating: float = INITIAL_RATING,
    initial_rd: float = INITIAL_RD,
    inactivity_constant: float = INACTIVITY_CONSTANT,
    rd_ceiling: float = RD_CEILING,
    days_per_rating_period: float = DAYS_PER_RATING_PERIOD,
    rounding_precision: int = ROUNDING_PRECISION,
) -> None:
    global _default_engine

    _default_engine = GlickoEngine(
        GlickoConfig(
            initial_rating=initial_rating,
            initial_rd=initial_rd,
            inactivity_constant=inactivity_constant,
            rd_ceiling=rd_ceiling,
            days_per_rating_period=days_per_rating_period,
            rounding_precision=rounding_precision,
        )
    )

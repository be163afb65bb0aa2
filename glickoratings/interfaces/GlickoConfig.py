import configparser
import logging
from dataclasses import dataclass, fields
from math import isfinite, log
from typing import Any, Dict, Mapping

from .Errors import ConfigurationInvalid

__all__ = ["GlickoConfig"]


logger = logging.getLogger(__name__)

# Fixed by the Glicko-1 paper, shared with the Elo logistic curve.
Q = log(10) / 400


@dataclass(frozen=True)
class GlickoConfig:
    initial_rating: float = 1500.0
    initial_rd: float = 350.0
    inactivity_constant: float = 0.5
    rd_ceiling: float = 350.0
    days_per_rating_period: float = 30.0
    rounding_precision: int = 2

    def __post_init__(self) -> None:
        for name in ("initial_rating", "initial_rd", "inactivity_constant", "rd_ceiling", "days_per_rating_period"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not isfinite(value):
                raise ConfigurationInvalid("%s must be a finite number, got %r." % (name, value))
        for name in ("initial_rating", "initial_rd", "inactivity_constant", "rd_ceiling"):
            if getattr(self, name) < 0:
                raise ConfigurationInvalid("%s must be non-negative." % name)
        if not self.days_per_rating_period > 0:
            raise ConfigurationInvalid("days_per_rating_period must be positive.")

        precision = self.rounding_precision
        if isinstance(precision, bool) or not isinstance(precision, (int, float)):
            raise ConfigurationInvalid("rounding_precision must be a non-negative integer.")
        if isinstance(precision, float):
            if not precision.is_integer():
                raise ConfigurationInvalid("rounding_precision must be a non-negative integer.")
            object.__setattr__(self, "rounding_precision", int(precision))
        if self.rounding_precision < 0:
            raise ConfigurationInvalid("rounding_precision must be a non-negative integer.")

    @property
    def q(self) -> float:
        return Q

    @classmethod
    def from_overrides(cls, overrides: Mapping[str, Any] | None = None) -> "GlickoConfig":
        """
        Builds a configuration from a partial mapping of field names to
        values, anything not given keeps its default. `q` is derived and
        any value supplied for it is ignored.
        """
        kwargs: Dict[str, Any] = dict(overrides or {})
        if "q" in kwargs:
            logger.debug("Ignoring q override %r, q is fixed at ln(10)/400", kwargs.pop("q"))

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigurationInvalid("Unknown configuration option(s): %s" % ", ".join(unknown))
        return cls(**kwargs)

    @classmethod
    def from_ini(cls, path: str, section: str = "glicko") -> "GlickoConfig":
        ini = configparser.ConfigParser()
        ini.read(path)
        if not ini.has_section(section):
            logger.info(f"No [{section}] section in {path}, using default configuration.")
            return cls()

        overrides: Dict[str, Any] = {}
        for key, value in ini.items(section):
            try:
                overrides[key] = float(value)
            except ValueError as e:
                raise ConfigurationInvalid(f"{key} = {value!r} is not a number") from e
        return cls.from_overrides(overrides)

    def __str__(self) -> str:
        return "r0=%.2f rd0=%.2f c=%.4f ceiling=%.2f period=%gd precision=%d" % (
            self.initial_rating,
            self.initial_rd,
            self.inactivity_constant,
            self.rd_ceiling,
            self.days_per_rating_period,
            self.rounding_precision,
        )

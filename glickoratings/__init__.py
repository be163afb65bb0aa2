"""
Glicko-1 rating and rating deviation calculator.
"""

from .interfaces import ConfigurationInvalid, GlickoConfig, GlickoError, InvalidArgument, InvalidState, MatchRecord
from .math import GlickoEngine, GlickoEntry, OpponentEntry, glicko_configure, glicko_update

__all__ = [
    "ConfigurationInvalid",
    "GlickoConfig",
    "GlickoEngine",
    "GlickoEntry",
    "GlickoError",
    "InvalidArgument",
    "InvalidState",
    "MatchRecord",
    "OpponentEntry",
    "glicko_configure",
    "glicko_update",
]

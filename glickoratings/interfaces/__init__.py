from .Errors import ConfigurationInvalid, GlickoError, InvalidArgument, InvalidState
from .GlickoConfig import GlickoConfig
from .MatchRecord import MatchRecord
from .RatingSystem import RatingSystem

__all__ = [
    "ConfigurationInvalid",
    "GlickoConfig",
    "GlickoError",
    "InvalidArgument",
    "InvalidState",
    "MatchRecord",
    "RatingSystem",
]

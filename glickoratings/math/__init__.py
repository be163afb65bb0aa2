from .glicko import (
    GlickoEngine,
    GlickoEntry,
    OpponentEntry,
    expected_outcome,
    g,
    glicko_configure,
    glicko_update,
    round_to_precision,
)

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

from math import log

import pytest

from glickoratings.interfaces import ConfigurationInvalid, GlickoConfig, GlickoError
from glickoratings.math.glicko import GlickoEngine


def test_defaults():
    config = GlickoEngine().config
    assert config.initial_rating == 1500
    assert config.initial_rd == 350
    assert config.inactivity_constant == 0.5
    assert config.rd_ceiling == 350
    assert config.days_per_rating_period == 30
    assert config.rounding_precision == 2
    assert config.q == log(10) / 400


def test_overrides():
    engine = GlickoEngine(
        initial_rating=1000,
        initial_rd=200,
        inactivity_constant=0.3,
        rd_ceiling=300,
        days_per_rating_period=60,
        rounding_precision=0,
    )
    assert engine.config == GlickoConfig(1000, 200, 0.3, 300, 60, 0)
    assert engine.config.q == log(10) / 400


def test_overrides_on_top_of_config():
    engine = GlickoEngine(GlickoConfig(initial_rating=1000), rd_ceiling=300)
    assert engine.config.initial_rating == 1000
    assert engine.config.rd_ceiling == 300

    config = GlickoConfig(initial_rd=100)
    assert GlickoEngine(config).config is config


def test_q_is_ignored():
    engine = GlickoEngine(q=1.0)
    assert engine.config.q == log(10) / 400
    assert GlickoConfig.from_overrides({"q": 42}) == GlickoConfig()


@pytest.mark.parametrize(
    "overrides",
    [
        {"initial_rating": -1},
        {"initial_rd": -0.01},
        {"inactivity_constant": -5},
        {"rd_ceiling": -350},
        {"days_per_rating_period": 0},
        {"days_per_rating_period": -30},
        {"rounding_precision": -1},
        {"rounding_precision": 2.5},
        {"rounding_precision": True},
        {"rounding_precision": "2"},
        {"days_per_rating_period": float("nan")},
        {"initial_rating": float("nan")},
        {"initial_rd": float("inf")},
        {"inactivity_constant": float("nan")},
        {"rd_ceiling": float("-inf")},
        {"rounding_precision": float("nan")},
        {"initial_rating": "1500"},
        {"rd_ceiling": None},
        {"days_per_rating_period": True},
        {"not_an_option": 1},
    ],
)
def test_invalid(overrides):
    with pytest.raises(ConfigurationInvalid):
        GlickoEngine(**overrides)


def test_invalid_is_a_value_error():
    with pytest.raises(ValueError):
        GlickoConfig(rd_ceiling=-1)
    with pytest.raises(GlickoError):
        GlickoConfig(rd_ceiling=-1)


def test_zero_values_allowed():
    config = GlickoConfig(initial_rating=0, initial_rd=0, inactivity_constant=0, rd_ceiling=0, rounding_precision=0)
    assert config.rounding_precision == 0


def test_integral_float_precision():
    config = GlickoConfig(rounding_precision=3.0)
    assert config.rounding_precision == 3
    assert isinstance(config.rounding_precision, int)


def test_from_ini(tmp_path):
    path = tmp_path / "glicko.ini"
    path.write_text(
        "[glicko]\n"
        "initial_rating = 1200\n"
        "rd_ceiling = 300\n"
        "rounding_precision = 1\n"
        "q = 0.5\n"
    )
    config = GlickoConfig.from_ini(str(path))
    assert config.initial_rating == 1200
    assert config.rd_ceiling == 300
    assert config.rounding_precision == 1
    assert config.initial_rd == 350
    assert config.q == log(10) / 400


def test_from_ini_other_section(tmp_path):
    path = tmp_path / "ratings.ini"
    path.write_text("[blitz]\ndays_per_rating_period = 7\n")
    assert GlickoConfig.from_ini(str(path), section="blitz").days_per_rating_period == 7
    assert GlickoConfig.from_ini(str(path)) == GlickoConfig()
    assert GlickoConfig.from_ini(str(tmp_path / "missing.ini")) == GlickoConfig()


def test_from_ini_invalid(tmp_path):
    path = tmp_path / "glicko.ini"
    path.write_text("[glicko]\ninitial_rd = wide\n")
    with pytest.raises(ConfigurationInvalid):
        GlickoConfig.from_ini(str(path))

    path.write_text("[glicko]\ninitial_rd = -10\n")
    with pytest.raises(ConfigurationInvalid):
        GlickoConfig.from_ini(str(path))

    path.write_text("[glicko]\nvolatility = 0.06\n")
    with pytest.raises(ConfigurationInvalid):
        GlickoConfig.from_ini(str(path))

    for line in ("days_per_rating_period = nan", "initial_rating = inf", "rd_ceiling = -nan"):
        path.write_text("[glicko]\n%s\n" % line)
        with pytest.raises(ConfigurationInvalid):
            GlickoConfig.from_ini(str(path))


def test_str():
    assert isinstance(str(GlickoConfig()), str)

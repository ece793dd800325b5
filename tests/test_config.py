"""
test_config.py
--------------

Unit tests for OddsConfig and the active-config accessors.
"""

import logging

import pytest

from odds import config
from odds.config import OddsConfig


def test_defaults():
    cfg = OddsConfig()
    assert cfg.seed is None
    assert cfg.sampler == "multiply"
    assert cfg.logger_level == logging.INFO


def test_from_env_parses_all_fields():
    cfg = OddsConfig.from_env({
        "ODDS_SEED": "0x539",
        "ODDS_SAMPLER": "Portable",
        "ODDS_LOG_LEVEL": "debug",
    })
    assert cfg == OddsConfig(seed=1337, sampler="portable", logger_level=logging.DEBUG)


def test_from_env_empty():
    assert OddsConfig.from_env({}) == OddsConfig()


def test_from_env_numeric_level():
    assert OddsConfig.from_env({"ODDS_LOG_LEVEL": "15"}).logger_level == 15


@pytest.mark.parametrize("env", [
    {"ODDS_SEED": "-1"},
    {"ODDS_SEED": "seed"},
    {"ODDS_SAMPLER": "modulo"},
    {"ODDS_LOG_LEVEL": "loud"},
])
def test_from_env_invalid(env):
    with pytest.raises(ValueError):
        OddsConfig.from_env(env)


def test_frozen():
    cfg = OddsConfig()
    with pytest.raises(AttributeError):
        cfg.sampler = "portable"


def test_seed_validation():
    with pytest.raises(ValueError):
        OddsConfig(seed=1 << 64)
    with pytest.raises(TypeError):
        OddsConfig(seed=1.0)
    with pytest.raises(TypeError):
        OddsConfig(logger_level="INFO")


def test_configure_and_set_config():
    original = config.get_config()
    updated = config.configure(sampler="portable", seed=7)
    assert config.get_config() is updated
    assert updated.sampler == "portable"
    assert updated.seed == 7
    assert updated.logger_level == original.logger_level

    previous = config.set_config(original)
    assert previous is updated
    assert config.get_config() is original


def test_set_config_type_check():
    with pytest.raises(TypeError):
        config.set_config({"sampler": "portable"})


@pytest.mark.parametrize("env, name", [
    ({"ODDS_SEED": "abc"}, "ODDS_SEED"),
    ({"ODDS_SEED": str(1 << 64)}, "ODDS_SEED"),
    ({"ODDS_SAMPLER": "modulo"}, "ODDS_SAMPLER"),
    ({"ODDS_LOG_LEVEL": "loud"}, "ODDS_LOG_LEVEL"),
])
def test_from_env_error_names_variable(env, name):
    with pytest.raises(ValueError, match=name):
        OddsConfig.from_env(env)


def test_load_env_config_falls_back_on_bad_values(caplog):
    with caplog.at_level(logging.WARNING, logger="odds.config"):
        cfg = config.load_env_config({"ODDS_SEED": "abc", "ODDS_SAMPLER": "portable"})
    assert cfg == OddsConfig()
    assert "ODDS_SEED" in caplog.text


def test_load_env_config_valid():
    assert config.load_env_config({"ODDS_SEED": "12"}) == OddsConfig(seed=12)

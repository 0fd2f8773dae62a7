import logging

import pytest

from astrosky.config import DEFAULT_CONFIG, EngineConfig, KeplerConfig, SkyConfig
from astrosky.core import Observer
from astrosky.logging_config import configure_logging, get_logger


def test_defaults():
    assert DEFAULT_CONFIG.kepler.elliptic_tolerance == 1e-8
    assert DEFAULT_CONFIG.kepler.hyperbolic_tolerance == 1e-5
    assert DEFAULT_CONFIG.kepler.max_iterations == 100000
    assert DEFAULT_CONFIG.sky.max_magnitude == 6.5
    assert DEFAULT_CONFIG.sky.observer == Observer(45.0, 0.0)


@pytest.mark.parametrize("kwargs", [
    dict(elliptic_tolerance=0.0),
    dict(hyperbolic_tolerance=-1e-5),
    dict(max_iterations=0),
])
def test_kepler_config_validation(kwargs):
    with pytest.raises(ValueError):
        KeplerConfig(**kwargs)


@pytest.mark.parametrize("kwargs", [
    dict(observer=Observer(91.0, 0.0)),
    dict(au_scaling=0.0),
    dict(star_sphere_radius=-1.0),
])
def test_sky_config_validation(kwargs):
    with pytest.raises(ValueError):
        SkyConfig(**kwargs)


def test_from_env():
    config = EngineConfig.from_env({
        "ASTROSKY_LAT": "-33.9",
        "ASTROSKY_LON": "18.4",
        "ASTROSKY_MAX_MAG": "4.0",
        "ASTROSKY_AU_SCALING": "25",
    })
    assert config.sky.observer == Observer(-33.9, 18.4)
    assert config.sky.max_magnitude == 4.0
    assert config.sky.au_scaling == 25.0
    assert config.kepler == KeplerConfig()


def test_from_env_keeps_defaults():
    assert EngineConfig.from_env({}) == EngineConfig()


def test_from_env_rejects_bad_latitude():
    with pytest.raises(ValueError):
        EngineConfig.from_env({"ASTROSKY_LAT": "120"})


def test_configs_are_frozen():
    with pytest.raises(AttributeError):
        DEFAULT_CONFIG.sky.max_magnitude = 3.0


def test_loggers_live_under_package():
    assert get_logger("astrosky.universe.nearest").parent.name in ("astrosky.universe", "astrosky")


def test_configure_logging_file(tmp_path):
    log_file = tmp_path / "astrosky.log"
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        root.handlers = []
        configure_logging(logging.DEBUG, str(log_file))
        get_logger("astrosky.test").debug("hello from the test")
        for handler in root.handlers:
            handler.flush()
        assert "hello from the test" in log_file.read_text()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers, level = saved
        root.setLevel(level)

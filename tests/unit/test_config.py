import pytest

from blockfall.config import (
    CLASSIC_CONFIG,
    CONFIG_REGISTRY,
    DEFAULT_CONFIG,
    STANDARD_DELAY,
    GameConfig,
    get_config,
)


def test_default_config_disables_optional_rules() -> None:
    assert DEFAULT_CONFIG.lock_delay is None
    assert not DEFAULT_CONFIG.detect_top_out
    assert not DEFAULT_CONFIG.clear_lines


def test_classic_config_enables_optional_rules() -> None:
    assert CLASSIC_CONFIG.lock_delay == STANDARD_DELAY
    assert CLASSIC_CONFIG.detect_top_out
    assert CLASSIC_CONFIG.clear_lines


def test_get_config_by_name() -> None:
    assert get_config("default") is DEFAULT_CONFIG
    assert get_config("classic") is CLASSIC_CONFIG
    assert set(CONFIG_REGISTRY) >= {"default", "classic"}


def test_get_config_unknown_name_raises() -> None:
    with pytest.raises(ValueError):
        get_config("nope")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 3},
        {"height": 2},
        {"death_zone_height": -1},
        {"death_zone_height": 20},
        {"lock_delay": -1},
    ],
)
def test_invalid_config_raises(kwargs: dict[str, int]) -> None:
    with pytest.raises(ValueError):
        GameConfig(**kwargs)

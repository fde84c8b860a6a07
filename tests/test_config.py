import pytest

from blockfall.config import GameConfig


def test_reference_configuration():
    config = GameConfig()
    assert (config.grid_width, config.grid_height) == (16, 32)
    assert (config.cell_width, config.cell_height) == (32, 32)
    assert config.period_ms == 100.0
    assert config.screen_size == (512, 1024)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"grid_width": 0},
        {"grid_height": -1},
        {"cell_width": 0},
        {"updates_per_second": 0},
        {"grid_width": 3},
    ],
)
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)

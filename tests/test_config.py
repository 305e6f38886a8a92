import pytest

from catstack.config import GameConfig


def test_defaults_match_classic_board():
    config = GameConfig()
    assert (config.rows, config.cols) == (5, 6)
    assert config.palette == ("white", "black", "brown", "gray")
    assert config.cats_per_color == 5
    assert config.generation_retry_cap == 100
    assert config.dealt_columns == 4
    assert config.supply_size == 20


def test_short_supply_is_accepted():
    config = GameConfig(rows=4, cols=5, palette=("A", "B"), cats_per_color=5)
    assert config.supply_size == 10
    assert config.rows * config.dealt_columns == 12


def test_palette_is_stored_as_tuple():
    config = GameConfig(palette=["A", "B"])
    assert config.palette == ("A", "B")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"rows": 0},
        {"cols": 2},
        {"cols": 1, "reserved_columns": 0, "rows": -1},
        {"palette": ()},
        {"palette": ("A", "A")},
        {"cats_per_color": 0},
        {"generation_retry_cap": 0},
        {"reserved_columns": -1},
        # more cats than dealt cells
        {"cols": 5},
        {"cats_per_color": 6},
        {"rows": 3, "palette": ("A", "B"), "cats_per_color": 7},
    ],
)
def test_invalid_configuration_raises(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)

import pytest

from app.core.levels import LEVELS, level_name


@pytest.mark.parametrize(
    "xp, expected",
    [
        (-1, "Starter"),
        (0, "STARTER"),
        (99, "STARTER"),
        (100, "BRONZE"),
        (250, "BRONZE"),
        (300, "SILVER"),
        (599, "SILVER"),
        (600, "GOLD"),
        (1000, "PLATINUM"),
        (1500, "DIAMOND"),
        (100_000, "DIAMOND"),
    ],
)
def test_level_name(xp, expected):
    assert level_name(xp) == expected


def test_levels_are_ascending():
    thresholds = [lvl.xpRequired for lvl in LEVELS]
    assert len(LEVELS) == 6
    assert thresholds == sorted(thresholds)
    assert [lvl.level for lvl in LEVELS] == [1, 2, 3, 4, 5, 6]

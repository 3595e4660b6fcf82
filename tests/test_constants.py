import pytest

from hamlogkit.constants import (
    MODE_NAMES,
    ModeType,
    mode_id,
    modetype_of,
)


def test_mode_id_positions():
    assert mode_id("CW") == 0
    assert mode_id("RTTY") == len(MODE_NAMES) - 1


@pytest.mark.parametrize("name", MODE_NAMES)
def test_mode_id_round_trip(name):
    assert MODE_NAMES[mode_id(name)] == name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("CW", ModeType.CW),
        ("CW-R", ModeType.CW),
        ("LSB", ModeType.PH),
        ("USB", ModeType.PH),
        ("FM", ModeType.PH),
        ("AM", ModeType.PH),
        ("RTTY", ModeType.DG),
    ],
)
def test_modetype_of(name, expected):
    assert modetype_of(name) is expected


def test_modetype_labels():
    assert [modetype_of(n).label for n in ("CW", "LSB", "RTTY")] == ["CW", "PH", "DG"]


def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        mode_id("PSK")
    with pytest.raises(ValueError):
        modetype_of("PSK")


def test_mode_ids_are_distinct_positions():
    assert sorted(mode_id(n) for n in MODE_NAMES) == list(range(len(MODE_NAMES)))
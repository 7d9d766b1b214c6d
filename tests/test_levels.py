import pytest

from gamelearn.progression.levels import LEVEL_THRESHOLDS, MAX_LEVEL, calculate_level


def test_threshold_table_shape():
    assert len(LEVEL_THRESHOLDS) == 20
    assert MAX_LEVEL == 20
    assert LEVEL_THRESHOLDS[0] == 0
    assert list(LEVEL_THRESHOLDS) == sorted(LEVEL_THRESHOLDS)


def test_each_threshold_is_inclusive_lower_bound():
    for index, threshold in enumerate(LEVEL_THRESHOLDS):
        assert calculate_level(threshold) == index + 1


def test_one_below_threshold_stays_on_previous_level():
    for index, threshold in enumerate(LEVEL_THRESHOLDS[1:], start=1):
        assert calculate_level(threshold - 1) == index


@pytest.mark.parametrize("xp,level", [
    (0, 1),
    (49, 1),
    (50, 2),
    (119, 2),
    (120, 3),
    (1100, 10),
    (4199, 19),
])
def test_known_levels(xp, level):
    assert calculate_level(xp) == level


@pytest.mark.parametrize("xp", [4200, 4201, 10_000, 10**9])
def test_level_capped_at_max(xp):
    assert calculate_level(xp) == MAX_LEVEL


def test_negative_xp_is_level_one():
    assert calculate_level(-1) == 1
    assert calculate_level(-10_000) == 1

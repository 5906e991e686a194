"""
Tests for the staged load score.
"""

import numpy as np
import pytest

from Load_Estimation.core.load_estimator import estimate_load, trunk_contribution, knee_correction
from Load_Estimation.core.thresholds import LoadThresholds, TrunkBands


@pytest.mark.parametrize("trunk, knee, expected", [
    (14.9, 200.0, 0.0),
    (15.0, 200.0, 30.0),
    (45.0, 100.0, 80.0),
    (44.9, 160.0, 60.0),
    (29.9, 170.0, 30.0),
    (30.0, 170.0, 60.0),
    (5.0, 90.0, 0.0),        # clamped at 0
    (20.0, 130.0, 20.0),
    (20.0, 150.0, 30.0),
    (90.0, 119.9, 80.0),
    (90.0, 180.0, 100.0),
])
def test_band_boundaries(trunk, knee, expected):
    assert estimate_load(trunk, knee) == expected


@pytest.mark.parametrize("trunk, expected", [(0, 0), (14.99, 0), (15, 30), (30, 60), (45, 100), (170, 100)])
def test_trunk_contribution(trunk, expected):
    assert trunk_contribution(trunk) == expected


@pytest.mark.parametrize("knee, expected", [(0, -20), (119.9, -20), (120, -10), (149.9, -10), (150, 0)])
def test_knee_correction(knee, expected):
    assert knee_correction(knee) == expected


def test_score_always_in_range():
    rng = np.random.default_rng(11)
    for trunk, knee in rng.uniform(-360, 360, size=(500, 2)):
        assert 0.0 <= estimate_load(trunk, knee) <= 100.0


@pytest.mark.parametrize("knee", [90.0, 135.0, 175.0])
def test_monotonic_in_trunk_angle(knee):
    scores = [estimate_load(t, knee) for t in np.linspace(0, 90, 181)]
    assert all(a <= b for a, b in zip(scores, scores[1:]))


def test_custom_thresholds():
    strict = LoadThresholds(trunk=TrunkBands(BANDS=((10.0, 0.0), (20.0, 50.0)), BEYOND=100.0))
    assert estimate_load(12.0, 170.0, strict) == 50.0
    assert estimate_load(12.0, 170.0) == 0.0

"""
Load Estimation Module

RULA-style staged load score from trunk and knee angles. Trunk flexion adds
load in four discrete steps; knee flexion (squatting) subtracts a flat
discount. The result is clamped to 0-100.
"""

import numpy as np
from typing import Optional, Tuple

from .thresholds import DEFAULT_THRESHOLDS, LoadThresholds


def _band_value(angle: float, bands: Tuple[Tuple[float, float], ...], beyond: float) -> float:
    for upper, value in bands:
        if angle < upper:
            return value
    return beyond


def trunk_contribution(trunk_angle: float, thresholds: Optional[LoadThresholds] = None) -> float:
    """Base load from trunk flexion (0, 30, 60 or 100)."""
    t = (thresholds or DEFAULT_THRESHOLDS).trunk
    return _band_value(trunk_angle, t.BANDS, t.BEYOND)


def knee_correction(knee_angle: float, thresholds: Optional[LoadThresholds] = None) -> float:
    """Discount for bent knees (-20, -10 or 0)."""
    k = (thresholds or DEFAULT_THRESHOLDS).knee
    return _band_value(knee_angle, k.BANDS, k.BEYOND)


def estimate_load(trunk_angle: float, knee_angle: float,
                  thresholds: Optional[LoadThresholds] = None) -> float:
    """
    Estimate ergonomic load (0-100, higher = worse).

    Args:
        trunk_angle: Trunk tilt from vertical in degrees
        knee_angle: Knee joint angle in degrees (180 = straight leg)
        thresholds: Band tables, defaults to DEFAULT_THRESHOLDS

    Returns:
        Clamped load score
    """
    t = thresholds or DEFAULT_THRESHOLDS
    score = trunk_contribution(trunk_angle, t) + knee_correction(knee_angle, t)
    return float(np.clip(score, t.score.MIN, t.score.MAX))

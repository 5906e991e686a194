"""
Ergonomic Thresholds & Reference Values

Band tables used by the load estimator and status classifier. The trunk bands
follow the RULA trunk-flexion steps (McAtamney & Corlett, 1993), simplified to
a 0-100 relative scale for on-site feedback. They are a behavioral nudge, not a
certified ergonomic index.
"""

from dataclasses import dataclass, field
from typing import Tuple

from .status import StatusLabel


@dataclass(frozen=True)
class TrunkBands:
    """
    Trunk flexion contribution to the load score.

    Each entry is (upper_bound_deg, score); the first band whose bound exceeds
    the trunk angle wins. Angles at or beyond the last bound score BEYOND.
    """
    BANDS: Tuple[Tuple[float, float], ...] = ((15.0, 0.0), (30.0, 30.0), (45.0, 60.0))
    BEYOND: float = 100.0


@dataclass(frozen=True)
class KneeCorrection:
    """
    Knee flexion discount. Bending the knees (squatting instead of stooping)
    lowers the load, so a deep knee angle is rewarded with a flat discount.
    """
    BANDS: Tuple[Tuple[float, float], ...] = ((120.0, -20.0), (150.0, -10.0))
    BEYOND: float = 0.0


@dataclass(frozen=True)
class StatusThresholds:
    """(low, high) pairs: below low = good, below high = warning, else danger."""
    TRUNK: Tuple[float, float] = (20.0, 40.0)
    LOAD: Tuple[float, float] = (30.0, 60.0)


@dataclass(frozen=True)
class ScoreRange:
    MIN: float = 0.0
    MAX: float = 100.0


@dataclass(frozen=True)
class LoadThresholds:
    """All tables used by a PostureEvaluator."""
    trunk: TrunkBands = field(default_factory=TrunkBands)
    knee: KneeCorrection = field(default_factory=KneeCorrection)
    status: StatusThresholds = field(default_factory=StatusThresholds)
    score: ScoreRange = field(default_factory=ScoreRange)


LOAD_THRESHOLDS = {
    'trunk': TrunkBands(),
    'knee': KneeCorrection(),
    'status': StatusThresholds(),
    'score': ScoreRange()
}

DEFAULT_THRESHOLDS = LoadThresholds()


LOAD_ADVICE = {
    StatusLabel.GOOD: (
        "Good",
        "Low lower-back load",
        "Keep lifting with a straight back"
    ),
    StatusLabel.WARNING: (
        "Caution",
        "Noticeable forward lean",
        "Bend your knees and bring the load closer"
    ),
    StatusLabel.DANGER: (
        "Danger",
        "Heavy lower-back load",
        "Squat down instead of stooping over"
    ),
}


def get_load_risk_level(load_status: StatusLabel) -> Tuple[str, str, str]:
    """
    Get the user-facing load level and advice for a load status.

    Takes the status rather than the score so the text always agrees with
    the thresholds that produced it.

    Args:
        load_status: Status of the load score

    Returns:
        Tuple of (level, description, recommendation)
    """
    return LOAD_ADVICE[load_status]

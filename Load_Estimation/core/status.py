"""Good / warning / danger banding of scalar metrics."""

from enum import Enum


class StatusLabel(Enum):
    GOOD = "good"
    WARNING = "warning"
    DANGER = "danger"


def classify(value: float, low_threshold: float, high_threshold: float) -> StatusLabel:
    """
    Band a value against two ascending thresholds.

    Comparisons are strict, so a value equal to a threshold lands in the worse
    band: classify(20, 20, 40) is WARNING.
    """
    if value < low_threshold:
        return StatusLabel.GOOD
    if value < high_threshold:
        return StatusLabel.WARNING
    return StatusLabel.DANGER

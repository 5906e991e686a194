"""
Posture Evaluator Module

Turns one frame of MediaPipe Pose landmarks into trunk/knee angles, a load
score, a posture score and status bands. Stateless: every call depends only
on the landmark set passed in, so one evaluator can serve any number of
frames or threads.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Dict, Any

from .geometry import joint_angle, midpoint, trunk_tilt
from .landmarks import NUM_LANDMARKS, LandmarkSet, PoseLandmark, visibility_of
from .load_estimator import estimate_load
from .status import StatusLabel, classify
from .thresholds import DEFAULT_THRESHOLDS, LoadThresholds, get_load_risk_level

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Errors & Data Classes
# -----------------------------------------------------------------------------

class InsufficientLandmarks(ValueError):
    """Landmark set missing or shorter than the 33-point pose model."""

    def __init__(self, received: int, required: int = NUM_LANDMARKS):
        self.received = received
        self.required = required
        super().__init__(f"expected at least {required} landmarks, got {received}")


@dataclass(frozen=True)
class EvaluationResult:
    """Per-frame posture evaluation."""
    trunk_angle: float
    knee_angle: float
    load_score: float
    posture_score: int
    trunk_status: StatusLabel
    load_status: StatusLabel
    knee_visibility: float = 1.0

    @property
    def needs_correction(self) -> bool:
        return self.load_status is not StatusLabel.GOOD

    @property
    def load_label(self) -> str:
        """Short user-facing load level ("Good", "Caution", "Danger")."""
        return get_load_risk_level(self.load_status)[0]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'trunk_angle': self.trunk_angle,
            'knee_angle': self.knee_angle,
            'load_score': self.load_score,
            'posture_score': self.posture_score,
            'trunk_status': self.trunk_status.value,
            'load_status': self.load_status.value,
            'load_label': self.load_label,
            'knee_visibility': self.knee_visibility,
            'needs_correction': self.needs_correction
        }


# -----------------------------------------------------------------------------
# Evaluator
# -----------------------------------------------------------------------------

class PostureEvaluator:
    """
    Lifting-posture evaluator for the 33-point MediaPipe Pose model.

    The knee angle is measured on the left leg only. Its landmarks are used
    whatever their visibility; the minimum visibility is reported in the
    result so callers can decide whether to trust it.
    """

    def __init__(self, thresholds: Optional[LoadThresholds] = None):
        self.thresholds = thresholds or DEFAULT_THRESHOLDS

    def evaluate(self, landmarks: Optional[LandmarkSet]) -> EvaluationResult:
        """
        Evaluate one frame.

        Args:
            landmarks: 33 pose landmarks (anything with .x/.y; .visibility optional)

        Raises:
            InsufficientLandmarks: if landmarks is None or too short. The
                frame should be skipped.
        """
        received = 0 if landmarks is None else len(landmarks)
        if received < NUM_LANDMARKS:
            logger.debug("Skipping frame with %d landmarks", received)
            raise InsufficientLandmarks(received)

        shoulder_mid = midpoint(landmarks[PoseLandmark.LEFT_SHOULDER],
                                landmarks[PoseLandmark.RIGHT_SHOULDER])
        hip_mid = midpoint(landmarks[PoseLandmark.LEFT_HIP],
                           landmarks[PoseLandmark.RIGHT_HIP])
        trunk_angle = trunk_tilt(shoulder_mid, hip_mid)

        hip = landmarks[PoseLandmark.LEFT_HIP]
        knee = landmarks[PoseLandmark.LEFT_KNEE]
        ankle = landmarks[PoseLandmark.LEFT_ANKLE]
        knee_angle = joint_angle(hip, knee, ankle)

        load_score = estimate_load(trunk_angle, knee_angle, self.thresholds)
        posture_score = int(round(100 - load_score))

        status = self.thresholds.status
        return EvaluationResult(
            trunk_angle=trunk_angle,
            knee_angle=knee_angle,
            load_score=load_score,
            posture_score=posture_score,
            trunk_status=classify(trunk_angle, *status.TRUNK),
            load_status=classify(load_score, *status.LOAD),
            knee_visibility=min(visibility_of(p) for p in (hip, knee, ankle))
        )


_default_evaluator = PostureEvaluator()


def evaluate_posture(landmarks: Optional[LandmarkSet]) -> EvaluationResult:
    """Evaluate with the default thresholds. See PostureEvaluator.evaluate."""
    return _default_evaluator.evaluate(landmarks)

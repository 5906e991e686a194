"""Pose landmark types and MediaPipe Pose numbering."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence, Protocol


NUM_LANDMARKS = 33


class PoseLandmark(IntEnum):
    """MediaPipe Pose landmark indices (33-point model)."""
    NOSE = 0
    LEFT_EYE_INNER = 1
    LEFT_EYE = 2
    LEFT_EYE_OUTER = 3
    RIGHT_EYE_INNER = 4
    RIGHT_EYE = 5
    RIGHT_EYE_OUTER = 6
    LEFT_EAR = 7
    RIGHT_EAR = 8
    MOUTH_LEFT = 9
    MOUTH_RIGHT = 10
    LEFT_SHOULDER = 11
    RIGHT_SHOULDER = 12
    LEFT_ELBOW = 13
    RIGHT_ELBOW = 14
    LEFT_WRIST = 15
    RIGHT_WRIST = 16
    LEFT_PINKY = 17
    RIGHT_PINKY = 18
    LEFT_INDEX = 19
    RIGHT_INDEX = 20
    LEFT_THUMB = 21
    RIGHT_THUMB = 22
    LEFT_HIP = 23
    RIGHT_HIP = 24
    LEFT_KNEE = 25
    RIGHT_KNEE = 26
    LEFT_ANKLE = 27
    RIGHT_ANKLE = 28
    LEFT_HEEL = 29
    RIGHT_HEEL = 30
    LEFT_FOOT_INDEX = 31
    RIGHT_FOOT_INDEX = 32


class Point2D(Protocol):
    x: float
    y: float


@dataclass(frozen=True)
class Landmark:
    """Normalized keypoint: x, y in [0, 1] relative to the frame."""
    x: float
    y: float
    z: float = 0.0
    visibility: float = 1.0


LandmarkSet = Sequence[Landmark]


def visibility_of(point) -> float:
    """Visibility of any landmark-like object; 1.0 when it carries none."""
    v = getattr(point, 'visibility', None)
    return 1.0 if v is None else float(v)

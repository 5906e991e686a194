import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from Load_Estimation.core.landmarks import Landmark, PoseLandmark, NUM_LANDMARKS


def make_pose(shoulder_mid=(0.5, 0.3), hip_mid=(0.5, 0.55), left_knee=(0.46, 0.75),
              left_ankle=(0.45, 0.95), half_width=0.05, visibility=0.9):
    """33 landmarks with the given trunk and left leg; everything else at the hip."""
    points = [Landmark(hip_mid[0], hip_mid[1], visibility=visibility)] * NUM_LANDMARKS
    points[PoseLandmark.LEFT_SHOULDER] = Landmark(shoulder_mid[0] - half_width, shoulder_mid[1], visibility=visibility)
    points[PoseLandmark.RIGHT_SHOULDER] = Landmark(shoulder_mid[0] + half_width, shoulder_mid[1], visibility=visibility)
    points[PoseLandmark.LEFT_HIP] = Landmark(hip_mid[0] - half_width, hip_mid[1], visibility=visibility)
    points[PoseLandmark.RIGHT_HIP] = Landmark(hip_mid[0] + half_width, hip_mid[1], visibility=visibility)
    points[PoseLandmark.LEFT_KNEE] = Landmark(*left_knee, visibility=visibility)
    points[PoseLandmark.LEFT_ANKLE] = Landmark(*left_ankle, visibility=visibility)
    points[PoseLandmark.RIGHT_KNEE] = Landmark(hip_mid[0] + half_width, 0.75, visibility=visibility)
    points[PoseLandmark.RIGHT_ANKLE] = Landmark(hip_mid[0] + half_width, 0.95, visibility=visibility)
    return points


@pytest.fixture
def upright_pose():
    # Shoulders straight above hips, left knee ~174 deg
    return make_pose()


@pytest.fixture
def stooped_pose():
    # Trunk ~68 deg from vertical, straight legs
    return make_pose(shoulder_mid=(0.7, 0.45), hip_mid=(0.45, 0.55),
                     left_knee=(0.4, 0.75), left_ankle=(0.4, 0.95))

"""MediaPipe detection wrappers."""
from .pose_detector import PoseDetector

"""
Load Estimation Module
Posture geometry, ergonomic load scoring, and pose detection glue.
"""

from .core.posture_evaluator import PostureEvaluator, EvaluationResult, InsufficientLandmarks, evaluate_posture
from .core.status import StatusLabel

# Detector pulls in MediaPipe/OpenCV (import when needed)
# from .detectors.pose_detector import PoseDetector

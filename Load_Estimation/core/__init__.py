"""Core analysis algorithms."""
from .geometry import joint_angle, trunk_tilt, midpoint
from .landmarks import Landmark, PoseLandmark, NUM_LANDMARKS
from .load_estimator import estimate_load
from .status import StatusLabel, classify
from .posture_evaluator import PostureEvaluator, EvaluationResult, InsufficientLandmarks, evaluate_posture
from .thresholds import LoadThresholds, DEFAULT_THRESHOLDS, get_load_risk_level

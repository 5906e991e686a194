"""
Overlay Renderer

Draws the body skeleton colored by trunk status, a hip load indicator and a
metrics panel (posture score, load level and bar, trunk/knee angles) on
video frames. Uses OpenCV.
"""

import sys
from pathlib import Path
import cv2
import numpy as np
from typing import Optional, Sequence

sys.path.insert(0, str(Path(__file__).parent.parent.parent))
from Load_Estimation.core.geometry import midpoint
from Load_Estimation.core.landmarks import PoseLandmark, visibility_of
from Load_Estimation.core.posture_evaluator import EvaluationResult


SKELETON_CONNECTIONS = [
    (11, 12),               # shoulders
    (11, 13), (13, 15),     # left arm
    (12, 14), (14, 16),     # right arm
    (11, 23), (12, 24),     # torso
    (23, 24),               # hips
    (23, 25), (25, 27),     # left leg
    (24, 26), (26, 28),     # right leg
]
JOINT_RANGE = range(PoseLandmark.LEFT_SHOULDER, PoseLandmark.RIGHT_ANKLE + 1)
MIN_VISIBILITY = 0.5


class OverlayRenderer:
    """OpenCV overlay renderer for load visualization."""

    # BGR
    COLORS = {
        'good': (128, 222, 74), 'warning': (21, 204, 250), 'danger': (113, 113, 248),
        'joint': (255, 255, 255), 'text_bg': (30, 30, 30), 'text': (255, 255, 255),
        'muted': (160, 160, 160), 'bar_bg': (70, 70, 70)
    }

    def __init__(self, show_skeleton: bool = True, show_metrics: bool = True):
        self.show_skeleton = show_skeleton
        self.show_metrics = show_metrics

    def render(self, frame: np.ndarray, landmarks: Sequence,
               result: EvaluationResult) -> np.ndarray:
        output = frame.copy()
        h, w = output.shape[:2]

        if self.show_skeleton:
            output = self._draw_skeleton(output, landmarks, result.trunk_status, w, h)
        if self.show_metrics:
            output = self._draw_metrics(output, result, w, h)
        return output

    def render_panel(self, frame: np.ndarray, result: Optional[EvaluationResult] = None,
                     message: Optional[str] = None) -> np.ndarray:
        """
        Metrics panel without a skeleton, for frames that were not evaluated.
        Pass the last result to keep it on screen; None draws the idle
        placeholder shown before the first evaluation or after stop.
        """
        output = frame.copy()
        h, w = output.shape[:2]
        if self.show_metrics:
            output = self._draw_metrics(output, result, w, h)
        if message:
            cv2.putText(output, message, (20, h // 2), cv2.FONT_HERSHEY_SIMPLEX, 0.7,
                        self.COLORS['danger'], 2)
        return output

    def _draw_skeleton(self, frame, landmarks, trunk_status, w, h):
        def to_px(p): return (int(p.x * w), int(p.y * h))
        def visible(p): return visibility_of(p) > MIN_VISIBILITY

        color = self.COLORS[trunk_status.value]
        for i, j in SKELETON_CONNECTIONS:
            p1, p2 = landmarks[i], landmarks[j]
            if visible(p1) and visible(p2):
                cv2.line(frame, to_px(p1), to_px(p2), color, 4, cv2.LINE_AA)

        for i in JOINT_RANGE:
            if visible(landmarks[i]):
                cv2.circle(frame, to_px(landmarks[i]), 6, self.COLORS['joint'], -1, cv2.LINE_AA)

        # Hip load indicator: translucent fill with a solid ring
        hip = to_px(midpoint(landmarks[PoseLandmark.LEFT_HIP], landmarks[PoseLandmark.RIGHT_HIP]))
        overlay = frame.copy()
        cv2.circle(overlay, hip, 20, color, -1, cv2.LINE_AA)
        cv2.addWeighted(overlay, 0.25, frame, 0.75, 0, frame)
        cv2.circle(frame, hip, 20, color, 3, cv2.LINE_AA)
        return frame

    def _draw_metrics(self, frame, result: Optional[EvaluationResult], w, h):
        panel_w, panel_h = 210, 150
        x, y = w - panel_w - 10, 10

        overlay = frame.copy()
        cv2.rectangle(overlay, (x, y), (x + panel_w, y + panel_h), self.COLORS['text_bg'], -1)
        cv2.addWeighted(overlay, 0.8, frame, 0.2, 0, frame)

        if result is None:
            load_color = trunk_color = self.COLORS['muted']
            score, label, fill = "--", "--", 0.0
            trunk, knee = "--", "--"
        else:
            load_color = self.COLORS[result.load_status.value]
            trunk_color = self.COLORS[result.trunk_status.value]
            score, label, fill = str(result.posture_score), result.load_label, result.load_score / 100
            trunk, knee = f"{round(result.trunk_angle)}", f"{round(result.knee_angle)}"

        cv2.putText(frame, f"Score: {score}", (x + 10, y + 30), cv2.FONT_HERSHEY_SIMPLEX, 0.7, load_color, 2)
        cv2.putText(frame, f"Load: {label}", (x + 10, y + 58), cv2.FONT_HERSHEY_SIMPLEX, 0.5, load_color, 1)

        bar_x, bar_y, bar_w, bar_h = x + 10, y + 68, panel_w - 20, 10
        cv2.rectangle(frame, (bar_x, bar_y), (bar_x + bar_w, bar_y + bar_h), self.COLORS['bar_bg'], -1)
        if fill > 0:
            cv2.rectangle(frame, (bar_x, bar_y), (bar_x + int(bar_w * fill), bar_y + bar_h), load_color, -1)

        cv2.putText(frame, f"Trunk: {trunk} deg", (x + 10, y + 105), cv2.FONT_HERSHEY_SIMPLEX, 0.5, trunk_color, 1)
        cv2.putText(frame, f"Knee: {knee} deg", (x + 10, y + 130), cv2.FONT_HERSHEY_SIMPLEX, 0.5,
                    self.COLORS['text'], 1)
        return frame

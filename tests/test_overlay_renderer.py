"""
Tests for the OpenCV overlay (headless, on blank frames).
"""

import numpy as np
import pytest

from Load_Estimation.core.posture_evaluator import evaluate_posture
from Streamlit_App.components.overlay_renderer import OverlayRenderer


@pytest.fixture
def frame():
    return np.zeros((480, 640, 3), dtype=np.uint8)


def test_render_does_not_modify_input(frame, upright_pose):
    out = OverlayRenderer().render(frame, upright_pose, evaluate_posture(upright_pose))
    assert out.shape == frame.shape
    assert out.any()
    assert not frame.any()


def test_skeleton_uses_trunk_status_color(frame, stooped_pose):
    renderer = OverlayRenderer(show_metrics=False)
    out = renderer.render(frame, stooped_pose, evaluate_posture(stooped_pose))
    # Hip indicator ring sits 20px from the hip midpoint (0.45, 0.55)
    x, y = int(0.45 * 640) + 20, int(0.55 * 480)
    b, g, r = (int(v) for v in out[y, x])
    assert r > 200 and r > g and r > b


def test_invisible_landmarks_not_drawn(frame, upright_pose):
    hidden = [type(p)(p.x, p.y, p.z, 0.1) for p in upright_pose]
    renderer = OverlayRenderer(show_metrics=False)
    out = renderer.render(frame, hidden, evaluate_posture(hidden))
    # Only the hip indicator remains; left shoulder area stays blank
    assert not out[int(0.3 * 480) - 3:int(0.3 * 480) + 4, int(0.45 * 640) - 3:int(0.45 * 640) + 4].any()


def test_idle_panel(frame):
    out = OverlayRenderer().render_panel(frame)
    assert out.shape == frame.shape
    assert out.any()


def test_panel_hidden_when_metrics_off(frame):
    out = OverlayRenderer(show_metrics=False).render_panel(frame)
    assert not out.any()

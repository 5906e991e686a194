"""
Tests for the OpenCV demo's session handling and startup errors.
"""

from types import SimpleNamespace

import pytest

import demo_opencv
from Load_Estimation.core.posture_evaluator import evaluate_posture
from Load_Estimation.utils.load_history import LoadHistory


class ClosedCapture:
    def __init__(self, *args):
        self.released = False

    def isOpened(self):
        return False

    def release(self):
        self.released = True


def _demo_without_camera():
    demo = demo_opencv.ErgoLoadDemo.__new__(demo_opencv.ErgoLoadDemo)
    demo.pose_detector = SimpleNamespace(detection_count=0)
    demo.history = LoadHistory()
    demo.is_running = False
    demo.session_detections = 0
    demo.latest_result = None
    return demo


def test_camera_failure_exits_with_message(monkeypatch, capsys):
    monkeypatch.setattr(demo_opencv.cv2, "VideoCapture", ClosedCapture)
    monkeypatch.setattr("sys.argv", ["demo_opencv.py", "--camera", "3"])

    with pytest.raises(SystemExit) as exc:
        demo_opencv.main()

    assert exc.value.code == 1
    assert "Could not open camera 3" in capsys.readouterr().out


def test_session_summary_counts_detections(capsys, upright_pose):
    demo = _demo_without_camera()
    demo.pose_detector.detection_count = 10
    demo.start()

    demo.pose_detector.detection_count = 13
    demo.history.add(evaluate_posture(upright_pose), 0)
    demo.history.add(evaluate_posture(upright_pose), 100)
    demo.stop()

    out = capsys.readouterr().out
    assert "pose found in 3 frames" in out
    assert "2 evaluated" in out
    assert not demo.is_running
    assert demo.history.count == 0


def test_stop_without_frames(capsys):
    demo = _demo_without_camera()
    demo.start()
    demo.stop()
    assert "Session stopped" in capsys.readouterr().out

#!/usr/bin/env python3
"""
ErgoLoad - Standalone OpenCV Demo
Run this to test load estimation without Streamlit.

Usage: python demo_opencv.py

Controls:
    SPACE - Start / stop the monitoring session
    s     - Toggle skeleton
    m     - Toggle metrics panel
    q     - Quit
"""

import cv2
import sys
import time
import logging
import argparse

from Load_Estimation.detectors.pose_detector import PoseDetector
from Load_Estimation.core.posture_evaluator import PostureEvaluator, InsufficientLandmarks
from Load_Estimation.utils.load_history import LoadHistory
from Streamlit_App.components.overlay_renderer import OverlayRenderer

WINDOW_NAME = "ErgoLoad - Lifting Posture"


def parse_args():
    parser = argparse.ArgumentParser(description="ErgoLoad OpenCV Demo")
    parser.add_argument("--camera", "-c", type=int, default=0, help="Camera ID")
    parser.add_argument("--width", "-w", type=int, default=640, help="Width")
    parser.add_argument("--height", "-H", type=int, default=480, help="Height")
    parser.add_argument("--model", type=int, choices=[0, 1, 2], default=1, help="Model complexity")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args()


class ErgoLoadDemo:
    def __init__(self, camera_id=0, width=640, height=480, model_complexity=1):
        print("ErgoLoad - Initializing...")

        self.cap = cv2.VideoCapture(camera_id)
        if not self.cap.isOpened():
            raise RuntimeError(f"Could not open camera {camera_id}. Check camera access permissions.")
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)

        print("   Loading pose model...")
        try:
            self.pose_detector = PoseDetector(model_complexity=model_complexity)
        except RuntimeError:
            self.cap.release()
            raise
        self.evaluator = PostureEvaluator()
        self.history = LoadHistory()
        self.overlay = OverlayRenderer()

        self.is_running = False
        self.session_detections = 0
        self.latest_result = None
        self.fps_history = []
        self.frame_count = 0
        self.last_fps_time = time.time()

        print("Ready! Press SPACE to start, 'q' to quit")

    def run(self):
        cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_NORMAL)

        while True:
            ret, frame = self.cap.read()
            if not ret:
                break

            timestamp = time.time() * 1000
            if self.is_running:
                output = self.process_frame(frame, timestamp)
            else:
                output = self.overlay.render_panel(frame, None, "Press SPACE to start")

            # FPS
            self.frame_count += 1
            if time.time() - self.last_fps_time >= 1.0:
                fps = self.frame_count / (time.time() - self.last_fps_time)
                self.fps_history.append(fps)
                self.frame_count = 0
                self.last_fps_time = time.time()

            if self.fps_history:
                cv2.putText(output, f"FPS: {self.fps_history[-1]:.1f}", (10, 30),
                            cv2.FONT_HERSHEY_SIMPLEX, 0.6, (0, 255, 255), 2)

            cv2.imshow(WINDOW_NAME, output)

            key = cv2.waitKey(1) & 0xFF
            if key == ord('q'):
                break
            elif key == ord(' '):
                if self.is_running:
                    self.stop()
                else:
                    self.start()
            elif key == ord('s'):
                self.overlay.show_skeleton = not self.overlay.show_skeleton
            elif key == ord('m'):
                self.overlay.show_metrics = not self.overlay.show_metrics

        self.cleanup()

    def process_frame(self, frame, timestamp):
        landmarks = self.pose_detector.detect(frame, timestamp)
        try:
            result = self.evaluator.evaluate(landmarks)
        except InsufficientLandmarks:
            return self.overlay.render_panel(frame, self.latest_result, "No pose detected - step into view")

        self.latest_result = result
        self.history.add(result, timestamp)
        return self.overlay.render(frame, landmarks, result)

    def start(self):
        print("Session started")
        self.is_running = True
        self.session_detections = self.pose_detector.detection_count

    def stop(self):
        summary = self.history.summary()
        detected = self.pose_detector.detection_count - self.session_detections
        if summary.count:
            print(f"Session stopped - pose found in {detected} frames, {summary.count} evaluated, "
                  f"mean load {summary.mean_load}, peak {summary.peak_load:.0f}, "
                  f"mean score {summary.mean_posture_score}")
        else:
            print("Session stopped")
        self.is_running = False
        self.latest_result = None
        self.history.reset()

    def cleanup(self):
        if self.is_running:
            self.stop()
        self.cap.release()
        self.pose_detector.close()
        cv2.destroyAllWindows()
        print("Goodbye!")


def main():
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    print("\n" + "=" * 50)
    print("  ErgoLoad - Lifting Posture & Lower-Back Load")
    print("  Local processing • Full-body camera view")
    print("=" * 50 + "\n")

    try:
        demo = ErgoLoadDemo(args.camera, args.width, args.height, args.model)
    except RuntimeError as e:
        print(f"Startup failed: {e}")
        sys.exit(1)
    demo.run()


if __name__ == "__main__":
    main()

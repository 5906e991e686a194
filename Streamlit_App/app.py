"""
ErgoLoad - Lifting Posture & Lower-Back Load Monitoring
Main Streamlit Dashboard Application

Run with: streamlit run Streamlit_App/app.py
"""

import streamlit as st
import time
import threading
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

try:
    from streamlit_webrtc import webrtc_streamer, VideoProcessorBase, WebRtcMode
    import av
    WEBRTC_AVAILABLE = True
except ImportError:
    WEBRTC_AVAILABLE = False
    VideoProcessorBase = object

from Load_Estimation.detectors.pose_detector import PoseDetector
from Load_Estimation.core.posture_evaluator import PostureEvaluator, InsufficientLandmarks
from Load_Estimation.core.thresholds import get_load_risk_level
from Load_Estimation.utils.load_history import LoadHistory
from Streamlit_App.components.overlay_renderer import OverlayRenderer
from Streamlit_App.components.charts import create_load_gauge, create_trend_chart

# Page config
st.set_page_config(
    page_title="ErgoLoad - Lifting Posture Monitoring",
    page_icon="◉",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS - clean, minimal UI
st.markdown("""
<style>
    @import url('https://fonts.googleapis.com/css2?family=DM+Sans:wght@400;500;600;700&display=swap');

    .stApp { background: #f8fafc; }
    h1, h2, h3 { font-family: 'DM Sans', sans-serif !important; color: #0f172a !important; }

    .metric-card {
        background: #fff;
        border: 1px solid #e2e8f0;
        border-radius: 12px;
        padding: 20px;
        margin: 12px 0;
        box-shadow: 0 1px 3px rgba(0,0,0,0.05);
    }

    .metric-value { font-family: 'DM Sans', sans-serif; font-size: 2rem; font-weight: 600; color: #94a3b8; }
    .status-good { color: #059669 !important; }
    .status-warning { color: #d97706 !important; }
    .status-danger { color: #dc2626 !important; }

    [data-testid="stSidebar"] { background: #f1f5f9; }
    [data-testid="stSidebar"] .stMarkdown { color: #334155; }
</style>
""", unsafe_allow_html=True)


class PostureVideoProcessor(VideoProcessorBase):
    """WebRTC video processor for real-time load estimation."""

    def __init__(self):
        self.pose_detector = PoseDetector(model_complexity=1)
        self.evaluator = PostureEvaluator()
        self.overlay_renderer = OverlayRenderer()
        self.history = LoadHistory()

        self._lock = threading.Lock()
        self.latest_result = None

    def recv(self, frame: "av.VideoFrame") -> "av.VideoFrame":
        img = frame.to_ndarray(format="bgr24")
        timestamp = time.time() * 1000

        landmarks = self.pose_detector.detect(img, timestamp)
        try:
            result = self.evaluator.evaluate(landmarks)
        except InsufficientLandmarks:
            # Keep showing the last evaluation until a full pose comes back
            img = self.overlay_renderer.render_panel(img, self.latest_result)
        else:
            with self._lock:
                self.latest_result = result
                self.history.add(result, timestamp)
            img = self.overlay_renderer.render(img, landmarks, result)

        return av.VideoFrame.from_ndarray(img, format="bgr24")

    def snapshot(self):
        """Thread-safe copy of the latest result and history series."""
        with self._lock:
            return (self.latest_result, list(self.history.timestamps),
                    list(self.history.load_scores), list(self.history.trunk_angles),
                    self.history.summary())

    def on_ended(self):
        self.pose_detector.close()


def _metric_card(value: str, caption: str, status: str = "") -> str:
    cls = f"status-{status}" if status else ""
    return f'<div class="metric-card"><div class="metric-value {cls}">{value}</div><small>{caption}</small></div>'


def main():
    # Header
    st.markdown("# ErgoLoad\n*Lifting Posture & Lower-Back Load*")

    # Sidebar
    with st.sidebar:
        st.markdown("## ⚙️ Session")
        if 'session_start' not in st.session_state:
            st.session_state.session_start = time.time()

        elapsed = time.time() - st.session_state.session_start
        st.metric("Session", f"{int(elapsed//60):02d}:{int(elapsed%60):02d}")

        if st.button("🔄 Reset Session", use_container_width=True):
            st.session_state.session_start = time.time()
            st.rerun()

        st.divider()
        st.caption("Trunk: good < 20° ≤ warning < 40° ≤ danger")
        st.caption("Load: good < 30 ≤ warning < 60 ≤ danger")

    # Main content
    col_video, col_charts = st.columns([1.2, 1])

    ctx = None
    snapshot = None
    with col_video:
        st.markdown("### 📹 Live Monitor")

        if WEBRTC_AVAILABLE:
            ctx = webrtc_streamer(
                key="ergoload",
                mode=WebRtcMode.SENDRECV,
                video_processor_factory=PostureVideoProcessor,
                media_stream_constraints={"video": {"width": 640, "height": 480}, "audio": False},
                async_processing=True
            )

            if ctx.video_processor:
                snapshot = ctx.video_processor.snapshot()
            result = snapshot[0] if snapshot else None

            # Idle placeholder until the first evaluated frame, and after stop
            c1, c2, c3, c4 = st.columns(4)
            if result is None:
                cards = [("--", "Posture Score", ""), ("--", "Load Level", ""),
                         ("--°", "Trunk Angle", ""), ("--°", "Knee Angle", "")]
            else:
                load_status = result.load_status.value
                cards = [
                    (str(result.posture_score), "Posture Score", load_status),
                    (result.load_label, "Load Level", load_status),
                    (f"{round(result.trunk_angle)}°", "Trunk Angle", result.trunk_status.value),
                    (f"{round(result.knee_angle)}°", "Knee Angle", ""),
                ]
            for col, (value, caption, status) in zip((c1, c2, c3, c4), cards):
                with col:
                    st.markdown(_metric_card(value, caption, status), unsafe_allow_html=True)

            if result is not None:
                st.progress(int(result.load_score) / 100)
                _, description, recommendation = get_load_risk_level(result.load_status)
                st.caption(f"{description} – {recommendation}")
        else:
            st.warning("Install streamlit-webrtc: `pip install streamlit-webrtc`")

    with col_charts:
        st.markdown("### 📈 Analytics")

        if snapshot:
            result, ts_hist, load_hist, trunk_hist, summary = snapshot
            if result is not None:
                st.plotly_chart(create_load_gauge(result.load_score, result.load_status.value),
                                use_container_width=True)

            if len(load_hist) >= 2:
                st.plotly_chart(create_trend_chart(ts_hist, load_hist, trunk_hist),
                                use_container_width=True)
                st.caption(f"Mean load {summary.mean_load:.0f} · peak {summary.peak_load:.0f} · "
                           f"danger {summary.status_share['danger'] * 100:.0f}% of frames")
            else:
                st.caption("Trend chart will appear once frames are evaluated")
        else:
            st.info("📊 Start the video monitor above to see live charts")

    st.markdown("---")
    st.markdown('<div style="text-align:center;color:#94a3b8;font-size:0.8rem;">ErgoLoad • All processing happens locally</div>',
                unsafe_allow_html=True)


if __name__ == "__main__":
    main()

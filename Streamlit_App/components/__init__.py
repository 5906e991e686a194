"""Streamlit UI components."""
from .overlay_renderer import OverlayRenderer
from .charts import create_load_gauge, create_trend_chart

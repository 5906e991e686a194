"""
Tests for dashboard charts.
"""

from Streamlit_App.components.charts import create_load_gauge, create_trend_chart, STATUS_COLORS


def test_gauge():
    fig = create_load_gauge(70.0, 'danger')
    indicator = fig.data[0]
    assert indicator.value == 70.0
    assert indicator.gauge.bar.color == STATUS_COLORS['danger']
    assert [tuple(s.range) for s in indicator.gauge.steps] == [(0, 30), (30, 60), (60, 100)]


def test_trend_chart_minutes():
    fig = create_trend_chart([0, 30000, 60000], [0, 30, 60], [5, 25, 40])
    assert len(fig.data) == 2
    assert list(fig.data[0].x) == [0, 0.5, 1]
    assert fig.data[1].yaxis == 'y2'


def test_trend_chart_without_trunk():
    fig = create_trend_chart([0, 1000], [10, 20])
    assert len(fig.data) == 1

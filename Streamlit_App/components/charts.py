"""Plotly chart components for the dashboard."""

import plotly.graph_objects as go
from typing import List, Optional

# Light theme colors (app uses #f8fafc background)
TEXT_COLOR = "#334155"
GRID_COLOR = "rgba(0,0,0,0.08)"
TICK_COLOR = "#64748b"
BORDER_COLOR = "#94a3b8"

STATUS_COLORS = {'good': "#059669", 'warning': "#d97706", 'danger': "#dc2626"}


def create_load_gauge(load_score: float, status: str) -> go.Figure:
    """Create load score gauge chart."""
    color = STATUS_COLORS.get(status, TEXT_COLOR)

    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=load_score,
        domain={'x': [0, 1], 'y': [0, 1]},
        title={'text': "Load Level", 'font': {'size': 14, 'color': TEXT_COLOR}},
        number={'font': {'size': 32, 'color': color}},
        gauge={
            'axis': {'range': [0, 100], 'tickcolor': TICK_COLOR},
            'bar': {'color': color},
            'bgcolor': "rgba(0,0,0,0)",
            'bordercolor': BORDER_COLOR,
            'steps': [
                {'range': [0, 30], 'color': 'rgba(5,150,105,0.15)'},
                {'range': [30, 60], 'color': 'rgba(217,119,6,0.15)'},
                {'range': [60, 100], 'color': 'rgba(220,38,38,0.15)'}
            ]
        }
    ))

    fig.update_layout(
        paper_bgcolor='rgba(0,0,0,0)', plot_bgcolor='rgba(0,0,0,0)',
        font={'color': TEXT_COLOR}, height=220, margin=dict(l=20, r=20, t=40, b=20)
    )
    return fig


def create_trend_chart(timestamps: List[float], load_values: List[float],
                       trunk_values: Optional[List[float]] = None) -> go.Figure:
    """Load score over time, with trunk angle on a secondary axis. Timestamps in ms."""
    fig = go.Figure()

    if timestamps:
        base = timestamps[0]
        times = [(t - base) / 60000 for t in timestamps]

        fig.add_trace(go.Scatter(
            x=times, y=load_values, mode='lines', name='Load',
            line=dict(color='#0891b2', width=2), fill='tozeroy', fillcolor='rgba(8,145,178,0.1)'
        ))

        if trunk_values:
            fig.add_trace(go.Scatter(
                x=times[-len(trunk_values):], y=trunk_values, mode='lines', name='Trunk (°)',
                line=dict(color='#7c3aed', width=1, dash='dot'), yaxis='y2'
            ))

    fig.add_hline(y=30, line_dash="dash", line_color="#d97706", annotation_text="Warning")
    fig.add_hline(y=60, line_dash="dash", line_color="#dc2626", annotation_text="Danger")

    fig.update_layout(
        paper_bgcolor='rgba(0,0,0,0)', plot_bgcolor='rgba(0,0,0,0)',
        font={'color': TEXT_COLOR}, height=250, margin=dict(l=40, r=40, t=20, b=40),
        xaxis=dict(title="Time (min)", showgrid=True, gridcolor=GRID_COLOR),
        yaxis=dict(title="Load", range=[0, 100], showgrid=True, gridcolor=GRID_COLOR),
        legend=dict(orientation="h", y=1.1, x=0.5, xanchor="center")
    )
    if trunk_values:
        fig.update_layout(yaxis2=dict(title="Trunk (°)", overlaying='y', side='right', range=[0, 90]))
    return fig

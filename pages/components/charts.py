"""Chart components using Plotly for data visualization."""

import plotly.graph_objects as go
import plotly.express as px
import pandas as pd
from fitness_converter.config import BMI_CATEGORIES
from fitness_converter.metrics import bmi_category

ZONE_COLORS = ['#A8DADC', '#4ECDC4', '#2A9D8F', '#FFE66D', '#F4A261', '#FF6B6B', '#C1121F']


def zones_to_dataframe(zones: list) -> pd.DataFrame:
    """Tabulate heart rate zones for display.

    Args:
        zones: List of HeartRateZone objects, lowest zone first

    Returns:
        DataFrame with Zone, Min BPM, Max BPM and Range columns
    """
    df = pd.DataFrame(
        [(z.name, z.min_bpm, z.max_bpm) for z in zones],
        columns=['Zone', 'Min BPM', 'Max BPM'],
    )
    df['Range'] = df['Max BPM'] - df['Min BPM']
    return df


def create_heart_rate_zone_chart(zones: list):
    """Create horizontal bar chart of heart rate zones.

    Args:
        zones: List of HeartRateZone objects

    Returns:
        Plotly figure
    """
    if not zones:
        fig = go.Figure()
        fig.add_annotation(
            text="No heart rate zones to show",
            xref="paper", yref="paper",
            x=0.5, y=0.5, showarrow=False
        )
        return fig

    df = zones_to_dataframe(zones)

    fig = px.bar(
        df,
        x='Range',
        y='Zone',
        base='Min BPM',
        orientation='h',
        color='Zone',
        title='Heart Rate Training Zones',
        color_discrete_sequence=ZONE_COLORS,
        hover_data=['Min BPM', 'Max BPM'],
    )

    fig.update_layout(
        xaxis_title="Heart Rate (bpm)",
        yaxis_title="",
        showlegend=False,
        yaxis={'categoryorder': 'array', 'categoryarray': list(df['Zone'])},
    )

    return fig


def create_bmi_gauge(bmi: float):
    """Create gauge chart placing a BMI among the categories.

    Args:
        bmi: Body Mass Index value

    Returns:
        Plotly figure
    """
    # Category bounds, lowest first: 18.5, 25.0, 30.0
    bounds = sorted(bound for bound, _ in BMI_CATEGORIES)
    upper = max(40.0, bmi + 5)

    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=bmi,
        title={'text': f"BMI ({bmi_category(bmi)})"},
        gauge={
            'axis': {'range': [10, upper]},
            'bar': {'color': "black"},
            'steps': [
                {'range': [10, bounds[0]], 'color': "lightblue"},
                {'range': [bounds[0], bounds[1]], 'color': "lightgreen"},
                {'range': [bounds[1], bounds[2]], 'color': "lightyellow"},
                {'range': [bounds[2], upper], 'color': "lightsalmon"}
            ],
        }
    ))

    return fig

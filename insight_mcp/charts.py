"""
Chart descriptors - Plotly figures serialized to the {data, layout} JSON the
chat UI hands straight to Plotly.js.
"""

import json
from typing import Dict, List, Optional, Sequence, Union

import plotly.graph_objects as go

from .config import MAP_CENTER, MAP_ZOOM

DEFAULT_COLOR = '#3b82f6'

BASE_LAYOUT = {
    'autosize': True,
    'height': 300,
    'margin': {'l': 50, 'r': 20, 't': 40, 'b': 40},
    'paper_bgcolor': 'rgba(0,0,0,0)',
    'plot_bgcolor': 'rgba(0,0,0,0)',
    'font': {'family': 'Inter'},
}


def figure_to_config(fig: go.Figure) -> Dict:
    """Serialize a figure to plain JSON types, without the default template."""
    config = json.loads(fig.to_json())
    config.get('layout', {}).pop('template', None)
    return config


def create_chart_config(
    title: str,
    x: Sequence,
    y: Sequence,
    chart_type: str = 'bar',
    color: Optional[Union[str, List[str]]] = None,
) -> Dict:
    """
    Build a single-series bar, line or pie chart.

    Args:
        title: Chart title (already localized)
        x: Category labels (pie: slice labels)
        y: Values (pie: slice values)
        chart_type: 'bar' | 'line' | 'pie'
        color: One color or a per-point list; ignored for pie charts

    Returns:
        {'data': [...], 'layout': {...}}
    """
    x = list(x)
    y = list(y)
    if chart_type == 'pie':
        trace = go.Pie(labels=x, values=y)
    elif chart_type == 'line':
        trace = go.Scatter(x=x, y=y, mode='lines+markers',
                           line={'color': color or DEFAULT_COLOR})
    elif chart_type == 'bar':
        trace = go.Bar(x=x, y=y, marker={'color': color or DEFAULT_COLOR})
    else:
        raise ValueError(f"Unsupported chart type: {chart_type}")

    fig = go.Figure(data=[trace])
    fig.update_layout(title={'text': title}, **BASE_LAYOUT)
    return figure_to_config(fig)


def create_dual_axis_chart(
    title: str,
    x: Sequence,
    bars: Sequence,
    bar_name: str,
    line: Sequence,
    line_name: str,
    bar_axis_title: str,
    line_axis_title: str,
) -> Dict:
    """Bar series on the left axis compared with a line series on a right-hand axis."""
    fig = go.Figure(data=[
        go.Bar(x=list(x), y=list(bars), name=bar_name, marker={'color': DEFAULT_COLOR}),
        go.Scatter(x=list(x), y=list(line), mode='lines', name=line_name,
                   yaxis='y2', line={'color': '#f59e0b'}),
    ])
    fig.update_layout(
        title={'text': title},
        yaxis={'title': {'text': bar_axis_title}},
        yaxis2={'title': {'text': line_axis_title}, 'overlaying': 'y', 'side': 'right'},
        height=300,
        margin={'l': 50, 'r': 50, 't': 40, 'b': 40},
        showlegend=True,
        paper_bgcolor='rgba(0,0,0,0)',
        plot_bgcolor='rgba(0,0,0,0)',
    )
    return figure_to_config(fig)


def create_map_chart(
    title: str,
    lats: Sequence[float],
    lons: Sequence[float],
    text: Sequence[str],
    sizes: Sequence[float],
    values: Sequence[float],
) -> Dict:
    """Bubble map over OpenStreetMap tiles; bubble size and color carry the value."""
    fig = go.Figure(data=[go.Scattermap(
        lat=list(lats),
        lon=list(lons),
        text=list(text),
        mode='markers',
        marker={
            'size': list(sizes),
            'color': list(values),
            'colorscale': 'Portland',
            'opacity': 0.8,
            'showscale': True,
        },
    )])
    fig.update_layout(
        title={'text': title},
        autosize=True,
        hovermode='closest',
        map={'style': 'open-street-map', 'center': dict(MAP_CENTER), 'zoom': MAP_ZOOM},
        height=400,
        margin={'l': 0, 'r': 0, 't': 40, 'b': 0},
        paper_bgcolor='rgba(0,0,0,0)',
    )
    return figure_to_config(fig)

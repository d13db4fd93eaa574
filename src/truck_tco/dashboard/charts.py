"""Plotly figures and tables built from a ``ComparisonResult``.

Kept free of Streamlit so they can be reused by other front ends.
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from truck_tco.config.truck import TechnicalSpecs
from truck_tco.models.results import ComparisonResult

TRUCK_COLORS = ["#636e72", "#00b894", "#0984e3"]

CATEGORY_FIELDS = [
    ("Purchase", "total_purchase_cost"),
    ("Fuel / energy", "total_fuel_cost"),
    ("Maintenance", "total_maintenance_cost"),
    ("Insurance", "total_insurance_cost"),
    ("Depreciation", "depreciation"),
    ("Infrastructure", "total_infrastructure_cost"),
    ("Downtime", "total_downtime_cost"),
]

_LAYOUT = dict(
    height=360,
    margin=dict(l=20, r=20, t=30, b=20),
    plot_bgcolor="rgba(0,0,0,0)",
    paper_bgcolor="rgba(0,0,0,0)",
    font=dict(family="Inter", size=11),
)


def build_amortization_figure(result: ComparisonResult) -> go.Figure:
    """Cumulative cost per year for all three trucks."""
    fig = go.Figure()
    for analysis, color in zip(result.analyses(), TRUCK_COLORS):
        fig.add_trace(go.Scatter(
            x=[y.year for y in analysis.yearly_breakdown],
            y=[y.cumulative_cost for y in analysis.yearly_breakdown],
            mode="lines+markers",
            name=analysis.name,
            line=dict(color=color, width=2),
        ))
    fig.update_layout(
        xaxis_title="Year",
        yaxis_title="Cumulative cost (€)",
        **_LAYOUT,
    )
    return fig


def build_cost_breakdown_figure(result: ComparisonResult) -> go.Figure:
    """Stacked horizon totals per cost category."""
    names = [a.name for a in result.analyses()]
    fig = go.Figure()
    for label, attr in CATEGORY_FIELDS:
        fig.add_trace(go.Bar(
            x=names,
            y=[getattr(a, attr) for a in result.analyses()],
            name=label,
        ))
    fig.update_layout(barmode="stack", yaxis_title="Cost over horizon (€)", **_LAYOUT)
    return fig


def breakdown_table(result: ComparisonResult) -> pd.DataFrame:
    """Total cost per year, one column per truck."""
    table = pd.DataFrame({"Year": [y.year for y in result.diesel_analysis.yearly_breakdown]})
    for a in result.analyses():
        table[a.name] = [y.total_cost for y in a.yearly_breakdown]
    return table


def technical_specs_table(result: ComparisonResult) -> pd.DataFrame:
    """Technical data side by side, one column per truck.

    Rows no truck fills in are dropped.
    """
    fields = TechnicalSpecs.model_fields
    table = pd.DataFrame(
        {
            a.name: [getattr(a.technical_specs, field, None) for field in fields]
            for a in result.analyses()
        },
        index=[info.description for info in fields.values()],
    )
    return table.dropna(how="all")

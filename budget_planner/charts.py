"""Chart helpers: category colours, pie-sector geometry and Plotly figures.

The expense breakdown is drawn as a pie whose sectors start at twelve
o'clock and run clockwise, largest category first.  :func:`pie_sectors`
computes the same geometry explicitly (angles and an SVG arc path on a
100x100 viewbox) so the legend and the figure always agree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from .config import CHART_PALETTE

PIE_CENTER = 50.0
PIE_RADIUS = 40.0


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def category_hash(seed: str) -> int:
    """Rolling ``h = c + (h << 5) - h`` hash over UTF-16 code units.

    The shift wraps to a signed 32-bit integer; the rest of the
    arithmetic does not.
    """
    data = seed.encode('utf-16-le')
    h = 0
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        h = code_unit + _to_int32(_to_int32(h) << 5) - h
    return h


def category_color(category: str, palette: Sequence[str] = CHART_PALETTE) -> str:
    """The palette colour for a category; the same input always maps to the same colour."""
    return palette[abs(category_hash(category)) % len(palette)]


@dataclass(frozen=True)
class PieSector:
    category: str
    value: float
    percentage: float
    start_angle: float
    end_angle: float
    color: str

    @property
    def large_arc(self) -> bool:
        return self.percentage > 50

    def _point(self, angle: float) -> tuple:
        radians = np.radians(angle - 90)
        return (
            float(PIE_CENTER + PIE_RADIUS * np.cos(radians)),
            float(PIE_CENTER + PIE_RADIUS * np.sin(radians)),
        )

    @property
    def svg_path(self) -> str:
        x1, y1 = self._point(self.start_angle)
        x2, y2 = self._point(self.end_angle)
        flag = 1 if self.large_arc else 0
        return (
            f"M {PIE_CENTER:g} {PIE_CENTER:g} L {x1:.4f} {y1:.4f} "
            f"A {PIE_RADIUS:g} {PIE_RADIUS:g} 0 {flag} 1 {x2:.4f} {y2:.4f} Z"
        )


def pie_sectors(totals: pd.Series) -> List[PieSector]:
    """Sectors for a Series of category totals, largest first.

    Non-positive totals are dropped; an empty input gives no sectors.
    """
    if totals is None or totals.empty:
        return []
    positive = totals[totals > 0].sort_values(ascending=False, kind='stable')
    grand_total = float(positive.sum())
    if grand_total <= 0:
        return []

    sectors = []
    cumulative = 0.0
    for category, value in positive.items():
        percentage = float(value) / grand_total * 100
        start = cumulative * 3.6
        cumulative += percentage
        sectors.append(PieSector(
            category=str(category),
            value=float(value),
            percentage=percentage,
            start_angle=start,
            end_angle=cumulative * 3.6,
            color=category_color(str(category)),
        ))
    return sectors


def _empty_figure(title: str = "No data to display") -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title=title)
    return fig


def create_expense_pie_chart(totals: pd.Series, title: str | None = None) -> go.Figure:
    """Pie chart of expenses by category using the stable category colours."""
    sectors = pie_sectors(totals)
    if not sectors:
        return _empty_figure()
    fig = go.Figure(
        go.Pie(
            labels=[s.category for s in sectors],
            values=[s.value for s in sectors],
            marker=dict(colors=[s.color for s in sectors], line=dict(color="#ffffff", width=1)),
            sort=False,
            direction="clockwise",
            rotation=0,
            textinfo="percent",
            hovertemplate="%{label}: $%{value:,.2f} (%{percent})<extra></extra>",
        )
    )
    fig.update_layout(title=title or "Expense breakdown", showlegend=False, margin=dict(t=40, b=0, l=0, r=0))
    return fig


def create_income_bar_chart(totals: pd.Series, title: str | None = None) -> go.Figure:
    """Horizontal bar chart of income by category."""
    if totals is None or totals.empty:
        return _empty_figure()
    fig = go.Figure(
        go.Bar(
            x=totals.values,
            y=[str(c) for c in totals.index],
            orientation="h",
            marker_color=[category_color(str(c)) for c in totals.index],
        )
    )
    fig.update_layout(
        title=title or "Income sources",
        xaxis_title="Amount",
        yaxis=dict(autorange="reversed"),
        margin=dict(t=40, b=0, l=0, r=0),
    )
    return fig

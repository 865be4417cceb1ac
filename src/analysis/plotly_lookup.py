"""Interactive Plotly range lookup for the preflop strategy table.

Three public functions:

    build_range_lookup_figure(table, position)
        — Interactive 13×13 range chart for one seat.
    build_all_positions_figure(table)
        — 2×3 grid with one chart per seat, in rotation order.
    save_lookup_html(fig, path)
        — Export any figure to a self-contained HTML file.

Hover over any cell to see the hand class, recommended action, frequency,
rationale, and whether the cell falls back to the seat's default entry.
"""

from __future__ import annotations

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from src.analysis.heat_maps import build_range_matrix
from src.engine.cards import RANKS_DESCENDING
from src.engine.hand import combo_count, hand_class_grid
from src.engine.positions import POSITION_INFO, ROTATION, Position
from src.strategy.table import StrategyTable

# ─── Constants ────────────────────────────────────────────────────────────────

_GRID: list[list[str]] = hand_class_grid()
_LABELS: list[str] = list(RANKS_DESCENDING)

# Three-step discrete colorscale: 0.0 = FOLD, 0.5 = CALL, 1.0 = RAISE.
_ACTION_COLORSCALE: list[list] = [
    [0.0, "#bdbdbd"],
    [0.333, "#bdbdbd"],
    [0.334, "#1f77b4"],
    [0.666, "#1f77b4"],
    [0.667, "#d62728"],
    [1.0, "#d62728"],
]


# ─── Hover text builder ───────────────────────────────────────────────────────


def _build_hover(table: StrategyTable, position: Position) -> list[list[str]]:
    """Return a 13×13 list of HTML hover strings for one seat."""
    rows: list[list[str]] = []
    for grid_row in _GRID:
        row: list[str] = []
        for label in grid_row:
            entry, is_fallback = table.resolve(position, label)
            lines = [
                f"Hand: <b>{label}</b> ({combo_count(label)} combos)",
                f"Action: <b>{entry.action.value}</b> ({entry.frequency}%)",
                f"Why: {entry.rationale}",
            ]
            if is_fallback:
                lines.append("<i>default entry</i>")
            row.append("<br>".join(lines))
        rows.append(row)
    return rows


def _make_heatmap_trace(
    table: StrategyTable,
    position: Position,
    *,
    showscale: bool = True,
) -> go.Heatmap:
    """Build one go.Heatmap trace for a seat's range chart.

    The y axis is reversed by the caller so row 0 (AA…A2s) sits on top.
    """
    data = build_range_matrix(table, position)
    return go.Heatmap(
        z=data.tolist(),
        x=_LABELS,
        y=_LABELS,
        colorscale=_ACTION_COLORSCALE,
        zmin=0.0,
        zmax=1.0,
        text=_build_hover(table, position),
        hovertemplate="%{text}<extra></extra>",
        showscale=showscale,
        colorbar={
            "title": "Action",
            "tickvals": [0.0, 0.5, 1.0],
            "ticktext": ["fold", "call", "raise"],
        },
        name=position.value,
        xgap=1,
        ygap=1,
    )


# ─── Public figure builders ───────────────────────────────────────────────────


def build_range_lookup_figure(table: StrategyTable, position: Position) -> go.Figure:
    """Build an interactive Plotly range chart for one seat.

    Args:
        table:    Strategy table to draw.
        position: Seat to draw.

    Returns:
        go.Figure with a single heatmap trace.
    """
    info = POSITION_INFO[position]
    fig = go.Figure(_make_heatmap_trace(table, position))
    fig.update_layout(
        title_text=f"Range Lookup: {info.full_name} ({info.name})",
        title_font_size=15,
        height=620,
        width=680,
    )
    fig.update_yaxes(autorange="reversed")
    return fig


def build_all_positions_figure(table: StrategyTable) -> go.Figure:
    """Build a 2×3 grid of interactive range charts, one per seat.

    Args:
        table: Strategy table to draw.

    Returns:
        go.Figure with six heatmap traces in rotation order (BTN first).
    """
    fig = make_subplots(
        rows=2,
        cols=3,
        subplot_titles=[POSITION_INFO[p].full_name for p in ROTATION],
        horizontal_spacing=0.06,
        vertical_spacing=0.1,
    )
    for i, position in enumerate(ROTATION):
        fig.add_trace(
            _make_heatmap_trace(table, position, showscale=(i == 0)),
            row=i // 3 + 1,
            col=i % 3 + 1,
        )

    fig.update_layout(
        title_text="Six-max Preflop Ranges",
        title_font_size=15,
        height=820,
        width=1200,
    )
    fig.update_yaxes(autorange="reversed")
    return fig


def save_lookup_html(fig: go.Figure, path: str) -> None:
    """Save a Plotly figure to an HTML file that opens in any browser.

    Plotly JS is loaded from the CDN so the file itself remains compact.

    Args:
        fig:  Any go.Figure produced by this module.
        path: Destination file path (e.g. ``"ranges_lookup.html"``).
    """
    fig.write_html(path, include_plotlyjs="cdn")


# ─── Entry point ──────────────────────────────────────────────────────────────

if __name__ == "__main__":
    from src.strategy.ranges import default_strategy_table

    strategy = default_strategy_table()
    save_lookup_html(build_all_positions_figure(strategy), "ranges_lookup.html")
    print("Saved: ranges_lookup.html")

"""Range chart heat maps for the preflop strategy table.

Two public data-builder functions return NumPy matrices that can be used
programmatically or passed to the plot helpers:

    build_range_matrix(table, position)      — action codes per hand class
    build_frequency_matrix(table, position)  — frequency (%) per hand class

Two public plot functions render matplotlib figures:

    plot_range_chart(table, position, ...)   — single 13×13 chart
    plot_all_ranges(table, ...)              — 2×3 grid, one chart per seat

Matrix convention (both builders):
    Shape  : (13, 13) — rows/cols = ranks A, K, …, 2 (see hand_class_grid)
             diagonal = pairs, upper-right = suited, lower-left = offsuit
    Values : 0.0 = FOLD, 0.5 = CALL, 1.0 = RAISE (range matrix)
             0–100 frequency of the recommended action (frequency matrix)
             Cells without an explicit entry resolve to the position's default.
"""

from __future__ import annotations

import matplotlib
import matplotlib.colors
import matplotlib.figure
import matplotlib.pyplot as plt
import numpy as np

from src.engine.cards import RANKS_DESCENDING
from src.engine.hand import hand_class_grid
from src.engine.positions import POSITION_INFO, ROTATION, Position
from src.strategy.table import Action, StrategyTable

# ─── Constants ────────────────────────────────────────────────────────────────

_GRID: list[list[str]] = hand_class_grid()
_LABELS: list[str] = list(RANKS_DESCENDING)

ACTION_CODES: dict[Action, float] = {
    Action.FOLD: 0.0,
    Action.CALL: 0.5,
    Action.RAISE: 1.0,
}
_ACTION_LETTERS: dict[Action, str] = {Action.FOLD: "F", Action.CALL: "C", Action.RAISE: "R"}


# ─── Colormaps ────────────────────────────────────────────────────────────────


def _make_action_cmap() -> matplotlib.colors.ListedColormap:
    """Grey=FOLD (0), blue=CALL (0.5), red=RAISE (1)."""
    return matplotlib.colors.ListedColormap(["#bdbdbd", "#1f77b4", "#d62728"])


_ACTION_CMAP: matplotlib.colors.Colormap = _make_action_cmap()


# ─── Data builders ────────────────────────────────────────────────────────────


def build_range_matrix(table: StrategyTable, position: Position) -> np.ndarray:
    """Return the (13, 13) matrix of recommended-action codes for *position*.

    Values: 0.0 = FOLD, 0.5 = CALL, 1.0 = RAISE.

    Examples:
        >>> from src.strategy.ranges import default_strategy_table
        >>> m = build_range_matrix(default_strategy_table(), Position.BTN)
        >>> m.shape, m[0, 0]
        ((13, 13), 1.0)
    """
    data = np.zeros((13, 13))
    for r, row in enumerate(_GRID):
        for c, label in enumerate(row):
            data[r, c] = ACTION_CODES[table.lookup(position, label).action]
    return data


def build_frequency_matrix(table: StrategyTable, position: Position) -> np.ndarray:
    """Return the (13, 13) matrix of recommended-action frequencies (0–100)."""
    data = np.zeros((13, 13))
    for r, row in enumerate(_GRID):
        for c, label in enumerate(row):
            data[r, c] = table.lookup(position, label).frequency
    return data


# ─── Rendering helper ─────────────────────────────────────────────────────────


def _render_panel(
    ax: matplotlib.axes.Axes,
    table: StrategyTable,
    position: Position,
    show_frequency: bool,
) -> matplotlib.image.AxesImage:
    """Render one 13×13 range chart onto *ax* and return the AxesImage.

    Cells are labelled with the hand class and, when *show_frequency* is
    set, the recommended action letter and frequency. Hands resolved
    through the default entry are drawn lighter.
    """
    data = build_range_matrix(table, position)
    im = ax.imshow(data, cmap=_ACTION_CMAP, vmin=0.0, vmax=1.0, aspect="equal")

    ax.set_xticks(range(13))
    ax.set_xticklabels(_LABELS, fontsize=7)
    ax.set_yticks(range(13))
    ax.set_yticklabels(_LABELS, fontsize=7)
    ax.tick_params(length=0)

    for r, row in enumerate(_GRID):
        for c, label in enumerate(row):
            entry, is_fallback = table.resolve(position, label)
            text = label
            if show_frequency:
                text = f"{label}\n{_ACTION_LETTERS[entry.action]}{entry.frequency}"
            ax.text(
                c,
                r,
                text,
                ha="center",
                va="center",
                fontsize=5,
                color="black" if entry.action is Action.FOLD else "white",
                alpha=0.55 if is_fallback else 1.0,
            )

    return im


# ─── Public plot functions ────────────────────────────────────────────────────


def plot_range_chart(
    table: StrategyTable,
    position: Position,
    *,
    show_frequency: bool = True,
    show: bool = True,
    save_path: str | None = None,
) -> matplotlib.figure.Figure:
    """Plot one position's range as a 13×13 chart.

    Args:
        table:          Strategy table to draw.
        position:       Seat to draw.
        show_frequency: Annotate each cell with action letter + frequency.
        show:           If True, call plt.show() after rendering.
        save_path:      If not None, save the figure to this path before showing.

    Returns:
        matplotlib.figure.Figure.
    """
    info = POSITION_INFO[position]
    fig, ax = plt.subplots(figsize=(7, 7))
    _render_panel(ax, table, position, show_frequency)
    ax.set_title(f"{info.full_name} ({info.name}): red=raise, blue=call, grey=fold", fontsize=10)

    plt.tight_layout()

    if save_path is not None:
        fig.savefig(save_path, bbox_inches="tight", dpi=120)
    if show:
        plt.show()

    return fig


def plot_all_ranges(
    table: StrategyTable,
    *,
    show_frequency: bool = False,
    show: bool = True,
    save_path: str | None = None,
) -> matplotlib.figure.Figure:
    """Plot all six positions as a 2×3 grid of range charts, in rotation order.

    Args:
        table:          Strategy table to draw.
        show_frequency: Annotate each cell with action letter + frequency.
        show:           If True, call plt.show().
        save_path:      If not None, save to path.

    Returns:
        matplotlib.figure.Figure with 6 subplot axes.
    """
    fig, axes = plt.subplots(2, 3, figsize=(15, 10))
    fig.suptitle("Six-max Preflop Ranges", fontsize=14, fontweight="bold")

    for ax, position in zip(axes.flat, ROTATION):
        _render_panel(ax, table, position, show_frequency)
        ax.set_title(POSITION_INFO[position].full_name, fontsize=10, fontweight="bold")

    plt.tight_layout()

    if save_path is not None:
        fig.savefig(save_path, bbox_inches="tight", dpi=120)
    if show:
        plt.show()

    return fig


# ─── Entry point ──────────────────────────────────────────────────────────────

if __name__ == "__main__":
    from src.strategy.ranges import default_strategy_table

    matplotlib.use("Agg")
    strategy = default_strategy_table()
    print("Generating range charts …")
    plot_all_ranges(strategy, show=False, save_path="ranges_all.png")
    for seat in ROTATION:
        plot_range_chart(strategy, seat, show=False, save_path=f"range_{seat.value.lower()}.png")
    print("Saved: ranges_all.png, " + ", ".join(f"range_{p.value.lower()}.png" for p in ROTATION))

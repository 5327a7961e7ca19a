# cutlist_solver/plotting.py
# matplotlib preview of a cut plan: one panel per opened sheet, parts coloured by label.
# (Developer preview only; printable shop drawings are out of scope.)

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib import colormaps
from matplotlib.patches import Rectangle

from .metrics import calculate_stats, compute_sheet_waste
from .types import OptimizationResult, PlacedCut, Sheet


@dataclass(frozen=True)
class PlotStyle:
    show_labels: bool = True
    show_dims: bool = True
    show_grid: bool = False
    font_size: int = 7
    margin: float = 2.0     # inches of blank space around each sheet
    per_row: int = 2        # sheets per figure row
    cmap: str = "tab20"


def label_colors(result: OptimizationResult, cmap: str = "tab20") -> Dict[str, Tuple[float, float, float, float]]:
    """Label -> RGBA, assigned in order of first appearance so reruns look the same."""
    palette = colormaps[cmap]
    out: Dict[str, Tuple[float, float, float, float]] = {}
    for pc in result.placed_cuts():
        if pc.label not in out:
            out[pc.label] = palette(len(out) % palette.N)
    return out


def _sheet_title(sheet: Sheet, index: int) -> str:
    bits = [f"Sheet {index + 1}", sheet.name, f"{sheet.width:g}×{sheet.length:g}"]
    if sheet.material:
        bits.append(sheet.material)
    bits.append(f"waste {compute_sheet_waste(sheet)}%")
    return " | ".join(bits)


def _part_text(pc: PlacedCut, style: PlotStyle) -> str:
    parts = []
    if style.show_labels:
        parts.append(pc.label)
    if style.show_dims:
        parts.append(f"{pc.pw:g}×{pc.ph:g}{' R' if pc.rotated else ''}")
    return "\n".join(parts)


def _draw_sheet(ax: plt.Axes, sheet: Sheet, index: int, colors, style: PlotStyle) -> None:
    W, H = sheet.width, sheet.length
    ax.add_patch(Rectangle((0, 0), W, H, facecolor="#f4efe6", edgecolor="black", linewidth=1.2))

    for pc in sheet.cuts:
        ax.add_patch(
            Rectangle((pc.x, pc.y), pc.pw, pc.ph, facecolor=colors[pc.label], edgecolor="black", linewidth=0.6)
        )
        text = _part_text(pc, style)
        if text:
            ax.annotate(
                text,
                (pc.x + pc.pw / 2, pc.y + pc.ph / 2),
                ha="center",
                va="center",
                fontsize=style.font_size,
            )

    m = style.margin
    ax.set_xlim(-m, W + m)
    # y grows downward like the placement coordinates
    ax.set_ylim(H + m, -m)
    ax.set_aspect("equal")
    ax.set_title(_sheet_title(sheet, index), fontsize=9)
    ax.set_xticks([])
    ax.set_yticks([])
    if style.show_grid:
        ax.grid(True, linestyle=":", linewidth=0.4)
    else:
        ax.grid(False)


def plot_result(
    result: OptimizationResult,
    style: Optional[PlotStyle] = None,
    figsize: Optional[Tuple[float, float]] = None,
) -> plt.Figure:
    """
    Draw every sheet of `result` into a single figure and return it.
    Raises ValueError for a result without sheets.
    """
    style = style or PlotStyle()
    if not result.sheets:
        raise ValueError("Result has no sheets to plot")

    n = len(result.sheets)
    ncols = min(style.per_row, n)
    nrows = -(-n // ncols)
    fig, grid = plt.subplots(nrows, ncols, figsize=figsize or (4 * ncols, 6 * nrows), squeeze=False)
    panels = grid.flatten()

    colors = label_colors(result, style.cmap)
    for i, sheet in enumerate(result.sheets):
        _draw_sheet(panels[i], sheet, i, colors, style)
    for ax in panels[n:]:
        ax.set_visible(False)

    stats = calculate_stats(result)
    fig.suptitle(
        f"{result.algorithm or 'plan'}: {stats.sheets} sheets, {stats.waste}% waste, {stats.unplaced} unplaced",
        fontsize=10,
    )
    fig.tight_layout()
    return fig


def show_result(result: OptimizationResult, style: Optional[PlotStyle] = None) -> None:
    plot_result(result, style=style)
    plt.show()


def save_result_png(
    result: OptimizationResult,
    path: str,
    style: Optional[PlotStyle] = None,
    dpi: int = 200,
) -> None:
    """Render the preview straight to a PNG file (figure is closed afterwards)."""
    fig = plot_result(result, style=style)
    try:
        fig.savefig(path, dpi=dpi)
    finally:
        plt.close(fig)

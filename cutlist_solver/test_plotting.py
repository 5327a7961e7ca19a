from __future__ import annotations

import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

from cutlist_solver.plotting import PlotStyle, label_colors, plot_result  # noqa: E402
from cutlist_solver.sample_data import example_cuts, example_stocks  # noqa: E402
from cutlist_solver.solver_guillotine import optimize_cuts  # noqa: E402
from cutlist_solver.types import OptimizationResult  # noqa: E402


def test_one_axes_per_sheet() -> None:
    res = optimize_cuts(example_stocks(), example_cuts(), 0.125)
    fig = plot_result(res, style=PlotStyle(show_grid=True))
    shown = [ax for ax in fig.axes if ax.get_visible()]
    assert len(shown) == res.num_sheets()
    assert shown[0].get_title().startswith("Sheet 1 | 4x8 Plywood")
    # origin top-left
    assert shown[0].yaxis_inverted()


def test_empty_result_cannot_be_plotted() -> None:
    with pytest.raises(ValueError):
        plot_result(OptimizationResult())


def test_label_colors_follow_first_appearance() -> None:
    res = optimize_cuts(example_stocks(), example_cuts(), 0.125)
    colors = label_colors(res)
    assert set(colors) == {pc.label for pc in res.placed_cuts()}
    assert len(set(colors.values())) == len(colors)
    assert label_colors(res) == colors

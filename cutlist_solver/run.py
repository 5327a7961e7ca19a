# cutlist_solver/run.py
# High-level convenience runner that ties together:
# - input validation
# - solver (best-of by default, or a single strategy)
# - output validation
# - summary stats
# - optional matplotlib preview
#
# This is meant to be called from your own scripts or a future API layer.
# Example:
#   from cutlist_solver.run import run_best
#   res, _ = run_best(stocks, cuts, kerf=0.125)

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple

from .logger import Logger, get_logger
from .metrics import calculate_stats
from .solver_best import optimize_cuts_best
from .solver_branch_bound import optimize_cuts_optimal
from .solver_guillotine import optimize_cuts
from .solver_shelf import optimize_cuts_shelf
from .types import Cut, OptimizationResult, OptimizationStats, Stock
from .utils import timer
from .validate import raise_on_errors, validate_inputs, validate_result

if TYPE_CHECKING:
    from matplotlib.figure import Figure

ALGORITHMS: Dict[str, Callable[..., OptimizationResult]] = {
    "best": optimize_cuts_best,
    "guillotine": optimize_cuts,
    "shelf": optimize_cuts_shelf,
    "optimal": optimize_cuts_optimal,
}


@dataclass(frozen=True)
class RunResult:
    result: OptimizationResult
    stats: OptimizationStats
    seconds: float


def run_best(
    stocks: List[Stock],
    cuts: List[Cut],
    kerf: float,
    *,
    algorithm: str = "best",
    validate: bool = True,
    show_plot: bool = False,
    logger: Optional[Logger] = None,
) -> Tuple[RunResult, Optional[Figure]]:
    """
    Run an optimizer end-to-end.

    Returns (RunResult, fig); fig is None unless show_plot=True and the result has sheets.
    """
    if algorithm not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{algorithm}', expected one of {sorted(ALGORITHMS)}")
    log = logger or get_logger()

    if validate:
        issues = validate_inputs(stocks, cuts, kerf)
        for issue in issues:
            if issue.level == "WARN":
                log.warn(issue.message)
        raise_on_errors(issues)

    with timer(algorithm) as t:
        result = ALGORITHMS[algorithm](stocks, cuts, kerf, logger=log)

    if validate:
        issues = validate_result(result, cuts)
        for issue in issues:
            if issue.level == "WARN":
                log.warn(issue.message)
        raise_on_errors(issues)

    res = RunResult(result=result, stats=calculate_stats(result), seconds=t["seconds"])

    fig = None
    if show_plot and result.sheets:
        from .plotting import plot_result

        fig = plot_result(result)

    return res, fig

# cutlist_solver/solver_best.py
# Arbitrator: run every strategy on the same input and keep the best result.
#
# Preference (lexicographic):
#   1. fewer unplaced cuts
#   2. fewer sheets
#   3. lower waste % (the earlier candidate keeps exact ties)

from __future__ import annotations

from typing import Optional, Sequence

from .config import DEFAULTS, Defaults
from .logger import Logger, get_logger
from .metrics import calculate_stats
from .solver_branch_bound import optimize_cuts_optimal
from .solver_guillotine import optimize_cuts
from .solver_shelf import optimize_cuts_shelf
from .types import Cut, OptimizationResult, Stock


def exact_time_budget_ms(total_cuts: int, cfg: Defaults = DEFAULTS) -> int:
    """Branch-and-bound budget by requested unit-cut count."""
    if total_cuts <= cfg.exact_small_cuts:
        return cfg.exact_small_time_ms
    if total_cuts <= cfg.exact_medium_cuts:
        return cfg.exact_medium_time_ms
    return cfg.exact_large_time_ms


def compare_solutions(a: OptimizationResult, b: OptimizationResult) -> OptimizationResult:
    """Return the preferred of two results (a wins exact ties)."""
    if len(a.unplaced) != len(b.unplaced):
        return a if len(a.unplaced) < len(b.unplaced) else b

    sa = calculate_stats(a)
    sb = calculate_stats(b)
    if sa.sheets != sb.sheets:
        return a if sa.sheets < sb.sheets else b

    return a if sa.waste <= sb.waste else b


def optimize_cuts_best(
    stocks: Sequence[Stock],
    cuts: Sequence[Cut],
    kerf: float,
    *,
    cfg: Defaults = DEFAULTS,
    logger: Optional[Logger] = None,
) -> OptimizationResult:
    log = logger or get_logger()
    total_cuts = sum(c.quantity for c in cuts)

    guillotine = optimize_cuts(stocks, cuts, kerf, cfg=cfg, logger=log)
    shelf = optimize_cuts_shelf(stocks, cuts, kerf, cfg=cfg, logger=log)
    optimal = optimize_cuts_optimal(
        stocks, cuts, kerf, exact_time_budget_ms(total_cuts, cfg), cfg=cfg, logger=log
    )

    for res in (guillotine, shelf, optimal):
        st = calculate_stats(res)
        log.info(f"{res.algorithm}: {st.sheets} sheets, {st.waste}% waste, {st.unplaced} unplaced")

    best = compare_solutions(guillotine, shelf)
    best = compare_solutions(best, optimal)
    log.info(f"winner: {best.algorithm}")
    return best

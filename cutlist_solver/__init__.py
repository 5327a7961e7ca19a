# cutlist_solver/__init__.py
"""
Cut-list solver for sheet goods (plywood, MDF, ...).

Plans how to cut rectangular parts out of stock sheets with a saw kerf and optional
material tags, minimizing unplaced parts, sheets opened and waste:
  - guillotine best-fit heuristic with dual-pass first-cut rotation
  - shelf (row) packing heuristic
  - branch-and-bound search per sheet with a wall-clock budget
  - optimize_cuts_best runs all three and keeps the preferred result

Plotting (matplotlib) is imported lazily by callers that need it.
"""

from .types import (
    Stock,
    Cut,
    Rect,
    PlacedCut,
    Sheet,
    OptimizationResult,
    OptimizationStats,
    expand_cuts,
)

from .geometry import (
    GuillotineSplit,
    fits_in_rect,
    split_rectangle,
    stock_can_fit_cut,
)

from .scoring import (
    score_placement,
    score_rectangles,
)

from .stock_select import (
    StockUsage,
    select_best_stock,
)

from .packer import (
    PackResult,
    pack_sheet,
)

from .metrics import calculate_stats

from .solver_guillotine import optimize_cuts, sort_cuts
from .solver_shelf import optimize_cuts_shelf
from .solver_branch_bound import optimize_cuts_optimal
from .solver_best import optimize_cuts_best, compare_solutions

__all__ = [
    # types
    "Stock",
    "Cut",
    "Rect",
    "PlacedCut",
    "Sheet",
    "OptimizationResult",
    "OptimizationStats",
    "expand_cuts",
    # geometry
    "GuillotineSplit",
    "fits_in_rect",
    "split_rectangle",
    "stock_can_fit_cut",
    # scoring
    "score_placement",
    "score_rectangles",
    # stock selection
    "StockUsage",
    "select_best_stock",
    # packing
    "PackResult",
    "pack_sheet",
    # metrics
    "calculate_stats",
    # solvers
    "sort_cuts",
    "optimize_cuts",
    "optimize_cuts_shelf",
    "optimize_cuts_optimal",
    "optimize_cuts_best",
    "compare_solutions",
]

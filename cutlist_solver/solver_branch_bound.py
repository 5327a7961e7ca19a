# cutlist_solver/solver_branch_bound.py
# Branch-and-bound search, one sheet at a time.
#
# For each sheet we try to place *every* remaining cut by depth-first search over
# (free rect x rotation x split direction). The first complete layout found is accepted;
# otherwise the deepest partial layout (most cuts placed) is used once the node tree is
# exhausted or the wall-clock budget runs out.
#
# Pruning:
#   - remaining cut area > area_prune_margin * free rect area
#   - the largest remaining cut fits no free rect in either orientation
#
# The search is written with an explicit stack so large cut lists cannot hit Python's
# recursion limit; node order matches a plain recursive DFS.

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from .config import DEFAULTS, Defaults
from .geometry import fits_either_way, split_rectangle
from .logger import Logger, get_logger
from .scoring import Placement, generate_placements
from .solver_guillotine import sort_cuts
from .stock_select import StockUsage, select_best_stock
from .types import (
    Cut,
    OptimizationResult,
    PlacedCut,
    Rect,
    Sheet,
    Stock,
    count_by_label,
    effective_dims,
    expand_cuts,
    materials_compatible,
)


@dataclass(frozen=True)
class SearchState:
    rects: List[Rect]
    placed: List[PlacedCut]
    remaining: List[Cut]


@dataclass(frozen=True)
class SearchResult:
    placed: List[PlacedCut]
    all_placed: bool


@dataclass
class SearchStats:
    nodes: int = 0
    timed_out: bool = False


def can_possibly_fit_all(state: SearchState, kerf: float, cfg: Defaults = DEFAULTS) -> bool:
    if not state.remaining:
        return True

    cut_area = sum(c.area for c in state.remaining)
    rect_area = sum(r.area for r in state.rects)
    if cut_area > rect_area * cfg.area_prune_margin:
        return False

    largest = state.remaining[0]
    return any(fits_either_way(largest, r, kerf) for r in state.rects)


def apply_placement(state: SearchState, placement: Placement, kerf: float) -> SearchState:
    """New state with the first remaining cut placed (state is left untouched)."""
    cut = state.remaining[0]
    rect = state.rects[placement.rect_index]
    pw, ph = effective_dims(cut, placement.rotated)

    splits = split_rectangle(rect, pw, ph, kerf)
    new_rects = splits.horizontal if placement.split == "h" else splits.vertical

    rects = list(state.rects)
    rects[placement.rect_index:placement.rect_index + 1] = new_rects

    return SearchState(
        rects=rects,
        placed=state.placed + [PlacedCut(cut=cut, x=rect.x, y=rect.y, pw=pw, ph=ph, rotated=placement.rotated)],
        remaining=state.remaining[1:],
    )


def _children(state: SearchState, placements: Sequence[Placement], kerf: float) -> Iterator[SearchState]:
    for p in placements:
        yield apply_placement(state, p, kerf)


def search_sheet(
    initial: SearchState,
    kerf: float,
    deadline: float,
    stats: SearchStats,
    cfg: Defaults = DEFAULTS,
) -> SearchResult:
    """
    Depth-first search from `initial`; returns the first complete layout, or the best
    partial one (by number of placed cuts) when the tree is exhausted or time runs out.
    """
    best = SearchResult(placed=[], all_placed=False)
    stack: List[Iterator[SearchState]] = [iter([initial])]

    while stack:
        state = next(stack[-1], None)
        if state is None:
            stack.pop()
            continue

        stats.nodes += 1
        if time.perf_counter() > deadline:
            stats.timed_out = True
            return best

        if not state.remaining:
            return SearchResult(placed=state.placed, all_placed=True)

        if not can_possibly_fit_all(state, kerf, cfg):
            if len(state.placed) > len(best.placed):
                best = SearchResult(placed=state.placed, all_placed=False)
            continue

        cut = state.remaining[0]
        placements = generate_placements(cut, state.rects, kerf, state.remaining[1:], state.placed, cfg)
        if not placements:
            if len(state.placed) > len(best.placed):
                best = SearchResult(placed=state.placed, all_placed=False)
            continue

        stack.append(_children(state, placements, kerf))

    return best


def _remove_placed(remaining: Sequence[Cut], placed: Sequence[PlacedCut], stock: Stock) -> List[Cut]:
    """Drop placed cuts from the pool by per-label counts (not identity)."""
    to_remove = count_by_label(pc.cut for pc in placed)
    removed = {}
    out: List[Cut] = []
    for c in remaining:
        n = removed.get(c.label, 0)
        if materials_compatible(c.material, stock.material) and n < to_remove.get(c.label, 0):
            removed[c.label] = n + 1
        else:
            out.append(c)
    return out


def optimize_cuts_optimal(
    stocks: Sequence[Stock],
    cuts: Sequence[Cut],
    kerf: float,
    time_limit_ms: Optional[int] = None,
    *,
    cfg: Defaults = DEFAULTS,
    logger: Optional[Logger] = None,
) -> OptimizationResult:
    log = logger or get_logger()
    limit_ms = cfg.exact_time_limit_ms if time_limit_ms is None else time_limit_ms

    sheets: List[Sheet] = []
    usage = StockUsage()
    remaining = sort_cuts(expand_cuts(cuts))
    log.info(f"branch-and-bound: {len(remaining)} cuts, budget {limit_ms} ms")

    t0 = time.perf_counter()

    while remaining and len(sheets) < cfg.max_sheets:
        stock = select_best_stock(stocks, remaining, usage, cfg=cfg, logger=log)
        if stock is None:
            break

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        sheet_limit_ms = max(cfg.exact_min_sheet_time_ms, limit_ms - elapsed_ms)
        sheet_t0 = time.perf_counter()

        # only cuts this stock's material can take are searched
        pool = [c for c in remaining if materials_compatible(c.material, stock.material)]
        initial = SearchState(
            rects=[Rect(0, 0, stock.width, stock.length)],
            placed=[],
            remaining=pool,
        )
        stats = SearchStats()
        result = search_sheet(initial, kerf, sheet_t0 + sheet_limit_ms / 1000.0, stats, cfg)

        log.debug(
            f"  {stock.name}: {stats.nodes} nodes in {(time.perf_counter() - sheet_t0) * 1000:.0f} ms, "
            f"placed {len(result.placed)}/{len(pool)}"
            f"{' (all)' if result.all_placed else ''}{' (timeout)' if stats.timed_out else ''}"
        )

        if not result.placed:
            break

        usage.record(stock)
        sheets.append(Sheet(stock=stock, cuts=list(result.placed)))
        remaining = _remove_placed(remaining, result.placed, stock)

        if (time.perf_counter() - t0) * 1000.0 > limit_ms:
            log.debug("  time limit reached, stopping search")
            break

    log.info(
        f"branch-and-bound: {len(sheets)} sheets, {len(remaining)} unplaced, "
        f"{(time.perf_counter() - t0) * 1000:.0f} ms"
    )
    return OptimizationResult(sheets=sheets, unplaced=remaining, algorithm="optimal")

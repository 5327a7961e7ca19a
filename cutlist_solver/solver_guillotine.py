# cutlist_solver/solver_guillotine.py
# Guillotine best-fit heuristic over multiple sheets.
#
# Cuts are expanded and sorted largest-first. For every sheet the stock selector picks a
# stock, then the sheet is packed twice (first cut unforced / first cut rotated) from the
# same starting state and the better pass is kept.

from __future__ import annotations

from typing import List, Optional, Sequence

from .config import DEFAULTS, Defaults
from .logger import Logger, get_logger
from .packer import PackResult, pack_sheet
from .stock_select import StockUsage, select_best_stock
from .types import Cut, OptimizationResult, Sheet, Stock, expand_cuts


def sort_cuts(cuts: Sequence[Cut]) -> List[Cut]:
    """Area descending, then longer side descending (stable)."""
    return sorted(cuts, key=lambda c: (-c.area, -c.longest_side))


def _better_pass(normal: PackResult, rotated: PackResult) -> PackResult:
    if len(rotated.placed) > len(normal.placed):
        return rotated
    if len(rotated.placed) == len(normal.placed) and rotated.used_area() > normal.used_area():
        return rotated
    return normal


def optimize_cuts(
    stocks: Sequence[Stock],
    cuts: Sequence[Cut],
    kerf: float,
    *,
    cfg: Defaults = DEFAULTS,
    logger: Optional[Logger] = None,
) -> OptimizationResult:
    log = logger or get_logger()
    log.info(f"guillotine: {len(stocks)} stocks, {sum(c.quantity for c in cuts)} cuts, kerf={kerf:g}")

    sheets: List[Sheet] = []
    usage = StockUsage()
    remaining = sort_cuts(expand_cuts(cuts))

    while remaining and len(sheets) < cfg.max_sheets:
        stock = select_best_stock(stocks, remaining, usage, cfg=cfg, logger=log)
        if stock is None:
            log.debug("  no viable stock left")
            break
        log.debug(f"sheet {len(sheets) + 1}: selected {stock.name} ({stock.width:g}x{stock.length:g})")

        normal = pack_sheet(stock, remaining, kerf, False, cfg=cfg, logger=log)
        rotated = pack_sheet(stock, remaining, kerf, True, cfg=cfg, logger=log)
        best = _better_pass(normal, rotated)
        if best is rotated:
            log.debug(f"  using rotated first cut ({len(rotated.placed)} vs {len(normal.placed)} placed)")

        usage.record(stock)

        if best.sheet.cuts:
            sheets.append(best.sheet.finalized())
            log.debug(f"  closed sheet {len(sheets)}: {len(best.placed)} placed, {len(best.unplaced)} left")

        remaining = best.unplaced
        if not best.sheet.cuts:
            break

    log.info(f"guillotine: {len(sheets)} sheets, {len(remaining)} unplaced")
    return OptimizationResult(sheets=sheets, unplaced=remaining, algorithm="guillotine")

# cutlist_solver/solver_shelf.py
# Shelf (row) packing heuristic:
# - cuts sorted by longer side, placed left-to-right in horizontal shelves
# - shelf height = tallest piece in the row
# - kerf between neighbouring pieces and between shelves
#
# Simpler than the guillotine packer and sometimes better on near-uniform heights,
# which is why the arbitrator always runs it.

from __future__ import annotations

from typing import List, Optional, Sequence

from .config import DEFAULTS, Defaults
from .logger import Logger, get_logger
from .stock_select import StockUsage, select_best_stock
from .types import Cut, OptimizationResult, PlacedCut, Sheet, Stock, expand_cuts, materials_compatible


def _shelf_orientation(c: Cut, cursor_x: float, sheet_w: float):
    # taller side vertical by default
    if c.length > c.width:
        pw, ph, rotated = c.width, c.length, False
    else:
        pw, ph, rotated = c.length, c.width, True

    # swap if only the other orientation fits the rest of the row
    if cursor_x + pw > sheet_w and cursor_x + ph <= sheet_w:
        pw, ph, rotated = ph, pw, not rotated
    return pw, ph, rotated


def _pack_shelves(stock: Stock, cuts: Sequence[Cut], kerf: float):
    sheet = Sheet(stock=stock)
    left: List[Cut] = []
    W, H = stock.width, stock.length

    cur_x = 0.0
    cur_y = 0.0
    shelf_h = 0.0

    for c in cuts:
        if not materials_compatible(c.material, stock.material):
            left.append(c)
            continue

        pw, ph, rotated = _shelf_orientation(c, cur_x, W)
        kerf_x = kerf if cur_x > 0 else 0

        # pieces share the shelf line; the kerf below it is added when the shelf opens
        if cur_x + kerf_x + pw <= W and cur_y + ph <= H:
            sheet.cuts.append(PlacedCut(cut=c, x=cur_x + kerf_x, y=cur_y, pw=pw, ph=ph, rotated=rotated))
            cur_x += kerf_x + pw
            shelf_h = max(shelf_h, ph)
        elif cur_y + shelf_h + kerf + ph <= H:
            cur_y += shelf_h + kerf
            cur_x = 0.0
            shelf_h = 0.0
            if pw <= W and cur_y + ph <= H:
                sheet.cuts.append(PlacedCut(cut=c, x=0.0, y=cur_y, pw=pw, ph=ph, rotated=rotated))
                cur_x = pw
                shelf_h = ph
            else:
                left.append(c)
        else:
            left.append(c)

    return sheet, left


def optimize_cuts_shelf(
    stocks: Sequence[Stock],
    cuts: Sequence[Cut],
    kerf: float,
    *,
    cfg: Defaults = DEFAULTS,
    logger: Optional[Logger] = None,
) -> OptimizationResult:
    log = logger or get_logger()

    sheets: List[Sheet] = []
    usage = StockUsage()
    remaining = sorted(expand_cuts(cuts), key=lambda c: -c.longest_side)

    while remaining and len(sheets) < cfg.max_sheets:
        stock = select_best_stock(stocks, remaining, usage, cfg=cfg, logger=log)
        if stock is None:
            break
        usage.record(stock)

        sheet, left = _pack_shelves(stock, remaining, kerf)
        if sheet.cuts:
            sheets.append(sheet)
            log.debug(f"shelf: closed sheet {len(sheets)} on {stock.name}, {len(sheet.cuts)} placed")

        remaining = left
        if not sheet.cuts:
            break

    log.info(f"shelf: {len(sheets)} sheets, {len(remaining)} unplaced")
    return OptimizationResult(sheets=sheets, unplaced=remaining, algorithm="shelf")

# cutlist_solver/stock_select.py
# Picks which stock to open next for the remaining (largest-first) cuts.
#
# Policy:
#   - candidates: budget left, material matches the largest cut, and that cut fits
#   - can_fit_all = (area of fittable remaining cuts / stock area) <= fill threshold
#   - can-fit-all stocks first, highest fill ratio (ties within tolerance -> smaller stock)
#   - otherwise the largest stock, to place as much as possible per sheet

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .config import DEFAULTS, Defaults
from .geometry import stock_can_fit_cut
from .logger import Logger, get_logger
from .types import Cut, Stock, materials_compatible


@dataclass
class StockUsage:
    """Per-run counter: stock id -> sheets opened."""
    counts: Dict[int, int] = field(default_factory=dict)

    def used(self, stock: Stock) -> int:
        return self.counts.get(stock.id, 0)

    def available(self, stock: Stock) -> int:
        return stock.quantity - self.used(stock)

    def record(self, stock: Stock) -> None:
        self.counts[stock.id] = self.used(stock) + 1


@dataclass(frozen=True)
class StockScore:
    stock: Stock
    fittable_cuts: int
    total_cut_area: float
    fill_ratio: float
    can_fit_all: bool


def score_stock(stock: Stock, remaining: Sequence[Cut], cfg: Defaults = DEFAULTS) -> StockScore:
    fittable = 0
    total_area = 0.0
    for c in remaining:
        if not materials_compatible(c.material, stock.material):
            continue
        if stock_can_fit_cut(stock, c):
            fittable += 1
            total_area += c.area

    # not capped at 1: a ratio above the threshold means the sheet cannot take everything
    fill_ratio = total_area / stock.area
    return StockScore(
        stock=stock,
        fittable_cuts=fittable,
        total_cut_area=total_area,
        fill_ratio=fill_ratio,
        can_fit_all=fill_ratio <= cfg.fill_threshold,
    )


def _compare(a: StockScore, b: StockScore, tolerance: float) -> float:
    if a.can_fit_all and not b.can_fit_all:
        return -1
    if b.can_fit_all and not a.can_fit_all:
        return 1
    if a.can_fit_all and b.can_fit_all:
        if abs(a.fill_ratio - b.fill_ratio) > tolerance:
            return b.fill_ratio - a.fill_ratio
        return a.stock.area - b.stock.area
    return b.stock.area - a.stock.area


def select_best_stock(
    stocks: Sequence[Stock],
    remaining: Sequence[Cut],
    usage: StockUsage,
    *,
    cfg: Defaults = DEFAULTS,
    logger: Optional[Logger] = None,
) -> Optional[Stock]:
    log = logger or get_logger()
    if not remaining:
        return None

    largest = remaining[0]
    viable: List[Stock] = []
    for s in stocks:
        if usage.available(s) <= 0:
            log.debug(f"  stock {s.name}: exhausted ({usage.used(s)}/{s.quantity})")
            continue
        if not materials_compatible(largest.material, s.material):
            continue
        if stock_can_fit_cut(s, largest):
            viable.append(s)

    if not viable:
        log.debug(f"  no stock can take {largest.label} {largest.width}x{largest.length}")
        return None

    scored = [score_stock(s, remaining, cfg) for s in viable]
    for sc in scored:
        log.debug(
            f"  stock {sc.stock.name}: fits={sc.fittable_cuts} fill={sc.fill_ratio * 100:.1f}% "
            f"can_fit_all={sc.can_fit_all} area={sc.stock.area:g}"
        )

    # sorted() is stable, so full ties keep input order
    scored.sort(key=functools.cmp_to_key(lambda a, b: _compare(a, b, cfg.fill_tolerance)))
    return scored[0].stock

# cutlist_solver/metrics.py
# Summary metrics for an optimization result:
# - used area = sum of placed cut areas (kerf losses are part of waste)
# - total area = sum of opened sheet areas
# - waste % = (total - used) / total * 100, rounded to 1 decimal
#
# Solver-agnostic: works for any result regardless of which strategy produced it.

from __future__ import annotations

from typing import Iterable

from .types import OptimizationResult, OptimizationStats, Sheet


def compute_used_area(sheets: Iterable[Sheet]) -> float:
    return sum(s.used_area() for s in sheets)


def compute_total_area(sheets: Iterable[Sheet]) -> float:
    return sum(s.area for s in sheets)


def compute_sheet_waste(sheet: Sheet) -> float:
    """Waste percentage of one sheet (0.0 for a zero-area sheet)."""
    if sheet.area <= 0:
        return 0.0
    return round((sheet.area - sheet.used_area()) / sheet.area * 100, 1)


def calculate_stats(result: OptimizationResult) -> OptimizationStats:
    total = compute_total_area(result.sheets)
    used = compute_used_area(result.sheets)
    waste = round((total - used) / total * 100, 1) if total > 0 else 0.0
    return OptimizationStats(
        sheets=len(result.sheets),
        used=used,
        total=total,
        waste=waste,
        unplaced=len(result.unplaced),
    )

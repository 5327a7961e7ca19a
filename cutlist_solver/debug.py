# cutlist_solver/debug.py
# Debug / inspection helpers:
# - pretty-print placed cuts per sheet
# - quick text summaries
# - helpful when tuning scorer weights

from __future__ import annotations

from typing import Iterable

from .metrics import calculate_stats, compute_sheet_waste
from .types import OptimizationResult, PlacedCut, Sheet
from .utils import sort_placed_readable


def print_placed(placed: Iterable[PlacedCut]) -> None:
    for p in placed:
        print(
            f"  {p.label:20s} "
            f"x={p.x:7.3f} y={p.y:7.3f} w={p.pw:7.3f} h={p.ph:7.3f} "
            f"{'R' if p.rotated else ' '}"
        )


def print_sheet(sheet: Sheet, index: int) -> None:
    print(f"=== Sheet {index + 1}: {sheet.name} {sheet.width:g}x{sheet.length:g} {sheet.material} ===")
    print(f"Cuts: {len(sheet.cuts)}  Waste: {compute_sheet_waste(sheet)}%")
    print_placed(sort_placed_readable(sheet.cuts))


def print_result(result: OptimizationResult) -> None:
    stats = calculate_stats(result)
    print(f"Algorithm: {result.algorithm or '-'}")
    print(f"Sheets: {stats.sheets}  Waste: {stats.waste}%  Unplaced: {stats.unplaced}")
    for i, sh in enumerate(result.sheets):
        print_sheet(sh, i)
    if result.unplaced:
        print("-- Unplaced --")
        for c in result.unplaced:
            print(f"  {c.label:20s} {c.width:g}x{c.length:g} {c.material}")

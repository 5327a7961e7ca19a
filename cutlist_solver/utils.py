# cutlist_solver/utils.py
# Helpers shared by the runner, CLI and debug printers:
# - wall-clock timing of a block
# - readable ordering of placed cuts
# - JSON export of a result (sheet geometry, unplaced parts, summary stats)

from __future__ import annotations

import json
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List

from .metrics import calculate_stats, compute_sheet_waste
from .types import Cut, OptimizationResult, PlacedCut


@contextmanager
def timer(label: str = "timer") -> Iterator[Dict[str, float]]:
    """Yields a dict that gets `seconds` when the block exits."""
    elapsed: Dict[str, float] = {}
    start = time.perf_counter()
    try:
        yield elapsed
    finally:
        elapsed["seconds"] = time.perf_counter() - start


def _cut_to_dict(c: Cut) -> Dict[str, Any]:
    return {
        "id": c.id,
        "label": c.label,
        "length": c.length,
        "width": c.width,
        "material": c.material,
    }


def result_to_dict(result: OptimizationResult) -> Dict[str, Any]:
    """
    Convert a result to a JSON-friendly dict.
    x/y/pw/ph are the geometry contract for anything drawing the layout.
    """
    stats = calculate_stats(result)
    out: Dict[str, Any] = {
        "algorithm": result.algorithm,
        "sheets": [],
        "unplaced": [_cut_to_dict(c) for c in result.unplaced],
        "stats": {
            "sheets": stats.sheets,
            "used": stats.used,
            "total": stats.total,
            "waste": stats.waste,
            "unplaced": stats.unplaced,
        },
    }

    for i, sh in enumerate(result.sheets):
        out["sheets"].append(
            {
                "sheet_index": i,
                "stock_id": sh.stock.id,
                "name": sh.name,
                "material": sh.material,
                "length": sh.length,
                "width": sh.width,
                "waste": compute_sheet_waste(sh),
                "cuts": [
                    {
                        **_cut_to_dict(pc.cut),
                        "x": pc.x,
                        "y": pc.y,
                        "pw": pc.pw,
                        "ph": pc.ph,
                        "rotated": bool(pc.rotated),
                    }
                    for pc in sh.cuts
                ],
            }
        )

    return out


def save_result_json(result: OptimizationResult, path: str | Path, *, indent: int = 2) -> None:
    """Save a result into JSON for debugging/integration."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(result_to_dict(result), f, ensure_ascii=False, indent=indent)


def sort_placed_readable(placed: List[PlacedCut]) -> List[PlacedCut]:
    """Top-to-bottom, left-to-right, then label; stable across reruns."""
    return sorted(placed, key=lambda p: (p.y, p.x, p.label))

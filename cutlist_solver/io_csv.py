# cutlist_solver/io_csv.py
# CSV import helpers for stock and cut lists.
#
# Stock CSV (header required):  name,length,width,qty,material
#   instead of length,width a row may give size ("96x48") or just a preset name ("4x8 Plywood")
# Cut CSV (header required):    label,length,width,qty,material
# qty may also be spelled quantity; ids are assigned by row order.

from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, List, Sequence, Set, Tuple

from .config import make_stock, parse_size_text
from .types import Cut, Stock


def _require(fieldnames, alternatives: Sequence[Set[str]], path: Path) -> None:
    present = set(fieldnames or [])
    if not any(req.issubset(present) for req in alternatives):
        wanted = " or ".join(str(sorted(req)) for req in alternatives)
        raise ValueError(f"{path}: CSV must contain at least columns: {wanted}")


def _cell(row: Dict[str, str], key: str) -> str:
    return (row.get(key) or "").strip()


def _row_number(row: Dict[str, str], key: str, path: Path, line: int) -> float:
    try:
        return float(row[key])
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"{path}:{line}: invalid {key} {row.get(key)!r}") from e


def _row_quantity(row: Dict[str, str], path: Path, line: int) -> int:
    key = "qty" if _cell(row, "qty") else "quantity"
    text = _cell(row, key)
    if not text:
        return 1
    try:
        value = float(text)
    except ValueError as e:
        raise ValueError(f"{path}:{line}: invalid {key} {text!r}") from e
    if value != int(value):
        raise ValueError(f"{path}:{line}: {key} must be a whole number, got {text!r}")
    return int(value)


def _stock_dims(row: Dict[str, str], path: Path, line: int) -> Tuple[float, float]:
    if _cell(row, "length"):
        return _row_number(row, "length", path, line), _row_number(row, "width", path, line)
    size = _cell(row, "size")
    try:
        if size:
            return parse_size_text(size)
        preset = make_stock(_cell(row, "name"))
    except ValueError as e:
        raise ValueError(f"{path}:{line}: {e}") from e
    return preset.length, preset.width


def read_stocks_csv(path: str | Path) -> List[Stock]:
    path = Path(path)
    stocks: List[Stock] = []
    with path.open("r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        _require(reader.fieldnames, [{"length", "width"}, {"size"}, {"name"}], path)
        for line, row in enumerate(reader, start=2):
            if not (_cell(row, "length") or _cell(row, "size") or _cell(row, "name")):
                continue
            idx = len(stocks) + 1
            length, width = _stock_dims(row, path, line)
            stocks.append(
                Stock(
                    id=idx,
                    name=_cell(row, "name") or f"Stock {idx}",
                    length=length,
                    width=width,
                    quantity=_row_quantity(row, path, line),
                    material=_cell(row, "material"),
                )
            )
    return stocks


def read_cuts_csv(path: str | Path) -> List[Cut]:
    path = Path(path)
    cuts: List[Cut] = []
    with path.open("r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        _require(reader.fieldnames, [{"length", "width"}], path)
        for line, row in enumerate(reader, start=2):
            if not _cell(row, "length"):
                continue
            idx = len(cuts) + 1
            cuts.append(
                Cut(
                    id=idx,
                    label=_cell(row, "label") or f"Part {idx}",
                    length=_row_number(row, "length", path, line),
                    width=_row_number(row, "width", path, line),
                    quantity=_row_quantity(row, path, line),
                    material=_cell(row, "material"),
                )
            )
    return cuts

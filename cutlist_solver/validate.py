# cutlist_solver/validate.py
# Validation utilities:
# - check caller inputs before optimizing (the optimizers themselves do not validate)
# - check placements fit within their sheet and match the source cut dims
# - check no-overlap per sheet
# - check every requested cut is accounted for exactly once
#
# Useful both during development and to sanity-check solver output.

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from .types import Cut, OptimizationResult, PlacedCut, Sheet, Stock, check_no_overlap

# float slack for coordinates built from repeated kerf additions
EPS = 1e-9


@dataclass(frozen=True)
class ValidationIssue:
    level: str   # "ERROR" or "WARN"
    message: str
    sheet_index: Optional[int] = None
    cut_id: Optional[int] = None


def validate_inputs(stocks: Sequence[Stock], cuts: Sequence[Cut], kerf: float) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []

    if kerf < 0:
        issues.append(ValidationIssue(level="ERROR", message=f"Negative kerf: {kerf}"))

    for s in stocks:
        if s.length <= 0 or s.width <= 0:
            issues.append(ValidationIssue(level="ERROR", message=f"Non-positive size for stock {s.name}: {s.width}x{s.length}"))
        if s.quantity < 1:
            issues.append(ValidationIssue(level="ERROR", message=f"quantity must be >= 1 for stock {s.name}"))

    for c in cuts:
        if c.length <= 0 or c.width <= 0:
            issues.append(
                ValidationIssue(
                    level="ERROR",
                    message=f"Non-positive size for cut {c.label}: {c.width}x{c.length}",
                    cut_id=c.id,
                )
            )
        if c.quantity < 1:
            issues.append(ValidationIssue(level="ERROR", message=f"quantity must be >= 1 for cut {c.label}", cut_id=c.id))

    dims = [d for s in stocks for d in (s.length, s.width)] + [d for c in cuts for d in (c.length, c.width)]
    dims = [d for d in dims if d > 0]
    if dims and kerf >= min(dims):
        issues.append(ValidationIssue(level="WARN", message=f"Kerf {kerf} is not smaller than the smallest dimension {min(dims)}"))

    if not stocks:
        issues.append(ValidationIssue(level="WARN", message="No stocks given; every cut will be unplaced."))

    return issues


def _fits(sheet: Sheet, pc: PlacedCut) -> bool:
    W, H = sheet.width, sheet.length
    return pc.x >= -EPS and pc.y >= -EPS and pc.right() <= W + EPS and pc.top() <= H + EPS


def validate_placements(sheet: Sheet, sheet_index: int) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for pc in sheet.cuts:
        if sorted((pc.pw, pc.ph)) != sorted((pc.cut.length, pc.cut.width)):
            issues.append(
                ValidationIssue(
                    level="ERROR",
                    message=f"Placed dims {pc.pw}x{pc.ph} do not match cut {pc.cut.width}x{pc.cut.length}",
                    sheet_index=sheet_index,
                    cut_id=pc.cut.id,
                )
            )
        if not _fits(sheet, pc):
            issues.append(
                ValidationIssue(
                    level="ERROR",
                    message=(
                        f"Placement out of sheet bounds: "
                        f"x={pc.x}, y={pc.y}, w={pc.pw}, h={pc.ph}, sheet={sheet.width}x{sheet.length}"
                    ),
                    sheet_index=sheet_index,
                    cut_id=pc.cut.id,
                )
            )
    if sheet.used_area() > sheet.area + EPS:
        issues.append(ValidationIssue(level="ERROR", message="Placed area exceeds sheet area", sheet_index=sheet_index))
    return issues


def validate_no_overlap(sheet: Sheet, sheet_index: int) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    try:
        check_no_overlap(sheet.cuts, sheet_index=sheet_index)
    except ValueError as e:
        issues.append(ValidationIssue(level="ERROR", message=str(e), sheet_index=sheet_index))
    return issues


def _count_ids(cuts: Iterable[Cut]) -> Dict[int, int]:
    out: Dict[int, int] = {}
    for c in cuts:
        out[c.id] = out.get(c.id, 0) + 1
    return out


def validate_result(result: OptimizationResult, cuts: Optional[Sequence[Cut]] = None) -> List[ValidationIssue]:
    """
    Validate an entire result across sheets.
    Given the requested `cuts`, also checks that placed + unplaced covers every unit cut.
    Returns a list of issues (empty if OK).
    """
    issues: List[ValidationIssue] = []

    opened: Dict[int, int] = {}
    for i, sheet in enumerate(result.sheets):
        issues.extend(validate_placements(sheet, i))
        issues.extend(validate_no_overlap(sheet, i))
        opened[sheet.stock.id] = opened.get(sheet.stock.id, 0) + 1
        if not sheet.cuts:
            issues.append(ValidationIssue(level="WARN", message="Empty sheet in result", sheet_index=i))

    stocks_by_id = {s.stock.id: s.stock for s in result.sheets}
    for sid, n in opened.items():
        if n > stocks_by_id[sid].quantity:
            issues.append(
                ValidationIssue(
                    level="ERROR",
                    message=f"Stock {stocks_by_id[sid].name} opened {n} times, only {stocks_by_id[sid].quantity} available",
                )
            )

    if cuts is not None:
        requested = sum(c.quantity for c in cuts)
        accounted = result.placed_count() + len(result.unplaced)
        if requested != accounted:
            issues.append(
                ValidationIssue(
                    level="ERROR",
                    message=f"Cut count mismatch: requested {requested}, placed+unplaced {accounted}",
                )
            )
        else:
            wanted = {c.id: c.quantity for c in cuts}
            got = _count_ids([pc.cut for pc in result.placed_cuts()] + list(result.unplaced))
            for cid, n in wanted.items():
                if got.get(cid, 0) != n:
                    issues.append(
                        ValidationIssue(
                            level="WARN",
                            message=f"Cut id {cid}: requested {n}, accounted {got.get(cid, 0)}",
                            cut_id=cid,
                        )
                    )

    if not result.sheets:
        issues.append(ValidationIssue(level="WARN", message="Result has 0 sheets."))

    return issues


def raise_on_errors(issues: List[ValidationIssue]) -> None:
    errs = [i for i in issues if i.level.upper() == "ERROR"]
    if errs:
        msg = "\n".join(
            f"[{e.level}] sheet={e.sheet_index} cut={e.cut_id} :: {e.message}" for e in errs
        )
        raise ValueError("Validation failed:\n" + msg)

from __future__ import annotations

import pytest

from cutlist_solver.solver_guillotine import optimize_cuts
from cutlist_solver.types import Cut, OptimizationResult, PlacedCut, Sheet, Stock
from cutlist_solver.validate import raise_on_errors, validate_inputs, validate_result


STOCK = Stock(id=1, name="4x8", length=96, width=48)
PANEL = Cut(id=1, label="Panel", length=24, width=12)


def _levels(issues):
    return [i.level for i in issues]


def test_clean_inputs_have_no_issues() -> None:
    assert validate_inputs([STOCK], [PANEL], 0.125) == []


def test_bad_inputs() -> None:
    issues = validate_inputs([STOCK], [PANEL], -1)
    assert "ERROR" in _levels(issues)

    bad_cut = Cut(id=2, label="Flat", length=0, width=12)
    issues = validate_inputs([STOCK], [bad_cut], 0.125)
    assert [i.cut_id for i in issues if i.level == "ERROR"] == [2]

    issues = validate_inputs([Stock(id=1, name="x", length=10, width=10, quantity=0)], [PANEL], 0.125)
    assert "ERROR" in _levels(issues)

    with pytest.raises(ValueError, match="Validation failed"):
        raise_on_errors(validate_inputs([STOCK], [PANEL], -1))


def test_kerf_and_missing_stock_warnings() -> None:
    issues = validate_inputs([STOCK], [Cut(id=1, label="Thin", length=10, width=0.1)], 0.125)
    assert _levels(issues) == ["WARN"]

    issues = validate_inputs([], [PANEL], 0.125)
    assert _levels(issues) == ["WARN"]
    raise_on_errors(issues)


def test_solver_output_validates() -> None:
    cuts = [Cut(id=1, label="Panel", length=24, width=12, quantity=6)]
    res = optimize_cuts([STOCK], cuts, 0.125)
    issues = validate_result(res, cuts)
    assert [i for i in issues if i.level == "ERROR"] == []


def test_overlap_is_an_error() -> None:
    sheet = Sheet(
        stock=STOCK,
        cuts=[
            PlacedCut(cut=PANEL, x=0, y=0, pw=12, ph=24),
            PlacedCut(cut=PANEL, x=6, y=6, pw=12, ph=24),
        ],
    )
    issues = validate_result(OptimizationResult(sheets=[sheet]))
    assert any(i.level == "ERROR" and "Overlap" in i.message for i in issues)


def test_touching_edges_are_fine() -> None:
    sheet = Sheet(
        stock=STOCK,
        cuts=[
            PlacedCut(cut=PANEL, x=0, y=0, pw=12, ph=24),
            PlacedCut(cut=PANEL, x=12, y=0, pw=12, ph=24),
        ],
    )
    assert validate_result(OptimizationResult(sheets=[sheet])) == []


def test_out_of_bounds_and_wrong_dims() -> None:
    sheet = Sheet(
        stock=STOCK,
        cuts=[
            PlacedCut(cut=PANEL, x=40, y=0, pw=12, ph=24),
            PlacedCut(cut=PANEL, x=0, y=50, pw=12, ph=30),
        ],
    )
    errors = [i for i in validate_result(OptimizationResult(sheets=[sheet])) if i.level == "ERROR"]
    assert any("bounds" in e.message for e in errors)
    assert any("do not match" in e.message for e in errors)


def test_stock_overuse_and_count_mismatch() -> None:
    sheets = [Sheet(stock=STOCK, cuts=[PlacedCut(cut=PANEL, x=0, y=0, pw=12, ph=24)]) for _ in range(2)]
    res = OptimizationResult(sheets=sheets)
    errors = [i.message for i in validate_result(res, [PANEL]) if i.level == "ERROR"]
    assert any("opened 2 times" in m for m in errors)
    assert any("count mismatch" in m for m in errors)


def test_empty_result_warns() -> None:
    issues = validate_result(OptimizationResult(unplaced=[PANEL]), [PANEL])
    assert _levels(issues) == ["WARN"]

# cutlist_solver/tests_smoke.py
# Very small smoke tests you can run with:
#   python -m cutlist_solver.tests_smoke
#
# These are not full unit tests, but they quickly tell you if
# the optimizers, validation and metrics are wired correctly.

from __future__ import annotations

from cutlist_solver.run import run_best
from cutlist_solver.sample_data import example_cuts, example_stocks
from cutlist_solver.types import Cut, Stock
from cutlist_solver.validate import raise_on_errors, validate_result


def test_basic_fit() -> None:
    stocks = example_stocks()
    cuts = example_cuts()

    res, fig = run_best(stocks, cuts, kerf=0.125, validate=True)
    result = res.result

    issues = validate_result(result, cuts)
    raise_on_errors(issues)

    assert result.num_sheets() >= 1
    assert res.stats.total > 0
    assert 0.0 <= res.stats.waste < 100.0


def test_oversized_part_unplaced() -> None:
    stocks = [Stock(id=1, name="4x4", length=48, width=48, quantity=2)]

    # Longer than the sheet in both orientations
    cuts = [Cut(id=1, label="Long rail", length=60, width=4)]

    res, fig = run_best(stocks, cuts, kerf=0.125, validate=True)
    result = res.result

    assert result.sheets == []
    assert [c.label for c in result.unplaced] == ["Long rail"]


def test_each_algorithm_runs() -> None:
    for alg in ("guillotine", "shelf", "optimal"):
        res, _ = run_best(example_stocks(), example_cuts(), kerf=0.125, algorithm=alg)
        assert res.result.algorithm == alg
        assert res.seconds >= 0


def test_run_best_returns_result_and_no_figure_without_plot() -> None:
    out = run_best(example_stocks(), example_cuts(), kerf=0.125)
    assert isinstance(out, tuple) and len(out) == 2

    res, fig = out
    assert fig is None
    assert res.result.num_sheets() >= 1


def main() -> None:
    print("Running smoke tests...")
    test_basic_fit()
    test_oversized_part_unplaced()
    test_each_algorithm_runs()
    test_run_best_returns_result_and_no_figure_without_plot()
    print("OK")


if __name__ == "__main__":
    main()

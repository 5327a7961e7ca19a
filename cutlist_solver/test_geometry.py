from __future__ import annotations

from cutlist_solver.geometry import fits_either_way, fits_in_rect, split_rectangle, stock_can_fit_cut
from cutlist_solver.types import Cut, Rect, Stock


SHEET = Rect(0, 0, 48, 96)


def test_fits_with_kerf_on_partial_dimension() -> None:
    assert fits_in_rect(24, 12, SHEET, 0.125)
    # 47.9 + kerf overflows 48
    assert not fits_in_rect(47.9, 12, SHEET, 0.125)


def test_full_dimension_needs_no_kerf() -> None:
    assert fits_in_rect(48, 96, SHEET, 0.125)
    assert fits_in_rect(48, 12, SHEET, 0.125)
    assert not fits_in_rect(48.5, 12, SHEET, 0.0)


def test_split_rectangle_both_variants() -> None:
    s = split_rectangle(SHEET, 24, 12, 0.125)
    assert s.horizontal == [Rect(24.125, 0, 23.875, 12), Rect(0, 12.125, 48, 83.875)]
    assert s.vertical == [Rect(24.125, 0, 23.875, 96), Rect(0, 12.125, 24, 83.875)]


def test_split_rectangle_drops_slivers() -> None:
    assert split_rectangle(SHEET, 48, 96, 0.125).horizontal == []
    assert split_rectangle(SHEET, 48, 96, 0.125).vertical == []

    # 0.1 left on the right is thinner than the blade
    s = split_rectangle(SHEET, 47.9, 50, 0.125)
    assert len(s.horizontal) == 1
    assert s.horizontal[0].y == 50.125


def test_split_pieces_offset_from_rect_origin() -> None:
    s = split_rectangle(Rect(10, 20, 30, 40), 10, 10, 0)
    assert s.horizontal == [Rect(20, 20, 20, 10), Rect(10, 30, 30, 30)]


def test_stock_can_fit_cut_either_orientation() -> None:
    stock = Stock(id=1, name="4x8", length=96, width=48)
    assert stock_can_fit_cut(stock, Cut(id=1, label="a", length=96, width=48))
    assert stock_can_fit_cut(stock, Cut(id=2, label="b", length=40, width=90))
    assert not stock_can_fit_cut(stock, Cut(id=3, label="c", length=60, width=60))


def test_fits_either_way() -> None:
    c = Cut(id=1, label="a", length=10, width=30)
    assert fits_either_way(c, Rect(0, 0, 10, 30), 0.125)
    assert fits_either_way(c, Rect(0, 0, 30, 10), 0.125)
    assert not fits_either_way(c, Rect(0, 0, 20, 20), 0.125)

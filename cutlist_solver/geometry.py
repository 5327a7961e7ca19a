# cutlist_solver/geometry.py
# Fit and split primitives shared by every optimizer.
#
# Kerf models the blade width removed between two adjacent pieces, so it is only
# charged along a dimension where material remains after the piece.

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .types import Cut, Rect, Stock


@dataclass(frozen=True)
class GuillotineSplit:
    """Both classic guillotine splits of a rect after placing a piece at its origin."""
    horizontal: List[Rect]
    vertical: List[Rect]


def fits_in_rect(cut_w: float, cut_h: float, rect: Rect, kerf: float) -> bool:
    needs_kerf_right = cut_w < rect.w
    needs_kerf_bottom = cut_h < rect.h

    required_w = cut_w + (kerf if needs_kerf_right else 0)
    required_h = cut_h + (kerf if needs_kerf_bottom else 0)

    return required_w <= rect.w and required_h <= rect.h


def split_rectangle(rect: Rect, cut_w: float, cut_h: float, kerf: float) -> GuillotineSplit:
    """
    horizontal-first: right strip as tall as the piece, bottom strip spanning rect.w
    vertical-first:   right strip spanning rect.h, bottom strip as wide as the piece
    Slivers not wider than the kerf are dropped.
    """
    horizontal: List[Rect] = []
    vertical: List[Rect] = []

    right_space = rect.w - cut_w
    bottom_space = rect.h - cut_h

    if right_space > kerf:
        horizontal.append(Rect(rect.x + cut_w + kerf, rect.y, right_space - kerf, cut_h))
    if bottom_space > kerf:
        horizontal.append(Rect(rect.x, rect.y + cut_h + kerf, rect.w, bottom_space - kerf))

    if right_space > kerf:
        vertical.append(Rect(rect.x + cut_w + kerf, rect.y, right_space - kerf, rect.h))
    if bottom_space > kerf:
        vertical.append(Rect(rect.x, rect.y + cut_h + kerf, cut_w, bottom_space - kerf))

    return GuillotineSplit(horizontal=horizontal, vertical=vertical)


def stock_can_fit_cut(stock: Stock, cut: Cut) -> bool:
    """Whole-sheet check in either orientation (no kerf at sheet edges)."""
    return (cut.width <= stock.width and cut.length <= stock.length) or (
        cut.length <= stock.width and cut.width <= stock.length
    )


def fits_either_way(cut: Cut, rect: Rect, kerf: float) -> bool:
    return fits_in_rect(cut.width, cut.length, rect, kerf) or fits_in_rect(
        cut.length, cut.width, rect, kerf
    )

# cutlist_solver/scoring.py
# Heuristic cost functions ranking candidate placements and guillotine splits.
#
# score_placement: lower is better (cost of putting a piece into a free rect)
# score_rectangles: higher is better (usefulness of the free rects a split leaves)
#
# Both look only at the next few remaining cuts (DEFAULTS.lookahead) to stay cheap.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .config import DEFAULTS, Defaults
from .geometry import fits_either_way, fits_in_rect
from .types import Cut, PlacedCut, Rect


@dataclass(frozen=True)
class Placement:
    rect_index: int
    rotated: bool
    score: float
    split: str = "h"  # "h" (horizontal-first) or "v" (vertical-first)


def score_placement(
    cut_w: float,
    cut_h: float,
    rect: Rect,
    kerf: float,
    remaining: Sequence[Cut],
    cfg: Defaults = DEFAULTS,
) -> float:
    leftover_w = rect.w - cut_w - kerf
    leftover_h = rect.h - cut_h - kerf

    # Right strip: leftover_w x cut_h, bottom strip: rect.w x leftover_h
    right_usable = 0
    bottom_usable = 0
    for c in remaining[: cfg.lookahead]:
        if leftover_w >= c.width and cut_h >= c.length:
            right_usable += 1
        if leftover_w >= c.length and cut_h >= c.width:
            right_usable += 1
        if rect.w >= c.width and leftover_h >= c.length:
            bottom_usable += 1
        if rect.w >= c.length and leftover_h >= c.width:
            bottom_usable += 1

    score = 0.0

    # Filling a whole dimension leaves no partial strip behind
    if leftover_w <= 0:
        score -= cfg.full_dimension_bonus
    if leftover_h <= 0:
        score -= cfg.full_dimension_bonus

    # Thin strip nothing upcoming can use
    if 0 < leftover_w < cfg.min_useful_strip and right_usable == 0:
        score += cfg.useless_strip_penalty
    if 0 < leftover_h < cfg.min_useful_strip and bottom_usable == 0:
        score += cfg.useless_strip_penalty

    score -= right_usable * cfg.usable_strip_bonus
    score -= bottom_usable * cfg.usable_strip_bonus

    right_area = max(0.0, leftover_w) * cut_h
    bottom_area = rect.w * max(0.0, leftover_h)
    score -= max(right_area, bottom_area) * cfg.strip_area_weight

    # BSSF, then total leftover
    short_side = min(max(0.0, leftover_w), max(0.0, leftover_h))
    score += short_side * cfg.short_side_weight
    score += max(0.0, leftover_w) + max(0.0, leftover_h)

    return score


def score_rectangles(
    rects: Sequence[Rect],
    remaining: Sequence[Cut],
    kerf: float,
    cfg: Defaults = DEFAULTS,
) -> float:
    score = 0.0
    for r in rects:
        score += r.area
        # only the first upcoming cut that fits counts per rect
        for c in remaining[: cfg.lookahead]:
            if fits_either_way(c, r, kerf):
                score += c.area * cfg.rect_fit_bonus
                break
    return score


def _preferred_rotation(cut: Cut, placed: Sequence[PlacedCut]) -> Optional[bool]:
    for p in placed:
        if p.label == cut.label:
            return p.rotated
    return None


def find_best_placement(
    cut: Cut,
    rects: Sequence[Rect],
    kerf: float,
    remaining: Sequence[Cut],
    placed: Sequence[PlacedCut] = (),
    cfg: Defaults = DEFAULTS,
) -> Optional[Placement]:
    """
    Best (rect, rotation) over all free rects; the first strictly-better candidate wins.
    """
    best: Optional[Placement] = None
    preferred = _preferred_rotation(cut, placed)

    for i, r in enumerate(rects):
        for rotated in (False, True):
            w, h = (cut.length, cut.width) if rotated else (cut.width, cut.length)
            if not fits_in_rect(w, h, r, kerf):
                continue
            score = score_placement(w, h, r, kerf, remaining, cfg)
            if preferred is not None and preferred != rotated:
                score += cfg.orientation_penalty
            if best is None or score < best.score:
                best = Placement(rect_index=i, rotated=rotated, score=score)

    return best


def generate_placements(
    cut: Cut,
    rects: Sequence[Rect],
    kerf: float,
    remaining: Sequence[Cut],
    placed: Sequence[PlacedCut] = (),
    cfg: Defaults = DEFAULTS,
) -> List[Placement]:
    """
    Every fitting (rect, rotation, split) candidate, best score first.
    The vertical-first split of a candidate ranks one point behind its horizontal twin.
    Square cuts are not tried rotated.
    """
    out: List[Placement] = []
    preferred = _preferred_rotation(cut, placed)

    for i, r in enumerate(rects):
        for rotated in (False, True):
            if rotated and cut.width == cut.length:
                continue
            w, h = (cut.length, cut.width) if rotated else (cut.width, cut.length)
            if not fits_in_rect(w, h, r, kerf):
                continue
            score = score_placement(w, h, r, kerf, remaining, cfg)
            if preferred is not None and preferred != rotated:
                score += cfg.orientation_penalty
            out.append(Placement(rect_index=i, rotated=rotated, score=score, split="h"))
            out.append(Placement(rect_index=i, rotated=rotated, score=score + 1, split="v"))

    out.sort(key=lambda p: p.score)
    return out

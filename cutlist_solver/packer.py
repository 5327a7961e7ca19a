# cutlist_solver/packer.py
# Greedy single-sheet packer for the guillotine heuristic.
#
# One pass over the cut sequence: each cut goes to its best-scoring free rect/rotation,
# the consumed rect is replaced by whichever guillotine split leaves more useful space,
# and free rects are kept ordered top-left first.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .config import DEFAULTS, Defaults
from .geometry import fits_in_rect, split_rectangle
from .logger import Logger, get_logger
from .scoring import Placement, find_best_placement, score_rectangles
from .types import Cut, PlacedCut, Sheet, Stock, effective_dims, materials_compatible


@dataclass
class PackResult:
    sheet: Sheet
    placed: List[Cut]
    unplaced: List[Cut]

    def used_area(self) -> float:
        return self.sheet.used_area()


def pack_sheet(
    stock: Stock,
    cuts: Sequence[Cut],
    kerf: float,
    force_first_rotation: Optional[bool] = None,
    *,
    cfg: Defaults = DEFAULTS,
    logger: Optional[Logger] = None,
) -> PackResult:
    """
    Pack cuts onto a fresh sheet of `stock`. The caller's sequence is not modified.
    force_first_rotation overrides the first cut's rotation when that orientation fits.
    """
    log = logger or get_logger()
    sheet = Sheet.open(stock)
    placed: List[Cut] = []
    unplaced: List[Cut] = []

    for i, c in enumerate(cuts):
        if not materials_compatible(c.material, stock.material):
            unplaced.append(c)
            continue

        after = list(cuts[i + 1:]) + unplaced
        placement = find_best_placement(c, sheet.rects, kerf, after, sheet.cuts, cfg)

        if i == 0 and force_first_rotation is not None and placement is not None:
            r = sheet.rects[placement.rect_index]
            fw, fh = effective_dims(c, force_first_rotation)
            if fits_in_rect(fw, fh, r, kerf):
                placement = Placement(
                    rect_index=placement.rect_index,
                    rotated=force_first_rotation,
                    score=placement.score,
                )

        if placement is None:
            unplaced.append(c)
            log.debug(f"    could not place {c.label} ({c.width}x{c.length}) on {stock.name}")
            continue

        r = sheet.rects[placement.rect_index]
        pw, ph = effective_dims(c, placement.rotated)
        sheet.cuts.append(PlacedCut(cut=c, x=r.x, y=r.y, pw=pw, ph=ph, rotated=placement.rotated))
        placed.append(c)
        log.debug(
            f"    placed {c.label} ({pw:g}x{ph:g}{' R' if placement.rotated else ''}) at ({r.x:g}, {r.y:g})"
        )

        splits = split_rectangle(r, pw, ph, kerf)
        h_score = score_rectangles(splits.horizontal, after, kerf, cfg)
        v_score = score_rectangles(splits.vertical, after, kerf, cfg)
        new_rects = splits.vertical if v_score > h_score else splits.horizontal

        idx = placement.rect_index
        sheet.rects[idx:idx + 1] = new_rects
        sheet.rects.sort(key=lambda rr: (rr.y, rr.x))

    return PackResult(sheet=sheet, placed=placed, unplaced=unplaced)

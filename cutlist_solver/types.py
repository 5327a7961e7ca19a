# cutlist_solver/types.py
# Core data structures for sheet-goods cut planning.
# Keep this file dependency-light so it can be imported everywhere.
#
# Orientation convention used everywhere in the package:
#   - a sheet's x-extent is the stock width, its y-extent is the stock length
#   - an unrotated cut occupies cut.width along x and cut.length along y

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional, Tuple


# ----------------------------
# Inputs
# ----------------------------

@dataclass(frozen=True)
class Stock:
    """A sheet type available for cutting (dimensions in inches)."""
    id: int
    name: str
    length: float
    width: float
    quantity: int = 1
    material: str = ""

    @property
    def area(self) -> float:
        return self.length * self.width


@dataclass(frozen=True)
class Cut:
    """A requested part. quantity > 1 is expanded before packing (see expand_cuts)."""
    id: int
    label: str
    length: float
    width: float
    quantity: int = 1
    material: str = ""

    @property
    def area(self) -> float:
        return self.length * self.width

    @property
    def longest_side(self) -> float:
        return max(self.length, self.width)


def expand_cuts(cuts: Iterable[Cut]) -> List[Cut]:
    """Expand quantity into unit-quantity copies (stable order)."""
    out: List[Cut] = []
    for c in cuts:
        for _ in range(c.quantity):
            out.append(replace(c, quantity=1))
    return out


def materials_compatible(a: str, b: str) -> bool:
    """Empty material means unconstrained; two non-empty tags must match."""
    a = a or ""
    b = b or ""
    return not (a and b and a != b)


# ----------------------------
# Packing state / outputs
# ----------------------------

@dataclass(frozen=True)
class Rect:
    """Free rectangular region of a sheet."""
    x: float
    y: float
    w: float
    h: float

    @property
    def area(self) -> float:
        return self.w * self.h


@dataclass(frozen=True)
class PlacedCut:
    """A cut with its resolved position. pw/ph are the placed (possibly swapped) dims."""
    cut: Cut
    x: float
    y: float
    pw: float
    ph: float
    rotated: bool = False

    @property
    def label(self) -> str:
        return self.cut.label

    @property
    def area(self) -> float:
        return self.pw * self.ph

    def right(self) -> float:
        return self.x + self.pw

    def top(self) -> float:
        return self.y + self.ph


@dataclass
class Sheet:
    """One opened stock instance: placed cuts + free rects while packing."""
    stock: Stock
    cuts: List[PlacedCut] = field(default_factory=list)
    rects: List[Rect] = field(default_factory=list)

    @classmethod
    def open(cls, stock: Stock) -> "Sheet":
        return cls(stock=stock, rects=[Rect(0, 0, stock.width, stock.length)])

    @property
    def name(self) -> str:
        return self.stock.name

    @property
    def material(self) -> str:
        return self.stock.material

    @property
    def width(self) -> float:
        return self.stock.width

    @property
    def length(self) -> float:
        return self.stock.length

    @property
    def area(self) -> float:
        return self.stock.area

    def used_area(self) -> float:
        return sum(c.area for c in self.cuts)

    def finalized(self) -> "Sheet":
        """Copy without free rects (what results carry)."""
        return Sheet(stock=self.stock, cuts=list(self.cuts), rects=[])


@dataclass
class OptimizationResult:
    """Sheets with placed cuts plus the cuts that fit nowhere."""
    sheets: List[Sheet] = field(default_factory=list)
    unplaced: List[Cut] = field(default_factory=list)
    algorithm: str = ""

    def num_sheets(self) -> int:
        return len(self.sheets)

    def placed_count(self) -> int:
        return sum(len(s.cuts) for s in self.sheets)

    def placed_cuts(self) -> List[PlacedCut]:
        return [pc for s in self.sheets for pc in s.cuts]


@dataclass(frozen=True)
class OptimizationStats:
    sheets: int
    used: float
    total: float
    waste: float  # percent, rounded to 1 decimal
    unplaced: int


# ----------------------------
# Helper utilities
# ----------------------------

def effective_dims(cut: Cut, rotated: bool) -> Tuple[float, float]:
    """(pw, ph) for a cut in the given orientation."""
    if rotated:
        return cut.length, cut.width
    return cut.width, cut.length


def count_by_label(cuts: Iterable[Cut]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for c in cuts:
        counts[c.label] = counts.get(c.label, 0) + 1
    return counts


def check_no_overlap(placed: List[PlacedCut], sheet_index: Optional[int] = None) -> None:
    """
    Simple validator: raise if any two placed cuts on one sheet overlap.
    Touching edges are fine; only positive-area intersections count.
    """
    for i in range(len(placed)):
        a = placed[i]
        ax0, ay0, ax1, ay1 = a.x, a.y, a.right(), a.top()
        for j in range(i + 1, len(placed)):
            b = placed[j]
            bx0, by0, bx1, by1 = b.x, b.y, b.right(), b.top()
            if ax0 < bx1 and ax1 > bx0 and ay0 < by1 and ay1 > by0:
                raise ValueError(
                    f"Overlap on sheet {sheet_index}: {a.label} ({ax0},{ay0},{ax1},{ay1}) "
                    f"with {b.label} ({bx0},{by0},{bx1},{by1})"
                )

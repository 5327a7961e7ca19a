# cutlist_solver/config.py
# Centralized defaults and configuration helpers.
# Keeps "magic numbers" (kerf, scorer weights, search budgets) in one place.

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Tuple

from .types import Stock


@dataclass(frozen=True)
class Defaults:
    # Typical table saw blade (inches)
    default_kerf: float = 0.125

    # Safety cap on sheets per optimizer run
    max_sheets: int = 50

    # How many upcoming cuts the scorers look at
    lookahead: int = 5

    # Placement scorer weights (lower score is better)
    full_dimension_bonus: float = 5000.0
    useless_strip_penalty: float = 50000.0
    usable_strip_bonus: float = 1000.0
    strip_area_weight: float = 0.1
    short_side_weight: float = 10.0
    min_useful_strip: float = 10.0

    # Soft preference for same-label cuts sharing a rotation (tie-breaker only)
    orientation_penalty: float = 0.1

    # Split chooser: bonus multiplier on the area of a cut that fits a new rect
    rect_fit_bonus: float = 3.0

    # Stock selection
    fill_threshold: float = 0.85
    fill_tolerance: float = 0.05

    # Branch-and-bound
    area_prune_margin: float = 1.15
    exact_time_limit_ms: int = 2000
    exact_min_sheet_time_ms: int = 500
    exact_small_cuts: int = 10
    exact_medium_cuts: int = 15
    exact_small_time_ms: int = 3000
    exact_medium_time_ms: int = 2000
    exact_large_time_ms: int = 1000


DEFAULTS = Defaults()


# (value, label) in inches
KERF_PRESETS: Tuple[Tuple[float, str], ...] = (
    (0.0625, '1/16"'),
    (0.125, '1/8"'),
    (0.15625, '5/32"'),
)

# (name, length, width) in inches
STOCK_PRESETS: Tuple[Tuple[str, float, float], ...] = (
    ("4x8 Plywood", 96, 48),
    ("4x4 Plywood", 48, 48),
    ("5x5 Baltic Birch", 60, 60),
    ("4x8 MDF", 96, 48),
)

MATERIALS: Tuple[str, ...] = (
    "Plywood",
    "Baltic Birch",
    "MDF",
    "Melamine",
    "Hardwood",
    "Softwood",
    "Other",
)


def make_stock(
    name: str = "4x8 Plywood",
    *,
    id: int = 1,
    length: Optional[float] = None,
    width: Optional[float] = None,
    quantity: int = 1,
    material: str = "",
) -> Stock:
    """
    Convenience factory: named presets fill in missing dimensions.
    """
    if length is None or width is None:
        for preset_name, pl, pw in STOCK_PRESETS:
            if preset_name.lower() == name.lower():
                length = pl if length is None else length
                width = pw if width is None else width
                break
        else:
            raise ValueError(f"Unknown stock preset '{name}' and no dimensions given")
    return Stock(
        id=int(id),
        name=name,
        length=float(length),
        width=float(width),
        quantity=int(quantity),
        material=material,
    )


def parse_kerf_text(text: str) -> float:
    """
    Parse '1/8', '0.125', '1 1/2' or '5/32"' -> float inches.
    """
    s = str(text).strip().rstrip('"').strip()
    if not s:
        raise ValueError("kerf text is empty")
    try:
        if " " in s:
            whole, frac = s.split(None, 1)
            return float(int(whole) + Fraction(frac))
        return float(Fraction(s))
    except (ValueError, ZeroDivisionError) as e:
        raise ValueError(f"Invalid kerf '{text}': expected a decimal or fraction like 1/8") from e


def parse_size_text(size_text: str) -> Tuple[float, float]:
    """
    Parse '96x48' -> (96.0, 48.0) as (length, width)
    """
    s = size_text.lower().replace(" ", "").replace("×", "x")
    if "x" not in s:
        raise ValueError("size_text must be like '96x48'")
    a, b = s.split("x", 1)
    return float(a), float(b)

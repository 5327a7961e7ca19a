# cutlist_solver/sample_data.py
# Example stock/cut lists and a seeded random cut generator for quick benchmarking
# and tuning, without needing real job files.

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Tuple

from .types import Cut, Stock


def example_stocks() -> List[Stock]:
    return [
        Stock(id=1, name="4x8 Plywood", length=96, width=48, quantity=3, material="Plywood"),
        Stock(id=2, name="4x4 Plywood", length=48, width=48, quantity=2, material="Plywood"),
    ]


def example_cuts() -> List[Cut]:
    # A small bookcase
    return [
        Cut(id=1, label="Side", length=72, width=11.25, quantity=2, material="Plywood"),
        Cut(id=2, label="Shelf", length=34.5, width=11.25, quantity=5, material="Plywood"),
        Cut(id=3, label="Back", length=72, width=35.25, quantity=1, material="Plywood"),
        Cut(id=4, label="Toe kick", length=34.5, width=3.5, quantity=1, material="Plywood"),
    ]


@dataclass(frozen=True)
class RandomCutsConfig:
    seed: int = 123
    n_unique: int = 12
    qty_range: Tuple[int, int] = (1, 4)

    # size ranges (inches)
    length_range: Tuple[float, float] = (6, 48)
    width_range: Tuple[float, float] = (3, 24)

    # probability a part is a long strip (rails / stiles)
    p_strip: float = 0.2
    strip_length_range: Tuple[float, float] = (30, 90)
    strip_width_range: Tuple[float, float] = (1.5, 4)

    material: str = ""


def generate_random_cuts(cfg: RandomCutsConfig) -> List[Cut]:
    """
    Generate a list of Cut with quantities and sizes snapped to 1/8".
    Designed to resemble cabinet jobs: mostly panels, some long strips.
    """
    rnd = random.Random(cfg.seed)
    cuts: List[Cut] = []

    def snap(v: float) -> float:
        return round(v * 8) / 8

    for i in range(cfg.n_unique):
        if rnd.random() < cfg.p_strip:
            length = rnd.uniform(*cfg.strip_length_range)
            width = rnd.uniform(*cfg.strip_width_range)
        else:
            length = rnd.uniform(*cfg.length_range)
            width = rnd.uniform(*cfg.width_range)

        cuts.append(
            Cut(
                id=i + 1,
                label=f"P{i + 1:02d}",
                length=snap(length),
                width=snap(width),
                quantity=rnd.randint(*cfg.qty_range),
                material=cfg.material,
            )
        )

    return cuts

# cutlist_solver/io_json.py
# Load a cut-list job from JSON into Stock + Cut lists.
#
# Expected JSON shape:
# {
#   "stocks": [{"id": 1, "name": "4x8 Plywood", "length": 96, "width": 48, "quantity": 2, "material": "Plywood"}],
#   "cuts":   [{"id": 1, "label": "Side", "length": 30, "width": 12, "quantity": 2, "material": "Plywood"}],
#   "settings": {"kerf": "1/8"}
# }
# Short keys from the browser app's local storage (l, w, qty, mat) are accepted too.
# A stock may give "size": "96x48" or only a preset "name" ("4x8 Plywood") instead of length/width.

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import DEFAULTS, make_stock, parse_kerf_text, parse_size_text
from .types import Cut, Stock


@dataclass(frozen=True)
class JsonLoadResult:
    stocks: List[Stock]
    cuts: List[Cut]
    kerf: float


def _pick(d: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for k in keys:
        if k in d and d[k] is not None:
            return d[k]
    return default


def _number(d: Dict[str, Any], where: str, *keys: str, default: Any = None, cast=float):
    """Numeric field under the first present key; errors name the entry and the key."""
    key = next((k for k in keys if d.get(k) is not None), keys[0])
    value = d.get(key)
    if value is None:
        value = default
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{where}: invalid {key} {value!r}") from e
    if cast is int:
        if number != int(number):
            raise ValueError(f"{where}: {key} must be a whole number, got {value!r}")
        return int(number)
    return number


def _parse_kerf(value: Any) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    return parse_kerf_text(str(value))


def stock_from_dict(d: Dict[str, Any], index: int) -> Stock:
    """
    Stock entry; dimensions come from length/width, else "size" ("96x48"),
    else a preset name such as "4x8 Plywood".
    """
    where = f"Stock #{index + 1}"
    name = str(_pick(d, "name", default=f"Stock {index + 1}"))
    if _pick(d, "length", "l") is not None and _pick(d, "width", "w") is not None:
        length = _number(d, where, "length", "l")
        width = _number(d, where, "width", "w")
    else:
        try:
            if _pick(d, "size") is not None:
                length, width = parse_size_text(str(d["size"]))
            else:
                preset = make_stock(name)
                length, width = preset.length, preset.width
        except ValueError as e:
            raise ValueError(f"{where} missing length/width: {d}") from e
    return Stock(
        id=_number(d, where, "id", default=index + 1, cast=int),
        name=name,
        length=length,
        width=width,
        quantity=_number(d, where, "quantity", "qty", default=1, cast=int),
        material=str(_pick(d, "material", "mat", default="")),
    )


def cut_from_dict(d: Dict[str, Any], index: int) -> Cut:
    where = f"Cut #{index + 1}"
    if _pick(d, "length", "l") is None or _pick(d, "width", "w") is None:
        raise ValueError(f"{where} missing length/width: {d}")
    return Cut(
        id=_number(d, where, "id", default=index + 1, cast=int),
        label=str(_pick(d, "label", "name", default=f"Part {index + 1}")),
        length=_number(d, where, "length", "l"),
        width=_number(d, where, "width", "w"),
        quantity=_number(d, where, "quantity", "qty", default=1, cast=int),
        material=str(_pick(d, "material", "mat", default="")),
    )


def job_from_dict(data: Dict[str, Any], *, kerf: Optional[float] = None) -> JsonLoadResult:
    stocks_raw = data.get("stocks") or []
    cuts_raw = data.get("cuts") or []
    if not cuts_raw:
        raise ValueError("JSON missing 'cuts'.")

    settings = data.get("settings") or {}
    if kerf is None:
        kerf = _parse_kerf(settings.get("kerf", DEFAULTS.default_kerf))

    stocks = [stock_from_dict(d, i) for i, d in enumerate(stocks_raw)]
    cuts = [cut_from_dict(d, i) for i, d in enumerate(cuts_raw)]
    return JsonLoadResult(stocks=stocks, cuts=cuts, kerf=float(kerf))


def load_job_json(path: str | Path, *, kerf: Optional[float] = None) -> JsonLoadResult:
    """
    Load job definition from JSON.
    - "settings.kerf" may be a number or a fraction string like "1/8"
    - an explicit kerf argument overrides the file
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Job JSON must be an object, got {type(data).__name__}")
    return job_from_dict(data, kerf=kerf)

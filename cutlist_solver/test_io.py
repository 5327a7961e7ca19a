from __future__ import annotations

import json

import pytest

from cutlist_solver.config import make_stock, parse_kerf_text, parse_size_text
from cutlist_solver.io_csv import read_cuts_csv, read_stocks_csv
from cutlist_solver.io_json import job_from_dict, load_job_json
from cutlist_solver.solver_guillotine import optimize_cuts
from cutlist_solver.types import Cut, Stock
from cutlist_solver.utils import result_to_dict, save_result_json


def test_parse_kerf_text() -> None:
    assert parse_kerf_text("1/8") == 0.125
    assert parse_kerf_text('5/32"') == 0.15625
    assert parse_kerf_text("0.0625") == 0.0625
    assert parse_kerf_text("1 1/2") == 1.5
    with pytest.raises(ValueError):
        parse_kerf_text("abc")
    with pytest.raises(ValueError):
        parse_kerf_text("")


def test_parse_size_text_and_presets() -> None:
    assert parse_size_text("96x48") == (96.0, 48.0)
    assert parse_size_text("60 × 60") == (60.0, 60.0)

    s = make_stock("4x8 plywood", quantity=2, material="Plywood")
    assert (s.length, s.width, s.quantity) == (96.0, 48.0, 2)
    with pytest.raises(ValueError):
        make_stock("Mystery board")


def test_load_job_json(tmp_path) -> None:
    job = {
        "stocks": [{"name": "4x8", "l": 96, "w": 48, "qty": 2, "mat": "Plywood"}],
        "cuts": [
            {"id": 7, "label": "Side", "length": 30, "width": 12, "quantity": 2, "material": "Plywood"},
            {"l": 10, "w": 5},
        ],
        "settings": {"kerf": "1/16"},
    }
    path = tmp_path / "job.json"
    path.write_text(json.dumps(job), encoding="utf-8")

    loaded = load_job_json(path)
    assert loaded.kerf == 0.0625
    assert loaded.stocks == [Stock(id=1, name="4x8", length=96, width=48, quantity=2, material="Plywood")]
    assert loaded.cuts[0] == Cut(id=7, label="Side", length=30, width=12, quantity=2, material="Plywood")
    assert loaded.cuts[1] == Cut(id=2, label="Part 2", length=10, width=5)

    assert load_job_json(path, kerf=0.2).kerf == 0.2


def test_job_errors() -> None:
    with pytest.raises(ValueError, match="cuts"):
        job_from_dict({"stocks": []})
    with pytest.raises(ValueError, match="length/width"):
        job_from_dict({"cuts": [{"length": 10}]})
    assert job_from_dict({"cuts": [{"l": 1, "w": 1}]}).kerf == 0.125


def test_read_csv(tmp_path) -> None:
    stocks_csv = tmp_path / "stocks.csv"
    stocks_csv.write_text("name,length,width,qty,material\n4x8,96,48,3,Plywood\n,48,48,,\n", encoding="utf-8")
    cuts_csv = tmp_path / "cuts.csv"
    cuts_csv.write_text("label,length,width,qty\nShelf,34.5,11.25,5\n\nBack,72,35.25,1\n", encoding="utf-8")

    stocks = read_stocks_csv(stocks_csv)
    assert stocks[0] == Stock(id=1, name="4x8", length=96, width=48, quantity=3, material="Plywood")
    assert stocks[1] == Stock(id=2, name="Stock 2", length=48, width=48)

    cuts = read_cuts_csv(cuts_csv)
    assert [(c.id, c.label, c.quantity) for c in cuts] == [(1, "Shelf", 5), (2, "Back", 1)]


def test_read_csv_errors(tmp_path) -> None:
    no_header = tmp_path / "bad.csv"
    no_header.write_text("label,size\nShelf,34x11\n", encoding="utf-8")
    with pytest.raises(ValueError, match="columns"):
        read_cuts_csv(no_header)

    bad_number = tmp_path / "bad_number.csv"
    bad_number.write_text("label,length,width\nShelf,long,11\n", encoding="utf-8")
    with pytest.raises(ValueError, match=":2: invalid length"):
        read_cuts_csv(bad_number)


def test_result_json_export(tmp_path) -> None:
    stocks = [Stock(id=1, name="4x8", length=96, width=48)]
    cuts = [Cut(id=1, label="Panel", length=24, width=12, quantity=2), Cut(id=2, label="Long", length=100, width=2)]
    res = optimize_cuts(stocks, cuts, 0.125)

    out = tmp_path / "out" / "result.json"
    save_result_json(res, out)
    data = json.loads(out.read_text(encoding="utf-8"))

    assert data == json.loads(json.dumps(result_to_dict(res)))
    assert data["algorithm"] == "guillotine"
    assert data["stats"]["sheets"] == 1
    assert [c["label"] for c in data["unplaced"]] == ["Long"]
    placed = data["sheets"][0]["cuts"]
    assert len(placed) == 2
    assert set(placed[0]) >= {"x", "y", "pw", "ph", "rotated", "label"}


def test_bad_quantities_name_row_and_key(tmp_path) -> None:
    words = tmp_path / "words.csv"
    words.write_text("label,length,width,qty\nShelf,34.5,11.25,two\n", encoding="utf-8")
    with pytest.raises(ValueError, match=":2: invalid qty 'two'"):
        read_cuts_csv(words)

    halves = tmp_path / "halves.csv"
    halves.write_text("label,length,width,quantity\nShelf,34.5,11.25,2.5\n", encoding="utf-8")
    with pytest.raises(ValueError, match=":2: quantity must be a whole number"):
        read_cuts_csv(halves)

    with pytest.raises(ValueError, match="Cut #2: invalid qty 'many'"):
        job_from_dict({"cuts": [{"l": 1, "w": 1}, {"l": 1, "w": 1, "qty": "many"}]})
    with pytest.raises(ValueError, match="Stock #1: invalid id 'x'"):
        job_from_dict({"stocks": [{"id": "x", "l": 96, "w": 48}], "cuts": [{"l": 1, "w": 1}]})
    with pytest.raises(ValueError, match="Cut #1: invalid width 'wide'"):
        job_from_dict({"cuts": [{"l": 1, "w": "wide"}]})


def test_csv_accepts_quantity_column(tmp_path) -> None:
    cuts_csv = tmp_path / "cuts.csv"
    cuts_csv.write_text("label,length,width,quantity\nShelf,34.5,11.25,3\n", encoding="utf-8")
    assert [c.quantity for c in read_cuts_csv(cuts_csv)] == [3]


def test_stock_size_and_preset_names(tmp_path) -> None:
    loaded = job_from_dict(
        {
            "stocks": [{"name": "4x8 Plywood", "qty": 2}, {"name": "Offcut", "size": "30x20"}],
            "cuts": [{"l": 1, "w": 1}],
        }
    )
    assert [(s.name, s.length, s.width, s.quantity) for s in loaded.stocks] == [
        ("4x8 Plywood", 96, 48, 2),
        ("Offcut", 30, 20, 1),
    ]
    with pytest.raises(ValueError, match="missing length/width"):
        job_from_dict({"stocks": [{"name": "Mystery board"}], "cuts": [{"l": 1, "w": 1}]})

    stocks_csv = tmp_path / "stocks.csv"
    stocks_csv.write_text("name,size,qty\n4x4 Plywood,,1\nOffcut,30x20,2\n", encoding="utf-8")
    stocks = read_stocks_csv(stocks_csv)
    assert [(s.name, s.length, s.width, s.quantity) for s in stocks] == [
        ("4x4 Plywood", 48, 48, 1),
        ("Offcut", 30, 20, 2),
    ]

    unknown = tmp_path / "unknown.csv"
    unknown.write_text("name,qty\nMystery board,1\n", encoding="utf-8")
    with pytest.raises(ValueError, match=":2: Unknown stock preset"):
        read_stocks_csv(unknown)

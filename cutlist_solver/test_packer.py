from __future__ import annotations

from cutlist_solver.packer import pack_sheet
from cutlist_solver.types import Cut, Stock, check_no_overlap, expand_cuts


SHEET_4X8 = Stock(id=1, name="4x8", length=96, width=48)


def test_packs_small_cuts_onto_one_sheet() -> None:
    cuts = expand_cuts([Cut(id=1, label="Panel", length=24, width=12, quantity=4)])
    before = list(cuts)

    res = pack_sheet(SHEET_4X8, cuts, 0.125)

    assert len(res.placed) == 4
    assert res.unplaced == []
    assert cuts == before
    check_no_overlap(res.sheet.cuts)
    for pc in res.sheet.cuts:
        assert pc.right() <= 48 and pc.top() <= 96
    assert res.used_area() == 4 * 24 * 12


def test_incompatible_material_is_left_unplaced() -> None:
    ply = Stock(id=1, name="Ply", length=96, width=48, material="Plywood")
    cuts = [
        Cut(id=1, label="a", length=10, width=10, material="MDF"),
        Cut(id=2, label="b", length=10, width=10, material="Plywood"),
    ]
    res = pack_sheet(ply, cuts, 0.125)
    assert [c.id for c in res.placed] == [2]
    assert [c.id for c in res.unplaced] == [1]


def test_force_first_rotation() -> None:
    c = Cut(id=1, label="Panel", length=24, width=12)

    natural = pack_sheet(SHEET_4X8, [c], 0.125)
    assert natural.sheet.cuts[0].rotated is True

    forced = pack_sheet(SHEET_4X8, [c], 0.125, False)
    pc = forced.sheet.cuts[0]
    assert pc.rotated is False
    assert (pc.pw, pc.ph) == (12, 24)


def test_forced_rotation_ignored_when_it_does_not_fit() -> None:
    c = Cut(id=1, label="Tall", length=50, width=40)
    res = pack_sheet(SHEET_4X8, [c], 0.125, True)
    pc = res.sheet.cuts[0]
    assert pc.rotated is False
    assert (pc.pw, pc.ph) == (40, 50)


def test_free_rects_sorted_top_left_first() -> None:
    c = Cut(id=1, label="Panel", length=24, width=12)
    res = pack_sheet(SHEET_4X8, [c], 0.125)
    keys = [(r.y, r.x) for r in res.sheet.rects]
    assert keys == sorted(keys)
    assert res.sheet.rects


def test_oversized_cut_is_unplaced() -> None:
    cuts = [Cut(id=1, label="Huge", length=100, width=60)]
    res = pack_sheet(SHEET_4X8, cuts, 0.125)
    assert res.placed == []
    assert res.unplaced == cuts
    assert res.sheet.cuts == []

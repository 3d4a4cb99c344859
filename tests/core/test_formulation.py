import numpy as np
import pytest

from core.catalog import Role, get_compound
from core.formulation import Formulation, LineEntry, TABLE_COLUMNS, entries_frame, parse_grams


@pytest.mark.parametrize("raw, expected", [
    ("10", 10.0),
    (" 10.913 ", 10.913),
    ("1e-3", 0.001),
    (5, 5.0),
    (2.5, 2.5),
    (np.float64(3.0), 3.0),
])
def test_parse_grams_accepts_positive_numbers(raw, expected):
    assert parse_grams(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", [
    None, "", "   ", "abc", "12abc", "0", "-1", 0, -2.5,
    "nan", "inf", float("inf"), True, False, [1.0], "1_000",
])
def test_parse_grams_rejects_everything_else(raw):
    assert parse_grams(raw) is None


def test_add_routes_by_role(precursor_100, coupler_100):
    f = Formulation().add(precursor_100, 10).add(coupler_100, 20).add(precursor_100, 5)

    assert [e.grams for e in f.precursor_entries] == [10.0, 5.0]
    assert [e.grams for e in f.coupler_entries] == [20.0]
    assert f.entries(Role.COUPLER) == f.coupler_entries
    assert f.entries("Primary") == f.precursor_entries


def test_operations_return_new_formulation(precursor_100):
    empty = Formulation()
    one = empty.add(precursor_100, 10)

    assert empty.is_empty
    assert not one.is_empty
    assert empty.precursor_entries == ()


def test_add_raw_ignores_bad_input(precursor_100):
    f = Formulation()

    assert f.add_raw(precursor_100, "abc") is f
    assert f.add_raw(precursor_100, "") is f
    assert f.add_raw(precursor_100, "-3") is f
    assert f.add_raw(None, "10") is f

    added = f.add_raw(precursor_100, "12.5")
    assert added.precursor_entries == (LineEntry(precursor_100, 12.5),)


@pytest.mark.parametrize("grams", [0, -5, float("nan"), float("inf"), None])
def test_add_ignores_invalid_grams(precursor_100, coupler_100, grams):
    f = Formulation().add(precursor_100, grams)
    assert f.precursor_entries == ()

    result = f.add(coupler_100, 10).result()
    assert result.precursor_moles == 0.0
    assert result.chart_series[0] == {"name": "Precursor", "moles": 0.0}


def test_add_raw_with_unknown_catalog_name():
    f = Formulation()
    assert f.add_raw(get_compound("Not A Dye"), "10") is f


def test_update_grams_in_place(precursor_100, coupler_100):
    f = Formulation().add(precursor_100, 10).add(precursor_100, 20).add(coupler_100, 30)

    updated = f.update_grams(Role.PRECURSOR, 1, "25")

    assert [e.grams for e in updated.precursor_entries] == [10.0, 25.0]
    assert updated.coupler_entries == f.coupler_entries
    assert [e.grams for e in f.precursor_entries] == [10.0, 20.0]


def test_update_grams_ignores_bad_input_and_index(precursor_100):
    f = Formulation().add(precursor_100, 10)

    assert f.update_grams(Role.PRECURSOR, 0, "oops") is f
    assert f.update_grams(Role.PRECURSOR, 0, "0") is f
    assert f.update_grams(Role.PRECURSOR, 3, "5") is f
    assert f.update_grams(Role.PRECURSOR, -1, "5") is f
    assert f.update_grams(Role.COUPLER, 0, "5") is f


def test_remove_by_position(precursor_100, coupler_100):
    f = Formulation().add(precursor_100, 1).add(precursor_100, 2).add(precursor_100, 3).add(coupler_100, 4)

    removed = f.remove(Role.PRECURSOR, 1)

    assert [e.grams for e in removed.precursor_entries] == [1.0, 3.0]
    assert removed.coupler_entries == f.coupler_entries
    assert f.remove(Role.COUPLER, 5) is f
    assert f.remove(Role.COUPLER, -1) is f


def test_result_uses_both_groups():
    p = get_compound("p-Aminophenol")
    c = get_compound("Resorcinol")
    f = Formulation().add(p, 109.13).add(c, 110.11)

    result = f.result()

    assert result.ratio == pytest.approx(1.0)
    assert result.shade_label == "Mole match: Ideal for reaction"


def test_line_entry_moles(precursor_100):
    assert LineEntry(precursor_100, 25.0).moles == pytest.approx(0.25)


def test_entries_frame(precursor_100):
    entries = (LineEntry(precursor_100, 10.0), LineEntry(precursor_100, 1.0 / 3.0))

    frame = entries_frame(entries)

    assert list(frame.columns) == TABLE_COLUMNS
    assert frame["Name"].tolist() == ["Test Precursor", "Test Precursor"]
    assert frame["Moles"].tolist() == [0.1, 0.0033]


def test_entries_frame_empty():
    frame = entries_frame([])
    assert frame.empty
    assert list(frame.columns) == TABLE_COLUMNS

"""Mini README: Tests covering the fleet ledger lookups, removal and totals.

Structure:
    * name matching is case-insensitive for lookups and removals.
    * duplicate names: lookup returns the first, removal drops them all.
    * totals and the report reflect the current members.
"""

from __future__ import annotations

import pytest

from fleetledger.fleet import Boat, BoatType, ExpenseExceedsLimit, Fleet


def make_boat(name: str, price: float = 1000.0, boat_type: BoatType = BoatType.POWER) -> Boat:
    return Boat(
        boat_type=boat_type,
        name=name,
        year=2015,
        make_model="Bayliner",
        length_feet=22,
        purchase_price=price,
    )


def test_remove_by_name_is_case_insensitive() -> None:
    fleet = Fleet([make_boat("Andrea")])

    assert fleet.remove_by_name("andrea") is True
    assert len(fleet) == 0
    assert fleet.remove_by_name("andrea") is False


def test_find_by_name_returns_first_match_and_remove_drops_all() -> None:
    """Duplicates resolve to the earliest boat; removal clears every duplicate."""

    first = make_boat("Twin", price=100.0)
    second = make_boat("TWIN", price=200.0)
    other = make_boat("Solo")
    fleet = Fleet([first, other, second])

    assert fleet.find_by_name("twin") is first
    assert fleet.find_by_name("missing") is None

    assert fleet.remove_by_name("Twin") is True
    assert fleet.list_boats() == [other]


def test_totals_track_members_through_changes() -> None:
    fleet = Fleet()
    assert fleet.total_spent() == 0.0
    assert fleet.total_purchase_cost() == 0.0

    fleet.add(make_boat("Alpha", price=1000.0))
    fleet.add(make_boat("Bravo", price=2500.0))
    fleet.post_expense("alpha", 250.0)
    fleet.post_expense("Bravo", 1000.0)
    fleet.add(make_boat("Charlie", price=400.0))
    fleet.remove_by_name("alpha")

    assert fleet.total_spent() == pytest.approx(sum(boat.spent for boat in fleet))
    assert fleet.total_spent() == pytest.approx(1000.0)
    assert fleet.total_purchase_cost() == pytest.approx(2900.0)


def test_post_expense_reports_missing_boat_and_propagates_limit() -> None:
    fleet = Fleet([make_boat("Alpha", price=100.0)])

    assert fleet.post_expense("nobody", 10.0) is None
    with pytest.raises(ExpenseExceedsLimit):
        fleet.post_expense("Alpha", 100.5)
    assert fleet.find_by_name("Alpha").spent == 0.0


def test_empty_report_has_header_and_zero_totals() -> None:
    assert Fleet().report() == (
        "Fleet Report:\n"
        " Total Fleet: Paid $      0.00 : Spent $      0.00\n"
    )


def test_report_lists_boats_in_insertion_order() -> None:
    fleet = Fleet([make_boat("Zulu", price=10.0), make_boat("Alpha", price=20.0)])
    fleet.post_expense("Alpha", 5.0)

    lines = fleet.report().splitlines()
    assert lines[0] == "Fleet Report:"
    assert lines[1] == " " + fleet.find_by_name("Zulu").describe()
    assert lines[2] == " " + fleet.find_by_name("Alpha").describe()
    assert lines[3] == " Total Fleet: Paid $     30.00 : Spent $      5.00"


def test_name_matching_lowercases_without_folding() -> None:
    fleet = Fleet([make_boat("Straße")])

    assert fleet.find_by_name("STRASSE") is None
    assert fleet.find_by_name("straße") is not None

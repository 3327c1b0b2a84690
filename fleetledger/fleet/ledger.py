"""Mini README: Ordered fleet ledger with aggregate reporting.

Structure:
    * Fleet - keeps boats in insertion order and answers lookups and totals.

Names are not unique. ``find_by_name`` resolves to the first boat in
insertion order while ``remove_by_name`` drops every boat with that name.
Totals are recomputed from the members on each call.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from ..logging_utils import get_logger
from .boat import Boat

LOGGER = get_logger(__name__)


class Fleet:
    """Manage an ordered collection of boats."""

    def __init__(self, boats: Optional[Iterable[Boat]] = None) -> None:
        self._boats: List[Boat] = list(boats) if boats else []
        LOGGER.debug("Fleet initialised with %s boats", len(self._boats))

    def __len__(self) -> int:
        return len(self._boats)

    def __iter__(self) -> Iterator[Boat]:
        return iter(self._boats)

    def list_boats(self) -> List[Boat]:
        """Return the boats in insertion order."""

        return list(self._boats)

    def add(self, boat: Boat) -> None:
        """Append a boat; duplicates are allowed."""

        self._boats.append(boat)
        LOGGER.info("Added boat %s", boat.name)

    def extend(self, boats: Iterable[Boat]) -> None:
        """Append several boats, keeping their order."""

        for boat in boats:
            self.add(boat)

    def remove_by_name(self, name: str) -> bool:
        """Remove every boat called ``name``; return whether any was removed."""

        remaining = [boat for boat in self._boats if not boat.matches(name)]
        removed = len(self._boats) - len(remaining)
        self._boats = remaining
        if removed:
            LOGGER.info("Removed %s boat(s) named %s", removed, name)
        return removed > 0

    def find_by_name(self, name: str) -> Optional[Boat]:
        """Return the first boat called ``name`` or ``None``."""

        for boat in self._boats:
            if boat.matches(name):
                return boat
        return None

    def post_expense(self, name: str, amount: float) -> Optional[Boat]:
        """Post an expense to the first boat called ``name``.

        Returns the boat that was charged, or ``None`` when no boat matches.
        ``ExpenseExceedsLimit`` from the boat propagates unchanged.
        """

        boat = self.find_by_name(name)
        if boat is None:
            return None
        boat.post_expense(amount)
        return boat

    def total_spent(self) -> float:
        """Sum of what has been spent across the fleet."""

        return sum((boat.spent for boat in self._boats), 0.0)

    def total_purchase_cost(self) -> float:
        """Sum of purchase prices across the fleet."""

        return sum((boat.purchase_price for boat in self._boats), 0.0)

    def report(self) -> str:
        """Render the fleet report with a line per boat and a totals line."""

        lines = ["Fleet Report:"]
        lines.extend(f" {boat.describe()}" for boat in self._boats)
        lines.append(
            f" Total Fleet: Paid ${self.total_purchase_cost():10.2f} : "
            f"Spent ${self.total_spent():10.2f}"
        )
        return "\n".join(lines) + "\n"

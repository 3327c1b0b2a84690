"""Mini README: Boat records with a spend limit tied to purchase price.

Structure:
    * BoatType - enum of the supported boat categories.
    * ExpenseExceedsLimit - raised when an expense would overrun the budget.
    * Boat - dataclass holding identity, dimensions and spending state.

Each boat may accumulate expenses up to, and including, its purchase price.
``Boat.post_expense`` is the only way to change ``spent``; it either records
the amount and returns the new total or raises ``ExpenseExceedsLimit`` with
the state left untouched, so callers need no separate affordability check.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class BoatType(str, Enum):
    """Enumerate the supported boat categories."""

    SAILING = "SAILING"
    POWER = "POWER"

    @classmethod
    def from_str(cls, value: str) -> "BoatType":
        """Coerce arbitrary casing into a valid boat type."""

        try:
            normalised = value.strip().upper()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported boat type: {value}") from error


class ExpenseExceedsLimit(ValueError):
    """An expense would push a boat's spending past its purchase price."""

    def __init__(self, boat_name: str, amount: float, remaining: float) -> None:
        super().__init__(
            f"Expense of ${amount:.2f} for {boat_name} exceeds the remaining ${remaining:.2f}"
        )
        self.boat_name = boat_name
        self.amount = amount
        self.remaining = remaining


@dataclass(slots=True)
class Boat:
    """A single boat and its spending envelope."""

    boat_type: BoatType
    name: str
    year: int
    make_model: str
    length_feet: int
    purchase_price: float
    spent: float = 0.0

    @property
    def remaining_budget(self) -> float:
        """Amount that may still be spent on this boat."""

        return self.purchase_price - self.spent

    def matches(self, name: str) -> bool:
        """Return ``True`` when ``name`` equals this boat's name ignoring case.

        Compares lower-cased names character for character, so ``"ß"`` does
        not match ``"ss"``.
        """

        return self.name.lower() == name.lower()

    def can_afford(self, amount: float) -> bool:
        """Return whether ``amount`` fits within the remaining budget."""

        return amount >= 0 and self.spent + amount <= self.purchase_price

    def post_expense(self, amount: float) -> float:
        """Record an expense and return the new spent total."""

        if amount < 0:
            raise ValueError("Expense amounts must not be negative.")
        if not self.can_afford(amount):
            LOGGER.info("Declined expense of %.2f for boat %s", amount, self.name)
            raise ExpenseExceedsLimit(self.name, amount, self.remaining_budget)
        self.spent += amount
        LOGGER.debug("Recorded expense of %.2f for boat %s (spent=%.2f)", amount, self.name, self.spent)
        return self.spent

    def describe(self) -> str:
        """Return the fixed-width line used in fleet reports."""

        return (
            f"{self.boat_type.value:<8} {self.name:<20} {self.year:>4d} "
            f"{self.make_model:<12} {self.length_feet:>4d}' : "
            f"Paid ${self.purchase_price:10.2f} : Spent ${self.spent:10.2f}"
        )

    def as_dict(self) -> Dict[str, object]:
        """Export the boat with serialisable values."""

        return {
            "boat_type": self.boat_type.value,
            "name": self.name,
            "year": self.year,
            "make_model": self.make_model,
            "length_feet": self.length_feet,
            "purchase_price": self.purchase_price,
            "spent": self.spent,
        }

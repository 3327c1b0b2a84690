"""Mini README: Fleet domain model.

This package holds the boat record with its spend limit and the ordered
fleet ledger that aggregates boats for lookups, totals and the printed
report. Both classes are plain in-memory objects; loading and saving live
in ``fleetledger.storage``.
"""

from .boat import Boat, BoatType, ExpenseExceedsLimit
from .ledger import Fleet

__all__ = ["Boat", "BoatType", "ExpenseExceedsLimit", "Fleet"]

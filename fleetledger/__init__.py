"""Mini README: Core package initializer for the fleet ledger.

This module exposes convenience imports so the entry point and tests can
reach the fleet model and the logging helper without knowing the exact
module structure. Persistence and the menu are imported from their own
modules to keep this file lightweight.
"""

from .fleet import Boat, BoatType, ExpenseExceedsLimit, Fleet
from .logging_utils import get_logger

__all__ = ["Boat", "BoatType", "ExpenseExceedsLimit", "Fleet", "get_logger"]

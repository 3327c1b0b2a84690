"""Mini README: Interactive text menu driving the fleet ledger.

Structure:
    * MENU_PROMPT - the single-line option prompt.
    * FleetMenu - reads options, calls fleet operations, prints outcomes.

The menu owns no state beyond references to the fleet and the snapshot
store it was given. Prompting and printing go through ``typer.prompt`` and
``typer.echo`` by default; tests pass scripted callables instead. Every
domain error is turned into a message and the loop continues, only
``X`` (or end of input) stops it after saving the snapshot.
"""

from __future__ import annotations

from typing import Callable, Optional

import typer

from .fleet import ExpenseExceedsLimit, Fleet
from .importer import MalformedImportLine, parse_boat_line
from .logging_utils import get_logger
from .storage import SnapshotStore

LOGGER = get_logger(__name__)

MENU_PROMPT = "(P)rint, (A)dd, (R)emove, (E)xpense, e(X)it"

PromptFn = Callable[[str], str]
EchoFn = Callable[[str], None]


def _typer_prompt(text: str) -> str:
    return typer.prompt(text, default="", show_default=False, prompt_suffix=" : ")


class FleetMenu:
    """Dispatch menu options onto a fleet."""

    def __init__(
        self,
        fleet: Fleet,
        store: SnapshotStore,
        *,
        prompt: Optional[PromptFn] = None,
        echo: Optional[EchoFn] = None,
    ) -> None:
        self.fleet = fleet
        self.store = store
        self._prompt = prompt or _typer_prompt
        self._echo = echo or typer.echo
        self._handlers = {
            "P": self.print_report,
            "A": self.add_boat,
            "R": self.remove_boat,
            "E": self.record_expense,
        }

    def run(self) -> None:
        """Loop over menu options until the user exits."""

        self._echo("Welcome to the Fleet Management System")
        self._echo("--------------------------------------")
        while True:
            try:
                option = self._prompt(MENU_PROMPT).strip().upper()
                if option == "X":
                    break
                self.handle(option)
            except (typer.Abort, EOFError):
                LOGGER.info("Input closed; exiting menu")
                break
        self.exit()

    def handle(self, option: str) -> None:
        """Run the handler for one menu option, or report an unknown option."""

        handler = self._handlers.get(option.strip().upper())
        if handler is None:
            self._echo("Invalid menu option, try again")
            return
        handler()

    def print_report(self) -> None:
        """Print the fleet report."""

        self._echo("")
        self._echo(self.fleet.report())

    def add_boat(self) -> None:
        """Read one import line and add the boat it describes."""

        line = self._prompt("Please enter the new boat CSV data")
        try:
            self.fleet.add(parse_boat_line(line))
        except MalformedImportLine as error:
            LOGGER.info("Rejected boat data: %s", error)
            self._echo("Invalid boat data. Please try again.")
        self._echo("")

    def remove_boat(self) -> None:
        """Remove every boat with the name entered."""

        name = self._prompt("Which boat do you want to remove?")
        if not self.fleet.remove_by_name(name):
            self._echo(f"Cannot find boat {name}")
        self._echo("")

    def record_expense(self) -> None:
        """Ask for a boat and an amount, then post the expense."""

        name = self._prompt("Which boat do you want to spend on?")
        boat = self.fleet.find_by_name(name)
        if boat is None:
            self._echo(f"Cannot find boat {name}")
            self._echo("")
            return
        raw_amount = self._prompt("How much do you want to spend?")
        try:
            amount = float(raw_amount)
            spent = boat.post_expense(amount)
        except ExpenseExceedsLimit as error:
            self._echo(f"Expense not permitted, only ${error.remaining:.2f} left to spend.")
        except ValueError:
            self._echo("Invalid amount. Please try again.")
        else:
            self._echo(f"Expense authorized, ${spent:.2f} spent.")
        self._echo("")

    def exit(self) -> None:
        """Save the snapshot and say goodbye."""

        if not self.store.save(self.fleet):
            self._echo("Error saving database file.")
        self._echo("")
        self._echo("Exiting the Fleet Management System")

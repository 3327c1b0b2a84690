"""Mini README: Entry point CLI for the fleet management menu.

This script exposes a Typer CLI that loads the fleet (from an optional CSV
import file, otherwise from the saved snapshot), then hands it to the
interactive menu. Settings come from ``FLEET_*`` environment variables and
can be overridden on the command line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from fleetledger.configuration import get_settings
from fleetledger.fleet import Fleet
from fleetledger.logging_utils import configure_root_logger, get_logger
from fleetledger.menu import FleetMenu
from fleetledger.storage import SnapshotStore, load_fleet

LOGGER = get_logger(__name__)

cli = typer.Typer(help="Track boats and their spending from an interactive menu.")


@cli.command()
def run(
    csv_path: Optional[Path] = typer.Argument(
        None, help="CSV file of boats to import instead of loading the snapshot."
    ),
    snapshot: Optional[Path] = typer.Option(None, help="Snapshot file to load and save."),
    log_level: Optional[str] = typer.Option(None, help="Logging level, e.g. INFO or DEBUG."),
) -> None:
    """Load the fleet and start the menu."""

    settings = get_settings()
    configure_root_logger(log_level or settings.log_level)
    store = SnapshotStore(snapshot or settings.snapshot_path)
    LOGGER.info("Starting in %s environment with snapshot %s", settings.environment, store.path)

    fleet = Fleet()
    outcome = load_fleet(fleet, store, csv_path)
    if outcome.problem:
        typer.echo(outcome.problem)
    elif outcome.source == "csv" and not outcome.saved:
        typer.echo("Error saving database file.")

    FleetMenu(fleet, store).run()


if __name__ == "__main__":
    cli()

"""Mini README: Snapshot persistence and start-up loading for the fleet.

Structure:
    * BoatRecord / FleetSnapshot - versioned Pydantic schema of the JSON file.
    * SnapshotUnavailable - the snapshot is missing or cannot be trusted.
    * SnapshotStore - reads and writes the whole fleet as one JSON document.
    * LoadOutcome / load_fleet - populate a fleet from an import file or the snapshot.

The snapshot is a flat, ordered list of boats including what has been spent
on each. Reading is strict (unknown versions and boats that overran their
budget or carry non-finite money are refused) while ``load_fleet`` and ``SnapshotStore.save``
never raise for file problems: loading falls back to an empty fleet and a
failed save leaves the in-memory fleet as the only copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from .fleet import Boat, BoatType, Fleet
from .importer import MalformedImportLine, import_csv
from .logging_utils import get_logger

LOGGER = get_logger(__name__)

SCHEMA_VERSION = 1


class BoatRecord(BaseModel):
    """Stored form of a single boat."""

    model_config = ConfigDict(allow_inf_nan=False)

    boat_type: BoatType
    name: str
    year: int
    make_model: str
    length_feet: int
    purchase_price: float
    spent: float = 0.0

    @model_validator(mode="after")
    def _check_spent(self) -> "BoatRecord":
        if self.spent < 0:
            raise ValueError(f"Boat {self.name} has negative spending recorded")
        # A boat priced below zero can never take an expense, so it stays at 0.0.
        if self.spent > max(self.purchase_price, 0.0):
            raise ValueError(f"Boat {self.name} has spent more than its purchase price")
        return self

    @classmethod
    def from_boat(cls, boat: Boat) -> "BoatRecord":
        """Capture a boat, including what has been spent on it."""

        return cls(**boat.as_dict())

    def to_boat(self) -> Boat:
        """Rebuild the in-memory boat this record was taken from."""

        return Boat(
            boat_type=self.boat_type,
            name=self.name,
            year=self.year,
            make_model=self.make_model,
            length_feet=self.length_feet,
            purchase_price=self.purchase_price,
            spent=self.spent,
        )


class FleetSnapshot(BaseModel):
    """Whole-fleet document written to disk."""

    schema_version: Literal[1] = SCHEMA_VERSION
    boats: List[BoatRecord] = []

    @classmethod
    def from_fleet(cls, fleet: Fleet) -> "FleetSnapshot":
        return cls(boats=[BoatRecord.from_boat(boat) for boat in fleet])

    def to_fleet(self) -> Fleet:
        return Fleet(record.to_boat() for record in self.boats)


class SnapshotUnavailable(RuntimeError):
    """The snapshot file is absent, unreadable or invalid."""


class SnapshotStore:
    """Persist the fleet to a JSON snapshot file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def read(self) -> Fleet:
        """Return the stored fleet, raising ``SnapshotUnavailable`` on any problem."""

        try:
            payload = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as error:
            raise SnapshotUnavailable(f"Cannot read snapshot {self.path}: {error}") from error
        try:
            snapshot = FleetSnapshot.model_validate_json(payload)
        except ValidationError as error:
            raise SnapshotUnavailable(f"Snapshot {self.path} is invalid: {error}") from error
        return snapshot.to_fleet()

    def save(self, fleet: Fleet) -> bool:
        """Overwrite the snapshot with ``fleet``; return whether it was written.

        The document is written to a sibling temporary file first and then
        moved over the snapshot, so a failed write leaves the previous
        snapshot intact.
        """

        try:
            document = FleetSnapshot.from_fleet(fleet).model_dump_json(indent=2)
        except ValidationError as error:
            LOGGER.error("Fleet cannot be stored in %s: %s", self.path, error)
            return False
        temporary = self.path.with_name(f"{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temporary.write_text(document + "\n", encoding="utf-8")
            temporary.replace(self.path)
        except OSError as error:
            LOGGER.error("Error saving snapshot %s: %s", self.path, error)
            try:
                temporary.unlink(missing_ok=True)
            except OSError:
                LOGGER.debug("Could not remove temporary snapshot %s", temporary)
            return False
        LOGGER.info("Saved %s boats to %s", len(fleet), self.path)
        return True


@dataclass(slots=True)
class LoadOutcome:
    """What happened while populating the fleet at start-up."""

    source: Literal["csv", "snapshot"]
    loaded: int
    saved: bool = False
    problem: Optional[str] = None


def load_fleet(
    fleet: Fleet, store: SnapshotStore, csv_path: Optional[Union[str, Path]] = None
) -> LoadOutcome:
    """Populate ``fleet`` from ``csv_path`` when given, else from ``store``.

    A complete CSV import is saved straight away so the next run can start
    from the snapshot. A failed import keeps the boats read before the
    failure and skips the save.
    """

    if csv_path is None:
        try:
            restored = store.read()
        except SnapshotUnavailable as error:
            LOGGER.warning("%s; starting with an empty fleet", error)
            return LoadOutcome(
                source="snapshot",
                loaded=0,
                problem="No existing database found. Starting with an empty fleet.",
            )
        fleet.extend(restored)
        LOGGER.info("Loaded %s boats from %s", len(restored), store.path)
        return LoadOutcome(source="snapshot", loaded=len(restored))

    before = len(fleet)
    try:
        import_csv(fleet, csv_path)
    except (OSError, UnicodeDecodeError) as error:
        LOGGER.warning("Error reading CSV file %s: %s", csv_path, error)
        return LoadOutcome(
            source="csv",
            loaded=len(fleet) - before,
            problem=f"Error reading CSV file {csv_path}.",
        )
    except MalformedImportLine as error:
        LOGGER.warning("Stopped importing %s at %s", csv_path, error)
        return LoadOutcome(
            source="csv",
            loaded=len(fleet) - before,
            problem=f"Invalid boat data in {csv_path}, {error}.",
        )
    return LoadOutcome(source="csv", loaded=len(fleet) - before, saved=store.save(fleet))

"""Mini README: Import boats from comma separated lines.

Structure:
    * MalformedImportLine - raised for lines that cannot become a boat.
    * parse_boat_line - turn ``CATEGORY,NAME,YEAR,MAKEMODEL,LENGTH,PRICE`` into a Boat.
    * import_lines - add parsed boats to a fleet, stopping at the first bad line.
    * import_csv - read a file of such lines into a fleet.

The format has no quoting or escaping: a line is split on every comma and
must yield exactly six fields. Values are not range checked, so negative
prices or lengths are accepted as given; only infinite or NaN prices are
refused because they cannot be stored in the snapshot. Boats added before a
malformed line stay in the fleet.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable, Optional, Union

from .fleet import Boat, BoatType, Fleet
from .logging_utils import get_logger

LOGGER = get_logger(__name__)

FIELD_COUNT = 6


class MalformedImportLine(ValueError):
    """An import line could not be parsed into a boat."""

    def __init__(self, line: str, reason: str, line_number: Optional[int] = None) -> None:
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{location}{reason} ({line!r})")
        self.line = line
        self.reason = reason
        self.line_number = line_number


def parse_boat_line(line: str, line_number: Optional[int] = None) -> Boat:
    """Parse one import line into a new boat with nothing spent."""

    fields = [field.strip() for field in line.rstrip("\r\n").split(",")]
    if len(fields) != FIELD_COUNT:
        raise MalformedImportLine(
            line, f"expected {FIELD_COUNT} fields, found {len(fields)}", line_number
        )
    category, name, year, make_model, length, price = fields
    try:
        boat_type = BoatType.from_str(category)
    except ValueError as error:
        raise MalformedImportLine(line, str(error), line_number) from error
    try:
        year_value = int(year)
        length_value = int(length)
        price_value = float(price)
    except ValueError as error:
        raise MalformedImportLine(line, f"invalid number: {error}", line_number) from error
    if not math.isfinite(price_value):
        raise MalformedImportLine(line, f"price must be a finite number: {price}", line_number)
    return Boat(
        boat_type=boat_type,
        name=name,
        year=year_value,
        make_model=make_model,
        length_feet=length_value,
        purchase_price=price_value,
    )


def import_lines(fleet: Fleet, lines: Iterable[str]) -> int:
    """Add a boat per non-blank line and return how many were added."""

    added = 0
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        fleet.add(parse_boat_line(line, line_number))
        added += 1
    LOGGER.info("Imported %s boats", added)
    return added


def import_csv(fleet: Fleet, path: Union[str, Path]) -> int:
    """Import every line of ``path`` into ``fleet``."""

    path = Path(path)
    LOGGER.info("Importing boats from %s", path)
    with path.open(encoding="utf-8-sig") as csv_file:
        return import_lines(fleet, csv_file)

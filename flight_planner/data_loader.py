"""Data loader module for reading delimited files and parsing rows."""

import logging
import pandas as pd
from typing import List, Optional
from pathlib import Path

from .models.airport import Airport
from .models.aeroplane import AeroplaneModel
from .models.flight import FlightRequest
from .config import SEAT_CATEGORIES, DEFAULT_CURRENCY_SYMBOL
from .utils import parse_count, parse_amount

logger = logging.getLogger(__name__)


class LoadFailure(Exception):
    """Raised when a required source file cannot be read."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Could not load {source}: {reason}")
        self.source = source
        self.reason = reason


def _row_width(path: Path, delimiter: str) -> int:
    """Widest data row (header excluded), counted by splitting on the delimiter."""
    with open(path, encoding="utf-8") as f:
        lines = f.read().splitlines()[1:]
    return max((len(line.split(delimiter)) for line in lines if line.strip()), default=0)


def load_rows(csv_path: str, delimiter: str = ",") -> List[List[str]]:
    """
    Read a delimited text file into raw string rows, skipping the header row.

    Blank lines are skipped and every field is stripped. Rows shorter than
    the widest row are padded with empty strings. No type coercion is done
    here.

    Args:
        csv_path: Path to the file
        delimiter: Field separator

    Returns:
        List of rows, each a list of string fields

    Raises:
        LoadFailure: If the file is missing or cannot be read or parsed
    """
    path = Path(csv_path)
    try:
        width = _row_width(path, delimiter)
        if width == 0:
            logger.info(f"No data rows in {csv_path}")
            return []
        # Fixed column names so ragged rows pad instead of failing
        df = pd.read_csv(
            path,
            sep=delimiter,
            header=None,
            skiprows=1,
            names=list(range(width)),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8",
            engine="python",
        )
    except pd.errors.EmptyDataError:
        logger.info(f"No data rows in {csv_path}")
        return []
    except FileNotFoundError:
        logger.error(f"File not found: {csv_path}")
        raise LoadFailure(str(csv_path), "file not found")
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as e:
        logger.error(f"Error reading {csv_path}: {e}")
        raise LoadFailure(str(csv_path), str(e))

    rows = []
    for values in df.fillna("").values.tolist():
        row = [str(value).strip() for value in values]
        if any(row):
            rows.append(row)

    logger.info(f"Loaded {len(rows)} rows from {csv_path}")
    return rows


def _field(row: List[str], index: int) -> str:
    """Return a field by position, or an empty string if the row is short."""
    if index < len(row):
        return row[index]
    return ""


def _warn_malformed(kind: str, key: str, column: str, value: str) -> None:
    logger.warning(f"Malformed {column} for {kind} {key!r}: {value!r}")


def parse_airport_row(row: List[str], currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> Airport:
    """
    Build an Airport from a raw row.

    Columns: code, name, distance from hub 1, distance from hub 2.
    Malformed distances are kept as None.
    """
    code = _field(row, 0)
    distances = []
    for index, column in ((2, "distance_from_hub1"), (3, "distance_from_hub2")):
        raw = _field(row, index)
        distance = parse_amount(raw, currency_symbol)
        if distance is None:
            _warn_malformed("airport", code, column, raw)
        distances.append(distance)

    return Airport(
        code=code,
        name=_field(row, 1),
        distance_from_hub1=distances[0],
        distance_from_hub2=distances[1],
    )


def parse_aeroplane_row(row: List[str], currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> AeroplaneModel:
    """
    Build an AeroplaneModel from a raw row.

    Columns: model, cost per seat per 100km, max range, then economy,
    business and first-class capacities. Malformed values are kept as None.
    """
    name = _field(row, 0)

    raw_cost = _field(row, 1)
    cost = parse_amount(raw_cost, currency_symbol)
    if cost is None:
        _warn_malformed("aeroplane", name, "cost_per_seat_per_100km", raw_cost)

    raw_range = _field(row, 2)
    max_range = parse_amount(raw_range, currency_symbol)
    if max_range is None:
        _warn_malformed("aeroplane", name, "max_range", raw_range)

    seat_capacity = {}
    for offset, category in enumerate(SEAT_CATEGORIES):
        raw = _field(row, 3 + offset)
        seat_capacity[category] = parse_count(raw)
        if seat_capacity[category] is None:
            _warn_malformed("aeroplane", name, f"{category} capacity", raw)

    return AeroplaneModel(
        name=name,
        cost_per_seat_per_100km=cost,
        max_range=max_range,
        seat_capacity=seat_capacity,
    )


def parse_flight_row(row: List[str], currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> FlightRequest:
    """
    Build a FlightRequest from a raw row.

    Columns: departure, destination, aeroplane model, booked seats per
    category (economy, business, first-class), then fares in the same order.
    """
    seats_booked = {}
    fares = {}
    for offset, category in enumerate(SEAT_CATEGORIES):
        seats_booked[category] = parse_count(_field(row, 3 + offset))
        fares[category] = parse_amount(_field(row, 6 + offset), currency_symbol)

    return FlightRequest(
        departure_hub=_field(row, 0),
        destination_code=_field(row, 1),
        aeroplane_name=_field(row, 2),
        seats_booked=seats_booked,
        fares=fares,
    )


def load_flight_requests(
    csv_path: str,
    delimiter: str = ",",
    currency_symbol: Optional[str] = DEFAULT_CURRENCY_SYMBOL,
) -> List[FlightRequest]:
    """
    Load a candidate flight list, keeping file order.

    Args:
        csv_path: Path to flights file
        delimiter: Field separator
        currency_symbol: Symbol stripped from fare fields

    Returns:
        List of FlightRequest in file order

    Raises:
        LoadFailure: If the file cannot be read
    """
    rows = load_rows(csv_path, delimiter)
    return [parse_flight_row(row, currency_symbol or "") for row in rows]

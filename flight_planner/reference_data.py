"""Reference data store for airports and aeroplane models."""

import logging
from typing import Dict, Iterable, List, Optional

from .models.airport import Airport
from .models.aeroplane import AeroplaneModel
from .data_loader import load_rows, parse_airport_row, parse_aeroplane_row
from .config import DEFAULT_CURRENCY_SYMBOL

logger = logging.getLogger(__name__)


class ReferenceDataStore:
    """Read-only lookup tables, built once per run.

    Lookups are exact matches on the key. When a key appears more than once
    the first occurrence wins; later duplicates are logged and ignored.
    """

    def __init__(
        self,
        airports: Iterable[Airport],
        aeroplanes: Iterable[AeroplaneModel],
    ):
        """
        Initialize the store.

        Args:
            airports: Airports in file order
            aeroplanes: Aeroplane models in file order
        """
        self._airports: Dict[str, Airport] = {}
        self._aeroplanes: Dict[str, AeroplaneModel] = {}

        for airport in airports:
            if airport.code in self._airports:
                logger.warning(f"Duplicate airport code {airport.code!r}, keeping first occurrence")
                continue
            self._airports[airport.code] = airport

        for aeroplane in aeroplanes:
            if aeroplane.name in self._aeroplanes:
                logger.warning(f"Duplicate aeroplane model {aeroplane.name!r}, keeping first occurrence")
                continue
            self._aeroplanes[aeroplane.name] = aeroplane

        logger.info(
            f"Reference data ready: {len(self._airports)} airports, "
            f"{len(self._aeroplanes)} aeroplane models"
        )

    @classmethod
    def from_rows(
        cls,
        airport_rows: List[List[str]],
        aeroplane_rows: List[List[str]],
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    ) -> "ReferenceDataStore":
        """Build the store from raw loader rows."""
        return cls(
            [parse_airport_row(row, currency_symbol) for row in airport_rows],
            [parse_aeroplane_row(row, currency_symbol) for row in aeroplane_rows],
        )

    @classmethod
    def from_files(
        cls,
        airports_csv: str,
        aeroplanes_csv: str,
        delimiter: str = ",",
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    ) -> "ReferenceDataStore":
        """
        Load both reference files and build the store.

        Raises:
            LoadFailure: If either file cannot be read
        """
        airport_rows = load_rows(airports_csv, delimiter)
        aeroplane_rows = load_rows(aeroplanes_csv, delimiter)
        return cls.from_rows(airport_rows, aeroplane_rows, currency_symbol)

    def find_airport(self, code: str) -> Optional[Airport]:
        return self._airports.get(code)

    def find_aeroplane(self, name: str) -> Optional[AeroplaneModel]:
        return self._aeroplanes.get(name)

    @property
    def airport_count(self) -> int:
        return len(self._airports)

    @property
    def aeroplane_count(self) -> int:
        return len(self._aeroplanes)

"""Configuration module for constants, hub codes, and settings."""

from typing import Dict
from pydantic_settings import BaseSettings


# Seat categories, in the order they are checked and reported
SEAT_CATEGORIES = ["economy", "business", "first-class"]

# The two hubs every flight departs from; distances are precomputed per hub
HUB_CODES = ["MAN", "LGW"]

# Single aggregate error surfaced when any required source cannot be read
LOAD_FAILURE_MESSAGE = "Unable to read one or more CSV files."

DEFAULT_CURRENCY_SYMBOL = "£"


# File path constants (relative to the working directory)
AIRPORTS_CSV = "airports.csv"
AEROPLANES_CSV = "aeroplanes.csv"
FLIGHT_BATCHES: Dict[str, str] = {
    "valid": "valid_flight_data.csv",
    "invalid": "invalid_flight_data.csv",
    "other": "other_flight_data.csv",
}


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    # Input sources
    AIRPORTS_CSV: str = AIRPORTS_CSV
    AEROPLANES_CSV: str = AEROPLANES_CSV
    FLIGHT_BATCHES: Dict[str, str] = dict(FLIGHT_BATCHES)
    CSV_DELIMITER: str = ","

    # Output
    OUTPUT_DIR: str = "."
    CURRENCY_SYMBOL: str = DEFAULT_CURRENCY_SYMBOL

    # Hubs (HUB_1 distances come from the first distance column)
    HUB_1: str = HUB_CODES[0]
    HUB_2: str = HUB_CODES[1]

    # Batch runner
    MAX_WORKERS: int = 1

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "planning.log"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @property
    def hubs(self) -> list:
        """Configured hub codes, hub 1 first."""
        return [self.HUB_1, self.HUB_2]

"""Shared fixtures: reference and flight files on disk."""

import pytest
from flight_planner.config import Config


AIRPORTS = (
    "code,name,distance_man,distance_lgw\n"
    "JFK,John F Kennedy International,5376,5558\n"
    "ORY,Paris-Orly,610,336\n"
    "MAD,Madrid-Barajas,1456,1263\n"
)

AEROPLANES = (
    "model,cost_per_seat_per_100km,max_range,economy,business,first\n"
    "Medium narrow body,£8,4000,160,12,0\n"
    "Large narrow body,£7,5600,180,20,4\n"
)

VALID_FLIGHTS = (
    "dep,dest,model,economy,business,first,economy_fare,business_fare,first_fare\n"
    "MAN,ORY,Medium narrow body,150,10,0,99,299,0\n"
    "LGW,JFK,Large narrow body,170,18,4,399,999,1899\n"
)

INVALID_FLIGHTS = (
    "dep,dest,model,economy,business,first,economy_fare,business_fare,first_fare\n"
    "XXX,ORY,Medium narrow body,1,0,0,1,0,0\n"
    "MAN,ZZZ,Medium narrow body,1,0,0,1,0,0\n"
    "MAN,JFK,Medium narrow body,100,0,1,99,0,999\n"
)


@pytest.fixture
def data_dir(tmp_path):
    """Write reference files and two flight batches to a temp directory."""
    (tmp_path / "airports.csv").write_text(AIRPORTS, encoding="utf-8")
    (tmp_path / "aeroplanes.csv").write_text(AEROPLANES, encoding="utf-8")
    (tmp_path / "valid_flight_data.csv").write_text(VALID_FLIGHTS, encoding="utf-8")
    (tmp_path / "invalid_flight_data.csv").write_text(INVALID_FLIGHTS, encoding="utf-8")
    return tmp_path


@pytest.fixture
def sample_config(data_dir):
    """Create config pointing at the temp files."""
    return Config(
        AIRPORTS_CSV=str(data_dir / "airports.csv"),
        AEROPLANES_CSV=str(data_dir / "aeroplanes.csv"),
        FLIGHT_BATCHES={
            "valid": str(data_dir / "valid_flight_data.csv"),
            "invalid": str(data_dir / "invalid_flight_data.csv"),
        },
        OUTPUT_DIR=str(data_dir / "out"),
        LOG_FILE=str(data_dir / "planning.log"),
    )

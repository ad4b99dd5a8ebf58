"""Tests for data loader module."""

import pytest
from flight_planner.data_loader import (
    LoadFailure,
    load_rows,
    load_flight_requests,
    parse_airport_row,
    parse_aeroplane_row,
    parse_flight_row,
)


def test_load_rows_skips_header_and_blank_lines(tmp_path):
    """Test the header row and blank lines are dropped."""
    csv_path = tmp_path / "airports.csv"
    csv_path.write_text(
        "code,name,distance_man,distance_lgw\n"
        "JFK,John F Kennedy International,5376,5558\n"
        "\n"
        "ORY,Paris-Orly,610,336\n",
        encoding="utf-8",
    )

    rows = load_rows(str(csv_path))

    assert rows == [
        ["JFK", "John F Kennedy International", "5376", "5558"],
        ["ORY", "Paris-Orly", "610", "336"],
    ]


def test_load_rows_strips_fields(tmp_path):
    """Test surrounding whitespace is removed from every field."""
    csv_path = tmp_path / "flights.csv"
    csv_path.write_text("a,b\n MAN , JFK \n", encoding="utf-8")

    assert load_rows(str(csv_path)) == [["MAN", "JFK"]]


def test_load_rows_header_only(tmp_path):
    """Test a file with only a header yields no rows."""
    csv_path = tmp_path / "aeroplanes.csv"
    csv_path.write_text("model,cost,range,economy,business,first\n", encoding="utf-8")

    assert load_rows(str(csv_path)) == []


def test_load_rows_custom_delimiter(tmp_path):
    """Test a semicolon separated file."""
    csv_path = tmp_path / "airports.csv"
    csv_path.write_text("code;name;d1;d2\nJFK;John F Kennedy;5376;5558\n", encoding="utf-8")

    rows = load_rows(str(csv_path), delimiter=";")

    assert rows == [["JFK", "John F Kennedy", "5376", "5558"]]


def test_load_rows_missing_file(tmp_path):
    """Test a missing file raises LoadFailure naming the source."""
    missing = tmp_path / "nope.csv"

    with pytest.raises(LoadFailure) as excinfo:
        load_rows(str(missing))

    assert excinfo.value.source == str(missing)
    assert "not found" in excinfo.value.reason


def test_parse_airport_row():
    """Test airport columns map to the model."""
    airport = parse_airport_row(["JFK", "John F Kennedy International", "5376", "5558"])

    assert airport.code == "JFK"
    assert airport.name == "John F Kennedy International"
    assert airport.distance_from_hub1 == 5376.0
    assert airport.distance_from_hub2 == 5558.0


def test_parse_airport_row_malformed_distance():
    """Test an unparseable distance is kept as None."""
    airport = parse_airport_row(["JFK", "John F Kennedy International", "far", "5558"])

    assert airport.distance_from_hub1 is None
    assert airport.distance_from_hub2 == 5558.0


def test_parse_aeroplane_row_with_currency_symbol():
    """Test the cost field may carry a currency symbol."""
    aeroplane = parse_aeroplane_row(["Medium narrow body", "£8", "4000", "160", "12", "0"])

    assert aeroplane.name == "Medium narrow body"
    assert aeroplane.cost_per_seat_per_100km == 8.0
    assert aeroplane.max_range == 4000.0
    assert aeroplane.seat_capacity == {"economy": 160, "business": 12, "first-class": 0}


def test_parse_aeroplane_row_malformed_capacity():
    """Test a malformed seat capacity is kept as None."""
    aeroplane = parse_aeroplane_row(["Medium narrow body", "8", "4000", "lots", "12", "0"])

    assert aeroplane.seat_capacity["economy"] is None
    assert aeroplane.seat_capacity["business"] == 12


def test_parse_flight_row():
    """Test flight columns map to bookings and fares per category."""
    flight = parse_flight_row(
        ["MAN", "JFK", "Large narrow body", "150", "10", "2", "399", "999", "1899"]
    )

    assert flight.departure_hub == "MAN"
    assert flight.destination_code == "JFK"
    assert flight.aeroplane_name == "Large narrow body"
    assert flight.seats_booked == {"economy": 150, "business": 10, "first-class": 2}
    assert flight.fares == {"economy": 399.0, "business": 999.0, "first-class": 1899.0}


def test_parse_flight_row_short_row():
    """Test missing trailing fields become malformed values."""
    flight = parse_flight_row(["MAN", "JFK", "Large narrow body", "150"])

    assert flight.seats_booked["economy"] == 150
    assert flight.seats_booked["business"] is None
    assert flight.fares["economy"] is None


def test_parse_flight_row_rejects_negative_and_fractional_seats():
    """Test seat counts must be non-negative whole numbers."""
    flight = parse_flight_row(["MAN", "JFK", "A", "-1", "2.5", "3.0", "1", "1", "1"])

    assert flight.seats_booked["economy"] is None
    assert flight.seats_booked["business"] is None
    assert flight.seats_booked["first-class"] == 3


def test_load_flight_requests_keeps_file_order(tmp_path):
    """Test flights come back in file order."""
    csv_path = tmp_path / "flights.csv"
    csv_path.write_text(
        "dep,dest,model,e,b,f,ef,bf,ff\n"
        "MAN,JFK,Large narrow body,150,10,0,399,999,0\n"
        "LGW,ORY,Medium narrow body,100,0,0,99,0,0\n"
        "MAN,CDG,Medium narrow body,90,5,0,89,300,0\n",
        encoding="utf-8",
    )

    flights = load_flight_requests(str(csv_path))

    assert [f.destination_code for f in flights] == ["JFK", "ORY", "CDG"]
    assert flights[1].departure_hub == "LGW"


def test_load_rows_short_first_row(tmp_path):
    """Test a short first row is padded instead of failing the whole file."""
    csv_path = tmp_path / "flights.csv"
    csv_path.write_text(
        "h1,h2,h3\n"
        "MAN,ORY\n"
        "MAN,ORY,Jet,1,0,0,1,0,0\n",
        encoding="utf-8",
    )

    rows = load_rows(str(csv_path))

    assert rows == [
        ["MAN", "ORY", "", "", "", "", "", "", ""],
        ["MAN", "ORY", "Jet", "1", "0", "0", "1", "0", "0"],
    ]


def test_load_rows_trailing_delimiter(tmp_path):
    """Test a later row with a trailing delimiter keeps the other rows."""
    csv_path = tmp_path / "flights.csv"
    csv_path.write_text("a,b,c\nMAN,ORY,Jet\nLGW,JFK,Jet,\n", encoding="utf-8")

    rows = load_rows(str(csv_path))

    assert rows == [["MAN", "ORY", "Jet", ""], ["LGW", "JFK", "Jet", ""]]


def test_short_flight_row_is_still_evaluated(tmp_path):
    """Test a ragged flights file loads every flight in order."""
    csv_path = tmp_path / "flights.csv"
    csv_path.write_text(
        "dep,dest,model,e,b,f,ef,bf,ff\n"
        "MAN,ORY\n"
        "LGW,JFK,Large narrow body,150,10,0,399,999,0\n",
        encoding="utf-8",
    )

    flights = load_flight_requests(str(csv_path))

    assert [f.destination_code for f in flights] == ["ORY", "JFK"]
    assert flights[0].seats_booked["economy"] is None
    assert flights[1].seats_booked["economy"] == 150

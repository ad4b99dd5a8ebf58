"""Tests for reference data store."""

import pytest
from flight_planner.reference_data import ReferenceDataStore
from flight_planner.data_loader import LoadFailure
from flight_planner.models.airport import Airport
from flight_planner.models.aeroplane import AeroplaneModel


@pytest.fixture
def airport_rows():
    """Raw airport rows, with JFK listed twice."""
    return [
        ["JFK", "John F Kennedy International", "5376", "5558"],
        ["ORY", "Paris-Orly", "610", "336"],
        ["JFK", "Duplicate JFK", "1", "1"],
    ]


@pytest.fixture
def aeroplane_rows():
    """Raw aeroplane rows."""
    return [
        ["Medium narrow body", "£8", "4000", "160", "12", "0"],
        ["Large narrow body", "£7", "5600", "180", "20", "4"],
    ]


def test_find_airport(airport_rows, aeroplane_rows):
    """Test exact-match airport lookup."""
    store = ReferenceDataStore.from_rows(airport_rows, aeroplane_rows)

    airport = store.find_airport("ORY")

    assert airport is not None
    assert airport.distance_from_hub2 == 336.0
    assert store.find_airport("ory") is None
    assert store.find_airport("ZZZ") is None


def test_find_aeroplane(airport_rows, aeroplane_rows):
    """Test exact-match aeroplane lookup."""
    store = ReferenceDataStore.from_rows(airport_rows, aeroplane_rows)

    aeroplane = store.find_aeroplane("Large narrow body")

    assert aeroplane is not None
    assert aeroplane.seat_capacity["first-class"] == 4
    assert store.find_aeroplane("Jumbo") is None


def test_first_occurrence_wins(airport_rows, aeroplane_rows):
    """Test duplicate keys keep the first row."""
    store = ReferenceDataStore.from_rows(airport_rows, aeroplane_rows)

    assert store.find_airport("JFK").name == "John F Kennedy International"
    assert store.airport_count == 2
    assert store.aeroplane_count == 2


def test_build_from_models():
    """Test building the store from in-memory models."""
    store = ReferenceDataStore(
        [Airport(code="AAA", distance_from_hub1=100.0, distance_from_hub2=200.0)],
        [
            AeroplaneModel(
                name="Tiny",
                cost_per_seat_per_100km=1.0,
                max_range=300.0,
                seat_capacity={"economy": 10, "business": 0, "first-class": 0},
            )
        ],
    )

    assert store.find_airport("AAA").distance_from_hub1 == 100.0
    assert store.find_aeroplane("Tiny").max_range == 300.0


def test_from_files_missing_airports(tmp_path):
    """Test a missing reference file raises LoadFailure."""
    aeroplanes = tmp_path / "aeroplanes.csv"
    aeroplanes.write_text("model,cost,range,e,b,f\nTiny,1,300,10,0,0\n", encoding="utf-8")

    with pytest.raises(LoadFailure):
        ReferenceDataStore.from_files(str(tmp_path / "airports.csv"), str(aeroplanes))

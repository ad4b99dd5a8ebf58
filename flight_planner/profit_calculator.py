"""Profit calculator module for computing revenue, cost and profit/loss."""

import logging
from .models.flight import FlightRequest
from .models.aeroplane import AeroplaneModel
from .models.outcome import Accepted
from .models.result import ProfitBreakdown
from .config import SEAT_CATEGORIES
from .utils import round_money

logger = logging.getLogger(__name__)


def calculate_revenue(flight: FlightRequest) -> float:
    """
    Calculate ticket revenue for a flight.

    Args:
        flight: Flight with booked seats and fares per category

    Returns:
        Sum of booked seats times fare over all categories
    """
    revenue = 0.0

    for category in SEAT_CATEGORIES:
        revenue += flight.seats_booked[category] * flight.fares[category]

    return revenue


def calculate_total_seats(flight: FlightRequest) -> int:
    """Total seats taken on the flight."""
    return sum(flight.seats_booked[category] for category in SEAT_CATEGORIES)


def calculate_cost_per_seat(aeroplane: AeroplaneModel, distance_km: float) -> float:
    """
    Calculate the running cost of one seat over the flight distance.

    Args:
        aeroplane: Aeroplane model with a cost per seat per 100km
        distance_km: Flight distance

    Returns:
        Cost per seat, unrounded
    """
    return aeroplane.cost_per_seat_per_100km * (distance_km / 100)


def calculate_total_cost(aeroplane: AeroplaneModel, distance_km: float, total_seats: int) -> float:
    """Total running cost for all seats taken, rounded to 2 decimal places."""
    cost_per_seat = calculate_cost_per_seat(aeroplane, distance_km)
    return round_money(cost_per_seat * total_seats)


def calculate_profit(outcome: Accepted, flight: FlightRequest) -> ProfitBreakdown:
    """
    Calculate profit or loss for an accepted flight.

    Only the total cost and the final profit/loss are rounded.

    Args:
        outcome: Accepted validation outcome (aeroplane and distance)
        flight: The originating flight request (bookings and fares)

    Returns:
        ProfitBreakdown for the flight
    """
    revenue = calculate_revenue(flight)
    total_seats = calculate_total_seats(flight)
    total_cost = calculate_total_cost(outcome.aeroplane, outcome.distance_km, total_seats)
    profit_loss = round_money(revenue - total_cost)

    logger.debug(
        f"{outcome.departure} -> {outcome.destination}: revenue {revenue:.2f}, "
        f"cost {total_cost:.2f}, profit/loss {profit_loss:.2f}"
    )

    return ProfitBreakdown(
        aircraft_type=outcome.aeroplane.name,
        distance_km=outcome.distance_km,
        revenue=revenue,
        total_cost=total_cost,
        profit_loss=profit_loss,
    )

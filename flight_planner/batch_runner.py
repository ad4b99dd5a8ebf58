"""Batch runner for evaluating a sequence of flights."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

from .validator import FlightValidator
from .profit_calculator import calculate_profit
from .report import render_reasons, summarize_results
from .models.flight import FlightRequest
from .models.outcome import Accepted
from .models.result import FlightResult

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "unexpected error evaluating flight"


class BatchRunner:
    """Runs validation and profit calculation over a batch of flights.

    Results come back in input order, one per flight.
    """

    def __init__(self, validator: FlightValidator, max_workers: int = 1):
        """
        Initialize batch runner.

        Args:
            validator: Validator holding the reference data
            max_workers: Threads to fan out across; 1 runs sequentially
        """
        self.validator = validator
        self.max_workers = max(1, max_workers)

    def evaluate(self, flight: FlightRequest) -> FlightResult:
        """
        Evaluate one flight.

        Args:
            flight: Candidate flight

        Returns:
            Error record if rejected, success record with profit/loss otherwise
        """
        try:
            outcome = self.validator.validate(flight)

            if not isinstance(outcome, Accepted):
                return FlightResult(
                    departure=outcome.departure,
                    destination=outcome.destination,
                    error=render_reasons(outcome.reasons),
                    reasons=outcome.reasons,
                )

            breakdown = calculate_profit(outcome, flight)
            return FlightResult(
                departure=outcome.departure,
                destination=outcome.destination,
                aircraft_type=breakdown.aircraft_type,
                distance_km=breakdown.distance_km,
                profit_loss=breakdown.profit_loss,
                revenue=breakdown.revenue,
                total_cost=breakdown.total_cost,
            )
        except Exception as e:
            logger.exception(
                f"Error evaluating {flight.departure_hub} -> {flight.destination_code}: {e}"
            )
            return FlightResult(
                departure=flight.departure_hub,
                destination=flight.destination_code,
                error=UNEXPECTED_ERROR_MESSAGE,
            )

    def run(self, flights: Sequence[FlightRequest]) -> List[FlightResult]:
        """
        Evaluate every flight in the batch.

        Args:
            flights: Flights in input order

        Returns:
            One FlightResult per flight, in the same order
        """
        logger.info(f"Evaluating {len(flights)} flights with max_workers={self.max_workers}")

        if self.max_workers == 1 or len(flights) <= 1:
            results = [self.evaluate(flight) for flight in flights]
        else:
            # Executor.map yields in submission order
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                results = list(executor.map(self.evaluate, flights))

        summary = summarize_results(results)
        logger.info(
            f"Batch complete: {summary['accepted']} accepted, {summary['rejected']} rejected, "
            f"total profit/loss {summary['total_profit_loss']:.2f}"
        )
        return results

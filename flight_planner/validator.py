"""Validator module for deciding whether a candidate flight can be flown."""

import logging
from typing import List, Optional, Sequence

from .models.flight import FlightRequest
from .models.airport import Airport
from .models.aeroplane import AeroplaneModel
from .models.outcome import (
    Accepted,
    ReasonCode,
    Rejected,
    RejectionReason,
    ValidationOutcome,
)
from .reference_data import ReferenceDataStore
from .config import HUB_CODES, SEAT_CATEGORIES

logger = logging.getLogger(__name__)


class FlightValidator:
    """Validates flights against the reference data.

    Unknown hubs, destinations and aeroplanes are reported alone. Seat and
    range problems accumulate so a flight can report several at once.
    """

    def __init__(
        self,
        reference: ReferenceDataStore,
        hubs: Sequence[str] = tuple(HUB_CODES),
    ):
        """
        Initialize validator.

        Args:
            reference: Airport and aeroplane lookup tables
            hubs: The two hub codes; distances for the first come from
                ``distance_from_hub1``, for the second from ``distance_from_hub2``
        """
        if len(hubs) != 2:
            raise ValueError(f"Exactly two hub codes are required, got {list(hubs)}")
        self.reference = reference
        self.hubs = list(hubs)

    def validate(self, flight: FlightRequest) -> ValidationOutcome:
        """
        Validate a single flight.

        Args:
            flight: Candidate flight

        Returns:
            Accepted with the aeroplane and distance, or Rejected with reasons
        """
        departure = flight.departure_hub
        destination = flight.destination_code

        if departure not in self.hubs:
            return self._reject(flight, [RejectionReason(code=ReasonCode.INVALID_DEPARTURE)])

        airport = self.reference.find_airport(destination)
        if airport is None:
            return self._reject(flight, [RejectionReason(code=ReasonCode.INVALID_DESTINATION)])

        aeroplane = self.reference.find_aeroplane(flight.aeroplane_name)
        if aeroplane is None:
            return self._reject(flight, [RejectionReason(code=ReasonCode.INVALID_AEROPLANE)])

        distance = self.resolve_distance(departure, airport)

        malformed = self._malformed_fields(flight, aeroplane, distance)
        if malformed:
            return self._reject(
                flight,
                [RejectionReason(code=ReasonCode.MALFORMED_VALUE, params={"fields": malformed})],
            )

        reasons = self.check_seats(flight, aeroplane)

        if distance > aeroplane.max_range:
            reasons.append(
                RejectionReason(
                    code=ReasonCode.OUT_OF_RANGE,
                    params={"model": aeroplane.name, "destination": destination},
                )
            )

        if reasons:
            return self._reject(flight, reasons)

        return Accepted(
            departure=departure,
            destination=destination,
            aeroplane=aeroplane,
            distance_km=distance,
        )

    def resolve_distance(self, departure: str, airport: Airport) -> Optional[float]:
        """Distance from the departure hub to the airport, None if malformed."""
        if departure == self.hubs[0]:
            return airport.distance_from_hub1
        return airport.distance_from_hub2

    def check_seats(self, flight: FlightRequest, aeroplane: AeroplaneModel) -> List[RejectionReason]:
        """
        Check booked seats against the aeroplane's capacity.

        Every category is checked, then the total. Nothing short-circuits.

        Args:
            flight: Candidate flight with well-formed seat counts
            aeroplane: Aeroplane with well-formed capacities

        Returns:
            Seat-related reasons, in category order
        """
        reasons = []

        for category in SEAT_CATEGORIES:
            booked = flight.seats_booked[category]
            capacity = aeroplane.seat_capacity[category]
            if capacity == 0 and booked > 0:
                reasons.append(
                    RejectionReason(
                        code=ReasonCode.NO_SEATS_IN_CATEGORY,
                        params={"model": aeroplane.name, "category": category},
                    )
                )
            elif booked > capacity:
                reasons.append(
                    RejectionReason(
                        code=ReasonCode.TOO_MANY_SEATS,
                        params={"category": category, "booked": booked, "capacity": capacity},
                    )
                )

        total_booked = flight.total_booked()
        total_capacity = aeroplane.total_capacity()
        if total_booked > total_capacity:
            reasons.append(
                RejectionReason(
                    code=ReasonCode.TOO_MANY_TOTAL_SEATS,
                    params={"booked": total_booked, "capacity": total_capacity},
                )
            )

        return reasons

    def _malformed_fields(
        self,
        flight: FlightRequest,
        aeroplane: AeroplaneModel,
        distance: Optional[float],
    ) -> List[str]:
        """Names of numeric inputs that could not be parsed."""
        fields = []
        for category in SEAT_CATEGORIES:
            if flight.seats_booked.get(category) is None:
                fields.append(f"{category} seats booked")
            if flight.fares.get(category) is None:
                fields.append(f"{category} fare")
            if aeroplane.seat_capacity.get(category) is None:
                fields.append(f"{category} capacity")
        if aeroplane.cost_per_seat_per_100km is None:
            fields.append("cost per seat")
        if aeroplane.max_range is None:
            fields.append("max range")
        if distance is None:
            fields.append("distance")
        return fields

    def _reject(self, flight: FlightRequest, reasons: List[RejectionReason]) -> Rejected:
        logger.debug(
            f"Rejected {flight.departure_hub} -> {flight.destination_code}: "
            f"{[reason.code.value for reason in reasons]}"
        )
        return Rejected(
            departure=flight.departure_hub,
            destination=flight.destination_code,
            reasons=reasons,
        )

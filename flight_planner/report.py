"""Report module for rendering flight results as text."""

import logging
from pathlib import Path
from typing import Dict, List, Sequence

from .models.outcome import ReasonCode, RejectionReason
from .models.result import FlightResult
from .config import DEFAULT_CURRENCY_SYMBOL
from .utils import format_money, format_number, round_money

logger = logging.getLogger(__name__)


REASON_TEMPLATES: Dict[ReasonCode, str] = {
    ReasonCode.INVALID_DEPARTURE: "invalid departure airport code",
    ReasonCode.INVALID_DESTINATION: "invalid destination airport code",
    ReasonCode.INVALID_AEROPLANE: "invalid aeroplane type",
    ReasonCode.MALFORMED_VALUE: "malformed seat/fare/capacity value",
    ReasonCode.NO_SEATS_IN_CATEGORY: "{model} doesn't have {category} seats",
    ReasonCode.TOO_MANY_SEATS: "too many {category} seats booked ({booked} > {capacity})",
    ReasonCode.TOO_MANY_TOTAL_SEATS: "too many total seats booked on this flight",
    ReasonCode.OUT_OF_RANGE: "{model} doesn't have the range to fly to {destination}",
}


def render_reason(reason: RejectionReason) -> str:
    """Render one rejection reason as text."""
    return REASON_TEMPLATES[reason.code].format(**reason.params)


def render_reasons(reasons: Sequence[RejectionReason]) -> str:
    """
    Render all rejection reasons as one message.

    Reasons are joined with " and " when the range check failed,
    otherwise with ", ".
    """
    separator = ", "
    if any(reason.code == ReasonCode.OUT_OF_RANGE for reason in reasons):
        separator = " and "
    return separator.join(render_reason(reason) for reason in reasons)


def format_result_line(result: FlightResult, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """
    Render one flight result as a report line.

    Args:
        result: Flight result (error or success)
        currency_symbol: Symbol printed before the profit/loss

    Returns:
        Single line of text
    """
    prefix = f"Departure: {result.departure}, Destination: {result.destination}"
    if result.is_error():
        return f"{prefix}, Error: {result.error}"
    return (
        f"{prefix}, Aircraft: {result.aircraft_type}, "
        f"Distance: {format_number(result.distance_km)} km, "
        f"Profit/Loss: {format_money(result.profit_loss, currency_symbol)}"
    )


def render_report(results: Sequence[FlightResult], currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Render all results, one line each, joined with newlines."""
    return "\n".join(format_result_line(result, currency_symbol) for result in results)


def write_report(
    results: Sequence[FlightResult],
    output_path: str,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> Path:
    """
    Write the rendered report to a file.

    Args:
        results: Flight results in input order
        output_path: Path to output file
        currency_symbol: Symbol printed before profit/loss values

    Returns:
        Path written
    """
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, "w", encoding="utf-8") as f:
        f.write(render_report(results, currency_symbol))

    logger.info(f"Flight details written to {output_file}")
    return output_file


def summarize_results(results: List[FlightResult]) -> Dict:
    """
    Summarize a batch of results.

    Returns:
        Dictionary with flight, accepted and rejected counts and the
        total profit/loss over accepted flights
    """
    accepted = [result for result in results if not result.is_error()]
    total_profit_loss = round_money(sum(result.profit_loss for result in accepted))

    return {
        "flights": len(results),
        "accepted": len(accepted),
        "rejected": len(results) - len(accepted),
        "total_profit_loss": total_profit_loss,
    }

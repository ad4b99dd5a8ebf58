"""Tests for utils module."""

from flight_planner.utils import round_money


def test_round_money_half_up():
    """Test half pennies round away from zero."""
    assert round_money(0.125) == 0.13
    assert round_money(-0.125) == -0.13


def test_round_money_plain_values():
    """Test values already at two places are unchanged."""
    assert round_money(669.0) == 669.0
    assert round_money(9.87) == 9.87

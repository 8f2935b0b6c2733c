"""Tests for position sizing and margin primitives."""

import math

import pytest

from tradejournal.risk import (
    STANDARD_LOT_UNITS,
    lots_for_risk,
    margin_level,
    max_lots_available,
    notional_value,
    required_margin,
)


def test_lots_for_risk_decreases_as_stop_widens():
    """Wider stop should result in smaller position size, all else equal."""
    s1 = lots_for_risk(risk_amount=300.0, stop_loss_pips=20.0, pip_value_per_lot=10.0)
    s2 = lots_for_risk(risk_amount=300.0, stop_loss_pips=40.0, pip_value_per_lot=10.0)
    assert s1 == pytest.approx(1.5)
    assert s2 < s1


def test_lots_for_risk_is_not_clamped():
    """Negative risk passes straight through as negative lots."""
    assert lots_for_risk(risk_amount=-100.0, stop_loss_pips=10.0, pip_value_per_lot=10.0) == pytest.approx(-1.0)


def test_lots_for_risk_zero_denominator_is_infinite():
    assert math.isinf(lots_for_risk(risk_amount=100.0, stop_loss_pips=0.0, pip_value_per_lot=10.0))


def test_margin_chain():
    notional = notional_value(1.5)
    assert notional == pytest.approx(1.5 * STANDARD_LOT_UNITS)
    assert required_margin(notional, 500) == pytest.approx(300.0)


def test_margin_level_infinite_without_margin():
    level = margin_level(3000.0, 0.0)
    assert level == float("inf")
    assert not math.isnan(level)


def test_margin_level_percentage():
    assert margin_level(3000.0, 300.0) == pytest.approx(1000.0)


def test_max_lots_available():
    assert max_lots_available(3000.0, 500) == pytest.approx(15.0)

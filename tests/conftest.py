# tests/conftest.py
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tradejournal.compounding import CompoundingCalculator, StrategyConfig


@pytest.fixture
def config():
    """The settings form defaults: $3000 at 500:1, 10/25/5 %, 20 pip stop, 1:2, $10/pip."""
    return StrategyConfig(
        initial_capital=3000.0,
        leverage=500,
        initial_risk_percent=10.0,
        after_win_risk_percent=25.0,
        recovery_risk_percent=5.0,
        stop_loss_pips=20.0,
        risk_reward_ratio=2.0,
        pip_value_per_lot=10.0,
    )


@pytest.fixture
def calculator(config):
    return CompoundingCalculator(config)

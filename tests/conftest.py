import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from backend.schemas import FootprintIn


@pytest.fixture
def make_input():
    """Build a FootprintIn where everything contributes zero unless overridden."""
    def _make(**overrides):
        base = {
            "meat_frequency": "unknown",
            "dairy_frequency": "unknown",
            "recycle_habit": "rarely",
        }
        base.update(overrides)
        return FootprintIn(**base)
    return _make


@pytest.fixture
def scenario_payload():
    return {
        "monthlyElectricity": 900,
        "monthlyGas": 50,
        "peopleInHouse": 3,
        "carType": "gas",
        "carMiles": 100,
        "busMiles": 0,
        "trainMiles": 0,
        "flightHoursShort": 0,
        "flightHoursLong": 0,
        "meatFrequency": "medium",
        "dairyFrequency": "medium",
        "foodWaste": 2,
        "recycleHabit": "sometimes",
        "paperUsage": 0,
        "clothingPurchases": 0,
    }

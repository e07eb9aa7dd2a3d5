# backend/schemas.py
import math
import re
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List

NUMERIC_FIELDS = (
    "monthly_electricity", "monthly_gas",
    "car_miles", "bus_miles", "train_miles",
    "flight_hours_short", "flight_hours_long",
    "food_waste", "paper_usage", "clothing_purchases",
)

# defaults applied when a categorical answer is missing or blank
CHOICE_DEFAULTS = {
    "car_type": "gas",
    "meat_frequency": "medium",
    "dairy_frequency": "medium",
    "recycle_habit": "sometimes",
}


# leading number the way a browser's parseFloat reads it ("12abc" -> 12)
LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def coerce_float(value) -> float:
    """Lenient number parsing: anything unusable or non-finite becomes 0.0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    else:
        match = LEADING_NUMBER.match(str(value).strip())
        if not match:
            return 0.0
        number = float(match.group())
    if not math.isfinite(number):
        return 0.0
    return number


def coerce_people(value) -> int:
    # household size can never drop below one person
    return max(int(coerce_float(value)), 1)


class FootprintIn(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # household
    monthly_electricity: float = 0.0   # kWh / month
    monthly_gas: float = 0.0           # therms / month
    people_in_house: int = 1
    # transportation
    car_type: str = "gas"
    car_miles: float = 0.0             # miles / week
    bus_miles: float = 0.0
    train_miles: float = 0.0
    flight_hours_short: float = 0.0    # hours / year
    flight_hours_long: float = 0.0
    # food & diet
    meat_frequency: str = "medium"
    dairy_frequency: str = "medium"
    food_waste: float = 0.0            # kg / week
    # consumables & waste
    recycle_habit: str = "sometimes"
    paper_usage: float = 0.0           # reams / year
    clothing_purchases: float = 0.0    # items / year

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def _numbers(cls, v):
        return coerce_float(v)

    @field_validator("people_in_house", mode="before")
    @classmethod
    def _people(cls, v):
        return coerce_people(v)

    @field_validator(*CHOICE_DEFAULTS, mode="before")
    @classmethod
    def _choices(cls, v, info):
        # unrecognized values are kept; the calculator decides how to treat them
        if v is None or str(v).strip() == "":
            return CHOICE_DEFAULTS[info.field_name]
        return str(v).strip()


class FootprintOut(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_kg_co2: float = Field(alias="totalKgCO2")
    total_tons_co2: float = Field(alias="totalTonsCO2")
    # Household / Transportation / Food / Waste, kg CO2 rounded to 0.1
    breakdown: Dict[str, float]


class FootprintReport(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    result: FootprintOut
    total_tons_display: str
    fun_fact: str
    comparisons: str
    comparison_figures: Dict[str, Any]
    recommendations: List[str] = []

# backend/utils.py
from decimal import Decimal, ROUND_HALF_UP
import logging

from .factors import FACTORS
from .schemas import FootprintIn, FootprintOut

logger = logging.getLogger(__name__)

WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12


def weekly_to_yearly(weekly):
    return weekly * WEEKS_PER_YEAR


def round_half_up(value, places=0):
    """Round the exact binary value of ``value``, ties away from zero.

    Matches ``Number.prototype.toFixed`` so figures agree with what the
    browser version of the form displayed.
    """
    if value != value or value in (float("inf"), float("-inf")):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def calc_household(monthly_electricity, monthly_gas, people_in_house):
    electricity = monthly_electricity * MONTHS_PER_YEAR * FACTORS["electricity_kgco2_per_kwh"]
    gas = monthly_gas * MONTHS_PER_YEAR * FACTORS["natural_gas_kgco2_per_therm"]
    # people_in_house >= 1 is guaranteed by FootprintIn
    return (electricity + gas) / people_in_house


def calc_transport(car_type, car_miles, bus_miles, train_miles, flight_hours_short, flight_hours_long):
    car_factors = FACTORS["car_kgco2_per_mile"]
    car_factor = car_factors.get(car_type) or car_factors["gas"]
    car = weekly_to_yearly(car_miles) * car_factor
    bus = weekly_to_yearly(bus_miles) * FACTORS["bus_kgco2_per_mile"]
    train = weekly_to_yearly(train_miles) * FACTORS["train_kgco2_per_mile"]
    flights = FACTORS["flight_kgco2_per_hour"]
    flight = flight_hours_short * flights["short_haul"] + flight_hours_long * flights["long_haul"]
    return car + bus + train + flight


def calc_food(meat_frequency, dairy_frequency, food_waste):
    # unknown tiers add nothing (no fallback, unlike car type)
    diet = FACTORS["diet_meat_kgco2_per_year"].get(meat_frequency, 0)
    diet += FACTORS["diet_dairy_kgco2_per_year"].get(dairy_frequency, 0)
    waste = weekly_to_yearly(food_waste) * FACTORS["food_waste_kgco2_per_kg"]
    return diet + waste


def calc_consumables(recycle_habit, paper_usage, clothing_purchases):
    offset = FACTORS["recycling_offset_kgco2"].get(recycle_habit, 0)
    paper = paper_usage * FACTORS["paper_kgco2_per_ream"]
    clothing = clothing_purchases * FACTORS["clothing_kgco2_per_item"]
    # may be negative when the recycling credit dominates
    return offset + paper + clothing


def calculate_footprint(data: FootprintIn) -> FootprintOut:
    household = calc_household(data.monthly_electricity, data.monthly_gas, data.people_in_house)
    transport = calc_transport(
        data.car_type,
        data.car_miles,
        data.bus_miles,
        data.train_miles,
        data.flight_hours_short,
        data.flight_hours_long,
    )
    food = calc_food(data.meat_frequency, data.dairy_frequency, data.food_waste)
    waste = calc_consumables(data.recycle_habit, data.paper_usage, data.clothing_purchases)

    total_kg = household + transport + food + waste
    logger.debug("footprint total %.3f kg CO2", total_kg)
    return FootprintOut(
        total_kg_co2=total_kg,
        total_tons_co2=total_kg / 1000,
        breakdown={
            "Household": round_half_up(household, 1),
            "Transportation": round_half_up(transport, 1),
            "Food": round_half_up(food, 1),
            "Waste": round_half_up(waste, 1),
        },
    )

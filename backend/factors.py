# backend/factors.py
# Fixed emission factors (kg CO2). Read-only: every table is a mappingproxy.
from types import MappingProxyType

FACTORS = MappingProxyType({
    # household
    "electricity_kgco2_per_kwh": 0.709,
    "natural_gas_kgco2_per_therm": 5.3,
    # transport (per mile)
    "car_kgco2_per_mile": MappingProxyType({
        "gas": 0.411,
        "diesel": 0.475,
        "hybrid": 0.200,
        "electric": 0.100,
    }),
    "bus_kgco2_per_mile": 0.089,
    "train_kgco2_per_mile": 0.041,
    # flights (per hour in the air)
    "flight_kgco2_per_hour": MappingProxyType({
        "short_haul": 255,
        "long_haul": 195,
    }),
    # diet (per year, by frequency tier)
    "diet_meat_kgco2_per_year": MappingProxyType({
        "high": 2000,
        "medium": 1500,
        "low": 1000,
        "none": 700,
    }),
    "diet_dairy_kgco2_per_year": MappingProxyType({
        "high": 1200,
        "medium": 900,
        "low": 500,
        "none": 300,
    }),
    "food_waste_kgco2_per_kg": 2.5,
    # consumables & waste
    "recycling_offset_kgco2": MappingProxyType({
        "always": -200,
        "often": -100,
        "sometimes": -50,
        "rarely": 0,
    }),
    "paper_kgco2_per_ream": 6,
    "clothing_kgco2_per_item": 10,
})

# Reference points for the "fun fact" and comparison texts.
COMPARISON_FACTORS = MappingProxyType({
    "jet_flight_tons": 7,
    "gasoline_car_kgco2_per_mile": 0.411,
    "km_per_mile": 1.60934,
    "earth_circumference_km": 40075,
    "ny_la_flight_tons": 0.235,
    "tree_absorption_tons_per_year": 0.0613,
    "led_bulbs_per_ton": 113.5,
    "cheeseburgers_per_ton": 333.3,
    "arctic_ice_m2_per_ton": 2.98,
})

CAR_TYPES = tuple(FACTORS["car_kgco2_per_mile"])
DIET_TIERS = tuple(FACTORS["diet_meat_kgco2_per_year"])
RECYCLE_HABITS = tuple(FACTORS["recycling_offset_kgco2"])


def factors_as_dict(table=FACTORS):
    """Plain-dict copy of a factor table (JSON friendly)."""
    out = {}
    for key, value in table.items():
        out[key] = factors_as_dict(value) if isinstance(value, MappingProxyType) else value
    return out

# backend/narrative.py
# Human-readable texts derived from the annual footprint (metric tons CO2).
import math

from .factors import COMPARISON_FACTORS as CF
from .utils import round_half_up

RECOMMENDATIONS = [
    "Switch to a renewable electricity plan and replace old bulbs with LEDs.",
    "Combine car trips, or take the bus or train for your regular commute.",
    "Try a few meat-free days each week and plan meals to cut food waste.",
    "Recycle consistently, go paperless where you can and buy fewer, longer-lasting clothes.",
]


def js_round(value):
    """Nearest integer, ties toward +infinity (like Math.round)."""
    if not math.isfinite(value):
        return value
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


def format_tons(tons):
    return f"{round_half_up(tons, 2):.2f}"


def get_fun_fact(tons):
    jets = round_half_up(tons / CF["jet_flight_tons"], 1)
    return (
        "Fun Fact: The average commercial jet emits roughly 7 metric tons of CO₂ per flight. "
        f"Your annual carbon footprint is equivalent to the emissions of about **{jets:.1f}** jet flights!"
    )


def comparison_figures(tons):
    miles = (tons * 1000) / CF["gasoline_car_kgco2_per_mile"]
    km = miles * CF["km_per_mile"]
    return {
        "miles": js_round(miles),
        "km": js_round(km),
        "earth_laps": round_half_up(km / CF["earth_circumference_km"], 1),
        "flights": round_half_up(tons / CF["ny_la_flight_tons"], 0),
        "trees": round_half_up(tons / CF["tree_absorption_tons_per_year"], 0),
        "bulbs": js_round(tons * CF["led_bulbs_per_ton"]),
        "burgers": js_round(tons * CF["cheeseburgers_per_ton"]),
        "ice_m2": js_round(tons * CF["arctic_ice_m2_per_ton"]),
    }


def get_comparisons(tons):
    f = comparison_figures(tons)
    lines = [
        "### More Eye-Opening Comparisons",
        f"- **🚗 Transportation:** Equivalent to driving **{f['km']:,} km** ({f['miles']:,} miles) "
        f"in an average gasoline car. That’s like circling the Earth over **{f['earth_laps']:.1f}** times! 🌍",
        f"- **✈️ Flights:** Equivalent to taking about **{f['flights']:.0f}** one-way flights "
        "from New York to Los Angeles. ✈️",
        f"- **🌳 Nature’s Workload:** It would take roughly **{f['trees']:.0f}** mature trees "
        "to absorb this CO₂ in a year. 🌲🌳",
        f"- **🔋 Energy Usage:** Your emissions could power approximately **{f['bulbs']}** "
        "LED light bulbs for an entire year. 💡",
        f"- **🍔 Food Impact:** Producing around **{f['burgers']}** cheeseburgers releases "
        "the same amount of CO₂ as your annual footprint. 🍔",
        f"- **🌊 Glacier Melting:** Your emissions contribute to melting about **{f['ice_m2']}** "
        "m² of Arctic ice each year. 🧊",
    ]
    return "\n".join(lines)

import pytest

from backend.narrative import (
    RECOMMENDATIONS,
    comparison_figures,
    format_tons,
    get_comparisons,
    get_fun_fact,
    js_round,
)

SCENARIO_TONS = 8.3596


def test_fun_fact_text():
    assert get_fun_fact(SCENARIO_TONS) == (
        "Fun Fact: The average commercial jet emits roughly 7 metric tons of CO₂ per flight. "
        "Your annual carbon footprint is equivalent to the emissions of about **1.2** jet flights!"
    )


def test_fun_fact_zero():
    assert "about **0.0** jet flights" in get_fun_fact(0)


def test_format_tons():
    assert format_tons(SCENARIO_TONS) == "8.36"
    assert format_tons(0) == "0.00"
    assert format_tons(1.005) == "1.00"


def test_comparison_figures():
    f = comparison_figures(SCENARIO_TONS)
    assert f["miles"] == 20340
    assert f["km"] == 32733
    assert f["earth_laps"] == 0.8
    assert f["flights"] == 36
    assert f["trees"] == 136
    assert f["bulbs"] == 949
    assert f["burgers"] == 2786
    assert f["ice_m2"] == 25


def test_comparisons_text():
    text = get_comparisons(SCENARIO_TONS)
    lines = text.split("\n")
    assert lines[0] == "### More Eye-Opening Comparisons"
    assert len(lines) == 7
    assert lines[1] == (
        "- **🚗 Transportation:** Equivalent to driving **32,733 km** (20,340 miles) in an average "
        "gasoline car. That’s like circling the Earth over **0.8** times! 🌍"
    )
    assert "about **36** one-way flights" in lines[2]
    assert "roughly **136** mature trees" in lines[3]
    assert "approximately **949** LED light bulbs" in lines[4]
    assert "around **2786** cheeseburgers" in lines[5]
    assert "about **25** m² of Arctic ice" in lines[6]


def test_comparisons_for_zero_footprint():
    text = get_comparisons(0)
    assert "**0 km** (0 miles)" in text
    assert "**0.0** times" in text
    assert "about **0** one-way flights" in text


@pytest.mark.parametrize("value,expected", [
    (2.5, 3),
    (-2.5, -2),
    (2.49, 2),
    (0.49999999999999994, 0),
    (-0.5, 0),
    (0, 0),
])
def test_js_round(value, expected):
    assert js_round(value) == expected


def test_recommendations_cover_each_category():
    assert len(RECOMMENDATIONS) == 4

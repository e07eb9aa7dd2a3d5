import pytest

from streamlit_app.chart import EmissionChart, frame

BREAKDOWN = {"Household": 3612.4, "Transportation": 2137.2, "Food": 2660.0, "Waste": -50.0}


@pytest.fixture
def chart():
    c = EmissionChart()
    yield c
    c.close()


def test_first_render_creates(chart):
    assert chart.needs_create(BREAKDOWN)
    assert chart.render(BREAKDOWN) is True
    assert chart.figure is not None
    assert chart.labels == list(BREAKDOWN)
    assert chart.values() == pytest.approx(list(BREAKDOWN.values()))
    assert chart.ax.get_ylabel() == "kg CO₂"
    assert chart.ax.get_legend() is None


def test_same_categories_redraw_in_place(chart):
    chart.render(BREAKDOWN)
    figure = chart.figure
    updated = {"Household": 100.0, "Transportation": 200.0, "Food": 300.0, "Waste": -200.0}
    assert chart.render(updated) is False
    assert chart.figure is figure
    assert chart.values() == pytest.approx([100.0, 200.0, 300.0, -200.0])
    assert chart.created_count == 1
    assert chart.redraw_count == 1


def test_new_categories_recreate(chart):
    chart.render(BREAKDOWN)
    assert chart.render({"Household": 1.0, "Food": 2.0}) is True
    assert chart.labels == ["Household", "Food"]
    assert chart.created_count == 2


def test_axis_keeps_zero_for_negative_bar(chart):
    chart.render({"Household": 0.0, "Transportation": 0.0, "Food": 0.0, "Waste": -200.0})
    low, high = chart.ax.get_ylim()
    assert low <= -200
    assert high >= 0


def test_close_forgets_figure(chart):
    chart.render(BREAKDOWN)
    chart.close()
    assert chart.figure is None
    assert chart.needs_create(BREAKDOWN)


def test_frame():
    df = frame(BREAKDOWN)
    assert list(df.columns) == ["category", "kg CO₂"]
    assert df["category"].tolist() == list(BREAKDOWN)
    assert df["kg CO₂"].sum() == pytest.approx(8359.6)

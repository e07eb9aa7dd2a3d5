# streamlit_app/app.py
import logging

import requests
import streamlit as st

from backend.config import API_BASE, REQUEST_TIMEOUT
from streamlit_app.chart import EmissionChart, frame
from streamlit_app.wizard import FormWizard

logger = logging.getLogger(__name__)

st.set_page_config(page_title="Carbon Footprint Calculator", layout="centered")

CAR_TYPES = ["gas", "diesel", "hybrid", "electric"]
FREQUENCIES = ["high", "medium", "low", "none"]
RECYCLE_HABITS = ["always", "often", "sometimes", "rarely"]

DEFAULT_ANSWERS = {
    "monthlyElectricity": 0.0,
    "monthlyGas": 0.0,
    "peopleInHouse": 1,
    "carType": "gas",
    "carMiles": 0.0,
    "busMiles": 0.0,
    "trainMiles": 0.0,
    "flightHoursShort": 0.0,
    "flightHoursLong": 0.0,
    "meatFrequency": "medium",
    "dairyFrequency": "medium",
    "foodWaste": 0.0,
    "recycleHabit": "sometimes",
    "paperUsage": 0.0,
    "clothingPurchases": 0.0,
}


# -------------------------------
# Helpers
# -------------------------------
def post_json(path: str, payload: dict):
    url = API_BASE.rstrip("/") + path
    resp = requests.post(url, json=payload, timeout=REQUEST_TIMEOUT)
    resp.raise_for_status()
    return resp.json()


def _render_step(step: int):
    logger.debug("showing form step %s", step)
    st.rerun()


def number(label, key, **kwargs):
    answers = st.session_state["answers"]
    answers[key] = st.number_input(label, value=answers[key], **kwargs)


def choice(label, key, options):
    answers = st.session_state["answers"]
    current = answers[key]
    index = options.index(current) if current in options else options.index(DEFAULT_ANSWERS[key])
    answers[key] = st.selectbox(label, options, index=index)


def reset_form():
    st.session_state["answers"] = dict(DEFAULT_ANSWERS)
    st.session_state["report"] = None
    st.session_state["chart"].close()
    if not st.session_state["wizard"].reset():
        st.rerun()


# -------------------------------
# Session state
# -------------------------------
if "answers" not in st.session_state:
    st.session_state["answers"] = dict(DEFAULT_ANSWERS)
if "wizard" not in st.session_state:
    st.session_state["wizard"] = FormWizard(on_change=_render_step)
if "chart" not in st.session_state:
    st.session_state["chart"] = EmissionChart()
if "report" not in st.session_state:
    st.session_state["report"] = None

wizard: FormWizard = st.session_state["wizard"]

st.title("Carbon Footprint Calculator")
st.write("Answer a few questions about your household, travel, diet and habits to estimate your annual CO₂ emissions.")

# step indicator
cols = st.columns(wizard.max_step)
for col, (n, title, active) in zip(cols, wizard.indicator()):
    col.markdown(f"**{n}. {title}**" if active else f"{n}. {title}")
st.progress(wizard.step / wizard.max_step)

# -------------------------------
# Form steps
# -------------------------------
st.header(wizard.title)

if wizard.step == 1:
    number("Electricity usage (kWh per month)", "monthlyElectricity", min_value=0.0)
    number("Natural gas usage (therms per month)", "monthlyGas", min_value=0.0)
    number("People in your household", "peopleInHouse", min_value=1, step=1)

elif wizard.step == 2:
    choice("Car type", "carType", CAR_TYPES)
    number("Car miles per week", "carMiles", min_value=0.0)
    number("Bus miles per week", "busMiles", min_value=0.0)
    number("Train miles per week", "trainMiles", min_value=0.0)
    number("Short-haul flight hours per year", "flightHoursShort", min_value=0.0)
    number("Long-haul flight hours per year", "flightHoursLong", min_value=0.0)

elif wizard.step == 3:
    choice("How often do you eat meat?", "meatFrequency", FREQUENCIES)
    choice("How often do you eat dairy?", "dairyFrequency", FREQUENCIES)
    number("Food waste (kg per week)", "foodWaste", min_value=0.0)

elif wizard.step == 4:
    choice("How often do you recycle?", "recycleHabit", RECYCLE_HABITS)
    number("Paper usage (reams per year)", "paperUsage", min_value=0.0)
    number("Clothing purchases (items per year)", "clothingPurchases", min_value=0.0)

else:
    st.write("Check your answers, then calculate.")
    st.table([{"question": k, "answer": v} for k, v in st.session_state["answers"].items()])

# navigation
c_prev, c_next, c_reset = st.columns(3)
if c_prev.button("Back", disabled=wizard.is_first):
    wizard.prev()
if wizard.is_last:
    if c_next.button("Calculate", type="primary"):
        try:
            st.session_state["report"] = post_json("/footprint/report", st.session_state["answers"])
        except Exception as e:
            logger.warning("footprint request failed: %s", e)
            st.error("Could not calculate footprint: " + str(e))
elif c_next.button("Next", type="primary"):
    wizard.next()
if c_reset.button("Reset"):
    reset_form()

# -------------------------------
# Results
# -------------------------------
report = st.session_state["report"]
if report:
    result = report["result"]
    st.divider()
    st.header("Your Results")
    st.markdown(
        f"Your annual carbon footprint is approximately **{report['totalTonsDisplay']}** metric tons of CO₂."
    )
    st.info(report["funFact"])

    chart: EmissionChart = st.session_state["chart"]
    chart.render(result["breakdown"])
    st.pyplot(chart.figure, clear_figure=False)
    st.dataframe(frame(result["breakdown"]), hide_index=True)

    st.markdown(report["comparisons"])

    st.subheader("Recommendations")
    for tip in report.get("recommendations", []):
        st.markdown(f"- {tip}")

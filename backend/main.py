# backend/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from . import config, narrative, schemas, utils
from .factors import COMPARISON_FACTORS, FACTORS, factors_as_dict

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Carbon Footprint Calculator API")
app.add_middleware(CORSMiddleware, allow_origins=config.CORS_ORIGINS, allow_methods=["*"], allow_headers=["*"])


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/factors")
def list_factors():
    return {
        "factors": factors_as_dict(FACTORS),
        "comparisons": factors_as_dict(COMPARISON_FACTORS),
    }


# -----------------
# Footprint
# -----------------
@app.post("/footprint", response_model=schemas.FootprintOut)
def footprint(payload: schemas.FootprintIn):
    result = utils.calculate_footprint(payload)
    logger.info("calculated footprint %.1f kg CO2", result.total_kg_co2)
    return result


@app.post("/footprint/report", response_model=schemas.FootprintReport)
def footprint_report(payload: schemas.FootprintIn):
    """Footprint plus the display texts shown on the results page."""
    result = utils.calculate_footprint(payload)
    tons = result.total_tons_co2
    logger.info("footprint report %.2f t CO2 (%s)", tons, ", ".join(f"{k}={v}" for k, v in result.breakdown.items()))
    return schemas.FootprintReport(
        result=result,
        total_tons_display=narrative.format_tons(tons),
        fun_fact=narrative.get_fun_fact(tons),
        comparisons=narrative.get_comparisons(tons),
        comparison_figures=narrative.comparison_figures(tons),
        recommendations=list(narrative.RECOMMENDATIONS),
    )

"""FastAPI application for soilcalc."""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from soilcalc import __version__
from soilcalc.engine import evaluate, summarize
from soilcalc.layers import build_bore_log, validate_layers
from soilcalc.schemas import (
    AnalysisRequest,
    BoreLogRequest,
    BoreLogResponse,
    DesignBundle,
    DesignSummary,
    SoilSuitability,
)
from soilcalc.settings import get_settings
from soilcalc.suitability import score_suitability

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Soilcalc API",
    description="Soil suitability and preliminary foundation design estimates",
    version=__version__,
)

# CORS - configurable via SOILCALC_CORS_ORIGINS env var
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Soilcalc API",
        "version": __version__,
        "endpoints": ["/evaluate", "/summary", "/suitability", "/bore-log", "/health"],
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


def _calculation_error(exc: Exception) -> HTTPException:
    if isinstance(exc, ValueError):
        return HTTPException(status_code=400, detail=f"Calculation error: {str(exc)}")
    logger.exception("Unexpected error during calculation")
    return HTTPException(
        status_code=500, detail="An unexpected error occurred during calculation"
    )


@app.post("/evaluate", response_model=DesignBundle)
async def evaluate_endpoint(request: AnalysisRequest):
    """
    Evaluate a soil description into a design bundle.

    Args:
        request: AnalysisRequest with soil description and optional environment

    Returns:
        DesignBundle with bearing capacity, classifications and bore log

    Raises:
        HTTPException: 400 for calculation errors
    """
    try:
        return evaluate(request.soil, request.environment)
    except Exception as e:
        raise _calculation_error(e) from e


@app.post("/summary", response_model=DesignSummary)
async def summary_endpoint(request: AnalysisRequest):
    """Design bundle plus condensed summary messages."""
    try:
        return summarize(request.soil, request.environment)
    except Exception as e:
        raise _calculation_error(e) from e


@app.post("/suitability", response_model=SoilSuitability)
async def suitability_endpoint(request: AnalysisRequest):
    """Building and agriculture suitability scores."""
    try:
        return score_suitability(request.soil, request.environment)
    except Exception as e:
        raise _calculation_error(e) from e


@app.post("/bore-log", response_model=BoreLogResponse)
async def bore_log_endpoint(request: BoreLogRequest):
    """
    Normalise a bore log and report layer warnings.

    Warnings are advisory; malformed layers are still normalised.
    """
    warnings = validate_layers(request.layers)
    if warnings:
        logger.info("Bore log has %d layer warning(s)", len(warnings))
    return BoreLogResponse(rows=build_bore_log(request.layers), warnings=warnings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)

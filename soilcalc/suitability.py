"""Building and agriculture suitability scores.

Each raw input is mapped onto a 0-100 sub-score by a piecewise-linear curve
with an optimum band, and the sub-scores are blended with fixed weights.
The building track works on the evaluated design bundle (CBR and void ratio
of the governing layer, remediation need for the planned floors).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from soilcalc.engine import evaluate
from soilcalc.schemas import (
    DerivedMetrics,
    EnvironmentDescription,
    SoilDescription,
    SoilSuitability,
    SuitabilityTrack,
)

LIMITING_THRESHOLD = 60.0


def _clamp_score(value: float) -> float:
    return max(0.0, min(100.0, value))


def _band_score(value: float, low: float, high: float, below: float, above: float) -> float:
    """100 inside [low, high], dropping ``below``/``above`` points per unit outside."""
    if value < low:
        return _clamp_score(100.0 - (low - value) * below)
    if value > high:
        return _clamp_score(100.0 - (value - high) * above)
    return 100.0


# ── Building sub-scores ──────────────────────────────────────────────
def building_ph_score(ph: float) -> float:
    return _band_score(ph, 6.0, 8.0, 30.0, 30.0)


def building_moisture_score(moisture: float) -> float:
    """100 up to 20 %, linear to 50 at 40 %, then 3 points per % beyond."""
    if moisture <= 20.0:
        return 100.0
    if moisture <= 40.0:
        return 100.0 - (moisture - 20.0) * 2.5
    return _clamp_score(50.0 - (moisture - 40.0) * 3.0)


def bearing_ratio_score(cbr: float) -> float:
    """CBR of 15 % or more scores full marks."""
    return _clamp_score(cbr / 15.0 * 100.0)


def void_ratio_score(void_ratio: float) -> float:
    """100 up to e = 0.5, 40 at e = 1.0, 0 at e = 1.5."""
    if void_ratio <= 0.5:
        return 100.0
    if void_ratio <= 1.0:
        return 100.0 - (void_ratio - 0.5) * 120.0
    return _clamp_score(40.0 - (void_ratio - 1.0) * 80.0)


# ── Agriculture sub-scores ───────────────────────────────────────────
def agriculture_ph_score(ph: float) -> float:
    return _band_score(ph, 6.0, 7.5, 25.0, 25.0)


def agriculture_moisture_score(moisture: float) -> float:
    return _band_score(moisture, 20.0, 40.0, 4.0, 2.5)


def organic_matter_score(organic_matter: float) -> float:
    """20 points per % up to 5 %, full marks to 10 %, then 5 points per % lost."""
    if organic_matter < 5.0:
        return _clamp_score(organic_matter * 20.0)
    return _band_score(organic_matter, 5.0, 10.0, 0.0, 5.0)


def temperature_score(temperature: float) -> float:
    return _band_score(temperature, 15.0, 30.0, 5.0, 6.0)


@dataclass(frozen=True)
class _Factor:
    label: str
    weight: float
    score: float


def _blend(factors: list[_Factor]) -> float:
    return round(sum(f.weight * f.score for f in factors), 1)


def _limiting(factors: list[_Factor]) -> list[str]:
    return [f.label for f in factors if f.score < LIMITING_THRESHOLD]


#   (minimum score, wording); first match wins
_BUILDING_BANDS: tuple[tuple[float, str], ...] = (
    (80.0, "Excellent for building"),
    (60.0, "Suitable for building with standard checks"),
    (40.0, "Marginal for building: ground improvement or deeper foundations advised"),
)
_BUILDING_FALLBACK = "Not recommended for building without soil improvement/deep foundation"

_AGRICULTURE_BANDS: tuple[tuple[float, str], ...] = (
    (80.0, "Excellent for agriculture"),
    (60.0, "Good for agriculture"),
    (40.0, "Moderate for agriculture: amendments required"),
)
_AGRICULTURE_FALLBACK = "Poor for agriculture"


def _recommendation(score: float, bands: tuple[tuple[float, str], ...], fallback: str) -> str:
    for min_score, wording in bands:
        if score >= min_score:
            return wording
    return fallback


def score_suitability(
    description: SoilDescription,
    environment: Optional[EnvironmentDescription] = None,
) -> SoilSuitability:
    """Score a soil description for building and for agriculture."""
    bundle = evaluate(description, environment)

    building_factors = [
        _Factor("pH", 0.15, building_ph_score(description.ph)),
        _Factor("moisture", 0.25, building_moisture_score(description.moisture)),
        _Factor("bearing ratio", 0.35, bearing_ratio_score(bundle.cbr)),
        _Factor("void ratio", 0.25, void_ratio_score(bundle.void_ratio)),
    ]
    building_score = _blend(building_factors)
    building_limits = _limiting(building_factors)
    if bundle.remediation is not None:
        building_limits.append("bearing capacity below target")

    agriculture_factors = [
        _Factor("pH", 0.30, agriculture_ph_score(description.ph)),
        _Factor("moisture", 0.30, agriculture_moisture_score(description.moisture)),
        _Factor("organic matter", 0.25, organic_matter_score(description.organic_matter)),
        _Factor("temperature", 0.15, temperature_score(description.temperature)),
    ]
    agriculture_score = _blend(agriculture_factors)

    building = SuitabilityTrack(
        score=building_score,
        recommendation=_recommendation(building_score, _BUILDING_BANDS, _BUILDING_FALLBACK),
        limiting_factors=building_limits,
        details={
            "ph_score": round(building_factors[0].score, 1),
            "moisture_score": round(building_factors[1].score, 1),
            "bearing_ratio_score": round(building_factors[2].score, 1),
            "void_ratio_score": round(building_factors[3].score, 1),
            "ph": round(description.ph, 1),
            "moisture": round(description.moisture, 1),
            "cbr": bundle.cbr,
            "void_ratio": bundle.void_ratio,
            "qsafe": bundle.qsafe,
        },
    )
    agriculture = SuitabilityTrack(
        score=agriculture_score,
        recommendation=_recommendation(
            agriculture_score, _AGRICULTURE_BANDS, _AGRICULTURE_FALLBACK
        ),
        limiting_factors=_limiting(agriculture_factors),
        details={
            "ph_score": round(agriculture_factors[0].score, 1),
            "moisture_score": round(agriculture_factors[1].score, 1),
            "organic_matter_score": round(agriculture_factors[2].score, 1),
            "temperature_score": round(agriculture_factors[3].score, 1),
            "ph": round(description.ph, 1),
            "moisture": round(description.moisture, 1),
            "organic_matter": round(description.organic_matter, 1),
            "temperature": round(description.temperature, 1),
        },
    )

    return SoilSuitability(
        building=building,
        agriculture=agriculture,
        overall_recommendation=(
            "building" if building_score >= agriculture_score else "agriculture"
        ),
        derived=DerivedMetrics(
            void_ratio=bundle.void_ratio,
            cbr=bundle.cbr,
            qsafe=bundle.qsafe,
            foundation_type=bundle.foundation_type,
            max_floors=bundle.max_floors,
            governing_layer_index=bundle.governing_layer_index,
        ),
    )


__all__ = [
    "LIMITING_THRESHOLD",
    "building_ph_score",
    "building_moisture_score",
    "bearing_ratio_score",
    "void_ratio_score",
    "agriculture_ph_score",
    "agriculture_moisture_score",
    "organic_matter_score",
    "temperature_score",
    "score_suitability",
]

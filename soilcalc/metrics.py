"""Primary soil metrics: void ratio, CBR estimate and Terzaghi bearing capacity.

The formulas are simplified, trend-only versions of the relationships used
in IS 2720 (phase relations, CBR) and IS 6403 (shallow foundation bearing
capacity). Laboratory and field tests govern in real projects.

References
----------
- IS 2720 Part 16, *Laboratory determination of CBR*.
- IS 6403:1981, *Code of practice for determination of bearing capacity
  of shallow foundations*.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from soilcalc.units import GAMMA_W, density_to_unit_weight, normalize_tag

# ── Phase relations ──────────────────────────────────────────────────
GS = 2.65  # specific gravity of solids (typical)
_MOISTURE_MAX_PCT = 200.0

# ── CBR estimate ─────────────────────────────────────────────────────
_CBR_BASE: dict[str, float] = {
    "sand": 8.0,
    "silty sand": 8.0,
    "silt": 5.0,
    "sandy silt": 5.0,
    "clay": 3.0,
    "silty clay": 3.0,
}
_CBR_BASE_DEFAULT = 6.0
#   (minimum density g/cm3, bonus); highest tier first
_CBR_DENSITY_BONUS: tuple[tuple[float, float], ...] = (
    (2.0, 6.0),
    (1.8, 4.0),
    (1.6, 2.0),
)
_CBR_OMC_PCT = 25.0  # moisture above which CBR is penalised
_CBR_MOISTURE_PENALTY = 0.15  # CBR % per moisture % above _CBR_OMC_PCT
CBR_MIN = 1.0
CBR_MAX = 30.0

# ── Bearing capacity ─────────────────────────────────────────────────
FACTOR_OF_SAFETY = 3.0
PHI_MAX_DEG = 45.0
_PHI_EPSILON_RAD = 1e-6


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def compute_void_ratio(density: float, moisture: float) -> float:
    """Void ratio from bulk density (g/cm3) and moisture (%).

    gamma_d = gamma / (1 + w) and e = Gs * gamma_w / gamma_d - 1, with Gs
    fixed at 2.65. Never negative.
    """
    gamma = density_to_unit_weight(density)
    w = _clamp(moisture, 0.0, _MOISTURE_MAX_PCT) / 100.0
    gamma_d = gamma / (1.0 + w)
    e = (GS * GAMMA_W) / gamma_d - 1.0
    return round(max(0.0, e), 2)


def estimate_cbr(density: float, moisture: float, soil_type: Optional[str] = None) -> float:
    """Rough CBR (%) from density, moisture and soil type, clamped to [1, 30]."""
    cbr = _CBR_BASE.get(normalize_tag(soil_type), _CBR_BASE_DEFAULT)

    for min_density, bonus in _CBR_DENSITY_BONUS:
        if density >= min_density:
            cbr += bonus
            break

    if moisture > _CBR_OMC_PCT:
        cbr -= (moisture - _CBR_OMC_PCT) * _CBR_MOISTURE_PENALTY

    return round(_clamp(cbr, CBR_MIN, CBR_MAX), 1)


@dataclass(frozen=True)
class BearingCapacityFactors:
    """Terzaghi bearing capacity factors."""

    nc: float
    nq: float
    ngamma: float


def bearing_capacity_factors(phi_deg: float) -> BearingCapacityFactors:
    """Nc, Nq and Ngamma for a friction angle in degrees (clamped to 0-45).

    Only the tan(phi) divisor of Nc is floored at a tiny epsilon, so at
    phi = 0 Nq is 1 and Nc is 0.
    """
    phi = math.radians(_clamp(phi_deg, 0.0, PHI_MAX_DEG))
    nq = math.exp(math.pi * math.tan(phi)) * math.tan(math.pi / 4 + phi / 2) ** 2
    nc = (nq - 1.0) / math.tan(max(phi, _PHI_EPSILON_RAD))
    ngamma = 1.5 * (nq - 1.0) * math.tan(phi)
    return BearingCapacityFactors(nc=nc, nq=nq, ngamma=ngamma)


def compute_safe_bearing_capacity(
    cohesion: float,
    phi: float,
    gamma: float,
    depth: float,
    width: float,
) -> float:
    """Safe bearing capacity (kPa) of a strip-like footing.

    Terzaghi's ultimate capacity::

        qult = c * Nc + gamma * Df * Nq + 0.5 * gamma * B * Ngamma

    divided by a fixed factor of safety of 3.

    Parameters
    ----------
    cohesion : float
        Cohesion c in kPa.
    phi : float
        Angle of shearing resistance in degrees.
    gamma : float
        Bulk unit weight in kN/m3.
    depth : float
        Embedment depth Df in m.
    width : float
        Footing width B in m.

    Returns
    -------
    float
        qsafe in kPa, never negative.
    """
    factors = bearing_capacity_factors(phi)
    surcharge = gamma * depth
    qult = (
        cohesion * factors.nc
        + surcharge * factors.nq
        + 0.5 * gamma * width * factors.ngamma
    )
    qsafe = qult / FACTOR_OF_SAFETY
    return round(max(0.0, qsafe), 1)


__all__ = [
    "GS",
    "CBR_MIN",
    "CBR_MAX",
    "FACTOR_OF_SAFETY",
    "BearingCapacityFactors",
    "bearing_capacity_factors",
    "compute_void_ratio",
    "estimate_cbr",
    "compute_safe_bearing_capacity",
]

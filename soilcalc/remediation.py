"""Ground-improvement advice when the soil cannot carry the planned building."""

from __future__ import annotations

from typing import Optional

from soilcalc.classification import load_per_floor
from soilcalc.schemas import RemediationPlan, SoilDescription
from soilcalc.units import is_clayey, is_sandy, is_silty, normalize_tag

VERIFICATION_NOTES: tuple[str, ...] = (
    "Post-treatment plate load test / CPT to verify achieved SBC.",
    "Adjust foundation option once verified (raft -> isolated/piles).",
)


def target_bearing_capacity(description: SoilDescription) -> float:
    """Required SBC (kPa): planned floors times the per-floor load."""
    floors = max(1, description.planned_floors or 1)
    return floors * load_per_floor(description.building_type)


def _improvement_methods(soil_type: str) -> list[str]:
    if is_clayey(soil_type):
        return [
            "Lime stabilization (+20-40%)",
            "Under-reamed piles (IS 2911)",
            "Preloading with vertical drains",
        ]
    if is_sandy(soil_type) or soil_type == "gravel":
        return [
            "Dynamic compaction / vibroflotation (+15-30%)",
            "Stone columns (+20-35%)",
        ]
    if is_silty(soil_type):
        return [
            "Cement stabilization (+15-30%)",
            "Geogrid-reinforced mattress with granular blanket",
        ]
    if soil_type == "peat":
        return [
            "Full replacement / floating raft",
            "Piles to firm stratum",
        ]
    return ["Engineer review and site-specific ground improvement"]


def propose_remediation(
    soil_type: Optional[str],
    current_qsafe: float,
    target_qsafe: float,
) -> Optional[RemediationPlan]:
    """Remediation plan, or None when ``current_qsafe`` already meets the target."""
    if current_qsafe >= target_qsafe:
        return None

    return RemediationPlan(
        target_qsafe=target_qsafe,
        estimated_gain=round(target_qsafe - current_qsafe, 1),
        methods=_improvement_methods(normalize_tag(soil_type)),
        notes=list(VERIFICATION_NOTES),
    )


__all__ = [
    "VERIFICATION_NOTES",
    "target_bearing_capacity",
    "propose_remediation",
]

"""Unit conversion and soil-type inference helpers."""

from __future__ import annotations

from typing import Optional

GAMMA_W = 9.81  # kN/m3, unit weight of water
FALLBACK_UNIT_WEIGHT = 18.0  # kN/m3, typical soil

# Accepted bulk density window in g/cm3, lower bound exclusive.
_DENSITY_MIN = 0.5
_DENSITY_MAX = 2.8

# Composition percentages must add up to roughly 100.
_COMPOSITION_SUM_MIN = 95.0
_COMPOSITION_SUM_MAX = 105.0

# (predicate(sand, silt, clay), soil type); first match wins.
_COMPOSITION_RULES = (
    (lambda sand, silt, clay: clay >= 40, "clay"),
    (lambda sand, silt, clay: clay >= 25 and silt >= 25, "silty clay"),
    (lambda sand, silt, clay: sand >= 60 and silt <= 20 and clay <= 20, "sand"),
    (lambda sand, silt, clay: sand >= 40 and silt >= 20 and clay <= 20, "silty sand"),
    (lambda sand, silt, clay: silt >= 60 and clay <= 20 and sand <= 20, "silt"),
    (lambda sand, silt, clay: silt >= 40 and sand >= 20 and clay <= 20, "sandy silt"),
    (lambda sand, silt, clay: sand >= 30 and silt >= 30 and clay >= 20, "silty clay"),
)
_COMPOSITION_DEFAULT = "silt"


def density_to_unit_weight(density: Optional[float]) -> float:
    """Convert bulk density (g/cm3) to unit weight (kN/m3).

    Densities outside (0.5, 2.8] return :data:`FALLBACK_UNIT_WEIGHT`.
    """
    if density is None or density <= _DENSITY_MIN or density > _DENSITY_MAX:
        return FALLBACK_UNIT_WEIGHT
    return density * GAMMA_W


def normalize_tag(tag: Optional[str]) -> str:
    """Lower-case, whitespace-collapsed tag (soil type, building type)."""
    return " ".join((tag or "").split()).lower()


def infer_soil_type(
    sand: Optional[float],
    silt: Optional[float],
    clay: Optional[float],
) -> Optional[str]:
    """Infer a soil type from sand/silt/clay percentages.

    Returns None when a fraction is missing or the three do not sum to
    between 95 and 105 %.
    """
    if sand is None or silt is None or clay is None:
        return None
    total = sand + silt + clay
    if total < _COMPOSITION_SUM_MIN or total > _COMPOSITION_SUM_MAX:
        return None

    for matches, soil_type in _COMPOSITION_RULES:
        if matches(sand, silt, clay):
            return soil_type
    return _COMPOSITION_DEFAULT


def is_clayey(soil_type: Optional[str]) -> bool:
    return "clay" in normalize_tag(soil_type)


def is_silty(soil_type: Optional[str]) -> bool:
    return "silt" in normalize_tag(soil_type)


def is_sandy(soil_type: Optional[str]) -> bool:
    return "sand" in normalize_tag(soil_type)


__all__ = [
    "GAMMA_W",
    "FALLBACK_UNIT_WEIGHT",
    "density_to_unit_weight",
    "normalize_tag",
    "infer_soil_type",
    "is_clayey",
    "is_silty",
    "is_sandy",
]

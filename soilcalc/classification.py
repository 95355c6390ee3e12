"""Classification tables for foundations, durability and superstructure.

Several tables here depend on rule order: later rules intentionally override
earlier ones (structural system, slab system) or the first match wins
(foundation band, exposure class). Each table is therefore written as an
explicit tuple of :class:`Rule` objects evaluated by :func:`first_match` or
:func:`apply_in_order`.

References
----------
- IS 456:2000 Table 3, 5 and 16 (exposure, mix limits, nominal cover).
- IS 8009 / IS 2911 (shallow foundations, piles).
- IS 875 Part 3 (wind), IS 1893 / IS 13920 (seismic, ductile detailing).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, Sequence, TypeVar

from soilcalc.schemas import (
    ConcreteRecommendation,
    EnvironmentDescription,
    NominalCover,
    SoilDescription,
    SoilLayer,
    SteelRecommendation,
    SuperstructureSuggestion,
)
from soilcalc.units import is_clayey, normalize_tag

C = TypeVar("C")


@dataclass(frozen=True)
class Rule(Generic[C]):
    """A named condition on a context and the value it selects."""

    name: str
    when: Callable[[C], bool]
    value: str
    remark: Optional[str] = None


def first_match(rules: Sequence[Rule[C]], context: C, default: str) -> str:
    """Value of the first rule that applies, else ``default``."""
    for rule in rules:
        if rule.when(context):
            return rule.value
    return default


def apply_in_order(
    rules: Sequence[Rule[C]], context: C, default: str
) -> tuple[str, list[str]]:
    """Evaluate every rule in order; the last applicable rule decides.

    Returns the selected value and the remarks of every applicable rule.
    """
    value = default
    remarks: list[str] = []
    for rule in rules:
        if rule.when(context):
            value = rule.value
            if rule.remark:
                remarks.append(rule.remark)
    return value, remarks


@dataclass(frozen=True)
class SiteContext:
    """Flattened view of the inputs the site tables look at."""

    floors: int
    area: float
    tags: frozenset[str] = field(default_factory=frozenset)
    seismic_zone: int = 2
    wind_speed: float = 0.0
    sulfate_exposure: Optional[str] = None
    chloride_risk: Optional[str] = None

    @classmethod
    def build(
        cls,
        description: Optional[SoilDescription] = None,
        env: Optional[EnvironmentDescription] = None,
    ) -> "SiteContext":
        floors = description.planned_floors if description else 0
        area = description.site_area if description else 0.0
        env = env or EnvironmentDescription()
        return cls(
            floors=floors if floors and floors > 0 else DEFAULT_FLOORS,
            area=area if area and area > 0 else DEFAULT_SITE_AREA,
            tags=frozenset(env.tags),
            seismic_zone=env.seismic_zone or 2,
            wind_speed=env.basic_wind_speed or 0.0,
            sulfate_exposure=env.sulfate_exposure,
            chloride_risk=env.chloride_risk,
        )

    def has(self, *tags: str) -> bool:
        return any(tag in self.tags for tag in tags)

    @property
    def chloride_exposed(self) -> bool:
        return self.has("seaside") or self.chloride_risk == "high"


DEFAULT_FLOORS = 1
DEFAULT_SITE_AREA = 1000.0

# ── Foundation type ──────────────────────────────────────────────────
EXPANSIVE_PI = 20.0
EXPANSIVE_QSAFE_LIMIT = 200.0
UNDER_REAMED_PILES = "Under-reamed Piles (IS 2911)"
#   (minimum qsafe kPa, foundation); first match wins
_FOUNDATION_BANDS: tuple[tuple[float, str], ...] = (
    (250.0, "Isolated/Strip Footing (IS 8009)"),
    (150.0, "Raft/Mat Foundation (IS 8009)"),
    (80.0, "Pile Foundation (IS 2911)"),
)
DEEP_FOUNDATION = "Deep Pile / Caisson Foundation (IS 2911)"

# ── Floor loads (kPa per floor) ──────────────────────────────────────
LOAD_PER_FLOOR: dict[str, float] = {
    "residential": 10.0,
    "commercial": 12.0,
    "industrial": 15.0,
    "skyscraper": 18.0,
}
_DEFAULT_LOAD_PER_FLOOR = 10.0


def load_per_floor(building_type: Optional[str]) -> float:
    """Indicative design pressure per floor in kPa."""
    return LOAD_PER_FLOOR.get(normalize_tag(building_type), _DEFAULT_LOAD_PER_FLOOR)


def classify_foundation_type(
    qsafe: float,
    soil_type: Optional[str],
    layers: Optional[Sequence[SoilLayer]] = None,
) -> str:
    """Foundation type from the safe bearing capacity (kPa).

    Clayey soils with any layer of plasticity index >= 20 and qsafe below
    200 kPa are treated as expansive and get under-reamed piles.
    """
    if is_clayey(soil_type) and qsafe < EXPANSIVE_QSAFE_LIMIT:
        expansive = any((layer.plasticity_index or 0) >= EXPANSIVE_PI for layer in layers or ())
        if expansive:
            return UNDER_REAMED_PILES

    for min_qsafe, foundation in _FOUNDATION_BANDS:
        if qsafe >= min_qsafe:
            return foundation
    return DEEP_FOUNDATION


def estimate_max_floors(description: SoilDescription, qsafe: float) -> int:
    """Floors the soil can carry under a uniform per-floor load model."""
    floors = math.floor(qsafe / load_per_floor(description.building_type))
    if (description.moisture or 0) > 45:
        floors -= 1
    if description.ph < 5.5 or description.ph > 9:
        floors -= 1
    return max(1, floors)


# ── Exposure class ───────────────────────────────────────────────────
_EXPOSURE_RULES: tuple[Rule[SiteContext], ...] = (
    Rule("chloride", lambda s: s.chloride_exposed, "very_severe"),
    Rule("humid", lambda s: s.has("rainforest", "tropical"), "severe"),
    Rule("sulfate_very_high", lambda s: s.sulfate_exposure == "very_high", "extreme"),
    Rule(
        "sulfate_high_or_industrial",
        lambda s: s.sulfate_exposure == "high" or s.has("industrial"),
        "very_severe",
    ),
    Rule(
        "moderate",
        lambda s: s.has("hot", "urban") or s.sulfate_exposure == "moderate",
        "moderate",
    ),
)


def compute_exposure_class(env: Optional[EnvironmentDescription] = None) -> str:
    """IS 456 exposure class; the first matching condition wins."""
    return first_match(_EXPOSURE_RULES, SiteContext.build(env=env), "mild")


# ── Concrete ─────────────────────────────────────────────────────────
@dataclass(frozen=True)
class _MixLimits:
    grade: str
    max_wc_ratio: float
    min_cement_content: int
    cover: tuple[int, int, int, int]  # slab, beam, column, footing (mm)


CONCRETE_TABLE: dict[str, _MixLimits] = {
    "mild": _MixLimits("M20", 0.55, 300, (20, 25, 25, 40)),
    "moderate": _MixLimits("M25", 0.50, 320, (25, 30, 35, 45)),
    "severe": _MixLimits("M30", 0.45, 340, (35, 40, 45, 50)),
    "very_severe": _MixLimits("M35", 0.45, 360, (40, 50, 50, 55)),
    "extreme": _MixLimits("M40", 0.40, 380, (50, 55, 60, 60)),
}

_CEMENT_RULES: tuple[Rule[SiteContext], ...] = (
    Rule("chloride", lambda s: s.chloride_exposed, "PSC"),
    Rule("sulfate", lambda s: s.sulfate_exposure in ("high", "very_high"), "SRC"),
)

_ADMIXTURES: tuple[tuple[Callable[[SiteContext], bool], str], ...] = (
    (lambda s: s.has("hot"), "Retarder / Low-heat blend"),
    (lambda s: s.has("cold"), "Air-entraining agent / Accelerator"),
    (lambda s: s.chloride_exposed, "Corrosion inhibitor"),
    (lambda s: s.has("tropical", "rainforest"), "Water-reducer (HRWR)"),
)

WIND_CRITICAL_SPEED = 44.0  # m/s
HIGH_SEISMIC_ZONE = 4


def recommend_concrete(
    exposure: str, env: Optional[EnvironmentDescription] = None
) -> ConcreteRecommendation:
    """Concrete grade, cement, w/c ratio and cover for an exposure class."""
    limits = CONCRETE_TABLE.get(exposure, CONCRETE_TABLE["mild"])
    site = SiteContext.build(env=env)

    admixtures = [label for applies, label in _ADMIXTURES if applies(site)]

    notes: list[str] = []
    if site.has("seaside"):
        notes.append(
            "Provide robust cover blocks (same durability grade) and good curing; "
            "consider micro-silica for chloride ingress resistance."
        )
    if site.seismic_zone >= HIGH_SEISMIC_ZONE:
        notes.append(
            "Detail per IS 13920 (ductile detailing) - confinement, hook anchorage, "
            "lap at low strain zones."
        )
    if site.wind_speed >= WIND_CRITICAL_SPEED:
        notes.append("Wind uplift & serviceability checks per IS 875 Part 3.")

    slab, beam, column, footing = limits.cover
    return ConcreteRecommendation(
        grade=limits.grade,
        cement_type=first_match(_CEMENT_RULES, site, "PPC"),
        max_wc_ratio=limits.max_wc_ratio,
        min_cement_content=limits.min_cement_content,
        nominal_cover=NominalCover(slab=slab, beam=beam, column=column, footing=footing),
        admixtures=admixtures,
        notes=notes,
    )


# ── Structural system ────────────────────────────────────────────────
_STRUCTURAL_RULES: tuple[Rule[SiteContext], ...] = (
    Rule("scale", lambda s: s.floors >= 10 or s.area > 15000, "Composite"),
    Rule("industrial", lambda s: s.has("industrial"), "PEB"),
    Rule("light_seaside", lambda s: s.has("seaside") and s.floors <= 4, "Composite"),
    Rule("robust_terrain", lambda s: s.has("volcanic", "hill"), "RCC"),
)

_LATERAL_RULES: tuple[Rule[SiteContext], ...] = (
    Rule(
        "wind",
        lambda s: s.wind_speed >= WIND_CRITICAL_SPEED,
        "Braced steel frames / RC shear walls (wind critical)",
    ),
    Rule(
        "seismic",
        lambda s: s.seismic_zone >= HIGH_SEISMIC_ZONE,
        "Dual system: RC shear walls + SMRF (ductile)",
    ),
)

STEEL_GRADE = "Rolled steel: E250/E350; Rebar: Fe500D/Fe550D"


def recommend_structural_system(
    description: SoilDescription, env: Optional[EnvironmentDescription] = None
) -> SteelRecommendation:
    """Structural and lateral system; later rules override earlier ones."""
    site = SiteContext.build(description, env)
    system, _ = apply_in_order(_STRUCTURAL_RULES, site, "RCC")
    lateral, _ = apply_in_order(_LATERAL_RULES, site, "RC shear walls (IS 13920) + MRF")

    if site.chloride_exposed:
        corrosion = [
            "Hot-dip galvanizing (>=85 um) or duplex coating",
            "Epoxy-coated rebars / CRR (corrosion-resistant) in splash zones",
        ]
    else:
        corrosion = ["High-build epoxy system (DFT >= 240 um) / regular maintenance"]

    notes: list[str] = []
    if system == "PEB":
        notes.append(
            "Check IS 800 limit states design; use Z-purlins, tapered rafters; "
            "fast-track erection."
        )
    if system == "Composite":
        notes.append("Composite decks + shear studs for rapid floors; coordinate fire protection.")
    if site.seismic_zone >= HIGH_SEISMIC_ZONE:
        notes.append("Ductile detailing per IS 13920 & IS 800 (for steel/CFST).")

    return SteelRecommendation(
        system=system,
        corrosion_protection=corrosion,
        steel_grade=STEEL_GRADE,
        lateral_system=lateral,
        notes=notes,
    )


# ── Slab system ──────────────────────────────────────────────────────
_SLAB_RULES: tuple[Rule[SiteContext], ...] = (
    Rule(
        "large_plate",
        lambda s: s.area > 12000,
        "Flat slab",
        "Consider drop panels/column heads; check punching shear.",
    ),
    Rule(
        "mid_rise",
        lambda s: s.floors >= 8,
        "PT slab",
        "PT recommended for longer spans & reduced thickness; coordinate tendon profiles.",
    ),
    Rule(
        "very_large_plate",
        lambda s: s.area > 20000,
        "Waffle",
        "Waffle/voided slab for vibration control & serviceability.",
    ),
    Rule(
        "small_low_rise",
        lambda s: s.floors <= 3 and s.area <= 6000,
        "Two-way",
        "Conventional two-way slab economical for small spans.",
    ),
)


def suggest_slab_system(description: SoilDescription) -> SuperstructureSuggestion:
    """Slab system from floors and plan area; later rules override earlier ones."""
    slab, remarks = apply_in_order(_SLAB_RULES, SiteContext.build(description), "Two-way")
    return SuperstructureSuggestion(slab_system=slab, remarks=remarks)


__all__ = [
    "Rule",
    "first_match",
    "apply_in_order",
    "SiteContext",
    "LOAD_PER_FLOOR",
    "CONCRETE_TABLE",
    "load_per_floor",
    "classify_foundation_type",
    "estimate_max_floors",
    "compute_exposure_class",
    "recommend_concrete",
    "recommend_structural_system",
    "suggest_slab_system",
]

"""Pydantic schemas for soilcalc data models."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, computed_field

SOIL_TYPES: tuple[str, ...] = (
    "clay",
    "silty clay",
    "silt",
    "sandy silt",
    "sand",
    "silty sand",
    "gravel",
    "peat",
    "fill",
    "weathered rock",
    "rock",
)

EnvironmentTag = Literal[
    "seaside",
    "hot",
    "cold",
    "tropical",
    "rainforest",
    "arid",
    "industrial",
    "hill",
    "urban",
    "volcanic",
]

ExposureClass = Literal["mild", "moderate", "severe", "very_severe", "extreme"]


# Inputs
class SoilLayer(BaseModel):
    """One bore-log layer. Depth ordering is reported by validate_layers, not enforced."""

    from_depth: float = Field(..., description="Top of layer in m")
    to_depth: float = Field(..., description="Bottom of layer in m")
    soil_type: str = Field(..., description="Soil type tag (see SOIL_TYPES) or free text")
    gamma: Optional[float] = Field(None, description="Bulk unit weight in kN/m3")
    moisture: Optional[float] = Field(None, description="Moisture content in %")
    spt_n: Optional[float] = Field(None, description="SPT blow count")
    cohesion: Optional[float] = Field(None, description="Cohesion c in kPa")
    phi: Optional[float] = Field(None, description="Friction angle in degrees")
    plasticity_index: Optional[float] = Field(None, description="Plasticity index in %")
    remarks: Optional[str] = Field(None, description="Free-text remarks")

    @computed_field
    @property
    def thickness(self) -> float:
        """Layer thickness in m (never negative)."""

        return max(0.0, self.to_depth - self.from_depth)


class SoilDescription(BaseModel):
    """Soil and site description entered by the user."""

    name: str = Field(default="", description="Optional sample or site label")
    ph: float = Field(default=7.0, description="Soil pH")
    moisture: float = Field(default=20.0, description="Moisture content in % by mass")
    temperature: float = Field(default=25.0, description="Soil temperature in degrees C")
    clay_content: float = Field(default=25.0, description="Clay fraction in %")
    sand_content: float = Field(default=45.0, description="Sand fraction in %")
    silt_content: float = Field(default=30.0, description="Silt fraction in %")
    organic_matter: float = Field(default=2.5, description="Organic matter in %")
    density: float = Field(default=1.7, description="Bulk density in g/cm3")
    cohesion: Optional[float] = Field(None, description="Global default cohesion in kPa")
    phi: Optional[float] = Field(None, description="Global default friction angle in degrees")
    foundation_depth: Optional[float] = Field(None, description="Foundation depth in m")
    foundation_width: Optional[float] = Field(None, description="Foundation width in m")
    building_type: str = Field(
        default="residential",
        description="residential, commercial, industrial, skyscraper or free text",
    )
    planned_floors: int = Field(default=2, description="Planned number of floors")
    site_area: float = Field(default=2000.0, description="Site area (ft2 or m2, caller's units)")
    layers: Optional[List[SoilLayer]] = Field(None, description="Optional bore log, top down")


class EnvironmentDescription(BaseModel):
    """Environmental exposure of the site."""

    tags: List[EnvironmentTag] = Field(default_factory=list)
    seismic_zone: Optional[int] = Field(None, ge=2, le=5, description="IS 1893 seismic zone")
    basic_wind_speed: Optional[float] = Field(None, description="Basic wind speed in m/s")
    sulfate_exposure: Optional[Literal["low", "moderate", "high", "very_high"]] = None
    chloride_risk: Optional[Literal["low", "moderate", "high"]] = None


class AnalysisRequest(BaseModel):
    """Request body for the evaluation endpoints."""

    soil: SoilDescription
    environment: Optional[EnvironmentDescription] = None


class BoreLogRequest(BaseModel):
    """Request body for bore-log normalisation."""

    layers: List[SoilLayer] = Field(default_factory=list)


# Outputs
class NominalCover(BaseModel):
    """Nominal concrete cover in mm per member."""

    slab: int
    beam: int
    column: int
    footing: int


class ConcreteRecommendation(BaseModel):
    """Concrete mix recommendation for an exposure class."""

    grade: Literal["M20", "M25", "M30", "M35", "M40", "M50", "M60"]
    cement_type: Literal["OPC", "PPC", "PSC", "SRC"]
    max_wc_ratio: float = Field(..., description="Maximum water/cement ratio by mass")
    min_cement_content: int = Field(..., description="Minimum cement content in kg/m3")
    nominal_cover: NominalCover
    admixtures: List[str] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)


class SteelRecommendation(BaseModel):
    """Structural system, lateral system and corrosion protection."""

    system: Literal["RCC", "Steel", "Composite", "PEB", "Modular"]
    corrosion_protection: List[str] = Field(default_factory=list)
    steel_grade: str
    lateral_system: str
    notes: List[str] = Field(default_factory=list)


class SuperstructureSuggestion(BaseModel):
    """Slab system suggestion."""

    slab_system: Literal["One-way", "Two-way", "Flat slab", "Waffle", "PT slab"]
    remarks: List[str] = Field(default_factory=list)


class RemediationPlan(BaseModel):
    """Ground improvement needed to reach a target bearing capacity."""

    target_qsafe: float = Field(..., description="Desired SBC in kPa")
    estimated_gain: float = Field(..., description="Required gain in kPa")
    methods: List[str] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)


class BoreLogRow(BaseModel):
    """Normalised bore-log row with defaults filled in."""

    depth_from: float
    depth_to: float
    soil_type: str
    gamma: float
    cohesion: float
    phi: float
    moisture: Optional[float] = None
    spt_n: Optional[float] = None
    plasticity_index: Optional[float] = None
    remarks: Optional[str] = None


class BoreLogResponse(BaseModel):
    """Normalised bore log plus advisory layer warnings."""

    rows: List[BoreLogRow] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class DesignBundle(BaseModel):
    """Everything the engine derives from a soil description."""

    qsafe: float = Field(..., description="Safe bearing capacity in kPa")
    governing_layer: Optional[SoilLayer] = None
    governing_layer_index: Optional[int] = None
    governing_depth: float = Field(..., description="Reference foundation depth in m")
    reference_width: float = Field(..., description="Reference footing width in m")
    void_ratio: float
    cbr: float = Field(..., description="Estimated CBR in %")
    inferred_soil_type: Optional[str] = None
    layers_synthesized: bool = False
    foundation_type: str
    max_floors: int
    exposure: ExposureClass
    concrete: ConcreteRecommendation
    steel: SteelRecommendation
    superstructure: SuperstructureSuggestion
    remediation: Optional[RemediationPlan] = None
    bore_log: List[BoreLogRow] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)


class DesignSummary(BaseModel):
    """Design bundle plus condensed human-readable messages."""

    bundle: DesignBundle
    messages: List[str] = Field(default_factory=list)


class SuitabilityTrack(BaseModel):
    """Score for one land use (building or agriculture)."""

    score: float
    recommendation: str
    limiting_factors: List[str] = Field(default_factory=list)
    details: Dict[str, float] = Field(default_factory=dict)


class DerivedMetrics(BaseModel):
    """Engineering outputs surfaced alongside the suitability scores."""

    void_ratio: float
    cbr: float
    qsafe: float
    foundation_type: str
    max_floors: int
    governing_layer_index: Optional[int] = None


class SoilSuitability(BaseModel):
    """Building and agriculture suitability for a soil description."""

    building: SuitabilityTrack
    agriculture: SuitabilityTrack
    overall_recommendation: Literal["building", "agriculture"]
    derived: DerivedMetrics


__all__ = [
    "SOIL_TYPES",
    "EnvironmentTag",
    "ExposureClass",
    "SoilLayer",
    "SoilDescription",
    "EnvironmentDescription",
    "AnalysisRequest",
    "BoreLogRequest",
    "NominalCover",
    "ConcreteRecommendation",
    "SteelRecommendation",
    "SuperstructureSuggestion",
    "RemediationPlan",
    "BoreLogRow",
    "BoreLogResponse",
    "DesignBundle",
    "DesignSummary",
    "SuitabilityTrack",
    "DerivedMetrics",
    "SoilSuitability",
]

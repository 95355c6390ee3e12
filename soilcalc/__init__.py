"""Soilcalc - Soil suitability and preliminary foundation design calculator."""

__version__ = "0.1.0"

from soilcalc.classification import (  # noqa: E402
    classify_foundation_type,
    compute_exposure_class,
    recommend_concrete,
    recommend_structural_system,
    suggest_slab_system,
)
from soilcalc.engine import evaluate, summarize  # noqa: E402
from soilcalc.layers import (  # noqa: E402
    build_bore_log,
    layer_at_depth,
    synthesize_layers,
    validate_layers,
)
from soilcalc.metrics import (  # noqa: E402
    compute_safe_bearing_capacity,
    compute_void_ratio,
    estimate_cbr,
)
from soilcalc.remediation import propose_remediation  # noqa: E402
from soilcalc.schemas import (  # noqa: E402
    DesignBundle,
    DesignSummary,
    EnvironmentDescription,
    SoilDescription,
    SoilLayer,
    SoilSuitability,
)
from soilcalc.suitability import score_suitability  # noqa: E402
from soilcalc.units import density_to_unit_weight, infer_soil_type  # noqa: E402

__all__ = [
    "__version__",
    "evaluate",
    "summarize",
    "score_suitability",
    "density_to_unit_weight",
    "infer_soil_type",
    "compute_void_ratio",
    "estimate_cbr",
    "compute_safe_bearing_capacity",
    "layer_at_depth",
    "synthesize_layers",
    "build_bore_log",
    "validate_layers",
    "classify_foundation_type",
    "compute_exposure_class",
    "recommend_concrete",
    "recommend_structural_system",
    "suggest_slab_system",
    "propose_remediation",
    "DesignBundle",
    "DesignSummary",
    "EnvironmentDescription",
    "SoilDescription",
    "SoilLayer",
    "SoilSuitability",
]

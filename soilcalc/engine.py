"""Soil suitability design engine.

Composes unit conversion, primary metrics, layer utilities, classification
tables and the remediation advisor into one :class:`DesignBundle`. Every
function here is pure: inputs are never mutated and identical inputs give
identical bundles.
"""

from __future__ import annotations

import logging
from typing import Optional

from soilcalc.classification import (
    classify_foundation_type,
    compute_exposure_class,
    estimate_max_floors,
    recommend_concrete,
    recommend_structural_system,
    suggest_slab_system,
)
from soilcalc.layers import build_bore_log, layer_at_depth, synthesize_layers
from soilcalc.metrics import compute_safe_bearing_capacity, compute_void_ratio, estimate_cbr
from soilcalc.remediation import propose_remediation, target_bearing_capacity
from soilcalc.schemas import (
    DesignBundle,
    DesignSummary,
    EnvironmentDescription,
    SoilDescription,
    SoilLayer,
)
from soilcalc.units import density_to_unit_weight, infer_soil_type, is_clayey, is_sandy

logger = logging.getLogger(__name__)

# Trial design footing
REFERENCE_DEPTH_M = 1.5
REFERENCE_WIDTH_M = 1.0

_FALLBACK_SOIL_TYPE = "silt"
_SANDY_PHI = 33.0
_DEFAULT_PHI = 28.0
_CLAYEY_COHESION = 20.0


def _resolve_layers(description: SoilDescription) -> tuple[list[SoilLayer], bool]:
    """Bore log if one was supplied, else a synthesised profile."""
    if description.layers:
        return list(description.layers), False
    return synthesize_layers(description), True


def _governing_layer(layers: list[SoilLayer], depth: float) -> tuple[SoilLayer, int]:
    layer = layer_at_depth(layers, depth)
    if layer is None:
        logger.debug("No layer contains %.2f m; first layer governs", depth)
        return layers[0], 0
    return layer, layers.index(layer)


def _strength_parameters(
    layer: SoilLayer, description: SoilDescription
) -> tuple[float, float, float]:
    """(gamma, phi, cohesion) for the governing layer with global fallbacks."""
    gamma = layer.gamma if layer.gamma is not None else density_to_unit_weight(description.density)

    if layer.phi is not None:
        phi = layer.phi
    elif description.phi is not None:
        phi = description.phi
    else:
        phi = _SANDY_PHI if is_sandy(layer.soil_type) else _DEFAULT_PHI

    if layer.cohesion is not None:
        cohesion = layer.cohesion
    elif description.cohesion is not None:
        cohesion = description.cohesion
    else:
        cohesion = _CLAYEY_COHESION if is_clayey(layer.soil_type) else 0.0

    return gamma, phi, cohesion


def _advisory_notes(description: SoilDescription) -> list[str]:
    notes: list[str] = []
    if description.ph < 5.5:
        notes.append(
            "Acidic soil: protect concrete (PPC/PSC/SRC) & rebars; "
            "consider pH correction/backfill."
        )
    if (description.moisture or 0) > 50:
        notes.append(
            "High moisture: provide sub-soil drainage & dewatering during foundation works."
        )
    if (description.temperature or 0) > 35:
        notes.append("Hot weather concreting precautions per IS 7861.")
    return notes


def evaluate(
    description: SoilDescription,
    environment: Optional[EnvironmentDescription] = None,
) -> DesignBundle:
    """
    Evaluate a soil description into a complete design bundle.

    Bearing capacity is computed for a trial footing at Df = 1.5 m and
    B = 1.0 m using the layer found at that depth (or the first layer).
    """
    layers, synthesized = _resolve_layers(description)
    layer, layer_index = _governing_layer(layers, REFERENCE_DEPTH_M)
    soil_type = layer.soil_type or _FALLBACK_SOIL_TYPE
    logger.debug("Governing layer %d (%s) at %.2f m", layer_index, soil_type, REFERENCE_DEPTH_M)

    gamma, phi, cohesion = _strength_parameters(layer, description)
    qsafe = compute_safe_bearing_capacity(
        cohesion, phi, gamma, REFERENCE_DEPTH_M, REFERENCE_WIDTH_M
    )

    exposure = compute_exposure_class(environment)
    remediation = propose_remediation(soil_type, qsafe, target_bearing_capacity(description))

    inferred = None
    if synthesized:
        inferred = infer_soil_type(
            description.sand_content, description.silt_content, description.clay_content
        )

    return DesignBundle(
        qsafe=qsafe,
        governing_layer=layer,
        governing_layer_index=layer_index,
        governing_depth=REFERENCE_DEPTH_M,
        reference_width=REFERENCE_WIDTH_M,
        void_ratio=compute_void_ratio(description.density, description.moisture),
        cbr=estimate_cbr(description.density, description.moisture, soil_type),
        inferred_soil_type=inferred,
        layers_synthesized=synthesized,
        foundation_type=classify_foundation_type(qsafe, soil_type, layers),
        max_floors=estimate_max_floors(description, qsafe),
        exposure=exposure,
        concrete=recommend_concrete(exposure, environment),
        steel=recommend_structural_system(description, environment),
        superstructure=suggest_slab_system(description),
        remediation=remediation,
        bore_log=build_bore_log(layers),
        notes=_advisory_notes(description),
    )


def _summary_messages(bundle: DesignBundle) -> list[str]:
    messages = [
        f"Safe Bearing Capacity (Df={bundle.governing_depth:.1f}m, "
        f"B={bundle.reference_width:.1f}m): {bundle.qsafe} kPa",
        f"Recommended foundation: {bundle.foundation_type}",
        f"Suggested maximum floors: {bundle.max_floors}",
        f"Exposure class: {bundle.exposure}, Concrete grade: {bundle.concrete.grade} "
        f"(w/c <= {bundle.concrete.max_wc_ratio})",
        f"Steel: {bundle.steel.system}, Lateral: {bundle.steel.lateral_system}",
        f"Slab system: {bundle.superstructure.slab_system}",
    ]
    if bundle.remediation:
        plan = bundle.remediation
        messages.append(
            f"Remediation advised to reach {plan.target_qsafe} kPa "
            f"(gain ~ {plan.estimated_gain} kPa): {'; '.join(plan.methods)}"
        )
    messages.extend(bundle.notes)
    return messages


def summarize(
    description: SoilDescription,
    environment: Optional[EnvironmentDescription] = None,
) -> DesignSummary:
    """Design bundle plus condensed bullet points for results pages and reports."""
    bundle = evaluate(description, environment)
    return DesignSummary(bundle=bundle, messages=_summary_messages(bundle))


__all__ = [
    "REFERENCE_DEPTH_M",
    "REFERENCE_WIDTH_M",
    "evaluate",
    "summarize",
]

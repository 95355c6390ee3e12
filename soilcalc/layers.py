"""Bore-log layer utilities.

Locating the governing layer, synthesising a profile when no bore log is
available, filling missing layer properties from soil-type defaults and
producing advisory warnings for malformed logs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from soilcalc.schemas import BoreLogRow, SoilDescription, SoilLayer
from soilcalc.units import (
    density_to_unit_weight,
    infer_soil_type,
    is_clayey,
    is_silty,
    normalize_tag,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayerDefaults:
    """Conservative default properties for a soil type."""

    gamma: float  # kN/m3
    phi: float  # degrees
    cohesion: float  # kPa


DEFAULT_LAYER_PROPERTIES: dict[str, LayerDefaults] = {
    "clay": LayerDefaults(gamma=18.0, phi=18.0, cohesion=25.0),
    "silty clay": LayerDefaults(gamma=18.0, phi=20.0, cohesion=15.0),
    "silt": LayerDefaults(gamma=18.5, phi=28.0, cohesion=5.0),
    "sandy silt": LayerDefaults(gamma=19.0, phi=30.0, cohesion=3.0),
    "sand": LayerDefaults(gamma=19.5, phi=33.0, cohesion=0.0),
    "silty sand": LayerDefaults(gamma=19.2, phi=31.0, cohesion=0.0),
    "gravel": LayerDefaults(gamma=20.0, phi=38.0, cohesion=0.0),
    "peat": LayerDefaults(gamma=12.0, phi=10.0, cohesion=0.0),
    "fill": LayerDefaults(gamma=17.0, phi=25.0, cohesion=5.0),
    "weathered rock": LayerDefaults(gamma=21.0, phi=35.0, cohesion=0.0),
    "rock": LayerDefaults(gamma=23.0, phi=40.0, cohesion=0.0),
}
# Free-text soil descriptions that match none of the above.
GENERIC_LAYER_DEFAULTS = LayerDefaults(gamma=18.0, phi=28.0, cohesion=0.0)

# ── Synthesised profile ──────────────────────────────────────────────
SHALLOW_LAYER = (0.0, 2.0)
DEEP_LAYER = (2.0, 6.0)
_FALLBACK_SOIL_TYPE = "silt"
_DEEP_SOIL_TYPE = {"sand": "silty sand", "clay": "silty clay"}

# ── Layer warnings ───────────────────────────────────────────────────
PHI_WARN_MAX = 60.0
MIN_LAYER_THICKNESS = 0.5
_DEPTH_TOLERANCE = 1e-6


def layer_defaults(soil_type: Optional[str]) -> LayerDefaults:
    """Default properties for ``soil_type``, generic ones for free text."""
    key = normalize_tag(soil_type)
    defaults = DEFAULT_LAYER_PROPERTIES.get(key)
    if defaults is None:
        logger.debug("No default properties for soil type %r; using generic values", soil_type)
        return GENERIC_LAYER_DEFAULTS
    return defaults


def layer_at_depth(layers: Sequence[SoilLayer], depth: float) -> Optional[SoilLayer]:
    """First layer whose interval [from_depth, to_depth) contains ``depth``."""
    for layer in layers:
        if layer.from_depth <= depth < layer.to_depth:
            return layer
    return None


def _strength_defaults(soil_type: str) -> tuple[float, float]:
    """(cohesion, phi) used for a synthesised shallow layer."""
    if is_clayey(soil_type):
        return 25.0, 18.0
    if is_silty(soil_type):
        return 10.0, 28.0
    return 0.0, 33.0


def synthesize_layers(description: SoilDescription) -> list[SoilLayer]:
    """Build a two-layer profile from bulk composition.

    Used when no bore log is supplied. The deeper layer is slightly stiffer
    and drier than the shallow one; this is a heuristic, not a physical model.
    """
    soil_type = (
        infer_soil_type(
            description.sand_content,
            description.silt_content,
            description.clay_content,
        )
        or _FALLBACK_SOIL_TYPE
    )
    gamma = density_to_unit_weight(description.density)
    cohesion, phi = _strength_defaults(soil_type)

    shallow = SoilLayer(
        from_depth=SHALLOW_LAYER[0],
        to_depth=SHALLOW_LAYER[1],
        soil_type=soil_type,
        gamma=gamma,
        moisture=description.moisture,
        cohesion=cohesion,
        phi=phi,
        remarks="Synthesized layer from composition",
    )
    deep = SoilLayer(
        from_depth=DEEP_LAYER[0],
        to_depth=DEEP_LAYER[1],
        soil_type=_DEEP_SOIL_TYPE.get(soil_type, soil_type),
        gamma=max(18.0, gamma + 0.5),
        moisture=max(10.0, (description.moisture or 15.0) - 5.0),
        cohesion=max(0.0, cohesion - 5.0),
        phi=min(36.0, phi + 2.0),
        remarks="Synthesized deeper layer",
    )
    logger.debug("Synthesized two-layer profile of %s from composition", soil_type)
    return [shallow, deep]


def build_bore_log(layers: Sequence[SoilLayer]) -> list[BoreLogRow]:
    """Normalise layers into bore-log rows.

    Missing gamma, phi and cohesion come from :data:`DEFAULT_LAYER_PROPERTIES`;
    explicit values are kept as given.
    """
    rows: list[BoreLogRow] = []
    for layer in layers:
        defaults = layer_defaults(layer.soil_type)
        rows.append(
            BoreLogRow(
                depth_from=layer.from_depth,
                depth_to=layer.to_depth,
                soil_type=layer.soil_type,
                gamma=layer.gamma if layer.gamma is not None else defaults.gamma,
                cohesion=layer.cohesion if layer.cohesion is not None else defaults.cohesion,
                phi=layer.phi if layer.phi is not None else defaults.phi,
                moisture=layer.moisture,
                spt_n=layer.spt_n,
                plasticity_index=layer.plasticity_index,
                remarks=layer.remarks,
            )
        )
    return rows


def validate_layers(layers: Sequence[SoilLayer]) -> list[str]:
    """Advisory warnings for a bore log. Never raises.

    Layers are checked in depth order; numbering in the messages follows
    that order.
    """
    messages: list[str] = []
    ordered = sorted(layers, key=lambda layer: layer.from_depth)

    for i, layer in enumerate(ordered, start=1):
        if layer.to_depth <= layer.from_depth:
            messages.append(f'Layer {i}: "Depth To" must be greater than "Depth From".')
        if layer.gamma is not None and layer.gamma <= 0:
            messages.append(f"Layer {i}: unit weight must be positive.")
        if layer.cohesion is not None and layer.cohesion < 0:
            messages.append(f"Layer {i}: cohesion cannot be negative.")
        if layer.phi is not None and not 0 <= layer.phi <= PHI_WARN_MAX:
            messages.append(
                f"Layer {i}: friction angle should be in 0-{PHI_WARN_MAX:.0f} deg. "
                f"Current: {layer.phi:g}"
            )
        if i > 1:
            previous = ordered[i - 2]
            if layer.from_depth < previous.to_depth - _DEPTH_TOLERANCE:
                messages.append(f"Layer {i}: overlaps previous layer. Check depths.")
            elif layer.from_depth > previous.to_depth + _DEPTH_TOLERANCE:
                messages.append(
                    f"Layer {i}: gap of {layer.from_depth - previous.to_depth:.2f} m "
                    "below previous layer. Depths should be continuous."
                )
    return messages


def fix_layer_continuity(layers: Sequence[SoilLayer]) -> list[SoilLayer]:
    """Return copies of ``layers`` where each starts at the previous one's end.

    Thickness is preserved, with a minimum of 0.5 m.
    """
    fixed: list[SoilLayer] = []
    for layer in layers:
        if fixed and layer.from_depth != fixed[-1].to_depth:
            start = fixed[-1].to_depth
            thickness = max(MIN_LAYER_THICKNESS, layer.to_depth - layer.from_depth)
            layer = layer.model_copy(update={"from_depth": start, "to_depth": start + thickness})
        fixed.append(layer)
    return fixed


__all__ = [
    "LayerDefaults",
    "DEFAULT_LAYER_PROPERTIES",
    "GENERIC_LAYER_DEFAULTS",
    "layer_defaults",
    "layer_at_depth",
    "synthesize_layers",
    "build_bore_log",
    "validate_layers",
    "fix_layer_continuity",
]

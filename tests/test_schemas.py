"""Tests for soilcalc schemas."""

import pytest
from pydantic import ValidationError

from soilcalc.schemas import (
    AnalysisRequest,
    EnvironmentDescription,
    SoilDescription,
    SoilLayer,
)


def test_soil_description_defaults():
    """Defaults mirror the analysis form's initial state."""
    soil = SoilDescription()
    assert soil.ph == 7.0
    assert soil.density == 1.7
    assert soil.building_type == "residential"
    assert soil.planned_floors == 2
    assert soil.layers is None


def test_soil_description_accepts_out_of_range_values():
    """Out-of-range soil values degrade in the engine instead of failing here."""
    soil = SoilDescription(density=9.0, moisture=-5, clay_content=300)
    assert soil.density == 9.0


def test_soil_description_rejects_non_numeric():
    with pytest.raises(ValidationError):
        SoilDescription(ph="acidic")


def test_soil_layer_inverted_depths_are_accepted():
    layer = SoilLayer(from_depth=2.0, to_depth=1.0, soil_type="clay")
    assert layer.thickness == 0.0


def test_soil_layer_thickness():
    layer = SoilLayer(from_depth=1.0, to_depth=3.5, soil_type="sand")
    assert layer.thickness == 2.5
    assert layer.gamma is None


def test_environment_defaults():
    env = EnvironmentDescription()
    assert env.tags == []
    assert env.seismic_zone is None
    assert env.sulfate_exposure is None


def test_environment_unknown_tag():
    with pytest.raises(ValidationError):
        EnvironmentDescription(tags=["lunar"])


@pytest.mark.parametrize("zone", [1, 6])
def test_environment_seismic_zone_range(zone):
    with pytest.raises(ValidationError):
        EnvironmentDescription(seismic_zone=zone)


def test_environment_sulfate_levels():
    with pytest.raises(ValidationError):
        EnvironmentDescription(sulfate_exposure="extreme")


def test_analysis_request_from_json():
    request = AnalysisRequest.model_validate(
        {
            "soil": {"ph": 6.5, "layers": [{"from_depth": 0, "to_depth": 2, "soil_type": "silt"}]},
            "environment": {"tags": ["urban"], "chloride_risk": "moderate"},
        }
    )
    assert request.soil.layers[0].soil_type == "silt"
    assert request.environment.chloride_risk == "moderate"

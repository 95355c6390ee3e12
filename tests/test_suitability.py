"""Tests for building and agriculture suitability scoring."""

import pytest

from soilcalc.suitability import (
    LIMITING_THRESHOLD,
    agriculture_moisture_score,
    agriculture_ph_score,
    bearing_ratio_score,
    building_moisture_score,
    building_ph_score,
    organic_matter_score,
    score_suitability,
    temperature_score,
    void_ratio_score,
)


class TestSubScores:
    def test_building_ph(self):
        assert building_ph_score(7) == 100
        assert building_ph_score(4) == pytest.approx(40)
        assert building_ph_score(10) == pytest.approx(40)
        assert building_ph_score(1) == 0

    def test_building_moisture(self):
        assert building_moisture_score(10) == 100
        assert building_moisture_score(20) == 100
        assert building_moisture_score(30) == pytest.approx(75)
        assert building_moisture_score(40) == pytest.approx(50)
        assert building_moisture_score(50) == pytest.approx(20)
        assert building_moisture_score(80) == 0

    def test_bearing_ratio(self):
        assert bearing_ratio_score(7.5) == pytest.approx(50)
        assert bearing_ratio_score(30) == 100

    def test_void_ratio(self):
        assert void_ratio_score(0.4) == 100
        assert void_ratio_score(1.0) == pytest.approx(40)
        assert void_ratio_score(1.25) == pytest.approx(20)
        assert void_ratio_score(3.0) == 0

    def test_agriculture_curves(self):
        assert agriculture_ph_score(6.5) == 100
        assert agriculture_ph_score(4.0) == pytest.approx(50)
        assert agriculture_moisture_score(10) == pytest.approx(60)
        assert agriculture_moisture_score(60) == pytest.approx(50)
        assert organic_matter_score(2.5) == pytest.approx(50)
        assert organic_matter_score(7) == 100
        assert organic_matter_score(14) == pytest.approx(80)
        assert temperature_score(10) == pytest.approx(75)
        assert temperature_score(40) == pytest.approx(40)


class TestScoreSuitability:
    def test_default_form(self, sample_soil):
        result = score_suitability(sample_soil)

        # pH 100, moisture 100, CBR 5 -> 33.3, void ratio 0.87 -> 55.6
        assert result.building.score == pytest.approx(65.6, abs=0.1)
        assert result.building.recommendation == "Suitable for building with standard checks"
        assert result.building.limiting_factors == ["bearing ratio", "void ratio"]

        # pH 100, moisture 100, organic matter 50, temperature 100
        assert result.agriculture.score == pytest.approx(87.5)
        assert result.agriculture.recommendation == "Excellent for agriculture"
        assert result.agriculture.limiting_factors == ["organic matter"]

        assert result.overall_recommendation == "agriculture"

    def test_wet_acidic_soil(self, sample_soil):
        soil = sample_soil.model_copy(update={"moisture": 80, "ph": 4, "planned_floors": 20})
        result = score_suitability(soil)

        assert result.building.details["ph_score"] < LIMITING_THRESHOLD
        assert result.building.details["moisture_score"] < LIMITING_THRESHOLD
        assert "pH" in result.building.limiting_factors
        assert "moisture" in result.building.limiting_factors
        # 20 residential floors need 200 kPa, more than the ~159 kPa available
        assert "bearing capacity below target" in result.building.limiting_factors
        assert result.building.score < 40
        assert result.building.recommendation.startswith("Not recommended")
        assert "pH" in result.agriculture.limiting_factors

    def test_derived_metrics_match_bundle(self, sample_soil):
        result = score_suitability(sample_soil)
        assert result.derived.qsafe == pytest.approx(158.8, abs=0.1)
        assert result.derived.cbr == 5.0
        assert result.derived.void_ratio == 0.87
        assert result.derived.foundation_type == "Raft/Mat Foundation (IS 8009)"
        assert result.derived.governing_layer_index == 0

    def test_scores_are_bounded(self, sample_soil):
        extreme = sample_soil.model_copy(
            update={"ph": 14, "moisture": 300, "temperature": -40, "organic_matter": 80,
                    "density": 0.1}
        )
        result = score_suitability(extreme)
        assert 0 <= result.building.score <= 100
        assert 0 <= result.agriculture.score <= 100

    def test_dense_dry_soil_favours_building(self, sample_soil):
        soil = sample_soil.model_copy(
            update={"density": 2.1, "moisture": 8, "organic_matter": 0.5,
                    "sand_content": 70, "silt_content": 15, "clay_content": 15}
        )
        result = score_suitability(soil)
        assert result.building.score >= 80
        assert result.overall_recommendation == "building"

    def test_degraded_composition_still_scores(self, sample_soil):
        soil = sample_soil.model_copy(
            update={"sand_content": 0, "silt_content": 0, "clay_content": 0}
        )
        result = score_suitability(soil)
        # Synthesised silt profile: base 5 plus the 1.6 g/cm3 density bonus
        assert result.derived.cbr == 7.0
        assert result.building.score > 0

"""Tests for void ratio, CBR and bearing capacity calculators."""

import math

import pytest

from soilcalc.metrics import (
    CBR_MAX,
    CBR_MIN,
    bearing_capacity_factors,
    compute_safe_bearing_capacity,
    compute_void_ratio,
    estimate_cbr,
)


class TestVoidRatio:
    def test_typical_value(self):
        # gamma = 16.677, gamma_d = 13.8975 -> e = 0.87
        assert compute_void_ratio(1.7, 20) == pytest.approx(0.87)

    def test_monotonic_in_moisture(self):
        values = [compute_void_ratio(1.7, w) for w in range(0, 260, 5)]
        assert all(b >= a for a, b in zip(values, values[1:]))

    def test_never_negative(self):
        for density in (0.1, 1.0, 2.0, 2.8, 3.5):
            for moisture in (-20, 0, 10, 80, 500):
                assert compute_void_ratio(density, moisture) >= 0

    def test_dense_dry_soil_clamps_to_zero(self):
        assert compute_void_ratio(2.8, 0) == 0.0


class TestCBR:
    def test_base_values_by_soil_type(self):
        assert estimate_cbr(1.5, 20, "sand") == 8.0
        assert estimate_cbr(1.5, 20, "sandy silt") == 5.0
        assert estimate_cbr(1.5, 20, "silty clay") == 3.0
        assert estimate_cbr(1.5, 20, "peat") == 6.0
        assert estimate_cbr(1.5, 20) == 6.0

    def test_density_bonus_tiers(self):
        assert estimate_cbr(1.6, 20, "clay") == 5.0
        assert estimate_cbr(1.8, 20, "clay") == 7.0
        assert estimate_cbr(2.0, 20, "clay") == 9.0

    def test_moisture_penalty_above_25(self):
        assert estimate_cbr(1.5, 35, "sand") == pytest.approx(6.5)

    def test_soil_type_is_case_insensitive(self):
        assert estimate_cbr(1.5, 20, "Sand") == 8.0

    @pytest.mark.parametrize(
        "density,moisture",
        [(-5, -50), (0, 0), (10, 0), (100, -1000), (1.7, 500), (-1, 1e6)],
    )
    def test_clamped(self, density, moisture):
        cbr = estimate_cbr(density, moisture, "sand")
        assert CBR_MIN <= cbr <= CBR_MAX


class TestBearingCapacity:
    def test_factors_at_phi_zero_are_finite(self):
        factors = bearing_capacity_factors(0)
        assert factors.nq == pytest.approx(1.0)
        assert factors.nc == pytest.approx(0.0, abs=1e-9)
        assert factors.ngamma == pytest.approx(0.0, abs=1e-9)

    def test_factors_at_thirty_degrees(self):
        factors = bearing_capacity_factors(30)
        assert factors.nq == pytest.approx(18.40, abs=0.01)
        assert factors.nc == pytest.approx(30.14, abs=0.01)

    def test_phi_is_clamped_to_45(self):
        assert bearing_capacity_factors(60) == bearing_capacity_factors(45)

    def test_phi_zero_clay_does_not_divide_by_zero(self):
        q = compute_safe_bearing_capacity(0, 0, 18, 1.5, 1.0)
        assert math.isfinite(q)
        assert q == pytest.approx(9.0)

    def test_cohesion_adds_nothing_at_phi_zero(self):
        # Nc = 0, so only the surcharge term gamma * Df / 3 remains
        q = compute_safe_bearing_capacity(50, 0, 18, 1.5, 1.0)
        assert q == pytest.approx(9.0)

    def test_default_profile_value(self):
        q = compute_safe_bearing_capacity(25, 18, 1.7 * 9.81, 1.5, 1.0)
        assert q == pytest.approx(158.8, abs=0.1)

    def test_never_negative(self):
        assert compute_safe_bearing_capacity(-100, 10, 18, 1.5, 1.0) == 0.0

    def test_increases_with_friction_angle(self):
        low = compute_safe_bearing_capacity(0, 25, 18, 1.5, 1.0)
        high = compute_safe_bearing_capacity(0, 35, 18, 1.5, 1.0)
        assert high > low

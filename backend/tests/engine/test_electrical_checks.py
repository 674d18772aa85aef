"""Tests for engine.design voltage, current and loading checks."""

from __future__ import annotations

import dataclasses
import math

import pytest

from engine.design import (
    RatioStatus,
    analyze_loading,
    check_current,
    classify_ratio,
    normalized_temp_coeff,
    voltage_limits,
)


# ======================================================================
# Voltage limits
# ======================================================================


class TestVoltageLimits:
    """Tests for voltage_limits()."""

    def test_voc_at_cold(self, panel_550, inverter_20kw):
        """Voc rises 0.27 %/degC over the 35 degC drop to -10 degC."""
        limits = voltage_limits(panel_550, inverter_20kw)
        assert limits.voc_at_cold == pytest.approx(49.8 * (1 + 35 * 0.0027))

    def test_max_panels_per_string(self, panel_550, inverter_20kw):
        limits = voltage_limits(panel_550, inverter_20kw)
        assert limits.max_panels_per_string == math.floor(1100 / (49.8 * (1 + 35 * 0.0027)))
        assert limits.max_panels_per_string == 20

    def test_min_panels_per_string(self, panel_550, inverter_20kw):
        """Vmpp drops 0.27 %/degC over the 45 degC rise to 70 degC."""
        limits = voltage_limits(panel_550, inverter_20kw)
        vmpp_hot = 41.9 * (1 - 45 * 0.0027)
        assert limits.vmpp_at_hot == pytest.approx(vmpp_hot)
        assert limits.min_panels_per_string == math.ceil(200 / vmpp_hot) == 6
        assert limits.is_feasible

    def test_positive_coefficient_treated_as_negative(self, panel_550, inverter_20kw):
        flipped = dataclasses.replace(panel_550, temp_coeff_voc=0.27)
        assert voltage_limits(flipped, inverter_20kw) == voltage_limits(panel_550, inverter_20kw)
        assert normalized_temp_coeff(0.27) == -0.27

    def test_infeasible_window(self, panel_550, inverter_20kw):
        """A high MPPT floor with a low voltage ceiling inverts the bounds."""
        narrow = dataclasses.replace(inverter_20kw, max_input_voltage=300, mppt_min_voltage=290)
        limits = voltage_limits(panel_550, narrow)
        assert limits.max_panels_per_string < limits.min_panels_per_string
        assert not limits.is_feasible


# ======================================================================
# Current
# ======================================================================


class TestCurrentCheck:
    """Tests for check_current()."""

    def test_within_limit(self, panel_550, inverter_20kw):
        check = check_current(panel_550, inverter_20kw)
        assert check.is_safe
        assert check.panel_isc == 13.9
        assert check.inverter_max_current == 22

    def test_equal_is_safe(self, panel_550, inverter_20kw):
        inv = dataclasses.replace(inverter_20kw, max_current_per_mppt=13.9)
        assert check_current(panel_550, inv).is_safe

    def test_overload(self, panel_550, inverter_20kw):
        inv = dataclasses.replace(inverter_20kw, max_current_per_mppt=13.5)
        assert not check_current(panel_550, inv).is_safe


# ======================================================================
# Loading
# ======================================================================


class TestLoading:
    """Tests for classify_ratio() and analyze_loading()."""

    @pytest.mark.parametrize(
        "ratio, status",
        [
            (0.5, RatioStatus.UNDERLOADED),
            (0.79, RatioStatus.UNDERLOADED),
            (0.8, RatioStatus.NOMINAL),
            (1.1, RatioStatus.NOMINAL),
            (1.2, RatioStatus.OPTIMAL),
            (1.35, RatioStatus.OPTIMAL),
            (1.36, RatioStatus.CLIPPING),
        ],
    )
    def test_bands(self, ratio, status):
        assert classify_ratio(ratio) == status

    def test_ratio(self, panel_550, inverter_20kw):
        """40 x 550 W on a 20 kW inverter -> 1.1."""
        check = analyze_loading(40, panel_550, inverter_20kw)
        assert check.ratio == pytest.approx(1.1)

    def test_no_panels(self, panel_550, inverter_20kw):
        check = analyze_loading(0, panel_550, inverter_20kw)
        assert check.ratio == 0.0
        assert check.status == RatioStatus.UNDERLOADED

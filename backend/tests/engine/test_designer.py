"""Tests for engine.design.designer — full design pipeline."""

from __future__ import annotations

import dataclasses

import pytest

from engine.design import RatioStatus, Severity, design
from engine.equipment import get_battery, get_heat_pump


def _texts(result, severity):
    return [m.text for m in result.report.messages_with(severity)]


class TestDesign:
    """Tests for design()."""

    def test_valid_flush_design(self, panel_550, inverter_20kw):
        result = design(39.93, 10, 10, panel_550, inverter_20kw)
        report = result.report

        assert result.layout.total_panel_count == 32
        assert report.is_valid
        assert report.ratio_status == RatioStatus.NOMINAL
        assert report.ac_dc_ratio == pytest.approx(0.88)
        assert [(c.mppt_id, c.string_count, c.panels_per_string) for c in report.electrical_config] == [
            (1, 1, 16),
            (2, 1, 16),
        ]
        assert report.voltage_check.max_panels_per_string == 20
        assert report.voltage_check.min_panels_per_string == 6
        assert report.messages_with(Severity.ERROR) == []
        assert report.messages_with(Severity.WARNING) == []

    def test_message_order(self, panel_550, inverter_20kw):
        """Voltage, current, electrical layout, then loading."""
        result = design(39.93, 10, 10, panel_550, inverter_20kw)
        texts = [m.text for m in result.report.messages]
        assert texts[0].startswith("String length range")
        assert texts[1].startswith("Panel Isc")
        assert texts[2].startswith("Electrical layout")
        assert texts[3].startswith("DC/AC ratio")

    def test_flush_row_spacing(self, panel_550, inverter_20kw):
        result = design(39.93, 10, 10, panel_550, inverter_20kw, is_flat_roof=False)
        assert result.min_row_spacing == 0.05

    def test_flat_roof_row_spacing(self, panel_550, inverter_20kw):
        result = design(39.93, 10, 10, panel_550, inverter_20kw, is_flat_roof=True)
        assert result.min_row_spacing == result.shadow.min_spacing
        assert result.shadow.altitude_deg == pytest.approx(26.62)

    def test_empty_roof(self, panel_550, inverter_20kw):
        result = design(39.93, 0, 0, panel_550, inverter_20kw)
        assert result.layout.total_panel_count == 0
        assert result.report.is_valid
        assert result.report.electrical_config == ()
        assert result.report.ratio_status == RatioStatus.UNDERLOADED
        assert any("No panels fit" in t for t in _texts(result, Severity.WARNING))

    @pytest.mark.parametrize("width, length", [(float("nan"), 10), (10, float("inf"))])
    def test_non_finite_roof(self, panel_550, inverter_20kw, width, length):
        result = design(39.93, width, length, panel_550, inverter_20kw)
        assert result.layout.total_panel_count == 0
        assert result.report.electrical_config == ()
        assert any("No panels fit" in t for t in _texts(result, Severity.WARNING))

    def test_prime_panel_count_fails_distribution(self, panel_550, inverter_20kw):
        """One row of 23 modules: 23 has no divisor in [6, 20]."""
        result = design(39.93, 26.6, 2.4, panel_550, inverter_20kw)
        assert result.layout.total_panel_count == 23
        assert not result.report.is_valid
        assert result.report.electrical_config == ()
        assert any("String distribution failed" in t for t in _texts(result, Severity.ERROR))

    def test_infeasible_voltage_window(self, panel_550, inverter_20kw):
        inv = dataclasses.replace(inverter_20kw, max_input_voltage=300, mppt_min_voltage=290)
        result = design(39.93, 10, 10, panel_550, inv)
        assert not result.report.is_valid
        errors = _texts(result, Severity.ERROR)
        assert any("inverter window" in t for t in errors)

    def test_current_overload_is_warning_only(self, panel_550, inverter_20kw):
        inv = dataclasses.replace(inverter_20kw, max_current_per_mppt=13.5)
        result = design(39.93, 10, 10, panel_550, inv)
        assert result.report.is_valid
        assert not result.report.current_check.is_safe
        assert any("exceeds the MPPT input limit" in t for t in _texts(result, Severity.WARNING))

    def test_clipping_warning(self, panel_550, inverter_20kw):
        small = dataclasses.replace(inverter_20kw, power_kw=10)
        result = design(39.93, 10, 10, panel_550, small)
        assert result.report.ratio_status == RatioStatus.CLIPPING
        assert any("clipping" in t for t in _texts(result, Severity.WARNING))


class TestAddOns:
    """Battery and heat-pump notes."""

    def test_compatible_battery(self, panel_550, inverter_20kw):
        result = design(39.93, 10, 10, panel_550, inverter_20kw, battery=get_battery("b1"))
        assert any("is compatible with Huawei" in t for t in _texts(result, Severity.SUCCESS))

    def test_incompatible_battery(self, panel_550, inverter_20kw):
        fronius = dataclasses.replace(inverter_20kw, brand="Fronius")
        result = design(39.93, 10, 10, panel_550, fronius, battery=get_battery("b1"))
        assert result.report.is_valid
        assert any("not listed as compatible" in t for t in _texts(result, Severity.WARNING))

    def test_universal_battery(self, panel_550, inverter_20kw):
        kostal = dataclasses.replace(inverter_20kw, brand="Kostal")
        result = design(39.93, 10, 10, panel_550, kostal, battery=get_battery("b3"))
        assert any("compatible with Kostal" in t for t in _texts(result, Severity.SUCCESS))

    def test_heat_pump_note(self, panel_550, inverter_20kw):
        result = design(39.93, 10, 10, panel_550, inverter_20kw, heat_pump=get_heat_pump("hp2"))
        assert result.heat_pump.electrical_power_kw == pytest.approx(8.5 / 4.2)
        assert any("Heat pump" in t for t in _texts(result, Severity.SUCCESS))

    def test_to_dict(self, panel_550, inverter_20kw):
        data = design(39.93, 10, 10, panel_550, inverter_20kw, heat_pump=get_heat_pump("hp1")).to_dict()
        assert data["battery"] is None
        assert data["heat_pump"]["id"] == "hp1"
        assert data["report"]["ratio_status"] == "nominal"
        assert data["report"]["messages"][0]["severity"] == "success"
        assert len(data["layout"]["panels"]) == 32

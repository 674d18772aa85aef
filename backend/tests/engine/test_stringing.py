"""Tests for engine.design.stringing — symmetric string / MPPT search."""

from __future__ import annotations

import dataclasses

import pytest

from engine.design import DistributionFailure, DistributionSuccess, distribute_strings


class TestDistributeStrings:
    """Tests for distribute_strings()."""

    def test_twenty_panels_two_mppts(self, inverter_20kw):
        """20 panels in [8, 13]: 13, 12, 11 do not divide, 10 does -> 2 x 10."""
        outcome = distribute_strings(20, inverter_20kw, 8, 13)
        assert isinstance(outcome, DistributionSuccess)
        assert outcome.success
        assert outcome.string_length == 10
        assert [(c.mppt_id, c.string_count, c.panels_per_string) for c in outcome.config] == [
            (1, 1, 10),
            (2, 1, 10),
        ]

    def test_no_divisor_in_range(self, inverter_20kw):
        """7 panels have no divisor in [8, 13]."""
        outcome = distribute_strings(7, inverter_20kw, 8, 13)
        assert isinstance(outcome, DistributionFailure)
        assert not outcome.success
        assert outcome.config == ()
        assert "7 panels" in outcome.error

    def test_zero_panels_is_empty_success(self, inverter_20kw):
        outcome = distribute_strings(0, inverter_20kw, 8, 13)
        assert outcome.success
        assert outcome.config == ()
        assert outcome.string_length is None

    def test_prefers_longest_string(self, inverter_20kw):
        """24 panels in [6, 20]: 12 is the longest divisor."""
        outcome = distribute_strings(24, inverter_20kw, 6, 20)
        assert outcome.string_length == 12
        assert sum(c.panel_count for c in outcome.config) == 24

    def test_input_capacity_limits_string_count(self, inverter_20kw):
        """50 panels in [8, 13] need 5 strings of 10 but only 4 inputs exist."""
        outcome = distribute_strings(50, inverter_20kw, 8, 13)
        assert not outcome.success

    def test_uneven_spread_over_mppts(self, inverter_20kw):
        """3 strings over 2 MPPTs: ceil(3/2) = 2 on the first, 1 on the second."""
        outcome = distribute_strings(30, inverter_20kw, 8, 10)
        assert outcome.string_length == 10
        assert [c.string_count for c in outcome.config] == [2, 1]

    def test_strings_capped_per_mppt(self, inverter_20kw):
        inv = dataclasses.replace(inverter_20kw, mppt_count=3, max_strings_per_mppt=2)
        outcome = distribute_strings(50, inv, 8, 10)
        assert outcome.string_length == 10
        assert [c.string_count for c in outcome.config] == [2, 2, 1]

    def test_inverted_limits_fail(self, inverter_20kw):
        outcome = distribute_strings(20, inverter_20kw, 12, 5)
        assert not outcome.success
        assert "inverted" in outcome.error

    @pytest.mark.parametrize("total", [20, 7, 50])
    def test_repeat_calls_give_equal_outcomes(self, inverter_20kw, total):
        """The distribution holds no state between calls."""
        first = distribute_strings(total, inverter_20kw, 8, 13)
        second = distribute_strings(total, inverter_20kw, 8, 13)
        assert first == second
        assert first.config == second.config

    @pytest.mark.parametrize("total", [10, 16, 18, 20, 26, 40])
    def test_config_accounts_for_every_panel(self, inverter_20kw, total):
        outcome = distribute_strings(total, inverter_20kw, 5, 20)
        assert outcome.success
        assert sum(c.panel_count for c in outcome.config) == total
        assert all(c.string_count <= inverter_20kw.max_strings_per_mppt for c in outcome.config)

    def test_to_dict(self, inverter_20kw):
        assert distribute_strings(7, inverter_20kw, 8, 13).to_dict()["success"] is False
        data = distribute_strings(20, inverter_20kw, 8, 13).to_dict()
        assert data["config"][0] == {"mppt_id": 1, "string_count": 1, "panels_per_string": 10}

"""Tests for per-path selection and scoring."""

import math

import pytest

from relative_mcp.services.discovery_service import DIRECT_PATH_ID, discover
from relative_mcp.services.entry_definitions import ReferenceEntry
from relative_mcp.services.rule_definitions import get_rule
from relative_mcp.services.selection_service import (
    MAX_DURATION_HOURS,
    MIN_DURATION_HOURS,
    PathKind,
    duration_hours,
    group_candidates,
    pick_biggest_fit,
    score_duration,
    select,
    select_path,
)
from relative_mcp.services.unit_definitions import Dimension


def _select_direct(value, entries, entry_overrides=None):
    candidates = discover(value, Dimension.POWER, entries=entries, rules=())
    return select(group_candidates(candidates), value, Dimension.POWER, entry_overrides)


def _power_entries(*watts):
    return [ReferenceEntry(f"p{w}", f"{w} W thing", "⚡", w, "W", "test entry") for w in watts]


class TestCountSelection:
    """Tests for direct and count paths."""

    def test_biggest_fit(self, ladder_entries):
        results = _select_direct(250.0, ladder_entries)
        assert len(results) == 1
        assert results[0].entry.id == "p100"
        assert results[0].ratio == 2.5
        assert results[0].path_kind is PathKind.DIRECT

    def test_exact_fit_wins(self, ladder_entries):
        results = _select_direct(1000.0, ladder_entries)
        assert results[0].entry.id == "p1000"
        assert results[0].ratio == 1.0

    def test_falls_back_below_one(self, ladder_entries):
        results = _select_direct(0.5, ladder_entries)
        assert results[0].entry.id == "p1"
        assert results[0].ratio == 0.5

    def test_threshold_excludes_small_counts(self, ladder_entries):
        results = _select_direct(5.0, ladder_entries)
        alternative_ids = [alt.entry.id for alt in results[0].alternatives]
        assert "p1000" not in alternative_ids
        assert "p100" not in alternative_ids
        assert alternative_ids == ["p10", "p1"]

    def test_all_below_threshold_omits_path(self, ladder_entries):
        assert _select_direct(0.05, ladder_entries) == []

    def test_alternatives_largest_first(self, ladder_entries):
        results = _select_direct(2000.0, ladder_entries)
        values = [alt.entry.base_value for alt in results[0].alternatives]
        assert values == sorted(values, reverse=True)

    def test_ties_keep_table_order(self):
        entries = _power_entries(5, 5)
        entries[1] = ReferenceEntry("other", "Other 5 W thing", "⚡", 5, "W", "test entry")
        results = _select_direct(50.0, entries)
        assert results[0].entry.id == "p5"

    def test_pick_biggest_fit_empty(self):
        assert pick_biggest_fit([]) is None


class TestEntryOverride:
    """Tests for forced entry choices."""

    def test_override_wins(self, ladder_entries):
        results = _select_direct(250.0, ladder_entries, {DIRECT_PATH_ID: "p1"})
        assert results[0].entry.id == "p1"
        assert results[0].ratio == 250.0
        assert results[0].overridden is True

    def test_override_bypasses_threshold(self, ladder_entries):
        results = _select_direct(5.0, ladder_entries, {DIRECT_PATH_ID: "p1000"})
        assert results[0].entry.id == "p1000"
        assert results[0].ratio == pytest.approx(0.005)
        assert "p1000" not in [alt.entry.id for alt in results[0].alternatives]

    def test_unknown_override_is_ignored(self, ladder_entries):
        results = _select_direct(250.0, ladder_entries, {DIRECT_PATH_ID: "nope"})
        assert results[0].entry.id == "p100"
        assert results[0].overridden is False

    def test_override_for_other_path_is_ignored(self, ladder_entries):
        results = _select_direct(250.0, ladder_entries, {"energy-to-money-electricity": "p1"})
        assert results[0].entry.id == "p100"


class TestDurationSelection:
    """Tests for the running time path."""

    def _select_running_time(self, energy_wh, entries):
        rules = (get_rule("power-energy-duration"),)
        candidates = discover(energy_wh, Dimension.ENERGY, entries=entries, rules=rules)
        return select(group_candidates(candidates), energy_wh, Dimension.ENERGY)

    def test_picks_most_readable_duration(self):
        results = self._select_running_time(1000.0, _power_entries(1, 100, 10000))
        assert len(results) == 1
        assert results[0].path_kind is PathKind.DURATION
        assert results[0].entry.id == "p100"
        assert results[0].duration_hours == 10.0

    def test_out_of_range_excluded(self):
        # 1 Wh on a 1 kW load lasts 3.6 seconds, below the one-minute floor.
        results = self._select_running_time(1.0, _power_entries(1, 1000))
        assert results[0].entry.id == "p1"
        assert [alt.entry.id for alt in results[0].alternatives] == ["p1"]

    def test_path_omitted_when_nothing_in_range(self):
        assert self._select_running_time(1.0, _power_entries(1000)) == []

    def test_alternatives_carry_durations(self):
        results = self._select_running_time(1000.0, _power_entries(1, 100, 10000))
        hours = {alt.entry.id: alt.duration_hours for alt in results[0].alternatives}
        assert hours == {"p10000": 0.1, "p100": 10.0, "p1": 1000.0}


class TestDurationHelpers:
    """Tests for duration_hours and score_duration."""

    def test_energy_input(self):
        entry = _power_entries(100)[0]
        assert duration_hours(1000.0, Dimension.ENERGY, entry) == 10.0

    def test_power_input(self):
        entry = ReferenceEntry("e", "Energy thing", "🔋", 500, "Wh", "test entry")
        assert duration_hours(50.0, Dimension.POWER, entry) == 10.0

    def test_other_dimension(self):
        entry = _power_entries(100)[0]
        assert duration_hours(10.0, Dimension.MONEY, entry) is None

    def test_ideal_scores_zero(self):
        assert score_duration(10.0) == 0

    def test_symmetric_in_log_space(self):
        assert score_duration(1.0) == pytest.approx(score_duration(100.0))

    def test_bounds(self):
        assert score_duration(MIN_DURATION_HOURS) > -math.inf
        assert score_duration(MAX_DURATION_HOURS) > -math.inf
        assert score_duration(MIN_DURATION_HOURS / 2) == -math.inf
        assert score_duration(MAX_DURATION_HOURS * 2) == -math.inf


class TestSelectPath:
    """Tests for select_path edge cases."""

    def test_empty_group(self):
        assert select_path([], 1.0, Dimension.POWER) is None

    def test_path_name(self):
        candidates = discover(1000.0, Dimension.ENERGY)
        groups = group_candidates(candidates)
        result = select_path(groups["energy-to-money-electricity"], 1000.0, Dimension.ENERGY)
        assert result.path_name == "US electricity cost"
        assert result.output_dimension == Dimension.MONEY

"""
Unit tests for backend/core/progression.py

Tests cover:
- Wave loading with a deload cadence (the 4-week reference scenario)
- Single-week and terminal-deload edge cases
- Parameter validation
- Named progression patterns
- Day layout expansion
"""

import pytest

from application.exceptions import DefinitionIntegrityError
from backend.core.progression import (
    DaySlot,
    WaveLoadingParameters,
    expand_layout,
    fixed_layout,
    is_pattern_deload_week,
    number_days,
    pattern_intensity_modifier,
    plan_wave_weeks,
)
from domain.models import TrainingPhase, WeekProgressionPattern

PUSH_PULL = fixed_layout(
    DaySlot(3, "Pull", "PPL Pull"),
    DaySlot(2, "Push", "PPL Push"),
)


@pytest.mark.unit
class TestWaveLoading:
    """Tests for plan_wave_weeks."""

    def test_four_week_reference_scenario(self):
        """Cadence 4, base 1.0, step 0.05 gives [1.00, 1.05, 1.10, 0.70]."""
        params = WaveLoadingParameters(weeks=4, deload_every=4, base_intensity=1.0, step_size=0.05)
        weeks = plan_wave_weeks(params, PUSH_PULL, TrainingPhase.HYPERTROPHY)

        assert [w.intensity_modifier for w in weeks] == [1.0, 1.05, 1.1, 0.7]
        assert [w.is_deload for w in weeks] == [False, False, False, True]
        assert [w.volume_modifier for w in weeks] == [1.0, 1.0, 1.0, 0.7]
        assert [w.week_number for w in weeks] == [1, 2, 3, 4]

    def test_deload_week_tags_and_effort(self):
        params = WaveLoadingParameters(weeks=4, deload_every=4, base_effort=8)
        weeks = plan_wave_weeks(params, PUSH_PULL, TrainingPhase.HYPERTROPHY)

        assert weeks[0].phase_tag == TrainingPhase.HYPERTROPHY
        assert weeks[3].phase_tag == TrainingPhase.DELOAD
        assert weeks[0].name == "Week 1"
        assert weeks[3].name == "Deload Week"
        assert {d.suggested_effort for d in weeks[0].days} == {8}
        assert {d.suggested_effort for d in weeks[3].days} == {6}

    def test_periodic_deloads(self):
        params = WaveLoadingParameters(weeks=8, deload_every=4)
        weeks = plan_wave_weeks(params, PUSH_PULL, TrainingPhase.STRENGTH)
        assert [w.week_number for w in weeks if w.is_deload] == [4, 8]

    def test_single_week_never_deloads(self):
        params = WaveLoadingParameters(weeks=1, deload_every=2)
        weeks = plan_wave_weeks(params, PUSH_PULL, TrainingPhase.STRENGTH)
        assert len(weeks) == 1
        assert not weeks[0].is_deload
        assert weeks[0].intensity_modifier == 1.0

    def test_single_week_terminal_deload_never_deloads(self):
        params = WaveLoadingParameters(weeks=1, deload_every=2, terminal_deload=True)
        assert not params.is_deload_week(1)

    def test_terminal_deload_only_on_last_week(self):
        params = WaveLoadingParameters(weeks=6, deload_every=4, terminal_deload=True)
        assert [w for w in range(1, 7) if params.is_deload_week(w)] == [6]

    def test_step_size_is_per_generator(self):
        params = WaveLoadingParameters(weeks=3, deload_every=4, step_size=0.1)
        weeks = plan_wave_weeks(params, PUSH_PULL, TrainingPhase.STRENGTH)
        assert [w.intensity_modifier for w in weeks] == [1.0, 1.1, 1.2]

    def test_deterministic(self):
        params = WaveLoadingParameters(weeks=6, deload_every=3)
        first = plan_wave_weeks(params, PUSH_PULL, TrainingPhase.STRENGTH)
        second = plan_wave_weeks(params, PUSH_PULL, TrainingPhase.STRENGTH)
        assert first == second

    def test_layout_per_week(self):
        def alternating(week):
            name = "A" if week % 2 else "B"
            return (DaySlot(2, f"Workout {name}", f"Template {name}"),)

        params = WaveLoadingParameters(weeks=2, deload_every=4)
        weeks = plan_wave_weeks(params, alternating, TrainingPhase.STRENGTH)
        assert weeks[0].days[0].template_name == "Template A"
        assert weeks[1].days[0].template_name == "Template B"

    def test_custom_week_names_and_notes(self):
        params = WaveLoadingParameters(weeks=2, deload_every=2)
        weeks = plan_wave_weeks(
            params,
            PUSH_PULL,
            TrainingPhase.STRENGTH,
            week_name=lambda week, is_deload: "Easy" if is_deload else f"Hard {week}",
            week_notes=lambda week, is_deload: "rest up" if is_deload else None,
        )
        assert [w.name for w in weeks] == ["Hard 1", "Easy"]
        assert [w.notes for w in weeks] == [None, "rest up"]


@pytest.mark.unit
class TestWaveLoadingParameters:
    """Parameters that would break deload monotonicity are rejected."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"weeks": 0},
            {"deload_every": 1},
            {"step_size": -0.05},
            {"base_effort": 11},
            {"deload_intensity": 1.0},
            {"deload_volume": 1.0},
            {"deload_volume": 0},
            {"deload_effort_drop": 0},
            {"base_effort": 2, "deload_effort_drop": 2},
        ],
    )
    def test_invalid_parameters(self, overrides):
        fields = {"weeks": 4, "deload_every": 4}
        fields.update(overrides)
        with pytest.raises(DefinitionIntegrityError):
            WaveLoadingParameters(**fields)


@pytest.mark.unit
class TestNamedPatterns:
    """Tests for pattern_intensity_modifier and is_pattern_deload_week."""

    def test_linear(self):
        values = [pattern_intensity_modifier(WeekProgressionPattern.LINEAR, w) for w in range(1, 4)]
        assert values == [1.0, 1.025, 1.05]

    def test_custom_behaves_as_linear(self):
        assert pattern_intensity_modifier(WeekProgressionPattern.CUSTOM, 3) == 1.05

    def test_wave(self):
        values = [pattern_intensity_modifier(WeekProgressionPattern.WAVE, w) for w in range(1, 7)]
        assert values == [1.0, 1.05, 0.95, 1.05, 1.1, 1.0]

    def test_three_one_deload(self):
        values = [
            pattern_intensity_modifier(WeekProgressionPattern.THREE_ONE_DELOAD, w)
            for w in range(1, 9)
        ]
        assert values == [1.0, 1.025, 1.05, 0.6, 1.1, 1.125, 1.15, 0.66]

    def test_four_one_deload(self):
        assert pattern_intensity_modifier(WeekProgressionPattern.FOUR_ONE_DELOAD, 4) == 1.075
        assert pattern_intensity_modifier(WeekProgressionPattern.FOUR_ONE_DELOAD, 5) == 0.6
        assert pattern_intensity_modifier(WeekProgressionPattern.FOUR_ONE_DELOAD, 6) == 1.125

    def test_custom_increment(self):
        assert pattern_intensity_modifier(WeekProgressionPattern.LINEAR, 2, base_increment=0.05) == 1.05

    def test_week_must_be_positive(self):
        with pytest.raises(ValueError):
            pattern_intensity_modifier(WeekProgressionPattern.LINEAR, 0)

    def test_deload_weeks(self):
        assert is_pattern_deload_week(WeekProgressionPattern.THREE_ONE_DELOAD, 4)
        assert is_pattern_deload_week(WeekProgressionPattern.THREE_ONE_DELOAD, 8)
        assert not is_pattern_deload_week(WeekProgressionPattern.THREE_ONE_DELOAD, 5)
        assert is_pattern_deload_week(WeekProgressionPattern.FOUR_ONE_DELOAD, 5)
        assert not is_pattern_deload_week(WeekProgressionPattern.LINEAR, 4)
        assert not is_pattern_deload_week(WeekProgressionPattern.WAVE, 3)

    def test_every_pattern_is_handled(self):
        for pattern in WeekProgressionPattern:
            assert pattern_intensity_modifier(pattern, 1) > 0
            is_pattern_deload_week(pattern, 1)


@pytest.mark.unit
class TestLayouts:
    """Tests for layout expansion and day numbering."""

    def test_expand_layout_sorts_by_day_of_week(self):
        days = expand_layout(PUSH_PULL(1), suggested_effort=7)
        assert [d.day_of_week for d in days] == [2, 3]
        assert [d.suggested_effort for d in days] == [7, 7]

    def test_rest_slots_get_no_effort(self):
        days = expand_layout([DaySlot(1, "Rest Day")], suggested_effort=7)
        assert days[0].is_rest_day
        assert days[0].suggested_effort is None

    def test_number_days(self):
        days = number_days([("Push", "PPL Push"), ("Rest Day", None)], suggested_effort=8)
        assert [d.day_number for d in days] == [1, 2]
        assert days[0].suggested_effort == 8
        assert days[1].suggested_effort is None
        assert days[1].is_rest_day

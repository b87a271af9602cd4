"""
Week-to-week progression for preset programs.

This module provides the pure building blocks the progression generators
share:
- Wave loading with a configurable deload cadence (WaveLoadingParameters,
  plan_wave_weeks)
- Named progression patterns (linear, wave, 3:1 and 4:1 deload)
- A fixed weekly day layout (DaySlot) expanded into day definitions

Everything here is deterministic: the same parameters always produce equal
definitions.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from application.exceptions import DefinitionIntegrityError
from domain.models import (
    DayDefinition,
    TrainingPhase,
    WeekDefinition,
    WeekProgressionPattern,
)

# Modifiers are rounded so that float accumulation never leaks into
# definitions (1.0 + 0.05 * 2 == 1.1, not 1.1000000000000001).
MODIFIER_PRECISION = 4

DEFAULT_BASE_INCREMENT = 0.025


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class DaySlot:
    """One entry of a weekly layout: which template to train on which day."""

    day_of_week: int  # 1=Sunday, 7=Saturday
    name: str
    template_name: Optional[str] = None


@dataclass(frozen=True)
class WaveLoadingParameters:
    """
    Parameters for a wave-loading progression with periodic deloads.

    Attributes:
        weeks: Program length in weeks
        deload_every: Every Nth week is a deload week
        base_intensity: Intensity modifier of week 1
        step_size: Intensity added per week
        base_effort: Suggested RPE for normal weeks
        deload_intensity: Intensity modifier used on deload weeks
        deload_volume: Volume modifier used on deload weeks
        deload_effort_drop: RPE points removed on deload weeks
        terminal_deload: Deload on the final week only instead of every Nth
    """

    weeks: int
    deload_every: int
    base_intensity: float = 1.0
    step_size: float = 0.05
    base_effort: int = 8
    deload_intensity: float = 0.7
    deload_volume: float = 0.7
    deload_effort_drop: int = 2
    terminal_deload: bool = False

    def __post_init__(self) -> None:
        if self.weeks < 1:
            raise DefinitionIntegrityError(f"Program must have at least 1 week, got {self.weeks}")
        if self.deload_every < 2:
            raise DefinitionIntegrityError(
                f"Deload cadence must be at least 2, got {self.deload_every}"
            )
        if self.step_size < 0:
            raise DefinitionIntegrityError(f"Step size must not be negative, got {self.step_size}")
        if not 1 <= self.base_effort <= 10:
            raise DefinitionIntegrityError(f"Base effort {self.base_effort} is outside RPE 1-10")
        if self.deload_intensity >= self.base_intensity:
            raise DefinitionIntegrityError(
                f"Deload intensity {self.deload_intensity} must be below "
                f"base intensity {self.base_intensity}"
            )
        if not 0 < self.deload_volume < 1.0:
            raise DefinitionIntegrityError(
                f"Deload volume {self.deload_volume} must be within (0, 1)"
            )
        if self.deload_effort_drop < 1:
            raise DefinitionIntegrityError("Deload effort drop must be at least 1")
        if self.base_effort - self.deload_effort_drop < 1:
            raise DefinitionIntegrityError(
                f"Base effort {self.base_effort} leaves no room for a deload drop of "
                f"{self.deload_effort_drop}"
            )

    def is_deload_week(self, week: int) -> bool:
        """
        Check if a week is a deload week.

        A single-week program never deloads, whatever the cadence.
        """
        if self.weeks == 1:
            return False
        if self.terminal_deload:
            return week == self.weeks
        return week % self.deload_every == 0

    def intensity_for(self, week: int) -> float:
        if self.is_deload_week(week):
            return self.deload_intensity
        return round(self.base_intensity + self.step_size * (week - 1), MODIFIER_PRECISION)

    def volume_for(self, week: int) -> float:
        return self.deload_volume if self.is_deload_week(week) else 1.0

    def effort_for(self, week: int) -> int:
        if self.is_deload_week(week):
            return self.base_effort - self.deload_effort_drop
        return self.base_effort


# Builds the day layout for a given week number; lets programs such as
# StrongLifts alternate A/B/A and B/A/B between weeks.
LayoutForWeek = Callable[[int], Sequence[DaySlot]]


# =============================================================================
# Week Planning
# =============================================================================


def expand_layout(
    layout: Sequence[DaySlot],
    suggested_effort: Optional[int] = None,
) -> Tuple[DayDefinition, ...]:
    """
    Expand a weekly layout into day definitions, sorted by day of week.

    Args:
        layout: Day slots for the week
        suggested_effort: RPE to attach to every training day

    Returns:
        Tuple of DayDefinition
    """
    return tuple(
        DayDefinition(
            day_of_week=slot.day_of_week,
            name=slot.name,
            template_name=slot.template_name,
            suggested_effort=suggested_effort if slot.template_name else None,
        )
        for slot in sorted(layout, key=lambda s: s.day_of_week)
    )


def plan_wave_weeks(
    params: WaveLoadingParameters,
    layout: LayoutForWeek,
    training_phase: TrainingPhase,
    week_name: Optional[Callable[[int, bool], str]] = None,
    week_notes: Optional[Callable[[int, bool], Optional[str]]] = None,
) -> Tuple[WeekDefinition, ...]:
    """
    Plan every week of a wave-loaded program.

    For each week ``w`` in ``1..params.weeks``: deload weeks use the fixed
    deload modifiers and a lowered effort; other weeks add ``step_size`` to
    the intensity per week at full volume.

    Args:
        params: Wave-loading parameters
        layout: Day layout for a given week number
        training_phase: Phase tag for non-deload weeks
        week_name: Optional ``(week, is_deload) -> name``
        week_notes: Optional ``(week, is_deload) -> notes``

    Returns:
        Tuple of WeekDefinition, week numbers contiguous from 1
    """
    week_name = week_name or default_week_name
    weeks: List[WeekDefinition] = []

    for week in range(1, params.weeks + 1):
        is_deload = params.is_deload_week(week)
        weeks.append(
            WeekDefinition(
                week_number=week,
                name=week_name(week, is_deload),
                phase_tag=TrainingPhase.DELOAD if is_deload else training_phase,
                intensity_modifier=params.intensity_for(week),
                volume_modifier=params.volume_for(week),
                is_deload=is_deload,
                notes=week_notes(week, is_deload) if week_notes else None,
                days=expand_layout(layout(week), params.effort_for(week)),
            )
        )

    return tuple(weeks)


def default_week_name(week: int, is_deload: bool) -> str:
    return "Deload Week" if is_deload else f"Week {week}"


def fixed_layout(*slots: DaySlot) -> LayoutForWeek:
    """Layout that is the same every week."""
    return lambda week: slots


# =============================================================================
# Named Progression Patterns
# =============================================================================


def pattern_intensity_modifier(
    pattern: WeekProgressionPattern,
    week: int,
    base_increment: float = DEFAULT_BASE_INCREMENT,
) -> float:
    """
    Calculate the intensity modifier a named pattern prescribes for a week.

    - LINEAR / CUSTOM: 1.0 + (week - 1) * increment
    - WAVE: three-week waves (base, +5%, -5%) whose base rises by
      2 * increment per wave
    - THREE_ONE_DELOAD / FOUR_ONE_DELOAD: progressive weeks then a deload at
      60% of the cycle baseline; the baseline carries over between cycles

    Args:
        pattern: Progression pattern
        week: Week number (1-indexed)
        base_increment: Weekly increment (0.025 = 2.5%)

    Returns:
        Intensity modifier (1.0 = baseline)
    """
    if week < 1:
        raise ValueError(f"Week must be >= 1, got {week}")

    if pattern == WeekProgressionPattern.WAVE:
        cycle = (week - 1) % 3
        cycle_number = (week - 1) // 3
        base = 1.0 + cycle_number * base_increment * 2
        offset = {0: 0.0, 1: 0.05, 2: -0.05}[cycle]
        return round(base + offset, MODIFIER_PRECISION)

    if pattern in (WeekProgressionPattern.THREE_ONE_DELOAD, WeekProgressionPattern.FOUR_ONE_DELOAD):
        cycle_length = _deload_cycle_length(pattern)
        cycle = (week - 1) % cycle_length
        cycle_number = (week - 1) // cycle_length
        baseline = 1.0 + cycle_number * cycle_length * base_increment
        if cycle == cycle_length - 1:
            return round(baseline * 0.6, MODIFIER_PRECISION)
        return round(baseline + cycle * base_increment, MODIFIER_PRECISION)

    if pattern in (WeekProgressionPattern.LINEAR, WeekProgressionPattern.CUSTOM):
        return round(1.0 + (week - 1) * base_increment, MODIFIER_PRECISION)

    raise ValueError(f"Unhandled progression pattern: {pattern}")


def is_pattern_deload_week(pattern: WeekProgressionPattern, week: int) -> bool:
    """Check if a named pattern places a deload on the given week."""
    if pattern in (WeekProgressionPattern.THREE_ONE_DELOAD, WeekProgressionPattern.FOUR_ONE_DELOAD):
        cycle_length = _deload_cycle_length(pattern)
        return (week - 1) % cycle_length == cycle_length - 1
    if pattern in (
        WeekProgressionPattern.LINEAR,
        WeekProgressionPattern.WAVE,
        WeekProgressionPattern.CUSTOM,
    ):
        return False
    raise ValueError(f"Unhandled progression pattern: {pattern}")


def _deload_cycle_length(pattern: WeekProgressionPattern) -> int:
    return 4 if pattern == WeekProgressionPattern.THREE_ONE_DELOAD else 5


# =============================================================================
# Day Sequences
# =============================================================================


def number_days(
    entries: Sequence[Tuple[Optional[str], Optional[str]]],
    suggested_effort: Optional[int] = None,
) -> Tuple[DayDefinition, ...]:
    """
    Number ``(name, template_name)`` entries as days 1..n.

    Entries without a template name become rest days; the effort is only
    attached to training days.
    """
    return tuple(
        DayDefinition(
            day_number=index,
            name=name,
            template_name=template_name,
            suggested_effort=suggested_effort if template_name else None,
        )
        for index, (name, template_name) in enumerate(entries, start=1)
    )

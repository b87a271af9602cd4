"""
Bodybuilding programs.

The PPL 6-Day Split is the reference wave-loading program: intensity
rises 5% a week and every ``deload_every``-th week drops to 70% intensity
and volume.
"""

from typing import Optional

from backend.core.definition_validator import ensure_valid_program
from backend.core.progression import (
    DaySlot,
    WaveLoadingParameters,
    fixed_layout,
    number_days,
    plan_wave_weeks,
)
from domain.models import (
    DaySequenceProgram,
    DifficultyLevel,
    ProgramCategory,
    TrainingPhase,
    WeekProgressionPattern,
    WeekStructuredProgram,
)

PPL_SIX_DAY_LAYOUT = fixed_layout(
    DaySlot(2, "Push Day 1", "PPL Push"),
    DaySlot(3, "Pull Day 1", "PPL Pull"),
    DaySlot(4, "Leg Day 1", "PPL Legs"),
    DaySlot(5, "Push Day 2", "PPL Push"),
    DaySlot(6, "Pull Day 2", "PPL Pull"),
    DaySlot(7, "Leg Day 2", "PPL Legs"),
)


def ppl_6_day_program(
    weeks: int = 4,
    deload_every: int = 4,
    base_intensity: float = 1.0,
    step_size: float = 0.05,
    base_effort: int = 8,
) -> WeekStructuredProgram:
    """
    PPL 6-Day Split: push/pull/legs twice a week with wave loading.

    Args:
        weeks: Program length in weeks
        deload_every: Every Nth week is a deload
        base_intensity: Intensity modifier of week 1
        step_size: Weekly intensity increase
        base_effort: Suggested RPE outside deload weeks

    Returns:
        WeekStructuredProgram
    """
    params = WaveLoadingParameters(
        weeks=weeks,
        deload_every=deload_every,
        base_intensity=base_intensity,
        step_size=step_size,
        base_effort=base_effort,
        deload_intensity=0.7,
        deload_volume=0.7,
    )

    program = WeekStructuredProgram(
        name="PPL 6-Day Split",
        description=(
            "Push/Pull/Legs split performed twice per week. High volume hypertrophy "
            "program ideal for intermediate to advanced lifters focused on muscle growth."
        ),
        category=ProgramCategory.BODYBUILDING,
        difficulty=DifficultyLevel.INTERMEDIATE,
        duration_weeks=weeks,
        progression_pattern=WeekProgressionPattern.FOUR_ONE_DELOAD,
        weeks=plan_wave_weeks(
            params,
            PPL_SIX_DAY_LAYOUT,
            TrainingPhase.HYPERTROPHY,
            week_notes=lambda week, is_deload: (
                "Cut volume in half, maintain intensity technique"
                if is_deload
                else "Focus on mind-muscle connection and time under tension"
            ),
        ),
    )
    ensure_valid_program(program)
    return program


def classic_ppl_split_program(base_effort: Optional[int] = None) -> DaySequenceProgram:
    program = DaySequenceProgram(
        name="Classic PPL Split",
        description=(
            "An intermediate to advanced program for building muscle and strength, "
            "designed to be run 3 or 6 days a week."
        ),
        category=ProgramCategory.BODYBUILDING,
        difficulty=DifficultyLevel.INTERMEDIATE,
        total_days=7,
        days=number_days(
            [
                ("Push Day", "PPL Push"),
                ("Pull Day", "PPL Pull"),
                ("Leg Day", "PPL Legs"),
                ("Rest Day", None),
                ("Push Day", "PPL Push"),
                ("Pull Day", "PPL Pull"),
                ("Rest Day", None),
            ],
            suggested_effort=base_effort,
        ),
    )
    ensure_valid_program(program)
    return program


def upper_lower_split_program(base_effort: Optional[int] = None) -> DaySequenceProgram:
    program = DaySequenceProgram(
        name="4-Day Upper/Lower Split",
        description=(
            "A balanced 4-day program focusing on training all muscle groups twice a week, "
            "ideal for both strength and hypertrophy."
        ),
        category=ProgramCategory.BODYBUILDING,
        difficulty=DifficultyLevel.INTERMEDIATE,
        total_days=7,
        days=number_days(
            [
                ("Upper Body", "Upper/Lower - Upper"),
                ("Lower Body", "Upper/Lower - Lower"),
                ("Rest Day", None),
                ("Upper Body", "Upper/Lower - Upper"),
                ("Lower Body", "Upper/Lower - Lower"),
                ("Rest Day", None),
                ("Rest Day", None),
            ],
            suggested_effort=base_effort,
        ),
    )
    ensure_valid_program(program)
    return program

"""Powerlifting and strength programs built around the competition lifts."""

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

# Loading waves of one 5/3/1 cycle, in order
FIVE_THREE_ONE_WAVES = ("5/5/5", "3/3/3", "5/3/1")

FIVE_THREE_ONE_LAYOUT = fixed_layout(
    DaySlot(2, "Squat Day", "531 Squat"),
    DaySlot(3, "Bench Day", "531 Bench"),
    DaySlot(5, "Deadlift Day", "531 Deadlift"),
    DaySlot(6, "Press Day", "531 Press"),
)


def _five_three_one_week_name(week: int, is_deload: bool) -> str:
    if is_deload:
        return "Deload"
    # Position in the four-week cycle; the fourth slot is the deload
    return FIVE_THREE_ONE_WAVES[(week - 1) % (len(FIVE_THREE_ONE_WAVES) + 1)]


def five_three_one_bbb_program(
    cycles: int = 1,
    base_effort: int = 8,
    step_size: float = 0.05,
) -> WeekStructuredProgram:
    """
    5/3/1 Boring But Big: three loading weeks then a deload, per cycle.

    Args:
        cycles: Number of four-week cycles
        base_effort: Suggested RPE on loading weeks
        step_size: Weekly intensity increase
    """
    weeks = cycles * 4
    params = WaveLoadingParameters(
        weeks=weeks,
        deload_every=4,
        step_size=step_size,
        base_effort=base_effort,
        deload_intensity=0.4,
        deload_volume=0.5,
    )

    program = WeekStructuredProgram(
        name="5/3/1 Boring But Big",
        description=(
            "Jim Wendler's 5/3/1 with BBB assistance work. Build strength with main lifts, "
            "add mass with 5x10 accessory work. Proven program for all levels."
        ),
        category=ProgramCategory.POWERLIFTING,
        difficulty=DifficultyLevel.INTERMEDIATE,
        duration_weeks=weeks,
        progression_pattern=WeekProgressionPattern.FOUR_ONE_DELOAD,
        weeks=plan_wave_weeks(
            params,
            FIVE_THREE_ONE_LAYOUT,
            TrainingPhase.STRENGTH,
            week_name=_five_three_one_week_name,
        ),
    )
    ensure_valid_program(program)
    return program


def five_three_one_program(base_effort: Optional[int] = None) -> DaySequenceProgram:
    program = DaySequenceProgram(
        name="Jim Wendler's 5/3/1",
        description=(
            "A proven strength program based on periodic progression, focusing on four "
            "main lifts."
        ),
        category=ProgramCategory.STRENGTH_TRAINING,
        difficulty=DifficultyLevel.ADVANCED,
        total_days=7,
        days=number_days(
            [
                ("5/3/1 Squat", "531 Squat"),
                ("5/3/1 Bench", "531 Bench"),
                ("Rest Day", None),
                ("5/3/1 Deadlift", "531 Deadlift"),
                ("5/3/1 Press", "531 Press"),
                ("Rest Day", None),
                ("Rest Day", None),
            ],
            suggested_effort=base_effort,
        ),
    )
    ensure_valid_program(program)
    return program


def powerlifting_focus_program(base_effort: Optional[int] = None) -> DaySequenceProgram:
    program = DaySequenceProgram(
        name="3-Day Powerlifting Focus",
        description=(
            "A 3-day program designed to maximize strength in the three core lifts: "
            "Squat, Bench, and Deadlift."
        ),
        category=ProgramCategory.STRENGTH_TRAINING,
        difficulty=DifficultyLevel.ADVANCED,
        total_days=7,
        days=number_days(
            [
                ("Squat Focus", "Powerlifting - Squat Day"),
                ("Rest Day", None),
                ("Bench Focus", "Powerlifting - Bench Day"),
                ("Rest Day", None),
                ("Deadlift Focus", "Powerlifting - Deadlift Day"),
                ("Rest Day", None),
                ("Rest Day", None),
            ],
            suggested_effort=base_effort,
        ),
    )
    ensure_valid_program(program)
    return program

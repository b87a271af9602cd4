"""
Beginner programs: linear progression on the main compound lifts.

Week-structured:
- Starting Strength (A/B/A every week, deload on the final week)
- StrongLifts 5x5 (A/B/A and B/A/B alternating between weeks)

Day-sequence:
- Beginner Calisthenics
- Starting Strength (12 Weeks), StrongLifts 5x5 (12 Weeks)
"""

from typing import List, Optional, Tuple

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

REST_DAY = "Rest Day"


def starting_strength_program(
    weeks: int = 4,
    base_effort: int = 8,
    step_size: float = 0.05,
) -> WeekStructuredProgram:
    """
    Starting Strength: three full-body sessions a week, deload on the last week.

    Args:
        weeks: Program length in weeks
        base_effort: Suggested RPE outside the deload
        step_size: Weekly intensity increase
    """
    params = WaveLoadingParameters(
        weeks=weeks,
        deload_every=max(weeks, 2),
        step_size=step_size,
        base_effort=base_effort,
        deload_intensity=0.8,
        deload_volume=0.7,
        terminal_deload=True,
    )
    layout = fixed_layout(
        DaySlot(2, "Workout A", "Starting Strength A"),
        DaySlot(4, "Workout B", "Starting Strength B"),
        DaySlot(6, "Workout A", "Starting Strength A"),
    )

    program = WeekStructuredProgram(
        name="Starting Strength",
        description=(
            "The classic beginner program by Mark Rippetoe. Focus on the main compound "
            "lifts with linear progression. Perfect for building a foundation of strength."
        ),
        category=ProgramCategory.STRENGTH_TRAINING,
        difficulty=DifficultyLevel.BEGINNER,
        duration_weeks=weeks,
        progression_pattern=WeekProgressionPattern.LINEAR,
        weeks=plan_wave_weeks(
            params,
            layout,
            TrainingPhase.STRENGTH,
            week_notes=lambda week, is_deload: (
                "Reduce weight by 20-30% and focus on form" if is_deload else None
            ),
        ),
    )
    ensure_valid_program(program)
    return program


def _stronglifts_layout(week: int) -> Tuple[DaySlot, ...]:
    # Odd weeks run A/B/A, even weeks B/A/B
    first, second = ("A", "B") if week % 2 == 1 else ("B", "A")
    return (
        DaySlot(2, f"Workout {first}", f"StrongLifts 5x5 {first}"),
        DaySlot(4, f"Workout {second}", f"StrongLifts 5x5 {second}"),
        DaySlot(6, f"Workout {first}", f"StrongLifts 5x5 {first}"),
    )


def stronglifts_5x5_program(
    weeks: int = 4,
    base_effort: int = 8,
    step_size: float = 0.05,
) -> WeekStructuredProgram:
    """StrongLifts 5x5: 5 sets of 5 on every main lift, deload on the last week."""
    params = WaveLoadingParameters(
        weeks=weeks,
        deload_every=max(weeks, 2),
        step_size=step_size,
        base_effort=base_effort,
        deload_intensity=0.8,
        deload_volume=0.6,
        terminal_deload=True,
    )

    program = WeekStructuredProgram(
        name="StrongLifts 5×5",
        description=(
            "Simple but brutally effective strength program. Three workouts per week, "
            "5 sets of 5 reps on all main lifts. Add weight every session for consistent gains."
        ),
        category=ProgramCategory.STRENGTH_TRAINING,
        difficulty=DifficultyLevel.BEGINNER,
        duration_weeks=weeks,
        progression_pattern=WeekProgressionPattern.LINEAR,
        weeks=plan_wave_weeks(
            params,
            _stronglifts_layout,
            TrainingPhase.STRENGTH,
            week_notes=lambda week, is_deload: (
                "Reduce to 3x5 instead of 5x5"
                if is_deload
                else "Add 2.5-5kg per week when you complete all sets"
            ),
        ),
    )
    ensure_valid_program(program)
    return program


def beginner_calisthenics_program(base_effort: Optional[int] = None) -> DaySequenceProgram:
    program = DaySequenceProgram(
        name="Beginner Calisthenics",
        description=(
            "A 3-day beginner-friendly calisthenics program focusing on full-body workouts."
        ),
        category=ProgramCategory.CALISTHENICS,
        difficulty=DifficultyLevel.BEGINNER,
        total_days=3,
        days=number_days(
            [
                ("Full Body Workout", "Calisthenics - Full Body"),
                (REST_DAY, None),
                ("Full Body Workout", "Calisthenics - Full Body"),
            ],
            suggested_effort=base_effort,
        ),
    )
    ensure_valid_program(program)
    return program


def _alternating_ab_days(
    template_prefix: str, weeks: int
) -> List[Tuple[Optional[str], Optional[str]]]:
    """
    Three sessions a week on days 1, 3 and 5 of each week.

    The week opens with workout A, the next with B, and so on; the middle
    session always uses the other workout.
    """
    entries: List[Tuple[Optional[str], Optional[str]]] = []
    for week in range(weeks):
        main, other = ("A", "B") if week % 2 == 0 else ("B", "A")
        entries.extend(
            [
                (f"Workout {main}", f"{template_prefix} {main}"),
                (REST_DAY, None),
                (f"Workout {other}", f"{template_prefix} {other}"),
                (REST_DAY, None),
                (f"Workout {main}", f"{template_prefix} {main}"),
                (REST_DAY, None),
                (REST_DAY, None),
            ]
        )
    return entries


def starting_strength_12_weeks_program(
    weeks: int = 12, base_effort: Optional[int] = None
) -> DaySequenceProgram:
    program = DaySequenceProgram(
        name=f"Starting Strength ({weeks} Weeks)",
        description=(
            f"A {weeks}-week beginner strength program focusing on linear progression "
            "with compound lifts."
        ),
        category=ProgramCategory.STRENGTH_TRAINING,
        difficulty=DifficultyLevel.BEGINNER,
        progression_pattern=WeekProgressionPattern.LINEAR,
        total_days=weeks * 7,
        days=number_days(_alternating_ab_days("Starting Strength", weeks), base_effort),
    )
    ensure_valid_program(program)
    return program


def stronglifts_12_weeks_program(
    weeks: int = 12, base_effort: Optional[int] = None
) -> DaySequenceProgram:
    program = DaySequenceProgram(
        name=f"StrongLifts 5x5 ({weeks} Weeks)",
        description=(
            f"A {weeks}-week beginner strength program based on five compound exercises."
        ),
        category=ProgramCategory.STRENGTH_TRAINING,
        difficulty=DifficultyLevel.BEGINNER,
        progression_pattern=WeekProgressionPattern.LINEAR,
        total_days=weeks * 7,
        days=number_days(_alternating_ab_days("StrongLifts 5x5", weeks), base_effort),
    )
    ensure_valid_program(program)
    return program

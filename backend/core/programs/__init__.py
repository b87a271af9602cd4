"""
Progression generators for the built-in programs.

A generator is a zero-argument callable returning one ProgramDefinition.
``DEFAULT_GENERATORS`` lists them in library order: the week-structured
programs first, then the day-sequence programs.
"""

from functools import partial
from typing import Callable, Optional, Tuple

from backend.core.programs.beginner import (
    beginner_calisthenics_program,
    starting_strength_12_weeks_program,
    starting_strength_program,
    stronglifts_12_weeks_program,
    stronglifts_5x5_program,
)
from backend.core.programs.hypertrophy import (
    classic_ppl_split_program,
    ppl_6_day_program,
    upper_lower_split_program,
)
from backend.core.programs.powerlifting import (
    five_three_one_bbb_program,
    five_three_one_program,
    powerlifting_focus_program,
)
from domain.models import ProgramDefinition

ProgramGenerator = Callable[[], ProgramDefinition]

WEEK_STRUCTURED_GENERATORS: Tuple[ProgramGenerator, ...] = (
    starting_strength_program,
    stronglifts_5x5_program,
    ppl_6_day_program,
    five_three_one_bbb_program,
)

DAY_SEQUENCE_GENERATORS: Tuple[ProgramGenerator, ...] = (
    classic_ppl_split_program,
    upper_lower_split_program,
    powerlifting_focus_program,
    five_three_one_program,
    beginner_calisthenics_program,
    starting_strength_12_weeks_program,
    stronglifts_12_weeks_program,
)

DEFAULT_GENERATORS: Tuple[ProgramGenerator, ...] = (
    WEEK_STRUCTURED_GENERATORS + DAY_SEQUENCE_GENERATORS
)


def default_generators(base_effort: Optional[int] = None) -> Tuple[ProgramGenerator, ...]:
    """
    Built-in generators, optionally with a shared base effort (RPE).

    Week-structured programs always carry an effort (8 unless overridden);
    day-sequence programs only get one when ``base_effort`` is given.
    """
    if base_effort is None:
        return DEFAULT_GENERATORS
    return tuple(partial(generator, base_effort=base_effort) for generator in DEFAULT_GENERATORS)


__all__ = [
    "ProgramGenerator",
    "DEFAULT_GENERATORS",
    "WEEK_STRUCTURED_GENERATORS",
    "DAY_SEQUENCE_GENERATORS",
    "default_generators",
    "starting_strength_program",
    "stronglifts_5x5_program",
    "ppl_6_day_program",
    "five_three_one_bbb_program",
    "classic_ppl_split_program",
    "upper_lower_split_program",
    "powerlifting_focus_program",
    "five_three_one_program",
    "beginner_calisthenics_program",
    "starting_strength_12_weeks_program",
    "stronglifts_12_weeks_program",
]

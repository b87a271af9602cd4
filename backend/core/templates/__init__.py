"""
Built-in template data, grouped by discipline.

``TEMPLATE_GROUPS`` lists the groups in catalog order; the template
catalog concatenates them.
"""

from backend.core.templates import (
    beginner,
    calisthenics,
    hypertrophy,
    program_templates,
    strength,
    weightlifting,
)

TEMPLATE_GROUPS = (
    strength.POWERLIFTING_SPLIT,
    hypertrophy.PPL,
    hypertrophy.UPPER_LOWER,
    calisthenics.CALISTHENICS,
    weightlifting.OLYMPIC,
    beginner.BEGINNER,
    program_templates.STARTING_STRENGTH,
    program_templates.STRONGLIFTS,
    program_templates.PPL_SIX_DAY,
    program_templates.FIVE_THREE_ONE,
)

__all__ = ["TEMPLATE_GROUPS"]

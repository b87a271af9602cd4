"""
Domain layer for the program library.

This package contains pure domain models that are independent of storage
concerns: program and template definitions, and the persisted graph that
instantiation produces.
"""

from domain.models import (
    DayDefinition,
    DaySequenceProgram,
    PersistedProgram,
    ProgramDefinition,
    TemplateDefinition,
    WeekDefinition,
    WeekStructuredProgram,
)

__all__ = [
    "DayDefinition",
    "DaySequenceProgram",
    "PersistedProgram",
    "ProgramDefinition",
    "TemplateDefinition",
    "WeekDefinition",
    "WeekStructuredProgram",
]

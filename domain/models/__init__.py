"""
Domain models for the program library.

This package contains pure domain models that are independent of storage
concerns. They fall into two phases:

- Definitions (frozen value objects): TemplateDefinition,
  TemplateExerciseSlot, DayDefinition, WeekDefinition and the
  ProgramDefinition union (WeekStructuredProgram | DaySequenceProgram)
- Persisted graph (mutable, with identity): PersistedProgram,
  PersistedWeek, PersistedDay, PersistedTemplate, PersistedTemplateExercise

Usage:
    >>> from domain.models import TemplateDefinition, TemplateCategory

    >>> template = TemplateDefinition.from_rows(
    ...     "StrongLifts 5x5 A",
    ...     TemplateCategory.STRENGTH,
    ...     (
    ...         ("Barbell Back Squat", 5, 5, 5),
    ...         ("Barbell Bench Press", 5, 5, 5),
    ...     ),
    ... )

    >>> # Serialize to JSON
    >>> json_str = template.model_dump_json(indent=2)
"""

from domain.models.enums import (
    DifficultyLevel,
    ProgramCategory,
    ProgramShape,
    TemplateCategory,
    TrainingPhase,
    WeekProgressionPattern,
)
from domain.models.persisted import (
    PersistedDay,
    PersistedProgram,
    PersistedTemplate,
    PersistedTemplateExercise,
    PersistedWeek,
    ResolvedTemplate,
    UnresolvedTemplateReference,
)
from domain.models.program import (
    DayDefinition,
    DaySequenceProgram,
    ProgramDefinition,
    WeekDefinition,
    WeekStructuredProgram,
)
from domain.models.template import TemplateDefinition, TemplateExerciseSlot

__all__ = [
    # Definitions
    "TemplateDefinition",
    "TemplateExerciseSlot",
    "DayDefinition",
    "WeekDefinition",
    "WeekStructuredProgram",
    "DaySequenceProgram",
    "ProgramDefinition",
    # Persisted graph
    "PersistedProgram",
    "PersistedWeek",
    "PersistedDay",
    "PersistedTemplate",
    "PersistedTemplateExercise",
    "ResolvedTemplate",
    "UnresolvedTemplateReference",
    # Enums
    "DifficultyLevel",
    "ProgramCategory",
    "ProgramShape",
    "TemplateCategory",
    "TrainingPhase",
    "WeekProgressionPattern",
]

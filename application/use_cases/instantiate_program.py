"""
Instantiation pipeline: definition -> persisted graph.

Converts an immutable ProgramDefinition into a PersistedProgram whose days
are linked to templates looked up through an injected resolver, and a
TemplateDefinition into a PersistedTemplate.

Resolution policy:
- One resolver call per day that names a template, in source order
- A name the resolver does not know (returns None) leaves that day
  template-less; the rest of the program is still instantiated
- A resolver that raises, or returns something other than a template,
  aborts the call with ResolverFailure

The sync and async variants produce the same graph for the same resolver
answers; the async one awaits each lookup in turn and never overlaps calls.
"""

import logging
from typing import Callable, Iterator, List, Optional, Tuple

from application.exceptions import ResolverFailure
from application.ports import AsyncTemplateResolver, TemplateResolver
from domain.models import (
    DayDefinition,
    DaySequenceProgram,
    PersistedDay,
    PersistedProgram,
    PersistedTemplate,
    PersistedTemplateExercise,
    PersistedWeek,
    ProgramDefinition,
    ResolvedTemplate,
    TemplateDefinition,
    WeekDefinition,
    WeekStructuredProgram,
)
from domain.models.persisted import RESOLVED_TEMPLATE_TYPES

logger = logging.getLogger(__name__)

# Maps an exercise name to its exercise library id, or None when unknown
ExerciseResolver = Callable[[str], Optional[str]]


# =============================================================================
# Programs
# =============================================================================


def instantiate(program: ProgramDefinition, resolve_template: TemplateResolver) -> PersistedProgram:
    """
    Build the persisted graph for a program definition.

    Args:
        program: Week-structured or day-sequence program
        resolve_template: Name -> template lookup

    Returns:
        PersistedProgram with one persisted day per DayDefinition

    Raises:
        ResolverFailure: If the resolver raises or returns something that is
            not a template
    """
    persisted = _program_shell(program)

    for target, day in _day_slots(program, persisted):
        template = _resolve(resolve_template, day, program.name)
        target.append(_build_day(day, template))

    _log_outcome(persisted)
    return persisted


async def instantiate_async(
    program: ProgramDefinition, resolve_template: AsyncTemplateResolver
) -> PersistedProgram:
    """
    Build the persisted graph using an asynchronous resolver.

    Lookups are awaited one at a time in source order.

    Raises:
        ResolverFailure: If the resolver raises or returns something that is
            not a template
    """
    persisted = _program_shell(program)

    for target, day in _day_slots(program, persisted):
        template = await _resolve_async(resolve_template, day, program.name)
        target.append(_build_day(day, template))

    _log_outcome(persisted)
    return persisted


def _day_slots(
    program: ProgramDefinition, persisted: PersistedProgram
) -> Iterator[Tuple[List[PersistedDay], DayDefinition]]:
    """
    Walk the definition's days in source order.

    Yields each day together with the persisted list its PersistedDay
    belongs in, creating week shells on the way.
    """
    if isinstance(program, WeekStructuredProgram):
        for week in program.weeks:
            persisted_week = _week_shell(week)
            persisted.weeks.append(persisted_week)
            for day in week.days:
                yield persisted_week.days, day
    else:
        for day in program.days:
            yield persisted.days, day


def _resolve(
    resolve_template: TemplateResolver, day: DayDefinition, program_name: str
) -> Optional[ResolvedTemplate]:
    if not day.template_name:
        return None
    try:
        template = resolve_template(day.template_name)
    except Exception as exc:
        raise ResolverFailure(day.template_name, program_name) from exc
    return _checked(template, day.template_name, program_name)


async def _resolve_async(
    resolve_template: AsyncTemplateResolver, day: DayDefinition, program_name: str
) -> Optional[ResolvedTemplate]:
    if not day.template_name:
        return None
    try:
        template = await resolve_template(day.template_name)
    except Exception as exc:
        raise ResolverFailure(day.template_name, program_name) from exc
    return _checked(template, day.template_name, program_name)


def _checked(template: object, template_name: str, program_name: str) -> Optional[ResolvedTemplate]:
    if template is None or isinstance(template, RESOLVED_TEMPLATE_TYPES):
        return template
    raise ResolverFailure(
        template_name,
        program_name,
        reason=f"resolver returned {type(template).__name__}, not a template",
    )


def _program_shell(program: ProgramDefinition) -> PersistedProgram:
    if not isinstance(program, (WeekStructuredProgram, DaySequenceProgram)):
        raise TypeError(f"Unsupported program definition: {type(program).__name__}")
    return PersistedProgram(
        shape=program.shape,
        name=program.name,
        description=program.description,
        category=program.category,
        difficulty=program.difficulty,
        progression_pattern=program.progression_pattern,
        duration_weeks=getattr(program, "duration_weeks", None),
        total_days=getattr(program, "total_days", None),
        is_custom=False,
    )


def _week_shell(week: WeekDefinition) -> PersistedWeek:
    return PersistedWeek(
        week_number=week.week_number,
        name=week.name,
        notes=week.notes,
        phase_tag=week.phase_tag,
        intensity_modifier=week.intensity_modifier,
        volume_modifier=week.volume_modifier,
        is_deload=week.is_deload,
    )


def _build_day(day: DayDefinition, template: Optional[ResolvedTemplate]) -> PersistedDay:
    return PersistedDay(
        day_of_week=day.day_of_week,
        day_number=day.day_number,
        name=day.name,
        notes=day.notes,
        suggested_effort=day.suggested_effort,
        template_name=day.template_name,
        template=template,
    )


def _log_outcome(program: PersistedProgram) -> None:
    unresolved = program.unresolved_references
    for ref in unresolved:
        logger.warning(
            "Template '%s' not found for '%s' (%s); day kept without a template",
            ref.template_name,
            program.name,
            ref.location,
        )
    logger.info(
        "Instantiated program '%s': %d days, %d unresolved",
        program.name,
        program.day_count,
        len(unresolved),
    )


# =============================================================================
# Templates
# =============================================================================


def instantiate_template(
    template: TemplateDefinition,
    exercise_resolver: Optional[ExerciseResolver] = None,
) -> Optional[PersistedTemplate]:
    """
    Build a persisted template from a definition.

    Args:
        template: Template definition
        exercise_resolver: Optional name -> exercise id lookup. When given,
            every exercise must resolve or the template is skipped.

    Returns:
        PersistedTemplate, or None if an exercise could not be resolved
    """
    exercises: List[PersistedTemplateExercise] = []

    for slot in template.exercises:
        exercise_id = None
        if exercise_resolver is not None:
            exercise_id = exercise_resolver(slot.exercise_name)
            if exercise_id is None:
                logger.warning(
                    "Skipping template '%s': exercise '%s' not found",
                    template.name,
                    slot.exercise_name,
                )
                return None

        exercises.append(
            PersistedTemplateExercise(
                order=slot.order,
                exercise_name=slot.exercise_name,
                exercise_id=exercise_id,
                set_count=slot.set_count,
                rep_range_min=slot.rep_range_min,
                rep_range_max=slot.rep_range_max,
                notes=slot.notes,
            )
        )

    return PersistedTemplate(
        name=template.name,
        category=template.category,
        is_preset=True,
        schema_version=template.schema_version,
        exercises=exercises,
    )

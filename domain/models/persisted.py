"""
Persisted-graph entities produced by instantiation.

Unlike the definition value objects, these carry identity (``id``) and are
mutable: the caller's storage layer owns them once instantiation returns.
A day's ``template`` is an association, not ownership: many days may point
at the same template object, and removing a day never removes its template.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Annotated, List, Literal, Optional, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from domain.models.enums import (
    DifficultyLevel,
    ProgramCategory,
    ProgramShape,
    TemplateCategory,
    TrainingPhase,
    WeekProgressionPattern,
)
from domain.models.template import MINUTES_PER_SET, TemplateDefinition


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PersistedTemplateExercise(BaseModel):
    """An exercise row owned by a persisted template."""

    id: UUID = Field(default_factory=uuid4)
    order: int = Field(..., ge=0)
    exercise_name: str
    exercise_id: Optional[str] = Field(
        default=None, description="Exercise library identifier, when resolved"
    )
    set_count: int = Field(..., gt=0)
    rep_range_min: int = Field(..., gt=0)
    rep_range_max: int = Field(..., gt=0)
    notes: Optional[str] = None


class PersistedTemplate(BaseModel):
    """A stored workout template."""

    id: UUID = Field(default_factory=uuid4)
    kind: Literal["persisted"] = "persisted"
    name: str
    category: TemplateCategory
    is_preset: bool = True
    schema_version: int = 1
    created_at: datetime = Field(default_factory=_utcnow)
    exercises: List[PersistedTemplateExercise] = Field(default_factory=list)

    @property
    def exercise_count(self) -> int:
        return len(self.exercises)

    @property
    def estimated_duration_minutes(self) -> int:
        return sum(e.set_count for e in self.exercises) * MINUTES_PER_SET


# What a template resolver may hand back: a stored template, or the
# catalog definition itself when resolution is purely in-process.
# Variants are tagged by `kind`.
ResolvedTemplate = Annotated[
    Union[PersistedTemplate, TemplateDefinition],
    Field(discriminator="kind"),
]

RESOLVED_TEMPLATE_TYPES = (PersistedTemplate, TemplateDefinition)


class PersistedDay(BaseModel):
    """A stored program day."""

    id: UUID = Field(default_factory=uuid4)
    day_of_week: Optional[int] = None
    day_number: Optional[int] = None
    name: Optional[str] = None
    notes: Optional[str] = None
    suggested_effort: Optional[int] = None
    template_name: Optional[str] = Field(
        default=None, description="Template name requested by the definition"
    )
    template: Optional[ResolvedTemplate] = Field(
        default=None, description="Resolved template; None for rest or unresolved days"
    )

    @property
    def has_workout(self) -> bool:
        return self.template is not None

    @property
    def is_rest_day(self) -> bool:
        return self.template is None

    @property
    def is_unresolved(self) -> bool:
        """True when a template was requested but could not be linked."""
        return self.template_name is not None and self.template is None

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        if self.template is not None:
            return self.template.name
        if self.day_number is not None:
            return f"Day {self.day_number}"
        return f"Day of week {self.day_of_week}"


class PersistedWeek(BaseModel):
    """A stored program week."""

    id: UUID = Field(default_factory=uuid4)
    week_number: int
    name: Optional[str] = None
    notes: Optional[str] = None
    phase_tag: Optional[TrainingPhase] = None
    intensity_modifier: float = 1.0
    volume_modifier: float = 1.0
    is_deload: bool = False
    days: List[PersistedDay] = Field(default_factory=list)

    @property
    def display_name(self) -> str:
        return self.name or f"Week {self.week_number}"


@dataclass(frozen=True)
class UnresolvedTemplateReference:
    """A day whose template name did not resolve during instantiation."""

    template_name: str
    day_name: Optional[str]
    week_number: Optional[int] = None
    day_of_week: Optional[int] = None
    day_number: Optional[int] = None

    @property
    def location(self) -> str:
        if self.week_number is not None:
            return f"Week {self.week_number}, day of week {self.day_of_week}"
        return f"Day {self.day_number}"


class PersistedProgram(BaseModel):
    """
    Aggregate root of an instantiated program.

    Week-structured programs populate ``weeks``; day-sequence programs
    populate ``days``. ``all_days`` flattens either shape.
    """

    id: UUID = Field(default_factory=uuid4)
    shape: ProgramShape
    name: str
    description: Optional[str] = None
    category: ProgramCategory
    difficulty: DifficultyLevel
    progression_pattern: WeekProgressionPattern
    duration_weeks: Optional[int] = None
    total_days: Optional[int] = None
    is_custom: bool = False
    created_at: datetime = Field(default_factory=_utcnow)
    last_used_at: Optional[datetime] = None
    weeks: List[PersistedWeek] = Field(default_factory=list)
    days: List[PersistedDay] = Field(default_factory=list)

    @property
    def all_days(self) -> List[PersistedDay]:
        if self.shape == ProgramShape.WEEK_STRUCTURED:
            return [day for week in self.weeks for day in week.days]
        return list(self.days)

    @property
    def day_count(self) -> int:
        return len(self.all_days)

    @property
    def unresolved_references(self) -> List[UnresolvedTemplateReference]:
        refs: List[UnresolvedTemplateReference] = []
        if self.shape == ProgramShape.WEEK_STRUCTURED:
            for week in self.weeks:
                for day in week.days:
                    if day.is_unresolved:
                        refs.append(
                            UnresolvedTemplateReference(
                                template_name=day.template_name,
                                day_name=day.name,
                                week_number=week.week_number,
                                day_of_week=day.day_of_week,
                            )
                        )
        else:
            for day in self.days:
                if day.is_unresolved:
                    refs.append(
                        UnresolvedTemplateReference(
                            template_name=day.template_name,
                            day_name=day.name,
                            day_number=day.day_number,
                        )
                    )
        return refs

    def week(self, number: int) -> Optional[PersistedWeek]:
        return next((w for w in self.weeks if w.week_number == number), None)

    def mark_as_used(self) -> None:
        self.last_used_at = _utcnow()

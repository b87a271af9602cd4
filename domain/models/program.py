"""
Program definition value objects.

Two program shapes exist and are modelled as variants of one tagged union:

- WeekStructuredProgram: ordered weeks, each holding days addressed by
  day of week (1 = Sunday ... 7 = Saturday), with per-week modifiers.
- DaySequenceProgram: a flat run of days addressed by absolute day number.

Days reference templates by name only. Resolving those names to stored
templates is deferred to instantiation (see application.use_cases).
"""

from abc import abstractmethod
from typing import Annotated, Iterator, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from domain.models.enums import (
    DifficultyLevel,
    ProgramCategory,
    ProgramShape,
    TrainingPhase,
    WeekProgressionPattern,
)


class DayDefinition(BaseModel):
    """
    One training (or rest) day.

    Exactly one addressing field is set: ``day_of_week`` inside a
    week-structured program, ``day_number`` inside a day-sequence program.
    A day without ``template_name`` is a rest day.

    Examples:
        >>> DayDefinition(day_of_week=2, name="Push Day 1", template_name="PPL Push")
        >>> DayDefinition(day_number=4, name="Rest Day")
    """

    day_of_week: Optional[int] = Field(default=None, ge=1, le=7, description="1=Sunday, 7=Saturday")
    day_number: Optional[int] = Field(default=None, ge=1, description="Absolute day in a day-sequence program")
    name: Optional[str] = None
    template_name: Optional[str] = Field(
        default=None, description="Name of the template to train; absent for rest days"
    )
    suggested_effort: Optional[int] = Field(default=None, ge=1, le=10, description="Target RPE")
    notes: Optional[str] = None

    @field_validator("template_name")
    @classmethod
    def normalize_template_name(cls, v: Optional[str]) -> Optional[str]:
        """Treat a blank template name as no template."""
        if v is not None and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def validate_addressing(self) -> "DayDefinition":
        """Ensure exactly one of day_of_week / day_number is set."""
        if (self.day_of_week is None) == (self.day_number is None):
            raise ValueError("Exactly one of day_of_week or day_number must be set")
        return self

    @property
    def is_rest_day(self) -> bool:
        return self.template_name is None

    model_config = {"frozen": True}


class WeekDefinition(BaseModel):
    """One week of a week-structured program."""

    week_number: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    phase_tag: TrainingPhase
    intensity_modifier: float = Field(default=1.0, gt=0, description="1.0 = baseline intensity")
    volume_modifier: float = Field(default=1.0, gt=0, le=1.0, description="1.0 = full volume")
    is_deload: bool = False
    notes: Optional[str] = None
    days: Tuple[DayDefinition, ...] = Field(default=())

    @field_validator("days")
    @classmethod
    def validate_days(cls, v: Tuple[DayDefinition, ...]) -> Tuple[DayDefinition, ...]:
        """Week days must be addressed by day of week."""
        for day in v:
            if day.day_of_week is None:
                raise ValueError("Days in a week must be addressed by day_of_week")
        return v

    @property
    def training_days(self) -> int:
        return sum(1 for day in self.days if not day.is_rest_day)

    @property
    def combined_modifier(self) -> float:
        """Intensity and volume modifiers combined into one load factor."""
        return self.intensity_modifier * self.volume_modifier

    def day(self, day_of_week: int) -> Optional[DayDefinition]:
        return next((d for d in self.days if d.day_of_week == day_of_week), None)

    model_config = {"frozen": True}


class _ProgramBase(BaseModel):
    """Metadata shared by both program shapes."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str = ""
    category: ProgramCategory
    difficulty: DifficultyLevel
    progression_pattern: WeekProgressionPattern = WeekProgressionPattern.CUSTOM

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure program name is not blank."""
        if not v.strip():
            raise ValueError("Program name cannot be blank")
        return v

    @abstractmethod
    def iter_days(self) -> Iterator[DayDefinition]:
        """Every day of the program in source order."""

    @property
    def day_count(self) -> int:
        return sum(1 for _ in self.iter_days())

    @property
    def template_names(self) -> List[str]:
        """Distinct referenced template names, in first-use order."""
        names: List[str] = []
        for day in self.iter_days():
            if day.template_name and day.template_name not in names:
                names.append(day.template_name)
        return names

    model_config = {"frozen": True}


class WeekStructuredProgram(_ProgramBase):
    """
    Program made of weeks, each with its own modifiers and days.

    ``duration_weeks`` must equal the number of weeks; the definition
    validator checks that together with week-number contiguity.
    """

    shape: Literal[ProgramShape.WEEK_STRUCTURED] = ProgramShape.WEEK_STRUCTURED
    duration_weeks: int = Field(..., ge=1, le=52)
    weeks: Tuple[WeekDefinition, ...] = Field(default=())

    def iter_days(self) -> Iterator[DayDefinition]:
        for week in self.weeks:
            yield from week.days

    def week(self, number: int) -> Optional[WeekDefinition]:
        return next((w for w in self.weeks if w.week_number == number), None)

    @property
    def deload_weeks(self) -> List[int]:
        return [w.week_number for w in self.weeks if w.is_deload]


class DaySequenceProgram(_ProgramBase):
    """Program made of a flat run of days addressed by absolute day number."""

    shape: Literal[ProgramShape.DAY_SEQUENCE] = ProgramShape.DAY_SEQUENCE
    total_days: int = Field(..., ge=1)
    days: Tuple[DayDefinition, ...] = Field(default=())

    @field_validator("days")
    @classmethod
    def validate_days(cls, v: Tuple[DayDefinition, ...]) -> Tuple[DayDefinition, ...]:
        """Sequence days must be addressed by day number."""
        for day in v:
            if day.day_number is None:
                raise ValueError("Days in a day-sequence program must be addressed by day_number")
        return v

    def iter_days(self) -> Iterator[DayDefinition]:
        yield from self.days


ProgramDefinition = Annotated[
    Union[WeekStructuredProgram, DaySequenceProgram],
    Field(discriminator="shape"),
]

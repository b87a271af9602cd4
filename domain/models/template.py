"""
Template definition value objects.

A template is a named, ordered list of exercise prescriptions that many
program days can share. Definitions are pure data: they are built once when
the template catalog is assembled and looked up by name during program
instantiation.
"""

from typing import Literal, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from domain.models.enums import TemplateCategory

# Average time spent per working set, rest included
MINUTES_PER_SET = 2


class TemplateExerciseSlot(BaseModel):
    """
    A single prescribed exercise within a template.

    Examples:
        >>> slot = TemplateExerciseSlot(
        ...     exercise_name="Barbell Back Squat",
        ...     set_count=5,
        ...     rep_range_min=5,
        ...     rep_range_max=5,
        ...     order=0,
        ... )
        >>> slot.rep_range
        '5'
    """

    exercise_name: str = Field(..., min_length=1, description="Exercise name as listed in the exercise library")
    set_count: int = Field(..., gt=0, description="Target number of working sets")
    rep_range_min: int = Field(..., gt=0, description="Lower bound of the rep target")
    rep_range_max: int = Field(..., gt=0, description="Upper bound of the rep target")
    order: int = Field(..., ge=0, description="Zero-based position within the template")
    notes: Optional[str] = Field(default=None, description="Optional coaching note")

    @field_validator("exercise_name")
    @classmethod
    def validate_exercise_name(cls, v: str) -> str:
        """Ensure exercise name is not blank."""
        if not v.strip():
            raise ValueError("Exercise name cannot be blank")
        return v

    @model_validator(mode="after")
    def validate_rep_range(self) -> "TemplateExerciseSlot":
        """Ensure the rep range is not inverted."""
        if self.rep_range_max < self.rep_range_min:
            raise ValueError(
                f"rep_range_max ({self.rep_range_max}) must be >= "
                f"rep_range_min ({self.rep_range_min})"
            )
        return self

    @property
    def rep_range(self) -> str:
        """Rep target formatted for display (e.g. '8-12' or '5')."""
        if self.rep_range_min == self.rep_range_max:
            return str(self.rep_range_min)
        return f"{self.rep_range_min}-{self.rep_range_max}"

    model_config = {"frozen": True}


class TemplateDefinition(BaseModel):
    """
    Immutable definition of a preset workout template.

    Slot ``order`` values are expected to be dense and zero-based
    (``exercises[i].order == i``). That invariant spans the whole list, so
    it is enforced by the definition validator when a catalog is built
    rather than per instance.
    """

    name: str = Field(..., min_length=1, description="Catalog-unique template name")
    category: TemplateCategory
    exercises: Tuple[TemplateExerciseSlot, ...] = Field(default=())
    schema_version: int = Field(default=1, ge=1, description="Definition format version")
    kind: Literal["definition"] = Field(
        default="definition", description="Tag distinguishing a definition from a stored template"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure template name is not blank."""
        if not v.strip():
            raise ValueError("Template name cannot be blank")
        return v

    @classmethod
    def from_rows(
        cls,
        name: str,
        category: TemplateCategory,
        rows: Tuple[Tuple[str, int, int, int], ...],
        schema_version: int = 1,
    ) -> "TemplateDefinition":
        """
        Build a template from compact ``(name, sets, rep_min, rep_max)`` rows.

        Slot order is taken from row position, so templates built this way
        always satisfy the dense-order invariant.
        """
        return cls(
            name=name,
            category=category,
            schema_version=schema_version,
            exercises=tuple(
                TemplateExerciseSlot(
                    exercise_name=exercise_name,
                    set_count=sets,
                    rep_range_min=rep_min,
                    rep_range_max=rep_max,
                    order=index,
                )
                for index, (exercise_name, sets, rep_min, rep_max) in enumerate(rows)
            ),
        )

    @property
    def exercise_count(self) -> int:
        return len(self.exercises)

    @property
    def total_sets(self) -> int:
        return sum(slot.set_count for slot in self.exercises)

    @property
    def estimated_duration_minutes(self) -> int:
        """Rough session length assuming two minutes per set."""
        return self.total_sets * MINUTES_PER_SET

    @property
    def exercise_names(self) -> Tuple[str, ...]:
        return tuple(slot.exercise_name for slot in self.exercises)

    model_config = {"frozen": True}

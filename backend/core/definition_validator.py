"""
Structural validation for template and program definitions.

Validates built-in definition data against:
- Dense, zero-based slot order within a template
- Contiguous week numbering starting at 1
- Declared duration / total days matching the actual content
- Day addressing (unique, increasing days of week; sequential day numbers)
- Deload weeks being reduced relative to the program's baseline week

Error-level issues are definition defects; the ``ensure_valid_*`` helpers
turn them into a DefinitionIntegrityError so builders fail at construction.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from application.exceptions import DefinitionIntegrityError
from domain.models import (
    DaySequenceProgram,
    ProgramDefinition,
    TemplateDefinition,
    WeekStructuredProgram,
)

logger = logging.getLogger(__name__)


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Definition defect
    WARNING = "warning"  # Legal but suspicious


@dataclass
class ValidationIssue:
    """A single validation issue."""

    message: str
    severity: ValidationSeverity
    location: Optional[str] = None  # e.g., "Week 3, day of week 2"

    def __str__(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


@dataclass
class ValidationResult:
    """Result of definition validation."""

    subject: str
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def errors(self) -> List[ValidationIssue]:
        """Get error-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> List[ValidationIssue]:
        """Get warning-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]


def _error(message: str, location: Optional[str] = None) -> ValidationIssue:
    return ValidationIssue(message=message, severity=ValidationSeverity.ERROR, location=location)


def _warning(message: str, location: Optional[str] = None) -> ValidationIssue:
    return ValidationIssue(message=message, severity=ValidationSeverity.WARNING, location=location)


# =============================================================================
# Templates
# =============================================================================


def validate_template(template: TemplateDefinition) -> ValidationResult:
    """
    Validate a template definition.

    Args:
        template: Template to check

    Returns:
        ValidationResult with any issues found
    """
    result = ValidationResult(subject=f"template '{template.name}'")

    if not template.exercises:
        result.issues.append(_warning("Template has no exercises"))

    for index, slot in enumerate(template.exercises):
        if slot.order != index:
            result.issues.append(
                _error(
                    f"Slot '{slot.exercise_name}' has order {slot.order}, expected {index}",
                    location=f"Position {index}",
                )
            )

    return result


def ensure_valid_template(template: TemplateDefinition) -> None:
    """Raise DefinitionIntegrityError if the template has error-level issues."""
    _raise_on_errors(validate_template(template))


# =============================================================================
# Programs
# =============================================================================


def validate_program(program: ProgramDefinition) -> ValidationResult:
    """
    Validate a program definition of either shape.

    Args:
        program: Week-structured or day-sequence program

    Returns:
        ValidationResult with any issues found
    """
    if isinstance(program, WeekStructuredProgram):
        issues = _validate_weeks(program)
    elif isinstance(program, DaySequenceProgram):
        issues = _validate_day_sequence(program)
    else:
        raise TypeError(f"Unsupported program definition: {type(program).__name__}")

    result = ValidationResult(subject=f"program '{program.name}'", issues=issues)

    if not program.template_names:
        result.issues.append(_warning("Program has no training days"))

    return result


def ensure_valid_program(program: ProgramDefinition) -> None:
    """Raise DefinitionIntegrityError if the program has error-level issues."""
    _raise_on_errors(validate_program(program))


def _validate_weeks(program: WeekStructuredProgram) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []

    if program.duration_weeks != len(program.weeks):
        issues.append(
            _error(
                f"duration_weeks is {program.duration_weeks} but {len(program.weeks)} weeks are defined"
            )
        )

    week_numbers = [w.week_number for w in program.weeks]
    expected = list(range(1, len(program.weeks) + 1))
    if week_numbers != expected:
        issues.append(_error(f"Week numbers {week_numbers} are not contiguous from 1"))

    baseline = next((w for w in program.weeks if not w.is_deload), None)

    for week in program.weeks:
        location = f"Week {week.week_number}"

        if not week.days:
            issues.append(_warning("Week has no days", location=location))

        days_of_week = [d.day_of_week for d in week.days]
        if len(set(days_of_week)) != len(days_of_week):
            issues.append(_error(f"Duplicate days of week {days_of_week}", location=location))
        elif days_of_week != sorted(days_of_week):
            issues.append(_error(f"Days of week {days_of_week} are not in order", location=location))

        if week.is_deload and baseline is not None:
            issues.extend(_validate_deload(week, baseline, location))

    return issues


def _validate_deload(week, baseline, location: str) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []

    if week.intensity_modifier >= baseline.intensity_modifier:
        issues.append(
            _error(
                f"Deload intensity {week.intensity_modifier} is not below "
                f"baseline {baseline.intensity_modifier}",
                location=location,
            )
        )
    if week.volume_modifier >= baseline.volume_modifier:
        issues.append(
            _error(
                f"Deload volume {week.volume_modifier} is not below "
                f"baseline {baseline.volume_modifier}",
                location=location,
            )
        )

    baseline_efforts = {
        d.day_of_week: d.suggested_effort for d in baseline.days if d.suggested_effort is not None
    }
    for day in week.days:
        base_effort = baseline_efforts.get(day.day_of_week)
        if day.suggested_effort is None or base_effort is None:
            continue
        if day.suggested_effort >= base_effort:
            issues.append(
                _error(
                    f"Deload effort {day.suggested_effort} is not below baseline {base_effort}",
                    location=f"{location}, day of week {day.day_of_week}",
                )
            )

    return issues


def _validate_day_sequence(program: DaySequenceProgram) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []

    if program.total_days != len(program.days):
        issues.append(
            _error(f"total_days is {program.total_days} but {len(program.days)} days are defined")
        )

    day_numbers = [d.day_number for d in program.days]
    if day_numbers != list(range(1, len(program.days) + 1)):
        issues.append(_error("Day numbers are not sequential from 1"))

    return issues


def _raise_on_errors(result: ValidationResult) -> None:
    for issue in result.warnings:
        logger.warning("Definition warning for %s: %s", result.subject, issue)
    if result.errors:
        raise DefinitionIntegrityError(
            f"Invalid {result.subject}",
            issues=[str(issue) for issue in result.errors],
        )

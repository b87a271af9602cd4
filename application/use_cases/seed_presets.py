"""
SeedPresets Use Case.

Writes the built-in templates and programs into storage. Templates go
first: programs link to them by name, so every catalog template must be
stored before any program referencing it is instantiated.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.ports import ProgramRepository, TemplateRepository
from application.use_cases.instantiate_program import (
    ExerciseResolver,
    instantiate,
    instantiate_template,
)
from backend.core.program_library import ProgramLibrary
from backend.core.template_catalog import TemplateCatalog
from domain.models import UnresolvedTemplateReference

logger = logging.getLogger(__name__)


@dataclass
class SeedPresetsResult:
    """Result of the SeedPresets use case execution."""

    templates_created: int = 0
    templates_existing: int = 0
    templates_skipped: List[str] = field(default_factory=list)
    programs_created: int = 0
    programs_skipped: bool = False
    unresolved: List[UnresolvedTemplateReference] = field(default_factory=list)

    @property
    def has_unresolved(self) -> bool:
        return bool(self.unresolved)


class SeedPresetsUseCase:
    """
    Use case for seeding preset templates and programs.

    Orchestrates the following workflow:
    1. Store each catalog template not already stored (matched by name)
    2. Skip program seeding if preset programs already exist
    3. Instantiate every library program, resolving template names
       against the template repository, and store it

    Usage:
        >>> use_case = SeedPresetsUseCase(
        ...     template_repo=template_repo,
        ...     program_repo=program_repo,
        ...     catalog=TemplateCatalog.default(),
        ...     library=ProgramLibrary(),
        ... )
        >>> result = use_case.execute()
        >>> print(result.programs_created)
    """

    def __init__(
        self,
        template_repo: TemplateRepository,
        program_repo: ProgramRepository,
        catalog: TemplateCatalog,
        library: ProgramLibrary,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            template_repo: Repository for stored templates
            program_repo: Repository for stored programs
            catalog: Built-in template catalog
            library: Built-in program library
        """
        self._template_repo = template_repo
        self._program_repo = program_repo
        self._catalog = catalog
        self._library = library

    def execute(
        self,
        *,
        exercise_resolver: Optional[ExerciseResolver] = None,
    ) -> SeedPresetsResult:
        """
        Execute the seeding workflow.

        Args:
            exercise_resolver: Optional exercise name -> id lookup; templates
                with an unknown exercise are not stored

        Returns:
            SeedPresetsResult with counts and any unresolved references

        Raises:
            ResolverFailure: If the template repository fails during program
                instantiation
        """
        result = SeedPresetsResult()

        # Step 1: Templates
        for definition in self._catalog.all_templates():
            if self._template_repo.get_by_name(definition.name) is not None:
                result.templates_existing += 1
                continue

            template = instantiate_template(definition, exercise_resolver)
            if template is None:
                result.templates_skipped.append(definition.name)
                continue

            self._template_repo.save(template)
            result.templates_created += 1

        logger.info(
            "Seeded templates: %d created, %d existing, %d skipped",
            result.templates_created,
            result.templates_existing,
            len(result.templates_skipped),
        )

        # Step 2: Programs are seeded once
        if self._program_repo.has_preset_programs():
            logger.info("Preset programs already stored, skipping program seeding")
            result.programs_skipped = True
            return result

        # Step 3: Instantiate and store each program
        for definition in self._library.all_programs():
            program = instantiate(definition, self._template_repo.get_by_name)
            result.unresolved.extend(program.unresolved_references)
            self._program_repo.save(program)
            result.programs_created += 1

        logger.info(
            "Seeded %d programs (%d unresolved template references)",
            result.programs_created,
            len(result.unresolved),
        )
        return result

"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of the storage ports
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeTemplateRepository, create_template_repo

    # Direct instantiation
    repo = FakeTemplateRepository()
    repo.seed([PersistedTemplate(name="PPL Push", category="hypertrophy")])

    # Factory function pre-populated from a catalog
    repo = create_template_repo(TemplateCatalog.default())
"""
from typing import Iterable, Optional

from application.use_cases import instantiate_template
from backend.core.template_catalog import TemplateCatalog
from tests.fakes.program_repository import FakeProgramRepository
from tests.fakes.template_repository import FakeTemplateRepository, StorageError


# =============================================================================
# Factory Functions
# =============================================================================


def create_template_repo(
    catalog: TemplateCatalog,
    *,
    exclude: Optional[Iterable[str]] = None,
    failing: Optional[Iterable[str]] = None,
) -> FakeTemplateRepository:
    """
    Create a FakeTemplateRepository holding the catalog's templates.

    Args:
        catalog: Catalog whose templates are stored
        exclude: Template names to leave out (to produce unresolved references)
        failing: Template names whose lookup raises StorageError

    Returns:
        Pre-populated FakeTemplateRepository
    """
    excluded = set(exclude or ())
    repo = FakeTemplateRepository(failing=failing)
    repo.seed(
        instantiate_template(definition)
        for definition in catalog.all_templates()
        if definition.name not in excluded
    )
    return repo


__all__ = [
    "FakeTemplateRepository",
    "FakeProgramRepository",
    "StorageError",
    "create_template_repo",
]

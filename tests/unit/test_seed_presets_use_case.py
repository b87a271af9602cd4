"""
Unit tests for SeedPresetsUseCase.

Tests cover:
- Seeding templates and programs into empty storage
- Idempotent re-runs (existing templates, existing presets)
- Templates skipped for unknown exercises
- Resolver failures propagating
"""

import pytest

from application.exceptions import ResolverFailure
from application.use_cases import (
    SeedPresetsResult,
    SeedPresetsUseCase,
    instantiate,
    instantiate_template,
)
from backend.core.program_library import ProgramLibrary
from backend.core.programs import classic_ppl_split_program
from backend.core.template_catalog import TemplateCatalog
from domain.models import (
    DayDefinition,
    DaySequenceProgram,
    DifficultyLevel,
    ProgramCategory,
)
from tests.fakes import FakeProgramRepository, FakeTemplateRepository, StorageError


@pytest.fixture(scope="module")
def catalog():
    return TemplateCatalog.default()


@pytest.fixture(scope="module")
def library():
    return ProgramLibrary()


@pytest.fixture
def template_repo():
    return FakeTemplateRepository()


@pytest.fixture
def program_repo():
    return FakeProgramRepository()


@pytest.fixture
def use_case(template_repo, program_repo, catalog, library):
    return SeedPresetsUseCase(
        template_repo=template_repo,
        program_repo=program_repo,
        catalog=catalog,
        library=library,
    )


@pytest.mark.unit
class TestSeedPresets:
    """Tests for the seeding workflow."""

    def test_seeds_empty_storage(self, use_case, template_repo, program_repo):
        result = use_case.execute()

        assert isinstance(result, SeedPresetsResult)
        assert result.templates_created == 23
        assert result.templates_existing == 0
        assert result.programs_created == 11
        assert result.programs_skipped is False
        assert not result.has_unresolved
        assert len(template_repo.get_all()) == 23
        assert len(program_repo.get_all()) == 11

    def test_programs_link_to_stored_templates(self, use_case, template_repo, program_repo):
        use_case.execute()

        program = program_repo.get_by_name("PPL 6-Day Split")
        stored = template_repo.get_by_name("PPL Push")
        push_day = program.weeks[0].days[0]
        assert push_day.template.id == stored.id

    def test_second_run_is_idempotent(self, use_case, program_repo):
        use_case.execute()
        result = use_case.execute()

        assert result.templates_created == 0
        assert result.templates_existing == 23
        assert result.programs_skipped is True
        assert result.programs_created == 0
        assert len(program_repo.get_all()) == 11

    def test_existing_templates_are_kept(self, use_case, template_repo, catalog):
        existing = instantiate_template(catalog.get("PPL Push"))
        template_repo.seed([existing])

        result = use_case.execute()

        assert result.templates_existing == 1
        assert result.templates_created == 22
        assert template_repo.get_by_name("PPL Push").id == existing.id

    def test_unknown_exercise_skips_template(self, use_case, template_repo):
        result = use_case.execute(exercise_resolver=lambda name: None if name == "Snatch" else name)

        assert result.templates_skipped == ["Olympic Lifting"]
        assert template_repo.get_by_name("Olympic Lifting") is None
        # No program references the skipped template
        assert not result.has_unresolved

    def test_skipped_template_leaves_unresolved_days(self, use_case):
        result = use_case.execute(exercise_resolver=lambda name: None if name == "Dip" else name)

        assert "Calisthenics - Full Body" in result.templates_skipped
        unresolved_names = {ref.template_name for ref in result.unresolved}
        assert "Calisthenics - Full Body" in unresolved_names
        assert result.programs_created == 11

    def test_preset_programs_counted_by_repo(self, use_case, program_repo, template_repo, catalog):
        program_repo.save(instantiate(classic_ppl_split_program(), catalog.resolve))
        result = use_case.execute()

        assert result.programs_skipped is True
        assert len(program_repo.get_all()) == 1


@pytest.mark.unit
class TestSeedPresetsFailures:
    """Storage failures during program instantiation propagate."""

    def test_resolver_failure_propagates(self, catalog, program_repo):
        def broken_program():
            return DaySequenceProgram(
                name="Broken",
                category=ProgramCategory.GENERAL_FITNESS,
                difficulty=DifficultyLevel.BEGINNER,
                total_days=1,
                days=(DayDefinition(day_number=1, template_name="Unreachable"),),
            )

        template_repo = FakeTemplateRepository(failing={"Unreachable"})
        use_case = SeedPresetsUseCase(
            template_repo=template_repo,
            program_repo=program_repo,
            catalog=catalog,
            library=ProgramLibrary([broken_program]),
        )

        with pytest.raises(ResolverFailure) as exc_info:
            use_case.execute()

        assert isinstance(exc_info.value.__cause__, StorageError)
        assert program_repo.get_all() == []

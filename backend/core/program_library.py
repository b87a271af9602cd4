"""
Program library: every built-in program, generated once.

The library calls each registered generator exactly once at construction
and is read-only afterwards, so one instance can be shared by any number
of readers. Tests build independent libraries from their own generator
sets.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from application.exceptions import DefinitionIntegrityError
from backend.core.definition_validator import ensure_valid_program
from backend.core.programs import DEFAULT_GENERATORS, ProgramGenerator
from backend.core.template_catalog import TemplateCatalog
from domain.models import (
    DifficultyLevel,
    ProgramCategory,
    ProgramDefinition,
    ProgramShape,
)

logger = logging.getLogger(__name__)


def _generator_key(generator: ProgramGenerator):
    """Identity of a generator; partials of one function with equal arguments match."""
    func = getattr(generator, "func", None)
    if func is None:
        return generator
    keywords = tuple(sorted((getattr(generator, "keywords", None) or {}).items()))
    return (func, tuple(getattr(generator, "args", ())), keywords)


class ProgramLibrary:
    """
    Registry of program definitions in registration order.

    Raises:
        DefinitionIntegrityError: If a generator is registered twice, two
            programs share a (name, category) pair, or a generated program
            fails validation
    """

    def __init__(self, generators: Iterable[ProgramGenerator] = DEFAULT_GENERATORS):
        generators = tuple(generators)

        seen_generators = set()
        for generator in generators:
            key = _generator_key(generator)
            if key in seen_generators:
                name = getattr(generator, "__name__", None) or repr(generator)
                raise DefinitionIntegrityError(f"Generator {name} is registered more than once")
            seen_generators.add(key)

        programs: List[ProgramDefinition] = []
        seen_keys = set()
        for generator in generators:
            program = generator()
            ensure_valid_program(program)
            key = (program.name, program.category)
            if key in seen_keys:
                raise DefinitionIntegrityError(
                    f"Duplicate program '{program.name}' in category {program.category.value}"
                )
            seen_keys.add(key)
            programs.append(program)

        self._programs: Tuple[ProgramDefinition, ...] = tuple(programs)
        logger.debug("Program library built with %d programs", len(self._programs))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def all_programs(self) -> List[ProgramDefinition]:
        return list(self._programs)

    def programs_by_category(self, category: ProgramCategory) -> List[ProgramDefinition]:
        return [p for p in self._programs if p.category == category]

    def programs_by_difficulty(self, difficulty: DifficultyLevel) -> List[ProgramDefinition]:
        return [p for p in self._programs if p.difficulty == difficulty]

    def programs_by_shape(self, shape: ProgramShape) -> List[ProgramDefinition]:
        return [p for p in self._programs if p.shape == shape]

    def get(self, name: str, category: Optional[ProgramCategory] = None) -> Optional[ProgramDefinition]:
        """Find a program by name, optionally narrowed to a category."""
        for program in self._programs:
            if program.name == name and (category is None or program.category == category):
                return program
        return None

    def count(self) -> int:
        return len(self._programs)

    def __len__(self) -> int:
        return len(self._programs)

    def __iter__(self):
        return iter(self._programs)

    def count_by_category(self) -> Dict[ProgramCategory, int]:
        counts = {category: 0 for category in ProgramCategory}
        for program in self._programs:
            counts[program.category] += 1
        return counts

    def template_names(self) -> List[str]:
        """Every template name referenced by any program, in first-use order."""
        names: List[str] = []
        for program in self._programs:
            for name in program.template_names:
                if name not in names:
                    names.append(name)
        return names

    def verify_template_references(self, catalog: TemplateCatalog, strict: bool = False) -> List[str]:
        """
        Check that every referenced template exists in the catalog.

        Args:
            catalog: Catalog the programs will be resolved against
            strict: Raise instead of only logging missing names

        Returns:
            Missing template names (empty when all resolve)

        Raises:
            DefinitionIntegrityError: If ``strict`` and any name is missing
        """
        missing = [name for name in self.template_names() if name not in catalog]
        if not missing:
            return missing

        if strict:
            raise DefinitionIntegrityError(
                "Programs reference templates missing from the catalog",
                issues=[f"'{name}' not found" for name in missing],
            )
        for name in missing:
            logger.warning("Template '%s' is referenced by a program but not in the catalog", name)
        return missing

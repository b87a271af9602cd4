"""
Template catalog: the registry of built-in workout templates.

The catalog is built once from the discipline groups in
``backend.core.templates`` and is read-only afterwards. Construction fails
fast on definition defects (duplicate names, slot-order gaps) so that a bad
data edit never reaches instantiation.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from application.exceptions import DefinitionIntegrityError
from backend.core.definition_validator import ensure_valid_template
from domain.models import TemplateCategory, TemplateDefinition

logger = logging.getLogger(__name__)


class TemplateCatalog:
    """
    Immutable, name-indexed collection of template definitions.

    Iteration order is registration order. ``resolve`` satisfies the
    TemplateResolver port, so a catalog can be handed straight to the
    instantiation pipeline for purely in-process resolution.
    """

    def __init__(self, templates: Iterable[TemplateDefinition]):
        """
        Build the catalog.

        Args:
            templates: Template definitions in catalog order

        Raises:
            DefinitionIntegrityError: On duplicate names or invalid slot order
        """
        ordered: List[TemplateDefinition] = []
        by_name: Dict[str, TemplateDefinition] = {}
        duplicates: List[str] = []

        for template in templates:
            ensure_valid_template(template)
            if template.name in by_name:
                duplicates.append(template.name)
                continue
            by_name[template.name] = template
            ordered.append(template)

        if duplicates:
            raise DefinitionIntegrityError(
                "Duplicate template names in catalog",
                issues=[f"'{name}' is defined more than once" for name in duplicates],
            )

        self._templates: Tuple[TemplateDefinition, ...] = tuple(ordered)
        self._by_name = by_name

    @classmethod
    def from_groups(cls, groups: Iterable[Iterable[TemplateDefinition]]) -> "TemplateCatalog":
        return cls(template for group in groups for template in group)

    @classmethod
    def default(cls) -> "TemplateCatalog":
        """Catalog of every built-in template."""
        from backend.core.templates import TEMPLATE_GROUPS

        return cls.from_groups(TEMPLATE_GROUPS)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def all_templates(self) -> List[TemplateDefinition]:
        return list(self._templates)

    def get(self, name: str) -> Optional[TemplateDefinition]:
        return self._by_name.get(name)

    def resolve(self, name: str) -> Optional[TemplateDefinition]:
        """Look up a template by name; None when the catalog has no such template."""
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self):
        return iter(self._templates)

    def names(self) -> List[str]:
        return [t.name for t in self._templates]

    def count(self) -> int:
        return len(self._templates)

    def by_category(self, category: TemplateCategory) -> List[TemplateDefinition]:
        return [t for t in self._templates if t.category == category]

    def count_by_category(self) -> Dict[TemplateCategory, int]:
        """Number of templates per category; every category is present."""
        counts = {category: 0 for category in TemplateCategory}
        for template in self._templates:
            counts[template.category] += 1
        return counts

    def log_summary(self) -> None:
        logger.info("Template catalog: %d templates", self.count())
        for category, count in self.count_by_category().items():
            if count:
                logger.info("  %s: %d", category.display_name, count)

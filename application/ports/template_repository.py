"""
Template repository port (interface).

This Protocol defines the contract the seeding use case needs for
persisting preset workout templates. Storage implementations live outside
this package.
"""

from typing import List, Optional, Protocol

from domain.models.persisted import PersistedTemplate


class TemplateRepository(Protocol):
    """
    Repository interface for stored workout templates.

    Templates must be stored before any program that references them by
    name is instantiated.
    """

    def get_by_name(self, name: str) -> Optional[PersistedTemplate]:
        """
        Get a stored template by name.

        Args:
            name: Template name

        Returns:
            The stored template if found, None otherwise
        """
        ...

    def get_all(self) -> List[PersistedTemplate]:
        """
        Get all stored templates.

        Returns:
            List of stored templates
        """
        ...

    def save(self, template: PersistedTemplate) -> PersistedTemplate:
        """
        Store a template.

        Args:
            template: Template to insert

        Returns:
            The stored template
        """
        ...

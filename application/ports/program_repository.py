"""
Program repository port (interface).

This Protocol defines the contract for storing instantiated programs.
"""

from typing import List, Optional, Protocol

from domain.models.enums import ProgramCategory
from domain.models.persisted import PersistedProgram


class ProgramRepository(Protocol):
    """Repository interface for stored training programs."""

    def save(self, program: PersistedProgram) -> PersistedProgram:
        """
        Store an instantiated program together with its weeks and days.

        Args:
            program: Program aggregate to store

        Returns:
            The stored program
        """
        ...

    def get_by_name(self, name: str) -> Optional[PersistedProgram]:
        """
        Get a stored program by name.

        Args:
            name: Program name

        Returns:
            The stored program if found, None otherwise
        """
        ...

    def get_by_category(self, category: ProgramCategory) -> List[PersistedProgram]:
        """
        Get stored programs in a category.

        Args:
            category: Program category to filter by

        Returns:
            Stored programs in that category
        """
        ...

    def has_preset_programs(self) -> bool:
        """
        Check whether any preset (non-custom) program is stored.

        Returns:
            True if at least one preset program exists
        """
        ...

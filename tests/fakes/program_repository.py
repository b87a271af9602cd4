"""
Fake ProgramRepository for testing.

This module provides an in-memory implementation of ProgramRepository
for fast, isolated testing without database dependencies.
"""
from typing import Dict, List, Optional
from uuid import UUID

from domain.models import PersistedProgram, ProgramCategory


class FakeProgramRepository:
    """
    In-memory fake implementation of ProgramRepository for testing.

    Stores programs in insertion order, keyed by program ID.

    Usage:
        repo = FakeProgramRepository()
        repo.save(program)
        assert repo.has_preset_programs()
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._programs: Dict[UUID, PersistedProgram] = {}

    def reset(self) -> None:
        """Clear all stored programs."""
        self._programs.clear()

    def seed(self, programs: List[PersistedProgram]) -> None:
        """Seed the repository with test data."""
        for program in programs:
            self._programs[program.id] = program

    def get_all(self) -> List[PersistedProgram]:
        """Get all stored programs (test helper)."""
        return list(self._programs.values())

    # =========================================================================
    # ProgramRepository Protocol Methods
    # =========================================================================

    def save(self, program: PersistedProgram) -> PersistedProgram:
        """Store a program."""
        self._programs[program.id] = program
        return program

    def get_by_name(self, name: str) -> Optional[PersistedProgram]:
        """Get a stored program by name."""
        return next((p for p in self._programs.values() if p.name == name), None)

    def get_by_category(self, category: ProgramCategory) -> List[PersistedProgram]:
        """Get stored programs in a category."""
        return [p for p in self._programs.values() if p.category == category]

    def has_preset_programs(self) -> bool:
        """Check whether any preset program is stored."""
        return any(not p.is_custom for p in self._programs.values())

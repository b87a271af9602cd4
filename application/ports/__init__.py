"""
Port interfaces (Protocols) for the program library.

This package defines the interface contracts that storage collaborators
must satisfy. Using Protocols enables:
- Clean separation between definitions and storage identity
- Easy testing with in-memory fakes
- Dependency inversion (depend on abstractions, not concretions)
"""

from application.ports.program_repository import ProgramRepository
from application.ports.template_repository import TemplateRepository
from application.ports.template_resolver import AsyncTemplateResolver, TemplateResolver

__all__ = [
    "AsyncTemplateResolver",
    "ProgramRepository",
    "TemplateRepository",
    "TemplateResolver",
]

"""
Application-layer exceptions.

These exceptions are shared by the catalog/library builders, the
instantiation pipeline and the seeding use case.
"""

from typing import List, Optional


class ProgramLibraryError(Exception):
    """Base class for program library errors."""

    pass


class DefinitionIntegrityError(ProgramLibraryError):
    """Built-in definition data violates a structural invariant.

    Raised at construction time (catalog, library, generator) for defects
    such as duplicate template names, gaps in slot order or non-contiguous
    week numbers. These are data bugs to fix, not conditions to recover
    from at runtime.
    """

    def __init__(self, message: str, issues: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.issues = issues or []

    def __str__(self) -> str:
        if not self.issues:
            return self.message
        return f"{self.message}: {'; '.join(self.issues)}"


class ResolverFailure(ProgramLibraryError):
    """The injected template resolver raised or returned a non-template.

    A raised exception is chained as ``__cause__``; a foreign return value
    is described by ``reason``. Instantiation of the affected program
    stops; any partial writes already performed by the caller's storage
    layer are the caller's to undo.
    """

    def __init__(
        self,
        template_name: str,
        program_name: Optional[str] = None,
        reason: Optional[str] = None,
    ):
        self.template_name = template_name
        self.program_name = program_name
        self.reason = reason
        where = f" while instantiating '{program_name}'" if program_name else ""
        detail = f": {reason}" if reason else ""
        super().__init__(f"Template resolver failed for '{template_name}'{where}{detail}")

"""
Template resolver ports.

A resolver is the single capability the instantiation pipeline needs from
storage: turn a template name into a template, or report that none exists
by returning None. Plain callables satisfy these protocols, so a bound
method such as ``catalog.resolve`` or ``repo.get_by_name`` can be passed
directly.
"""

from typing import Optional, Protocol

from domain.models.persisted import ResolvedTemplate


class TemplateResolver(Protocol):
    """Synchronous name -> template lookup."""

    def __call__(self, name: str) -> Optional[ResolvedTemplate]:
        """
        Resolve a template by name.

        Args:
            name: Template name referenced by a program day

        Returns:
            The template if known, None otherwise. Raising is reserved for
            failures of the lookup itself (e.g. a storage error).
        """
        ...


class AsyncTemplateResolver(Protocol):
    """Asynchronous name -> template lookup, e.g. backed by a storage query."""

    async def __call__(self, name: str) -> Optional[ResolvedTemplate]:
        ...

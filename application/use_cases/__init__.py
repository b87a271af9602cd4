"""
Application use cases for the program library.

- instantiate_program: turn definitions into persisted graphs, resolving
  template names through an injected resolver
- seed_presets: store the built-in templates, then the built-in programs

Usage:
    from application.use_cases import instantiate, SeedPresetsUseCase

    program = instantiate(library.get("PPL 6-Day Split"), catalog.resolve)

    result = SeedPresetsUseCase(
        template_repo=template_repo,
        program_repo=program_repo,
        catalog=catalog,
        library=library,
    ).execute()
"""

from application.use_cases.instantiate_program import (
    ExerciseResolver,
    instantiate,
    instantiate_async,
    instantiate_template,
)
from application.use_cases.seed_presets import SeedPresetsResult, SeedPresetsUseCase

__all__ = [
    # Instantiation
    "instantiate",
    "instantiate_async",
    "instantiate_template",
    "ExerciseResolver",
    # SeedPresets
    "SeedPresetsUseCase",
    "SeedPresetsResult",
]

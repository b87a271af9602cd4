"""
Construction point for the template catalog and program library.

Both registries are built once and shared read-only afterwards. This module
is the single documented place where that happens; everything else receives
the built instances by injection.

Usage:
    from backend.main import build_libraries, get_libraries
    from backend.settings import Settings

    # Process-wide instance (uses get_settings())
    libraries = get_libraries()
    program = libraries.programs.get("PPL 6-Day Split")

    # Test instance with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    libraries = build_libraries(settings=test_settings)
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from backend.core.program_library import ProgramLibrary
from backend.core.programs import default_generators
from backend.core.template_catalog import TemplateCatalog
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Top-level packages whose loggers follow settings.log_level
PACKAGE_LOGGERS = ("domain", "application", "backend")


@dataclass(frozen=True)
class Libraries:
    """The built-in registries, built together so they stay consistent."""

    catalog: TemplateCatalog
    programs: ProgramLibrary


def build_libraries(settings: Optional[Settings] = None) -> Libraries:
    """
    Build the template catalog and program library.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Libraries holding both registries

    Raises:
        DefinitionIntegrityError: If built-in data is defective, or a program
            names a missing template while strict_template_references is set
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)

    catalog = TemplateCatalog.default()
    programs = ProgramLibrary(default_generators(settings.default_base_effort))
    programs.verify_template_references(catalog, strict=settings.strict_template_references)

    _log_summary(settings, catalog, programs)
    return Libraries(catalog=catalog, programs=programs)


@lru_cache
def get_libraries() -> Libraries:
    """
    Get the cached process-wide libraries.

    For testing, clear the cache with get_libraries.cache_clear().
    """
    return build_libraries()


def _configure_logging(settings: Settings) -> None:
    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(settings.log_level)


def _log_summary(settings: Settings, catalog: TemplateCatalog, programs: ProgramLibrary) -> None:
    """Log what was built at startup."""
    logger.info(
        "Built %d templates and %d programs (%s)",
        catalog.count(),
        programs.count(),
        settings.environment,
    )
    if settings.strict_template_references:
        logger.info("STRICT_TEMPLATE_REFERENCES is active")
    if settings.default_base_effort is not None:
        logger.info("DEFAULT_BASE_EFFORT overrides program effort: RPE %d", settings.default_base_effort)
    catalog.log_summary()

"""Catalog validator -- structural checks for skills and template catalogs.

Quick usage::

    from catalog_validator import Config, skills_profile, validate_catalog

    result = validate_catalog(skills_profile(Config()))
    print(result.summary_dict())
"""

from catalog_validator.config import Config, SkillsConfig, TemplatesConfig
from catalog_validator.engine import (
    CheckProfile,
    skills_profile,
    templates_profile,
    validate_catalog,
)
from catalog_validator.errors import RootNotFoundError
from catalog_validator.models import FailureKind, ItemResult, Outcome, RunResult

__version__ = "0.1.0"

__all__ = [
    "CheckProfile",
    "Config",
    "FailureKind",
    "ItemResult",
    "Outcome",
    "RootNotFoundError",
    "RunResult",
    "SkillsConfig",
    "TemplatesConfig",
    "skills_profile",
    "templates_profile",
    "validate_catalog",
]

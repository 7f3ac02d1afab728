"""
Content loading for the WCG character generator.

This module provides:
- Fatal content error types
- The skill registry used by class validation
- YAML loaders for classes, skills and professions (chargen.content_loader.yaml_loader)
- Startup bootstrapping of all content (chargen.content_loader.runtime_bootstrap)
"""

from chargen.content_loader.content_errors import (
    CharClassDataError,
    ContentLoadError,
    ContentValidationError,
    IncompleteRangeTableError,
)
from chargen.content_loader.skill_registry import SkillRegistry

__all__ = [
    # Errors
    "CharClassDataError",
    "ContentLoadError",
    "ContentValidationError",
    "IncompleteRangeTableError",
    # Registries
    "SkillRegistry",
]

"""
Runtime Content Bootstrapper for the WCG character generator.

Loads skills, classes and professions from disk and returns validated,
read-only registries. Loading is all or nothing: the first error is
raised and nothing partially built is returned.

Usage:
    from chargen.content_loader.runtime_bootstrap import load_runtime_content

    content = load_runtime_content(Path("chargen/data"))
    mage = content.classes.get_class_by_type(CharType.MAGE)
    professions = content.professions.generate_random_professions()

Directory layout:
    <content_root>/skills.yml
    <content_root>/professions.yml
    <content_root>/classes/*.yml
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from chargen.classes.class_manager import ClassManager
from chargen.content_loader.skill_registry import SkillRegistry
from chargen.content_loader.yaml_loader import (
    DEFAULT_DATA_DIR,
    ProfessionsYamlLoader,
    SkillsYamlLoader,
    get_class_loaders,
)
from chargen.tables.profession_tables import ProfessionManager, RandomSource

logger = logging.getLogger(__name__)


SKILLS_FILE = "skills.yml"
PROFESSIONS_FILE = "professions.yml"
CLASSES_DIR = "classes"


@dataclass
class RuntimeContentStats:
    """Statistics about loaded content."""

    skills_loaded: int = 0
    classes_loaded: int = 0
    profession_ranges_loaded: int = 0


@dataclass
class RuntimeContent:
    """
    Runtime-ready content data.

    Attributes:
        skills: Skill registry used for class validation
        classes: Validated class registry, one class per CharType
        professions: Profession roller over the validated 1-99 table
        stats: Load statistics
    """

    skills: SkillRegistry
    classes: ClassManager
    professions: ProfessionManager
    stats: RuntimeContentStats = field(default_factory=RuntimeContentStats)


def load_runtime_content(
    content_root: Optional[Path] = None,
    random_source: Optional[RandomSource] = None,
) -> RuntimeContent:
    """
    Load and validate all runtime content.

    Args:
        content_root: Root directory for content files.
            Defaults to the bundled chargen/data directory.
        random_source: Source of profession rolls. Defaults to DiceRoller.

    Returns:
        RuntimeContent with all registries built

    Raises:
        ContentValidationError: Any content failed to load or validate.
    """
    if content_root is None:
        content_root = DEFAULT_DATA_DIR
    content_root = Path(content_root)

    logger.info(f"Loading runtime content from: {content_root}")

    skills = SkillRegistry()
    skills.load(SkillsYamlLoader(content_root / SKILLS_FILE))

    classes = ClassManager.initialize(get_class_loaders(content_root / CLASSES_DIR), skills)

    professions = ProfessionManager.from_loader(
        ProfessionsYamlLoader(content_root / PROFESSIONS_FILE),
        random_source,
    )

    stats = RuntimeContentStats(
        skills_loaded=skills.skill_count,
        classes_loaded=len(classes.get_all()),
        profession_ranges_loaded=len(professions.table.ranges),
    )

    logger.info(
        f"Content loaded: {stats.skills_loaded} skills, "
        f"{stats.classes_loaded} classes, "
        f"{stats.profession_ranges_loaded} profession ranges"
    )

    return RuntimeContent(
        skills=skills,
        classes=classes,
        professions=professions,
        stats=stats,
    )

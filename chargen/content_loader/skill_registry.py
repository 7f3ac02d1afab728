"""
Skill Registry for the WCG character generator.

Holds the skill list loaded at startup and answers name lookups for
class feature validation.

Usage:
    registry = SkillRegistry()
    registry.load(SkillsYamlLoader(data_dir / "skills.yml"))

    skill = registry.get_by_name("Appraise")
"""

import logging
from typing import Iterable, Optional

from chargen.content_loader.content_errors import ContentLoadError
from chargen.data_models import CharType, Skill


logger = logging.getLogger(__name__)


class SkillRegistry:
    """Name-indexed store of skills. Read-only once loaded."""

    def __init__(self, skills: Optional[Iterable[Skill]] = None):
        self._skills: list[Skill] = []
        self._by_name: dict[str, Skill] = {}  # lowercase name -> skill

        for skill in skills or ():
            self.register(skill)

    @property
    def skill_count(self) -> int:
        return len(self._skills)

    def load(self, loader) -> int:
        """
        Load skills from a loader.

        Raises:
            ContentLoadError: The loader returned no data.
        """
        skills = loader.load_from_yaml()
        if skills is None:
            logger.error("Error loading skills YAML file")
            raise ContentLoadError("Error loading skills YAML file")

        for skill in skills:
            self.register(skill)

        logger.info(f"Loaded {self.skill_count} skills into registry")
        return self.skill_count

    def register(self, skill: Skill) -> None:
        """Register a skill. A later skill with the same name replaces the earlier one."""
        key = skill.name.lower()
        existing = self._by_name.get(key)
        if existing is not None:
            logger.warning(f"Duplicate skill name: {skill.name}")
            self._skills.remove(existing)
        self._skills.append(skill)
        self._by_name[key] = skill

    def get_by_name(self, name: Optional[str]) -> Optional[Skill]:
        """Look up a skill by name (case-insensitive)."""
        if not name:
            return None
        return self._by_name.get(name.lower())

    def get_all_skills(self) -> list[Skill]:
        return list(self._skills)

    def get_skills(self, char_type: CharType) -> list[Skill]:
        """
        Get the skills available to a class.

        Skill data carries no class restrictions, so every class gets the
        full list.
        """
        return self.get_all_skills()

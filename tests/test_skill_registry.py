"""
Unit tests for SkillRegistry.
"""

import pytest

from chargen.content_loader.content_errors import ContentLoadError
from chargen.content_loader.skill_registry import SkillRegistry
from chargen.data_models import AttributeType, CharType, Skill


class StubSkillsLoader:
    def __init__(self, skills):
        self._skills = skills

    def load_from_yaml(self):
        return self._skills


class TestSkillRegistry:
    """Tests for registering and looking up skills."""

    def test_empty_registry(self):
        registry = SkillRegistry()
        assert registry.skill_count == 0
        assert registry.get_by_name("Appraise") is None

    def test_lookup_is_case_insensitive(self, skill_registry):
        skill = skill_registry.get_by_name("appraise")
        assert skill is not None
        assert skill.name == "Appraise"
        assert skill_registry.get_by_name("SNEAK").name == "Sneak"

    def test_unknown_and_blank_names(self, skill_registry):
        assert skill_registry.get_by_name("Juggling") is None
        assert skill_registry.get_by_name("") is None
        assert skill_registry.get_by_name(None) is None

    def test_duplicate_name_replaces_earlier_skill(self):
        registry = SkillRegistry([
            Skill(name="Sneak", attribute=AttributeType.COR),
            Skill(name="sneak", attribute=AttributeType.PER),
        ])
        assert registry.skill_count == 1
        assert registry.get_by_name("Sneak").attribute == AttributeType.PER

    def test_skills_for_class_are_all_skills(self, skill_registry):
        for char_type in CharType:
            assert skill_registry.get_skills(char_type) == skill_registry.get_all_skills()


class TestSkillRegistryLoad:
    """Tests for loading skills through a loader."""

    def test_load(self):
        registry = SkillRegistry()
        count = registry.load(StubSkillsLoader([Skill(name="Ride"), Skill(name="Swim")]))
        assert count == 2
        assert registry.get_by_name("swim") is not None

    def test_load_without_data_fails(self):
        with pytest.raises(ContentLoadError) as exc_info:
            SkillRegistry().load(StubSkillsLoader(None))
        assert str(exc_info.value) == "Error loading skills YAML file"

"""
Pytest fixtures for the WCG character generator test suite.

Provides dice, skill registries, profession tables and temporary
content directories.
"""

import tempfile
from pathlib import Path

import pytest

from chargen.content_loader.skill_registry import SkillRegistry
from chargen.data_models import DiceRoller
from chargen.tables.profession_tables import ProfessionRange, ProfessionTable
from tests.helpers import TEST_PROFESSION_RANGES, TEST_SKILLS, write_content_dir


# =============================================================================
# DICE FIXTURES
# =============================================================================


@pytest.fixture
def seeded_dice():
    """Provide a seeded DiceRoller for reproducible tests."""
    DiceRoller.clear_roll_log()
    DiceRoller.set_seed(42)
    yield DiceRoller()
    DiceRoller.clear_roll_log()


@pytest.fixture
def clean_dice():
    """Provide a clean DiceRoller without seed."""
    DiceRoller.clear_roll_log()
    yield DiceRoller()
    DiceRoller.clear_roll_log()


# =============================================================================
# CONTENT FIXTURES
# =============================================================================


@pytest.fixture
def skill_registry():
    """A skill registry holding a few test skills."""
    return SkillRegistry(TEST_SKILLS)


@pytest.fixture
def profession_table():
    """The profession table used by the roll scenarios."""
    return ProfessionTable(
        ProfessionRange(low=low, high=high, name=name)
        for low, high, name in TEST_PROFESSION_RANGES
    )


@pytest.fixture
def temp_dir():
    """An empty temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def content_dir(temp_dir):
    """A temporary directory holding a complete, valid content set."""
    return write_content_dir(temp_dir)

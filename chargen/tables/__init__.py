"""
Random tables for the WCG character generator.

Currently the 1-99 profession table and its roll resolution.
"""

from chargen.tables.profession_tables import (
    PROFESSION_ROLL_MAX,
    PROFESSION_ROLL_MIN,
    GeneratedProfessions,
    Profession,
    ProfessionManager,
    ProfessionRange,
    ProfessionTable,
    reverse_roll,
)

__all__ = [
    "PROFESSION_ROLL_MAX",
    "PROFESSION_ROLL_MIN",
    "GeneratedProfessions",
    "Profession",
    "ProfessionManager",
    "ProfessionRange",
    "ProfessionTable",
    "reverse_roll",
]

"""
Core data models for the WCG character generator.

Shared enumerations (character types, attributes), the skill record and
the centralized dice roller used for every random draw.
"""

import logging
import random
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, TypeVar


logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


# =============================================================================
# ENUMERATIONS
# =============================================================================


class CharType(str, Enum):
    """Playable character classes. Each has exactly one class definition."""
    BERZERKER = "berzerker"
    MAGE = "mage"
    MYSTIC = "mystic"
    ROGUE = "rogue"
    SKALD = "skald"
    WARRIOR = "warrior"


class AttributeType(str, Enum):
    """Character attributes, plus the synthetic initiative value."""
    STR = "STR"                 # Strength
    COR = "COR"                 # Coordination
    STA = "STA"                 # Stamina
    PER = "PER"                 # Perception
    INT = "INT"                 # Intellect
    PRS = "PRS"                 # Presence
    LUC = "LUC"                 # Luck
    INITIATIVE = "Initiative"


def parse_enum(enum_cls: type[E], value: Optional[str]) -> Optional[E]:
    """
    Case-insensitive lookup of an enum member by name.

    Returns None when the value is missing or names no member, so callers
    can treat a bad tag as an ordinary value instead of an exception.
    """
    if value is None:
        return None
    return enum_cls.__members__.get(value.upper())


# =============================================================================
# SKILLS
# =============================================================================


@dataclass(frozen=True)
class Skill:
    """A skill record. Only the name matters to class validation."""
    name: str
    attribute: Optional[AttributeType] = None
    description: str = ""


# =============================================================================
# DICE AND RANDOMIZATION
# =============================================================================


class DiceRoller:
    """
    Centralized randomization interface.
    All random draws must go through this class for reproducibility and logging.

    The roll log keeps only the most recent ROLL_LOG_LIMIT draws.
    """

    ROLL_LOG_LIMIT = 1000

    _instance = None
    _seed: Optional[int] = None
    _roll_log: deque = deque(maxlen=ROLL_LOG_LIMIT)

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def set_seed(cls, seed: int) -> None:
        """Set random seed for reproducibility."""
        cls._seed = seed
        random.seed(seed)

    @classmethod
    def get_int_from_range(cls, low: int, high: int, reason: str = "") -> int:
        """
        Draw one uniformly distributed integer in [low, high].

        Args:
            low: Smallest value that may be drawn
            high: Largest value that may be drawn
            reason: Why this draw is being made (for logging)
        """
        if low > high:
            raise ValueError(f"Invalid range {low}-{high}")

        value = random.randint(low, high)
        cls._roll_log.append(DiceResult(
            notation=f"{low}-{high}",
            total=value,
            reason=reason
        ))
        logger.debug(f"Rolled {value} in range {low}-{high} ({reason})")
        return value

    @classmethod
    def get_roll_log(cls) -> list:
        """Get the recent roll log, oldest first."""
        return list(cls._roll_log)

    @classmethod
    def clear_roll_log(cls) -> None:
        """Clear the roll log."""
        cls._roll_log = deque(maxlen=cls.ROLL_LOG_LIMIT)


@dataclass
class DiceResult:
    """One logged draw."""
    notation: str
    total: int
    reason: str
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.notation}: {self.total}"

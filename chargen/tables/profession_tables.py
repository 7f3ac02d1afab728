"""
Profession table and roll resolution.

Professions are assigned from a single 1-99 roll. The table maps every
integer in that range to exactly one profession. A roll yields the
profession at the roll plus the profession at its "dual", the number
formed by reversing the roll's two digits (09 -> 90, 40 -> 04, 28 -> 82).

Doubles (11, 22, ... 99) are their own dual. Instead of repeating one
profession they yield the professions at roll - 11, roll and roll + 11,
clamped to the table.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol

from chargen.content_loader.content_errors import (
    ContentLoadError,
    IncompleteRangeTableError,
)
from chargen.data_models import DiceRoller


logger = logging.getLogger(__name__)


PROFESSION_ROLL_MIN = 1
PROFESSION_ROLL_MAX = 99
PALINDROME_SPREAD = 11


@dataclass(frozen=True)
class ProfessionRange:
    """A profession and the inclusive roll range that selects it."""
    low: int
    high: int
    name: str
    description: str = ""

    def contains(self, roll: int) -> bool:
        return self.low <= roll <= self.high


@dataclass(frozen=True)
class Profession:
    """A rolled profession."""
    name: str
    description: str = ""


@dataclass
class GeneratedProfessions:
    """Result of one profession roll."""
    roll: int
    dual: int
    professions: list[Profession] = field(default_factory=list)

    @property
    def names(self) -> list[str]:
        return [p.name for p in self.professions]

    @property
    def is_palindrome(self) -> bool:
        return self.roll == self.dual


class RandomSource(Protocol):
    """Supplies one uniformly distributed integer per call."""
    def get_int_from_range(self, low: int, high: int, reason: str = "") -> int:
        ...


def reverse_roll(roll: int) -> int:
    """
    Reverse the two-digit decimal form of a roll.

    Single-digit rolls are zero padded first, so 9 -> 90 and 40 -> 4.
    """
    return int(f"{roll:02d}"[::-1])


class ProfessionTable:
    """
    Immutable mapping from 1-99 to professions.

    Built once from a list of ranges; construction fails unless the ranges
    cover every integer in 1-99 exactly once.
    """

    def __init__(self, ranges: Iterable[ProfessionRange]):
        self._ranges: tuple[ProfessionRange, ...] = tuple(
            sorted(ranges, key=lambda r: (r.low, r.high))
        )
        self._by_roll: tuple[Profession, ...] = self._build_index(self._ranges)

    @staticmethod
    def _build_index(ranges: tuple[ProfessionRange, ...]) -> tuple[Profession, ...]:
        """Check coverage and expand the ranges into one slot per roll."""
        slots: list[Optional[Profession]] = [None] * PROFESSION_ROLL_MAX

        for prof_range in ranges:
            if prof_range.low > prof_range.high:
                raise IncompleteRangeTableError(
                    f"Professions table has invalid range "
                    f"{prof_range.low}-{prof_range.high} for {prof_range.name}"
                )
            if prof_range.low < PROFESSION_ROLL_MIN or prof_range.high > PROFESSION_ROLL_MAX:
                raise IncompleteRangeTableError("Professions table has missing elements")

            profession = Profession(name=prof_range.name, description=prof_range.description)
            for roll in range(prof_range.low, prof_range.high + 1):
                if slots[roll - 1] is not None:
                    raise IncompleteRangeTableError(
                        "Professions table has overlapping elements"
                    )
                slots[roll - 1] = profession

        if any(slot is None for slot in slots):
            raise IncompleteRangeTableError("Professions table has missing elements")

        return tuple(slots)

    @property
    def ranges(self) -> tuple[ProfessionRange, ...]:
        return self._ranges

    def lookup(self, roll: int) -> Profession:
        """Get the profession for a roll in 1-99."""
        return self._by_roll[roll - 1]

    def get_all_professions(self) -> list[Profession]:
        """Get every distinct profession in table order."""
        return [self.lookup(r.low) for r in self._ranges]


class ProfessionManager:
    """
    Rolls professions against a validated profession table.

    Draws exactly one number from the random source per generation,
    whatever the number of professions returned.
    """

    def __init__(self, table: ProfessionTable, random_source: Optional[RandomSource] = None):
        self._table = table
        self._random = random_source if random_source is not None else DiceRoller()

    @classmethod
    def from_loader(cls, loader, random_source: Optional[RandomSource] = None) -> "ProfessionManager":
        """
        Build a manager from a profession data loader.

        Raises:
            ContentLoadError: The loader returned no data.
            IncompleteRangeTableError: The ranges do not cover 1-99.
        """
        ranges = loader.load_from_yaml()
        if ranges is None:
            logger.error("Error loading professions YAML file")
            raise ContentLoadError("Error loading professions YAML file")

        try:
            table = ProfessionTable(ranges)
        except IncompleteRangeTableError as e:
            logger.error(f"Invalid profession table: {e}")
            raise

        logger.info(f"Loaded {len(table.ranges)} profession ranges")
        return cls(table, random_source)

    @property
    def table(self) -> ProfessionTable:
        return self._table

    def resolve(self, roll: int) -> GeneratedProfessions:
        """
        Resolve a roll in 1-99 to its professions.

        Returns the roll's profession then its dual's, or for doubles the
        professions at roll - 11, roll and roll + 11 in ascending order.
        Duplicates are kept.
        """
        dual = reverse_roll(roll)

        if dual == roll:
            low = max(PROFESSION_ROLL_MIN, roll - PALINDROME_SPREAD)
            high = min(PROFESSION_ROLL_MAX, roll + PALINDROME_SPREAD)
            rolls = [low, roll, high]
        else:
            rolls = [roll, dual]

        return GeneratedProfessions(
            roll=roll,
            dual=dual,
            professions=[self._table.lookup(r) for r in rolls],
        )

    def generate_random_professions(self) -> GeneratedProfessions:
        """Roll once and resolve the professions for that roll."""
        roll = self._random.get_int_from_range(
            PROFESSION_ROLL_MIN, PROFESSION_ROLL_MAX, reason="profession"
        )
        result = self.resolve(roll)
        logger.debug(f"Profession roll {roll} (dual {result.dual}): {result.names}")
        return result

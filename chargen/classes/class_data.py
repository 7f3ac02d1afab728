"""
Core data structures for WCG character classes.

Each class grants two tiers of features. A feature carries a description
and a list of attributes; every attribute has a type tag and a modifier
string whose legal values depend on the tag and on the owning class.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Every tier of every class must hold between these many features
NUM_FEATURES_MIN = 4
NUM_FEATURES_MAX = 6


class FeatureAttributeType(str, Enum):
    """Kinds of feature attribute entries."""
    ADV = "ADV"                     # Advantage on a skill or attribute
    DADV = "DADV"                   # Disadvantage on a skill or attribute
    ATTR_PLUS_1 = "ATTR_PLUS_1"     # +1 to an attribute
    BONUS_HP = "BONUS_HP"           # Flat hit point bonus
    DA_PLUS_1 = "DA_PLUS_1"         # +1 die adjustment
    SKILL = "SKILL"                 # Extra skill


class AttrPlusOneModifier(str, Enum):
    """Targets of an ATTR_PLUS_1 attribute."""
    STR = "STR"
    COR = "COR"
    STA = "STA"
    PER = "PER"
    INT = "INT"
    PRS = "PRS"
    LUC = "LUC"
    ANY = "ANY"                     # Player's choice


class DaPlusOneModifier(str, Enum):
    """Targets of a DA_PLUS_1 attribute."""
    ALL = "ALL"
    LIGHT = "LIGHT"
    MEDIUM = "MEDIUM"
    HEAVY = "HEAVY"


class FeatureTier(str, Enum):
    """Feature tiers a class grants."""
    TIER_I = "Tier I"
    TIER_II = "Tier II"


@dataclass(frozen=True)
class FeatureAttribute:
    """A typed modifier attached to a feature."""
    type: FeatureAttributeType
    modifier: str = ""


@dataclass(frozen=True)
class Feature:
    """A single class feature."""
    description: str
    attributes: tuple[FeatureAttribute, ...] = ()


@dataclass(frozen=True)
class ClassFeatures:
    """
    Both feature tiers of a class.

    Either tier may be None when the source data omitted it; the class
    manager rejects such data at startup.
    """
    tier1: Optional[tuple[Feature, ...]] = None
    tier2: Optional[tuple[Feature, ...]] = None

    def get_tier(self, tier: FeatureTier) -> Optional[tuple[Feature, ...]]:
        """Get the feature list for a tier."""
        if tier == FeatureTier.TIER_I:
            return self.tier1
        return self.tier2


@dataclass(frozen=True)
class CharClass:
    """
    A character class definition as read from its source file.

    `type` is the raw tag from the data file; the class manager parses
    it into a CharType when the class is registered.
    """
    type: str
    features: Optional[ClassFeatures] = None
    name: str = ""
    source_file: str = ""

    def get_features(self, tier: FeatureTier) -> list[Feature]:
        """Get the features for a tier, empty if the class has none."""
        if self.features is None:
            return []
        return list(self.features.get_tier(tier) or ())

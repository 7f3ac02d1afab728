"""
WCG character class system.

Provides class definitions and startup validation for the 6 classes:
- Berzerker
- Mage: keys extra skills off INT
- Mystic: may gain advantage on unarmed damage
- Rogue: may gain advantage on any roll
- Skald: gains extra skills and Forgotten Lore
- Warrior
"""

from chargen.classes.class_data import (
    NUM_FEATURES_MAX,
    NUM_FEATURES_MIN,
    AttrPlusOneModifier,
    CharClass,
    ClassFeatures,
    DaPlusOneModifier,
    Feature,
    FeatureAttribute,
    FeatureAttributeType,
    FeatureTier,
)
from chargen.classes.feature_validator import (
    FeatureValidationError,
    FeatureValidationResult,
    ModifierValidationResult,
    validate_features,
    validate_modifier,
)
from chargen.classes.class_manager import ClassManager

__all__ = [
    # Data structures
    "NUM_FEATURES_MAX",
    "NUM_FEATURES_MIN",
    "AttrPlusOneModifier",
    "CharClass",
    "ClassFeatures",
    "DaPlusOneModifier",
    "Feature",
    "FeatureAttribute",
    "FeatureAttributeType",
    "FeatureTier",
    # Validation
    "FeatureValidationError",
    "FeatureValidationResult",
    "ModifierValidationResult",
    "validate_features",
    "validate_modifier",
    # Manager
    "ClassManager",
]

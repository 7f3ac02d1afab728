"""
Validation of class feature data.

Each feature attribute type has its own modifier grammar; the grammars are
collected in a dispatch table keyed by FeatureAttributeType so that adding
a new attribute type is a one-place change. Attribute types without an
entry accept any modifier.

Validators are pure: they never raise for bad data and never mutate their
inputs. Failures come back as result values carrying an error code and a
message suitable for a startup error.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol, Sequence

from chargen.data_models import AttributeType, CharType, Skill, parse_enum
from chargen.classes.class_data import (
    NUM_FEATURES_MAX,
    NUM_FEATURES_MIN,
    AttrPlusOneModifier,
    DaPlusOneModifier,
    Feature,
    FeatureAttributeType,
)


INITIATIVE = "Initiative"
SKALD_FORGOTTEN_LORE = "Forgotten Lore"
MYSTIC_UNARMED_DAMAGE = "Unarmed Damage"
ROGUE_ANY = "Any"

# Extra ADV/DADV modifiers allowed only for one class
CLASS_ADV_DADV_MODIFIERS: dict[CharType, str] = {
    CharType.SKALD: SKALD_FORGOTTEN_LORE,
    CharType.MYSTIC: MYSTIC_UNARMED_DAMAGE,
    CharType.ROGUE: ROGUE_ANY,
}

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


class SkillLookup(Protocol):
    """Anything that can find a skill by name."""
    def get_by_name(self, name: str) -> Optional[Skill]:
        ...


class FeatureValidationError(str, Enum):
    """Rules a feature list can break."""
    MISSING_FEATURE_LIST = "missing_feature_list"
    FEATURE_COUNT_OUT_OF_RANGE = "feature_count_out_of_range"
    BLANK_DESCRIPTION = "blank_description"
    INVALID_ADV_DADV_MODIFIER = "invalid_adv_dadv_modifier"
    INVALID_ATTR_PLUS_ONE_MODIFIER = "invalid_attr_plus_one_modifier"
    INVALID_BONUS_HP_MODIFIER = "invalid_bonus_hp_modifier"
    INVALID_DA_PLUS_ONE_MODIFIER = "invalid_da_plus_one_modifier"
    UNEXPECTED_SKILL_OWNER = "unexpected_skill_owner"
    INVALID_SKILL_MODIFIER = "invalid_skill_modifier"


@dataclass(frozen=True)
class ModifierValidationResult:
    """Result of checking one attribute modifier."""
    is_valid: bool
    error: Optional[FeatureValidationError] = None
    message: str = ""


@dataclass(frozen=True)
class FeatureValidationResult:
    """
    Result of checking a feature list.

    On failure, feature_index and attribute_index locate the offending
    record within the list (attribute_index is None for feature-level
    failures).
    """
    is_valid: bool
    error: Optional[FeatureValidationError] = None
    message: str = ""
    feature_index: Optional[int] = None
    attribute_index: Optional[int] = None


VALID = ModifierValidationResult(is_valid=True)


def _invalid(error: FeatureValidationError, message: str) -> ModifierValidationResult:
    return ModifierValidationResult(is_valid=False, error=error, message=message)


def _is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


# =============================================================================
# MODIFIER GRAMMARS
# =============================================================================


def check_adv_dadv_modifier(
    modifier: str,
    char_type: CharType,
    skills: SkillLookup,
) -> ModifierValidationResult:
    """
    Check the modifier of an ADV or DADV attribute.

    Legal values are any known skill, any attribute name (any case),
    "Initiative", and one extra literal for skalds, mystics and rogues.
    """
    if modifier == INITIATIVE:
        return VALID

    if skills.get_by_name(modifier) is not None:
        return VALID

    if parse_enum(AttributeType, modifier) is not None:
        return VALID

    if CLASS_ADV_DADV_MODIFIERS.get(char_type) == modifier:
        return VALID

    return _invalid(
        FeatureValidationError.INVALID_ADV_DADV_MODIFIER,
        f"Unexpected modifier {modifier} found for ADV/DADV value type",
    )


def check_attr_plus_one_modifier(
    modifier: str,
    char_type: CharType,
    skills: SkillLookup,
) -> ModifierValidationResult:
    """Modifier must name an AttrPlusOneModifier."""
    if parse_enum(AttrPlusOneModifier, modifier) is None:
        return _invalid(
            FeatureValidationError.INVALID_ATTR_PLUS_ONE_MODIFIER,
            f"Error reading modifier {modifier} for ATTR_PLUS_1 value type",
        )
    return VALID


def check_bonus_hp_modifier(
    modifier: str,
    char_type: CharType,
    skills: SkillLookup,
) -> ModifierValidationResult:
    """Modifier must be an integer, sign optional."""
    if not _INTEGER_PATTERN.fullmatch(modifier):
        return _invalid(
            FeatureValidationError.INVALID_BONUS_HP_MODIFIER,
            f"Modifier {modifier} for BONUS_HP value type must be an integer",
        )
    return VALID


def check_da_plus_one_modifier(
    modifier: str,
    char_type: CharType,
    skills: SkillLookup,
) -> ModifierValidationResult:
    """Modifier must name a DaPlusOneModifier."""
    if parse_enum(DaPlusOneModifier, modifier) is None:
        return _invalid(
            FeatureValidationError.INVALID_DA_PLUS_ONE_MODIFIER,
            f"Error reading modifier {modifier} for DA_PLUS_1 value type",
        )
    return VALID


def check_skill_modifier(
    modifier: str,
    char_type: CharType,
    skills: SkillLookup,
) -> ModifierValidationResult:
    """
    Check the modifier of a SKILL attribute.

    Only skalds and mages have SKILL attributes. Skalds leave the modifier
    blank; mages key their extra skills off INT.
    """
    if char_type == CharType.SKALD:
        if not _is_blank(modifier):
            return _invalid(
                FeatureValidationError.INVALID_SKILL_MODIFIER,
                f"Expected blank string for SKILL modifier for skald, but found {modifier}",
            )
        return VALID

    if char_type == CharType.MAGE:
        attribute = parse_enum(AttributeType, modifier)
        if attribute is None:
            return _invalid(
                FeatureValidationError.INVALID_SKILL_MODIFIER,
                f"Error reading modifier {modifier} for SKILL value type for mage, expected INT",
            )
        if attribute != AttributeType.INT:
            return _invalid(
                FeatureValidationError.INVALID_SKILL_MODIFIER,
                f"Expected INT for SKILL modifier for mage, but found {modifier}",
            )
        return VALID

    return _invalid(
        FeatureValidationError.UNEXPECTED_SKILL_OWNER,
        f"Found SKILL attribute with unexpected character type {char_type.name}",
    )


ModifierCheck = Callable[[str, CharType, SkillLookup], ModifierValidationResult]

MODIFIER_CHECKS: dict[FeatureAttributeType, ModifierCheck] = {
    FeatureAttributeType.ADV: check_adv_dadv_modifier,
    FeatureAttributeType.DADV: check_adv_dadv_modifier,
    FeatureAttributeType.ATTR_PLUS_1: check_attr_plus_one_modifier,
    FeatureAttributeType.BONUS_HP: check_bonus_hp_modifier,
    FeatureAttributeType.DA_PLUS_1: check_da_plus_one_modifier,
    FeatureAttributeType.SKILL: check_skill_modifier,
}


def validate_modifier(
    attribute_type: FeatureAttributeType,
    modifier: Optional[str],
    char_type: CharType,
    skills: SkillLookup,
) -> ModifierValidationResult:
    """Check one (attribute type, modifier, owner) triple."""
    check = MODIFIER_CHECKS.get(attribute_type)
    if check is None:
        return VALID
    return check(modifier or "", char_type, skills)


# =============================================================================
# FEATURE LISTS
# =============================================================================


def validate_features(
    features: Optional[Sequence[Feature]],
    char_type: CharType,
    skills: SkillLookup,
) -> FeatureValidationResult:
    """
    Check one tier of features for a class.

    Stops at the first failure. The result does not know which tier was
    checked; callers add that to their error message.
    """
    if features is None:
        return FeatureValidationResult(
            is_valid=False,
            error=FeatureValidationError.MISSING_FEATURE_LIST,
            message="Null feature list",
        )

    num_features = len(features)
    if num_features < NUM_FEATURES_MIN or num_features > NUM_FEATURES_MAX:
        return FeatureValidationResult(
            is_valid=False,
            error=FeatureValidationError.FEATURE_COUNT_OUT_OF_RANGE,
            message=(
                f"Expected between {NUM_FEATURES_MIN} and {NUM_FEATURES_MAX} "
                f"features in list, but got {num_features}"
            ),
        )

    for feature_index, feature in enumerate(features):
        if _is_blank(feature.description):
            return FeatureValidationResult(
                is_valid=False,
                error=FeatureValidationError.BLANK_DESCRIPTION,
                message="Feature with blank description found",
                feature_index=feature_index,
            )

        for attribute_index, attr in enumerate(feature.attributes):
            result = validate_modifier(attr.type, attr.modifier, char_type, skills)
            if not result.is_valid:
                return FeatureValidationResult(
                    is_valid=False,
                    error=result.error,
                    message=result.message,
                    feature_index=feature_index,
                    attribute_index=attribute_index,
                )

    return FeatureValidationResult(is_valid=True)

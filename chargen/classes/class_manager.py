"""
Class manager for WCG character classes.

Builds the registry of class definitions at startup. Every class file is
loaded, its type tag parsed and both feature tiers validated; any failure
aborts startup. The finished registry holds exactly one class per
CharType and is never modified afterwards.
"""

import logging
from types import MappingProxyType
from typing import Iterable, Mapping, NoReturn, Optional, Protocol

from chargen.classes.class_data import CharClass, Feature, FeatureTier
from chargen.classes.feature_validator import SkillLookup, validate_features
from chargen.content_loader.content_errors import CharClassDataError, ContentLoadError
from chargen.data_models import CharType, parse_enum


logger = logging.getLogger(__name__)


class CharClassLoader(Protocol):
    """Loads one class definition from a source file."""
    yaml_file: object

    def load_from_yaml(self) -> Optional[CharClass]:
        ...


class ClassManager:
    """
    Read-only registry of validated class definitions.

    Use ClassManager.initialize() to build one from loaders; the
    constructor trusts its input and is meant for already validated data.
    """

    def __init__(self, classes: Mapping[CharType, CharClass]):
        self._classes: Mapping[CharType, CharClass] = MappingProxyType(dict(classes))

    @classmethod
    def initialize(
        cls,
        loaders: Iterable[CharClassLoader],
        skills: SkillLookup,
    ) -> "ClassManager":
        """
        Load and validate every class definition.

        Args:
            loaders: One loader per class source file
            skills: Skill lookup used to validate ADV/DADV modifiers

        Returns:
            A fully validated ClassManager

        Raises:
            ContentLoadError: A loader returned no data.
            CharClassDataError: A class failed validation, was defined
                twice, or a CharType has no class.
        """
        classes: dict[CharType, CharClass] = {}

        for loader in loaders:
            char_class = loader.load_from_yaml()
            yaml_file = loader.yaml_file

            if char_class is None:
                _fail(ContentLoadError(f"Error loading character class YAML file {yaml_file}"))

            char_type = parse_enum(CharType, char_class.type)
            if char_type is None:
                _fail(CharClassDataError(
                    f"Character class type {char_class.type} found in YAML file "
                    f"{yaml_file} is not valid"
                ))

            if char_type in classes:
                _fail(CharClassDataError(
                    f"Character class type {char_class.type} is defined more than once",
                    char_type=char_type,
                ))

            _validate_class(char_class, char_type, skills)
            classes[char_type] = char_class
            logger.info(f"Loaded class: {char_type.name}")

        # Ensure that we have one character class for each character type
        for char_type in CharType:
            if char_type not in classes:
                _fail(CharClassDataError(
                    f"No entry for character type {char_type.name} in character class type map",
                    char_type=char_type,
                ))

        logger.info(f"Loaded {len(classes)} character classes")
        return cls(classes)

    def get_class_by_type(self, char_type: CharType) -> Optional[CharClass]:
        """Get a class definition by type, None if there is none."""
        return self._classes.get(char_type)

    def get_all(self) -> list[CharClass]:
        """Get all class definitions in CharType order."""
        return [self._classes[t] for t in CharType if t in self._classes]

    def get_all_types(self) -> list[CharType]:
        return [t for t in CharType if t in self._classes]

    def get_features(self, char_type: CharType, tier: FeatureTier) -> list[Feature]:
        """Get one tier of features for a class, empty if the class is unknown."""
        char_class = self.get_class_by_type(char_type)
        if char_class is None:
            return []
        return char_class.get_features(tier)


def _validate_class(char_class: CharClass, char_type: CharType, skills: SkillLookup) -> None:
    """Validate both tiers of a class, raising on the first failure."""
    if char_class.features is None:
        _fail(CharClassDataError(
            f"Character class type {char_class.type} has null feature data",
            char_type=char_type,
        ))

    for tier in FeatureTier:
        result = validate_features(char_class.features.get_tier(tier), char_type, skills)
        if not result.is_valid:
            location = ""
            if result.feature_index is not None:
                location = f" (feature {result.feature_index + 1})"
            _fail(CharClassDataError(
                f"Character class type {char_class.type} has invalid {tier.value} "
                f"feature data: {result.message}{location}",
                char_type=char_type,
                tier=tier,
                result=result,
            ))


def _fail(error: Exception) -> NoReturn:
    logger.error(str(error))
    raise error

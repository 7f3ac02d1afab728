"""
YAML loaders for character generator content.

Each loader reads one YAML file and turns it into the data structures
used by the registries. Loaders never raise on bad input: a missing file,
a YAML syntax error, an empty document or a malformed record is logged
and reported as None, and the registry that asked for the data decides
that this is fatal.

Class file format:
    type: mage
    name: Mage
    features:
      tier1:
        - description: "Arcane training"
          attributes:
            - type: SKILL
              modifier: INT
      tier2:
        - ...

Skills file format:
    skills:
      - name: Appraise
        attribute: INT
        description: "..."

Professions file format:
    professions:
      - name: Alchemist
        range_start: 1
        range_end: 3
"""

import logging
from pathlib import Path
from typing import Any, Generic, Optional, TypeVar

import yaml

from chargen.classes.class_data import (
    CharClass,
    ClassFeatures,
    Feature,
    FeatureAttribute,
    FeatureAttributeType,
)
from chargen.data_models import AttributeType, Skill, parse_enum
from chargen.tables.profession_tables import ProfessionRange


logger = logging.getLogger(__name__)

T = TypeVar("T")

# Bundled content shipped with the package
DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"


class MalformedContentError(ValueError):
    """Raised internally when a YAML record has the wrong shape."""
    pass


class YamlLoader(Generic[T]):
    """
    Base class for single-file YAML loaders.

    Subclasses implement parse() to turn the raw document into T.
    """

    def __init__(self, yaml_file: Path):
        self.yaml_file = Path(yaml_file)

    def load_from_yaml(self) -> Optional[T]:
        """
        Load and parse the YAML file.

        Returns:
            The parsed content, or None if the file could not be used.
        """
        try:
            with open(self.yaml_file, "rb") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            logger.error(f"Could not read {self.yaml_file}: {e}")
            return None
        except yaml.YAMLError as e:
            logger.error(f"Invalid YAML in {self.yaml_file}: {e}")
            return None

        if not data:
            logger.error(f"Empty YAML file: {self.yaml_file}")
            return None

        try:
            return self.parse(data)
        except MalformedContentError as e:
            logger.error(f"Malformed content in {self.yaml_file}: {e}")
            return None

    def parse(self, data: Any) -> T:
        raise NotImplementedError


def _require_mapping(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedContentError(f"Expected a mapping for {what}")
    return value


def _require_list(value: Any, what: str) -> list[Any]:
    if not isinstance(value, list):
        raise MalformedContentError(f"Expected a list for {what}")
    return value


def _as_int(value: Any, where: str) -> int:
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedContentError(f"Expected an integer for {where}, got {value!r}")
    return value


def _as_text(value: Any) -> str:
    # YAML turns bare numbers into ints, e.g. "modifier: 2"
    if value is None:
        return ""
    return str(value)


# =============================================================================
# CHARACTER CLASSES
# =============================================================================


class CharClassYamlLoader(YamlLoader[CharClass]):
    """Loads one character class definition."""

    def parse(self, data: Any) -> CharClass:
        data = _require_mapping(data, "character class")

        features = data.get("features")
        return CharClass(
            type=_as_text(data.get("type")),
            name=_as_text(data.get("name")),
            features=self._parse_features(features) if features is not None else None,
            source_file=self.yaml_file.name,
        )

    def _parse_features(self, data: Any) -> ClassFeatures:
        data = _require_mapping(data, "features")
        return ClassFeatures(
            tier1=self._parse_tier(data.get("tier1"), "tier1"),
            tier2=self._parse_tier(data.get("tier2"), "tier2"),
        )

    def _parse_tier(self, data: Any, tier_name: str) -> Optional[tuple[Feature, ...]]:
        if data is None:
            return None
        return tuple(
            self._parse_feature(item, f"{tier_name}[{i}]")
            for i, item in enumerate(_require_list(data, tier_name))
        )

    def _parse_feature(self, data: Any, where: str) -> Feature:
        data = _require_mapping(data, where)
        attributes = data.get("attributes") or []
        return Feature(
            description=_as_text(data.get("description")),
            attributes=tuple(
                self._parse_attribute(attr, f"{where}.attributes[{i}]")
                for i, attr in enumerate(_require_list(attributes, f"{where}.attributes"))
            ),
        )

    def _parse_attribute(self, data: Any, where: str) -> FeatureAttribute:
        data = _require_mapping(data, where)
        raw_type = _as_text(data.get("type"))
        attribute_type = parse_enum(FeatureAttributeType, raw_type)
        if attribute_type is None:
            raise MalformedContentError(f"Unknown attribute type '{raw_type}' at {where}")
        return FeatureAttribute(
            type=attribute_type,
            modifier=_as_text(data.get("modifier")),
        )


def get_class_loaders(class_dir: Optional[Path] = None) -> list[CharClassYamlLoader]:
    """
    Build one loader per class file in a directory.

    Args:
        class_dir: Directory of class YAML files.
            Defaults to the bundled data/classes.
    """
    if class_dir is None:
        class_dir = DEFAULT_DATA_DIR / "classes"
    return [CharClassYamlLoader(path) for path in sorted(Path(class_dir).glob("*.yml"))]


# =============================================================================
# SKILLS
# =============================================================================


class SkillsYamlLoader(YamlLoader[list[Skill]]):
    """Loads the skill list."""

    def parse(self, data: Any) -> list[Skill]:
        data = _require_mapping(data, "skills file")
        skills = []
        for i, item in enumerate(_require_list(data.get("skills"), "skills")):
            item = _require_mapping(item, f"skills[{i}]")
            name = _as_text(item.get("name")).strip()
            if not name:
                raise MalformedContentError(f"Skill without a name at skills[{i}]")

            raw_attribute = item.get("attribute")
            attribute = parse_enum(AttributeType, _as_text(raw_attribute))
            if raw_attribute is not None and attribute is None:
                raise MalformedContentError(
                    f"Unknown attribute '{raw_attribute}' for skill {name}"
                )

            skills.append(Skill(
                name=name,
                attribute=attribute,
                description=_as_text(item.get("description")),
            ))
        return skills


# =============================================================================
# PROFESSIONS
# =============================================================================


class ProfessionsYamlLoader(YamlLoader[list[ProfessionRange]]):
    """Loads the profession ranges."""

    def parse(self, data: Any) -> list[ProfessionRange]:
        data = _require_mapping(data, "professions file")
        ranges = []
        for i, item in enumerate(_require_list(data.get("professions"), "professions")):
            item = _require_mapping(item, f"professions[{i}]")
            low = _as_int(item.get("range_start"), f"professions[{i}].range_start")
            high = _as_int(item.get("range_end"), f"professions[{i}].range_end")

            name = _as_text(item.get("name")).strip()
            if not name:
                raise MalformedContentError(f"Profession without a name at professions[{i}]")

            ranges.append(ProfessionRange(
                low=low,
                high=high,
                name=name,
                description=_as_text(item.get("description")),
            ))
        return ranges

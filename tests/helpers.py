"""
Test helpers for the WCG character generator test suite.

Builders for features and class definitions, plus writers for YAML
content directories so loaders can be exercised against real files.
"""

from pathlib import Path
from typing import Any, Optional

import yaml

from chargen.classes.class_data import (
    NUM_FEATURES_MIN,
    CharClass,
    ClassFeatures,
    Feature,
    FeatureAttribute,
    FeatureAttributeType,
)
from chargen.data_models import CharType, Skill


TEST_SKILLS = [
    Skill(name="Appraise"),
    Skill(name="Sneak"),
    Skill(name="Arcana"),
]


def make_feature(
    description: str = "A test feature",
    *attributes: tuple[FeatureAttributeType, str],
) -> Feature:
    """Build a feature from (type, modifier) pairs."""
    return Feature(
        description=description,
        attributes=tuple(FeatureAttribute(type=t, modifier=m) for t, m in attributes),
    )


def make_features(count: int = NUM_FEATURES_MIN) -> tuple[Feature, ...]:
    """Build a list of valid, attribute-free features."""
    return tuple(make_feature(f"Feature {i + 1}") for i in range(count))


def make_char_class(
    char_type: CharType,
    tier1: Optional[tuple[Feature, ...]] = None,
    tier2: Optional[tuple[Feature, ...]] = None,
) -> CharClass:
    """Build a valid class definition, optionally overriding a tier."""
    return CharClass(
        type=char_type.value,
        name=char_type.name.title(),
        features=ClassFeatures(
            tier1=tier1 if tier1 is not None else make_features(),
            tier2=tier2 if tier2 is not None else make_features(),
        ),
    )


class StubClassLoader:
    """Class loader returning a fixed definition."""

    def __init__(self, char_class: Optional[CharClass], yaml_file: str = "stub.yml"):
        self._char_class = char_class
        self.yaml_file = yaml_file

    def load_from_yaml(self) -> Optional[CharClass]:
        return self._char_class


def stub_loaders_for_all_types(**overrides: CharClass) -> list[StubClassLoader]:
    """One valid stub loader per CharType; overrides keyed by lowercase type name."""
    loaders = []
    for char_type in CharType:
        char_class = overrides.get(char_type.value, make_char_class(char_type))
        loaders.append(StubClassLoader(char_class, f"{char_type.value}.yml"))
    return loaders


# =============================================================================
# YAML CONTENT
# =============================================================================


def class_yaml_data(char_type: CharType, num_features: int = NUM_FEATURES_MIN) -> dict[str, Any]:
    """Raw YAML data for a valid class."""
    def tier():
        return [{"description": f"Feature {i + 1}"} for i in range(num_features)]

    return {
        "type": char_type.value,
        "name": char_type.name.title(),
        "features": {"tier1": tier(), "tier2": tier()},
    }


def profession_ranges_data(ranges: list[tuple[int, int, str]]) -> dict[str, Any]:
    return {
        "professions": [
            {"name": name, "range_start": low, "range_end": high}
            for low, high, name in ranges
        ]
    }


def write_yaml(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f)
    return path


def write_content_dir(root: Path) -> Path:
    """Write a complete, valid content directory."""
    write_yaml(root / "skills.yml", {
        "skills": [{"name": s.name, "attribute": "INT"} for s in TEST_SKILLS]
    })
    write_yaml(root / "professions.yml", profession_ranges_data(TEST_PROFESSION_RANGES))
    for char_type in CharType:
        write_yaml(root / "classes" / f"{char_type.value}.yml", class_yaml_data(char_type))
    return root


# Lookups: 4 -> Test1, 9 -> Test2, 28 -> Test3, 40 -> Test4, 66 -> Test5,
# 77 -> Test6, 88 -> Test7, 82 -> Test8, 90 -> Test9
TEST_PROFESSION_RANGES = [
    (1, 5, "Test1"),
    (6, 20, "Test2"),
    (21, 35, "Test3"),
    (36, 50, "Test4"),
    (51, 70, "Test5"),
    (71, 80, "Test6"),
    (81, 85, "Test8"),
    (86, 89, "Test7"),
    (90, 99, "Test9"),
]

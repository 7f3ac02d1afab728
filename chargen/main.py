"""
WCG Character Generator - Main Entry Point

Loads and validates all character generation content, then prints class
features or rolls professions on request. Any content error stops the
program before anything is rolled.
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from chargen import __version__
from chargen.classes.class_data import FeatureTier
from chargen.content_loader.content_errors import ContentValidationError
from chargen.content_loader.runtime_bootstrap import RuntimeContent, load_runtime_content
from chargen.content_loader.yaml_loader import DEFAULT_DATA_DIR
from chargen.data_models import CharType, DiceRoller, parse_enum


# Configure logging
def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class ChargenConfig:
    """Configuration for a character generator run."""

    data_dir: Path = field(default_factory=lambda: DEFAULT_DATA_DIR)
    seed: Optional[int] = None

    # Requested output
    char_class: Optional[CharType] = None
    profession_rolls: int = 0
    validate_only: bool = False

    # Runtime options
    verbose: bool = False

    def __post_init__(self):
        """Ensure paths are Path objects."""
        if isinstance(self.data_dir, str):
            self.data_dir = Path(self.data_dir)


# =============================================================================
# OUTPUT
# =============================================================================

def format_class(content: RuntimeContent, char_type: CharType) -> str:
    """Describe a class and both of its feature tiers."""
    char_class = content.classes.get_class_by_type(char_type)
    if char_class is None:
        return f"No class defined for {char_type.name}"

    lines = [char_class.name or char_type.name]
    for tier in FeatureTier:
        lines.append(f"  {tier.value}:")
        for feature in char_class.get_features(tier):
            lines.append(f"    - {feature.description}")
            for attr in feature.attributes:
                modifier = f" {attr.modifier}" if attr.modifier else ""
                lines.append(f"        [{attr.type.value}{modifier}]")
    return "\n".join(lines)


def format_professions(content: RuntimeContent) -> str:
    result = content.professions.generate_random_professions()
    return f"Roll {result.roll:02d}: {', '.join(result.names)}"


# =============================================================================
# ARGUMENT PARSING
# =============================================================================

def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="WCG Character Generator - class validation and profession rolls",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m chargen.main --validate-only      # Check all content and exit
  python -m chargen.main --class mage         # Show the Mage's features
  python -m chargen.main --professions 3      # Roll professions three times
  python -m chargen.main --data-dir my_data   # Use another content directory
        """
    )

    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DEFAULT_DATA_DIR,
        help="Directory containing skills.yml, professions.yml and classes/",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible profession rolls",
    )
    parser.add_argument(
        "--class",
        dest="char_class",
        type=str.lower,
        choices=[t.value for t in CharType],
        help="Show the features of a character class",
    )
    parser.add_argument(
        "--professions",
        type=int,
        default=0,
        metavar="N",
        help="Roll professions N times",
    )
    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Validate content and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def create_config_from_args(args: argparse.Namespace) -> ChargenConfig:
    """Create ChargenConfig from parsed arguments."""
    return ChargenConfig(
        data_dir=args.data_dir,
        seed=args.seed,
        char_class=parse_enum(CharType, args.char_class),
        profession_rolls=args.professions,
        validate_only=args.validate_only,
        verbose=args.verbose,
    )


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def run(config: ChargenConfig) -> int:
    """Load content and produce the requested output. Returns an exit code."""
    if config.seed is not None:
        DiceRoller.set_seed(config.seed)

    try:
        content = load_runtime_content(config.data_dir)
    except ContentValidationError as e:
        print(f"Content validation failed: {e}", file=sys.stderr)
        return 1

    if config.validate_only:
        print(
            f"Content OK: {content.stats.skills_loaded} skills, "
            f"{content.stats.classes_loaded} classes, "
            f"{content.stats.profession_ranges_loaded} profession ranges"
        )
        return 0

    if config.char_class is not None:
        print(format_class(content, config.char_class))

    for _ in range(config.profession_rolls):
        print(format_professions(content))

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI usage."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    logger.debug(f"WCG Character Generator v{__version__}")

    config = create_config_from_args(args)
    return run(config)


if __name__ == "__main__":
    sys.exit(main())

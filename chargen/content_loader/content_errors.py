"""
Fatal content errors raised while building the startup registries.

None of these are recoverable: the data must be fixed and the process
restarted.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from chargen.data_models import CharType
    from chargen.classes.class_data import FeatureTier
    from chargen.classes.feature_validator import FeatureValidationResult


class ContentValidationError(Exception):
    """Raised when startup content fails to load or validate."""
    pass


class ContentLoadError(ContentValidationError):
    """Raised when a data source returned nothing usable."""
    pass


class CharClassDataError(ContentValidationError):
    """Raised when a class definition breaks a schema or grammar rule."""

    def __init__(
        self,
        message: str,
        char_type: Optional["CharType"] = None,
        tier: Optional["FeatureTier"] = None,
        result: Optional["FeatureValidationResult"] = None,
    ):
        super().__init__(message)
        self.char_type = char_type
        self.tier = tier
        self.result = result


class IncompleteRangeTableError(ContentValidationError):
    """Raised when profession ranges do not partition 1-99."""
    pass

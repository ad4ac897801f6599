"""Processing and display constants for pystrainlib."""

from .processing_constants import ProcessingConstants, ErrorMessages
from .display_constants import RegionStyle, RegionStyles, PropertyUnits

__all__ = [
    "ProcessingConstants",
    "ErrorMessages",
    "RegionStyle",
    "RegionStyles",
    "PropertyUnits"
]

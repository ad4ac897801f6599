"""
Material data and constants.

This package provides the processing and display constants and the material
table bundled with pystrainlib.
"""

from .constants.processing_constants import ProcessingConstants, ErrorMessages
from .constants.display_constants import RegionStyle, RegionStyles, PropertyUnits

__all__ = [
    "ProcessingConstants",
    "ErrorMessages",
    "RegionStyle",
    "RegionStyles",
    "PropertyUnits"
]

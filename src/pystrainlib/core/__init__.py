"""
Core data structures and material definitions.

This module contains the input and output types of curve synthesis, the
material record of the material table and the exception hierarchy used
throughout the pystrainlib library.
"""

from .models import (
    ParameterSet, PhaseModel, SamplingPlan,
    CurveSample, KeyPoint, KeyPointLabel, Region, RegionName, MaterialCurveData
)
from .materials import MaterialRecord
from .exceptions import (
    StrainLibError, ValidationError, InvalidParameterError,
    InvalidPhaseOrderingError, SynthesisError
)

__all__ = [
    "ParameterSet",
    "PhaseModel",
    "SamplingPlan",
    "CurveSample",
    "KeyPoint",
    "KeyPointLabel",
    "Region",
    "RegionName",
    "MaterialCurveData",
    "MaterialRecord",
    "StrainLibError",
    "ValidationError",
    "InvalidParameterError",
    "InvalidPhaseOrderingError",
    "SynthesisError"
]

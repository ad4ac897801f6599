"""
Core computational algorithms for stress-strain curve synthesis.

This module provides the four-phase curve sampler, the derivation of key
points and display regions, and symbolic piecewise counterparts of the curve.
"""

from .curve_synthesizer import CurveSynthesizer, Phase
from .region_annotator import RegionAnnotator
from .piecewise_builder import PiecewiseBuilder

__all__ = [
    "CurveSynthesizer",
    "Phase",
    "RegionAnnotator",
    "PiecewiseBuilder"
]

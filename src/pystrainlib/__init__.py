"""
PyStrainLib - A Python library for synthetic stress-strain curve generation.

This library turns a handful of physical constants of a material into a densely
sampled engineering stress-strain curve, annotated with its key points and
named deformation regions, and serves a table of materials from YAML.

Key Features:
- Four-phase curve model (elastic, yield transition, strain hardening, necking)
- Per-phase sampling with configurable strain steps
- Key points (elastic limit, yield point, ultimate) and display regions
- YAML-based material tables with validation
- Symbolic piecewise counterparts with SymPy
- Stress-strain curve visualization

Main Components:
- Core: Input and output data structures, material records, exceptions
- Parsing: YAML material tables, input validation and the public API
- Algorithms: Curve sampling, region annotation, piecewise functions
- Repository: Read-only material catalogue with cached curves
- Visualization: Curve plotting
- Data: Bundled material table and constants
"""

try:
    from importlib.metadata import version, PackageNotFoundError
    try:
        __version__ = version("pystrainlib")
    except PackageNotFoundError:
        __version__ = "0.1.0+unknown"  # Fallback version
except ImportError:
    __version__ = "0.1.0+unknown"

# Core data structures
from .core.models import (
    ParameterSet, PhaseModel, SamplingPlan,
    CurveSample, KeyPoint, KeyPointLabel, Region, RegionName, MaterialCurveData
)
from .core.materials import MaterialRecord
from .core.exceptions import (
    StrainLibError, ValidationError, InvalidParameterError,
    InvalidPhaseOrderingError, SynthesisError
)

# Main API functions
from .parsing.api import (
    validate,
    synthesize,
    load_repository,
    default_table_path,
    get_supported_keys,
    get_material_info
)

# Algorithms
from .algorithms.curve_synthesizer import CurveSynthesizer
from .algorithms.region_annotator import RegionAnnotator
from .algorithms.piecewise_builder import PiecewiseBuilder

# Repository
from .repository.material_repository import MaterialRepository

# Visualization
from .visualization.plotters import CurveVisualizer

__all__ = [
    # Version
    '__version__',

    # Data structures
    'ParameterSet',
    'PhaseModel',
    'SamplingPlan',
    'CurveSample',
    'KeyPoint',
    'KeyPointLabel',
    'Region',
    'RegionName',
    'MaterialCurveData',
    'MaterialRecord',

    # Exceptions
    'StrainLibError',
    'ValidationError',
    'InvalidParameterError',
    'InvalidPhaseOrderingError',
    'SynthesisError',

    # Main API
    'validate',
    'synthesize',
    'load_repository',
    'default_table_path',
    'get_supported_keys',
    'get_material_info',

    # Algorithms
    'CurveSynthesizer',
    'RegionAnnotator',
    'PiecewiseBuilder',

    # Repository
    'MaterialRepository',

    # Visualization
    'CurveVisualizer'
]

# Package metadata
__author__ = "Rahil Doshi"
__email__ = "rahil.doshi@fau.de"
__description__ = "Synthetic stress-strain curve generation library"

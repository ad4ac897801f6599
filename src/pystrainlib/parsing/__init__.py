"""
Parsing and configuration modules for pystrainlib.

This package handles YAML material tables, validation of material constants
and the public synthesis entry points.
"""

from .api import (
    validate, synthesize, load_repository, default_table_path,
    get_supported_keys, get_material_info
)
from .config.material_yaml_parser import MaterialTableParser
from .validation.parameter_validator import ParameterValidator

__all__ = [
    'validate',
    'synthesize',
    'load_repository',
    'default_table_path',
    'get_supported_keys',
    'get_material_info',
    'MaterialTableParser',
    'ParameterValidator'
]

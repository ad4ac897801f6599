"""Validation utilities for pystrainlib."""

from .array_validator import is_monotonic
from .parameter_validator import ParameterValidator

__all__ = [
    "ParameterValidator",
    "is_monotonic"
]

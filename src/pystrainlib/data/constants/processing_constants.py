from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Processing constants used throughout curve synthesis."""
    # Ordering checks
    MONOTONICITY_THRESHOLD: Final[float] = 0.0
    # Unit conversion
    GPA_TO_MPA: Final[float] = 1000.0
    STRAIN_TO_PERCENT: Final[float] = 100.0
    # Default sampling steps (fractional strain), finer near the origin
    DEFAULT_ELASTIC_STEP: Final[float] = 1e-4
    DEFAULT_YIELD_STEP: Final[float] = 1e-4
    DEFAULT_PLASTIC_STEP: Final[float] = 5e-3
    DEFAULT_NECKING_STEP: Final[float] = 1e-2
    # Grid generation
    MIN_STEP_GAP_FRACTION: Final[float] = 0.01
    MAX_PHASE_SAMPLES: Final[int] = 100_000
    # Shape parameter bounds, lower bound exclusive
    MIN_SHAPE_PARAMETER: Final[float] = 0.0
    MAX_SHAPE_PARAMETER: Final[float] = 1.0
    # Visualization
    STRAIN_PADDING_FACTOR: Final[float] = 0.02
    STRESS_PADDING_FACTOR: Final[float] = 0.1


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    NON_POSITIVE_VALUE: Final[str] = "{name} must be positive, got {value}"
    NON_FINITE_VALUE: Final[str] = "{name} must be a finite number, got {value}"
    STRENGTH_ORDER: Final[str] = ("yield_strength ({yield_strength} MPa) must be less than "
                                  "ultimate_strength ({ultimate_strength} MPa)")
    BREAKPOINT_ORDER: Final[str] = "{first} ({first_value}) must be less than {second} ({second_value})"
    SHAPE_PARAMETER_RANGE: Final[str] = "{name} must lie in (0, 1], got {value}"
    ELASTIC_LIMIT_STRESS: Final[str] = ("Elastic limit stress ({stress:.6g} MPa) must be less than "
                                        "ultimate_strength ({ultimate_strength} MPa)")

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

import numpy as np

from pystrainlib.data.constants import ProcessingConstants, RegionStyle, RegionStyles


# --- Enums ---
class KeyPointLabel(Enum):
    ELASTIC_LIMIT = "Elastic Limit"
    YIELD_POINT = "Yield Point"
    ULTIMATE = "Ultimate"


class RegionName(Enum):
    ELASTIC = "Elastic Region"
    PLASTIC = "Plastic Region"
    STRAIN_HARDENING = "Strain Hardening"


# --- Inputs ---
@dataclass(frozen=True)
class ParameterSet:
    """
    Physical constants of one material.

    Validated on construction; an invalid ParameterSet can never exist.
    """
    youngs_modulus: float  # GPa
    yield_strength: float  # MPa
    ultimate_strength: float  # MPa
    density: float  # kg/m³

    def __post_init__(self) -> None:
        from pystrainlib.parsing.validation.parameter_validator import ParameterValidator
        ParameterValidator.validate_parameter_set(self)

    @property
    def youngs_modulus_mpa(self) -> float:
        """Young's modulus converted from GPa to MPa."""
        return self.youngs_modulus * ProcessingConstants.GPA_TO_MPA

    def to_dict(self) -> Dict[str, float]:
        return {
            'youngs_modulus': self.youngs_modulus,
            'yield_strength': self.yield_strength,
            'ultimate_strength': self.ultimate_strength,
            'density': self.density,
        }


@dataclass(frozen=True)
class PhaseModel:
    """
    Per-material shape parameters of the four-phase stress-strain model.

    Breakpoints are fractional strains (not percent) and must be strictly
    increasing. The hardening exponent controls the curvature of the
    strain-hardening phase; values below 1 bow the curve upward early.
    The necking factor scales the post-ultimate stress decay.
    """
    elastic_limit_strain: float
    yield_strain: float
    ultimate_strain: float
    break_strain: float
    hardening_exponent: float
    necking_factor: float

    def __post_init__(self) -> None:
        from pystrainlib.parsing.validation.parameter_validator import ParameterValidator
        ParameterValidator.validate_phase_model(self)

    @property
    def breakpoints(self) -> Tuple[float, float, float, float]:
        return self.elastic_limit_strain, self.yield_strain, self.ultimate_strain, self.break_strain

    @property
    def break_strain_percent(self) -> float:
        return self.break_strain * ProcessingConstants.STRAIN_TO_PERCENT

    def to_dict(self) -> Dict[str, float]:
        return {
            'elastic_limit_strain': self.elastic_limit_strain,
            'yield_strain': self.yield_strain,
            'ultimate_strain': self.ultimate_strain,
            'break_strain': self.break_strain,
            'hardening_exponent': self.hardening_exponent,
            'necking_factor': self.necking_factor,
        }


@dataclass(frozen=True)
class SamplingPlan:
    """Strain step (fractional) used to sample each phase of the curve."""
    elastic_step: float = ProcessingConstants.DEFAULT_ELASTIC_STEP
    yield_step: float = ProcessingConstants.DEFAULT_YIELD_STEP
    plastic_step: float = ProcessingConstants.DEFAULT_PLASTIC_STEP
    necking_step: float = ProcessingConstants.DEFAULT_NECKING_STEP

    def __post_init__(self) -> None:
        from pystrainlib.parsing.validation.parameter_validator import ParameterValidator
        ParameterValidator.validate_sampling_plan(self)

    @property
    def steps(self) -> Tuple[float, float, float, float]:
        return self.elastic_step, self.yield_step, self.plastic_step, self.necking_step


# --- Outputs ---
@dataclass(frozen=True)
class CurveSample:
    strain_percent: float
    stress_mpa: float


@dataclass(frozen=True)
class KeyPoint:
    """A labeled (strain, stress) pair marking a phase boundary."""
    strain_percent: float
    stress_mpa: float
    label: KeyPointLabel

    def to_dict(self) -> Dict[str, Any]:
        return {'x': self.strain_percent, 'y': self.stress_mpa, 'label': self.label.value}


@dataclass(frozen=True)
class Region:
    """A named strain interval, in percent, used for display bands."""
    name: RegionName
    start_strain_percent: float
    end_strain_percent: float

    @property
    def width(self) -> float:
        return self.end_strain_percent - self.start_strain_percent

    @property
    def style(self) -> RegionStyle:
        return RegionStyles.get_style(self.name.name)

    def contains(self, strain_percent: float) -> bool:
        return self.start_strain_percent <= strain_percent <= self.end_strain_percent

    def to_dict(self) -> Dict[str, Any]:
        style = self.style
        return {
            'name': self.name.value,
            'start': self.start_strain_percent,
            'end': self.end_strain_percent,
            'color': style.color,
            'description': style.description,
        }


@dataclass(frozen=True)
class MaterialCurveData:
    """
    Synthesized stress-strain curve of one material.

    Bundles the ordered samples, the three key points and the named regions
    together with the inputs they were generated from. Treated as immutable
    once created, so it can be cached and shared freely.
    """
    samples: Tuple[CurveSample, ...]
    key_points: Tuple[KeyPoint, ...]
    regions: Tuple[Region, ...]
    parameters: ParameterSet
    phase_model: PhaseModel = field(repr=False)

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def strains(self) -> np.ndarray:
        """Sample strains in percent."""
        return np.array([s.strain_percent for s in self.samples], dtype=float)

    @property
    def stresses(self) -> np.ndarray:
        """Sample stresses in MPa."""
        return np.array([s.stress_mpa for s in self.samples], dtype=float)

    @property
    def peak(self) -> CurveSample:
        """Sample with the highest stress."""
        return self.samples[int(np.argmax(self.stresses))]

    def key_point(self, label: KeyPointLabel) -> KeyPoint:
        for kp in self.key_points:
            if kp.label is label:
                return kp
        raise KeyError(f"No key point labeled '{label.value}'")

    def region(self, name: RegionName) -> Region:
        for region in self.regions:
            if region.name is name:
                return region
        raise KeyError(f"No region named '{name.value}'")

    def stress_at(self, strain_percent: float) -> float:
        """
        Linearly interpolate the stress between samples.
        Args:
            strain_percent: Strain in percent, within the sampled range
        Returns:
            Interpolated stress in MPa
        Raises:
            ValueError: If the strain lies outside the sampled range
        """
        strains = self.strains
        if strain_percent < strains[0] or strain_percent > strains[-1]:
            raise ValueError(
                f"Strain {strain_percent}% is outside the sampled range "
                f"[{strains[0]}, {strains[-1]}]%")
        return float(np.interp(strain_percent, strains, self.stresses))

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        """Presentation payload: curve as x/y pairs, key points as markers, regions as bands."""
        return {
            'curveData': [{'x': s.strain_percent, 'y': s.stress_mpa} for s in self.samples],
            'keyPoints': [kp.to_dict() for kp in self.key_points],
            'regions': [region.to_dict() for region in self.regions],
        }

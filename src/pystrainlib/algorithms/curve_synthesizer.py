from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from pystrainlib.core.exceptions import SynthesisError
from pystrainlib.core.models import CurveSample, ParameterSet, PhaseModel, SamplingPlan
from pystrainlib.data.constants import ProcessingConstants
from pystrainlib.parsing.validation.array_validator import is_monotonic


class Phase(NamedTuple):
    """Strain interval of one phase; the start is owned by the previous phase except at the origin."""
    name: str
    start: float
    end: float
    step: float
    include_start: bool


class CurveSynthesizer:
    """
    Generates the ordered stress-strain samples of the four-phase model.

    Phases, in fractional strain:
        1. Elastic           [0, elastic_limit]         linear, slope = Young's modulus
        2. Yield transition  (elastic_limit, yield]     linear to the yield strength
        3. Strain hardening  (yield, ultimate]          power law up to the ultimate strength
        4. Necking           (ultimate, break]          linear decay
    Every breakpoint is sampled exactly once and all stresses are computed
    from the inputs, so the result is bit-for-bit reproducible.
    """

    ELASTIC = "Elastic"
    YIELD_TRANSITION = "Yield transition"
    STRAIN_HARDENING = "Strain hardening"
    NECKING = "Necking"

    @staticmethod
    def synthesize_samples(parameters: ParameterSet, phase_model: PhaseModel,
                           sampling: Optional[SamplingPlan] = None) -> Tuple[CurveSample, ...]:
        """
        Main entry point for sample generation.
        Args:
            parameters: Physical constants of the material
            phase_model: Breakpoints and shape parameters of the material
            sampling: Per-phase strain steps (defaults to SamplingPlan())
        Returns:
            Tuple of CurveSample with strictly increasing strain in percent
        Raises:
            SynthesisError: If a phase is degenerate or a sample is not finite
        """
        sampling = sampling if sampling is not None else SamplingPlan()
        strain_parts: List[np.ndarray] = []
        stress_parts: List[np.ndarray] = []
        for phase in CurveSynthesizer.phases(phase_model, sampling):
            strain = CurveSynthesizer.build_phase_grid(phase)
            stress = CurveSynthesizer.evaluate_phase(phase.name, parameters, phase_model, strain)
            if not np.all(np.isfinite(stress)):
                raise SynthesisError("non-finite stress produced", phase=phase.name)
            if phase.name == CurveSynthesizer.NECKING:
                try:
                    is_monotonic(stress, f"{phase.name} stress", mode="strictly_decreasing")
                except ValueError as e:
                    raise SynthesisError(str(e), phase=phase.name) from e
            strain_parts.append(strain)
            stress_parts.append(stress)
        strain_percent = np.concatenate(strain_parts) * ProcessingConstants.STRAIN_TO_PERCENT
        stress_mpa = np.concatenate(stress_parts)
        try:
            is_monotonic(strain_percent, "Strain", mode="strictly_increasing")
        except ValueError as e:
            raise SynthesisError(str(e)) from e
        return tuple(CurveSample(float(x), float(y)) for x, y in zip(strain_percent, stress_mpa))

    @staticmethod
    def phases(phase_model: PhaseModel, sampling: SamplingPlan) -> Tuple[Phase, ...]:
        """Split the strain axis into the four phase intervals."""
        e_el, e_y, e_u, e_b = phase_model.breakpoints
        return (
            Phase(CurveSynthesizer.ELASTIC, 0.0, e_el, sampling.elastic_step, True),
            Phase(CurveSynthesizer.YIELD_TRANSITION, e_el, e_y, sampling.yield_step, False),
            Phase(CurveSynthesizer.STRAIN_HARDENING, e_y, e_u, sampling.plastic_step, False),
            Phase(CurveSynthesizer.NECKING, e_u, e_b, sampling.necking_step, False),
        )

    @staticmethod
    def build_phase_grid(phase: Phase) -> np.ndarray:
        """
        Build the strain grid of one phase.

        Interior points lie on start + k * step; a point closer to the end than
        MIN_STEP_GAP_FRACTION * step is dropped so the exact end strain never
        has a near-duplicate neighbour.
        Raises:
            SynthesisError: If the interval is empty or would need too many samples
        """
        width = phase.end - phase.start
        if not np.isfinite(width) or width <= 0:
            raise SynthesisError(f"empty strain interval [{phase.start}, {phase.end}]", phase=phase.name)
        if not np.isfinite(phase.step) or phase.step <= 0:
            raise SynthesisError(f"invalid strain step {phase.step}", phase=phase.name)
        n_steps = int(np.floor(width / phase.step))
        if n_steps > ProcessingConstants.MAX_PHASE_SAMPLES:
            raise SynthesisError(
                f"step {phase.step} needs {n_steps} samples, limit is {ProcessingConstants.MAX_PHASE_SAMPLES}",
                phase=phase.name)
        interior = phase.start + phase.step * np.arange(1, n_steps + 1, dtype=float)
        interior = interior[interior < phase.end - phase.step * ProcessingConstants.MIN_STEP_GAP_FRACTION]
        parts = [interior, np.array([phase.end])]
        if phase.include_start:
            parts.insert(0, np.array([phase.start]))
        return np.concatenate(parts)

    @staticmethod
    def evaluate_phase(phase_name: str, parameters: ParameterSet, phase_model: PhaseModel,
                       strain: np.ndarray) -> np.ndarray:
        """Evaluate the stress formula of one phase at fractional strains."""
        e_mpa = parameters.youngs_modulus_mpa
        s_y = parameters.yield_strength
        s_u = parameters.ultimate_strength
        e_el, e_y, e_u, e_b = phase_model.breakpoints
        if phase_name == CurveSynthesizer.ELASTIC:
            return e_mpa * strain
        if phase_name == CurveSynthesizer.YIELD_TRANSITION:
            elastic_limit_stress = e_mpa * e_el
            t = (strain - e_el) / (e_y - e_el)
            return elastic_limit_stress + (s_y - elastic_limit_stress) * t
        if phase_name == CurveSynthesizer.STRAIN_HARDENING:
            progress = (strain - e_y) / (e_u - e_y)
            return s_y + (s_u - s_y) * np.power(progress, phase_model.hardening_exponent)
        if phase_name == CurveSynthesizer.NECKING:
            progress = (strain - e_u) / (e_b - e_u)
            return s_u - (s_u - s_y) * phase_model.necking_factor * progress
        raise SynthesisError(f"unknown phase '{phase_name}'")

    @staticmethod
    def stress_at_strain(parameters: ParameterSet, phase_model: PhaseModel, strain: float) -> float:
        """
        Evaluate the model at a single fractional strain.
        Args:
            parameters: Physical constants of the material
            phase_model: Breakpoints and shape parameters of the material
            strain: Fractional strain (not percent), non-negative
        Returns:
            Stress in MPa; 0 beyond the break strain
        """
        if strain < 0:
            raise ValueError(f"Strain must be non-negative, got {strain}")
        if strain > phase_model.break_strain:
            return 0.0
        for phase in CurveSynthesizer.phases(phase_model, SamplingPlan()):
            if strain <= phase.end:
                value = CurveSynthesizer.evaluate_phase(phase.name, parameters, phase_model,
                                                        np.array([strain], dtype=float))
                return float(value[0])
        raise SynthesisError(f"strain {strain} not covered by any phase")

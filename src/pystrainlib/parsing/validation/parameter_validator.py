import math
from numbers import Real
from typing import Optional

from pystrainlib.core.exceptions import InvalidParameterError, InvalidPhaseOrderingError
from pystrainlib.data.constants import ErrorMessages, ProcessingConstants


class ParameterValidator:
    """
    Centralized validation of the inputs of curve synthesis.

    All checks are pure: they inspect their arguments and raise, nothing else.
    """

    PARAMETER_FIELDS = ('youngs_modulus', 'yield_strength', 'ultimate_strength', 'density')
    BREAKPOINT_FIELDS = ('elastic_limit_strain', 'yield_strain', 'ultimate_strain', 'break_strain')
    SHAPE_FIELDS = ('hardening_exponent', 'necking_factor')
    STEP_FIELDS = ('elastic_step', 'yield_step', 'plastic_step', 'necking_step')

    @staticmethod
    def validate(parameters, phase_model, sampling: Optional[object] = None) -> None:
        """
        Main entry point: validate a ParameterSet / PhaseModel pair and an optional SamplingPlan.
        Args:
            parameters: ParameterSet to validate
            phase_model: PhaseModel to validate
            sampling: SamplingPlan to validate (optional)
        Raises:
            InvalidParameterError: If a physical constant or sampling step is invalid
            InvalidPhaseOrderingError: If breakpoints or shape parameters are invalid,
                or the elastic limit stress reaches the ultimate strength
        """
        ParameterValidator.validate_parameter_set(parameters)
        ParameterValidator.validate_phase_model(phase_model)
        if sampling is not None:
            ParameterValidator.validate_sampling_plan(sampling)
        ParameterValidator.validate_consistency(parameters, phase_model)

    @staticmethod
    def validate_parameter_set(parameters) -> None:
        """
        Validate the physical constants of a material.
        Raises:
            InvalidParameterError: If any constant is non-numeric, non-finite or
                non-positive, or if yield_strength >= ultimate_strength
        """
        for name in ParameterValidator.PARAMETER_FIELDS:
            ParameterValidator.validate_positive_value(getattr(parameters, name), name)
        if parameters.yield_strength >= parameters.ultimate_strength:
            raise InvalidParameterError(
                ErrorMessages.STRENGTH_ORDER.format(yield_strength=parameters.yield_strength,
                                                    ultimate_strength=parameters.ultimate_strength),
                parameter='yield_strength')

    @staticmethod
    def validate_phase_model(phase_model) -> None:
        """
        Validate breakpoint ordering and shape parameters of a phase model.
        Raises:
            InvalidPhaseOrderingError: If breakpoints are not strictly increasing from a
                positive first value, or a shape parameter falls outside (0, 1]
        """
        breakpoints = tuple(getattr(phase_model, name) for name in ParameterValidator.BREAKPOINT_FIELDS)
        for name, value in zip(ParameterValidator.BREAKPOINT_FIELDS, breakpoints):
            if not ParameterValidator._is_real(value) or not math.isfinite(value):
                raise InvalidPhaseOrderingError(
                    ErrorMessages.NON_FINITE_VALUE.format(name=name, value=value), breakpoints=breakpoints)
        # Origin is the implicit first breakpoint
        ParameterValidator.validate_breakpoint_pair(0.0, breakpoints[0], 'origin', 'elastic_limit_strain',
                                                    breakpoints)
        for (first, second), (first_value, second_value) in zip(
                zip(ParameterValidator.BREAKPOINT_FIELDS, ParameterValidator.BREAKPOINT_FIELDS[1:]),
                zip(breakpoints, breakpoints[1:])):
            ParameterValidator.validate_breakpoint_pair(first_value, second_value, first, second, breakpoints)
        for name in ParameterValidator.SHAPE_FIELDS:
            ParameterValidator.validate_shape_parameter(getattr(phase_model, name), name)

    @staticmethod
    def validate_sampling_plan(sampling) -> None:
        """Validate that every phase step is a positive finite number."""
        for name in ParameterValidator.STEP_FIELDS:
            ParameterValidator.validate_positive_value(getattr(sampling, name), name)

    @staticmethod
    def validate_consistency(parameters, phase_model) -> None:
        """
        Validate that the elastic phase ends below the ultimate strength.

        The yield transition runs from the elastic limit stress to the yield
        strength and may descend; the stress maximum stays at the ultimate
        strain as long as the elastic limit stress is below the ultimate strength.
        Raises:
            InvalidPhaseOrderingError: If youngs_modulus_mpa * elastic_limit_strain >= ultimate_strength
        """
        elastic_limit_stress = parameters.youngs_modulus_mpa * phase_model.elastic_limit_strain
        if elastic_limit_stress >= parameters.ultimate_strength:
            raise InvalidPhaseOrderingError(
                ErrorMessages.ELASTIC_LIMIT_STRESS.format(stress=elastic_limit_stress,
                                                          ultimate_strength=parameters.ultimate_strength),
                breakpoints=phase_model.breakpoints)

    @staticmethod
    def validate_positive_value(value, name: str) -> None:
        """
        Validate a single positive physical value.
        Args:
            value: Value to validate
            name: Name of the value for error messages
        Raises:
            InvalidParameterError: If the value is not a finite positive real number
        """
        if not ParameterValidator._is_real(value) or not math.isfinite(value):
            raise InvalidParameterError(ErrorMessages.NON_FINITE_VALUE.format(name=name, value=value),
                                        parameter=name)
        if value <= 0:
            raise InvalidParameterError(ErrorMessages.NON_POSITIVE_VALUE.format(name=name, value=value),
                                        parameter=name)

    @staticmethod
    def validate_breakpoint_pair(first_value: float, second_value: float,
                                 first: str, second: str, breakpoints: tuple = None) -> None:
        """
        Validate that two consecutive breakpoints are strictly increasing.
        Raises:
            InvalidPhaseOrderingError: If first_value >= second_value
        """
        if first_value >= second_value:
            raise InvalidPhaseOrderingError(
                ErrorMessages.BREAKPOINT_ORDER.format(first=first, first_value=first_value,
                                                      second=second, second_value=second_value),
                breakpoints=breakpoints)

    @staticmethod
    def validate_shape_parameter(value, name: str) -> None:
        """
        Validate a hardening exponent or necking factor.
        Raises:
            InvalidPhaseOrderingError: If the value falls outside (0, 1]
        """
        if (not ParameterValidator._is_real(value) or not math.isfinite(value)
                or not ProcessingConstants.MIN_SHAPE_PARAMETER < value <= ProcessingConstants.MAX_SHAPE_PARAMETER):
            raise InvalidPhaseOrderingError(ErrorMessages.SHAPE_PARAMETER_RANGE.format(name=name, value=value))

    # --- Private helpers ---
    @staticmethod
    def _is_real(value) -> bool:
        """Check for a real number, rejecting booleans."""
        return isinstance(value, Real) and not isinstance(value, bool)

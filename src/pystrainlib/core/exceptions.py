"""Custom exceptions for pystrainlib core functionality."""


class StrainLibError(Exception):
    """Base exception for all pystrainlib errors."""
    pass


class ValidationError(StrainLibError):
    """Exception raised when material constants or phase shape parameters are invalid.

    Raised before any computation takes place and never recovered locally.
    """
    pass


class InvalidParameterError(ValidationError):
    """Exception raised when a physical constant or sampling step is invalid."""

    def __init__(self, message: str, parameter: str = None):
        self.parameter = parameter
        super().__init__(message)


class InvalidPhaseOrderingError(ValidationError):
    """Exception raised when phase breakpoints are not strictly increasing
    or a phase shape parameter falls outside (0, 1]."""

    def __init__(self, message: str, breakpoints: tuple = None):
        self.breakpoints = breakpoints
        super().__init__(message)


class SynthesisError(StrainLibError):
    """Exception raised for a degenerate numeric configuration during curve synthesis."""

    def __init__(self, message: str, phase: str = None):
        self.phase = phase
        if phase is not None:
            message = f"{phase} phase: {message}"
        super().__init__(message)

"""Common exception types for electrolyte PC-SAFT parameter handling."""


class ParameterError(ValueError):
    """Raised when pure or binary records do not form a valid parameter set."""


class BinaryInteractionError(ParameterError):
    """Raised when a component pair carries a malformed k_ij coefficient list."""


class MissingPermittivityData(ParameterError):
    """Raised when ions are present but a solvent lacks a permittivity model."""


class IncompatiblePermittivityModels(ParameterError):
    """Raised when components mix perturbation-theory and experimental permittivity."""


class UnsortedPermittivityData(ParameterError):
    """Raised when experimental permittivity points are not ordered by temperature."""


class IncompatibleParameters(ParameterError):
    """Raised for shape or value mismatches between records."""


class UnknownModel(ParameterError, KeyError):
    """Raised when a registry lookup fails."""


class MissingDataError(RuntimeError):
    """Raised when an external property model cannot deliver a requested value."""

"""Electrolyte PC-SAFT parameter handling."""

from .parameters import (
    ElectrolytePcSaftBinaryRecord,
    ElectrolytePcSaftParameters,
    ElectrolytePcSaftRecord,
    Identifier,
    PureRecord,
    load_parameters_from_json,
)

__all__ = [
    "ElectrolytePcSaftBinaryRecord",
    "ElectrolytePcSaftParameters",
    "ElectrolytePcSaftRecord",
    "Identifier",
    "PureRecord",
    "load_parameters_from_json",
]

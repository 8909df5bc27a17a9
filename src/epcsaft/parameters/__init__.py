"""Convenience exports for electrolyte PC-SAFT parameters."""

from .impl.association import AssociationParameters, AssociationRecord, BinaryAssociationRecord
from .impl.dual import DualNum
from .impl.hard_sphere import MonomerShape
from .impl.loader import binary_matrix_from_pairs, load_parameters_from_json
from .impl.permittivity import ExperimentalData, PerturbationTheory
from .impl.records import (
    ElectrolytePcSaftBinaryRecord,
    ElectrolytePcSaftRecord,
    Identifier,
    PureRecord,
    SegmentRecord,
)
from .impl.segments import from_segments, pure_record_from_segments
from .interfaces import SIGMA_T_MARKER, ElectrolytePcSaftParameters

__all__ = [
    "AssociationParameters",
    "AssociationRecord",
    "BinaryAssociationRecord",
    "DualNum",
    "ElectrolytePcSaftBinaryRecord",
    "ElectrolytePcSaftParameters",
    "ElectrolytePcSaftRecord",
    "ExperimentalData",
    "Identifier",
    "MonomerShape",
    "PerturbationTheory",
    "PureRecord",
    "SIGMA_T_MARKER",
    "SegmentRecord",
    "binary_matrix_from_pairs",
    "from_segments",
    "load_parameters_from_json",
    "pure_record_from_segments",
]

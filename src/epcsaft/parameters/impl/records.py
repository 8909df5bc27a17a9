"""Pure-component, segment and binary records of electrolyte PC-SAFT."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from epcsaft.common.exceptions import IncompatibleParameters

from .association import AssociationRecord, BinaryAssociationRecord
from .permittivity import PermittivityRecord, permittivity_from_dict

COEFFICIENT_FAMILIES = {"viscosity": 4, "thermal_conductivity": 4, "diffusion": 5}


@dataclass
class Identifier:
    cas: Optional[str] = None
    name: Optional[str] = None
    iupac_name: Optional[str] = None
    smiles: Optional[str] = None
    inchi: Optional[str] = None
    formula: Optional[str] = None

    @staticmethod
    def from_dict(raw: Dict[str, Any]) -> "Identifier":
        return Identifier(**{k: raw.get(k) for k in ("cas", "name", "iupac_name", "smiles", "inchi", "formula")})

    def matches(self, other: "Identifier") -> bool:
        if self.cas is not None and other.cas is not None:
            return self.cas == other.cas
        return self.name is not None and self.name == other.name


@dataclass
class ElectrolytePcSaftRecord:
    """Model parameters of one component.

    Units: ``sigma`` in Angstrom, ``epsilon_k`` and ``epsilon_k_ab`` in Kelvin,
    ``mu`` and ``q`` in Debye (resp. Debye Angstrom), ``z`` in elementary charges.
    """

    m: float
    sigma: float
    epsilon_k: float
    mu: Optional[float] = None
    q: Optional[float] = None
    association_record: Optional[AssociationRecord] = None
    viscosity: Optional[Tuple[float, ...]] = None
    diffusion: Optional[Tuple[float, ...]] = None
    thermal_conductivity: Optional[Tuple[float, ...]] = None
    z: Optional[float] = None
    permittivity_record: Optional[PermittivityRecord] = None
    temperature_dependent_sigma: bool = False

    def __post_init__(self):
        for name in ("m", "sigma", "epsilon_k"):
            if not getattr(self, name) > 0.0:
                raise IncompatibleParameters(f"'{name}' must be positive, got {getattr(self, name)}")
        for name, size in COEFFICIENT_FAMILIES.items():
            coeffs = getattr(self, name)
            if coeffs is None:
                continue
            if len(coeffs) != size:
                raise IncompatibleParameters(f"'{name}' needs {size} coefficients, got {len(coeffs)}")
            setattr(self, name, tuple(float(c) for c in coeffs))

    @staticmethod
    def new(
        m: float,
        sigma: float,
        epsilon_k: float,
        mu: Optional[float] = None,
        q: Optional[float] = None,
        kappa_ab: Optional[float] = None,
        epsilon_k_ab: Optional[float] = None,
        na: Optional[float] = None,
        nb: Optional[float] = None,
        nc: Optional[float] = None,
        viscosity: Optional[Sequence[float]] = None,
        diffusion: Optional[Sequence[float]] = None,
        thermal_conductivity: Optional[Sequence[float]] = None,
        z: Optional[float] = None,
        permittivity_record: Optional[PermittivityRecord] = None,
    ) -> "ElectrolytePcSaftRecord":
        """Flat constructor; missing association fields default to zero."""
        association_fields = (kappa_ab, epsilon_k_ab, na, nb, nc)
        association_record = None
        if any(x is not None for x in association_fields):
            association_record = AssociationRecord(*(x or 0.0 for x in association_fields))
        return ElectrolytePcSaftRecord(
            m=m,
            sigma=sigma,
            epsilon_k=epsilon_k,
            mu=mu,
            q=q,
            association_record=association_record,
            viscosity=viscosity,
            diffusion=diffusion,
            thermal_conductivity=thermal_conductivity,
            z=z,
            permittivity_record=permittivity_record,
        )

    @staticmethod
    def from_dict(raw: Dict[str, Any]) -> "ElectrolytePcSaftRecord":
        association_record = None
        if raw.get("kappa_ab") is not None or raw.get("epsilon_k_ab") is not None:
            association_record = AssociationRecord(
                kappa_ab=float(raw.get("kappa_ab", 0.0)),
                epsilon_k_ab=float(raw.get("epsilon_k_ab", 0.0)),
                na=float(raw.get("na", 1.0)),
                nb=float(raw.get("nb", 1.0)),
                nc=float(raw.get("nc", 0.0)),
            )
        permittivity = raw.get("permittivity_record")
        return ElectrolytePcSaftRecord(
            m=float(raw["m"]),
            sigma=float(raw["sigma"]),
            epsilon_k=float(raw["epsilon_k"]),
            mu=raw.get("mu"),
            q=raw.get("q"),
            association_record=association_record,
            viscosity=raw.get("viscosity"),
            diffusion=raw.get("diffusion"),
            thermal_conductivity=raw.get("thermal_conductivity"),
            z=raw.get("z"),
            permittivity_record=permittivity_from_dict(permittivity) if permittivity is not None else None,
            temperature_dependent_sigma=bool(raw.get("temperature_dependent_sigma", False)),
        )

    @staticmethod
    def from_segments(segments: Sequence[Tuple["ElectrolytePcSaftRecord", Union[int, float]]]) -> "ElectrolytePcSaftRecord":
        from .segments import from_segments

        return from_segments(segments)

    def __str__(self) -> str:
        tokens = [f"m={self.m}", f"sigma={self.sigma}", f"epsilon_k={self.epsilon_k}"]
        for name in ("mu", "q", "association_record", "viscosity", "diffusion", "thermal_conductivity", "z", "permittivity_record"):
            value = getattr(self, name)
            if value is not None:
                tokens.append(f"{name}={value}")
        return f"ElectrolytePcSaftRecord({', '.join(tokens)})"


@dataclass
class PureRecord:
    identifier: Identifier
    molarweight: float
    model_record: ElectrolytePcSaftRecord

    @property
    def name(self) -> Optional[str]:
        return self.identifier.name


@dataclass
class SegmentRecord:
    """A group-contribution segment, e.g. ``CH3`` or ``OH``."""

    identifier: str
    molarweight: float
    model_record: ElectrolytePcSaftRecord

    @staticmethod
    def from_dict(raw: Dict[str, Any]) -> "SegmentRecord":
        model = raw.get("model_record", raw.get("saft_record"))
        if model is None:
            raise IncompatibleParameters(f"Segment '{raw.get('identifier')}' has no model record")
        return SegmentRecord(
            identifier=str(raw["identifier"]),
            molarweight=float(raw["molarweight"]),
            model_record=ElectrolytePcSaftRecord.from_dict(model),
        )


@dataclass
class ElectrolytePcSaftBinaryRecord:
    """Binary dispersion coefficients ``k_ij`` and optional cross-association."""

    k_ij: List[float] = field(default_factory=list)
    association: Optional[BinaryAssociationRecord] = None

    @staticmethod
    def new(
        k_ij: Optional[Sequence[float]] = None,
        kappa_ab: Optional[float] = None,
        epsilon_k_ab: Optional[float] = None,
    ) -> "ElectrolytePcSaftBinaryRecord":
        association = None
        if kappa_ab is not None or epsilon_k_ab is not None:
            association = BinaryAssociationRecord(kappa_ab, epsilon_k_ab)
        return ElectrolytePcSaftBinaryRecord(k_ij=list(k_ij or []), association=association)

    @staticmethod
    def from_float(k_ij: float) -> "ElectrolytePcSaftBinaryRecord":
        return ElectrolytePcSaftBinaryRecord(k_ij=[float(k_ij), 0.0, 0.0, 0.0])

    @staticmethod
    def from_dict(raw: Dict[str, Any]) -> "ElectrolytePcSaftBinaryRecord":
        k_ij = raw.get("k_ij", [])
        if isinstance(k_ij, (int, float)):
            record = ElectrolytePcSaftBinaryRecord.from_float(k_ij)
        else:
            record = ElectrolytePcSaftBinaryRecord(k_ij=[float(k) for k in k_ij])
        if raw.get("kappa_ab") is not None or raw.get("epsilon_k_ab") is not None:
            record.association = BinaryAssociationRecord(raw.get("kappa_ab"), raw.get("epsilon_k_ab"))
        return record

    def __str__(self) -> str:
        tokens = [f"k_ij_{k}={value}" for k, value in enumerate(self.k_ij) if value != 0.0]
        if self.association is not None:
            if self.association.kappa_ab is not None:
                tokens.append(f"kappa_ab={self.association.kappa_ab}")
            if self.association.epsilon_k_ab is not None:
                tokens.append(f"epsilon_k_ab={self.association.epsilon_k_ab}")
        return f"ElectrolytePcSaftBinaryRecord({', '.join(tokens)})"


def pure_record_from_dict(raw: Dict[str, Any]) -> PureRecord:
    model = raw.get("model_record", raw.get("saft_record"))
    if model is None:
        raise IncompatibleParameters(f"Pure record {raw.get('identifier')} has no model record")
    return PureRecord(
        identifier=Identifier.from_dict(raw.get("identifier", {})),
        molarweight=float(raw["molarweight"]),
        model_record=ElectrolytePcSaftRecord.from_dict(model),
    )

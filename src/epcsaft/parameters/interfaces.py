"""Electrolyte PC-SAFT parameter set: combined arrays, mixing rules and classification.

:meth:`ElectrolytePcSaftParameters.from_records` turns a list of
:class:`~.impl.records.PureRecord` and an optional ``n x n`` matrix of
:class:`~.impl.records.ElectrolytePcSaftBinaryRecord` into the read-only
arrays consumed by the Helmholtz energy contributions.  All configuration
problems raise a :class:`~epcsaft.common.exceptions.ParameterError` subclass
before anything is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from epcsaft.common.exceptions import (
    BinaryInteractionError,
    IncompatibleParameters,
    MissingPermittivityData,
)

from .impl import hard_sphere
from .impl.association import AssociationParameters, AssociationRecord, BinaryAssociationRecord
from .impl.dual import Number
from .impl.permittivity import PermittivityRecord, consolidate
from .impl.records import (
    COEFFICIENT_FAMILIES,
    ElectrolytePcSaftBinaryRecord,
    ElectrolytePcSaftRecord,
    PureRecord,
)
from .impl.registry import register
from .utils.units import DEBYE2_PER_ANGSTROM3, JOULE_PER_KELVIN_OVER_KB

logger = logging.getLogger(__name__)

SIGMA_T_MARKER = "sigma_t"
N_KIJ = 4
BinaryMatrix = Sequence[Sequence[ElectrolytePcSaftBinaryRecord]]


def _frozen(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


def _indices(mask: np.ndarray) -> np.ndarray:
    return _frozen(np.flatnonzero(mask).astype(int))


def _coefficient_matrix(records: Sequence[ElectrolytePcSaftRecord], family: str) -> Optional[np.ndarray]:
    """``(n_coeff, n)`` matrix, or ``None`` unless every component provides ``family``."""
    coeffs = [getattr(r, family) for r in records]
    if not coeffs or any(c is None for c in coeffs):
        return None
    return _frozen(np.array(coeffs, dtype=float).T.copy())


def _is_sigma_t_component(record: PureRecord) -> bool:
    name = record.identifier.name or "unknown"
    return SIGMA_T_MARKER in name or record.model_record.temperature_dependent_sigma


@dataclass(frozen=True, eq=False)
class ElectrolytePcSaftParameters:
    molarweight: np.ndarray
    m: np.ndarray
    sigma: np.ndarray
    epsilon_k: np.ndarray
    mu: np.ndarray
    q: np.ndarray
    mu2: np.ndarray
    q2: np.ndarray
    z: np.ndarray
    association: Optional[AssociationParameters]
    k_ij: np.ndarray
    sigma_ij: np.ndarray
    e_k_ij: np.ndarray
    dipole_comp: np.ndarray
    quadpole_comp: np.ndarray
    ionic_comp: np.ndarray
    solvent_comp: np.ndarray
    sigma_t_comp: np.ndarray
    viscosity: Optional[np.ndarray]
    diffusion: Optional[np.ndarray]
    thermal_conductivity: Optional[np.ndarray]
    permittivity: Optional[PermittivityRecord]
    pure_records: Tuple[PureRecord, ...]
    binary_records: Optional[Tuple[Tuple[ElectrolytePcSaftBinaryRecord, ...], ...]]

    @property
    def ncomponents(self) -> int:
        return len(self.m)

    @property
    def ndipole(self) -> int:
        return len(self.dipole_comp)

    @property
    def nquadpole(self) -> int:
        return len(self.quadpole_comp)

    @property
    def nionic(self) -> int:
        return len(self.ionic_comp)

    @property
    def nsolvent(self) -> int:
        return len(self.solvent_comp)

    @staticmethod
    def from_records(
        pure_records: Sequence[PureRecord],
        binary_records: Optional[BinaryMatrix] = None,
        association_combining_rule: Optional[str] = None,
    ) -> "ElectrolytePcSaftParameters":
        n = len(pure_records)
        if n == 0:
            raise IncompatibleParameters("At least one pure record is required")
        if binary_records is not None:
            binary_records = tuple(tuple(row) for row in binary_records)
            if len(binary_records) != n or any(len(row) != n for row in binary_records):
                raise IncompatibleParameters(f"Binary records must form a {n}x{n} matrix")

        records = [p.model_record for p in pure_records]
        molarweight = np.array([p.molarweight for p in pure_records], dtype=float)
        m = np.array([r.m for r in records], dtype=float)
        sigma = np.array([r.sigma for r in records], dtype=float)
        epsilon_k = np.array([r.epsilon_k for r in records], dtype=float)
        mu = np.array([r.mu or 0.0 for r in records], dtype=float)
        q = np.array([r.q or 0.0 for r in records], dtype=float)
        z = np.array([r.z or 0.0 for r in records], dtype=float)

        mu2 = mu ** 2 / (m * sigma ** 3 * epsilon_k) * DEBYE2_PER_ANGSTROM3 * JOULE_PER_KELVIN_OVER_KB
        q2 = q ** 2 / (m * sigma ** 5 * epsilon_k) * DEBYE2_PER_ANGSTROM3 * JOULE_PER_KELVIN_OVER_KB
        dipole_comp = _indices(np.abs(mu2) > 0.0)
        quadpole_comp = _indices(np.abs(q2) > 0.0)

        association_records: List[List[AssociationRecord]] = [
            [r.association_record] if r.association_record is not None else [] for r in records
        ]
        binary_association: List[Tuple[Tuple[int, int], BinaryAssociationRecord]] = []
        if binary_records is not None:
            binary_association = [
                ((i, j), record.association)
                for i, row in enumerate(binary_records)
                for j, record in enumerate(row)
                if record.association is not None
            ]
        association = AssociationParameters.new(
            association_records, sigma, binary_association, association_combining_rule
        )
        if association.is_empty():
            association = None

        ionic_comp = _indices(np.abs(z) > 0.0)
        solvent_comp = _indices(np.abs(z) == 0.0)

        sigma_t_comp = _indices(np.array([_is_sigma_t_component(p) for p in pure_records], dtype=bool))
        for i in sigma_t_comp:
            logger.debug("component %d (%s) uses a temperature-dependent sigma", i, pure_records[i].name)

        k_ij = np.zeros((n, n, N_KIJ))
        if binary_records is not None:
            for i, row in enumerate(binary_records):
                for j, record in enumerate(row):
                    if len(record.k_ij) > N_KIJ:
                        raise BinaryInteractionError(
                            f"Binary interaction for component {i} with {j} is parametrized with "
                            f"{len(record.k_ij)} k_ij coefficients (at most {N_KIJ} allowed)."
                        )
                    k_ij[i, j, : len(record.k_ij)] = record.k_ij
        # no dispersion interaction between ions of the same kind
        for i in ionic_comp:
            k_ij[i, i] = [1.0, 0.0, 0.0, 0.0]

        e_k_ij = np.sqrt(epsilon_k[:, None] * epsilon_k[None, :])
        sigma_ij = 0.5 * (sigma[:, None] + sigma[None, :])

        coefficients = {family: _coefficient_matrix(records, family) for family in COEFFICIENT_FAMILIES}

        permittivity_records = [
            (i, r.permittivity_record) for i, r in enumerate(records) if r.permittivity_record is not None
        ]
        missing = [int(i) for i in solvent_comp if records[i].permittivity_record is None]
        if len(ionic_comp) > 0 and missing:
            raise MissingPermittivityData(
                f"Provide permittivity records for each solvent; solvent components {missing} have none."
            )
        permittivity = consolidate(permittivity_records)
        if len(ionic_comp) > 0 and permittivity is None:
            raise MissingPermittivityData("Permittivity of one or more solvents must be specified.")

        logger.debug(
            "built parameters for %d components: %d dipolar, %d quadrupolar, %d ionic, %d solvent",
            n,
            len(dipole_comp),
            len(quadpole_comp),
            len(ionic_comp),
            len(solvent_comp),
        )
        return ElectrolytePcSaftParameters(
            molarweight=_frozen(molarweight),
            m=_frozen(m),
            sigma=_frozen(sigma),
            epsilon_k=_frozen(epsilon_k),
            mu=_frozen(mu),
            q=_frozen(q),
            mu2=_frozen(mu2),
            q2=_frozen(q2),
            z=_frozen(z),
            association=association,
            k_ij=_frozen(k_ij),
            sigma_ij=_frozen(sigma_ij),
            e_k_ij=_frozen(e_k_ij),
            dipole_comp=dipole_comp,
            quadpole_comp=quadpole_comp,
            ionic_comp=ionic_comp,
            solvent_comp=solvent_comp,
            sigma_t_comp=sigma_t_comp,
            viscosity=coefficients["viscosity"],
            diffusion=coefficients["diffusion"],
            thermal_conductivity=coefficients["thermal_conductivity"],
            permittivity=permittivity,
            pure_records=tuple(pure_records),
            binary_records=binary_records,
        )

    @staticmethod
    def new_pure(record: PureRecord) -> "ElectrolytePcSaftParameters":
        return ElectrolytePcSaftParameters.from_records([record])

    @staticmethod
    def new_binary(
        records: Sequence[PureRecord],
        binary_record: Optional[ElectrolytePcSaftBinaryRecord] = None,
    ) -> "ElectrolytePcSaftParameters":
        """Two components with one (symmetric) binary record."""
        if len(records) != 2:
            raise IncompatibleParameters(f"new_binary needs exactly two records, got {len(records)}")
        binary = None
        if binary_record is not None:
            empty = ElectrolytePcSaftBinaryRecord()
            binary = [[empty, binary_record], [binary_record, empty]]
        return ElectrolytePcSaftParameters.from_records(records, binary)

    def records(self) -> Tuple[Tuple[PureRecord, ...], Optional[Tuple[Tuple[ElectrolytePcSaftBinaryRecord, ...], ...]]]:
        return self.pure_records, self.binary_records

    # hard-sphere geometry

    def monomer_shape(self, temperature: Number) -> hard_sphere.MonomerShape:
        return hard_sphere.monomer_shape(self, temperature)

    def sigma_t(self, temperature: Number) -> np.ndarray:
        return hard_sphere.sigma_t(self, temperature)

    def sigma_ij_t(self, temperature: Number) -> np.ndarray:
        return hard_sphere.sigma_ij_t(self, temperature)

    def hs_diameter(self, temperature: Number) -> np.ndarray:
        return hard_sphere.hs_diameter(self, temperature)

    # reporting

    def _rows(self) -> List[List[Any]]:
        rows = []
        for i, record in enumerate(self.pure_records):
            r = record.model_record
            association = r.association_record or AssociationRecord(0.0, 0.0, 0.0, 0.0, 0.0)
            rows.append(
                [
                    record.identifier.name or f"Component {i + 1}",
                    record.molarweight,
                    r.m,
                    r.sigma,
                    r.epsilon_k,
                    r.mu or 0.0,
                    r.q or 0.0,
                    r.z or 0.0,
                    association.kappa_ab,
                    association.epsilon_k_ab,
                    association.na,
                    association.nb,
                    association.nc,
                ]
            )
        return rows

    def to_markdown(self) -> str:
        header = (
            "|component|molarweight|$m$|$\\sigma$|$\\varepsilon$|$\\mu$|$Q$|$z$"
            "|$\\kappa_{AB}$|$\\varepsilon_{AB}$|$N_A$|$N_B$|$N_C$|"
        )
        lines = [header, "|" + "-|" * 13]
        for row in self._rows():
            lines.append("|" + "|".join(str(x) for x in row) + "|")
        return "\n".join(lines)

    def format_table(self) -> str:
        """Aligned plain-text version of :meth:`to_markdown`."""
        header = ["component", "molarweight", "m", "sigma", "epsilon_k", "mu", "q", "z",
                  "kappa_ab", "epsilon_k_ab", "na", "nb", "nc"]
        cells = [header] + [[str(x) for x in row] for row in self._rows()]
        widths = [max(len(row[c]) for row in cells) for c in range(len(header))]
        return "\n".join("  ".join(cell.rjust(w) for cell, w in zip(row, widths)) for row in cells)


@register("epcsaft")
def build_electrolyte_pcsaft(params: Dict[str, Any]) -> ElectrolytePcSaftParameters:
    from .impl.loader import parameters_from_params

    return parameters_from_params(params)

"""Association (hydrogen-bonding) records and site-pair parameters.

Each associating component carries up to three site types: ``A`` and ``B``
sites cross-associate with each other, ``C`` sites associate with any other
``C`` site.  :class:`AssociationParameters` expands the per-component records
into site lists and site-pair matrices of ``sigma^3 kappa_AB`` and
``epsilon_k_AB`` that the association term consumes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import sqrt
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from epcsaft.common.exceptions import IncompatibleParameters

logger = logging.getLogger(__name__)

COMBINING_RULES = ("default", "cr1")


def _read_only(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


@dataclass
class AssociationRecord:
    kappa_ab: float
    epsilon_k_ab: float
    na: float = 1.0
    nb: float = 1.0
    nc: float = 0.0

    def __str__(self) -> str:
        tokens = [f"kappa_ab={self.kappa_ab}", f"epsilon_k_ab={self.epsilon_k_ab}"]
        for name in ("na", "nb", "nc"):
            value = getattr(self, name)
            if value > 0.0:
                tokens.append(f"{name}={value}")
        return f"AssociationRecord({', '.join(tokens)})"


@dataclass
class BinaryAssociationRecord:
    """Cross-association override for one component pair.

    ``site_indices`` optionally restricts the override to one ``(a, b)`` site
    pair; ``None`` applies it to every site pair of the two components.
    """

    kappa_ab: Optional[float] = None
    epsilon_k_ab: Optional[float] = None
    site_indices: Optional[Tuple[int, int]] = None


@dataclass
class _Site:
    component: int
    record: AssociationRecord
    multiplicity: float


def _combine(
    rule: str,
    sigma_i: float,
    sigma_j: float,
    a: AssociationRecord,
    b: AssociationRecord,
) -> Tuple[float, float]:
    sigma3 = (sigma_i * sigma_j) ** 1.5
    sigma3_kappa = sigma3 * sqrt(a.kappa_ab * b.kappa_ab)
    if rule == "cr1":
        epsilon_k = sqrt(a.epsilon_k_ab * b.epsilon_k_ab)
    else:
        epsilon_k = 0.5 * (a.epsilon_k_ab + b.epsilon_k_ab)
    return sigma3_kappa, epsilon_k


@dataclass(frozen=True)
class AssociationParameters:
    component_index: np.ndarray
    sites_a: List[_Site]
    sites_b: List[_Site]
    sites_c: List[_Site]
    sigma3_kappa_ab: np.ndarray
    sigma3_kappa_cc: np.ndarray
    epsilon_k_ab: np.ndarray
    epsilon_k_cc: np.ndarray
    na: np.ndarray = field(default_factory=lambda: np.zeros(0))
    nb: np.ndarray = field(default_factory=lambda: np.zeros(0))
    nc: np.ndarray = field(default_factory=lambda: np.zeros(0))

    @staticmethod
    def new(
        records: Sequence[Sequence[AssociationRecord]],
        sigma: np.ndarray,
        binary_records: Sequence[Tuple[Tuple[int, int], BinaryAssociationRecord]],
        combining_rule: Optional[str] = None,
    ) -> "AssociationParameters":
        rule = combining_rule or "default"
        if rule not in COMBINING_RULES:
            raise IncompatibleParameters(f"Unknown association combining rule '{rule}'")
        if len(records) != len(sigma):
            raise IncompatibleParameters(
                f"{len(records)} association record lists given for {len(sigma)} components"
            )

        sites_a: List[_Site] = []
        sites_b: List[_Site] = []
        sites_c: List[_Site] = []
        for i, component_records in enumerate(records):
            for record in component_records:
                if record.na > 0.0 or record.nb > 0.0:
                    sites_a.append(_Site(i, record, record.na))
                    sites_b.append(_Site(i, record, record.nb))
                if record.nc > 0.0:
                    sites_c.append(_Site(i, record, record.nc))

        sigma3_kappa_ab = np.zeros((len(sites_a), len(sites_b)))
        epsilon_k_ab = np.zeros((len(sites_a), len(sites_b)))
        for a, site_a in enumerate(sites_a):
            for b, site_b in enumerate(sites_b):
                sigma3_kappa_ab[a, b], epsilon_k_ab[a, b] = _combine(
                    rule, sigma[site_a.component], sigma[site_b.component], site_a.record, site_b.record
                )

        sigma3_kappa_cc = np.zeros((len(sites_c), len(sites_c)))
        epsilon_k_cc = np.zeros((len(sites_c), len(sites_c)))
        for c1, site_1 in enumerate(sites_c):
            for c2, site_2 in enumerate(sites_c):
                sigma3_kappa_cc[c1, c2], epsilon_k_cc[c1, c2] = _combine(
                    rule, sigma[site_1.component], sigma[site_2.component], site_1.record, site_2.record
                )

        overrides: Dict[Tuple[int, int], BinaryAssociationRecord] = dict(binary_records)
        for (i, j), binary in overrides.items():
            sigma3 = (sigma[i] * sigma[j]) ** 1.5
            for a, site_a in enumerate(sites_a):
                for b, site_b in enumerate(sites_b):
                    pair = (site_a.component, site_b.component)
                    if pair != (i, j) and pair != (j, i):
                        continue
                    if binary.site_indices is not None and binary.site_indices != (a, b):
                        continue
                    if binary.kappa_ab is not None:
                        sigma3_kappa_ab[a, b] = sigma3 * binary.kappa_ab
                    if binary.epsilon_k_ab is not None:
                        epsilon_k_ab[a, b] = binary.epsilon_k_ab
            for c1, site_1 in enumerate(sites_c):
                for c2, site_2 in enumerate(sites_c):
                    pair = (site_1.component, site_2.component)
                    if pair != (i, j) and pair != (j, i):
                        continue
                    if binary.kappa_ab is not None:
                        sigma3_kappa_cc[c1, c2] = sigma3 * binary.kappa_ab
                    if binary.epsilon_k_ab is not None:
                        epsilon_k_cc[c1, c2] = binary.epsilon_k_ab

        component_index = np.array(
            sorted({s.component for s in sites_a + sites_c}), dtype=int
        )
        logger.debug(
            "association: %d A sites, %d B sites, %d C sites, %d binary overrides",
            len(sites_a),
            len(sites_b),
            len(sites_c),
            len(overrides),
        )
        return AssociationParameters(
            component_index=_read_only(component_index),
            sites_a=sites_a,
            sites_b=sites_b,
            sites_c=sites_c,
            sigma3_kappa_ab=_read_only(sigma3_kappa_ab),
            sigma3_kappa_cc=_read_only(sigma3_kappa_cc),
            epsilon_k_ab=_read_only(epsilon_k_ab),
            epsilon_k_cc=_read_only(epsilon_k_cc),
            na=_read_only(np.array([s.multiplicity for s in sites_a], dtype=float)),
            nb=_read_only(np.array([s.multiplicity for s in sites_b], dtype=float)),
            nc=_read_only(np.array([s.multiplicity for s in sites_c], dtype=float)),
        )

    def is_empty(self) -> bool:
        return not (self.sites_a or self.sites_c)

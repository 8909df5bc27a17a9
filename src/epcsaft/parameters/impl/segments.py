"""Group-contribution aggregation of segment records into one component record.

Additive quantities are count-weighted sums over the segments:

* ``m = sum(m_s n_s)``
* ``sigma^3 = sum(m_s sigma_s^3 n_s) / m``
* ``epsilon_k = sum(m_s epsilon_k_s n_s) / m``
* ``mu``, ``q``, ``z`` and the association fields are plain sums

Entropy-scaling coefficients follow the group-contribution correlations of
Loetgering-Lin & Gross (viscosity) and Hopp & Gross (thermal conductivity);
a coefficient family is only aggregated when every segment provides it.
"""

from __future__ import annotations

import logging
from math import log
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from epcsaft.common.exceptions import IncompatibleParameters

from .association import AssociationRecord
from .records import ElectrolytePcSaftRecord, Identifier, PureRecord, SegmentRecord

logger = logging.getLogger(__name__)

Segments = Sequence[Tuple[ElectrolytePcSaftRecord, Union[int, float]]]


def _optional_sum(values: List[Optional[float]]) -> Optional[float]:
    present = [v for v in values if v is not None]
    if not present:
        return None
    return sum(present)


def from_segments(segments: Segments) -> ElectrolytePcSaftRecord:
    """Aggregate ``(segment record, count)`` pairs into one component record.

    Integer counts are accepted and converted to ``float``.
    """
    if not segments:
        raise IncompatibleParameters("Cannot build a component record from zero segments")
    segments = [(s, float(n)) for s, n in segments]

    m = sum(s.m * n for s, n in segments)
    sigma3 = sum(s.m * s.sigma ** 3 * n for s, n in segments)
    epsilon_k = sum(s.m * s.epsilon_k * n for s, n in segments)
    z = sum((s.z or 0.0) * n for s, n in segments)

    mu = _optional_sum([s.mu * n if s.mu is not None else None for s, n in segments])
    q = _optional_sum([s.q * n if s.q is not None else None for s, n in segments])

    association_record = None
    assoc = [(s.association_record, n) for s, n in segments if s.association_record is not None]
    if assoc:
        association_record = AssociationRecord(
            kappa_ab=sum(r.kappa_ab * n for r, n in assoc),
            epsilon_k_ab=sum(r.epsilon_k_ab * n for r, n in assoc),
            na=sum(r.na * n for r, n in assoc),
            nb=sum(r.nb * n for r, n in assoc),
            nc=sum(r.nc * n for r, n in assoc),
        )

    viscosity = None
    if all(s.viscosity is not None for s, _ in segments):
        viscosity = [0.0] * 4
        for s, n in segments:
            s3 = s.m * s.sigma ** 3 * n
            a, b, c, d = s.viscosity
            viscosity[0] += s3 * a
            viscosity[1] += s3 * b / sigma3 ** 0.45
            viscosity[2] += n * c
            viscosity[3] += n * d
        # Chapman-Enskog reference differs between the GC and the regular formulation
        viscosity[0] -= 0.5 * log(m)

    thermal_conductivity = None
    if all(s.thermal_conductivity is not None for s, _ in segments):
        n_total = sum(n for _, n in segments)
        thermal_conductivity = [0.0] * 4
        for s, n in segments:
            a, b, c, d = s.thermal_conductivity
            thermal_conductivity[0] += n * a
            thermal_conductivity[1] += n * b
            thermal_conductivity[2] += n * c
            thermal_conductivity[3] += n_total * d

    # no published group-contribution rule for diffusion
    diffusion = [0.0] * 5 if all(s.diffusion is not None for s, _ in segments) else None

    logger.debug("aggregated %d segments: m=%.6g, sigma3=%.6g, z=%.3g", len(segments), m, sigma3, z)
    return ElectrolytePcSaftRecord(
        m=m,
        sigma=(sigma3 / m) ** (1.0 / 3.0),
        epsilon_k=epsilon_k / m,
        mu=mu,
        q=q,
        association_record=association_record,
        viscosity=viscosity,
        diffusion=diffusion,
        thermal_conductivity=thermal_conductivity,
        z=z,
        permittivity_record=None,
    )


def pure_record_from_segments(
    identifier: Identifier,
    counts: Mapping[str, Union[int, float]],
    segment_records: Sequence[SegmentRecord],
) -> PureRecord:
    """Build a :class:`PureRecord` from segment counts such as ``{"CH3": 2, "CH2": 1}``."""
    library: Dict[str, SegmentRecord] = {s.identifier: s for s in segment_records}
    missing = [name for name in counts if name not in library]
    if missing:
        raise IncompatibleParameters(
            f"Segments {missing} of component '{identifier.name}' are not in the segment library"
        )
    segments = [(library[name].model_record, n) for name, n in counts.items()]
    molarweight = sum(library[name].molarweight * n for name, n in counts.items())
    return PureRecord(identifier=identifier, molarweight=molarweight, model_record=from_segments(segments))

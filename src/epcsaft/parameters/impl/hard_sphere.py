r"""Temperature-dependent segment and hard-sphere diameters.

* :func:`sigma_t` -- effective segment diameter.  Components flagged
  temperature dependent use the water correlation of Cameretti et al.

  .. math:: \sigma(T) = \sigma + c_1 e^{-a_1 T} - c_2 e^{-a_2 T}

  evaluated on the real part of ``T``; all other components keep ``sigma``.
* :func:`hs_diameter` -- Barker-Henderson diameter
  :math:`d_i = \sigma_i(T) (1 - 0.12 e^{-3 \varepsilon_i / kT})`; ions are
  rigid and use :math:`d_i = 0.88 \sigma_i(T)`.
* :func:`sigma_ij_t` -- arithmetic mean of :func:`sigma_t` for every pair.

``temperature`` may be a ``float`` or any :class:`~.dual.DualNum`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

import numpy as np

from . import dual
from .dual import Number

SIGMA_T_A1 = 0.01775
SIGMA_T_C1 = 10.11
SIGMA_T_A2 = 0.01146
SIGMA_T_C2 = 1.417

HS_REDUCTION = 0.12
ION_DIAMETER_FACTOR = 0.88


class HardSphereSource(Protocol):
    m: np.ndarray
    sigma: np.ndarray
    epsilon_k: np.ndarray
    sigma_t_comp: np.ndarray
    ionic_comp: np.ndarray


@dataclass(frozen=True)
class MonomerShape:
    """Shape of the monomers; PC-SAFT chains are always non-spherical."""

    segments: Sequence[Number]
    spherical: bool = False


def monomer_shape(params: HardSphereSource, temperature: Number) -> MonomerShape:
    return MonomerShape(segments=[dual.promote(temperature, m) for m in params.m])


def sigma_t(params: HardSphereSource, temperature: Number) -> np.ndarray:
    t = dual.re(temperature)
    sigma = np.array(params.sigma, dtype=float)
    for i in params.sigma_t_comp:
        sigma[i] += SIGMA_T_C1 * np.exp(-SIGMA_T_A1 * t) - SIGMA_T_C2 * np.exp(-SIGMA_T_A2 * t)
    return sigma


def sigma_ij_t(params: HardSphereSource, temperature: Number) -> np.ndarray:
    diameter = sigma_t(params, temperature)
    return 0.5 * (diameter[:, None] + diameter[None, :])


def hs_diameter(params: HardSphereSource, temperature: Number) -> np.ndarray:
    sigma = sigma_t(params, temperature)
    ti = dual.recip(temperature) * -3.0
    d = [
        (1.0 - dual.exp(ti * float(eps)) * HS_REDUCTION) * float(s)
        for s, eps in zip(sigma, params.epsilon_k)
    ]
    for i in params.ionic_comp:
        d[i] = dual.promote(temperature, sigma[i] * ION_DIAMETER_FACTOR)
    if isinstance(temperature, dual.DualNum):
        return np.array(d, dtype=object)
    return np.array(d, dtype=float)

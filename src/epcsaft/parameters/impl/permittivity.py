"""Dielectric models of the solvents in an electrolyte mixture.

Two variants exist and a parameter set may only use one of them:

* ``PerturbationTheory``: dipole and polarizability scaling factors plus the
  correlation-integral parameter of the perturbation-theory permittivity.
* ``ExperimentalData``: tabulated ``(T [K], epsilon_r)`` points per component,
  ordered by temperature.

A pure-component record stores one entry per list; :func:`consolidate`
concatenates them in component order for the whole mixture.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from epcsaft.common.exceptions import (
    IncompatibleParameters,
    IncompatiblePermittivityModels,
    UnsortedPermittivityData,
)

from .registry import PERMITTIVITY_MODELS, build, register

Point = Tuple[float, float]


@dataclass
class PerturbationTheory:
    dipole_scaling: List[float]
    polarizability_scaling: List[float]
    correlation_integral_parameter: List[float]

    kind = "perturbation_theory"

    def __post_init__(self):
        lengths = {
            len(self.dipole_scaling),
            len(self.polarizability_scaling),
            len(self.correlation_integral_parameter),
        }
        if len(lengths) != 1 or 0 in lengths:
            raise IncompatibleParameters(
                "Perturbation-theory permittivity needs equally long scaling/parameter lists"
            )


@dataclass
class ExperimentalData:
    data: List[List[Point]] = field(default_factory=list)

    kind = "experimental_data"

    def points(self, component: int) -> List[Point]:
        return self.data[component]


PermittivityRecord = Union[PerturbationTheory, ExperimentalData]


@register("PerturbationTheory", PERMITTIVITY_MODELS)
def _build_perturbation_theory(params: Dict[str, Any]) -> PerturbationTheory:
    return PerturbationTheory(
        dipole_scaling=[float(x) for x in params["dipole_scaling"]],
        polarizability_scaling=[float(x) for x in params["polarizability_scaling"]],
        correlation_integral_parameter=[float(x) for x in params["correlation_integral_parameter"]],
    )


@register("ExperimentalData", PERMITTIVITY_MODELS)
def _build_experimental_data(params: Dict[str, Any]) -> ExperimentalData:
    return ExperimentalData(data=[[(float(t), float(e)) for t, e in series] for series in params["data"]])


def permittivity_from_dict(raw: Dict[str, Any]) -> PermittivityRecord:
    """Parse the externally tagged JSON form ``{"<Variant>": {...}}``."""
    if len(raw) != 1:
        raise IncompatibleParameters(f"Permittivity record must have exactly one variant tag, got {sorted(raw)}")
    (tag, params), = raw.items()
    return build(tag, params, PERMITTIVITY_MODELS)


def _check_sorted(points: Sequence[Point], component: int):
    t_check = 0.0
    for t, _ in points:
        if t < t_check:
            raise UnsortedPermittivityData(f"Permittivity points for component {component} are unsorted.")
        t_check = t


def consolidate(records: Sequence[Tuple[int, PermittivityRecord]]) -> Optional[PermittivityRecord]:
    """Merge per-component permittivity records into one mixture-level record.

    ``records`` holds ``(component index, record)`` pairs in component order.
    Returns ``None`` when no record is given.
    """
    kind: Optional[str] = None
    mu_scaling: List[float] = []
    alpha_scaling: List[float] = []
    ci_param: List[float] = []
    points: List[List[Point]] = []

    for component, record in records:
        if kind is not None and record.kind != kind:
            raise IncompatiblePermittivityModels(
                f"Inconsistent models for permittivity: component {component} uses "
                f"'{record.kind}' while previous components use '{kind}'."
            )
        kind = record.kind
        if isinstance(record, PerturbationTheory):
            mu_scaling.append(record.dipole_scaling[0])
            alpha_scaling.append(record.polarizability_scaling[0])
            ci_param.append(record.correlation_integral_parameter[0])
        else:
            if not record.data:
                raise IncompatibleParameters(f"Permittivity record of component {component} holds no data points.")
            series = list(record.data[0])
            _check_sorted(series, component)
            points.append(series)

    if kind == PerturbationTheory.kind:
        return PerturbationTheory(
            dipole_scaling=mu_scaling,
            polarizability_scaling=alpha_scaling,
            correlation_integral_parameter=ci_param,
        )
    if kind == ExperimentalData.kind:
        return ExperimentalData(data=points)
    return None

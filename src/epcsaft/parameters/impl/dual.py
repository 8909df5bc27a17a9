"""Numeric capability set shared by the temperature-dependent geometry.

Hard-sphere quantities are differentiated with respect to temperature by the
downstream property code, so every function in :mod:`hard_sphere` accepts either
a plain ``float`` or a forward-mode dual number such as ``num_dual.Dual64``.
The required capabilities are

* ``+``, ``-``, ``*`` with floats and with each other
* ``exp()`` and ``recip()``
* ``value`` (real part)
"""

from __future__ import annotations

import math
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class DualNum(Protocol):
    @property
    def value(self) -> float: ...

    def exp(self) -> "DualNum": ...

    def recip(self) -> "DualNum": ...

    def __add__(self, other): ...

    def __mul__(self, other): ...


Number = Union[float, DualNum]


def re(x: Number) -> float:
    if isinstance(x, DualNum):
        return x.value
    return float(x)


def exp(x: Number) -> Number:
    if isinstance(x, DualNum):
        return x.exp()
    return math.exp(x)


def recip(x: Number) -> Number:
    if isinstance(x, DualNum):
        return x.recip()
    return 1.0 / x


def promote(like: Number, value: float) -> Number:
    """Lift ``value`` to the numeric type of ``like`` with zero derivative part."""
    if isinstance(like, DualNum):
        return like * 0.0 + float(value)
    return float(value)

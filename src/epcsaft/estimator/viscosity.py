"""Experimental viscosity data set.

The data set only stores ``(T, p, eta)`` triples and asks an external model for
predictions; state construction and the entropy-scaling viscosity itself live
outside this package.  Units are fixed: K, Pa and Pa s.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Protocol, Union

import numpy as np

from epcsaft.common.exceptions import IncompatibleParameters, MissingDataError
from epcsaft.parameters.utils.units import assert_unit


class ViscosityModel(Protocol):
    def viscosity(self, temperature: float, pressure: float) -> float: ...


@dataclass
class Viscosity:
    target: np.ndarray
    temperature: np.ndarray
    pressure: np.ndarray

    def __post_init__(self):
        self.target = np.asarray(self.target, dtype=float)
        self.temperature = np.asarray(self.temperature, dtype=float)
        self.pressure = np.asarray(self.pressure, dtype=float)
        if not (len(self.target) == len(self.temperature) == len(self.pressure)):
            raise IncompatibleParameters("target, temperature and pressure must have equal length")

    @staticmethod
    def from_json(json_path: Union[str, Path]) -> "Viscosity":
        raw = json.loads(Path(json_path).read_text(encoding="utf-8"))
        units = raw.get("units", {})
        assert_unit(units.get("temperature", "K"), "K", "temperature")
        assert_unit(units.get("pressure", "Pa"), "Pa", "pressure")
        assert_unit(units.get("viscosity", "Pa s"), "Pa s", "viscosity")
        return Viscosity(target=raw["viscosity"], temperature=raw["temperature"], pressure=raw["pressure"])

    def __len__(self) -> int:
        return len(self.target)

    def target_str(self) -> str:
        return "viscosity"

    def input_str(self) -> List[str]:
        return ["temperature", "pressure"]

    def get_input(self) -> Dict[str, np.ndarray]:
        return {"temperature": self.temperature.copy(), "pressure": self.pressure.copy()}

    def predict(self, model: ViscosityModel) -> np.ndarray:
        values = []
        for t, p in zip(self.temperature, self.pressure):
            value = model.viscosity(float(t), float(p))
            if value is None:
                raise MissingDataError(f"Model returned no viscosity at T={t} K, p={p} Pa")
            values.append(value)
        return np.array(values, dtype=float)

    def relative_difference(self, model: ViscosityModel) -> np.ndarray:
        return (self.predict(model) - self.target) / self.target

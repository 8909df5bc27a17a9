import json
from pathlib import Path

import numpy as np
import pytest

from epcsaft.common.exceptions import UnknownModel
from epcsaft.parameters import ExperimentalData, PerturbationTheory, load_parameters_from_json
from epcsaft.parameters.impl.permittivity import permittivity_from_dict

DATA = Path(__file__).resolve().parents[1] / "data" / "params"


def test_water_nacl_from_json():
    params = load_parameters_from_json(DATA / "water_nacl.json")
    assert params.ncomponents == 3
    assert list(params.sigma_t_comp) == [0]
    assert list(params.ionic_comp) == [1, 2]
    assert list(params.solvent_comp) == [0]
    assert abs(params.k_ij[0, 1, 0] - 0.0045) < 1e-15
    assert abs(params.k_ij[1, 0, 0] - 0.0045) < 1e-15
    assert abs(params.k_ij[2, 1, 0] - 0.317) < 1e-15
    assert list(params.k_ij[1, 1]) == [1.0, 0.0, 0.0, 0.0]
    assert isinstance(params.permittivity, ExperimentalData)
    assert len(params.permittivity.data) == 1
    assert params.association is not None
    assert list(params.association.component_index) == [0]
    assert abs(params.molarweight[1] - 22.98976) < 1e-12


def test_propane_butane_from_json():
    params = load_parameters_from_json(DATA / "propane_butane.json")
    assert np.allclose(params.k_ij[0, 1], [0.0023, 0.0, 0.0, 0.0])
    assert params.viscosity.shape == (4, 2)
    assert params.diffusion.shape == (5, 2)
    assert params.thermal_conductivity is None
    assert params.association is None


def test_group_contribution_from_json():
    params = load_parameters_from_json(DATA / "alkanes_gc.json")
    assert [p.name for p in params.pure_records] == ["hexane", "1-butanol"]
    assert abs(params.m[0] - 3.0482) < 1e-12
    assert abs(params.molarweight[0] - 86.178) < 1e-10
    # only butanol carries an OH group
    assert list(params.association.component_index) == [1]
    # OH has no viscosity coefficients
    assert params.viscosity is None
    assert params.pure_records[0].model_record.viscosity is not None


def test_bare_params_and_unknown_pairs(tmp_path, caplog):
    raw = {
        "pure_records": [
            {"identifier": {"name": "propane"}, "molarweight": 44.0962,
             "model_record": {"m": 2.001829, "sigma": 3.618353, "epsilon_k": 208.1101}},
            {"identifier": {"name": "butane"}, "molarweight": 58.123,
             "model_record": {"m": 2.331586, "sigma": 3.708601, "epsilon_k": 222.8774}},
        ],
        "binary_records": [
            {"id1": {"name": "propane"}, "id2": {"name": "pentane"}, "k_ij": [0.01]},
        ],
    }
    path = tmp_path / "bare.json"
    path.write_text(json.dumps(raw), encoding="utf-8")
    with caplog.at_level("WARNING"):
        params = load_parameters_from_json(path)
    assert "pentane" in caplog.text
    assert np.array_equal(params.k_ij, np.zeros((2, 2, 4)))


def test_unknown_model(tmp_path):
    path = tmp_path / "other.json"
    path.write_text(json.dumps({"model": "saftvrmie", "params": {}}), encoding="utf-8")
    with pytest.raises(UnknownModel):
        load_parameters_from_json(path)


def test_permittivity_variants_from_dict():
    pt = permittivity_from_dict(
        {"PerturbationTheory": {"dipole_scaling": [1.0], "polarizability_scaling": [1.2], "correlation_integral_parameter": [0.5]}}
    )
    assert isinstance(pt, PerturbationTheory)
    exp = permittivity_from_dict({"ExperimentalData": {"data": [[[280.0, 85.0], [300.0, 77.0]]]}})
    assert exp.points(0) == [(280.0, 85.0), (300.0, 77.0)]
    with pytest.raises(UnknownModel):
        permittivity_from_dict({"Polynomial": {}})

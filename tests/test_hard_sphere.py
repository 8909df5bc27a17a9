from math import exp

import numpy as np
from num_dual import Dual64

from epcsaft.parameters import (
    ElectrolytePcSaftParameters,
    ElectrolytePcSaftRecord,
    ExperimentalData,
    Identifier,
    PureRecord,
)


def build_water_nacl():
    points = ExperimentalData(data=[[(273.15, 87.9), (298.15, 78.4), (323.15, 69.9)]])
    water = ElectrolytePcSaftRecord.new(
        m=1.2047, sigma=2.7927, epsilon_k=353.95, kappa_ab=0.04509, epsilon_k_ab=2425.7, na=1.0, nb=1.0,
        permittivity_record=points,
    )
    sodium = ElectrolytePcSaftRecord(m=1.0, sigma=2.8232, epsilon_k=230.0, z=1.0)
    chloride = ElectrolytePcSaftRecord(m=1.0, sigma=2.7560, epsilon_k=170.0, z=-1.0)
    propane = ElectrolytePcSaftRecord(m=2.001829, sigma=3.618353, epsilon_k=208.1101, permittivity_record=points)
    return ElectrolytePcSaftParameters.from_records(
        [
            PureRecord(Identifier(name="propane"), 44.0962, propane),
            PureRecord(Identifier(name="water_np_sigma_t"), 18.0152, water),
            PureRecord(Identifier(name="na+"), 22.98976, sodium),
            PureRecord(Identifier(name="cl-"), 35.45, chloride),
        ]
    )


def water_sigma(t):
    return 2.7927 + 10.11 * exp(-0.01775 * t) - 1.417 * exp(-0.01146 * t)


def test_sigma_t_static_for_unflagged_components():
    params = build_water_nacl()
    for t in (250.0, 298.15, 400.0):
        sigma = params.sigma_t(t)
        assert sigma[0] == params.sigma[0]
        assert sigma[2] == params.sigma[2]
        assert sigma[3] == params.sigma[3]


def test_sigma_t_correlation_for_flagged_component():
    params = build_water_nacl()
    assert list(params.sigma_t_comp) == [1]
    assert abs(params.sigma_t(298.15)[1] - water_sigma(298.15)) < 1e-12
    # dual numbers only contribute their real part
    assert abs(params.sigma_t(Dual64(298.15, 1.0))[1] - water_sigma(298.15)) < 1e-12


def test_hs_diameter_float():
    params = build_water_nacl()
    t = 300.0
    d = params.hs_diameter(t)
    expected_propane = 3.618353 * (1.0 - 0.12 * exp(-3.0 * 208.1101 / t))
    expected_water = water_sigma(t) * (1.0 - 0.12 * exp(-3.0 * 353.95 / t))
    assert abs(d[0] - expected_propane) < 1e-12
    assert abs(d[1] - expected_water) < 1e-12


def test_hs_diameter_of_ions_is_fixed_fraction():
    params = build_water_nacl()
    for t in (200.0, 298.15, 500.0):
        sigma = params.sigma_t(t)
        d = params.hs_diameter(t)
        for i in params.ionic_comp:
            assert d[i] == 0.88 * sigma[i]


def test_hs_diameter_dual_derivative():
    params = build_water_nacl()
    t = 320.0
    d = params.hs_diameter(Dual64(t, 1.0))
    assert d.dtype == object

    eps = 208.1101
    value = 3.618353 * (1.0 - 0.12 * exp(-3.0 * eps / t))
    derivative = -0.12 * 3.618353 * exp(-3.0 * eps / t) * 3.0 * eps / t ** 2
    assert abs(d[0].value - value) < 1e-12
    assert abs(d[0].first_derivative - derivative) < 1e-12

    for i in params.ionic_comp:
        assert d[i].value == 0.88 * params.sigma[i]
        assert d[i].first_derivative == 0.0


def test_sigma_ij_t():
    params = build_water_nacl()
    t = 298.15
    sigma = params.sigma_t(t)
    sigma_ij = params.sigma_ij_t(t)
    assert sigma_ij.shape == (4, 4)
    assert abs(sigma_ij[0, 1] - 0.5 * (sigma[0] + sigma[1])) < 1e-14
    assert np.allclose(np.diag(sigma_ij), sigma)
    assert np.array_equal(sigma_ij, sigma_ij.T)


def test_monomer_shape():
    params = build_water_nacl()
    shape = params.monomer_shape(300.0)
    assert not shape.spherical
    assert list(shape.segments) == list(params.m)

    shape = params.monomer_shape(Dual64(300.0, 1.0))
    assert all(isinstance(m, Dual64) for m in shape.segments)
    assert [m.value for m in shape.segments] == list(params.m)
    assert all(m.first_derivative == 0.0 for m in shape.segments)

from math import log

import pytest

from epcsaft.common.exceptions import IncompatibleParameters
from epcsaft.parameters import (
    AssociationRecord,
    ElectrolytePcSaftRecord,
    Identifier,
    SegmentRecord,
    from_segments,
    pure_record_from_segments,
)


def segment_a(**extra):
    return ElectrolytePcSaftRecord(m=1.0, sigma=3.0, epsilon_k=200.0, **extra)


def segment_b(**extra):
    return ElectrolytePcSaftRecord(m=2.0, sigma=4.0, epsilon_k=300.0, **extra)


def segment_c(**extra):
    return ElectrolytePcSaftRecord(m=0.5, sigma=3.5, epsilon_k=250.0, **extra)


def test_additive_quantities():
    record = from_segments([(segment_a(z=1.0, mu=1.0), 2.0), (segment_b(), 1.0)])
    assert abs(record.m - 4.0) < 1e-14
    assert abs(record.sigma - (182.0 / 4.0) ** (1.0 / 3.0)) < 1e-12
    assert abs(record.epsilon_k - 250.0) < 1e-12
    assert abs(record.z - 2.0) < 1e-14
    assert abs(record.mu - 2.0) < 1e-14
    assert record.q is None
    assert record.association_record is None
    assert record.permittivity_record is None


def test_uncharged_segments_give_zero_charge():
    record = from_segments([(segment_a(), 1.0)])
    assert record.z == 0.0


def test_integer_counts_match_real_counts():
    as_int = from_segments([(segment_a(), 2), (segment_b(), 3)])
    as_float = from_segments([(segment_a(), 2.0), (segment_b(), 3.0)])
    assert as_int.m == as_float.m
    assert as_int.sigma == as_float.sigma
    assert as_int.epsilon_k == as_float.epsilon_k


def test_aggregation_is_order_independent():
    direct = from_segments([(segment_a(), 1.0), (segment_b(), 2.0), (segment_c(), 3.0)])
    reversed_order = from_segments([(segment_c(), 3.0), (segment_b(), 2.0), (segment_a(), 1.0)])
    nested = from_segments([(from_segments([(segment_a(), 1.0), (segment_b(), 2.0)]), 1.0), (segment_c(), 3.0)])
    for other in (reversed_order, nested):
        assert abs(direct.m - other.m) < 1e-12
        assert abs(direct.sigma - other.sigma) < 1e-12
        assert abs(direct.epsilon_k - other.epsilon_k) < 1e-10


def test_association_is_summed():
    assoc = AssociationRecord(0.01, 2000.0, 1.0, 1.0, 0.0)
    record = from_segments([(segment_a(association_record=assoc), 2.0), (segment_b(), 1.0)])
    result = record.association_record
    assert abs(result.kappa_ab - 0.02) < 1e-15
    assert abs(result.epsilon_k_ab - 4000.0) < 1e-10
    assert result.na == 2.0
    assert result.nb == 2.0
    assert result.nc == 0.0


def test_viscosity_group_contribution():
    record = from_segments([(segment_a(viscosity=[1.0, 2.0, 3.0, 4.0]), 2.0)])
    # s3 = m sigma^3 n = 54
    assert abs(record.viscosity[0] - (54.0 - 0.5 * log(2.0))) < 1e-12
    assert abs(record.viscosity[1] - 54.0 * 2.0 / 54.0 ** 0.45) < 1e-12
    assert abs(record.viscosity[2] - 6.0) < 1e-14
    assert abs(record.viscosity[3] - 8.0) < 1e-14


def test_thermal_conductivity_group_contribution():
    record = from_segments(
        [
            (segment_a(thermal_conductivity=[1.0, 2.0, 3.0, 4.0]), 2.0),
            (segment_b(thermal_conductivity=[1.0, 1.0, 1.0, 1.0]), 1.0),
        ]
    )
    assert list(record.thermal_conductivity) == [3.0, 5.0, 7.0, 15.0]


def test_entropy_scaling_requires_every_segment():
    record = from_segments(
        [
            (segment_a(viscosity=[1.0, 2.0, 3.0, 4.0], diffusion=[1.0] * 5), 1.0),
            (segment_b(diffusion=[2.0] * 5), 1.0),
        ]
    )
    assert record.viscosity is None
    assert record.thermal_conductivity is None
    assert list(record.diffusion) == [0.0] * 5


def test_record_from_segments_classmethod():
    record = ElectrolytePcSaftRecord.from_segments([(segment_a(), 3)])
    assert abs(record.m - 3.0) < 1e-14
    assert abs(record.sigma - 3.0) < 1e-12


def test_pure_record_from_segment_counts():
    library = [
        SegmentRecord("CH3", 15.035, ElectrolytePcSaftRecord(m=0.61198, sigma=3.7202, epsilon_k=229.90)),
        SegmentRecord("CH2", 14.027, ElectrolytePcSaftRecord(m=0.45606, sigma=3.8900, epsilon_k=239.01)),
    ]
    hexane = pure_record_from_segments(Identifier(name="hexane"), {"CH3": 2, "CH2": 4}, library)
    assert abs(hexane.molarweight - 86.178) < 1e-10
    assert abs(hexane.model_record.m - 3.0482) < 1e-12
    assert hexane.name == "hexane"


def test_unknown_segment_fails():
    library = [SegmentRecord("CH3", 15.035, ElectrolytePcSaftRecord(m=0.61198, sigma=3.7202, epsilon_k=229.90))]
    with pytest.raises(IncompatibleParameters):
        pure_record_from_segments(Identifier(name="ethanol"), {"CH3": 1, "OH": 1}, library)


def test_empty_segment_list_fails():
    with pytest.raises(IncompatibleParameters):
        from_segments([])

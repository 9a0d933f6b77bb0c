import pytest

from quasidef.cones import (
    ExponentialConeT,
    NonnegativeConeT,
    PowerConeT,
    PSDTriangleConeT,
    SecondOrderConeT,
    ZeroConeT,
    to_native_cones,
    to_supported_cone,
)


def test_numel_degree():
    zcone = ZeroConeT(5)
    nncone = NonnegativeConeT(5)
    scone = SecondOrderConeT(5)
    expcone = ExponentialConeT()
    powcone = PowerConeT(0.5)

    assert zcone.numel == 5
    assert zcone.degree == 0
    assert nncone.numel == 5
    assert nncone.degree == 5
    assert scone.numel == 5
    assert scone.degree == 1
    assert expcone.numel == 3
    assert expcone.degree == 3
    assert powcone.numel == 3
    assert powcone.degree == 3


def test_numel_degree_psd():
    sdpcone = PSDTriangleConeT(5)
    assert sdpcone.numel == 15
    assert sdpcone.degree == 5


@pytest.mark.parametrize(
    "cone, text",
    [
        (ZeroConeT(3), "ZeroConeT(3)"),
        (NonnegativeConeT(2), "NonnegativeConeT(2)"),
        (SecondOrderConeT(4), "SecondOrderConeT(4)"),
        (ExponentialConeT(), "ExponentialConeT()"),
        (PowerConeT(0.6), "PowerConeT(0.6)"),
        (PSDTriangleConeT(3), "PSDTriangleConeT(3)"),
    ],
)
def test_repr(cone, text):
    assert repr(cone) == text


def test_power_cone_alpha_aliases():
    cone = PowerConeT(0.1)
    assert cone.alpha == 0.1
    assert cone.α == 0.1


def test_negative_dimension_rejected():
    with pytest.raises(ValueError):
        ZeroConeT(-1)


def test_non_integer_dimension_rejected():
    with pytest.raises(TypeError):
        NonnegativeConeT(2.5)


def test_power_cone_requires_number():
    with pytest.raises(TypeError):
        PowerConeT("half")


def test_to_supported_cone_is_identity_on_native_cones():
    cones = [
        ZeroConeT(1),
        NonnegativeConeT(2),
        SecondOrderConeT(3),
        PowerConeT(0.5),
        ExponentialConeT(),
        PSDTriangleConeT(3),
    ]
    assert to_native_cones(cones) == cones


def test_to_supported_cone_accepts_lookalike_objects():
    lookalike = type("SecondOrderConeT", (), {"dim": 7})()
    assert to_supported_cone(lookalike) == SecondOrderConeT(7)

    power = type("PowerConeT", (), {"α": 0.25})()
    assert to_supported_cone(power) == PowerConeT(0.25)


def test_to_supported_cone_rejects_unknown_type():
    unknown = type("BananaCone", (), {"dim": 3})()
    with pytest.raises(TypeError, match="Unrecognized cone type : BananaCone"):
        to_supported_cone(unknown)


def test_to_native_cones_propagates_errors():
    with pytest.raises(TypeError):
        to_native_cones([ZeroConeT(1), object()])
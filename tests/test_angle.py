
import dataclasses
import math

import pytest
from pytest import approx

from geodetics import Angle, InvalidParameterError


def test_angle_init():
    assert Angle.from_degrees(90).radians == approx(math.pi / 2)
    assert Angle.from_radians(math.pi / 2).degrees == approx(90.)
    assert Angle.from_degrees('45.5').degrees == approx(45.5)
    assert Angle.ZERO.radians == 0.

    with pytest.raises(InvalidParameterError):
        Angle.from_degrees(float('nan'))

    with pytest.raises(InvalidParameterError):
        Angle.from_radians(math.inf)


def test_angle_normalization():
    # Whole turns reduce exactly
    assert Angle.from_degrees(370.) == Angle.from_degrees(10.)
    assert Angle.from_degrees(-350.) == Angle.from_degrees(10.)
    assert Angle.from_degrees(730.) == Angle.from_degrees(10.)

    a1, a2 = Angle.from_degrees(370.), Angle.from_degrees(10.)
    assert math.sin(a1.radians) == math.sin(a2.radians)
    assert math.cos(a1.radians) == math.cos(a2.radians)
    assert math.tan(a1.radians) == math.tan(a2.radians)

    # Canonical range is (-180, 180]
    assert Angle.from_degrees(-180.) == Angle.from_degrees(180.)
    assert Angle.from_degrees(180.).degrees == approx(180.)
    assert Angle.from_degrees(270.).degrees == approx(-90.)
    assert Angle.from_radians(2 * math.pi + 1).radians == approx(1.)
    assert Angle.from_radians(-2 * math.pi - 1).radians == approx(-1.)


def test_angle_arithmetic():
    assert (Angle.from_degrees(10) + Angle.from_degrees(20)).degrees == approx(30.)
    assert (Angle.from_degrees(170) + Angle.from_degrees(20)).degrees == approx(-170.)
    assert (Angle.from_degrees(10) - Angle.from_degrees(20)).degrees == approx(-10.)
    assert (Angle.from_degrees(-170) - Angle.from_degrees(20)).degrees == approx(170.)
    assert (-Angle.from_degrees(30)).degrees == approx(-30.)
    assert abs(Angle.from_degrees(-30)).degrees == approx(30.)
    assert (Angle.from_degrees(100) * 2).degrees == approx(-160.)
    assert (2 * Angle.from_degrees(100)).degrees == approx(-160.)

    with pytest.raises(TypeError):
        _ = Angle.from_degrees(10) + 10


def test_angle_ordering():
    assert Angle.from_degrees(10) < Angle.from_degrees(20)
    assert Angle.from_degrees(20) >= Angle.from_degrees(20)
    assert Angle.from_degrees(-10) < Angle.ZERO

    # Ordering uses the normalized value, so 350 degrees sorts as -10
    assert Angle.from_degrees(350) < Angle.from_degrees(10)
    assert max(Angle.from_degrees(x) for x in (90, 180, 270)) == Angle.from_degrees(180)


def test_angle_hash():
    angles = {Angle.from_degrees(10), Angle.from_degrees(370), Angle.from_degrees(20)}
    assert len(angles) == 2
    assert Angle.from_degrees(-350) in angles


def test_angle_immutable():
    angle = Angle.from_degrees(10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        angle.radians = 1.


def test_angle_positive_degrees():
    assert Angle.from_degrees(-90).positive_degrees == approx(270.)
    assert Angle.from_degrees(90).positive_degrees == approx(90.)
    assert Angle.from_degrees(180).positive_degrees == approx(180.)
    assert Angle.from_degrees(360).positive_degrees == 0.
    assert Angle.ZERO.positive_degrees == 0.

    # Tiny negative angles must not round up to 360
    assert 0. <= Angle.from_radians(-1e-17).positive_degrees < 360.


def test_angle_dms():
    assert Angle.from_dms(38, 53, 21.192).degrees == approx(38.88922)
    assert Angle.from_dms(-77, 2, 59.208).degrees == approx(-77.04978)
    assert Angle.from_dms(0, -30).degrees == approx(-0.5)
    assert Angle.from_dms(0, 0, -36).degrees == approx(-0.01)

    assert Angle.from_degrees(38.88922).to_dms() == (38, 53, 21.192)
    assert Angle.from_degrees(-77.04978).to_dms() == (-77, 2, 59.208)
    assert Angle.from_degrees(-0.5).to_dms() == (0, -30, 0.)


def test_angle_repr():
    assert repr(Angle.ZERO) == '<Angle(0.0)>'
    assert str(Angle.ZERO) == '0.0°'

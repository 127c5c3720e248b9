"""Vincenty results checked against Karney's algorithm, as implemented by geographiclib"""

import pytest
from pytest import approx

from geodetics import (
    Angle, CLARKE1880, GRS80, GeodeticCalculator, GlobalCoordinates, WGS84
)

from tests.functions import assert_angles_equal, assert_coordinates_equal

geodesic = pytest.importorskip('geographiclib.geodesic')

CALC = GeodeticCalculator()

PAIRS = [
    ((38.88922, -77.04978), (48.85889, 2.29583)),  # Lincoln Memorial -> Eiffel Tower
    ((38.840511, -105.0445896), (37.826389, -122.4225)),  # Pike's Peak -> Alcatraz
    ((0., 0.), (0.001, 0.001)),
    ((-33.8568, 151.2153), (51.47, -0.4543)),
    ((10., 179.5), (-10., -179.5)),
    ((80., 10.), (-60., -150.)),
    ((45., 7.), (45., 7.000001)),
    ((30., 10.), (60., 10.)),
]


def _karney(ellipsoid):
    return geodesic.Geodesic(ellipsoid.semi_major_axis_meters, ellipsoid.flattening)


@pytest.mark.parametrize('ellipsoid', [WGS84, GRS80, CLARKE1880])
@pytest.mark.parametrize('start,end', PAIRS)
def test_inverse_matches_karney(ellipsoid, start, end):
    expected = _karney(ellipsoid).Inverse(*start, *end)
    curve = CALC.calculate_geodetic_curve(
        ellipsoid, GlobalCoordinates.from_degrees(*start), GlobalCoordinates.from_degrees(*end)
    )

    assert curve.ellipsoidal_distance_meters == approx(expected['s12'], abs=2e-3)
    assert_angles_equal(curve.azimuth, Angle.from_degrees(expected['azi1']), 1e-6)

    # Karney reports the forward azimuth at the end point
    assert_angles_equal(
        curve.reverse_azimuth, Angle.from_degrees(expected['azi2'] + 180.), 1e-6
    )


@pytest.mark.parametrize('ellipsoid', [WGS84, GRS80, CLARKE1880])
@pytest.mark.parametrize('start,bearing,distance', [
    ((38.88922, -77.04978), 51.7679, 6_179_016.13586),
    ((0., 0.), 45., 111_000.),
    ((-33.8568, 151.2153), 200., 12_000_000.),
    ((-45., -170.), 90., 5_000_000.),
    ((89., 0.), 180., 500_000.),
    ((-20., 40.), 315., 15_000_000.),
])
def test_direct_matches_karney(ellipsoid, start, bearing, distance):
    expected = _karney(ellipsoid).Direct(*start, bearing, distance)
    dest, end_bearing = CALC.calculate_ending_global_coordinates(
        ellipsoid, GlobalCoordinates.from_degrees(*start), Angle.from_degrees(bearing), distance
    )

    assert_coordinates_equal(
        dest, GlobalCoordinates.from_degrees(expected['lat2'], expected['lon2']), abs_tol=1e-7
    )
    assert_angles_equal(end_bearing, Angle.from_degrees(expected['azi2']), 1e-6)

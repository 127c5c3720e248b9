"""
Results of the inverse geodetic problem
"""

__all__ = ['GeodeticCurve', 'GeodeticMeasurement']

from dataclasses import dataclass, field
import math

from geodetics.angle import Angle
from geodetics.exceptions import InvalidParameterError


@dataclass(frozen=True)
class GeodeticCurve:
    """
    The geodesic between two points on an ellipsoid: its length and the azimuths at
    either end.

    `azimuth` is the bearing from the start point toward the end point, and
    `reverse_azimuth` is the bearing from the end point back toward the start point.
    Both are Angles (signed internally); use the `*_degrees` properties for
    compass bearings on [0, 360).
    """
    ellipsoidal_distance_meters: float
    azimuth: Angle
    reverse_azimuth: Angle

    def __post_init__(self):
        if not isinstance(self.azimuth, Angle) or not isinstance(self.reverse_azimuth, Angle):
            raise InvalidParameterError('Azimuth and reverse azimuth must be Angles')

        distance = float(self.ellipsoidal_distance_meters)
        if not distance >= 0:
            raise InvalidParameterError(
                f'Ellipsoidal distance must be non-negative, not {self.ellipsoidal_distance_meters}'
            )
        object.__setattr__(self, 'ellipsoidal_distance_meters', distance)

    def __repr__(self):
        return (
            f'<GeodeticCurve({self.ellipsoidal_distance_meters}m, '
            f'{self.azimuth_degrees}°, {self.reverse_azimuth_degrees}°)>'
        )

    @property
    def azimuth_degrees(self) -> float:
        """The forward azimuth as a compass bearing, on [0, 360)"""
        return self.azimuth.positive_degrees

    @property
    def reverse_azimuth_degrees(self) -> float:
        """The reverse azimuth as a compass bearing, on [0, 360)"""
        return self.reverse_azimuth.positive_degrees


@dataclass(frozen=True)
class GeodeticMeasurement:
    """
    A GeodeticCurve extended into three dimensions by the elevation change between
    its endpoints.

    The point-to-point distance treats the surface distance and the elevation change
    as the legs of a flat right triangle. That is a good approximation when the
    elevation change is small relative to the distance, and a poor one otherwise.
    """
    curve: GeodeticCurve
    elevation_change_meters: float
    point_to_point_distance_meters: float = field(init=False)

    def __post_init__(self):
        if not isinstance(self.curve, GeodeticCurve):
            raise InvalidParameterError(
                f'Expected a GeodeticCurve, not {type(self.curve).__name__}'
            )
        elevation_change = float(self.elevation_change_meters)
        if not math.isfinite(elevation_change):
            raise InvalidParameterError(
                f'Elevation change must be finite, not {self.elevation_change_meters}'
            )

        object.__setattr__(self, 'elevation_change_meters', elevation_change)
        object.__setattr__(
            self,
            'point_to_point_distance_meters',
            math.hypot(self.curve.ellipsoidal_distance_meters, elevation_change)
        )

    def __repr__(self):
        return (
            f'<GeodeticMeasurement({self.point_to_point_distance_meters}m, '
            f'{self.elevation_change_meters}m, {self.azimuth_degrees}°, '
            f'{self.reverse_azimuth_degrees}°)>'
        )

    @property
    def ellipsoidal_distance_meters(self) -> float:
        return self.curve.ellipsoidal_distance_meters

    @property
    def azimuth(self) -> Angle:
        return self.curve.azimuth

    @property
    def reverse_azimuth(self) -> Angle:
        return self.curve.reverse_azimuth

    @property
    def azimuth_degrees(self) -> float:
        return self.curve.azimuth_degrees

    @property
    def reverse_azimuth_degrees(self) -> float:
        return self.curve.reverse_azimuth_degrees

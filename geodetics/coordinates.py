"""
Representation of specific points on (and above) a reference ellipsoid
"""

__all__ = ['GlobalCoordinates', 'GlobalPosition']

from dataclasses import dataclass
import math
from typing import Tuple, Union

from geodetics.angle import Angle
from geodetics.exceptions import InvalidParameterError
from geodetics.utils.functions import dms_components, round_half_up


@dataclass(frozen=True, order=True)
class GlobalCoordinates:
    """
    Representation of a point on the surface of the ellipsoid (i.e. a lat/lon pair).

    Longitude is normalized to (-180, 180] by Angle itself. Latitudes beyond the poles
    are rejected rather than wrapped.
    """
    latitude: Angle
    longitude: Angle

    def __post_init__(self):
        if not isinstance(self.latitude, Angle) or not isinstance(self.longitude, Angle):
            raise InvalidParameterError('Latitude and longitude must be Angles')

        # Tolerate the float noise of a degrees -> radians -> degrees round trip at the poles
        if round_half_up(abs(self.latitude.degrees), 12) > 90:
            raise InvalidParameterError(
                f'Latitude must be on [-90, 90], not {self.latitude.degrees}'
            )

    def __repr__(self):
        return f'<GlobalCoordinates({self.latitude.degrees}, {self.longitude.degrees})>'

    @classmethod
    def from_degrees(
        cls,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str]
    ) -> 'GlobalCoordinates':
        """Creates GlobalCoordinates from a latitude, longitude pair in decimal degrees"""
        return cls(Angle.from_degrees(latitude), Angle.from_degrees(longitude))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the latitude and longitude to tuples of degrees, minutes, seconds,
        hemisphere

        Returns:
            (latitude, longitude), each as (degrees, minutes, seconds, hemisphere)
        """
        lat, lon = self.latitude.degrees, self.longitude.degrees
        return (
            (*dms_components(lat), 'N' if lat >= 0 else 'S'),
            (*dms_components(lon), 'E' if lon >= 0 else 'W'),
        )

    def to_float(self) -> Tuple[float, float]:
        """
        Converts the coordinates to a tuple of decimal degrees.

        Returns:
            (latitude, longitude)
        """
        return self.latitude.degrees, self.longitude.degrees


@dataclass(frozen=True, order=True)
class GlobalPosition:
    """GlobalCoordinates plus an elevation, in meters, above (or below) the ellipsoid"""
    coordinates: GlobalCoordinates
    elevation_meters: float = 0.

    def __post_init__(self):
        if not isinstance(self.coordinates, GlobalCoordinates):
            raise InvalidParameterError(
                f'Expected GlobalCoordinates, not {type(self.coordinates).__name__}'
            )
        elevation = float(self.elevation_meters)
        if not math.isfinite(elevation):
            raise InvalidParameterError(f'Elevation must be finite, not {self.elevation_meters}')

        object.__setattr__(self, 'elevation_meters', elevation)

    def __repr__(self):
        return (
            f'<GlobalPosition({self.latitude.degrees}, {self.longitude.degrees}, '
            f'{self.elevation_meters})>'
        )

    @classmethod
    def from_degrees(
        cls,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
        elevation_meters: Union[float, int, str] = 0.,
    ) -> 'GlobalPosition':
        """Creates a GlobalPosition from decimal degrees and an elevation in meters"""
        return cls(GlobalCoordinates.from_degrees(latitude, longitude), float(elevation_meters))

    @property
    def latitude(self) -> Angle:
        return self.coordinates.latitude

    @property
    def longitude(self) -> Angle:
        return self.coordinates.longitude

    def to_float(self) -> Tuple[float, float, float]:
        """
        Returns:
            (latitude, longitude, elevation)
        """
        return (*self.coordinates.to_float(), self.elevation_meters)

"""
Reference ellipsoids that geodetic calculations are performed against
"""

__all__ = [
    'ANS', 'CLARKE1858', 'CLARKE1880', 'ELLIPSOIDS', 'Ellipsoid',
    'GRS67', 'GRS80', 'SPHERE', 'WGS72', 'WGS84',
]

from dataclasses import dataclass, field
import math
from typing import Dict, Union

from geodetics._const import (
    ANS_PARAMS, CLARKE1858_PARAMS, CLARKE1880_PARAMS, EARTH_RADIUS_METERS,
    GRS67_PARAMS, GRS80_PARAMS, WGS72_PARAMS, WGS84_A, WGS84_F,
)
from geodetics.exceptions import InvalidParameterError


@dataclass(frozen=True)
class Ellipsoid:
    """
    An oblate spheroid defined by its semi-major axis and flattening. Everything
    else (semi-minor axis, eccentricities) is derived on demand.

    Prefer the named constructors over calling the class directly; all of them
    validate the parameters the same way.
    """
    semi_major_axis_meters: float
    flattening: float
    name: str = field(default='', compare=False)

    def __post_init__(self):
        a, f = float(self.semi_major_axis_meters), float(self.flattening)
        if not (math.isfinite(a) and a > 0):
            raise InvalidParameterError(
                f'Semi-major axis must be a positive number of meters, not {self.semi_major_axis_meters}'
            )
        if not 0 <= f < 1:
            raise InvalidParameterError(f'Flattening must be on [0, 1), not {self.flattening}')

        object.__setattr__(self, 'semi_major_axis_meters', a)
        object.__setattr__(self, 'flattening', f)

    def __repr__(self):
        if self.name:
            return f'<Ellipsoid {self.name}>'
        return f'<Ellipsoid(a={self.semi_major_axis_meters}, f={self.flattening})>'

    @classmethod
    def from_parameters(
        cls,
        semi_major_axis_meters: Union[float, int],
        flattening: Union[float, int],
        name: str = '',
    ) -> 'Ellipsoid':
        """
        Creates an Ellipsoid from its semi-major axis and flattening.

        Args:
            semi_major_axis_meters:
                The equatorial radius, in meters. Must be positive.

            flattening:
                (a - b) / a. Must be on [0, 1).

            name:
                (Optional) A display name

        Returns:
            Ellipsoid
        """
        return cls(semi_major_axis_meters, flattening, name)

    @classmethod
    def from_inverse_flattening(
        cls,
        semi_major_axis_meters: Union[float, int],
        inverse_flattening: Union[float, int],
        name: str = '',
    ) -> 'Ellipsoid':
        """
        Creates an Ellipsoid from its semi-major axis and inverse flattening (1/f), which
        is how most reference ellipsoids are published. An infinite inverse flattening
        describes a sphere.
        """
        if not inverse_flattening > 1:
            raise InvalidParameterError(
                f'Inverse flattening must be greater than 1, not {inverse_flattening}'
            )
        return cls(semi_major_axis_meters, 1 / inverse_flattening, name)

    @classmethod
    def from_axes(
        cls,
        semi_major_axis_meters: Union[float, int],
        semi_minor_axis_meters: Union[float, int],
        name: str = '',
    ) -> 'Ellipsoid':
        """Creates an Ellipsoid from its semi-major and semi-minor axes"""
        if not 0 < semi_minor_axis_meters <= semi_major_axis_meters:
            raise InvalidParameterError(
                'Semi-minor axis must be positive and no greater than the semi-major axis, '
                f'not {semi_minor_axis_meters}'
            )
        return cls(
            semi_major_axis_meters,
            (semi_major_axis_meters - semi_minor_axis_meters) / semi_major_axis_meters,
            name
        )

    @staticmethod
    def by_name(name: str) -> 'Ellipsoid':
        """Looks up one of the named reference ellipsoids, e.g. 'WGS84'"""
        try:
            return ELLIPSOIDS[name.upper()]
        except KeyError:
            raise InvalidParameterError(
                f"Unknown ellipsoid '{name}'. Options: {list(ELLIPSOIDS.keys())}"
            ) from None

    @property
    def semi_minor_axis_meters(self) -> float:
        """b = a(1 - f)"""
        return self.semi_major_axis_meters * (1 - self.flattening)

    @property
    def inverse_flattening(self) -> float:
        """1/f, or infinity for a sphere"""
        if self.flattening == 0:
            return math.inf
        return 1 / self.flattening

    @property
    def eccentricity_squared(self) -> float:
        """First eccentricity squared, e^2 = f(2 - f)"""
        return self.flattening * (2 - self.flattening)

    @property
    def second_eccentricity_squared(self) -> float:
        """Second eccentricity squared, (a^2 - b^2) / b^2"""
        a, b = self.semi_major_axis_meters, self.semi_minor_axis_meters
        return (a ** 2 - b ** 2) / (b ** 2)


WGS84 = Ellipsoid.from_parameters(WGS84_A, WGS84_F, 'WGS84')
GRS80 = Ellipsoid.from_inverse_flattening(*GRS80_PARAMS, 'GRS80')
GRS67 = Ellipsoid.from_inverse_flattening(*GRS67_PARAMS, 'GRS67')
ANS = Ellipsoid.from_inverse_flattening(*ANS_PARAMS, 'ANS')
WGS72 = Ellipsoid.from_inverse_flattening(*WGS72_PARAMS, 'WGS72')
CLARKE1858 = Ellipsoid.from_inverse_flattening(*CLARKE1858_PARAMS, 'CLARKE1858')
CLARKE1880 = Ellipsoid.from_inverse_flattening(*CLARKE1880_PARAMS, 'CLARKE1880')
SPHERE = Ellipsoid.from_parameters(EARTH_RADIUS_METERS, 0., 'SPHERE')

ELLIPSOIDS: Dict[str, Ellipsoid] = {
    x.name: x for x in (WGS84, GRS80, GRS67, ANS, WGS72, CLARKE1858, CLARKE1880, SPHERE)
}

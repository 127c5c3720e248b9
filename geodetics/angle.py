"""
Representation of a planar angle, used for latitudes, longitudes and bearings
"""

__all__ = ['Angle']

from dataclasses import dataclass
import math
from typing import ClassVar, Tuple, Union

from geodetics.exceptions import InvalidParameterError
from geodetics.utils.functions import dms_components

_TWO_PI = 2 * math.pi


def _normalize_degrees(value: float) -> float:
    """Reduces a value in degrees to (-180, 180]"""
    value = math.fmod(value, 360.)
    if value <= -180:
        return value + 360.
    if value > 180:
        return value - 360.
    return value


def _normalize_radians(value: float) -> float:
    """Reduces a value in radians to (-pi, pi]"""
    value = math.fmod(value, _TWO_PI)
    if value <= -math.pi:
        return value + _TWO_PI
    if value > math.pi:
        return value - _TWO_PI
    return value


@dataclass(frozen=True, order=True)
class Angle:
    """
    An immutable planar angle, stored in radians and normalized to (-pi, pi].

    Two angles that differ by a whole number of turns are the same Angle, so
    comparisons, hashing and trigonometry all operate on the normalized value.
    Construct from degrees wherever possible; degree values are reduced before
    they are converted, which keeps e.g. 370 and 10 degrees bit-identical.
    """
    radians: float

    ZERO: ClassVar['Angle']

    def __post_init__(self):
        value = float(self.radians)
        if not math.isfinite(value):
            raise InvalidParameterError(f'Angle must be finite, not {self.radians}')

        object.__setattr__(self, 'radians', _normalize_radians(value))

    def __repr__(self):
        return f'<Angle({self.degrees})>'

    def __str__(self):
        return f'{self.degrees}°'

    def __add__(self, other: 'Angle') -> 'Angle':
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle.from_radians(self.radians + other.radians)

    def __sub__(self, other: 'Angle') -> 'Angle':
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle.from_radians(self.radians - other.radians)

    def __neg__(self) -> 'Angle':
        return Angle.from_radians(-self.radians)

    def __abs__(self) -> 'Angle':
        return Angle.from_radians(abs(self.radians))

    def __mul__(self, factor: Union[float, int]) -> 'Angle':
        if not isinstance(factor, (float, int)):
            return NotImplemented
        return Angle.from_radians(self.radians * factor)

    __rmul__ = __mul__

    @classmethod
    def from_degrees(cls, value: Union[float, int, str]) -> 'Angle':
        """Creates an Angle from a value in decimal degrees"""
        value = float(value)
        if not math.isfinite(value):
            raise InvalidParameterError(f'Angle must be finite, not {value}')

        return cls(math.radians(_normalize_degrees(value)))

    @classmethod
    def from_radians(cls, value: Union[float, int]) -> 'Angle':
        """Creates an Angle from a value in radians"""
        return cls(value)

    @classmethod
    def from_dms(
        cls,
        degrees: Union[float, int],
        minutes: Union[float, int] = 0,
        seconds: Union[float, int] = 0.,
    ) -> 'Angle':
        """
        Creates an Angle from a Degrees Minutes Seconds triple.

        The sign of the angle is taken from the first non-zero component, so both
        (-77, 2, 59.2) and (0, -30, 0) describe negative angles.

        Args:
            degrees:
                Whole (or fractional) degrees

            minutes:
                Minutes of arc

            seconds:
                Seconds of arc

        Returns:
            Angle
        """
        sign = next((-1 if x < 0 else 1 for x in (degrees, minutes, seconds) if x != 0), 1)
        return cls.from_degrees(
            sign * (abs(degrees) + abs(minutes) / 60 + abs(seconds) / 3600)
        )

    @property
    def degrees(self) -> float:
        """The angle in decimal degrees, on (-180, 180]"""
        return math.degrees(self.radians)

    @property
    def positive_degrees(self) -> float:
        """The angle in decimal degrees, on [0, 360). Used for bearings."""
        degrees = self.degrees
        if degrees < 0:
            degrees += 360.
        # -1e-15 + 360 rounds up to 360
        return 0. if degrees >= 360. else degrees

    def to_dms(self) -> Tuple[int, int, float]:
        """
        Converts the angle to degrees, minutes, seconds. Only the degrees component
        carries the sign; a negative angle smaller than one degree reports its sign
        through minutes (or seconds) instead.

        Returns:
            (degrees, minutes, seconds)
        """
        degrees, minutes, seconds = dms_components(self.degrees)
        if self.radians < 0:
            if degrees:
                degrees = -degrees
            elif minutes:
                minutes = -minutes
            else:
                seconds = -seconds

        return degrees, minutes, seconds


Angle.ZERO = Angle(0.)

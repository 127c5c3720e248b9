from geodetics._version import __version__  # noqa: F401
from geodetics.utils.logging import LOGGER
from geodetics.angle import Angle
from geodetics.calculator import GeodeticCalculator
from geodetics.coordinates import GlobalCoordinates, GlobalPosition
from geodetics.curves import GeodeticCurve, GeodeticMeasurement
from geodetics.ellipsoid import (
    ANS, CLARKE1858, CLARKE1880, ELLIPSOIDS, Ellipsoid, GRS67, GRS80, SPHERE, WGS72, WGS84
)
from geodetics.exceptions import GeodeticError, InvalidParameterError, IterationNotConverged


__all__ = [
    'ANS',
    'Angle',
    'CLARKE1858',
    'CLARKE1880',
    'ELLIPSOIDS',
    'Ellipsoid',
    'GRS67',
    'GRS80',
    'GeodeticCalculator',
    'GeodeticCurve',
    'GeodeticError',
    'GeodeticMeasurement',
    'GlobalCoordinates',
    'GlobalPosition',
    'InvalidParameterError',
    'IterationNotConverged',
    'SPHERE',
    'WGS72',
    'WGS84',
    'LOGGER',
]

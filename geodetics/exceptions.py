"""Exceptions raised by geodetics"""

__all__ = ['GeodeticError', 'InvalidParameterError', 'IterationNotConverged']


class GeodeticError(Exception):
    """Base class for all geodetics errors"""


class InvalidParameterError(GeodeticError, ValueError):
    """
    A value object or calculator was given a parameter outside of its valid domain,
    e.g. a negative semi-major axis or a latitude beyond the poles.
    """


class IterationNotConverged(GeodeticError, ArithmeticError):
    """
    An iterative Vincenty solution failed to settle within the permitted number of
    iterations. Typically caused by nearly antipodal points.
    """

    def __init__(self, message: str, iterations: int, tolerance: float):
        super().__init__(message)
        self.iterations = iterations
        self.tolerance = tolerance

"""
Vincenty's direct and inverse solutions of the geodetic problem on an ellipsoid.

References:
    T. Vincenty, "Direct and Inverse Solutions of Geodesics on the Ellipsoid with
    Application of Nested Equations", Survey Review XXIII, No. 176 (1975).
    Equation numbers below refer to that paper.
"""

__all__ = ['GeodeticCalculator']

import math
from typing import List, Tuple

import numpy as np

from geodetics._const import CONVERGENCE_TOLERANCE, MAX_ITERATIONS, SLANT_WARNING_RATIO
from geodetics.angle import Angle
from geodetics.coordinates import GlobalCoordinates, GlobalPosition
from geodetics.curves import GeodeticCurve, GeodeticMeasurement
from geodetics.ellipsoid import Ellipsoid
from geodetics.exceptions import InvalidParameterError, IterationNotConverged
from geodetics.utils.mixins import LoggingMixin


def _series_coefficients(u_sq: float) -> Tuple[float, float]:
    """Vincenty's A and B series coefficients (eqs. 3 and 4)"""
    A = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    B = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
    return A, B


def _delta_sigma(B: float, sin_sigma: float, cos_sigma: float, cos_2sigma_m: float) -> float:
    """eq. 6"""
    return B * sin_sigma * (
        cos_2sigma_m + B / 4 * (
            cos_sigma * (-1 + 2 * cos_2sigma_m ** 2) -
            B / 6 * cos_2sigma_m * (-3 + 4 * sin_sigma ** 2) * (-3 + 4 * cos_2sigma_m ** 2)
        )
    )


class GeodeticCalculator(LoggingMixin):
    """
    Solves the direct and inverse geodetic problems using Vincenty's formulae.

    The calculator holds no state beyond its convergence settings, so a single
    instance may be shared freely (including across threads).

    Args:
        tolerance:
            (Default 1e-12) The change, in radians, between successive iterations
            below which a solution is considered converged

        max_iterations:
            (Default 200) The number of iterations after which an unconverged
            solution raises IterationNotConverged
    """

    def __init__(
        self,
        tolerance: float = CONVERGENCE_TOLERANCE,
        max_iterations: int = MAX_ITERATIONS,
    ):
        super().__init__()
        if not tolerance > 0:
            raise InvalidParameterError(f'Tolerance must be positive, not {tolerance}')
        if not isinstance(max_iterations, int) or max_iterations < 1:
            raise InvalidParameterError(
                f'Max iterations must be a positive integer, not {max_iterations}'
            )

        self.tolerance = float(tolerance)
        self.max_iterations = max_iterations

    def __repr__(self):
        return (
            f'<GeodeticCalculator(tolerance={self.tolerance}, '
            f'max_iterations={self.max_iterations})>'
        )

    def _not_converged(self, problem: str) -> IterationNotConverged:
        msg = (
            f'Vincenty {problem} solution did not converge to within {self.tolerance} '
            f'after {self.max_iterations} iterations'
        )
        self.logger.warning(msg)
        return IterationNotConverged(msg, self.max_iterations, self.tolerance)

    def calculate_ending_global_coordinates(
        self,
        ellipsoid: Ellipsoid,
        start: GlobalCoordinates,
        start_bearing: Angle,
        distance_meters: float,
    ) -> Tuple[GlobalCoordinates, Angle]:
        """
        Solves the direct problem: travel from a start point along an initial bearing
        for a given distance, and find where you end up.

        Args:
            ellipsoid:
                The reference ellipsoid

            start:
                The starting coordinates

            start_bearing:
                The initial bearing, clockwise from north

            distance_meters:
                The ellipsoidal distance to travel, in meters. Must be non-negative.

        Returns:
            The destination coordinates and the bearing of travel on arrival
        """
        distance = float(distance_meters)
        if not distance >= 0:
            raise InvalidParameterError(f'Distance must be non-negative, not {distance_meters}')

        if distance == 0:
            return start, start_bearing

        b = ellipsoid.semi_minor_axis_meters
        f = ellipsoid.flattening

        alpha1 = start_bearing.radians
        sin_alpha1, cos_alpha1 = math.sin(alpha1), math.cos(alpha1)

        # Reduced latitude
        tan_u1 = (1 - f) * math.tan(start.latitude.radians)
        cos_u1 = 1 / math.sqrt(1 + tan_u1 ** 2)
        sin_u1 = tan_u1 * cos_u1

        # eq. 1
        sigma1 = math.atan2(tan_u1, cos_alpha1)

        # eq. 2
        sin_alpha = cos_u1 * sin_alpha1
        cos_sq_alpha = 1 - sin_alpha ** 2
        u_sq = cos_sq_alpha * ellipsoid.second_eccentricity_squared
        A, B = _series_coefficients(u_sq)

        # eqs. 5, 6, 7
        s_over_ba = distance / (b * A)
        sigma = s_over_ba
        for iteration in range(1, self.max_iterations + 1):
            cos_2sigma_m = math.cos(2 * sigma1 + sigma)
            sigma_prev = sigma
            sigma = s_over_ba + _delta_sigma(B, math.sin(sigma), math.cos(sigma), cos_2sigma_m)
            if abs(sigma - sigma_prev) < self.tolerance:
                break
        else:
            raise self._not_converged('direct')

        self.logger.debug('Direct solution converged after %s iterations', iteration)

        sin_sigma, cos_sigma = math.sin(sigma), math.cos(sigma)
        cos_2sigma_m = math.cos(2 * sigma1 + sigma)

        # eq. 8
        tmp = sin_u1 * sin_sigma - cos_u1 * cos_sigma * cos_alpha1
        lat2 = math.atan2(
            sin_u1 * cos_sigma + cos_u1 * sin_sigma * cos_alpha1,
            (1 - f) * math.sqrt(sin_alpha ** 2 + tmp ** 2)
        )

        # eq. 9
        lambda_ = math.atan2(
            sin_sigma * sin_alpha1,
            cos_u1 * cos_sigma - sin_u1 * sin_sigma * cos_alpha1
        )

        # eqs. 10, 11
        C = f / 16 * cos_sq_alpha * (4 + f * (4 - 3 * cos_sq_alpha))
        L = lambda_ - (1 - C) * f * sin_alpha * (
            sigma + C * sin_sigma * (cos_2sigma_m + C * cos_sigma * (-1 + 2 * cos_2sigma_m ** 2))
        )

        # eq. 12
        alpha2 = math.atan2(sin_alpha, -tmp)

        destination = GlobalCoordinates(
            Angle.from_radians(lat2),
            Angle.from_radians(start.longitude.radians + L)
        )
        return destination, Angle.from_radians(alpha2)

    def calculate_geodetic_curve(
        self,
        ellipsoid: Ellipsoid,
        start: GlobalCoordinates,
        end: GlobalCoordinates,
    ) -> GeodeticCurve:
        """
        Solves the inverse problem: find the ellipsoidal distance between two points,
        and the azimuths of the geodesic at either end.

        Nearly antipodal points may fail to converge, in which case
        IterationNotConverged is raised; no approximate answer is substituted.

        Args:
            ellipsoid:
                The reference ellipsoid

            start:
                The starting coordinates

            end:
                The ending coordinates

        Returns:
            GeodeticCurve
        """
        if start == end:
            return GeodeticCurve(0., Angle.ZERO, Angle.ZERO)

        b = ellipsoid.semi_minor_axis_meters
        f = ellipsoid.flattening

        # Difference in longitude, on (-pi, pi]
        L = (end.longitude - start.longitude).radians

        # Reduced latitudes
        U1 = math.atan((1 - f) * math.tan(start.latitude.radians))
        U2 = math.atan((1 - f) * math.tan(end.latitude.radians))
        sin_u1, cos_u1 = math.sin(U1), math.cos(U1)
        sin_u2, cos_u2 = math.sin(U2), math.cos(U2)

        lambda_ = L
        for iteration in range(1, self.max_iterations + 1):
            sin_lambda, cos_lambda = math.sin(lambda_), math.cos(lambda_)

            # eq. 14
            sin_sigma = math.sqrt(
                (cos_u2 * sin_lambda) ** 2 +
                (cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lambda) ** 2
            )
            if sin_sigma == 0:
                # Distinct coordinates describing the same point, e.g. at a pole
                return GeodeticCurve(0., Angle.ZERO, Angle.ZERO)

            # eq. 15
            cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lambda

            # eq. 16
            sigma = math.atan2(sin_sigma, cos_sigma)

            # eq. 17
            sin_alpha = cos_u1 * cos_u2 * sin_lambda / sin_sigma
            cos_sq_alpha = 1 - sin_alpha ** 2

            # eq. 18; both points on the equator when cos_sq_alpha is 0
            if cos_sq_alpha != 0:
                cos_2sigma_m = cos_sigma - 2 * sin_u1 * sin_u2 / cos_sq_alpha
            else:
                cos_2sigma_m = 0.

            # eq. 10
            C = f / 16 * cos_sq_alpha * (4 + f * (4 - 3 * cos_sq_alpha))

            # eq. 11
            lambda_prev = lambda_
            lambda_ = L + (1 - C) * f * sin_alpha * (
                sigma + C * sin_sigma * (
                    cos_2sigma_m + C * cos_sigma * (-1 + 2 * cos_2sigma_m ** 2)
                )
            )

            if abs(lambda_ - lambda_prev) < self.tolerance:
                break
        else:
            raise self._not_converged('inverse')

        self.logger.debug('Inverse solution converged after %s iterations', iteration)

        # eqs. 3, 4, 6, 19
        A, B = _series_coefficients(cos_sq_alpha * ellipsoid.second_eccentricity_squared)
        distance = b * A * (sigma - _delta_sigma(B, sin_sigma, cos_sigma, cos_2sigma_m))

        # eq. 20
        sin_lambda, cos_lambda = math.sin(lambda_), math.cos(lambda_)
        alpha1 = math.atan2(
            cos_u2 * sin_lambda,
            cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lambda
        )

        # eq. 21, turned around to face the start point
        alpha2 = math.atan2(
            cos_u1 * sin_lambda,
            -sin_u1 * cos_u2 + cos_u1 * sin_u2 * cos_lambda
        )

        return GeodeticCurve(
            distance,
            Angle.from_radians(alpha1),
            Angle.from_radians(alpha2 + math.pi),
        )

    def calculate_geodetic_measurement(
        self,
        ellipsoid: Ellipsoid,
        start: GlobalPosition,
        end: GlobalPosition,
    ) -> GeodeticMeasurement:
        """
        Solves the inverse problem between two positions with elevations. The surface
        geodesic is computed exactly as calculate_geodetic_curve does; the elevation
        change is then folded in as the second leg of a right triangle.

        Args:
            ellipsoid:
                The reference ellipsoid

            start:
                The starting position

            end:
                The ending position

        Returns:
            GeodeticMeasurement
        """
        curve = self.calculate_geodetic_curve(ellipsoid, start.coordinates, end.coordinates)
        elevation_change = end.elevation_meters - start.elevation_meters

        distance = curve.ellipsoidal_distance_meters
        if distance > 0 and abs(elevation_change) > SLANT_WARNING_RATIO * distance:
            self.warn_once(
                'Elevation change is large relative to the surface distance; '
                'point-to-point distances are a flat-triangle approximation and may be '
                'inaccurate. (this warning will not repeat)'
            )

        return GeodeticMeasurement(curve, elevation_change)

    def calculate_geodetic_path(
        self,
        ellipsoid: Ellipsoid,
        start: GlobalCoordinates,
        end: GlobalCoordinates,
        num_points: int,
    ) -> List[GlobalCoordinates]:
        """
        Samples points along the geodesic between two coordinates, evenly spaced by
        ellipsoidal distance. The first and last points are exactly `start` and `end`.

        Args:
            ellipsoid:
                The reference ellipsoid

            start:
                The starting coordinates

            end:
                The ending coordinates

            num_points:
                The number of points to return, including both endpoints. Must be at
                least 2.

        Returns:
            List[GlobalCoordinates]
        """
        if not isinstance(num_points, int) or num_points < 2:
            raise InvalidParameterError(
                f'A geodetic path requires at least 2 points, not {num_points}'
            )

        curve = self.calculate_geodetic_curve(ellipsoid, start, end)
        if curve.ellipsoidal_distance_meters == 0:
            return [start] * num_points

        path = [start]
        for distance in np.linspace(0., curve.ellipsoidal_distance_meters, num_points)[1:-1]:
            point, _ = self.calculate_ending_global_coordinates(
                ellipsoid, start, curve.azimuth, float(distance)
            )
            path.append(point)

        path.append(end)
        return path

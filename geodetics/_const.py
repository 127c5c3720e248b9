"""
Constants declarations for geodetics
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_B = (1 - WGS84_F) * WGS84_A

# Other reference ellipsoids, as (major axis (meters), inverse flattening)
GRS80_PARAMS = (6378137.0, 298.257222101)
GRS67_PARAMS = (6378160.0, 298.25)
ANS_PARAMS = (6378160.0, 298.25)  # Australian National Spheroid
WGS72_PARAMS = (6378135.0, 298.26)
CLARKE1858_PARAMS = (6378293.645, 294.26)
CLARKE1880_PARAMS = (6378249.145, 293.465)

# Mean Earth Radius, used for the spherical "ellipsoid"
EARTH_RADIUS_METERS = 6_371_000.0

# Vincenty iteration controls
CONVERGENCE_TOLERANCE = 1e-12  # radians
MAX_ITERATIONS = 200

# Elevation change / surface distance ratio beyond which the slant distance
# approximation gets a warning
SLANT_WARNING_RATIO = 0.1

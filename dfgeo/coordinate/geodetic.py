# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Oblate-spheroid Earth model used by the measurement engine"""

import numpy as np

from ..core.constants import (
    EARTH_ECCENTRICITY_SQUARED,
    EARTH_RADIUS,
    ECEF2LLA_MAX_ITER,
    ECEF2LLA_TOL,
)
from ..core.data_structures import EcefPosition, GeodeticPosition, require_record


def transverse_radius(latitude: float) -> float:
    """
    Transverse (prime vertical) radius of curvature

    Parameters
    ----------
    latitude : float
        Geodetic latitude (rad)

    Returns
    -------
    float
        N = R / sqrt(1 - e^2 sin^2(lat)) in meters
    """
    sin_lat = np.sin(latitude)
    return EARTH_RADIUS / np.sqrt(1.0 - EARTH_ECCENTRICITY_SQUARED * sin_lat * sin_lat)


def transverse_radius_derivative(latitude: float) -> float:
    """
    Derivative of the transverse radius with respect to latitude (m/rad)

    Only enters the geodetic Jacobian when altitude is not held constant.
    """
    sin_lat = np.sin(latitude)
    cos_lat = np.cos(latitude)
    num = EARTH_ECCENTRICITY_SQUARED * sin_lat * cos_lat * transverse_radius(latitude)
    den = 1.0 - EARTH_ECCENTRICITY_SQUARED * sin_lat**2
    return num / den


def lla2ecef(position: GeodeticPosition) -> EcefPosition:
    """Convert geodetic coordinates to ECEF coordinates

    Parameters
    ----------
    position : GeodeticPosition
        Longitude, latitude (rad) and altitude (m)

    Returns
    -------
    EcefPosition
        ECEF coordinates in meters

    Examples
    --------
    >>> ecef = lla2ecef(GeodeticPosition(0.0, 0.0, 0.0))
    >>> ecef.x == EARTH_RADIUS
    True
    """
    require_record(position, "position", GeodeticPosition)
    lon, lat, h = position.longitude, position.latitude, position.altitude

    N = transverse_radius(lat)
    x = (N + h) * np.cos(lon) * np.cos(lat)
    y = (N + h) * np.sin(lon) * np.cos(lat)
    z = (N * (1.0 - EARTH_ECCENTRICITY_SQUARED) + h) * np.sin(lat)

    return EcefPosition(float(x), float(y), float(z))


def ecef2lla(position: EcefPosition) -> GeodeticPosition:
    """Convert ECEF coordinates to geodetic coordinates

    Iterates on latitude until the update falls below ``ECEF2LLA_TOL``.
    Height is taken along the ellipsoid normal, which stays well defined
    at the poles.

    Parameters
    ----------
    position : EcefPosition
        ECEF coordinates in meters

    Returns
    -------
    GeodeticPosition
        Longitude in (-π, π], latitude in [-π/2, π/2] and altitude in meters
    """
    require_record(position, "position", EcefPosition)
    x, y, z = position.x, position.y, position.z

    lon = np.arctan2(y, x)
    p = np.hypot(x, y)
    lat = np.arctan2(z, p * (1.0 - EARTH_ECCENTRICITY_SQUARED))

    for _ in range(ECEF2LLA_MAX_ITER):
        N = transverse_radius(lat)
        h = p * np.cos(lat) + z * np.sin(lat) - EARTH_RADIUS**2 / N
        lat_next = np.arctan2(z, p * (1.0 - EARTH_ECCENTRICITY_SQUARED * N / (N + h)))
        converged = abs(lat_next - lat) < ECEF2LLA_TOL
        lat = lat_next
        if converged:
            break

    N = transverse_radius(lat)
    h = p * np.cos(lat) + z * np.sin(lat) - EARTH_RADIUS**2 / N

    return GeodeticPosition(float(lon), float(lat), float(h))


def geodetic_jacobian(position: GeodeticPosition, constant_altitude: bool = True) -> np.ndarray:
    """
    Partial derivatives of ECEF position with respect to longitude, latitude
    and altitude

    Parameters
    ----------
    position : GeodeticPosition
        Point at which the derivatives are evaluated
    constant_altitude : bool
        If True, altitude is treated as known: the altitude column is zero
        and the transverse radius is held fixed when differentiating by
        latitude. If False, the full Jacobian is returned.

    Returns
    -------
    J : np.ndarray
        3x3 matrix, columns [dr/dlon, dr/dlat, dr/dalt]
    """
    require_record(position, "position", GeodeticPosition)
    lon, lat, h = position.longitude, position.latitude, position.altitude

    sin_lon, cos_lon = np.sin(lon), np.cos(lon)
    sin_lat, cos_lat = np.sin(lat), np.cos(lat)
    N = transverse_radius(lat)

    d_lon = np.array([
        -(N + h) * sin_lon * cos_lat,
        (N + h) * cos_lon * cos_lat,
        0.0,
    ])

    d_lat = np.array([
        -(N + h) * cos_lon * sin_lat,
        -(N + h) * sin_lon * sin_lat,
        (N * (1.0 - EARTH_ECCENTRICITY_SQUARED) + h) * cos_lat,
    ])

    if constant_altitude:
        d_alt = np.zeros(3)
    else:
        dN = transverse_radius_derivative(lat)
        d_lat = d_lat + dN * np.array([
            cos_lon * cos_lat,
            sin_lon * cos_lat,
            (1.0 - EARTH_ECCENTRICITY_SQUARED) * sin_lat,
        ])
        d_alt = np.array([cos_lon * cos_lat, sin_lon * cos_lat, sin_lat])

    return np.column_stack((d_lon, d_lat, d_alt))

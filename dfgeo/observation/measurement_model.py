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

"""Line-of-sight geometry and direction-finding angles

Reference:
    Grabbe, M. T., Hamschin, B. M., "Geo-Location Using Direction Finding
    Angles", Johns Hopkins APL Technical Digest 31(3), 2013
"""

import numpy as np

from ..coordinate.geodetic import lla2ecef
from ..coordinate.rotation import antenna_from_ecef_chain
from ..core.data_structures import (
    AntennaMounting,
    BodyAttitude,
    EcefPosition,
    GeodeticPosition,
    LineOfSight,
    require_record,
)
from ..logger import get_logger

logger = get_logger(__name__)


def relative_position(origin: EcefPosition, target: GeodeticPosition) -> EcefPosition:
    """
    Target position relative to the platform, in ECEF

    Parameters:
    -----------
    origin : EcefPosition
        Platform ECEF position (m)
    target : GeodeticPosition
        Candidate target position

    Returns:
    --------
    relative : EcefPosition
        Target minus platform (m)
    """
    require_record(origin, "origin", EcefPosition)
    require_record(target, "target", GeodeticPosition)
    return lla2ecef(target) - origin


def project_to_antenna(origin_pos: GeodeticPosition,
                       origin_body: BodyAttitude,
                       origin_antenna: AntennaMounting,
                       relative: EcefPosition) -> np.ndarray:
    """
    Express the relative position vector in antenna-array coordinates

    Returns:
    --------
    r_a : np.ndarray
        Relative position in the antenna frame (m), shape (3,). Its norm
        is the platform-to-target range.
    """
    require_record(relative, "relative", EcefPosition)
    C_e_a = antenna_from_ecef_chain(origin_pos, origin_body, origin_antenna)
    return C_e_a @ relative.to_array()


def line_of_sight(origin_pos: GeodeticPosition,
                  origin_body: BodyAttitude,
                  origin_antenna: AntennaMounting,
                  relative: EcefPosition) -> LineOfSight:
    """
    Unit line-of-sight vector from platform to target in the antenna frame

    Parameters:
    -----------
    origin_pos : GeodeticPosition
        Platform position, defines the local-level frame
    origin_body : BodyAttitude
        Platform attitude
    origin_antenna : AntennaMounting
        Antenna mounting angles
    relative : EcefPosition
        Target minus platform in ECEF (m)

    Returns:
    --------
    los : LineOfSight
        Direction cosines (alpha, beta, gamma); alpha is the boresight axis.
        A zero relative vector yields NaN components.
    """
    r_a = project_to_antenna(origin_pos, origin_body, origin_antenna, relative)
    los, _ = normalize_antenna_vector(r_a)
    return los


def normalize_antenna_vector(r_a: np.ndarray) -> tuple[LineOfSight, float]:
    """
    Split an antenna-frame relative vector into direction and range

    Returns:
    --------
    (los, magnitude) : tuple of LineOfSight and float
        Unit line of sight and range (m). A zero vector yields NaN components.
    """
    magnitude = float(np.linalg.norm(r_a))

    with np.errstate(divide='ignore', invalid='ignore'):
        los = LineOfSight.from_array(r_a / magnitude)

    logger.debug("Range %.3f m, LOS (%.6f, %.6f, %.6f)", magnitude, los.alpha, los.beta, los.gamma)
    return los, magnitude


def azimuth(los: LineOfSight) -> float:
    """
    Azimuth of the line of sight, atan(beta / alpha) (rad)

    Undefined for alpha == 0; the IEEE-754 result is returned unchanged
    (±π/2 for beta != 0, NaN for beta == 0).
    """
    require_record(los, "los", LineOfSight)
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.arctan(np.divide(los.beta, los.alpha)))


def elevation(los: LineOfSight) -> float:
    """Elevation of the line of sight, atan(-gamma / sqrt(alpha^2 + beta^2)) (rad)"""
    require_record(los, "los", LineOfSight)
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.arctan(np.divide(-los.gamma, np.hypot(los.alpha, los.beta))))


def aoa(los: LineOfSight) -> float:
    """
    Angle of arrival, the angle between the line of sight and boresight,
    atan(sqrt(beta^2 + gamma^2) / alpha) (rad)

    Not guarded for alpha == 0.
    """
    require_record(los, "los", LineOfSight)
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.arctan(np.divide(np.hypot(los.beta, los.gamma), los.alpha)))


def angles(los: LineOfSight) -> tuple[float, float, float]:
    """
    All three DF angles for one line of sight

    Returns:
    --------
    (azimuth, elevation, aoa) : tuple of float
        Angles in radians
    """
    return azimuth(los), elevation(los), aoa(los)

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

"""Rotation chain between the ECEF, NED, body and antenna-array frames

Matrix names follow Groves: ``C_a_b`` takes a column vector expressed in
frame ``a`` to frame ``b``, so ``ecef_from_ned`` returns ``C_n_e``.
Chains compose right-to-left, ``C_a_e = C_n_e @ C_b_n @ C_a_b``, and every
reverse transform is the transpose of its forward matrix.

Frames:
    e : Earth-Centered-Earth-Fixed
    n : local-level North-East-Down
    b : aircraft body (yaw, pitch, roll)
    a : antenna array (mounting angles alpha, beta, gamma)
"""

import numpy as np

from ..attitude.euler import rot_y, rot_z, ypr2dcm
from ..core.constants import DCM_SHAPE, HALF_PI
from ..core.data_structures import (
    AntennaMounting,
    BodyAttitude,
    EcefPosition,
    GeodeticPosition,
    NedPosition,
    require_record,
)
from ..logger import get_logger

logger = get_logger(__name__)


def _as_dcm(matrix, name: str = "matrix") -> np.ndarray:
    """Validate a 3x3 matrix argument and return it as a float64 array

    Raises
    ------
    ValueError
        If ``matrix`` is None, not two-dimensional, or not exactly 3x3
    """
    if matrix is None:
        raise ValueError(f"{name} is either None or incorrect size")

    if isinstance(matrix, np.ndarray):
        if matrix.shape != DCM_SHAPE:
            raise ValueError(f"{name} must be 3x3, got shape {matrix.shape}")
        return matrix.astype(np.float64, copy=False)

    try:
        rows = list(matrix)
    except TypeError:
        raise ValueError(f"{name} must be a 3x3 matrix") from None

    if len(rows) != 3:
        raise ValueError(f"{name} must have 3 rows, got {len(rows)}")
    for row in rows:
        if np.ndim(row) != 1 or len(row) != 3:
            raise ValueError(f"{name} rows must have exactly 3 columns")

    return np.array(rows, dtype=np.float64)


def compose(first, second) -> np.ndarray:
    """
    Product of two frame transforms, ``first @ second``

    Parameters:
    -----------
    first : array_like
        Outer transform (3x3), applied last
    second : array_like
        Inner transform (3x3), applied first

    Returns:
    --------
    C : np.ndarray
        Composed transform (3x3)

    Raises:
    -------
    ValueError
        If either operand is None or not 3x3
    """
    return _as_dcm(first, "first") @ _as_dcm(second, "second")


def transpose(matrix) -> np.ndarray:
    """
    Reverse a frame transform

    Rotation matrices are orthonormal, so the transpose is the inverse.

    Raises:
    -------
    ValueError
        If ``matrix`` is None or not 3x3
    """
    return _as_dcm(matrix).T.copy()


def ecef_from_ned(longitude: float, latitude: float) -> np.ndarray:
    """
    North-East-Down to Earth-Centered-Earth-Fixed transform

    Parameters:
    -----------
    longitude : float
        Geodetic longitude of the local-level origin (rad)
    latitude : float
        Geodetic latitude of the local-level origin (rad)

    Returns:
    --------
    C_n_e : np.ndarray
        NED->ECEF direction cosine matrix (3x3)
    """
    # Down points against the ellipsoid normal
    lat = -latitude - HALF_PI
    return rot_z(longitude) @ rot_y(lat)


def ned_from_body(yaw: float, pitch: float, roll: float) -> np.ndarray:
    """
    Aircraft body to North-East-Down transform (3-2-1 sequence)

    Returns:
    --------
    C_b_n : np.ndarray
        Body->NED direction cosine matrix (3x3)
    """
    return ypr2dcm(yaw, pitch, roll)


def body_from_antenna(alpha: float, beta: float, gamma: float) -> np.ndarray:
    """
    Antenna array to aircraft body transform

    The mounting angles follow the same 3-2-1 sequence as the body attitude,
    with alpha, beta and gamma in place of yaw, pitch and roll.

    Returns:
    --------
    C_a_b : np.ndarray
        Antenna->body direction cosine matrix (3x3)
    """
    return ypr2dcm(alpha, beta, gamma)


def ecef_from_body(C_n_e, C_b_n) -> np.ndarray:
    """Body->ECEF from NED->ECEF and body->NED"""
    return compose(C_n_e, C_b_n)


def ecef_from_antenna(C_b_e, C_a_b) -> np.ndarray:
    """Antenna->ECEF from body->ECEF and antenna->body"""
    return compose(C_b_e, C_a_b)


def ned_from_antenna(C_b_n, C_a_b) -> np.ndarray:
    """Antenna->NED from body->NED and antenna->body"""
    return compose(C_b_n, C_a_b)


def ned_from_ecef(C_n_e) -> np.ndarray:
    """ECEF->NED, the transpose of NED->ECEF"""
    return transpose(C_n_e)


def body_from_ned(C_b_n) -> np.ndarray:
    """NED->body, the transpose of body->NED"""
    return transpose(C_b_n)


def body_from_ecef(C_b_e) -> np.ndarray:
    """ECEF->body, the transpose of body->ECEF"""
    return transpose(C_b_e)


def antenna_from_ecef(C_a_e) -> np.ndarray:
    """ECEF->antenna, the transpose of antenna->ECEF"""
    return transpose(C_a_e)


def antenna_from_ned(C_a_n) -> np.ndarray:
    """NED->antenna, the transpose of antenna->NED"""
    return transpose(C_a_n)


def antenna_from_body(C_a_b) -> np.ndarray:
    """Body->antenna, the transpose of antenna->body"""
    return transpose(C_a_b)


def antenna_from_ecef_chain(origin_pos: GeodeticPosition,
                            origin_body: BodyAttitude,
                            origin_antenna: AntennaMounting) -> np.ndarray:
    """
    Full ECEF->antenna transform for a platform

    Parameters:
    -----------
    origin_pos : GeodeticPosition
        Platform position, defines the local-level frame
    origin_body : BodyAttitude
        Platform yaw, pitch and roll relative to NED
    origin_antenna : AntennaMounting
        Antenna mounting angles relative to the body frame

    Returns:
    --------
    C_e_a : np.ndarray
        ECEF->antenna direction cosine matrix (3x3)

    Raises:
    -------
    TypeError
        If any record is missing
    """
    require_record(origin_pos, "origin_pos", GeodeticPosition)
    require_record(origin_body, "origin_body", BodyAttitude)
    require_record(origin_antenna, "origin_antenna", AntennaMounting)

    C_a_b = body_from_antenna(origin_antenna.alpha, origin_antenna.beta, origin_antenna.gamma)
    C_n_e = ecef_from_ned(origin_pos.longitude, origin_pos.latitude)
    C_b_n = ned_from_body(origin_body.yaw, origin_body.pitch, origin_body.roll)
    C_b_e = ecef_from_body(C_n_e, C_b_n)
    C_a_e = ecef_from_antenna(C_b_e, C_a_b)
    C_e_a = antenna_from_ecef(C_a_e)

    logger.trace("ECEF->antenna DCM:\n%s", C_e_a)
    return C_e_a


def ecef2ned(relative: EcefPosition, origin_pos: GeodeticPosition) -> NedPosition:
    """
    Express an ECEF offset in the local-level frame of a geodetic origin

    Parameters:
    -----------
    relative : EcefPosition
        Offset vector in ECEF (m), e.g. target minus platform
    origin_pos : GeodeticPosition
        Origin of the local-level frame

    Returns:
    --------
    ned : NedPosition
        Offset in north, east, down (m)
    """
    require_record(relative, "relative", EcefPosition)
    require_record(origin_pos, "origin_pos", GeodeticPosition)

    C_e_n = ned_from_ecef(ecef_from_ned(origin_pos.longitude, origin_pos.latitude))
    return NedPosition.from_array(C_e_n @ relative.to_array())

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

"""
Elemental rotations and yaw-pitch-roll composition.

All rotations are right-handed: a positive angle turns counter-clockwise when
looking from the positive axis toward the origin. The matrices rotate column
vectors from the rotated frame into the reference frame, so a 3-2-1 sequence
composes as ``rot_z(yaw) @ rot_y(pitch) @ rot_x(roll)``.

No unit conversion is done here; every angle is in radians.

References:
    Grabbe, M. T., Hamschin, B. M., "Geo-Location Using Direction Finding
    Angles", Johns Hopkins APL Technical Digest 31(3), 2013
"""

import numpy as np
from numba import njit


@njit(cache=True, fastmath=True)
def rot_x(phi):
    """
    Rotation about the x-axis.

    Parameters
    ----------
    phi : float
        Rotation angle in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
        Direction cosine matrix for x-axis rotation
    """
    sinP = np.sin(phi)
    cosP = np.cos(phi)
    R = np.array([[1.0,  0.0,   0.0],
                  [0.0, cosP, -sinP],
                  [0.0, sinP,  cosP]],
                 dtype=np.double)
    return R


@njit(cache=True, fastmath=True)
def rot_y(theta):
    """
    Rotation about the y-axis.

    Parameters
    ----------
    theta : float
        Rotation angle in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
        Direction cosine matrix for y-axis rotation
    """
    sinT = np.sin(theta)
    cosT = np.cos(theta)
    R = np.array([[ cosT, 0.0, sinT],
                  [  0.0, 1.0,  0.0],
                  [-sinT, 0.0, cosT]],
                 dtype=np.double)
    return R


@njit(cache=True, fastmath=True)
def rot_z(psi):
    """
    Rotation about the z-axis.

    Parameters
    ----------
    psi : float
        Rotation angle in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
        Direction cosine matrix for z-axis rotation
    """
    sinS = np.sin(psi)
    cosS = np.cos(psi)
    R = np.array([[cosS, -sinS, 0.0],
                  [sinS,  cosS, 0.0],
                  [ 0.0,   0.0, 1.0]],
                 dtype=np.double)
    return R


@njit(cache=True, fastmath=True)
def ypr2dcm(yaw, pitch, roll):
    """
    Yaw-pitch-roll (3-2-1) Euler angles to direction cosine matrix.

    Closed form of ``rot_z(yaw) @ rot_y(pitch) @ rot_x(roll)``. The result
    takes vectors from the rotated frame into the reference frame.

    Parameters
    ----------
    yaw : float
        Rotation about z (rad)
    pitch : float
        Rotation about the once-rotated y (rad)
    roll : float
        Rotation about the twice-rotated x (rad)

    Returns
    -------
    C : ndarray, shape (3, 3)
        Direction cosine matrix
    """
    sinS = np.sin(yaw)
    cosS = np.cos(yaw)
    sinT = np.sin(pitch)
    cosT = np.cos(pitch)
    sinP = np.sin(roll)
    cosP = np.cos(roll)
    C = np.array([[cosS*cosT, cosS*sinT*sinP - sinS*cosP, cosS*sinT*cosP + sinS*sinP],
                  [sinS*cosT, sinS*sinT*sinP + cosS*cosP, sinS*sinT*cosP - cosS*sinP],
                  [    -sinT,                  cosT*sinP,                  cosT*cosP]],
                 dtype=np.double)
    return C

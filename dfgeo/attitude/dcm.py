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
Attitude recovery from direction cosine matrices.

Inverse of :func:`dfgeo.attitude.euler.ypr2dcm`: given a DCM built with the
3-2-1 sequence, recover yaw, pitch and roll. Useful for reading the combined
body-to-antenna or NED-to-antenna attitude back out of a composed chain.
"""

import numpy as np
from scipy.spatial.transform import Rotation


def dcm2ypr(C) -> np.ndarray:
    """
    Convert a 3-2-1 DCM into yaw, pitch and roll.

    Parameters
    ----------
    C : array_like, shape (3, 3)
        Orthonormal direction cosine matrix, ``rot_z(yaw) @ rot_y(pitch) @ rot_x(roll)``

    Returns
    -------
    e : ndarray, shape (3,)
        Euler angles [yaw, pitch, roll] in radians. Yaw and roll lie in
        (-π, π], pitch in [-π/2, π/2].

    Notes
    -----
    Near pitch = ±π/2 the sequence is in gimbal lock and only the sum or
    difference of yaw and roll is observable; scipy then sets roll to zero
    and emits a warning.
    """
    # Intrinsic Z-Y'-X'' in scipy is exactly Rz @ Ry @ Rx
    return Rotation.from_matrix(np.asarray(C, dtype=np.float64)).as_euler('ZYX')

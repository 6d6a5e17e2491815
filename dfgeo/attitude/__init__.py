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
Attitude module for elemental rotations and Euler composition.

- Elemental rotations about x, y and z (Numba compiled)
- Yaw-pitch-roll (3-2-1) composition into a DCM and back

All rotations assume right-hand coordinate frames, radians, and DCMs that
rotate column vectors from the rotated frame into the reference frame.
"""

from .dcm import dcm2ypr
from .euler import rot_x, rot_y, rot_z, ypr2dcm

__all__ = [
    'rot_x', 'rot_y', 'rot_z',
    'ypr2dcm', 'dcm2ypr',
]

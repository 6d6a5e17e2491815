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

"""Coordinate frames and the Earth model

This module provides:
- The rotation chain ECEF <-> NED <-> body <-> antenna array
- Geodetic <-> ECEF conversion on the oblate-spheroid Earth model
- The geodetic Jacobian used by the measurement matrices

For the elemental rotations and Euler composition, use dfgeo.attitude.
"""

from .geodetic import (
    ecef2lla,
    geodetic_jacobian,
    lla2ecef,
    transverse_radius,
    transverse_radius_derivative,
)
from .rotation import (
    antenna_from_body,
    antenna_from_ecef,
    antenna_from_ecef_chain,
    antenna_from_ned,
    body_from_antenna,
    body_from_ecef,
    body_from_ned,
    compose,
    ecef2ned,
    ecef_from_antenna,
    ecef_from_body,
    ecef_from_ned,
    ned_from_antenna,
    ned_from_body,
    ned_from_ecef,
    transpose,
)

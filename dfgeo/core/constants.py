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

"""Earth model and numerical constants for DF geolocation"""

import numpy as np

# Earth model (Grabbe, "Geo-Location Using Direction Finding Angles")
EARTH_ECCENTRICITY = 0.01671                              # first eccentricity
EARTH_ECCENTRICITY_SQUARED = EARTH_ECCENTRICITY * EARTH_ECCENTRICITY
EARTH_RADIUS = 6.371e6                                   # mean Earth radius (m)

# Frame conversion
PI = np.pi
HALF_PI = np.pi / 2.0
D2R = np.pi / 180.0   # degrees to radians
R2D = 180.0 / np.pi   # radians to degrees

# Geodetic inversion
ECEF2LLA_MAX_ITER = 10      # iterations for ecef2lla
ECEF2LLA_TOL = 1e-12        # latitude convergence threshold (rad)

# Matrix validation
DCM_SHAPE = (3, 3)

__all__ = [
    'EARTH_ECCENTRICITY', 'EARTH_ECCENTRICITY_SQUARED', 'EARTH_RADIUS',
    'PI', 'HALF_PI', 'D2R', 'R2D',
    'ECEF2LLA_MAX_ITER', 'ECEF2LLA_TOL',
    'DCM_SHAPE',
]

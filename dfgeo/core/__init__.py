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

"""Core constants and value records.

- **Constants**: the Earth model used by the measurement engine
  (eccentricity squared, mean radius) and angle conversion factors
- **Data Structures**: immutable records for geodetic, ECEF and NED
  positions, body attitude, antenna mounting and line-of-sight vectors

Example Usage:
    >>> from dfgeo.core import *
    >>>
    >>> origin = GeodeticPosition(longitude=0.0, latitude=0.0, altitude=0.0)
    >>> antenna = AntennaMounting(alpha=0.0, beta=0.1, gamma=0.0)
"""

from .constants import *
from .data_structures import *

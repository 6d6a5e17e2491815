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
dfgeo - Direction-Finding Geolocation Geometry

Frame transformations (ECEF, NED, body, antenna array), line-of-sight
derivation, DF angles (azimuth, elevation, angle of arrival) and the
measurement matrices an estimator needs to relate those angles to the
target's geodetic position.
"""

__version__ = "1.0.0"
__author__ = "dfgeo Development Team"
__title__ = "dfgeo"
__description__ = "Frame transforms and measurement Jacobians for DF geolocation"

from .logger import setup_logger, setup_logger_from_config
from .core import *
from .attitude import *
from .coordinate import *
from .observation import *
from .io import *

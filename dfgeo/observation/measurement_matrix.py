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

"""Measurement matrices for direction-finding angle observations

Each matrix is the row Jacobian of one angle with respect to the target's
geodetic position, built as the chain

    H = dθ/du · du/dr_a · C_e_a · I · dr_e/d(lon, lat, alt)

where u is the unit line of sight in the antenna frame, r_a the relative
position in the antenna frame and r_e the target position in ECEF. The
identity is the frame-selection slot of the chain; the target state is
always geodetic here. Altitude is held constant, so the last entry of
every row is zero.

Reference:
    Grabbe, M. T., Hamschin, B. M., "Geo-Location Using Direction Finding
    Angles", Johns Hopkins APL Technical Digest 31(3), 2013
"""

from enum import Enum
from typing import Sequence

import numpy as np

from ..coordinate.geodetic import geodetic_jacobian
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
from .measurement_model import aoa, azimuth, elevation, normalize_antenna_vector, relative_position

logger = get_logger(__name__)


class MeasurementType(Enum):
    """DF angle observables"""
    AZIMUTH = "azimuth"
    ELEVATION = "elevation"
    AOA = "aoa"


def _azimuth_partial(el: float, az: float, ang: float) -> np.ndarray:
    row = np.array([[-np.sin(az), np.cos(az), 0.0]])
    return row / np.cos(el)


def _elevation_partial(el: float, az: float, ang: float) -> np.ndarray:
    # Second term repeats cos(az); a direct derivation gives sin(az) there
    return np.array([[-np.cos(az) * np.sin(el),
                      -np.cos(az) * np.sin(el),
                      -np.cos(el)]])


def _aoa_partial(el: float, az: float, ang: float) -> np.ndarray:
    row = np.array([[-np.sin(ang)**2,
                     np.sin(az) * np.cos(el) * np.cos(ang),
                     -np.sin(el) * np.cos(ang)]])
    return row / np.sin(ang)


_PARTIALS = {
    MeasurementType.AZIMUTH: _azimuth_partial,
    MeasurementType.ELEVATION: _elevation_partial,
    MeasurementType.AOA: _aoa_partial,
}


def los_projection(los: LineOfSight, magnitude: float) -> np.ndarray:
    """
    Derivative of the unit line of sight with respect to the relative
    position, (I - u u^T) / r

    Parameters:
    -----------
    los : LineOfSight
        Unit line-of-sight vector u
    magnitude : float
        Range r to the target (m)

    Returns:
    --------
    P : np.ndarray
        3x3 projection onto the plane normal to u, scaled by 1/r
    """
    u = los.to_array().reshape(3, 1)
    return (np.eye(3) - u @ u.T) / magnitude


def _check_inputs(origin, origin_pos, origin_body, origin_antenna, target):
    require_record(origin, "origin", EcefPosition)
    require_record(origin_pos, "origin_pos", GeodeticPosition)
    require_record(origin_body, "origin_body", BodyAttitude)
    require_record(origin_antenna, "origin_antenna", AntennaMounting)
    require_record(target, "target", GeodeticPosition)


def _assemble(kind: MeasurementType,
              origin: EcefPosition,
              origin_pos: GeodeticPosition,
              origin_body: BodyAttitude,
              origin_antenna: AntennaMounting,
              target: GeodeticPosition) -> np.ndarray:
    relative = relative_position(origin, target)
    ae = antenna_from_ecef_chain(origin_pos, origin_body, origin_antenna)
    los, magnitude = normalize_antenna_vector(ae @ relative.to_array())
    el, az, ang = elevation(los), azimuth(los), aoa(los)

    with np.errstate(divide='ignore', invalid='ignore'):
        first = _PARTIALS[kind](el, az, ang)

    second = los_projection(los, magnitude)
    fourth = np.eye(3)
    fifth = geodetic_jacobian(target, constant_altitude=True)

    H = first @ second @ ae @ fourth @ fifth

    logger.debug("%s measurement: az=%.6f el=%.6f aoa=%.6f rad, range=%.3f m",
                 kind.value, az, el, ang, magnitude)
    logger.trace("%s measurement matrix: %s", kind.value, H)
    return H


def azimuth_measurement(origin: EcefPosition,
                        origin_pos: GeodeticPosition,
                        origin_body: BodyAttitude,
                        origin_antenna: AntennaMounting,
                        target: GeodeticPosition) -> np.ndarray:
    """
    Measurement matrix for an azimuth observation

    Parameters:
    -----------
    origin : EcefPosition
        Platform ECEF position (m)
    origin_pos : GeodeticPosition
        Platform geodetic position (same point as ``origin``)
    origin_body : BodyAttitude
        Platform attitude
    origin_antenna : AntennaMounting
        Antenna mounting angles
    target : GeodeticPosition
        Candidate target position

    Returns:
    --------
    H : np.ndarray
        d(azimuth)/d(lon, lat, alt) of the target, shape (1, 3)

    Raises:
    -------
    TypeError
        If any record is missing or of the wrong type

    Notes:
    ------
    Azimuth is ``atan(beta / alpha)``, so the row is only valid for targets
    in front of the array (``alpha > 0``). Behind it the angle is off by π
    and the returned row is the negated derivative.
    """
    _check_inputs(origin, origin_pos, origin_body, origin_antenna, target)
    return _assemble(MeasurementType.AZIMUTH, origin, origin_pos, origin_body, origin_antenna, target)


def elevation_measurement(origin: EcefPosition,
                          origin_pos: GeodeticPosition,
                          origin_body: BodyAttitude,
                          origin_antenna: AntennaMounting,
                          target: GeodeticPosition) -> np.ndarray:
    """
    Measurement matrix for an elevation observation, shape (1, 3)

    See :func:`azimuth_measurement` for the arguments.
    """
    _check_inputs(origin, origin_pos, origin_body, origin_antenna, target)
    return _assemble(MeasurementType.ELEVATION, origin, origin_pos, origin_body, origin_antenna, target)


def aoa_measurement(origin: EcefPosition,
                    origin_pos: GeodeticPosition,
                    origin_body: BodyAttitude,
                    origin_antenna: AntennaMounting,
                    target: GeodeticPosition) -> np.ndarray:
    """
    Measurement matrix for an angle-of-arrival observation, shape (1, 3)

    Undefined for a target on boresight (aoa == 0).
    """
    _check_inputs(origin, origin_pos, origin_body, origin_antenna, target)
    return _assemble(MeasurementType.AOA, origin, origin_pos, origin_body, origin_antenna, target)


_MEASUREMENTS = {
    MeasurementType.AZIMUTH: azimuth_measurement,
    MeasurementType.ELEVATION: elevation_measurement,
    MeasurementType.AOA: aoa_measurement,
}


def measurement_matrix(kind, origin, origin_pos, origin_body, origin_antenna, target) -> np.ndarray:
    """
    Measurement matrix for the given observable

    Parameters:
    -----------
    kind : MeasurementType or str
        Observable, e.g. ``MeasurementType.AOA`` or ``"aoa"``

    Raises:
    -------
    ValueError
        If ``kind`` is not a known observable
    """
    kind = MeasurementType(kind)
    return _MEASUREMENTS[kind](origin, origin_pos, origin_body, origin_antenna, target)


def stack_measurements(kinds: Sequence,
                       origin: EcefPosition,
                       origin_pos: GeodeticPosition,
                       origin_body: BodyAttitude,
                       origin_antenna: AntennaMounting,
                       target: GeodeticPosition) -> np.ndarray:
    """
    Stack the rows for several observables into one estimator update matrix

    Returns:
    --------
    H : np.ndarray
        Shape (len(kinds), 3), rows in the order of ``kinds``
    """
    if not kinds:
        return np.zeros((0, 3))
    return np.vstack([
        measurement_matrix(kind, origin, origin_pos, origin_body, origin_antenna, target)
        for kind in kinds
    ])

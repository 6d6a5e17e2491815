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

"""Value records for platform and target geometry.

Every record is an immutable triple of floats. Records are built by the
caller (or returned by the engine) and never mutated afterwards.

Angles are in radians and lengths in meters throughout.
"""

from dataclasses import astuple, dataclass

import numpy as np


class _Triple:
    """Array conversion shared by all three-component records"""

    def to_array(self) -> np.ndarray:
        """Return the record as a float64 array of shape (3,)."""
        return np.array(astuple(self), dtype=np.float64)

    @classmethod
    def from_array(cls, values):
        """Build a record from any length-3 sequence.

        Raises
        ------
        ValueError
            If ``values`` does not hold exactly three elements
        """
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.size != 3:
            raise ValueError(f"{cls.__name__} requires 3 values, got {arr.size}")
        return cls(*(float(v) for v in arr))


@dataclass(frozen=True)
class GeodeticPosition(_Triple):
    """Point on or above the reference ellipsoid.

    Attributes
    ----------
    longitude : float
        Geodetic longitude (rad)
    latitude : float
        Geodetic latitude (rad)
    altitude : float
        Height above the ellipsoid (m)
    """
    longitude: float
    latitude: float
    altitude: float = 0.0


@dataclass(frozen=True)
class EcefPosition(_Triple):
    """Cartesian position in the Earth-Centered-Earth-Fixed frame (m)"""
    x: float
    y: float
    z: float

    def __sub__(self, other: "EcefPosition") -> "EcefPosition":
        if not isinstance(other, EcefPosition):
            return NotImplemented
        return EcefPosition(self.x - other.x, self.y - other.y, self.z - other.z)


@dataclass(frozen=True)
class BodyAttitude(_Triple):
    """Platform orientation relative to the local-level (NED) frame.

    Yaw, pitch and roll (rad) of the 3-2-1 Euler sequence.
    """
    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0


@dataclass(frozen=True)
class AntennaMounting(_Triple):
    """Antenna array mounting angles relative to the body frame (rad).

    ``alpha``, ``beta`` and ``gamma`` play the role of yaw, pitch and roll
    in the body-to-antenna 3-2-1 sequence.
    """
    alpha: float = 0.0
    beta: float = 0.0
    gamma: float = 0.0


@dataclass(frozen=True)
class LineOfSight(_Triple):
    """Unit line-of-sight vector expressed in antenna-array coordinates.

    Shares its field layout with :class:`AntennaMounting` but holds
    dimensionless direction cosines, not angles. ``alpha`` is the
    boresight component.
    """
    alpha: float
    beta: float
    gamma: float

    def norm(self) -> float:
        return float(np.linalg.norm(self.to_array()))


@dataclass(frozen=True)
class NedPosition(_Triple):
    """Position in the local-level North-East-Down frame (m)"""
    north: float
    east: float
    down: float


def require_record(value, name: str, record_type: type):
    """Check that a required record argument is present and of the right type.

    Parameters
    ----------
    value : object
        Argument supplied by the caller
    name : str
        Argument name used in the error message
    record_type : type
        Expected record class

    Returns
    -------
    object
        ``value`` unchanged

    Raises
    ------
    TypeError
        If ``value`` is None or not an instance of ``record_type``
    """
    if value is None:
        raise TypeError(f"{name} is required")
    if not isinstance(value, record_type):
        raise TypeError(
            f"{name} must be {record_type.__name__}, got {type(value).__name__}"
        )
    return value


__all__ = [
    'GeodeticPosition', 'EcefPosition', 'BodyAttitude',
    'AntennaMounting', 'LineOfSight', 'NedPosition',
    'require_record',
]

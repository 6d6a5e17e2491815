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

"""DF geolocation scenario configuration

A scenario bundles one platform state (position, attitude, antenna
mounting) with one candidate target so that angles and measurement
matrices can be evaluated from a YAML or JSON description.

Example YAML::

    angle_units: deg
    origin_lla: {longitude: 139.65, latitude: 35.67, altitude: 3000.0}
    origin_body: {yaw: 45.0, pitch: 2.0, roll: -1.0}
    origin_antenna: {alpha: 90.0, beta: 0.0, gamma: 0.0}
    target: {longitude: 139.80, latitude: 35.70, altitude: 0.0}
    logging:
      default_level: DEBUG
"""

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from ..coordinate.geodetic import lla2ecef
from ..core.constants import D2R
from ..core.data_structures import (
    AntennaMounting,
    BodyAttitude,
    EcefPosition,
    GeodeticPosition,
    LineOfSight,
    require_record,
)
from ..logger import get_logger, setup_logger_from_config
from ..observation.measurement_matrix import measurement_matrix
from ..observation.measurement_model import angles, line_of_sight, relative_position

logger = get_logger(__name__)

ANGLE_UNITS = {'deg': D2R, 'rad': 1.0}

# Record fields that hold angles and follow ``angle_units``
_ANGLE_FIELDS = {'longitude', 'latitude', 'yaw', 'pitch', 'roll', 'alpha', 'beta', 'gamma'}


def _record_from_dict(record_type, data: Optional[dict], scale: float, name: str):
    if data is None:
        raise ValueError(f"Scenario is missing '{name}'")
    values = {}
    for f in fields(record_type):
        if f.name in data:
            value = float(data[f.name])
            values[f.name] = value * scale if f.name in _ANGLE_FIELDS else value
    try:
        return record_type(**values)
    except TypeError as e:
        raise ValueError(f"Invalid '{name}' entry: {e}") from None


def _record_to_dict(record) -> dict:
    return {f.name: getattr(record, f.name) for f in fields(record)}


@dataclass(frozen=True)
class Scenario:
    """
    Platform state and candidate target for one DF evaluation.

    Attributes:
        origin_lla (GeodeticPosition): Platform geodetic position
        origin_body (BodyAttitude): Platform attitude relative to NED
        origin_antenna (AntennaMounting): Antenna mounting relative to body
        target (GeodeticPosition): Candidate target position
        origin_ecef (EcefPosition): Platform ECEF position; derived from
            ``origin_lla`` when not given
    """
    origin_lla: GeodeticPosition
    origin_body: BodyAttitude
    origin_antenna: AntennaMounting
    target: GeodeticPosition
    origin_ecef: Optional[EcefPosition] = None

    def __post_init__(self):
        require_record(self.origin_lla, "origin_lla", GeodeticPosition)
        require_record(self.origin_body, "origin_body", BodyAttitude)
        require_record(self.origin_antenna, "origin_antenna", AntennaMounting)
        require_record(self.target, "target", GeodeticPosition)
        if self.origin_ecef is None:
            object.__setattr__(self, 'origin_ecef', lla2ecef(self.origin_lla))
        else:
            require_record(self.origin_ecef, "origin_ecef", EcefPosition)

    @classmethod
    def from_dict(cls, data: dict) -> 'Scenario':
        """
        Build a scenario from a dictionary.

        Angles are read in ``data['angle_units']`` ('deg' or 'rad', default
        'deg'); altitudes and ECEF coordinates are always meters.

        Raises:
            ValueError: If a section is missing or the angle unit is unknown
        """
        units = data.get('angle_units', 'deg')
        if units not in ANGLE_UNITS:
            raise ValueError(f"Unknown angle units: {units}")
        scale = ANGLE_UNITS[units]

        origin_ecef = None
        if data.get('origin_ecef') is not None:
            origin_ecef = _record_from_dict(EcefPosition, data['origin_ecef'], 1.0, 'origin_ecef')

        return cls(
            origin_lla=_record_from_dict(GeodeticPosition, data.get('origin_lla'), scale, 'origin_lla'),
            origin_body=_record_from_dict(BodyAttitude, data.get('origin_body', {}), scale, 'origin_body'),
            origin_antenna=_record_from_dict(AntennaMounting, data.get('origin_antenna', {}), scale,
                                             'origin_antenna'),
            target=_record_from_dict(GeodeticPosition, data.get('target'), scale, 'target'),
            origin_ecef=origin_ecef,
        )

    def to_dict(self) -> dict:
        """Convert the scenario to a dictionary with angles in radians."""
        return {
            'angle_units': 'rad',
            'origin_lla': _record_to_dict(self.origin_lla),
            'origin_ecef': _record_to_dict(self.origin_ecef),
            'origin_body': _record_to_dict(self.origin_body),
            'origin_antenna': _record_to_dict(self.origin_antenna),
            'target': _record_to_dict(self.target),
        }

    def relative_position(self) -> EcefPosition:
        return relative_position(self.origin_ecef, self.target)

    def line_of_sight(self) -> LineOfSight:
        return line_of_sight(self.origin_lla, self.origin_body, self.origin_antenna,
                             self.relative_position())

    def angles(self) -> tuple[float, float, float]:
        """(azimuth, elevation, aoa) of the target in radians"""
        return angles(self.line_of_sight())

    def measurement_matrix(self, kind):
        """Measurement matrix for ``kind`` ('azimuth', 'elevation' or 'aoa')"""
        return measurement_matrix(kind, self.origin_ecef, self.origin_lla, self.origin_body,
                                  self.origin_antenna, self.target)


def load_scenario(filepath: Union[str, Path]) -> Scenario:
    """
    Load a scenario from a YAML or JSON file.

    A ``logging`` section, if present, is applied with
    :func:`dfgeo.logger.setup_logger_from_config`.

    Raises:
        ValueError: If the file format or contents are not supported
        FileNotFoundError: If the file does not exist
    """
    filepath = Path(filepath)

    if filepath.suffix in ['.yaml', '.yml']:
        with open(filepath) as f:
            data = yaml.safe_load(f)
    elif filepath.suffix == '.json':
        with open(filepath) as f:
            data = json.load(f)
    else:
        raise ValueError(f"Unsupported file format: {filepath.suffix}")

    if not isinstance(data, dict):
        raise ValueError(f"Scenario file {filepath} does not contain a mapping")

    if data.get('logging'):
        setup_logger_from_config(data['logging'])

    scenario = Scenario.from_dict(data)
    logger.info("Loaded scenario from %s", filepath)
    return scenario

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

"""Example usage of the DF geolocation geometry engine"""

from pathlib import Path

import numpy as np

from dfgeo import (
    AntennaMounting,
    BodyAttitude,
    GeodeticPosition,
    MeasurementType,
    angles,
    aoa_measurement,
    azimuth_measurement,
    elevation_measurement,
    line_of_sight,
    lla2ecef,
    relative_position,
    stack_measurements,
)
from dfgeo.io import load_scenario


# Example 1: angles and measurement rows from records
def example_basic_usage():
    """Line of sight, DF angles and measurement matrices"""
    print("=== Example 1: DF Angles and Measurement Matrices ===\n")

    origin_lla = GeodeticPosition(np.radians(139.65), np.radians(35.67), 3000.0)
    origin = lla2ecef(origin_lla)
    body = BodyAttitude(yaw=np.radians(45.0), pitch=np.radians(2.0), roll=np.radians(-1.0))
    antenna = AntennaMounting(alpha=np.radians(90.0))
    target = GeodeticPosition(np.radians(139.80), np.radians(35.70), 0.0)

    relative = relative_position(origin, target)
    los = line_of_sight(origin_lla, body, antenna, relative)
    az, el, ang = angles(los)

    print(f"Relative ECEF: {relative.to_array()} m")
    print(f"Range: {np.linalg.norm(relative.to_array()) / 1e3:.3f} km")
    print(f"LOS (antenna frame): {los.to_array()}")
    print(f"Azimuth: {np.degrees(az):.3f} deg")
    print(f"Elevation: {np.degrees(el):.3f} deg")
    print(f"AOA: {np.degrees(ang):.3f} deg\n")

    print(f"H azimuth:   {azimuth_measurement(origin, origin_lla, body, antenna, target)}")
    print(f"H elevation: {elevation_measurement(origin, origin_lla, body, antenna, target)}")
    print(f"H aoa:       {aoa_measurement(origin, origin_lla, body, antenna, target)}\n")

    H = stack_measurements([MeasurementType.AZIMUTH, MeasurementType.AOA],
                           origin, origin_lla, body, antenna, target)
    print(f"Stacked H (azimuth, aoa), shape {H.shape}:\n{H}\n")


# Example 2: same evaluation from a configuration file
def example_scenario_file():
    """Load a scenario from YAML"""
    print("=== Example 2: Scenario File ===\n")

    scenario = load_scenario(Path(__file__).with_name("scenario.yaml"))
    az, el, ang = scenario.angles()
    print(f"Azimuth {np.degrees(az):.3f} deg, elevation {np.degrees(el):.3f} deg, "
          f"AOA {np.degrees(ang):.3f} deg")
    print(f"H aoa: {scenario.measurement_matrix('aoa')}\n")


if __name__ == "__main__":
    example_basic_usage()
    example_scenario_file()

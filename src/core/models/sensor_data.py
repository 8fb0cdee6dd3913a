"""
Sensor data model.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from core.models.sensor_enum import SensorCategory


@dataclass(frozen=True)
class SensorReading:
    """
    Data class representing a single raw reading taken from one hwmon input file.
    The normalized value is never stored; see core.normalizer.normalize().
    """
    device_id: str
    device_label: Optional[str]
    category: SensorCategory
    index: int
    total_for_category: int
    raw_value: int
    path: str = ""


@dataclass
class SensorsAvailable:
    """At least one valid reading was found for a device/category pair."""
    readings: List[SensorReading] = field(default_factory=list)


@dataclass
class SensorsUnavailable:
    """No usable data for a device/category pair; the device is still reported."""
    reason: str = "no valid sensors"


SensorResult = Union[SensorsAvailable, SensorsUnavailable]


@dataclass
class DeviceReport:
    device_id: str
    device_label: Optional[str]
    category: SensorCategory
    result: SensorResult

    @property
    def available(self) -> bool:
        return isinstance(self.result, SensorsAvailable)

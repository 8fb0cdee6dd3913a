"""Sensor category enumeration for type-safe hwmon attribute prefixes."""
from enum import Enum


class SensorCategory(Enum):
    """
    Enumeration of hwmon sensor categories, keyed by attribute file prefix.

    Values are truncated to whole units, so 1.2 V is shown as 1 V. Inputs are
    probed from index 1, which skips the in0_input channel of voltage sensors.
    """
    TEMPERATURE = "temp"
    FAN = "fan"
    VOLTAGE = "in"
    CURRENT = "curr"
    POWER = "power"

    @property
    def unit(self) -> str:
        """Display unit of a normalized value"""
        return _UNITS[self]

    @property
    def scale(self) -> int:
        """Divisor turning a raw kernel value into display units"""
        return _SCALES[self]


_UNITS = {
    SensorCategory.TEMPERATURE: "C",
    SensorCategory.FAN: "RPM",
    SensorCategory.VOLTAGE: "V",
    SensorCategory.CURRENT: "A",
    SensorCategory.POWER: "W",
}

# temp/in/curr are milli-units, power is micro-watts, fans report RPM as-is
_SCALES = {
    SensorCategory.TEMPERATURE: 1000,
    SensorCategory.FAN: 1,
    SensorCategory.VOLTAGE: 1000,
    SensorCategory.CURRENT: 1000,
    SensorCategory.POWER: 1000000,
}

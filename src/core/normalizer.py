"""
Conversion of raw hwmon integers into display units.

Corrections are looked up by (category, device label); any pair without an
entry is scaled only.
"""
from typing import Callable, Dict, Tuple

from core.models.quirk_state import GlobalQuirkState
from core.models.sensor_data import SensorReading
from core.models.sensor_enum import SensorCategory

LEGACY_TEMP_DRIVER = "k10temp"
K10TEMP_OFFSET = 30

Correction = Callable[[int, GlobalQuirkState], int]


def _k10temp_offset(value: int, quirks: GlobalQuirkState) -> int:
    # k10temp reads low unless fam15h_power already reports calibrated values
    if quirks.alternate_power_module_active:
        return value
    return value + K10TEMP_OFFSET


CORRECTIONS: Dict[Tuple[SensorCategory, str], Correction] = {
    (SensorCategory.TEMPERATURE, LEGACY_TEMP_DRIVER): _k10temp_offset,
}


def scale(raw_value: int, category: SensorCategory) -> int:
    """Truncating division by the category scale, e.g. millidegrees -> degrees."""
    quotient = abs(raw_value) // category.scale
    return quotient if raw_value >= 0 else -quotient


def normalize_value(raw_value: int, category: SensorCategory, label: str, quirks: GlobalQuirkState) -> int:
    value = scale(raw_value, category)
    correction = CORRECTIONS.get((category, label))
    if correction is None:
        return value
    return correction(value, quirks)


def normalize(reading: SensorReading, quirks: GlobalQuirkState) -> int:
    """Normalized value of a reading under the given quirk state."""
    return normalize_value(reading.raw_value, reading.category, reading.device_label or "", quirks)

import logging
import re
from typing import List, Optional

from core.models.sensor_data import SensorReading, SensorResult, SensorsAvailable, SensorsUnavailable
from core.models.sensor_enum import SensorCategory
from core.sysfs import attribute_present, device_path, read_attribute

logger = logging.getLogger(__name__)

# ASCII decimal only, as the kernel writes it
RAW_VALUE_PATTERN = re.compile(r"[+-]?[0-9]+")


def input_path(hwmon_directory: str, device_id: str, category: SensorCategory, index: int, suffix: str = "_input") -> str:
    """e.g. /sys/class/hwmon/hwmon0/temp1_input"""
    return device_path(hwmon_directory, device_id, f"{category.value}{index}{suffix}")


def count_sensors(hwmon_directory: str, device_id: str, category: SensorCategory, suffix: str = "_input") -> int:
    """
    Probe <category>1<suffix>, <category>2<suffix>, ... and return how many
    consecutive indices exist. The first missing or empty file ends the probe.
    """
    count = 0
    while attribute_present(input_path(hwmon_directory, device_id, category, count + 1, suffix)):
        count += 1
    return count


def parse_raw_value(text: Optional[str]) -> Optional[int]:
    """Parse a trimmed base-10 integer reading; None for anything non-positive or malformed."""
    if text is None:
        return None
    text = text.strip()
    if not RAW_VALUE_PATTERN.fullmatch(text):
        return None
    value = int(text, 10)
    if value < 1:
        return None
    return value


def read_sensors(
    hwmon_directory: str,
    device_id: str,
    device_label: Optional[str],
    category: SensorCategory = SensorCategory.TEMPERATURE,
    suffix: str = "_input",
) -> SensorResult:
    """
    Read every <category><N><suffix> input of one device.

    The total is counted first, so each reading carries its index and the
    final total. Bad values inside the counted range are skipped without
    ending the scan.

    Returns:
        SensorsAvailable with the raw readings, or SensorsUnavailable if none were valid
    """
    if device_label is None:
        return SensorsUnavailable(reason="missing label")

    total = count_sensors(hwmon_directory, device_id, category, suffix)
    readings: List[SensorReading] = []

    for index in range(1, total + 1):
        path = input_path(hwmon_directory, device_id, category, index, suffix)
        logger.debug(f"Opening {device_id} file at: {path}")

        raw_value = parse_raw_value(read_attribute(path))
        if raw_value is None:
            logger.debug(f"Warning: {path} does not contain positive integer data, skipping")
            continue

        readings.append(SensorReading(
            device_id=device_id,
            device_label=device_label,
            category=category,
            index=index,
            total_for_category=total,
            raw_value=raw_value,
            path=path,
        ))

    if not readings:
        logger.info(f"{device_id} ({device_label}) has no valid {category.value} sensors")
        return SensorsUnavailable(reason="no valid sensors")

    return SensorsAvailable(readings=readings)

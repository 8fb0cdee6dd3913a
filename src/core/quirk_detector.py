"""
Quirk detection: one complete pass over every hwmon device (plus the CPU
identification file) that yields the GlobalQuirkState used by every later
normalization.
"""
import logging
from typing import Iterable, Optional

from core.models.quirk_state import GlobalQuirkState
from core.sysfs import device_path, read_attribute

logger = logging.getLogger(__name__)

# When this module is loaded the k10temp offset is not applied.
ALTERNATE_POWER_MODULE = "fam15h_power"
# CPU families with this marker in /proc/cpuinfo ship the module above.
CPU_VENDOR_MARKER = "Ryzen"


def read_device_label(hwmon_directory: str, device_id: str, name_file: str = "name") -> Optional[str]:
    """Return the trimmed driver name of a device, or None if it has none."""
    path = device_path(hwmon_directory, device_id, name_file)
    logger.debug(f"{device_id} --> {path}")
    label = read_attribute(path)
    if label is None:
        logger.debug(f"Warning: {device_id} does not contain a hardware name file. Skipping...")
    return label


def cpu_has_vendor_marker(cpuinfo_path: str) -> bool:
    """True if the CPU identification file mentions the vendor marker. A missing file counts as False."""
    cpuinfo = read_attribute(cpuinfo_path)
    if cpuinfo is None:
        return False
    return CPU_VENDOR_MARKER in cpuinfo


def detect_quirks(
    hwmon_directory: str,
    devices: Iterable[str],
    cpuinfo_path: str,
    name_file: str = "name",
) -> GlobalQuirkState:
    """
    Scan every device label and the CPU identification data.

    Devices without a readable label contribute nothing. The returned state
    is immutable and must be computed before any reading is normalized.
    """
    alternate_module = False
    max_label_width = 0

    for device_id in devices:
        label = read_device_label(hwmon_directory, device_id, name_file)
        if label is None:
            continue
        max_label_width = max(max_label_width, len(label))
        if label == ALTERNATE_POWER_MODULE:
            logger.debug(f"{device_id} uses the {ALTERNATE_POWER_MODULE} module")
            alternate_module = True

    if cpu_has_vendor_marker(cpuinfo_path):
        logger.debug(f"{cpuinfo_path} reports a {CPU_VENDOR_MARKER} CPU")
        alternate_module = True

    return GlobalQuirkState(
        alternate_power_module_active=alternate_module,
        max_label_width=max_label_width,
    )

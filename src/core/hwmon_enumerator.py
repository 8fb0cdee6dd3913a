import logging
import os
from typing import List

from core.errors import HwmonUnavailableError

logger = logging.getLogger(__name__)


def list_devices(hwmon_directory: str) -> List[str]:
    """
    List the device entries (hwmon0, hwmon1, ...) of the hardware-monitor root.

    Entries are returned sorted by name so a report is reproducible within a run.

    Raises:
        HwmonUnavailableError: the root is missing, unreadable or not a directory
    """
    try:
        entries = sorted(os.listdir(hwmon_directory))
    except OSError as e:
        raise HwmonUnavailableError(hwmon_directory, e.strerror or str(e)) from e

    logger.debug(
        "The following IDs are present in the hardware sensor monitoring directory:\n"
        + "".join(f"* {entry}\n" for entry in entries)
    )
    return entries

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


def device_path(hwmon_directory: str, device_id: str, attribute: str) -> str:
    return os.path.join(hwmon_directory, device_id, attribute)


def read_attribute(path: str) -> Optional[str]:
    """
    Read a sysfs attribute file and return its contents with surrounding
    whitespace trimmed. Returns None when the file is unreadable or blank.
    """
    try:
        with open(path, "r") as f:
            value = f.read().strip()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Unable to read {path}: {e}")
        return None
    if not value:
        logger.debug(f"{path} does not contain valid data")
        return None
    return value


def attribute_present(path: str) -> bool:
    """
    True if the attribute exists and is not zero-length. Whitespace counts as
    content, and a file that exists but cannot be read is still present.
    """
    try:
        with open(path, "rb") as f:
            return len(f.read(1)) > 0
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as e:
        logger.debug(f"{path} exists but is unreadable: {e}")
        return True

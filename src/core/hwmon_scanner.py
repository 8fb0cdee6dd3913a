import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from core.config_loader import config_loader
from core.errors import NoDevicesError
from core.hwmon_enumerator import list_devices
from core.models.config_data import Settings
from core.models.quirk_state import GlobalQuirkState
from core.models.sensor_data import DeviceReport, SensorReading, SensorsAvailable
from core.models.sensor_enum import SensorCategory
from core.normalizer import normalize
from core.quirk_detector import detect_quirks, read_device_label
from core.sensor_reader import read_sensors

logger = logging.getLogger(__name__)


@dataclass
class HwmonReport:
    """Result of one complete scan, in device listing order."""
    quirks: GlobalQuirkState
    devices: List[DeviceReport] = field(default_factory=list)

    def normalized(self, device: DeviceReport) -> List[Tuple[SensorReading, int]]:
        """Pair each reading of a device with its normalized value."""
        if not isinstance(device.result, SensorsAvailable):
            return []
        return [(reading, normalize(reading, self.quirks)) for reading in device.result.readings]

    def find(self, device_id: str) -> List[DeviceReport]:
        return [device for device in self.devices if device.device_id == device_id]


class HwmonScanner:
    """
    Runs a single-shot scan: enumerate devices, detect quirks over all of
    them, then read each device's inputs for the requested categories.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or config_loader.get_settings()

    def detect(self, devices: Sequence[str]) -> GlobalQuirkState:
        return detect_quirks(
            self.settings.hwmon_directory,
            devices,
            self.settings.cpuinfo_path,
            self.settings.name_file,
        )

    def scan(self, categories: Sequence[SensorCategory] = (SensorCategory.TEMPERATURE,)) -> HwmonReport:
        """
        Raises:
            HwmonUnavailableError: the hwmon root cannot be listed
            NoDevicesError: the hwmon root is empty
        """
        root = self.settings.hwmon_directory
        devices = list_devices(root)
        if not devices:
            raise NoDevicesError(root)

        # Must finish before anything is normalized: a late device can flip the flag.
        quirks = self.detect(devices)
        logger.debug(f"Quirk state: {quirks}")

        report = HwmonReport(quirks=quirks)
        for device_id in devices:
            label = read_device_label(root, device_id, self.settings.name_file)
            for category in categories:
                result = read_sensors(root, device_id, label, category, self.settings.input_suffix)
                report.devices.append(DeviceReport(
                    device_id=device_id,
                    device_label=label,
                    category=category,
                    result=result,
                ))
        return report

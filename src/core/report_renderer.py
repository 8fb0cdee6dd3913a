"""Plain-text rendering of an HwmonReport for the console."""
from typing import List

from core.hwmon_scanner import HwmonReport
from core.models.sensor_data import DeviceReport, SensorsUnavailable

BANNER_RULE = "-----------------------------------------------"
BANNER_TITLE = "Hardware Temperature Info Tool for Linux x86-64"
NOT_AVAILABLE = "N/A"


def render_banner() -> List[str]:
    return ["", BANNER_RULE, BANNER_TITLE, BANNER_RULE, ""]


def _prefix(device: DeviceReport, width: int) -> str:
    label = device.device_label or ""
    return f"{device.device_id}  |  {label.ljust(width)} "


def render_device(report: HwmonReport, device: DeviceReport, spacer_size: int = 4) -> List[str]:
    """One line per reading, or a single N/A line when the device has no data."""
    width = report.quirks.max_label_width + spacer_size
    if isinstance(device.result, SensorsUnavailable):
        return [f"{_prefix(device, width)}{NOT_AVAILABLE}"]

    lines = []
    unit = device.category.unit
    for reading, value in report.normalized(device):
        line = f"{_prefix(device, width)}{value} {unit}"
        if reading.total_for_category > 1:
            line += f"  ({reading.index}/{reading.total_for_category})"
        lines.append(line)
    return lines


def render_report(report: HwmonReport, spacer_size: int = 4, banner: bool = True) -> str:
    lines = render_banner() if banner else []
    for device in report.devices:
        lines.extend(render_device(report, device, spacer_size))
        # blank line after every device
        lines.append("")
    return "\n".join(lines) + "\n"

from typing import List, Optional
from pydantic import BaseModel

from core.hwmon_scanner import HwmonReport
from core.models.quirk_state import GlobalQuirkState
from core.models.sensor_data import DeviceReport, SensorsUnavailable


class AppHealthOK(BaseModel):
    status: str
    app: str


class MessageResponse(BaseModel):
    message: str


class QuirkStateResponse(BaseModel):
    alternate_power_module_active: bool
    max_label_width: int

    @classmethod
    def from_state(cls, quirks: GlobalQuirkState) -> "QuirkStateResponse":
        return cls(
            alternate_power_module_active=quirks.alternate_power_module_active,
            max_label_width=quirks.max_label_width,
        )


class SensorReadingResponse(BaseModel):
    index: int
    total_for_category: int
    raw_value: int
    value: int
    unit: str
    path: str


class DeviceReportResponse(BaseModel):
    device_id: str
    device_label: Optional[str]
    category: str
    available: bool
    reason: Optional[str] = None
    readings: List[SensorReadingResponse] = []

    @classmethod
    def from_device(cls, report: HwmonReport, device: DeviceReport) -> "DeviceReportResponse":
        readings = [
            SensorReadingResponse(
                index=reading.index,
                total_for_category=reading.total_for_category,
                raw_value=reading.raw_value,
                value=value,
                unit=reading.category.unit,
                path=reading.path,
            )
            for reading, value in report.normalized(device)
        ]
        reason = device.result.reason if isinstance(device.result, SensorsUnavailable) else None
        return cls(
            device_id=device.device_id,
            device_label=device.device_label,
            category=device.category.value,
            available=device.available,
            reason=reason,
            readings=readings,
        )


class HwmonReportResponse(BaseModel):
    quirks: QuirkStateResponse
    devices: List[DeviceReportResponse]

    @classmethod
    def from_report(cls, report: HwmonReport) -> "HwmonReportResponse":
        return cls(
            quirks=QuirkStateResponse.from_state(report.quirks),
            devices=[DeviceReportResponse.from_device(report, d) for d in report.devices],
        )

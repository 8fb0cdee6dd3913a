from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from core.config_loader import get_settings
from core.errors import HwmonError
from core.hwmon_scanner import HwmonReport, HwmonScanner
from core.models.config_data import Settings
from core.models.sensor_enum import SensorCategory

from schemas import DeviceReportResponse, HwmonReportResponse, QuirkStateResponse

VALID_CATEGORY_VALUES = ", ".join([c.value for c in SensorCategory])

router = APIRouter(prefix="/sensors", tags=["sensors"])

HWMON_UNAVAILABLE_RESPONSE = {
    503: {
        "description": "The hardware monitor directory could not be scanned.",
        "content": {
            "application/json": {
                "example": {"detail": "Unable to list hardware monitor directory /sys/class/hwmon/: No such file or directory"}
            }
        }
    }
}

INVALID_CATEGORY_RESPONSE = {
    400: {
        "description": "Invalid category provided.",
        "content": {
            "application/json": {
                "example": {"detail": f"Invalid category: INVALID. Valid values are: {VALID_CATEGORY_VALUES}"}
            }
        }
    }
}


def _parse_categories(values: List[str]) -> List[SensorCategory]:
    categories = []
    for value in values:
        try:
            categories.append(SensorCategory(value.lower()))
        except ValueError:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid category: {value}. Valid values are: {VALID_CATEGORY_VALUES}"
            )
    return categories


def _scan(settings: Settings, categories: List[SensorCategory]) -> HwmonReport:
    try:
        return HwmonScanner(settings).scan(categories)
    except HwmonError as exc:
        raise HTTPException(status_code=503, detail=str(exc))


@router.get("", response_model=HwmonReportResponse, responses={**INVALID_CATEGORY_RESPONSE, **HWMON_UNAVAILABLE_RESPONSE})
async def get_sensors(
    category: List[str] = Query(default=["temp"]),
    settings: Settings = Depends(get_settings),
) -> HwmonReportResponse:
    """
    Scan every hwmon device once and return normalized readings.
    Devices without usable data are listed with available=false.
    """
    report = _scan(settings, _parse_categories(category))
    return HwmonReportResponse.from_report(report)


@router.get("/quirks", response_model=QuirkStateResponse, responses=HWMON_UNAVAILABLE_RESPONSE)
async def get_quirks(settings: Settings = Depends(get_settings)) -> QuirkStateResponse:
    """Return the machine-wide correction flags computed by a fresh scan."""
    report = _scan(settings, [])
    return QuirkStateResponse.from_state(report.quirks)


@router.get("/{device_id}", response_model=List[DeviceReportResponse], responses={
    **INVALID_CATEGORY_RESPONSE,
    404: {
        "description": "No such hwmon device.",
        "content": {
            "application/json": {
                "example": {"detail": "Device hwmon9 not found"}
            }
        }
    },
    **HWMON_UNAVAILABLE_RESPONSE,
})
async def get_device(
    device_id: str,
    category: List[str] = Query(default=["temp"]),
    settings: Settings = Depends(get_settings),
) -> List[DeviceReportResponse]:
    """Return the readings of a single device, one entry per requested category."""
    categories = _parse_categories(category)
    report = _scan(settings, categories)
    devices = report.find(device_id)
    if not devices:
        raise HTTPException(status_code=404, detail=f"Device {device_id} not found")
    return [DeviceReportResponse.from_device(report, d) for d in devices]

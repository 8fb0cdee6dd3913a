"""
Tests for the read-only sensor endpoints.
"""
import pytest
from fastapi.testclient import TestClient

from core.config_loader import get_settings
from main import app

client = TestClient(app)


@pytest.fixture
def api_hwmon(hwmon):
    """Point the API at the fake hwmon tree for the duration of a test."""
    app.dependency_overrides[get_settings] = lambda: hwmon.settings()
    yield hwmon
    app.dependency_overrides.clear()


class TestMeta:
    """Test root and health endpoints"""

    def test_health(self) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_root(self) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert "message" in response.json()


class TestSensors:
    """Test GET /api/sensors"""

    def test_report(self, api_hwmon) -> None:
        """Test the full report with quirks and normalized values"""
        api_hwmon.add_device("hwmon0", "k10temp", temp1_input="45000")
        api_hwmon.add_device("hwmon3", "coretemp", temp1_input="abc")
        response = client.get("/api/sensors")
        assert response.status_code == 200
        data = response.json()
        assert data["quirks"] == {"alternate_power_module_active": False, "max_label_width": len("coretemp")}
        devices = {d["device_id"]: d for d in data["devices"]}
        reading = devices["hwmon0"]["readings"][0]
        assert reading["raw_value"] == 45000
        assert reading["value"] == 75
        assert reading["unit"] == "C"
        assert devices["hwmon3"]["available"] is False
        assert devices["hwmon3"]["reason"] == "no valid sensors"
        assert devices["hwmon3"]["readings"] == []

    def test_invalid_category(self, api_hwmon) -> None:
        """Test an unknown category returns 400"""
        api_hwmon.add_device("hwmon0", "k10temp", temp1_input="45000")
        response = client.get("/api/sensors?category=INVALID")
        assert response.status_code == 400
        assert "Invalid category" in response.json()["detail"]

    def test_category_case_insensitive(self, api_hwmon) -> None:
        api_hwmon.add_device("hwmon0", "nct6775", fan1_input="900")
        response = client.get("/api/sensors?category=FAN")
        assert response.status_code == 200
        assert response.json()["devices"][0]["readings"][0]["value"] == 900

    def test_missing_root(self, api_hwmon, tmp_path) -> None:
        """Test an unreadable hwmon root returns 503"""
        app.dependency_overrides[get_settings] = lambda: api_hwmon.settings(hwmon_directory=str(tmp_path / "missing"))
        response = client.get("/api/sensors")
        assert response.status_code == 503
        assert "Unable to list hardware monitor directory" in response.json()["detail"]


class TestQuirks:
    """Test GET /api/sensors/quirks"""

    def test_quirks(self, api_hwmon) -> None:
        api_hwmon.add_device("hwmon1", "fam15h_power")
        response = client.get("/api/sensors/quirks")
        assert response.status_code == 200
        assert response.json()["alternate_power_module_active"] is True


class TestDevice:
    """Test GET /api/sensors/{device_id}"""

    def test_device(self, api_hwmon) -> None:
        api_hwmon.add_device("hwmon1", "fam15h_power")
        api_hwmon.add_device("hwmon2", "k10temp", temp1_input="50000")
        response = client.get("/api/sensors/hwmon2")
        assert response.status_code == 200
        (device,) = response.json()
        assert device["device_label"] == "k10temp"
        assert device["readings"][0]["value"] == 50

    def test_unknown_device(self, api_hwmon) -> None:
        api_hwmon.add_device("hwmon0", "k10temp", temp1_input="45000")
        response = client.get("/api/sensors/hwmon9")
        assert response.status_code == 404
        assert response.json()["detail"] == "Device hwmon9 not found"

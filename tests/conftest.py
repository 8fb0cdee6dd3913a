"""Pytest configuration and fixtures for test suite."""

from pathlib import Path
from typing import Dict, Optional

import pytest

from core.models.config_data import Settings


class FakeHwmon:
    """Builds a fake /sys/class/hwmon tree under a temporary directory."""

    def __init__(self, base: Path):
        self.root = base / "hwmon"
        self.root.mkdir()
        self.cpuinfo = base / "cpuinfo"

    def add_device(self, device_id: str, label: Optional[str] = None, **inputs: str) -> Path:
        """
        Create a device directory. Keyword arguments name input files,
        e.g. temp1_input="45000\\n".
        """
        device = self.root / device_id
        device.mkdir()
        if label is not None:
            (device / "name").write_text(label)
        for name, content in inputs.items():
            (device / name).write_text(content)
        return device

    def set_cpuinfo(self, content: str) -> None:
        self.cpuinfo.write_text(content)

    def settings(self, **overrides) -> Settings:
        values: Dict[str, object] = {
            "hwmon_directory": str(self.root),
            "cpuinfo_path": str(self.cpuinfo),
        }
        values.update(overrides)
        return Settings(**values)


@pytest.fixture
def hwmon(tmp_path: Path) -> FakeHwmon:
    """An empty fake hwmon root with a non-existent cpuinfo file."""
    return FakeHwmon(tmp_path)


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep host TEMPCHK_* variables from leaking into Settings()."""
    for name in ("HWMON_DIRECTORY", "CPUINFO_PATH", "DEBUG", "SPACER_SIZE", "NAME_FILE", "INPUT_SUFFIX", "APP_NAME"):
        monkeypatch.delenv(f"TEMPCHK_{name}", raising=False)

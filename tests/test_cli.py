import json

import pytest

from cli import main


class TestCli:
    """Test the tempchk console entry point"""

    def test_prints_report(self, hwmon, capsys) -> None:
        """Test a successful scan prints the report and exits 0"""
        hwmon.add_device("hwmon0", "k10temp", temp1_input="45000\n")
        code = main(["--hwmon-dir", str(hwmon.root), "--cpuinfo", str(hwmon.cpuinfo)])
        out = capsys.readouterr().out
        assert code == 0
        assert "Hardware Temperature Info Tool" in out
        assert "hwmon0  |  k10temp" in out
        assert "75 C" in out

    def test_missing_root_exits_nonzero(self, tmp_path, capsys) -> None:
        """Test a missing hwmon root is fatal"""
        code = main(["--hwmon-dir", str(tmp_path / "missing"), "--cpuinfo", str(tmp_path / "cpuinfo")])
        captured = capsys.readouterr()
        assert code == 1
        assert "hwmon0" not in captured.out

    def test_json_output(self, hwmon, capsys) -> None:
        """Test --json prints the structured report"""
        hwmon.add_device("hwmon1", "fam15h_power")
        hwmon.add_device("hwmon2", "k10temp", temp1_input="50000")
        code = main(["--hwmon-dir", str(hwmon.root), "--cpuinfo", str(hwmon.cpuinfo), "--json"])
        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data["quirks"]["alternate_power_module_active"] is True
        devices = {d["device_id"]: d for d in data["devices"]}
        assert devices["hwmon1"]["available"] is False
        assert devices["hwmon2"]["readings"][0]["value"] == 50

    def test_category_option(self, hwmon, capsys) -> None:
        """Test --category scans the given prefix"""
        hwmon.add_device("hwmon0", "nct6775", fan1_input="1350")
        code = main(["--hwmon-dir", str(hwmon.root), "--cpuinfo", str(hwmon.cpuinfo), "-c", "fan"])
        assert code == 0
        assert "1350 RPM" in capsys.readouterr().out

    def test_version(self, capsys) -> None:
        """Test --version prints the version and exits 0"""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.startswith("tempchk v")

"""
Tests for the LocalOSInfoAdapter.
"""

import os
from collections import namedtuple
from unittest.mock import patch

import pytest

from file_manager.adapters.system.local_os_info_adapter import LocalOSInfoAdapter
from file_manager.exceptions import OSInfoError

freq = namedtuple("freq", ["current", "min", "max"])

CPUINFO = """processor\t: 0
model name\t: Test CPU @ 3.00GHz
cpu MHz\t\t: 3000.000

processor\t: 1
model name\t: Test CPU @ 3.00GHz
cpu MHz\t\t: 3000.000
"""


@pytest.fixture
def cpuinfo_file(tmp_path):
    path = tmp_path / "cpuinfo"
    path.write_text(CPUINFO)
    return str(path)


class TestLocalOSInfoAdapter:
    """Test cases for the LocalOSInfoAdapter."""

    def test_eol(self, mock_logger):
        assert LocalOSInfoAdapter(mock_logger).eol() == os.linesep

    def test_home_dir(self, mock_logger):
        assert LocalOSInfoAdapter(mock_logger).home_dir() == os.path.expanduser("~")

    @patch("getpass.getuser", return_value="alice")
    def test_username(self, _mock_getuser, mock_logger):
        assert LocalOSInfoAdapter(mock_logger).username() == "alice"

    @patch("getpass.getuser", side_effect=KeyError("uid not found"))
    def test_username_unavailable(self, _mock_getuser, mock_logger):
        with pytest.raises(OSInfoError, match="Username cannot be determined"):
            LocalOSInfoAdapter(mock_logger).username()

    @patch("platform.machine", return_value="x86_64")
    def test_architecture(self, _mock_machine, mock_logger):
        assert LocalOSInfoAdapter(mock_logger).architecture() == "x86_64"

    @patch("platform.machine", return_value="")
    def test_architecture_unavailable(self, _mock_machine, mock_logger):
        with pytest.raises(OSInfoError):
            LocalOSInfoAdapter(mock_logger).architecture()

    @patch("sys.platform", "linux")
    @patch("psutil.cpu_freq", return_value=[freq(3000.0, 0, 0), freq(2500.0, 0, 0)])
    @patch("psutil.cpu_count", return_value=2)
    def test_cpus_from_cpuinfo_and_psutil(
        self, _mock_count, _mock_freq, mock_logger, cpuinfo_file
    ):
        cpus = LocalOSInfoAdapter(mock_logger, cpuinfo_path=cpuinfo_file).cpus()

        assert cpus == [
            {"model": "Test CPU @ 3.00GHz", "speed_mhz": 3000.0},
            {"model": "Test CPU @ 3.00GHz", "speed_mhz": 2500.0},
        ]

    @patch("sys.platform", "linux")
    @patch("psutil.cpu_freq", return_value=[freq(1800.0, 0, 0)])
    @patch("psutil.cpu_count", return_value=2)
    def test_single_frequency_applies_to_all_cpus(
        self, _mock_count, _mock_freq, mock_logger, cpuinfo_file
    ):
        cpus = LocalOSInfoAdapter(mock_logger, cpuinfo_path=cpuinfo_file).cpus()

        assert [c["speed_mhz"] for c in cpus] == [1800.0, 1800.0]

    @patch("sys.platform", "linux")
    @patch(
        "psutil.cpu_freq",
        return_value=[freq(0.0, 0, 0), freq(2500.0, 0, 0), freq(2400.0, 0, 0)],
    )
    @patch("psutil.cpu_count", return_value=3)
    def test_zero_frequency_keeps_cpu_positions(
        self, _mock_count, _mock_freq, mock_logger, cpuinfo_file
    ):
        cpus = LocalOSInfoAdapter(mock_logger, cpuinfo_path=cpuinfo_file).cpus()

        assert [c["speed_mhz"] for c in cpus] == [None, 2500.0, 2400.0]

    @patch("sys.platform", "linux")
    @patch("platform.processor", return_value="")
    @patch("psutil.cpu_freq", side_effect=NotImplementedError("no freq"))
    @patch("psutil.cpu_count", return_value=1)
    def test_cpus_without_model_or_frequency(
        self, _mock_count, _mock_freq, _mock_proc, mock_logger, tmp_path
    ):
        adapter = LocalOSInfoAdapter(
            mock_logger, cpuinfo_path=str(tmp_path / "missing")
        )

        assert adapter.cpus() == [{"model": "Unknown", "speed_mhz": None}]
        assert mock_logger.warning.call_count == 2

    @patch("psutil.cpu_count", return_value=None)
    @patch("os.cpu_count", return_value=None)
    def test_cpus_count_unavailable(self, _mock_os_count, _mock_count, mock_logger):
        with pytest.raises(OSInfoError, match="CPU count is not available"):
            LocalOSInfoAdapter(mock_logger).cpus()

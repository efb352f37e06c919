"""
Host information adapter backed by psutil and the standard library.
"""

import getpass
import logging
import os
import platform
import sys
from typing import Optional

import psutil
from typing_extensions import override

from file_manager.exceptions import OSInfoError
from file_manager.ports.system.os_info_port import CpuInfo, OSInfoPort

UNKNOWN_MODEL = "Unknown"


class LocalOSInfoAdapter(OSInfoPort):
    """Reads information about the machine the shell is running on."""

    def __init__(
        self, logger: Optional[logging.Logger] = None, cpuinfo_path: str = "/proc/cpuinfo"
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._cpuinfo_path = cpuinfo_path

    @override
    def eol(self) -> str:
        return os.linesep

    @override
    def cpus(self) -> list[CpuInfo]:
        count = psutil.cpu_count(logical=True) or os.cpu_count()
        if not count:
            raise OSInfoError("CPU count is not available")
        models = self._cpu_models()
        speeds = self._cpu_speeds()
        fallback_model = models[0] if models else (platform.processor() or UNKNOWN_MODEL)
        fallback_speed = speeds[0] if speeds else None
        result: list[CpuInfo] = []
        for idx in range(count):
            result.append(
                {
                    "model": models[idx] if idx < len(models) else fallback_model,
                    "speed_mhz": speeds[idx] if idx < len(speeds) else fallback_speed,
                }
            )
        return result

    def _cpu_models(self) -> list[str]:
        """Per-processor model names from /proc/cpuinfo (Linux only)."""
        if not sys.platform.startswith("linux"):
            return []
        models: list[str] = []
        try:
            with open(self._cpuinfo_path, "r", encoding="utf-8") as f:
                for line in f:
                    key, sep, value = line.partition(":")
                    if sep and key.strip() == "model name":
                        models.append(value.strip())
        except OSError as e:
            self._logger.warning(f"Could not read {self._cpuinfo_path}: {e}")
        return models

    def _cpu_speeds(self) -> list[Optional[float]]:
        """Current clock speed per logical CPU in MHz, None for a zero reading."""
        try:
            freqs = psutil.cpu_freq(percpu=True)
        except (NotImplementedError, OSError, AttributeError) as e:
            self._logger.warning(f"CPU frequency is not available: {e}")
            return []
        # positional: index i is logical CPU i
        return [float(f.current) if f.current else None for f in freqs or []]

    @override
    def home_dir(self) -> str:
        home = os.path.expanduser("~")
        if home == "~":
            raise OSInfoError("Home directory cannot be determined")
        return home

    @override
    def username(self) -> str:
        try:
            return getpass.getuser()
        except (KeyError, OSError) as e:
            raise OSInfoError(f"Username cannot be determined: {e}")

    @override
    def architecture(self) -> str:
        arch = platform.machine()
        if not arch:
            raise OSInfoError("Architecture cannot be determined")
        return arch

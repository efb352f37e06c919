"""
Port interface for read-only host information.
"""

from abc import ABC, abstractmethod
from typing import TypedDict


class CpuInfo(TypedDict):
    """One logical CPU."""

    model: str
    speed_mhz: float | None


class OSInfoPort(ABC):
    """Port interface for querying the host operating system.

    Methods raise OSInfoError when the value cannot be obtained.
    """

    @abstractmethod
    def eol(self) -> str:
        """Line separator used by the platform."""
        pass

    @abstractmethod
    def cpus(self) -> list[CpuInfo]:
        """One entry per logical CPU."""
        pass

    @abstractmethod
    def home_dir(self) -> str:
        """Home directory of the current user."""
        pass

    @abstractmethod
    def username(self) -> str:
        """Login name reported by the OS."""
        pass

    @abstractmethod
    def architecture(self) -> str:
        """CPU architecture identifier."""
        pass

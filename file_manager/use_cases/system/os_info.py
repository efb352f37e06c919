"""
Use case for the 'os' informational queries.
"""

import json
import logging
from typing import Optional

from file_manager.exceptions import InvalidInputError, OSInfoError
from file_manager.ports.system.os_info_port import CpuInfo, OSInfoPort

FLAGS = ("--EOL", "--cpus", "--homedir", "--username", "--architecture")


class OSInfoUseCase:
    """Turns an 'os' flag into the lines to show the user."""

    def __init__(
        self,
        os_info: OSInfoPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._os_info = os_info
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, flag: str) -> list[str]:
        """
        Answer one informational query.

        Args:
            flag: One of --EOL, --cpus, --homedir, --username, --architecture

        Returns:
            Output lines

        Raises:
            InvalidInputError: For an unknown flag
            OSInfoError: If the host value cannot be read
        """
        if flag not in FLAGS:
            raise InvalidInputError(f"Unknown os flag: {flag}")
        self._logger.info(f"Querying host information: {flag}")
        try:
            if flag == "--EOL":
                return [json.dumps(self._os_info.eol())]
            if flag == "--cpus":
                return self._format_cpus(self._os_info.cpus())
            if flag == "--homedir":
                return [self._os_info.home_dir()]
            if flag == "--username":
                return [self._os_info.username()]
            return [self._os_info.architecture()]
        except OSInfoError:
            raise
        except Exception as e:
            self._logger.error(f"Error querying host information: {e}")
            raise OSInfoError(f"Failed to query {flag}: {str(e)}")

    @staticmethod
    def _format_cpus(cpus: list[CpuInfo]) -> list[str]:
        lines = [f"Total CPUs: {len(cpus)}"]
        for idx, cpu in enumerate(cpus, start=1):
            speed = cpu["speed_mhz"]
            ghz = f"{speed / 1000:.2f} GHz" if speed else "unknown speed"
            lines.append(f"CPU {idx}: {cpu['model']}, {ghz}")
        return lines

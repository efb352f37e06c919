"""
Use case for streaming the text content of a file.
"""

import logging
from collections.abc import Iterator
from typing import Optional

from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class ReadFileUseCase:
    """Use case for reading a file chunk by chunk."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> Iterator[str]:
        """
        Stream a file as text.

        Nothing is read until the caller starts iterating, so errors surface
        during iteration.

        Args:
            path: Absolute path of the file

        Yields:
            Text chunks of bounded size

        Raises:
            FileRepositoryError: If the file cannot be opened or read
        """
        self._logger.info(f"Reading file: {path}")
        try:
            yield from self._file_repository.read_text(path)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error reading file: {e}")
            raise FileRepositoryError(f"Failed to read {path}: {str(e)}")

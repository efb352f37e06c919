"""
Use cases for Brotli compression and decompression of files.
"""

import logging
from typing import Optional

from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class CompressFileUseCase:
    """Use case for compressing a file."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source: str, destination: str) -> None:
        """
        Compress source into destination.

        Raises:
            FileRepositoryError: On the first failing pipeline stage
        """
        try:
            self._logger.info(f"Compressing {source} to {destination}")
            self._file_repository.compress_file(source, destination)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error compressing file: {e}")
            raise FileRepositoryError(
                f"Failed to compress {source} to {destination}: {str(e)}"
            )


class DecompressFileUseCase:
    """Use case for decompressing a file."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source: str, destination: str) -> None:
        """
        Decompress source into destination.

        Raises:
            FileRepositoryError: On the first failing pipeline stage, including
                corrupt or truncated input
        """
        try:
            self._logger.info(f"Decompressing {source} to {destination}")
            self._file_repository.decompress_file(source, destination)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error decompressing file: {e}")
            raise FileRepositoryError(
                f"Failed to decompress {source} to {destination}: {str(e)}"
            )

"""
Use case for computing the SHA-256 digest of a file.
"""

import logging
from typing import Optional

from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class HashFileUseCase:
    """Use case for hashing a file."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> str:
        """
        Hash a file.

        Args:
            path: File to hash

        Returns:
            Lowercase hexadecimal SHA-256 digest

        Raises:
            FileRepositoryError: If the file cannot be read
        """
        try:
            self._logger.info(f"Hashing file: {path}")
            digest = self._file_repository.hash_file(path)
            self._logger.info(f"SHA-256 of {path}: {digest}")
            return digest
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error hashing file: {e}")
            raise FileRepositoryError(f"Failed to hash {path}: {str(e)}")

"""
Use cases for copying and moving files.
"""

import logging
from typing import Optional

from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class CopyFileUseCase:
    """Use case for stream-copying a file."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source: str, destination: str) -> None:
        """
        Copy source to destination, overwriting an existing destination.

        Raises:
            FileRepositoryError: If reading or writing fails
        """
        try:
            self._logger.info(f"Copying {source} to {destination}")
            self._file_repository.copy_file(source, destination)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error copying file: {e}")
            raise FileRepositoryError(
                f"Failed to copy {source} to {destination}: {str(e)}"
            )


class MoveFileUseCase:
    """
    Use case for moving a file as a copy followed by a delete.

    The move is not atomic. A failed copy leaves the source untouched; a failed
    delete after a successful copy leaves both files in place.
    """

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source: str, destination: str) -> None:
        """
        Move source to destination.

        Raises:
            FileRepositoryError: If the copy or the delete fails
        """
        try:
            self._logger.info(f"Moving {source} to {destination}")
            self._file_repository.copy_file(source, destination)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error copying file during move: {e}")
            raise FileRepositoryError(
                f"Failed to move {source} to {destination}: {str(e)}"
            )

        try:
            self._file_repository.delete_file(source)
        except Exception as e:
            self._logger.warning(
                f"Copied {source} to {destination} but could not delete the source: {e}"
            )
            if isinstance(e, FileRepositoryError):
                raise
            raise FileRepositoryError(f"Failed to delete {source}: {str(e)}")

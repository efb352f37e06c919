"""
Use cases for creating, renaming and deleting files.
"""

import logging
from typing import Optional

from file_manager.entities.file import File
from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class CreateFileUseCase:
    """Use case for creating a new empty file."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> File:
        """
        Create an empty file; an existing file is an error.

        Raises:
            FileRepositoryError: If creation fails
        """
        try:
            self._logger.info(f"Creating file: {path}")
            return self._file_repository.create_file(path)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error creating file: {e}")
            raise FileRepositoryError(f"Failed to create {path}: {str(e)}")


class RenameFileUseCase:
    """Use case for renaming an entry."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source: str, destination: str) -> None:
        try:
            self._logger.info(f"Renaming {source} to {destination}")
            self._file_repository.rename(source, destination)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error renaming file: {e}")
            raise FileRepositoryError(
                f"Failed to rename {source} to {destination}: {str(e)}"
            )


class DeleteFileUseCase:
    """Use case for deleting a file."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> None:
        try:
            self._logger.info(f"Deleting file: {path}")
            self._file_repository.delete_file(path)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error deleting file: {e}")
            raise FileRepositoryError(f"Failed to delete {path}: {str(e)}")

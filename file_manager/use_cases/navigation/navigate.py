"""
Use cases for moving the session's current directory.
"""

import logging
from typing import Optional

from file_manager.entities.session import Session
from file_manager.exceptions import InvalidInputError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class NavigateUpUseCase:
    """Use case for moving to the parent directory."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session) -> bool:
        """
        Move the session one level up.

        Returns:
            False if the session was already at the filesystem root
        """
        moved = session.go_up()
        if moved:
            self._logger.info(f"Moved up to {session.current_dir}")
        else:
            self._logger.info("Already at the root directory")
        return moved


class ChangeDirectoryUseCase:
    """Use case for changing into another directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository used to check the target is a directory
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, path: str) -> str:
        """
        Change the session's current directory.

        Args:
            session: Session to update
            path: Relative or absolute target

        Returns:
            The new current directory

        Raises:
            InvalidInputError: If the target does not exist or is not a directory
        """
        target = session.resolve(path)
        self._logger.info(f"Changing directory to: {target}")
        # follows symlinks: a link to a directory is a valid target
        if not self._file_repository.is_directory(target):
            raise InvalidInputError(f"Not a directory: {target}")
        session.change_to(target)
        return session.current_dir

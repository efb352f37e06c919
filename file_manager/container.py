"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from rich.console import Console

from file_manager.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_manager.adapters.system.local_os_info_adapter import LocalOSInfoAdapter
from file_manager.config.settings import Settings
from file_manager.entities.session import Session
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.ports.system.os_info_port import OSInfoPort
from file_manager.use_cases.commands.dispatcher import CommandDispatcher
from file_manager.use_cases.commands.files_commands import FilesCommandsHandler
from file_manager.use_cases.commands.navigation_commands import (
    NavigationCommandsHandler,
)
from file_manager.use_cases.commands.system_commands import SystemCommandsHandler
from file_manager.use_cases.commands.transform_commands import (
    TransformCommandsHandler,
)
from file_manager.use_cases.files.copy_files import CopyFileUseCase, MoveFileUseCase
from file_manager.use_cases.files.list_files import ListFilesUseCase
from file_manager.use_cases.files.manage_files import (
    CreateFileUseCase,
    DeleteFileUseCase,
    RenameFileUseCase,
)
from file_manager.use_cases.files.read_file import ReadFileUseCase
from file_manager.use_cases.navigation.navigate import (
    ChangeDirectoryUseCase,
    NavigateUpUseCase,
)
from file_manager.use_cases.system.os_info import OSInfoUseCase
from file_manager.use_cases.transforms.compress_files import (
    CompressFileUseCase,
    DecompressFileUseCase,
)
from file_manager.use_cases.transforms.hash_file import HashFileUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(
        self, settings: Optional[Settings] = None, console: Optional[Console] = None
    ):
        self._instances = {}
        self._settings = settings
        self._console = console
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get settings, reading the environment on first use.

        Raises:
            ConfigurationError: If a configured value is invalid
        """
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    def get_console(self) -> Console:
        if self._console is None:
            self._console = Console(highlight=False, soft_wrap=True)
        return self._console

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            settings = self.get_settings()
            self._instances["file_repository"] = LocalFileSystemAdapter(
                self._logger,
                chunk_size=settings.chunk_size,
                brotli_quality=settings.brotli_quality,
            )
        return self._instances["file_repository"]

    def get_os_info(self) -> OSInfoPort:
        """
        Get host information adapter instance.

        Returns:
            OSInfoPort implementation
        """
        if "os_info" not in self._instances:
            self._instances["os_info"] = LocalOSInfoAdapter(self._logger)
        return self._instances["os_info"]

    def get_navigation_commands_handler(self) -> NavigationCommandsHandler:
        """
        Handler for 'up' and 'cd'.
        """
        if "navigation_commands_handler" not in self._instances:
            file_repository = self.get_file_repository()
            self._instances["navigation_commands_handler"] = NavigationCommandsHandler(
                NavigateUpUseCase(self._logger),
                ChangeDirectoryUseCase(file_repository, self._logger),
                self.get_console(),
                self._logger,
            )
        return self._instances["navigation_commands_handler"]

    def get_files_commands_handler(self) -> FilesCommandsHandler:
        """
        Handler for 'ls', 'cat', 'add', 'rn', 'cp', 'mv' and 'rm'.
        """
        if "files_commands_handler" not in self._instances:
            repo = self.get_file_repository()
            self._instances["files_commands_handler"] = FilesCommandsHandler(
                ListFilesUseCase(repo, self._logger),
                ReadFileUseCase(repo, self._logger),
                CreateFileUseCase(repo, self._logger),
                RenameFileUseCase(repo, self._logger),
                CopyFileUseCase(repo, self._logger),
                MoveFileUseCase(repo, self._logger),
                DeleteFileUseCase(repo, self._logger),
                self.get_console(),
                self._logger,
            )
        return self._instances["files_commands_handler"]

    def get_system_commands_handler(self) -> SystemCommandsHandler:
        """
        Handler for 'os'.
        """
        if "system_commands_handler" not in self._instances:
            self._instances["system_commands_handler"] = SystemCommandsHandler(
                OSInfoUseCase(self.get_os_info(), self._logger),
                self.get_console(),
                self._logger,
            )
        return self._instances["system_commands_handler"]

    def get_transform_commands_handler(self) -> TransformCommandsHandler:
        """
        Handler for 'hash', 'compress' and 'decompress'.
        """
        if "transform_commands_handler" not in self._instances:
            repo = self.get_file_repository()
            self._instances["transform_commands_handler"] = TransformCommandsHandler(
                HashFileUseCase(repo, self._logger),
                CompressFileUseCase(repo, self._logger),
                DecompressFileUseCase(repo, self._logger),
                self.get_console(),
                self._logger,
            )
        return self._instances["transform_commands_handler"]

    def get_dispatcher(self) -> CommandDispatcher:
        """
        Get the dispatcher routing every verb to its handler.

        Returns:
            Configured CommandDispatcher
        """
        if "dispatcher" not in self._instances:
            self._instances["dispatcher"] = CommandDispatcher(
                [
                    self.get_navigation_commands_handler(),
                    self.get_files_commands_handler(),
                    self.get_system_commands_handler(),
                    self.get_transform_commands_handler(),
                ],
                self.get_console(),
                self._logger,
            )
        return self._instances["dispatcher"]

    def new_session(self) -> Session:
        """Fresh session starting in the configured directory."""
        return Session(self.get_settings().start_dir)


# Global container instance
container = DependencyContainer()

"""
Tests for the ListFilesUseCase.
"""

from unittest.mock import MagicMock

import pytest

from file_manager.entities.file import File
from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.use_cases.files.list_files import ListFilesUseCase


class TestListFilesUseCase:
    """Test cases for the ListFilesUseCase."""

    def test_execute_success(self, mock_logger):
        """Test successful execution of list files use case."""
        # Create mock file repository
        mock_repository = MagicMock(spec=FileRepositoryPort)
        entries = [File("/test/directory/sub", True), File("/test/directory/a.txt", False)]
        mock_repository.list_entries.return_value = entries

        use_case = ListFilesUseCase(mock_repository, mock_logger)

        result = use_case.execute("/test/directory")

        assert result == entries
        mock_repository.list_entries.assert_called_once_with("/test/directory")
        mock_logger.info.assert_any_call("Listing entries in directory: /test/directory")
        mock_logger.info.assert_any_call("Found 2 entries")

    def test_execute_empty_directory(self, mock_logger):
        """Test execution with an empty directory."""
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.list_entries.return_value = []

        use_case = ListFilesUseCase(mock_repository, mock_logger)

        assert use_case.execute("/empty/directory") == []
        mock_logger.info.assert_any_call("Found 0 entries")

    def test_execute_repository_error(self, mock_logger):
        """Test execution when repository raises a FileRepositoryError."""
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.list_entries.side_effect = FileRepositoryError(
            "Directory not found"
        )

        use_case = ListFilesUseCase(mock_repository, mock_logger)

        with pytest.raises(FileRepositoryError, match="Directory not found"):
            use_case.execute("/nonexistent/directory")

        # No error log since the repository exception is re-raised
        mock_logger.error.assert_not_called()

    def test_execute_unexpected_error(self, mock_logger):
        """Test execution when repository raises an unexpected exception."""
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.list_entries.side_effect = Exception("Unexpected error")

        use_case = ListFilesUseCase(mock_repository, mock_logger)

        with pytest.raises(
            FileRepositoryError,
            match="Failed to list entries in /test/directory: Unexpected error",
        ):
            use_case.execute("/test/directory")

        mock_logger.error.assert_called_once_with(
            "Error listing entries: Unexpected error"
        )

    def test_initialization_without_logger(self):
        """Test use case initialization without providing a logger."""
        mock_repository = MagicMock(spec=FileRepositoryPort)

        use_case = ListFilesUseCase(mock_repository)

        assert use_case._logger is not None
        assert use_case._file_repository == mock_repository

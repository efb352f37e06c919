"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from file_manager.config.settings import Settings
from file_manager.container import DependencyContainer


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Holds one file ('test1.txt') and one subdirectory ('subdir') with a file inside.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        test_file1 = os.path.join(temp_dir, "test1.txt")
        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file2 = os.path.join(subdir, "test2.md")
        with open(test_file2, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield os.path.realpath(temp_dir)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def console():
    """
    Console writing into an in-memory buffer, without colors.

    Read the output with ``console.file.getvalue()``.
    """
    return Console(
        file=io.StringIO(),
        width=200,
        color_system=None,
        force_terminal=False,
        highlight=False,
        soft_wrap=True,
    )


@pytest.fixture
def settings(temp_directory, monkeypatch):
    """Settings starting the session in the temporary directory."""
    monkeypatch.setenv("FILE_MANAGER_START_DIR", temp_directory)
    monkeypatch.setenv("FILE_MANAGER_CHUNK_SIZE", "7")
    return Settings()


@pytest.fixture
def dependency_container(settings, console, mock_logger):
    """
    Create a dependency container wired to the temporary directory for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(settings=settings, console=console)
    # Replace the logger with our mock
    container._logger = mock_logger
    return container

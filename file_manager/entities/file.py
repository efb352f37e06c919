"""
File domain entity.
"""

import os

from file_manager.exceptions import FileRepositoryError


class File:
    """
    Directory entry entity (file or directory) as reported by a listing.
    """

    DIRECTORY = "directory"
    FILE = "file"

    def __init__(self, path: str, is_dir: bool):
        """
        Initialize the File entity.

        Args:
            path: Path to the entry
            is_dir: Whether the entry is a directory

        Raises:
            FileRepositoryError: If path is empty
        """
        if not path or not isinstance(path, str):
            raise FileRepositoryError("Path must be a non-empty string")

        self.path = os.path.abspath(path)
        self.name = os.path.basename(self.path)
        self.is_dir = bool(is_dir)

    @property
    def kind(self) -> str:
        """Either 'directory' or 'file'."""
        return self.DIRECTORY if self.is_dir else self.FILE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, File):
            return NotImplemented
        return self.path == other.path and self.is_dir == other.is_dir

    def __str__(self) -> str:
        """String representation of the File."""
        return f"File(name='{self.name}', type='{self.kind}')"

    def __repr__(self) -> str:
        """Detailed string representation of the File."""
        return f"File(path='{self.path}', is_dir={self.is_dir})"

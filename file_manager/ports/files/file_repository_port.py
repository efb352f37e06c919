"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from file_manager.entities.file import File


class FileRepositoryPort(ABC):
    """Port interface for file repository operations.

    Every method raises FileRepositoryError on failure.
    """

    @abstractmethod
    def list_entries(self, directory: str) -> list[File]:
        """
        List all entries (files and directories) in a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            List of File entities

        Raises:
            FileRepositoryError: If listing fails
        """
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """
        Check whether a path exists and is a directory.

        Args:
            path: Absolute path to check

        Returns:
            True if the path is a directory
        """
        pass

    @abstractmethod
    def read_text(self, path: str) -> Iterator[str]:
        """
        Stream a file as decoded UTF-8 text in bounded chunks.

        Args:
            path: Absolute path of the file

        Returns:
            Iterator of text chunks

        Raises:
            FileRepositoryError: If opening or reading fails (possibly mid-iteration)
        """
        pass

    @abstractmethod
    def create_file(self, path: str) -> File:
        """
        Create a new empty file; fails if it already exists.

        Args:
            path: Absolute path of the file to create

        Returns:
            A File entity representing the created file
        """
        pass

    @abstractmethod
    def rename(self, source: str, destination: str) -> None:
        """
        Rename or move an entry.

        Args:
            source: Existing path
            destination: New path
        """
        pass

    @abstractmethod
    def copy_file(self, source: str, destination: str) -> None:
        """
        Stream-copy file content, creating or truncating the destination.

        Args:
            source: File to read
            destination: File to write
        """
        pass

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """
        Delete a file.

        Args:
            path: File to delete
        """
        pass

    @abstractmethod
    def hash_file(self, path: str) -> str:
        """
        Compute the SHA-256 digest of a file with chunked reads.

        Args:
            path: File to hash

        Returns:
            Lowercase hexadecimal digest
        """
        pass

    @abstractmethod
    def compress_file(self, source: str, destination: str) -> None:
        """
        Brotli-compress a file into another file.

        Args:
            source: File to compress
            destination: Compressed output file
        """
        pass

    @abstractmethod
    def decompress_file(self, source: str, destination: str) -> None:
        """
        Decompress a Brotli stream into another file.

        Args:
            source: Compressed input file
            destination: Decompressed output file
        """
        pass

"""
Local file system adapter implementation for file operations.
"""

import hashlib
import logging
import os
import shutil
from collections.abc import Callable, Iterator

import brotli
from typing_extensions import override

from file_manager.entities.file import File
from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort

DEFAULT_CHUNK_SIZE = 64 * 1024
DEFAULT_BROTLI_QUALITY = 11


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        brotli_quality: int = DEFAULT_BROTLI_QUALITY,
    ):
        """
        Initialize the adapter.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
            chunk_size: Bytes (or characters for text) read per streaming step
            brotli_quality: Brotli compression quality, 0..11
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._chunk_size = chunk_size
        self._brotli_quality = brotli_quality

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            FileRepositoryError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise FileRepositoryError(f"Directory does not exist: {directory}")

        if not os.path.isdir(directory):
            raise FileRepositoryError(f"Path is not a directory: {directory}")

    def _ensure_distinct(self, source: str, destination: str) -> None:
        """Refuse to write a file onto itself, which would truncate the source."""
        try:
            same = os.path.exists(destination) and os.path.samefile(source, destination)
        except OSError:
            # source is missing; opening it reports the real error
            return
        if same:
            raise FileRepositoryError(
                f"Source and destination are the same file: {source}"
            )

    def _discard(self, path: str) -> None:
        """Remove a partially written output file."""
        try:
            os.remove(path)
        except OSError as e:
            self._logger.warning(f"Could not remove partial output {path}: {e}")

    @override
    def list_entries(self, directory: str) -> list[File]:
        """
        List all entries in a directory, directories first, then by name.

        Args:
            directory: Path to the directory to list

        Returns:
            List of File entities

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            self._validate_directory(directory)

            entries: list[File] = []
            with os.scandir(directory) as it:
                for item in it:
                    try:
                        entries.append(File(item.path, item.is_dir()))
                    except OSError as e:
                        # Log the error but continue with other entries
                        self._logger.warning(f"Could not process entry {item.path}: {e}")
                        continue
            entries.sort(key=lambda f: (not f.is_dir, f.name.lower(), f.name))
            return entries

        except FileRepositoryError:
            raise
        except Exception as e:
            raise FileRepositoryError(f"Failed to list entries in {directory}: {str(e)}")

    @override
    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def read_text(self, path: str) -> Iterator[str]:
        try:
            with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
                while True:
                    chunk = f.read(self._chunk_size)
                    if not chunk:
                        break
                    yield chunk
        except OSError as e:
            raise FileRepositoryError(f"Failed to read {path}: {str(e)}")

    @override
    def create_file(self, path: str) -> File:
        try:
            with open(path, "x", encoding="utf-8"):
                pass
        except OSError as e:
            raise FileRepositoryError(f"Failed to create {path}: {str(e)}")
        return File(path, is_dir=False)

    @override
    def rename(self, source: str, destination: str) -> None:
        try:
            os.rename(source, destination)
        except OSError as e:
            raise FileRepositoryError(
                f"Failed to rename {source} to {destination}: {str(e)}"
            )

    @override
    def copy_file(self, source: str, destination: str) -> None:
        self._ensure_distinct(source, destination)
        try:
            # destination is only opened (and truncated) once the source opened
            with open(source, "rb") as src, open(destination, "wb") as dst:
                shutil.copyfileobj(src, dst, self._chunk_size)
        except OSError as e:
            raise FileRepositoryError(
                f"Failed to copy {source} to {destination}: {str(e)}"
            )

    @override
    def delete_file(self, path: str) -> None:
        try:
            os.remove(path)
        except OSError as e:
            raise FileRepositoryError(f"Failed to delete {path}: {str(e)}")

    @override
    def hash_file(self, path: str) -> str:
        digest = hashlib.sha256()
        try:
            with open(path, "rb") as f:
                while True:
                    chunk = f.read(self._chunk_size)
                    if not chunk:
                        break
                    digest.update(chunk)
        except OSError as e:
            raise FileRepositoryError(f"Failed to hash {path}: {str(e)}")
        return digest.hexdigest()

    @override
    def compress_file(self, source: str, destination: str) -> None:
        compressor = brotli.Compressor(quality=self._brotli_quality)

        def _process(chunk: bytes) -> Iterator[bytes]:
            yield compressor.process(chunk)

        self._pipe(source, destination, _process, compressor.finish, "compress")

    @override
    def decompress_file(self, source: str, destination: str) -> None:
        decompressor = brotli.Decompressor()
        limit = self._chunk_size

        def _process(chunk: bytes) -> Iterator[bytes]:
            # output is capped per call; drain until the decoder wants more input
            yield decompressor.process(chunk, output_buffer_limit=limit)
            while not decompressor.can_accept_more_data():
                yield decompressor.process(b"", output_buffer_limit=limit)

        def _finish() -> bytes:
            if not decompressor.is_finished():
                raise brotli.error("Compressed stream is truncated")
            return b""

        self._pipe(source, destination, _process, _finish, "decompress")

    def _pipe(
        self,
        source: str,
        destination: str,
        process: Callable[[bytes], Iterator[bytes]],
        finish: Callable[[], bytes],
        action: str,
    ) -> None:
        """
        Stream source through a codec into destination.

        Each input chunk is turned into one or more output pieces by
        ``process``, and every piece is written before the next is produced.
        The first error from any stage (open, read, codec, write) stops the
        pipeline; a destination this call created is then removed.
        """
        self._ensure_distinct(source, destination)
        opened_destination = False
        try:
            with open(source, "rb") as src:
                with open(destination, "wb") as dst:
                    opened_destination = True
                    while True:
                        chunk = src.read(self._chunk_size)
                        if not chunk:
                            break
                        for piece in process(chunk):
                            dst.write(piece)
                    dst.write(finish())
        except (OSError, brotli.error) as e:
            if opened_destination:
                self._discard(destination)
            raise FileRepositoryError(
                f"Failed to {action} {source} to {destination}: {str(e)}"
            )

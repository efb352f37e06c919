"""
Session entity holding the current directory of an interactive run.
"""

import os


class Session:
    """
    Mutable per-run state: the directory relative arguments are resolved against.
    """

    def __init__(self, current_dir: str):
        """
        Initialize the session.

        Args:
            current_dir: Starting directory; made absolute and normalized
        """
        self._current_dir = os.path.abspath(current_dir)

    @property
    def current_dir(self) -> str:
        return self._current_dir

    def resolve(self, path: str) -> str:
        """
        Resolve a user supplied path against the current directory.

        Absolute paths are kept as they are; '.' and '..' segments are collapsed.
        Symlinks are not resolved.
        """
        return os.path.abspath(os.path.join(self._current_dir, path))

    def is_at_root(self) -> bool:
        return os.path.dirname(self._current_dir) == self._current_dir

    def go_up(self) -> bool:
        """
        Move to the parent directory.

        Returns:
            False when already at the filesystem root, True otherwise
        """
        if self.is_at_root():
            return False
        self._current_dir = os.path.dirname(self._current_dir)
        return True

    def change_to(self, directory: str) -> None:
        """Adopt an already validated directory as the current one."""
        self._current_dir = self.resolve(directory)

    def __repr__(self) -> str:
        return f"Session(current_dir='{self._current_dir}')"

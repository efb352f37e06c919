"""
User-facing messages and the helper that prints them.
"""

from rich.console import Console

INVALID_INPUT = "Invalid input"
OPERATION_FAILED = "Operation failed"
AT_ROOT = "You are at the root directory."
FILE_CREATED = "File created"
FILE_RENAMED = "File renamed"
FILE_COPIED = "File copied"
FILE_MOVED = "File moved"
FILE_DELETED = "File deleted"
FILE_COMPRESSED = "File compressed"
FILE_DECOMPRESSED = "File decompressed"


def current_dir_message(path: str) -> str:
    return f"You are currently in {path}"


def welcome_message(username: str) -> str:
    return f"Welcome to the File Manager, {username}!"


def farewell_message(username: str) -> str:
    return f"Thank you for using File Manager, {username}, goodbye!"


def say(console: Console, text: str) -> None:
    """Print plain text; paths and names are never treated as markup."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)

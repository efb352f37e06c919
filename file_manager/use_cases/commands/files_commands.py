"""
Commands 'ls', 'cat', 'add', 'rn', 'cp', 'mv' and 'rm' mapped to the Files use cases.
"""

import logging
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text
from typing_extensions import override

from file_manager.entities.command import Command, Verb
from file_manager.entities.file import File
from file_manager.entities.session import Session
from file_manager.ports.commands.command_handler_port import CommandHandlerPort
from file_manager.use_cases.commands.messages import (
    FILE_COPIED,
    FILE_CREATED,
    FILE_DELETED,
    FILE_MOVED,
    FILE_RENAMED,
    say,
)
from file_manager.use_cases.files.copy_files import CopyFileUseCase, MoveFileUseCase
from file_manager.use_cases.files.list_files import ListFilesUseCase
from file_manager.use_cases.files.manage_files import (
    CreateFileUseCase,
    DeleteFileUseCase,
    RenameFileUseCase,
)
from file_manager.use_cases.files.read_file import ReadFileUseCase


class FilesCommandsHandler(CommandHandlerPort):
    """Handler for file listing, content and metadata commands."""

    def __init__(
        self,
        list_files_uc: ListFilesUseCase,
        read_file_uc: ReadFileUseCase,
        create_file_uc: CreateFileUseCase,
        rename_file_uc: RenameFileUseCase,
        copy_file_uc: CopyFileUseCase,
        move_file_uc: MoveFileUseCase,
        delete_file_uc: DeleteFileUseCase,
        console: Console,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the files commands handler.

        Args:
            list_files_uc: Use case for 'ls'
            read_file_uc: Use case for 'cat'
            create_file_uc: Use case for 'add'
            rename_file_uc: Use case for 'rn'
            copy_file_uc: Use case for 'cp'
            move_file_uc: Use case for 'mv'
            delete_file_uc: Use case for 'rm'
            console: Console receiving the output
            logger: Logger instance to use for logging
        """
        self._list_files_uc = list_files_uc
        self._read_file_uc = read_file_uc
        self._create_file_uc = create_file_uc
        self._rename_file_uc = rename_file_uc
        self._copy_file_uc = copy_file_uc
        self._move_file_uc = move_file_uc
        self._delete_file_uc = delete_file_uc
        self._console = console
        self._logger = logger or logging.getLogger(__name__)

    @override
    def verbs(self) -> frozenset[Verb]:
        return frozenset(
            {Verb.LS, Verb.CAT, Verb.ADD, Verb.RN, Verb.CP, Verb.MV, Verb.RM}
        )

    # ------------------------- internal helpers -------------------------
    def _render_listing(self, entries: list[File]) -> None:
        tbl = Table(box=box.SQUARE, show_lines=False)
        tbl.add_column("(index)", justify="right", style="dim")
        tbl.add_column("Name", style="cyan")
        tbl.add_column("Type")
        for idx, entry in enumerate(entries):
            tbl.add_row(str(idx), Text(entry.name), entry.kind)
        self._console.print(tbl)

    def _stream_to_console(self, path: str) -> None:
        out = self._console.file
        last = ""
        for chunk in self._read_file_uc.execute(path):
            out.write(chunk)
            last = chunk
        if last and not last.endswith("\n"):
            out.write("\n")
        out.flush()

    # ------------------------------ dispatch ------------------------------
    @override
    def dispatch(self, command: Command, session: Session) -> None:
        verb = command.verb

        if verb is Verb.LS:
            self._render_listing(self._list_files_uc.execute(session.current_dir))
            return

        if verb is Verb.CAT:
            self._stream_to_console(session.resolve(command.arg(0)))
            return

        if verb is Verb.ADD:
            self._create_file_uc.execute(session.resolve(command.arg(0)))
            say(self._console, FILE_CREATED)
            return

        if verb is Verb.RN:
            self._rename_file_uc.execute(
                session.resolve(command.arg(0)), session.resolve(command.arg(1))
            )
            say(self._console, FILE_RENAMED)
            return

        if verb is Verb.CP:
            self._copy_file_uc.execute(
                session.resolve(command.arg(0)), session.resolve(command.arg(1))
            )
            say(self._console, FILE_COPIED)
            return

        if verb is Verb.MV:
            self._move_file_uc.execute(
                session.resolve(command.arg(0)), session.resolve(command.arg(1))
            )
            say(self._console, FILE_MOVED)
            return

        if verb is Verb.RM:
            self._delete_file_uc.execute(session.resolve(command.arg(0)))
            say(self._console, FILE_DELETED)
            return

        raise ValueError(f"Unknown command: {verb.keyword}")
